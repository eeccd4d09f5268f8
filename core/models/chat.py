"""AI chat data models."""
import enum

from pydantic import BaseModel


class PageContext(str, enum.Enum):
    """Page the chat widget is embedded in, sent with every request."""
    BUYER = "buyer"
    SELLER = "seller"
    HOME = "home"


class ChatRequest(BaseModel):
    """AI chat request model."""
    message: str
    page: PageContext = PageContext.HOME


class ChatResponse(BaseModel):
    """AI chat response model."""
    reply: str
