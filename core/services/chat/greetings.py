"""Welcome greetings and page detection for the chat widget."""
from typing import Union

from core.models.chat import PageContext

GREETINGS = {
    PageContext.BUYER: (
        "👋 Hi! I'm your Fruitie AI assistant. I can help you find the best fruits, "
        "compare seller prices, or estimate quantities. What are you looking for today?"
    ),
    PageContext.SELLER: (
        "👋 Hi! I'm your Fruitie AI assistant. I can help you price your produce, "
        "find transport options, or understand payment methods. How can I help?"
    ),
    PageContext.HOME: (
        "👋 Welcome to Fruitie! I'm your AI assistant. Ask me anything about buying "
        "or selling fresh fruit on the platform."
    ),
}


def coerce_page_context(page: Union[PageContext, str, None]) -> PageContext:
    """Map a raw tag to a PageContext, falling back to HOME."""
    if isinstance(page, PageContext):
        return page
    try:
        return PageContext((page or "").strip().lower())
    except ValueError:
        return PageContext.HOME


def get_greeting(page: Union[PageContext, str, None]) -> str:
    return GREETINGS[coerce_page_context(page)]


def detect_page_context(path: str) -> PageContext:
    """Guess the page context from a URL path."""
    path = (path or "").lower()
    if "buyer" in path:
        return PageContext.BUYER
    if "seller" in path:
        return PageContext.SELLER
    return PageContext.HOME
