"""Page-aware AI chat endpoint used by the chat widget."""
from functools import lru_cache

from fastapi import APIRouter, Depends, HTTPException, status

from core.models.chat import ChatRequest, ChatResponse
from core.services.assistant.assistant_service import AssistantService
from core.services.errors.error_handler import ErrorHandler
from core.services.errors.exceptions import AssistantUnavailable
from core.services.errors.fallback_responses import FallbackResponses

router = APIRouter()


@lru_cache(maxsize=1)
def get_assistant_service() -> AssistantService:
    return AssistantService()


@router.post("", response_model=ChatResponse)
async def ai_chat(request: ChatRequest, assistant: AssistantService = Depends(get_assistant_service)):
    """
    Answer a chat widget message.

    Args:
        request: {message, page} where page is buyer, seller or home

    Returns:
        {reply}
    """
    message = request.message.strip()
    if not message:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Message must not be empty")

    try:
        reply = await assistant.reply(message, request.page)
    except AssistantUnavailable:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=FallbackResponses.get_response("assistant_unavailable"),
        )
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=ErrorHandler.handle_assistant_error(e, request.page.value),
        )
    return ChatResponse(reply=reply)


@router.get("/health")
async def ai_chat_health(assistant: AssistantService = Depends(get_assistant_service)):
    """Health check for the AI chat service."""
    return {"status": "healthy", "service": "ai-chat", "model_configured": assistant.available}
