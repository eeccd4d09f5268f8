"""Error handling utilities."""
from core.services.errors.exceptions import (
    ChatTransportError,
    NetworkError,
    ProtocolError,
)
from core.services.errors.fallback_responses import FallbackResponses
from core.utils.logger import logger


class ErrorHandler:
    """Centralized error logging with fallback responses."""

    @staticmethod
    def handle_transport_error(error: ChatTransportError) -> str:
        """Log a chat transport failure by kind and return the user-facing text."""
        if isinstance(error, ProtocolError):
            logger.warning(f"[Fruitie AI] Malformed reply from chat endpoint: {str(error)}")
        elif isinstance(error, NetworkError):
            status = f" (status {error.status_code})" if error.status_code else ""
            logger.error(f"[Fruitie AI] Chat endpoint unreachable{status}: {str(error)}")
        else:
            logger.error(f"[Fruitie AI] Chat transport failed: {str(error)}")
        return FallbackResponses.get_response("chat_unreachable")

    @staticmethod
    def handle_assistant_error(error: Exception, page: str) -> str:
        """Log a chat model failure and return a generic message."""
        logger.error(f"Assistant error on '{page}' page: {str(error)}", exc_info=True)
        return FallbackResponses.get_response("assistant_error")

    @staticmethod
    def handle_unexpected(error: Exception, operation: str) -> str:
        """Log an unexpected error without leaking it to the caller."""
        logger.error(f"Error during {operation}: {str(error)}", exc_info=True)
        return FallbackResponses.get_response("internal_error")
