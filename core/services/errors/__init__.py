"""Error handling and fallback responses."""
from core.services.errors.error_handler import ErrorHandler
from core.services.errors.fallback_responses import FallbackResponses
from core.services.errors.exceptions import (
    FruitieError,
    ValidationError,
    DuplicateEmail,
    InvalidCredentials,
    Unauthorized,
    ChatTransportError,
    NetworkError,
    ProtocolError,
    AssistantUnavailable,
)

__all__ = [
    "ErrorHandler",
    "FallbackResponses",
    "FruitieError",
    "ValidationError",
    "DuplicateEmail",
    "InvalidCredentials",
    "Unauthorized",
    "ChatTransportError",
    "NetworkError",
    "ProtocolError",
    "AssistantUnavailable",
]
