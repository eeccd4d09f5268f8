"""Domain exceptions raised by the auth and chat services."""
from typing import Optional


class FruitieError(Exception):
    """Base class for all domain errors."""


class ValidationError(FruitieError):
    """Missing or malformed input, reported against a single field."""

    def __init__(self, field: str, message: str):
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message

    def to_detail(self) -> dict:
        return {"field": self.field, "message": self.message}


class DuplicateEmail(FruitieError):
    """A user with this email is already registered."""

    def __init__(self, email: str):
        super().__init__(f"Email already registered: {email}")
        self.email = email


class InvalidCredentials(FruitieError):
    """Login failed. Deliberately silent about which part was wrong."""

    def __init__(self):
        super().__init__("Invalid credentials")


class Unauthorized(FruitieError):
    """Token missing, malformed, tampered with or expired."""

    def __init__(self, reason: Optional[str] = None):
        super().__init__("Could not validate credentials")
        self.reason = reason


class ChatTransportError(FruitieError):
    """Base class for failures talking to the AI chat endpoint."""


class NetworkError(ChatTransportError):
    """Connection, timeout or non-2xx status from the chat endpoint."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ProtocolError(ChatTransportError):
    """The chat endpoint answered but the body was not {"reply": <text>}."""


class AssistantUnavailable(FruitieError):
    """No chat model is configured on the server."""
