"""Fallback responses for error scenarios."""


class FallbackResponses:
    """Predefined user-facing texts shown instead of raw errors."""

    RESPONSES = {
        "chat_unreachable": (
            "⚠️ Sorry, I couldn't reach the AI service. Please try again shortly."
        ),
        "assistant_unavailable": (
            "The AI assistant is not configured on this server."
        ),
        "assistant_error": (
            "The AI assistant failed to answer. Please try again."
        ),
        "internal_error": (
            "An unexpected error occurred. Please try again later."
        ),
    }

    @classmethod
    def get_response(cls, error_type: str) -> str:
        """
        Get fallback response for error type.

        Args:
            error_type: Key into RESPONSES (chat_unreachable, assistant_error, ...)

        Returns:
            Fallback response text, the internal_error text for unknown keys
        """
        return cls.RESPONSES.get(error_type, cls.RESPONSES["internal_error"])
