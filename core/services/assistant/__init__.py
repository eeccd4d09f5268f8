"""Server-side AI assistant."""
from core.services.assistant.assistant_service import AssistantService, build_llm

__all__ = ["AssistantService", "build_llm"]
