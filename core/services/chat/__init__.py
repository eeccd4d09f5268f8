"""AI chat widget services."""
from core.services.chat.greetings import detect_page_context, get_greeting
from core.services.chat.render import render_transcript
from core.services.chat.session import (
    ChatMessage,
    ChatSession,
    ChatState,
    MessageLog,
    MessageRole,
)
from core.services.chat.transport import ChatTransport, HttpChatTransport

__all__ = [
    "ChatMessage",
    "ChatSession",
    "ChatState",
    "ChatTransport",
    "HttpChatTransport",
    "MessageLog",
    "MessageRole",
    "detect_page_context",
    "get_greeting",
    "render_transcript",
]
