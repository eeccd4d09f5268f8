"""Plain-text rendering of a chat session's state."""
from typing import List

from core.services.chat.session import ChatSession, ChatState, MessageRole

ROLE_LABELS = {
    MessageRole.ASSISTANT: "Fruitie AI",
    MessageRole.USER: "You",
    MessageRole.ERROR: "Error",
}


def render_lines(session: ChatSession) -> List[str]:
    """One line per message, then a status line while a reply is pending."""
    lines = [
        f"[{message.display_time}] {ROLE_LABELS[message.role]}: {message.text}"
        for message in session.messages
    ]
    if session.is_awaiting:
        lines.append("Fruitie AI is typing...")
    return lines


def render_transcript(session: ChatSession) -> str:
    if session.state == ChatState.CLOSED:
        return ""
    return "\n".join(render_lines(session))
