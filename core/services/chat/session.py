"""Client-side state machine for the Fruitie AI chat widget."""
import enum
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable, List, Optional, Union

from app.config import settings
from core.models.chat import PageContext
from core.services.chat.greetings import coerce_page_context, get_greeting
from core.services.chat.transport import ChatTransport
from core.services.errors.error_handler import ErrorHandler
from core.services.errors.exceptions import ChatTransportError
from core.services.errors.fallback_responses import FallbackResponses
from core.utils.logger import logger


class MessageRole(str, enum.Enum):
    ASSISTANT = "assistant"
    USER = "user"
    ERROR = "error"


class ChatState(str, enum.Enum):
    CLOSED = "closed"
    OPEN_IDLE = "open_idle"
    OPEN_AWAITING = "open_awaiting"


@dataclass
class ChatMessage:
    """One bubble in the chat log."""
    role: MessageRole
    text: str
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def display_time(self) -> str:
        return self.timestamp.astimezone().strftime("%H:%M")


class MessageLog:
    """Append-only message list that drops its oldest entries past max_size."""

    def __init__(self, max_size: int):
        if max_size < 1:
            raise ValueError("max_size must be at least 1")
        self.max_size = max_size
        self._messages: List[ChatMessage] = []

    def append(self, message: ChatMessage) -> None:
        self._messages.append(message)
        if len(self._messages) > self.max_size:
            self._messages = self._messages[-self.max_size:]

    @property
    def messages(self) -> List[ChatMessage]:
        return list(self._messages)

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self):
        return iter(list(self._messages))


class ChatSession:
    """
    One chat widget instance, created per page load.

    States are Closed, Open/Idle and Open/Awaiting. At most one request is in
    flight: send() while awaiting does nothing. Closing the widget does not
    cancel an in-flight request, its reply is still logged.

    ``on_change`` is called with the session after every transition so a view
    can re-render from state.
    """

    def __init__(
        self,
        transport: ChatTransport,
        page_context: Union[PageContext, str] = PageContext.HOME,
        max_history: Optional[int] = None,
        on_change: Optional[Callable[["ChatSession"], None]] = None,
    ):
        self.transport = transport
        self.page_context = coerce_page_context(page_context)
        self.log = MessageLog(
            max_history if max_history is not None else settings.CHAT_MAX_HISTORY
        )
        self.on_change = on_change
        self.input_text = ""
        self.is_open = False
        self.is_awaiting = False
        self.welcome_shown = False

    @property
    def state(self) -> ChatState:
        if not self.is_open:
            return ChatState.CLOSED
        return ChatState.OPEN_AWAITING if self.is_awaiting else ChatState.OPEN_IDLE

    @property
    def messages(self) -> List[ChatMessage]:
        return self.log.messages

    def open(self) -> None:
        if self.is_open:
            return
        self.is_open = True
        if not self.welcome_shown:
            self.welcome_shown = True
            self.log.append(ChatMessage(MessageRole.ASSISTANT, get_greeting(self.page_context)))
        self._changed()

    def close(self) -> None:
        if not self.is_open:
            return
        self.is_open = False
        self._changed()

    def toggle(self) -> None:
        if self.is_open:
            self.close()
        else:
            self.open()

    def press_key(self, key: str) -> None:
        """Keyboard handling: Escape closes an open widget."""
        if key == "Escape" and self.is_open:
            self.close()

    def set_input(self, text: str) -> None:
        self.input_text = text

    async def send(self, text: Optional[str] = None) -> bool:
        """
        Send the input buffer (or ``text``) to the assistant.

        Returns:
            True if a request was dispatched, False if the call was a no-op
            (empty text, closed widget, or a request already in flight)
        """
        if text is None:
            text = self.input_text
        text = (text or "").strip()
        if not text or not self.is_open or self.is_awaiting:
            return False

        self.log.append(ChatMessage(MessageRole.USER, text))
        self.input_text = ""
        self.is_awaiting = True
        self._changed()

        try:
            reply = await self.transport.send(text, self.page_context)
            self.log.append(ChatMessage(MessageRole.ASSISTANT, reply))
        except ChatTransportError as e:
            fallback = ErrorHandler.handle_transport_error(e)
            self.log.append(ChatMessage(MessageRole.ERROR, fallback))
        except Exception as e:
            ErrorHandler.handle_unexpected(e, "chat send")
            fallback = FallbackResponses.get_response("chat_unreachable")
            self.log.append(ChatMessage(MessageRole.ERROR, fallback))
        finally:
            self.is_awaiting = False
            self._changed()
        return True

    def _changed(self) -> None:
        if self.on_change is None:
            return
        try:
            self.on_change(self)
        except Exception as e:
            # render errors never propagate into state transitions
            logger.error(f"[Fruitie AI] Render callback failed: {str(e)}")
