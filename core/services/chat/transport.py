"""HTTP transport between the chat widget and the /api/ai-chat endpoint."""
import asyncio
from typing import Any, Optional, Protocol, Union

import requests

from app.config import settings
from core.models.chat import PageContext
from core.services.errors.exceptions import NetworkError, ProtocolError
from core.utils.logger import logger


class ChatTransport(Protocol):
    """Anything that can turn a message into a reply."""

    async def send(self, message: str, page_context: Union[PageContext, str]) -> str:
        ...


class HttpChatTransport:
    """
    POSTs {"message", "page"} as JSON and returns the ``reply`` field.

    The blocking request runs in a worker thread so the caller's event loop
    keeps running. There is no retry; a failure surfaces as NetworkError or
    ProtocolError.
    """

    def __init__(
        self,
        endpoint: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[Any] = None,
    ):
        self.endpoint = endpoint or settings.AI_CHAT_URL
        self.timeout = timeout if timeout is not None else settings.CHAT_REQUEST_TIMEOUT
        # requests.Session or anything with a compatible post()
        self.session = session or requests.Session()

    async def send(self, message: str, page_context: Union[PageContext, str]) -> str:
        page = page_context.value if isinstance(page_context, PageContext) else str(page_context)
        payload = {"message": message.strip(), "page": page}
        return await asyncio.to_thread(self._post, payload)

    def _post(self, payload: dict) -> str:
        try:
            response = self.session.post(self.endpoint, json=payload, timeout=self.timeout)
        except requests.RequestException as e:
            raise NetworkError(f"Request to {self.endpoint} failed: {str(e)}") from e

        if not 200 <= response.status_code < 300:
            raise NetworkError(
                f"Server error: {response.status_code}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise ProtocolError("Response body is not JSON") from e

        reply = data.get("reply") if isinstance(data, dict) else None
        if not isinstance(reply, str):
            raise ProtocolError("Unexpected response format from AI service.")

        logger.debug(f"[Fruitie AI] Reply received ({len(reply)} chars)")
        return reply
