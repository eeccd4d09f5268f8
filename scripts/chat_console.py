"""Drive the AI chat widget from a terminal against a running server."""
import argparse
import asyncio
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from app.config import settings
from core.services.chat.greetings import detect_page_context
from core.services.chat.render import render_lines
from core.services.chat.session import ChatSession
from core.services.chat.transport import HttpChatTransport


class ConsoleView:
    """Prints only the messages added since the last render."""

    def __init__(self):
        self.last_printed = None

    def __call__(self, session: ChatSession) -> None:
        messages = session.messages
        start = 0
        for index, message in enumerate(messages):
            if message is self.last_printed:
                start = index + 1
        lines = render_lines(session)
        for line in lines[start:len(messages)]:
            print(line)
        if messages:
            self.last_printed = messages[-1]
        if session.is_awaiting:
            print(lines[-1])


async def run(endpoint: str, page: str) -> None:
    session = ChatSession(
        HttpChatTransport(endpoint=endpoint),
        page_context=detect_page_context(page),
        on_change=ConsoleView(),
    )
    session.open()
    while session.is_open:
        try:
            text = await asyncio.to_thread(input, "> ")
        except EOFError:
            break
        if text.strip() in ("/quit", "/exit"):
            session.press_key("Escape")
            break
        session.set_input(text)
        await session.send()


def main():
    parser = argparse.ArgumentParser(
        description="Chat with the Fruitie AI assistant from the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Chat as if on the buyer page
  python chat_console.py --page /buyer/index.html

  # Use another server
  python chat_console.py --endpoint http://example.com/api/ai-chat
        """
    )
    parser.add_argument("--endpoint", default=settings.AI_CHAT_URL, help="AI chat endpoint URL")
    parser.add_argument("--page", default="/", help="Page path used to pick the page context")
    args = parser.parse_args()

    try:
        asyncio.run(run(args.endpoint, args.page))
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
