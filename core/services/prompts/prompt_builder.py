"""Prompt builder for the Fruitie assistant - page-aware system prompts."""
from pathlib import Path
from typing import List, Union

from langchain_core.messages import BaseMessage, HumanMessage, SystemMessage

from core.models.chat import PageContext
from core.utils.logger import logger


class PromptBuilder:
    """Formats the system prompt for a page and wraps the user's message."""

    def __init__(self):
        """Initialize prompt builder with prompts directory."""
        self._prompts_dir = Path(__file__).parent / "templates"

    def _load_prompt(self, filename: str) -> str:
        """Load prompt text from .promptly file, extracting content after YAML frontmatter."""
        prompt_path = self._prompts_dir / filename
        try:
            content = prompt_path.read_text(encoding="utf-8")
            # Extract content after YAML frontmatter (after ---\n---\n)
            if "---\n" in content:
                parts = content.split("---\n", 2)
                if len(parts) >= 3:
                    return parts[2].strip()
            return content.strip()
        except OSError as e:
            logger.warning(f"Failed to load prompt {filename}: {str(e)}")
            return ""

    def build_system_prompt(self, page: Union[PageContext, str]) -> str:
        """Build system prompt with the guidance for the given page."""
        page = PageContext(page)
        guidance = self._load_prompt(f"{page.value}_guidance.promptly")
        template = self._load_prompt("system_prompt.promptly")
        return template.format(page_guidance=guidance).strip()

    def build_messages(self, message: str, page: Union[PageContext, str]) -> List[BaseMessage]:
        """Build the [system, user] message pair sent to the chat model."""
        return [
            SystemMessage(content=self.build_system_prompt(page)),
            HumanMessage(content=message.strip()),
        ]
