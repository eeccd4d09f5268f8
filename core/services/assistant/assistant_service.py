"""Assistant service generating page-aware replies with a LangChain chat model."""
from typing import Optional, Union

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_openai import AzureChatOpenAI, ChatOpenAI

from app.config import settings
from core.models.chat import PageContext
from core.services.errors.exceptions import AssistantUnavailable
from core.services.prompts.prompt_builder import PromptBuilder
from core.utils.logger import logger


def build_llm() -> Optional[BaseChatModel]:
    """Pick Azure OpenAI, then OpenAI, from configuration. None if neither is set."""
    if settings.AZURE_OPENAI_API_KEY and settings.AZURE_OPENAI_ENDPOINT:
        return AzureChatOpenAI(
            azure_deployment=settings.AZURE_OPENAI_DEPLOYMENT_NAME or "gpt-4o-mini",
            api_version=settings.AZURE_OPENAI_API_VERSION or "2024-02-01",
            azure_endpoint=settings.AZURE_OPENAI_ENDPOINT,
            api_key=settings.AZURE_OPENAI_API_KEY,  # type: ignore
            temperature=settings.LLM_TEMPERATURE,
        )
    if settings.OPENAI_API_KEY:
        return ChatOpenAI(
            model=settings.OPENAI_MODEL,
            api_key=settings.OPENAI_API_KEY,  # type: ignore
            temperature=settings.LLM_TEMPERATURE,
        )
    logger.warning("No OpenAI or Azure OpenAI credentials configured")
    return None


class AssistantService:
    """Answers one chat message at a time. No conversation memory is kept."""

    def __init__(self, llm: Optional[BaseChatModel] = None, prompt_builder: Optional[PromptBuilder] = None):
        self.llm = llm if llm is not None else build_llm()
        self.prompt_builder = prompt_builder or PromptBuilder()
        logger.info(f"Assistant service initialized (model {'available' if self.llm else 'not configured'})")

    @property
    def available(self) -> bool:
        return self.llm is not None

    async def reply(self, message: str, page: Union[PageContext, str] = PageContext.HOME) -> str:
        """
        Generate a reply for a message sent from the given page.

        Raises:
            AssistantUnavailable: no chat model is configured
        """
        if self.llm is None:
            raise AssistantUnavailable("No chat model configured")

        messages = self.prompt_builder.build_messages(message, page)
        result = await self.llm.ainvoke(messages)
        content = result.content
        if isinstance(content, list):
            # some providers return content blocks
            content = "".join(
                block.get("text", "") if isinstance(block, dict) else str(block)
                for block in content
            )
        return str(content).strip()
