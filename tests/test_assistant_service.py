"""Tests for the assistant service, prompt builder and AI chat endpoint."""
import asyncio

import pytest
from langchain_core.language_models.fake_chat_models import FakeListChatModel
from langchain_core.messages import HumanMessage, SystemMessage

from app.main import app
from app.routes.ai_chat import get_assistant_service
from core.models.chat import PageContext
from core.services.assistant.assistant_service import AssistantService
from core.services.errors.exceptions import AssistantUnavailable
from core.services.prompts.prompt_builder import PromptBuilder


class TestPromptBuilder:
    """Test cases for PromptBuilder."""

    def test_system_prompt_strips_frontmatter(self):
        prompt = PromptBuilder().build_system_prompt(PageContext.HOME)
        assert prompt.startswith("You are Fruitie AI")
        assert "description:" not in prompt
        assert "{page_guidance}" not in prompt

    @pytest.mark.parametrize("page, marker", [
        (PageContext.BUYER, "buyer page"),
        (PageContext.SELLER, "seller page"),
        (PageContext.HOME, "home page"),
    ])
    def test_system_prompt_is_page_aware(self, page, marker):
        assert marker in PromptBuilder().build_system_prompt(page)

    def test_build_messages(self):
        messages = PromptBuilder().build_messages("  hi  ", "seller")
        assert isinstance(messages[0], SystemMessage)
        assert isinstance(messages[1], HumanMessage)
        assert messages[1].content == "hi"


class TestAssistantService:
    """Test cases for AssistantService."""

    def test_reply_uses_model_output(self):
        service = AssistantService(llm=FakeListChatModel(responses=["  Fresh kiwis today.  "]))
        assert service.available
        reply = asyncio.run(service.reply("what's fresh?", PageContext.BUYER))
        assert reply == "Fresh kiwis today."

    def test_reply_without_model_raises(self):
        service = AssistantService(llm=None)
        service.llm = None
        with pytest.raises(AssistantUnavailable):
            asyncio.run(service.reply("hello"))


class TestAiChatEndpoint:
    """Test cases for POST /api/ai-chat."""

    def test_reply(self, client, assistant):
        response = client.post("/api/ai-chat", json={"message": "hello", "page": "seller"})
        assert response.status_code == 200
        assert response.json() == {"reply": "[seller] you said: hello"}

    def test_page_defaults_to_home(self, client, assistant):
        client.post("/api/ai-chat", json={"message": "hello"})
        assert assistant.calls == [("hello", "home")]

    def test_empty_message_rejected(self, client, assistant):
        response = client.post("/api/ai-chat", json={"message": "   ", "page": "home"})
        assert response.status_code == 400
        assert assistant.calls == []

    def test_unknown_page_rejected(self, client):
        response = client.post("/api/ai-chat", json={"message": "hi", "page": "checkout"})
        assert response.status_code == 422

    def test_model_failure_hides_internals(self, client, assistant):
        assistant.fail = True
        response = client.post("/api/ai-chat", json={"message": "hi", "page": "home"})
        assert response.status_code == 502
        assert "secret internals" not in response.text

    def test_unconfigured_model(self, client):
        unconfigured = AssistantService(llm=None)
        unconfigured.llm = None
        app.dependency_overrides[get_assistant_service] = lambda: unconfigured

        response = client.post("/api/ai-chat", json={"message": "hi", "page": "home"})
        assert response.status_code == 503

    def test_health(self, client):
        body = client.get("/api/ai-chat/health").json()
        assert body["service"] == "ai-chat"
        assert body["model_configured"] is True
