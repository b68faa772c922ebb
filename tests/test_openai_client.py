"""Tests for the OpenAI wrapper. No network calls are made."""

from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest

from core.config import Settings
from llm import OpenAIWorkflowLLM
from registry import create_default_registries


@pytest.fixture
def settings():
    return Settings(OPENAI_API_KEY="test-key", OPENAI_MODEL="gpt-test", OPENAI_TEMPERATURE=0.1)


@pytest.fixture
def llm(settings):
    return OpenAIWorkflowLLM(settings=settings)


def _completion(content):
    message = SimpleNamespace(content=content)
    return SimpleNamespace(choices=[SimpleNamespace(message=message)])


class TestPromptBuilding:
    """Messages sent for each strategy and package policy."""

    def test_model_comes_from_settings(self, llm):
        assert llm.model == "gpt-test"

    def test_explicit_model_overrides_settings(self, settings):
        assert OpenAIWorkflowLLM(model="gpt-other", settings=settings).model == "gpt-other"

    def test_ai_strategy_messages(self, llm):
        system, user = llm._build_messages("Approve invoices", False, "ai-centric", create_default_registries())
        assert system["role"] == "system"
        assert "MUST leverage UiPath AI services" in system["content"]
        assert "then:" in system["content"] and "body:" in system["content"]
        assert user["role"] == "user"
        assert 'Process Description: "Approve invoices"' in user["content"]
        assert "Official Packages Only" in user["content"]

    def test_traditional_strategy_with_marketplace(self, llm):
        system, user = llm._build_messages("Approve invoices", True, "traditional", create_default_registries())
        assert "MUST AVOID AI services" in system["content"]
        assert "Allow Marketplace Packages" in user["content"]


class TestGenerateSolutionJson:
    """Completion call and reply handling."""

    @pytest.mark.asyncio
    async def test_returns_stripped_content(self, llm):
        llm.client.chat.completions.create = AsyncMock(return_value=_completion('  {"title": "T"}\n'))
        text = await llm.generate_solution_json("Approve invoices", False, "ai-centric", create_default_registries())

        assert text == '{"title": "T"}'
        kwargs = llm.client.chat.completions.create.await_args.kwargs
        assert kwargs["model"] == "gpt-test"
        assert kwargs["temperature"] == 0.1
        assert kwargs["response_format"] == {"type": "json_object"}
        assert len(kwargs["messages"]) == 2

    @pytest.mark.asyncio
    async def test_empty_content_becomes_empty_string(self, llm):
        llm.client.chat.completions.create = AsyncMock(return_value=_completion(None))
        text = await llm.generate_solution_json("Approve invoices", False, "traditional", create_default_registries())
        assert text == ""
