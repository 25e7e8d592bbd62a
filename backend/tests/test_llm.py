"""
Tests for the completion service wrapper.

LangChain chat models are replaced with mocks; no API is called.
"""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import asyncio

import pytest
from unittest.mock import AsyncMock, MagicMock, patch

from services.llm import (
    PLACEHOLDER_PREFIX,
    CompletionUnavailableError,
    LangChainCompletionService,
    OfflineCompletionService,
    build_completion_service,
    call_llm,
)
from services.run_service import create_run


def _fake_chat_model(content):
    llm = MagicMock()
    llm.ainvoke = AsyncMock(return_value=MagicMock(content=content))
    return llm


class TestCallLlm:
    @pytest.mark.asyncio
    async def test_returns_model_text_and_records_metric(self, services, fake_llm):
        fake_llm.responses = ["LEY_21521"]
        run = create_run("Some question here")

        result = await call_llm(services, run, "prompt text", 200)

        assert result == "LEY_21521"
        assert fake_llm.prompts == [("prompt text", 200)]
        assert run.tools["llm"].calls == 1
        assert any('[metrics] Tool "llm"' in line for line in run.logs)

    @pytest.mark.asyncio
    async def test_offline_returns_placeholder(self, offline_services):
        run = create_run("Some question here")
        prompt = "x" * 1000

        result = await call_llm(offline_services, run, prompt)

        assert result == PLACEHOLDER_PREFIX + "x" * 400 + "..."
        assert run.tools["llm"].calls == 1
        assert any("placeholder" in line for line in run.logs)

    @pytest.mark.asyncio
    async def test_other_failures_propagate(self, services, fake_llm):
        fake_llm.error = RuntimeError("rate limited")
        run = create_run("Some question here")

        with pytest.raises(RuntimeError, match="rate limited"):
            await call_llm(services, run, "prompt")
        assert run.tools["llm"].calls == 1


class TestOfflineCompletionService:
    @pytest.mark.asyncio
    async def test_always_unavailable(self):
        with pytest.raises(CompletionUnavailableError):
            await OfflineCompletionService().complete("prompt")


class TestLangChainCompletionService:
    @pytest.mark.asyncio
    async def test_sends_single_human_message(self):
        chat = _fake_chat_model("summary text")
        with patch.dict("services.llm._MODEL_MAP", {"anthropic": lambda model, max_tokens: chat}):
            result = await LangChainCompletionService(provider="anthropic").complete("hello", 50)

        assert result == "summary text"
        messages = chat.ainvoke.call_args[0][0]
        assert len(messages) == 1
        assert messages[0].content == "hello"

    @pytest.mark.asyncio
    async def test_joins_content_blocks(self):
        chat = _fake_chat_model([{"type": "text", "text": "part one "}, {"type": "text", "text": "part two"}])
        with patch.dict("services.llm._MODEL_MAP", {"openai": lambda model, max_tokens: chat}):
            result = await LangChainCompletionService(provider="openai").complete("hello")

        assert result == "part one part two"

    @pytest.mark.asyncio
    async def test_times_out(self):
        async def slow(_messages):
            await asyncio.sleep(1)

        chat = MagicMock()
        chat.ainvoke = slow
        service = LangChainCompletionService(provider="anthropic", timeout_s=0.01)
        with patch.dict("services.llm._MODEL_MAP", {"anthropic": lambda model, max_tokens: chat}):
            with pytest.raises(asyncio.TimeoutError):
                await service.complete("hello")

    def test_unknown_provider_rejected(self):
        with pytest.raises(ValueError, match="Unknown LLM provider"):
            LangChainCompletionService(provider="nope")


class TestBuildCompletionService:
    @patch.dict(os.environ, {"ANTHROPIC_API_KEY": ""}, clear=False)
    def test_offline_without_api_key(self):
        assert isinstance(build_completion_service("anthropic"), OfflineCompletionService)

    @patch.dict(os.environ, {"OPENAI_API_KEY": "test-key"}, clear=False)
    def test_langchain_with_api_key(self):
        service = build_completion_service("openai")
        assert isinstance(service, LangChainCompletionService)
        assert service.provider == "openai"

    def test_unknown_provider_rejected(self):
        with pytest.raises(ValueError):
            build_completion_service("nope")
