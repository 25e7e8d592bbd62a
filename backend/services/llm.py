"""
Text-completion service used by the pipeline steps.

The real implementation wraps a LangChain chat model (Anthropic or OpenAI,
chosen by LLM_PROVIDER). Without an API key the offline service is used;
call_llm() then substitutes a deterministic placeholder so the pipeline
still runs end to end.
"""

import asyncio
import logging
import os
from functools import partial
from typing import TYPE_CHECKING, Any, Protocol

from langchain_anthropic import ChatAnthropic
from langchain_core.messages import HumanMessage
from langchain_openai import ChatOpenAI

from config import DEFAULT_MAX_TOKENS, LLM_MODEL, LLM_PROVIDER, LLM_TIMEOUT_S
from services.metrics import measure_tool
from services.run_service import append_log
from state import Run

if TYPE_CHECKING:
    from services.dependencies import Services

logger = logging.getLogger(__name__)

PLACEHOLDER_PREFIX = "Dummy LLM response based on prompt:\n---\n"
PLACEHOLDER_PROMPT_CHARS = 400


class CompletionUnavailableError(Exception):
    """Raised when no language model is configured or reachable."""


class CompletionService(Protocol):
    async def complete(self, prompt: str, max_tokens: int = DEFAULT_MAX_TOKENS) -> str:
        ...


# ---------------------------------------------------------------------------
# LLM factory — maps LLM_PROVIDER to a LangChain chat model
# ---------------------------------------------------------------------------

_MODEL_MAP = {
    "anthropic": lambda model, max_tokens: ChatAnthropic(
        model=model or "claude-3-5-sonnet-20241022",
        api_key=os.environ.get("ANTHROPIC_API_KEY"),
        temperature=0,
        max_tokens=max_tokens,
    ),
    "openai": lambda model, max_tokens: ChatOpenAI(
        model=model or "gpt-4o-mini",
        api_key=os.environ.get("OPENAI_API_KEY"),
        temperature=0,
        max_tokens=max_tokens,
    ),
}

_API_KEY_ENV = {
    "anthropic": "ANTHROPIC_API_KEY",
    "openai": "OPENAI_API_KEY",
}


class LangChainCompletionService:
    """Completion service backed by a LangChain chat model."""

    def __init__(
        self,
        provider: str = LLM_PROVIDER,
        model: str = LLM_MODEL,
        timeout_s: float = LLM_TIMEOUT_S,
    ) -> None:
        if provider not in _MODEL_MAP:
            raise ValueError(
                f"Unknown LLM provider '{provider}'. "
                f"Supported providers: {list(_MODEL_MAP.keys())}"
            )
        self.provider = provider
        self.model = model
        self.timeout_s = timeout_s

    def _get_llm(self, max_tokens: int) -> Any:
        return _MODEL_MAP[self.provider](self.model, max_tokens)

    async def complete(self, prompt: str, max_tokens: int = DEFAULT_MAX_TOKENS) -> str:
        llm = self._get_llm(max_tokens)
        response = await asyncio.wait_for(
            llm.ainvoke([HumanMessage(content=prompt)]),
            timeout=self.timeout_s,
        )
        content = response.content
        if isinstance(content, list):
            # Anthropic may return a list of content blocks
            content = "".join(
                block.get("text", "") if isinstance(block, dict) else str(block)
                for block in content
            )
        return str(content)


class OfflineCompletionService:
    """Stand-in used when no API key is configured."""

    async def complete(self, prompt: str, max_tokens: int = DEFAULT_MAX_TOKENS) -> str:
        raise CompletionUnavailableError("No language model configured.")


def build_completion_service(provider: str = LLM_PROVIDER) -> CompletionService:
    """Return the LangChain service if the provider's API key is set, else the offline one."""
    key_env = _API_KEY_ENV.get(provider)
    if key_env is None:
        raise ValueError(
            f"Unknown LLM provider '{provider}'. "
            f"Supported providers: {list(_API_KEY_ENV.keys())}"
        )
    if not os.environ.get(key_env):
        logger.warning("%s is not set; using offline completion placeholders.", key_env)
        return OfflineCompletionService()
    return LangChainCompletionService(provider=provider)


def placeholder_response(prompt: str) -> str:
    return PLACEHOLDER_PREFIX + prompt[:PLACEHOLDER_PROMPT_CHARS] + "..."


async def call_llm(
    services: "Services",
    run: Run,
    prompt: str,
    max_tokens: int = DEFAULT_MAX_TOKENS,
) -> str:
    """
    Complete prompt for a run, recording the call under the "llm" tool metric.

    Returns the placeholder text when the service reports it is unavailable.
    Any other failure propagates to the calling step.
    """
    log = partial(append_log, run)
    try:
        return await measure_tool(
            run, "llm", log, lambda: services.llm.complete(prompt, max_tokens)
        )
    except CompletionUnavailableError:
        append_log(run, "[llm] No language model available, using placeholder response")
        return placeholder_response(prompt)
