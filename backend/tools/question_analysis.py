"""
Question analysis tools — small LLM helpers over the user's question.
"""

import re
from functools import partial
from typing import TYPE_CHECKING, Dict, List

from langchain_core.tools import StructuredTool

from services.metrics import measure_tool
from services.run_service import append_log
from state import Run

if TYPE_CHECKING:
    from services.dependencies import Services

KEYWORDS_MAX_TOKENS = 100
CONTEXT_MAX_TOKENS = 150


def parse_keywords(response: str) -> List[str]:
    return [k.strip() for k in re.split(r"[,\n]", response) if k.strip()]


def parse_company_context(response: str) -> Dict[str, str]:
    """Parse "INDUSTRY|TYPE|LOCATION"; missing or blank parts become "unknown"."""
    parts = [p.strip() for p in response.split("|")]
    parts += [""] * (3 - len(parts))
    return {
        "industry": parts[0] or "unknown",
        "company_type": parts[1] or "unknown",
        "location": parts[2] or "unknown",
    }


async def extract_keywords(services: "Services", run: Run, question: str) -> List[str]:
    """Ask the model for the key legal concepts in question."""
    prompt = "\n".join(
        [
            "Extract the most important legal keywords from the following question.",
            "Respond ONLY with the keywords separated by commas.",
            "",
            "Question:",
            question,
            "",
            "Keywords:",
        ]
    )
    log = partial(append_log, run)
    response = await measure_tool(
        run,
        "extract_keywords",
        log,
        lambda: services.llm.complete(prompt, KEYWORDS_MAX_TOKENS),
    )
    return parse_keywords(response)


async def analyze_company_context(services: "Services", run: Run, question: str) -> Dict[str, str]:
    """Ask the model for the asker's industry, company type and location."""
    log = partial(append_log, run)
    log("[analyze_company_context] Analyzing company context...")
    prompt = "\n".join(
        [
            "Analyze the following question and identify:",
            "1. Company industry",
            "2. Company type (startup, SME, large corporation, etc.)",
            "3. Location (if mentioned)",
            "",
            "Respond in format: INDUSTRY|TYPE|LOCATION",
            "",
            "Question:",
            question,
            "",
            "Analysis:",
        ]
    )
    response = await measure_tool(
        run,
        "analyze_company_context",
        log,
        lambda: services.llm.complete(prompt, CONTEXT_MAX_TOKENS),
    )
    return parse_company_context(response)


def create_extract_keywords_tool(services: "Services", run: Run) -> StructuredTool:
    """Factory that binds extract_keywords to a run as a LangChain tool."""

    async def _extract_keywords(question: str) -> List[str]:
        return await extract_keywords(services, run, question)

    return StructuredTool.from_function(
        coroutine=_extract_keywords,
        name="extract_keywords",
        description="Extracts key legal concepts from the user's question.",
    )


def create_analyze_company_context_tool(services: "Services", run: Run) -> StructuredTool:
    """Factory that binds analyze_company_context to a run as a LangChain tool."""

    async def _analyze_company_context(question: str) -> Dict[str, str]:
        return await analyze_company_context(services, run, question)

    return StructuredTool.from_function(
        coroutine=_analyze_company_context,
        name="analyze_company_context",
        description=(
            "Analyzes the company context in the question: industry, company "
            "type and location, each 'unknown' when not stated."
        ),
    )
