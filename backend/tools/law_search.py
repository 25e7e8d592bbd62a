"""
Law Search Tool — finds a phrase inside a cached law text.

Only texts already cached by the law loader are searched; nothing is
fetched here.
"""

from functools import partial
from typing import TYPE_CHECKING, Dict, Union

from langchain_core.tools import StructuredTool

from services.law_loader import law_text_key
from services.metrics import measure_tool
from services.run_service import append_log
from state import Run

if TYPE_CHECKING:
    from services.dependencies import Services

EXCERPT_RADIUS = 200


def find_excerpt(text: str, query: str, radius: int = EXCERPT_RADIUS) -> Dict[str, Union[bool, str]]:
    """Case-insensitive substring search returning up to radius chars either side."""
    match_index = text.lower().find(query.lower())
    if not query or match_index == -1:
        return {"found": False, "excerpt": ""}
    start = max(0, match_index - radius)
    end = min(len(text), match_index + radius)
    return {"found": True, "excerpt": text[start:end]}


async def search_law_text(
    services: "Services",
    run: Run,
    law_id: str,
    query: str,
) -> Dict[str, Union[bool, str]]:
    """
    Search the cached text of law_id for query.

    Returns:
        {"found": bool, "excerpt": str}; not found when the law text has
        not been cached yet.
    """
    log = partial(append_log, run)
    log(f"[search_law_text] Searching in {law_id} for: {query[:50]}...")

    async def _search() -> Dict[str, Union[bool, str]]:
        law_text = await services.store.get(law_text_key(law_id))
        if not law_text:
            return {"found": False, "excerpt": ""}
        return find_excerpt(law_text, query)

    return await measure_tool(run, "search_law_text", log, _search)


def create_search_law_text_tool(services: "Services", run: Run) -> StructuredTool:
    """Factory that binds search_law_text to a run as a LangChain tool."""

    async def _search_law_text(law_id: str, query: str) -> Dict[str, Union[bool, str]]:
        return await search_law_text(services, run, law_id, query)

    return StructuredTool.from_function(
        coroutine=_search_law_text,
        name="search_law_text",
        description=(
            "Searches within a law document for relevant content. "
            "Takes a law id (e.g. LEY_21521) and a query; returns whether the "
            "query was found and an excerpt around the first match."
        ),
    )
