"""Auxiliary tools for the compliance agent."""

from typing import TYPE_CHECKING, Dict

from langchain_core.tools import BaseTool

from state import Run

from .law_search import create_search_law_text_tool, search_law_text
from .question_analysis import (
    analyze_company_context,
    create_analyze_company_context_tool,
    create_extract_keywords_tool,
    extract_keywords,
)

if TYPE_CHECKING:
    from services.dependencies import Services

# Tool name -> factory taking (services, run)
TOOL_REGISTRY = {
    "search_law_text": create_search_law_text_tool,
    "extract_keywords": create_extract_keywords_tool,
    "analyze_company_context": create_analyze_company_context_tool,
}


def build_tools(services: "Services", run: Run) -> Dict[str, BaseTool]:
    """Instantiate every registered tool for one run."""
    return {name: factory(services, run) for name, factory in TOOL_REGISTRY.items()}


__all__ = [
    "TOOL_REGISTRY",
    "build_tools",
    "search_law_text",
    "extract_keywords",
    "analyze_company_context",
    "create_search_law_text_tool",
    "create_extract_keywords_tool",
    "create_analyze_company_context_tool",
]
