"""
Select Laws step — chooses the statutes that apply to the question.

The language model picks ids from the catalog. If it names no valid id
(or fails), a keyword match against the question decides instead.
"""

import re
from typing import TYPE_CHECKING, List

from config import SELECTION_MAX_TOKENS
from laws.catalog import (
    CONSUMER_LAW_ID,
    CORPORATE_LIABILITY_LAW_ID,
    FINTECH_LAW_ID,
    LawCatalog,
    LawDoc,
)
from services.llm import call_llm
from services.run_service import append_log
from state import Run

if TYPE_CHECKING:
    from services.dependencies import Services

_ID_SEPARATORS = re.compile(r"[,\s]+")

# (terms, law id) in the order selections are added
_KEYWORD_RULES = [
    (("fintec", "fintech"), FINTECH_LAW_ID),
    (("consumidor", "consumer"), CONSUMER_LAW_ID),
    (
        (
            "personas jurídicas",
            "persona jurídica",
            "legal entities",
            "responsabilidad penal",
            "criminal liability",
        ),
        CORPORATE_LIABILITY_LAW_ID,
    ),
]


def parse_law_ids(response: str, catalog: LawCatalog) -> List[str]:
    """Split a model response into catalog ids, dropping unknowns and repeats."""
    seen: List[str] = []
    for token in _ID_SEPARATORS.split(response):
        token = token.strip()
        if token in catalog and token not in seen:
            seen.append(token)
    return seen


def select_laws_by_keywords(question: str, catalog: LawCatalog) -> List[LawDoc]:
    """Keyword fallback. Defaults to the consumer protection law when nothing matches."""
    question_lower = question.lower()
    selected: List[LawDoc] = []
    for terms, law_id in _KEYWORD_RULES:
        law = catalog.get(law_id)
        if law is None or law in selected:
            continue
        if any(term in question_lower for term in terms):
            selected.append(law)

    if not selected:
        default_law = catalog.get(CONSUMER_LAW_ID)
        if default_law is not None:
            selected.append(default_law)
    return selected


def build_selection_prompt(question: str, catalog: LawCatalog) -> str:
    laws_list = "\n".join(f"- {law.id}: {law.name}" for law in catalog)
    return "\n".join(
        [
            "You are an expert legal assistant specializing in Chilean laws.",
            "Given the following user question, select the most relevant laws from the list.",
            "Respond ONLY with the law IDs separated by commas (for example LEY_XXXXX,LEY_YYYYY).",
            "Do not add explanations, only the IDs.",
            "",
            "Available laws:",
            laws_list,
            "",
            "User question:",
            question,
            "",
            "Relevant law IDs (comma-separated):",
        ]
    )


class SelectLawsStep:
    name = "select_laws"

    async def run(self, run: Run, services: "Services") -> None:
        catalog = services.catalog
        append_log(run, "[select_laws] Selecting relevant laws using LLM...")

        prompt = build_selection_prompt(run.question, catalog)
        try:
            response = await call_llm(services, run, prompt, SELECTION_MAX_TOKENS)
        except Exception as exc:
            append_log(run, f"[select_laws] LLM failed ({exc}), using keyword selection")
            response = ""
        else:
            append_log(run, f"[select_laws] LLM response: {response}")

        law_ids = parse_law_ids(response, catalog)
        if law_ids:
            laws = [catalog.require(law_id) for law_id in law_ids]
        else:
            append_log(run, "[select_laws] No valid law ids in response, using keyword selection")
            laws = select_laws_by_keywords(run.question, catalog)

        run.selected_law_ids = [law.id for law in laws]
        run.selected_laws = [law.name for law in laws]
        append_log(run, f"[select_laws] Selected laws: {', '.join(run.selected_laws)}")
