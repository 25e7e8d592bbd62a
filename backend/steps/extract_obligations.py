"""
Extract Obligations step — one obligation summary per selected law.

For each law the full text is loaded and truncated, then the language
model summarizes the obligations relevant to the question. A failed,
empty, or too-short summary is replaced by the law's static template;
that fallback is per law and never fails the run. Law-text loading
failures are not caught here.
"""

from functools import partial
from typing import TYPE_CHECKING, List

from config import EXTRACTION_MAX_TOKENS, MIN_SUMMARY_CHARS
from laws.catalog import LawDoc
from laws.obligations import get_obligations_for_law
from services.llm import call_llm
from services.run_service import append_log
from services.text_processor import truncate_law_text
from state import Obligation, Run

if TYPE_CHECKING:
    from services.dependencies import Services


def build_extraction_prompt(law: LawDoc, law_text: str, template: str, question: str) -> str:
    return f"""Based on the following law text, its known compliance obligations and the user's specific question, provide a focused summary.

Law: {law.name}

Relevant law text:
{law_text}

Known obligations under {law.name}:
{template}

User's question: {question}

Provide a concise summary (3-4 sentences) highlighting the most relevant obligations for this user's situation:"""


class ExtractObligationsStep:
    name = "extract_obligations"

    async def run(self, run: Run, services: "Services") -> None:
        append_log(run, "[extract_obligations] Extracting obligations using AI...")

        if not run.selected_law_ids:
            append_log(run, "[extract_obligations] No laws selected, nothing to extract")
            run.obligations = []
            return

        log = partial(append_log, run)
        obligations: List[Obligation] = []

        for law_id in run.selected_law_ids:
            law = services.catalog.get(law_id)
            if law is None:
                append_log(run, f"[extract_obligations] Law not found for ID: {law_id}")
                continue

            law_text = await services.law_loader.load(run, law_id, log)
            truncated = truncate_law_text(law_text)
            template = get_obligations_for_law(law_id)

            append_log(
                run,
                f"[extract_obligations] Customizing obligations for {law.name} based on user question",
            )
            prompt = build_extraction_prompt(law, truncated, template, run.question)
            try:
                summary = (await call_llm(services, run, prompt, EXTRACTION_MAX_TOKENS)).strip()
            except Exception as exc:
                append_log(run, f"[extract_obligations] LLM failed ({exc}), using structured template")
                summary = ""

            if len(summary) <= MIN_SUMMARY_CHARS:
                summary = template

            obligations.append(
                Obligation(
                    id=f"{law_id}::1",
                    law_id=law_id,
                    title=f"Key obligations according to {law.name}",
                    summary=summary,
                )
            )

        run.obligations = obligations
        append_log(run, f"[extract_obligations] Generated {len(obligations)} obligations")
