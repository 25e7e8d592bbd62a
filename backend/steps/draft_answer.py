"""Draft Answer step — composes the final answer text. No LLM call."""

from typing import TYPE_CHECKING

from services.run_service import append_log
from state import Run

if TYPE_CHECKING:
    from services.dependencies import Services

DISCLAIMER = "Note: This response does not constitute legal advice and is generated by an AI agent."
NO_LAWS_TEXT = "no laws selected"
NO_OBLIGATIONS_TEXT = (
    "No specific obligations detected (or relevant information could not be extracted)."
)


def compose_answer(run: Run) -> str:
    laws_text = "; ".join(run.selected_laws) if run.selected_laws else NO_LAWS_TEXT

    if run.obligations:
        obligations_text = "\n\n".join(
            f"- ({o.law_id}) {o.title}:\n  {o.summary}" for o in run.obligations
        )
    else:
        obligations_text = NO_OBLIGATIONS_TEXT

    return "\n".join(
        [
            "User question:",
            run.question,
            "",
            "Laws considered by the agent:",
            laws_text,
            "",
            "Relevant obligations identified:",
            obligations_text,
            "",
            DISCLAIMER,
        ]
    )


class DraftAnswerStep:
    name = "draft_answer"

    async def run(self, run: Run, services: "Services") -> None:
        append_log(run, "[draft_answer] Generating final response based on laws and obligations...")
        run.draft_answer = compose_answer(run)
        append_log(run, "[draft_answer] Final response generated")
