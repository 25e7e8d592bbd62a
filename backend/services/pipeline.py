"""
Step contract and the default pipeline.

A step reads and writes the run and may call the services it is given.
It must not change the run's status or lifecycle timestamps; it reports
failure only by raising, and the executor turns that into a FAILED run.
"""

from typing import TYPE_CHECKING, List, Protocol

from state import Run

if TYPE_CHECKING:
    from services.dependencies import Services


class Step(Protocol):
    name: str

    async def run(self, run: Run, services: "Services") -> None:
        ...


def build_pipeline() -> List[Step]:
    """Return the default steps in execution order."""
    from steps import DraftAnswerStep, ExtractObligationsStep, SelectLawsStep

    return [SelectLawsStep(), ExtractObligationsStep(), DraftAnswerStep()]
