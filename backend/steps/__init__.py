"""Pipeline steps for the compliance agent."""

from .select_laws import SelectLawsStep
from .extract_obligations import ExtractObligationsStep
from .draft_answer import DraftAnswerStep

__all__ = [
    "SelectLawsStep",
    "ExtractObligationsStep",
    "DraftAnswerStep",
]
