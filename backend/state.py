"""
Run — the central data structure shared by the executor and every pipeline step.

A run is created once per submitted question and carries the whole
progress of the pipeline: lifecycle status, timestamped log lines, the
selected laws, extracted obligations, the drafted answer and per-tool
metrics. It is persisted as JSON using the camelCase field names of the
public API.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class RunStatus(str, Enum):
    CREATED = "created"
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"


TERMINAL_STATUSES = frozenset({RunStatus.COMPLETED, RunStatus.FAILED})

# Allowed lifecycle moves; terminal statuses have no outgoing edges
_TRANSITIONS = {
    RunStatus.CREATED: {RunStatus.RUNNING},
    RunStatus.RUNNING: {RunStatus.COMPLETED, RunStatus.FAILED},
    RunStatus.COMPLETED: set(),
    RunStatus.FAILED: set(),
}


class InvalidTransitionError(ValueError):
    """Raised when a run is asked to move backwards or out of a terminal status."""


class CamelModel(BaseModel):
    """Base for models whose JSON form uses camelCase field names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ToolMetric(CamelModel):
    calls: int = 0
    total_ms: int = 0


class Obligation(CamelModel):
    id: str
    law_id: str
    title: str
    summary: str


class Run(CamelModel):
    """
    Persisted state of one pipeline execution.

    Fields:
        id:               Opaque identifier, also the storage key. Never changes.
        question:         The user's original question. Never changes.
        status:           Lifecycle status, see advance_status().
        logs:             Append-only "[timestamp] message" lines.
        selected_law_ids: Law identifiers chosen by the select_laws step.
        selected_laws:    Display names, parallel to selected_law_ids.
        obligations:      One entry per resolved law, in selected_law_ids order.
        draft_answer:     Final text produced by the draft_answer step.
        tools:            Tool name -> accumulated call count and duration.
        total_ms:         Wall-clock duration, set on a terminal transition.
    """

    id: str
    question: str
    status: RunStatus = RunStatus.CREATED
    created_at: datetime
    updated_at: datetime
    started_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    error: Optional[str] = None
    logs: List[str] = Field(default_factory=list)

    selected_law_ids: Optional[List[str]] = None
    selected_laws: Optional[List[str]] = None
    obligations: Optional[List[Obligation]] = None
    draft_answer: Optional[str] = None

    tools: Dict[str, ToolMetric] = Field(default_factory=dict)
    total_ms: Optional[int] = None

    def to_json(self) -> str:
        """Serialize to the stored/API JSON shape (camelCase, absent fields omitted)."""
        return self.model_dump_json(by_alias=True, exclude_none=True)

    @classmethod
    def from_json(cls, data: str) -> "Run":
        return cls.model_validate_json(data)

    @property
    def is_terminal(self) -> bool:
        return self.status in TERMINAL_STATUSES


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def advance_status(run: Run, new_status: RunStatus) -> None:
    """
    Move a run to new_status, enforcing CREATED → RUNNING → COMPLETED | FAILED.

    Raises:
        InvalidTransitionError: for any other move, including re-entering
                                the current status.
    """
    if new_status not in _TRANSITIONS[run.status]:
        raise InvalidTransitionError(
            f"Run {run.id} cannot move from '{run.status.value}' to '{new_status.value}'."
        )
    run.status = new_status
