"""
REST API routes for the compliance agent.

Endpoints:
    GET  /api/health              — Health check
    POST /api/question            — Submit a question; starts a run in the background
    GET  /api/run/{run_id}        — Full run state, including logs
    GET  /api/answer/{run_id}     — Simplified answer view with laws and metrics
"""

import logging
from typing import Dict, List, Optional

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, Request
from pydantic import BaseModel, Field

from config import QUESTION_MAX_LENGTH, QUESTION_MIN_LENGTH
from services.dependencies import Services
from services.executor import execute_run
from services.run_service import create_run, load_run, save_run
from state import CamelModel, Obligation, RunStatus, ToolMetric

logger = logging.getLogger(__name__)

router = APIRouter()


def get_services(request: Request) -> Services:
    """Resolve the service bundle built at startup (overridden in tests)."""
    return request.app.state.services


# ---------------------------------------------------------------------------
# Request / Response Models
# ---------------------------------------------------------------------------


class QuestionRequest(BaseModel):
    question: str = Field(
        ...,
        min_length=QUESTION_MIN_LENGTH,
        max_length=QUESTION_MAX_LENGTH,
        description="The compliance question to answer.",
        examples=["¿Qué debo hacer si soy una fintech?"],
    )


class QuestionResponse(CamelModel):
    message: str
    run_id: str
    status: RunStatus


class LawResponse(BaseModel):
    id: str
    name: str
    url: str


class AnswerMetrics(CamelModel):
    total_ms: Optional[int] = None
    tools: Dict[str, ToolMetric] = Field(default_factory=dict)


class AnswerResponse(CamelModel):
    run_id: str
    status: RunStatus
    question: str
    answer: Optional[str] = None
    obligations: List[Obligation] = Field(default_factory=list)
    laws: List[Optional[LawResponse]] = Field(default_factory=list)
    metrics: AnswerMetrics


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@router.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "ok", "service": "Compliance Agent API"}


@router.post("/question", response_model=QuestionResponse, status_code=202)
async def submit_question(
    request: QuestionRequest,
    background_tasks: BackgroundTasks,
    services: Services = Depends(get_services),
):
    """
    Create a run for the question and execute it in the background.

    Poll GET /api/run/{runId} or GET /api/answer/{runId} for progress.
    """
    run = create_run(request.question)
    await save_run(services.store, run)

    background_tasks.add_task(_execute_run_task, services, run.id)
    logger.info("Created run %s", run.id)

    return QuestionResponse(
        message="Run created and agent started",
        run_id=run.id,
        status=run.status,
    )


@router.get("/run/{run_id}")
async def get_run(run_id: str, services: Services = Depends(get_services)):
    """Return the full stored state of a run."""
    run = await load_run(services.store, run_id)
    if run is None:
        raise HTTPException(status_code=404, detail=f"Run '{run_id}' not found.")
    return run.model_dump(mode="json", by_alias=True, exclude_none=True)


@router.get("/answer/{run_id}", response_model=AnswerResponse)
async def get_answer(run_id: str, services: Services = Depends(get_services)):
    """Return the answer view of a run. Law ids missing from the catalog map to null."""
    run = await load_run(services.store, run_id)
    if run is None:
        raise HTTPException(status_code=404, detail=f"Run '{run_id}' not found.")

    laws: List[Optional[LawResponse]] = []
    for law_id in run.selected_law_ids or []:
        law = services.catalog.get(law_id)
        laws.append(LawResponse(id=law.id, name=law.name, url=law.url) if law else None)

    return AnswerResponse(
        run_id=run.id,
        status=run.status,
        question=run.question,
        answer=run.draft_answer,
        obligations=run.obligations or [],
        laws=laws,
        metrics=AnswerMetrics(total_ms=run.total_ms, tools=run.tools),
    )


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

async def _execute_run_task(services: Services, run_id: str) -> None:
    """
    Background task that executes a run.

    The run record already holds the outcome, so a failure is only logged
    here and never propagates into the server.
    """
    try:
        await execute_run(services, run_id)
    except Exception:  # noqa: BLE001
        logger.exception("Run %s failed", run_id)
