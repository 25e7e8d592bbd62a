"""
REST API routes for run history.

Endpoints:
    GET  /api/runs   — List stored runs (debugging aid)
"""

from datetime import datetime
from typing import List

from fastapi import APIRouter, Depends

from api.routes import get_services
from services.dependencies import Services
from services.run_service import list_runs
from state import CamelModel, RunStatus


run_history_router = APIRouter()


# ---------------------------------------------------------------------------
# Response Models
# ---------------------------------------------------------------------------

class RunSummaryResponse(CamelModel):
    id: str
    question: str
    status: RunStatus
    created_at: datetime


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@run_history_router.get("/runs", response_model=List[RunSummaryResponse])
async def list_all_runs(services: Services = Depends(get_services)):
    """List stored runs, most recent first."""
    runs = await list_runs(services.store)
    return [
        RunSummaryResponse(
            id=run.id,
            question=run.question,
            status=run.status,
            created_at=run.created_at,
        )
        for run in runs
    ]
