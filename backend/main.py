"""
Compliance Agent — FastAPI application entrypoint.

Start the server:
    uvicorn main:app --reload --port 8000

API Overview:
    POST   /api/question          — Submit a question, returns 202 with a runId
    GET    /api/run/{run_id}      — Poll full run state and logs
    GET    /api/answer/{run_id}   — Simplified answer view
    GET    /api/runs              — List stored runs (debugging)
    GET    /api/health            — Health check
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.routes import router
from api.run_history_routes import run_history_router
from config import LOG_LEVEL, STORAGE_BACKEND
from database import close_db, init_db
from services.dependencies import build_services

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: startup and shutdown logic."""
    logger.info("Compliance Agent API starting up...")
    if STORAGE_BACKEND == "sql":
        await init_db()
        logger.info("Database initialized.")
    app.state.services = build_services()
    yield
    if STORAGE_BACKEND == "sql":
        await close_db()
    logger.info("Compliance Agent API shutting down...")


app = FastAPI(
    title="Compliance Agent API",
    description=(
        "Answers legal-compliance questions by selecting applicable Chilean "
        "laws, extracting obligations with a language model and drafting an "
        "answer. Runs execute in the background and are polled by id."
    ),
    version="0.1.0",
    lifespan=lifespan,
)

# CORS — allow all origins in development; tighten in production
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Mount REST routes under /api prefix
app.include_router(router, prefix="/api")
app.include_router(run_history_router, prefix="/api")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
