"""
Run Executor — drives one run through its lifecycle.

    CREATED → RUNNING → (each pipeline step, in order) → COMPLETED
                                                      ↘ FAILED

The run is persisted after every transition and on both sides of every
step, so pollers always see the latest progress. This function is the
single place where a step failure is turned into a FAILED run; the
failure is then re-raised so the task runner can log it.
"""

import logging
import time
from typing import List, Optional

from services.dependencies import Services
from services.pipeline import Step, build_pipeline
from services.run_service import append_log, load_run, save_run
from state import RunStatus, advance_status, utc_now

logger = logging.getLogger(__name__)


def _error_message(exc: BaseException) -> str:
    return str(exc) or exc.__class__.__name__


async def execute_run(
    services: Services,
    run_id: str,
    pipeline: Optional[List[Step]] = None,
) -> None:
    """
    Execute the pipeline for the stored run run_id.

    An unknown run_id, or a run that is no longer CREATED, is a no-op.

    Raises:
        Exception: whatever a step raised, after the run was saved as FAILED.
    """
    run = await load_run(services.store, run_id)
    if run is None:
        logger.warning("Run %s not found; nothing to execute.", run_id)
        return
    if run.status != RunStatus.CREATED:
        logger.warning(
            "Run %s is already '%s'; skipping execution.", run_id, run.status.value
        )
        return

    steps = pipeline if pipeline is not None else build_pipeline()
    start = time.monotonic()

    try:
        advance_status(run, RunStatus.RUNNING)
        run.started_at = utc_now()
        append_log(run, "Agent execution started")
        await save_run(services.store, run)
        logger.info("Run %s started (%d steps).", run_id, len(steps))

        for step in steps:
            append_log(run, f"[pipeline] Starting step: {step.name}")
            await save_run(services.store, run)

            await step.run(run, services)

            append_log(run, f"[pipeline] Completed step: {step.name}")
            await save_run(services.store, run)

        advance_status(run, RunStatus.COMPLETED)
        run.completed_at = utc_now()
        run.total_ms = int((time.monotonic() - start) * 1000)
        append_log(run, f"Agent completed successfully in {run.total_ms}ms")
        await save_run(services.store, run)
        logger.info("Run %s completed in %dms.", run_id, run.total_ms)

    except Exception as exc:
        if run.is_terminal:
            # Saving the COMPLETED state itself failed; nothing left to convert
            raise
        advance_status(run, RunStatus.FAILED)
        run.error = _error_message(exc)
        run.total_ms = int((time.monotonic() - start) * 1000)
        append_log(run, f"Agent failed: {run.error}")
        await save_run(services.store, run)
        logger.error("Run %s failed after %dms: %s", run_id, run.total_ms, run.error)
        raise
