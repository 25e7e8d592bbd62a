"""
Run Service — create, persist, and load runs in the key-value store.

Runs are stored as camelCase JSON under their own id. The executor is the
only writer for a given run, so save_run() is a plain last-writer-wins
overwrite with no merge or version check.
"""

import uuid
from typing import List, Optional

from pydantic import ValidationError

from config import LAW_TEXT_PREFIX
from services.kv_store import KeyValueStore
from state import Run, utc_now


class RunDecodeError(Exception):
    """Raised when a stored run value cannot be decoded."""


def create_run(question: str) -> Run:
    """Build a new run in the CREATED status. Nothing is persisted."""
    now = utc_now()
    return Run(
        id=str(uuid.uuid4()),
        question=question,
        created_at=now,
        updated_at=now,
    )


async def load_run(store: KeyValueStore, run_id: str) -> Optional[Run]:
    """Return the run stored under run_id, or None if there is none."""
    raw = await store.get(run_id)
    if raw is None:
        return None
    try:
        return Run.from_json(raw)
    except ValidationError as exc:
        raise RunDecodeError(f"Stored run '{run_id}' could not be decoded: {exc}") from exc


async def save_run(store: KeyValueStore, run: Run) -> None:
    """Refresh updated_at and overwrite the stored copy of the run."""
    run.updated_at = utc_now()
    await store.put(run.id, run.to_json())


def append_log(run: Run, message: str) -> None:
    """Append a timestamped line to run.logs. Callers persist with save_run()."""
    run.logs.append(f"[{utc_now().isoformat()}] {message}")


async def list_runs(store: KeyValueStore) -> List[Run]:
    """List every stored run, most recent first. Debug only."""
    runs: List[Run] = []
    for key in await store.list_keys():
        if key.startswith(LAW_TEXT_PREFIX):
            continue
        run = await load_run(store, key)
        if run is not None:
            runs.append(run)
    runs.sort(key=lambda r: r.created_at, reverse=True)
    return runs
