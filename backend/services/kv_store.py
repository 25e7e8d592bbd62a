"""
Key-value persistence for runs and cached law texts.

Two implementations share the KeyValueStore protocol:
    SqlKeyValueStore      — durable, backed by the async SQLAlchemy engine
    InMemoryKeyValueStore — process-local dict, used by tests and
                            STORAGE_BACKEND=memory
"""

import threading
from datetime import datetime, timezone
from typing import Dict, List, Optional, Protocol

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert as postgresql_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from models.kv_entry import KVEntry

# Dialects with INSERT ... ON CONFLICT DO UPDATE
_UPSERT_INSERTS = {
    "sqlite": sqlite_insert,
    "postgresql": postgresql_insert,
}


class KeyValueStore(Protocol):
    async def get(self, key: str) -> Optional[str]:
        ...

    async def put(self, key: str, value: str) -> None:
        ...

    async def list_keys(self, prefix: str = "") -> List[str]:
        ...


class SqlKeyValueStore:
    """Stores every value as one row in kv_entries. Each call uses its own session."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def get(self, key: str) -> Optional[str]:
        async with self._session_factory() as session:
            entry = await session.get(KVEntry, key)
            return entry.value if entry is not None else None

    async def put(self, key: str, value: str) -> None:
        async with self._session_factory() as session:
            dialect = session.get_bind().dialect.name
            insert = _UPSERT_INSERTS.get(dialect)
            if insert is None:
                raise ValueError(f"SqlKeyValueStore does not support the '{dialect}' dialect.")

            stmt = insert(KVEntry).values(
                key=key,
                value=value,
                updated_at=datetime.now(timezone.utc),
            )
            # Insert-or-update in one statement
            stmt = stmt.on_conflict_do_update(
                index_elements=[KVEntry.key],
                set_={"value": stmt.excluded.value, "updated_at": stmt.excluded.updated_at},
            )
            await session.execute(stmt)
            await session.commit()

    async def list_keys(self, prefix: str = "") -> List[str]:
        stmt = select(KVEntry.key).order_by(KVEntry.key)
        if prefix:
            stmt = stmt.where(KVEntry.key.startswith(prefix, autoescape=True))
        async with self._session_factory() as session:
            result = await session.execute(stmt)
            return list(result.scalars().all())


class InMemoryKeyValueStore:
    """Thread-safe in-memory store."""

    def __init__(self) -> None:
        self._store: Dict[str, str] = {}
        self._lock = threading.Lock()

    async def get(self, key: str) -> Optional[str]:
        with self._lock:
            return self._store.get(key)

    async def put(self, key: str, value: str) -> None:
        with self._lock:
            self._store[key] = value

    async def list_keys(self, prefix: str = "") -> List[str]:
        with self._lock:
            return sorted(k for k in self._store if k.startswith(prefix))
