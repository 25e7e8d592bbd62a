"""
Shared fixtures: in-memory and SQLite-file stores, a scripted completion
service, and service bundles wired from them. No real LLM or network calls.
"""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from laws.catalog import DEFAULT_CATALOG
from laws.samples import LAW_TEXT_SAMPLES
from models.kv_entry import Base
from services.dependencies import Services
from services.kv_store import InMemoryKeyValueStore, SqlKeyValueStore
from services.law_loader import LawTextLoader
from services.llm import OfflineCompletionService


class FakeCompletionService:
    """Returns scripted responses in order, or raises `error` if set."""

    def __init__(self) -> None:
        self.responses = []
        self.error = None
        self.prompts = []

    async def complete(self, prompt: str, max_tokens: int = 1500) -> str:
        self.prompts.append((prompt, max_tokens))
        if self.error is not None:
            raise self.error
        if self.responses:
            return self.responses.pop(0)
        return ""


def _make_services(store, llm, corpus=None, catalog=DEFAULT_CATALOG) -> Services:
    loader = LawTextLoader(
        store=store,
        catalog=catalog,
        corpus=corpus or {},
        samples=LAW_TEXT_SAMPLES,
    )
    return Services(store=store, llm=llm, law_loader=loader, catalog=catalog)


@pytest.fixture
def store():
    return InMemoryKeyValueStore()


@pytest.fixture
def fake_llm():
    return FakeCompletionService()


@pytest.fixture
def services(store, fake_llm):
    """Services backed by the scripted completion service."""
    return _make_services(store, fake_llm)


@pytest.fixture
def offline_services(store):
    """Services with no language model configured."""
    return _make_services(store, OfflineCompletionService())


@pytest_asyncio.fixture
async def file_sql_store(tmp_path):
    """SQL store on a SQLite file, so concurrent sessions use separate connections."""
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'kv.db'}",
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield SqlKeyValueStore(async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False))
    await engine.dispose()


@pytest.fixture
def sql_offline_services(file_sql_store):
    """Offline services persisting to the SQLite file store."""
    return _make_services(file_sql_store, OfflineCompletionService())
