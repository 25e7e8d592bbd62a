"""
Services — the explicit dependency bundle handed to the executor and steps.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from config import LAW_CORPUS_PATH, STORAGE_BACKEND
from laws.catalog import DEFAULT_CATALOG, LawCatalog
from laws.samples import LAW_TEXT_SAMPLES
from services.kv_store import InMemoryKeyValueStore, KeyValueStore, SqlKeyValueStore
from services.law_loader import LawTextLoader, load_corpus
from services.llm import CompletionService, build_completion_service

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Services:
    store: KeyValueStore
    llm: CompletionService
    law_loader: LawTextLoader
    catalog: LawCatalog


def build_store(backend: str = STORAGE_BACKEND) -> KeyValueStore:
    if backend == "memory":
        return InMemoryKeyValueStore()
    if backend == "sql":
        from database import async_session

        return SqlKeyValueStore(async_session)
    raise ValueError(f"Unknown STORAGE_BACKEND '{backend}'. Use 'sql' or 'memory'.")


def build_services(
    store: Optional[KeyValueStore] = None,
    llm: Optional[CompletionService] = None,
    catalog: LawCatalog = DEFAULT_CATALOG,
    corpus_path: str = LAW_CORPUS_PATH,
) -> Services:
    """Assemble the service bundle from configuration, with optional overrides."""
    store = store if store is not None else build_store()
    llm = llm if llm is not None else build_completion_service()
    loader = LawTextLoader(
        store=store,
        catalog=catalog,
        corpus=load_corpus(corpus_path),
        samples=LAW_TEXT_SAMPLES,
    )
    logger.info(
        "Services ready: store=%s, llm=%s, laws=%d",
        type(store).__name__,
        type(llm).__name__,
        len(catalog),
    )
    return Services(store=store, llm=llm, law_loader=loader, catalog=catalog)
