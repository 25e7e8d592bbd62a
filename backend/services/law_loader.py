"""
Law-text loader.

Resolves a law id to its full text, preferring in order:
    1. the cached copy under "law_text:<lawId>" in the key-value store
    2. the ingested corpus written by tools.law_ingest
    3. the curated sample text
    4. a one-line "not available" notice with the law's URL
Whatever is chosen is written back to the cache.
"""

import json
import logging
import os
from functools import partial
from typing import Dict, Mapping

from config import LAW_CORPUS_PATH, LAW_TEXT_PREFIX
from laws.catalog import LawCatalog
from services.kv_store import KeyValueStore
from services.metrics import LogSink, measure_tool
from state import Run

logger = logging.getLogger(__name__)


def law_text_key(law_id: str) -> str:
    return f"{LAW_TEXT_PREFIX}{law_id}"


def load_corpus(path: str = LAW_CORPUS_PATH) -> Dict[str, str]:
    """Read the {lawId: text} JSON corpus. A missing file is an empty corpus."""
    if not os.path.exists(path):
        logger.info("No ingested law corpus at %s; using sample texts.", path)
        return {}
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Law corpus at {path} must be a JSON object.")
    return {str(k): str(v) for k, v in data.items() if v}


class LawTextLoader:
    """Loads law texts for the pipeline, caching them in the run store."""

    def __init__(
        self,
        store: KeyValueStore,
        catalog: LawCatalog,
        corpus: Mapping[str, str],
        samples: Mapping[str, str],
    ) -> None:
        self.store = store
        self.catalog = catalog
        self.corpus = corpus
        self.samples = samples

    async def load(self, run: Run, law_id: str, log: LogSink) -> str:
        """
        Return the text of law_id, recording the call under "loadLawText".

        Raises:
            LawNotFoundError: if law_id is not in the catalog.
        """
        return await measure_tool(
            run, "loadLawText", log, partial(self._resolve, law_id, log)
        )

    async def _resolve(self, law_id: str, log: LogSink) -> str:
        law = self.catalog.require(law_id)
        cache_key = law_text_key(law_id)

        cached = await self.store.get(cache_key)
        if cached:
            log(f"[loadLawText] Loaded from cache: {law_id}")
            return cached

        real_text = self.corpus.get(law_id)
        if real_text:
            log(f"[loadLawText] Using ingested text for {law_id} ({len(real_text)} chars)")
            await self.store.put(cache_key, real_text)
            return real_text

        sample = (self.samples.get(law_id) or "").strip()
        text = sample or f"Text not available for {law.name}. URL: {law.url}"
        log(f"[loadLawText] Using fallback sample for {law_id}")
        await self.store.put(cache_key, text)
        return text
