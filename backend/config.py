"""
Runtime configuration for the compliance agent.

All values come from environment variables and are read once at import
time. Defaults keep the service runnable offline (SQLite storage, no LLM).
"""

import os


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_list(name: str, default: tuple) -> tuple:
    raw = os.environ.get(name)
    if not raw:
        return default
    items = tuple(item.strip().lower() for item in raw.split(",") if item.strip())
    return items or default


# ---------------------------------------------------------------------------
# Storage
# ---------------------------------------------------------------------------

DATABASE_URL = os.environ.get(
    "DATABASE_URL",
    "sqlite+aiosqlite:///./compliance_agent.db",
)

# "sql" persists runs in DATABASE_URL, "memory" keeps them in-process only
STORAGE_BACKEND = os.environ.get("STORAGE_BACKEND", "sql").lower()

LAW_TEXT_PREFIX = "law_text:"

# ---------------------------------------------------------------------------
# Language model
# ---------------------------------------------------------------------------

LLM_PROVIDER = os.environ.get("LLM_PROVIDER", "anthropic").lower()
LLM_MODEL = os.environ.get("LLM_MODEL", "")
LLM_TIMEOUT_S = _env_float("LLM_TIMEOUT_S", 30.0)

DEFAULT_MAX_TOKENS = _env_int("DEFAULT_MAX_TOKENS", 1500)
SELECTION_MAX_TOKENS = _env_int("SELECTION_MAX_TOKENS", 200)
EXTRACTION_MAX_TOKENS = _env_int("EXTRACTION_MAX_TOKENS", 600)

# ---------------------------------------------------------------------------
# Law text processing
# ---------------------------------------------------------------------------

MAX_LAW_TEXT_CHARS = _env_int("MAX_LAW_TEXT_CHARS", 15000)

RELEVANT_KEYWORDS = _env_list(
    "RELEVANT_KEYWORDS",
    (
        "personal data",
        "data protection",
        "privacy",
        "personal information",
        "data processing",
        "datos personales",
        "protección de datos",
        "privacidad",
        "información personal",
        "tratamiento de datos",
    ),
)

# JSON file {lawId: text} written by tools.law_ingest
LAW_CORPUS_PATH = os.environ.get(
    "LAW_CORPUS_PATH",
    os.path.join(os.path.dirname(__file__), "laws", "ingested_law_text.json"),
)

# An LLM summary shorter than this is replaced by the static template
MIN_SUMMARY_CHARS = 100

# ---------------------------------------------------------------------------
# API
# ---------------------------------------------------------------------------

QUESTION_MIN_LENGTH = _env_int("QUESTION_MIN_LENGTH", 10)
QUESTION_MAX_LENGTH = _env_int("QUESTION_MAX_LENGTH", 2000)

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
