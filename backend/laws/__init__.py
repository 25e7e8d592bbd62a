"""Static law data: the catalog, obligation templates, and sample texts."""

from .catalog import (
    CONSUMER_LAW_ID,
    CORPORATE_LIABILITY_LAW_ID,
    DEFAULT_CATALOG,
    FINTECH_LAW_ID,
    LawCatalog,
    LawDoc,
    LawNotFoundError,
)
from .obligations import get_obligations_for_law
from .samples import LAW_TEXT_SAMPLES

__all__ = [
    "CONSUMER_LAW_ID",
    "CORPORATE_LIABILITY_LAW_ID",
    "DEFAULT_CATALOG",
    "FINTECH_LAW_ID",
    "LawCatalog",
    "LawDoc",
    "LawNotFoundError",
    "get_obligations_for_law",
    "LAW_TEXT_SAMPLES",
]
