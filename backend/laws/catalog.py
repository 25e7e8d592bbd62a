"""
Law Catalog — the fixed, read-only set of supported statutes.

The catalog is an immutable table passed to the components that need it
(see services.dependencies.Services), so tests can swap in a fake one.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Iterator, List, Optional

FINTECH_LAW_ID = "LEY_21521"
CONSUMER_LAW_ID = "LEY_19496"
CORPORATE_LIABILITY_LAW_ID = "LEY_20393"

_PDF_BASE_URL = "https://pub-0e0e9ca0d502436bbf25ba03d6046c82.r2.dev"


class LawNotFoundError(LookupError):
    """Raised when a law identifier is not in the catalog."""


@dataclass(frozen=True)
class LawDoc:
    id: str
    name: str
    url: str


class LawCatalog:
    """Immutable mapping of law id to LawDoc, iterated in declaration order."""

    def __init__(self, laws: Iterable[LawDoc]) -> None:
        self._laws = MappingProxyType({law.id: law for law in laws})

    def get(self, law_id: str) -> Optional[LawDoc]:
        return self._laws.get(law_id)

    def require(self, law_id: str) -> LawDoc:
        law = self._laws.get(law_id)
        if law is None:
            raise LawNotFoundError(f"Law '{law_id}' is not in the catalog.")
        return law

    def ids(self) -> List[str]:
        return list(self._laws.keys())

    def __contains__(self, law_id: object) -> bool:
        return law_id in self._laws

    def __iter__(self) -> Iterator[LawDoc]:
        return iter(self._laws.values())

    def __len__(self) -> int:
        return len(self._laws)


DEFAULT_CATALOG = LawCatalog(
    [
        LawDoc(
            id="LEY_19886",
            name="Law 19.886 (Public Procurement)",
            url=f"{_PDF_BASE_URL}/Ley-19886.pdf",
        ),
        LawDoc(
            id=CONSUMER_LAW_ID,
            name="Law 19.496 (Consumer Protection)",
            url=f"{_PDF_BASE_URL}/Ley-19496.pdf",
        ),
        LawDoc(
            id=CORPORATE_LIABILITY_LAW_ID,
            name="Law 20.393 (Corporate Criminal Liability)",
            url=f"{_PDF_BASE_URL}/Ley-20393.pdf",
        ),
        LawDoc(
            id="LEY_19913",
            name="Law 19.913 (Financial Intelligence Unit; AML)",
            url=f"{_PDF_BASE_URL}/Ley-19913.pdf",
        ),
        LawDoc(
            id=FINTECH_LAW_ID,
            name="Law 21.521 (Fintech)",
            url=f"{_PDF_BASE_URL}/Ley-21521.pdf",
        ),
    ]
)
