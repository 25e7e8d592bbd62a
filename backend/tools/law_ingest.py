"""
Law ingestion — builds the corpus of real law texts from the catalog PDFs.

Downloads every catalog PDF, extracts its text with pypdf, and writes a
JSON object {lawId: text} that services.law_loader reads at startup.

Usage:
    python -m tools.law_ingest [--output PATH] [--law LEY_21521 ...]
"""

import argparse
import io
import json
import logging
import os
from typing import Dict, Iterable, Optional

import httpx
from pypdf import PdfReader

from config import LAW_CORPUS_PATH
from laws.catalog import DEFAULT_CATALOG, LawCatalog, LawDoc

logger = logging.getLogger(__name__)

DOWNLOAD_TIMEOUT_S = 60.0


def extract_pdf_text(data: bytes) -> str:
    """Concatenate the text of every page, with line endings normalised to \\n."""
    reader = PdfReader(io.BytesIO(data))
    pages = []
    for page in reader.pages:
        text = page.extract_text()
        if text and text.strip():
            pages.append(text)
    return "\n".join(pages).replace("\r", "").strip()


def fetch_law_text(client: httpx.Client, law: LawDoc) -> Optional[str]:
    """Download and extract one law. Returns None when the download fails."""
    try:
        response = client.get(law.url)
        response.raise_for_status()
    except httpx.HTTPError as exc:
        logger.error("Error fetching %s: %s", law.url, exc)
        return None
    text = extract_pdf_text(response.content)
    logger.info("Extracted %d chars for %s", len(text), law.id)
    return text


def ingest(
    catalog: LawCatalog = DEFAULT_CATALOG,
    output_path: str = LAW_CORPUS_PATH,
    law_ids: Optional[Iterable[str]] = None,
    client: Optional[httpx.Client] = None,
) -> Dict[str, str]:
    """Download the selected laws (all by default) and write the corpus file."""
    wanted = list(law_ids) if law_ids else catalog.ids()
    laws = [catalog.require(law_id) for law_id in wanted]

    owns_client = client is None
    if client is None:
        client = httpx.Client(timeout=DOWNLOAD_TIMEOUT_S, follow_redirects=True)

    corpus: Dict[str, str] = {}
    try:
        for law in laws:
            text = fetch_law_text(client, law)
            if text:
                corpus[law.id] = text
    finally:
        if owns_client:
            client.close()

    directory = os.path.dirname(output_path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(corpus, f, ensure_ascii=False, indent=2)

    logger.info("Wrote %d of %d laws to %s", len(corpus), len(laws), output_path)
    return corpus


def main() -> None:
    arg_parser = argparse.ArgumentParser(description="Ingest law PDFs into the text corpus")
    arg_parser.add_argument(
        "--output",
        default=LAW_CORPUS_PATH,
        help="Path of the JSON corpus to write",
    )
    arg_parser.add_argument(
        "--law",
        action="append",
        dest="law_ids",
        help="Law id to ingest (repeatable); defaults to the whole catalog",
    )
    args = arg_parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    ingest(output_path=args.output, law_ids=args.law_ids)


if __name__ == "__main__":
    main()
