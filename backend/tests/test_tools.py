"""
Tests for the auxiliary tools (law search, question analysis, ingestion).

All external calls are mocked — no real LLM or HTTP requests.
"""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import json

import httpx
import pytest
from unittest.mock import MagicMock, patch

from laws.catalog import FINTECH_LAW_ID, LawCatalog, LawDoc
from services.law_loader import law_text_key
from services.run_service import create_run
from tools import TOOL_REGISTRY, build_tools
from tools.law_ingest import extract_pdf_text, ingest
from tools.law_search import create_search_law_text_tool, find_excerpt, search_law_text
from tools.question_analysis import analyze_company_context, extract_keywords


class TestToolRegistry:
    def test_registered_tools(self):
        assert set(TOOL_REGISTRY) == {"search_law_text", "extract_keywords", "analyze_company_context"}

    def test_build_tools_declares_names_descriptions_and_args(self, services):
        run = create_run("Some question here")
        tools = build_tools(services, run)

        assert set(tools) == set(TOOL_REGISTRY)
        for name, built in tools.items():
            assert built.name == name
            assert built.description
        assert set(tools["search_law_text"].args) == {"law_id", "query"}
        assert set(tools["extract_keywords"].args) == {"question"}
        assert set(tools["analyze_company_context"].args) == {"question"}

    @pytest.mark.asyncio
    async def test_tool_invocation_records_metrics_on_run(self, services, fake_llm):
        fake_llm.responses = ["Retail | SME | Santiago"]
        run = create_run("Some question here")
        tools = build_tools(services, run)

        result = await tools["analyze_company_context"].ainvoke({"question": "Soy una pyme de retail en Santiago"})

        assert result == {"industry": "Retail", "company_type": "SME", "location": "Santiago"}
        assert run.tools["analyze_company_context"].calls == 1


class TestLawSearch:
    def test_excerpt_around_match(self):
        text = "a" * 500 + "Consent" + "b" * 500
        result = find_excerpt(text, "consent")
        assert result["found"] is True
        assert result["excerpt"] == "a" * 200 + "Consent" + "b" * 193

    def test_no_match(self):
        assert find_excerpt("some text", "missing") == {"found": False, "excerpt": ""}

    @pytest.mark.asyncio
    async def test_uncached_law_not_found(self, services):
        run = create_run("Some question here")
        result = await search_law_text(services, run, FINTECH_LAW_ID, "consent")
        assert result == {"found": False, "excerpt": ""}
        assert run.tools["search_law_text"].calls == 1

    @pytest.mark.asyncio
    async def test_searches_cached_text(self, services, store):
        await store.put(law_text_key(FINTECH_LAW_ID), "Article 12: obtain express consent.")
        run = create_run("Some question here")

        result = await search_law_text(services, run, FINTECH_LAW_ID, "EXPRESS consent")
        assert result["found"] is True
        assert "express consent" in result["excerpt"]

    @pytest.mark.asyncio
    async def test_langchain_tool_searches_cached_text(self, services, store):
        await store.put(law_text_key(FINTECH_LAW_ID), "Article 15: multi-factor authentication.")
        run = create_run("Some question here")
        search_tool = create_search_law_text_tool(services, run)

        result = await search_tool.ainvoke({"law_id": FINTECH_LAW_ID, "query": "multi-factor"})

        assert result["found"] is True
        assert run.tools["search_law_text"].calls == 1


class TestQuestionAnalysis:
    @pytest.mark.asyncio
    async def test_extract_keywords(self, services, fake_llm):
        fake_llm.responses = ["datos personales, fintech\nconsentimiento, "]
        run = create_run("¿Qué debo hacer si soy una fintech?")

        keywords = await extract_keywords(services, run, run.question)

        assert keywords == ["datos personales", "fintech", "consentimiento"]
        assert run.tools["extract_keywords"].calls == 1

    @pytest.mark.asyncio
    async def test_analyze_company_context_defaults(self, services, fake_llm):
        fake_llm.responses = ["Financial services | startup"]
        run = create_run("¿Qué debo hacer si soy una fintech?")

        context = await analyze_company_context(services, run, run.question)

        assert context == {
            "industry": "Financial services",
            "company_type": "startup",
            "location": "unknown",
        }
        assert run.tools["analyze_company_context"].calls == 1


class TestLawIngest:
    @patch("tools.law_ingest.PdfReader")
    def test_extract_pdf_text_normalises_line_endings(self, mock_reader_cls):
        page_one = MagicMock()
        page_one.extract_text.return_value = "Artículo 1\r\nTexto"
        page_two = MagicMock()
        page_two.extract_text.return_value = "   "
        mock_reader_cls.return_value.pages = [page_one, page_two]

        assert extract_pdf_text(b"%PDF") == "Artículo 1\nTexto"

    @patch("tools.law_ingest.extract_pdf_text", return_value="Texto de la ley")
    def test_ingest_writes_successful_downloads(self, _mock_extract, tmp_path):
        catalog = LawCatalog(
            [
                LawDoc(id="LEY_1", name="Law 1", url="https://laws.example/1.pdf"),
                LawDoc(id="LEY_2", name="Law 2", url="https://laws.example/2.pdf"),
            ]
        )

        def handler(request):
            if request.url.path == "/1.pdf":
                return httpx.Response(200, content=b"%PDF-1.4")
            return httpx.Response(404)

        output = tmp_path / "corpus.json"
        with httpx.Client(transport=httpx.MockTransport(handler)) as client:
            corpus = ingest(catalog=catalog, output_path=str(output), client=client)

        assert corpus == {"LEY_1": "Texto de la ley"}
        assert json.loads(output.read_text(encoding="utf-8")) == corpus
