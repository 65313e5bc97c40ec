"""Evidence source tests — Tavily and DuckDuckGo mapping via httpx.MockTransport."""

import asyncio
import json

import httpx
import pytest

from brand_vetting.errors import EvidenceSourceUnavailable
from brand_vetting.services.evidence_sources import (
    DuckDuckGoEvidenceSource,
    StaticEvidenceSource,
    TavilyEvidenceSource,
    get_evidence_source,
)


def _run_search(source_factory, handler, query="\"Patagonia\" ESG rating"):
    async def _go():
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            return await source_factory(client).search(query)

    return asyncio.run(_go())


class TestTavily:
    def test_maps_results(self):
        captured = {}

        def handler(request):
            captured["body"] = json.loads(request.content)
            captured["url"] = str(request.url)
            return httpx.Response(
                200,
                json={
                    "results": [
                        {"title": "Patagonia ESG", "content": "Strong governance", "url": "https://esg.example.com/p"},
                        {"title": None, "content": "No title", "url": "https://other.example.com"},
                    ]
                },
            )

        results = _run_search(lambda c: TavilyEvidenceSource(api_key="tv-key", client=c), handler)

        assert captured["url"] == "https://api.tavily.com/search"
        assert captured["body"]["api_key"] == "tv-key"
        assert captured["body"]["query"] == "\"Patagonia\" ESG rating"
        assert results == [
            {"title": "Patagonia ESG", "snippet": "Strong governance", "link": "https://esg.example.com/p"},
            {"title": "", "snippet": "No title", "link": "https://other.example.com"},
        ]

    def test_missing_key_is_unavailable(self, monkeypatch):
        monkeypatch.delenv("TAVILY_API_KEY", raising=False)

        def handler(request):
            raise AssertionError("no request expected without a key")

        with pytest.raises(EvidenceSourceUnavailable) as exc_info:
            _run_search(lambda c: TavilyEvidenceSource(client=c), handler)
        assert exc_info.value.retryable is False

    def test_reads_key_from_env(self, monkeypatch):
        monkeypatch.setenv("TAVILY_API_KEY", "env-key")
        seen = {}

        def handler(request):
            seen["key"] = json.loads(request.content)["api_key"]
            return httpx.Response(200, json={"results": []})

        assert _run_search(lambda c: TavilyEvidenceSource(client=c), handler) == []
        assert seen["key"] == "env-key"

    @pytest.mark.parametrize("status,retryable", [(429, True), (503, True), (401, False), (400, False)])
    def test_http_errors(self, status, retryable):
        def handler(request):
            return httpx.Response(status, json={"detail": "nope"})

        with pytest.raises(EvidenceSourceUnavailable) as exc_info:
            _run_search(lambda c: TavilyEvidenceSource(api_key="k", client=c), handler)
        assert exc_info.value.retryable is retryable

    def test_transport_error_is_retryable(self):
        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        with pytest.raises(EvidenceSourceUnavailable) as exc_info:
            _run_search(lambda c: TavilyEvidenceSource(api_key="k", client=c), handler)
        assert exc_info.value.retryable is True

    def test_invalid_json(self):
        def handler(request):
            return httpx.Response(200, content=b"<html>")

        with pytest.raises(EvidenceSourceUnavailable):
            _run_search(lambda c: TavilyEvidenceSource(api_key="k", client=c), handler)


class TestDuckDuckGo:
    def test_maps_abstract_and_related_topics(self):
        def handler(request):
            assert request.url.params["format"] == "json"
            return httpx.Response(
                200,
                json={
                    "Heading": "Patagonia, Inc.",
                    "Abstract": "Patagonia is an American outdoor clothing company.",
                    "AbstractURL": "https://en.wikipedia.org/wiki/Patagonia,_Inc.",
                    "RelatedTopics": [
                        {"Text": "Yvon Chouinard - founder of Patagonia", "FirstURL": "https://duckduckgo.com/Yvon"},
                        {"Name": "Category group", "Topics": []},
                        {"Text": "B Lab - certifier", "FirstURL": "https://duckduckgo.com/B_Lab"},
                        {"Text": "1% for the Planet", "FirstURL": "https://duckduckgo.com/1pct"},
                        {"Text": "Fourth topic", "FirstURL": "https://duckduckgo.com/4"},
                    ],
                },
            )

        results = _run_search(lambda c: DuckDuckGoEvidenceSource(client=c), handler)

        assert results[0] == {
            "title": "Patagonia, Inc.",
            "snippet": "Patagonia is an American outdoor clothing company.",
            "link": "https://en.wikipedia.org/wiki/Patagonia,_Inc.",
        }
        # Only the first 3 related topics are considered; grouped topics are skipped
        assert [r["title"] for r in results[1:]] == ["Yvon Chouinard", "B Lab"]

    def test_no_abstract_no_topics(self):
        def handler(request):
            return httpx.Response(200, json={"Abstract": "", "RelatedTopics": []})

        assert _run_search(lambda c: DuckDuckGoEvidenceSource(client=c), handler) == []


class TestStaticAndFactory:
    def test_static_records_calls(self):
        source = StaticEvidenceSource(results={"q1": [{"title": "a"}]}, default=[{"title": "b"}])
        assert asyncio.run(source.search("q1")) == [{"title": "a"}]
        assert asyncio.run(source.search("q2")) == [{"title": "b"}]
        assert source.calls == ["q1", "q2"]

    def test_factory_selects_provider(self, monkeypatch):
        monkeypatch.setenv("EVIDENCE_PROVIDER", "duckduckgo")
        assert isinstance(get_evidence_source(), DuckDuckGoEvidenceSource)
        assert isinstance(get_evidence_source("tavily"), TavilyEvidenceSource)

    def test_factory_rejects_unknown_provider(self):
        with pytest.raises(ValueError):
            get_evidence_source("bing")
