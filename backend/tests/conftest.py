"""Shared fixtures — evidence result sets and a no-delay environment."""

import os
import sys

# Ensure the backend package is importable
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from brand_vetting.errors import EvidenceSourceUnavailable
from brand_vetting.services.evidence_sources import EvidenceSource, StaticEvidenceSource
from brand_vetting.services.query_builder import build_evidence_queries


# Certified, no negatives, 5 distinct hosts, 12 sustainability-term hits
PATAGONIA_RESULTS = [
    {
        "title": "Patagonia - Certified B Corporation Leader",
        "snippet": "Patagonia achieved B Corporation certification in 2012 as an outdoor apparel company.",
        "link": "https://www.bcorporation.net/patagonia",
    },
    {
        "title": "Patagonia sustainability history",
        "snippet": "Patagonia pioneered corporate environmental responsibility with its 1% for the Planet pledge.",
        "link": "https://www.theguardian.com/patagonia-history",
    },
    {
        "title": "Patagonia supply chain",
        "snippet": "The company publishes transparent supply chain reporting and invests in renewable energy.",
        "link": "https://www.reuters.com/patagonia-supply-chain",
    },
    {
        "title": "Patagonia ESG profile",
        "snippet": "Patagonia is known for strong environmental governance and climate commitments.",
        "link": "https://www.sustainalytics.com/patagonia",
    },
    {
        "title": "Patagonia brand overview",
        "snippet": "Patagonia is a California clothing brand focused on eco and green carbon reduction.",
        "link": "https://en.wikipedia.org/wiki/Patagonia_(clothing)",
    },
]

EXXON_RESULTS = [
    {
        "title": "ExxonMobil B Corp status",
        "snippet": "ExxonMobil is not a certified B Corporation. The oil and gas company has no such certification.",
        "link": "https://www.bcorporation.net/exxonmobil",
    },
    {
        "title": "ExxonMobil environmental record",
        "snippet": "ExxonMobil faces ongoing scrutiny regarding climate change response and environmental impact.",
        "link": "https://www.reuters.com/exxonmobil-climate",
    },
    {
        "title": "ExxonMobil greenwashing",
        "snippet": "ExxonMobil has faced multiple allegations of greenwashing from researchers.",
        "link": "https://www.theguardian.com/exxonmobil-greenwashing",
    },
]

OBSCURE_RESULTS = [
    {
        "title": "",
        "snippet": "ObscureLocalCraftCo sells nice things ok",
        "link": "https://example.org/page",
    },
]


class FailingEvidenceSource(EvidenceSource):
    """Raises EvidenceSourceUnavailable for every query and counts calls."""

    name = "failing"

    def __init__(self, retryable: bool = False):
        self.retryable = retryable
        self.calls = []

    async def search(self, query):
        self.calls.append(query)
        raise EvidenceSourceUnavailable("connection refused", retryable=self.retryable)


@pytest.fixture(autouse=True)
def no_query_delay(monkeypatch):
    """Keep sequential evidence queries fast in tests."""
    monkeypatch.setenv("EVIDENCE_QUERY_DELAY", "0")
    monkeypatch.delenv("EVIDENCE_CONCURRENT", raising=False)
    monkeypatch.delenv("BRAND_VETTING_LEXICON_PATH", raising=False)


def source_for(brand_name, results):
    """Static source serving *results* for the brand's first query only."""
    first_query = build_evidence_queries(brand_name)[0]
    return StaticEvidenceSource(results={first_query: results})


@pytest.fixture
def patagonia_source():
    return source_for("Patagonia", PATAGONIA_RESULTS)


@pytest.fixture
def exxon_source():
    return source_for("ExxonMobil", EXXON_RESULTS)


@pytest.fixture
def obscure_source():
    return source_for("ObscureLocalCraftCo", OBSCURE_RESULTS)
