"""API tests — /brand-vetting success and error envelopes, health endpoints."""

import pytest
from fastapi.testclient import TestClient

from brand_vetting.main import app
from brand_vetting.pipeline.http_client import RetryPolicy
from brand_vetting.routers.vetting import evidence_source_dependency, retry_policy_dependency
from brand_vetting.services.evidence_sources import StaticEvidenceSource

from conftest import FailingEvidenceSource

client = TestClient(app)


@pytest.fixture(autouse=True)
def clear_overrides():
    app.dependency_overrides[retry_policy_dependency] = lambda: RetryPolicy()
    yield
    app.dependency_overrides.clear()


def use_source(source):
    app.dependency_overrides[evidence_source_dependency] = lambda: source
    return source


# ===================================================================== #
#  Success                                                               #
# ===================================================================== #

class TestVetBrand:
    def test_success_envelope_is_camel_case(self, patagonia_source):
        use_source(patagonia_source)
        response = client.post(
            "/brand-vetting",
            json={"brandName": "Patagonia", "brandUrl": "https://www.patagonia.com"},
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert set(data) == {
            "brandName", "brandUrl", "authenticityScore", "tier", "tierDescription",
            "breakdown", "findings", "dataSources", "lastUpdated", "analysisMetrics",
        }
        assert data["brandName"] == "Patagonia"
        assert data["brandUrl"] == "https://www.patagonia.com"
        assert data["tier"] == "Green"
        assert data["authenticityScore"] >= 65
        assert set(data["breakdown"]) == {
            "corporateData", "thirdPartyRatings", "publicSentiment", "greenwashingPenalty",
        }
        assert set(data["findings"]) == {
            "greenwashingFlags", "discrepancies", "certifications", "transparencyInsights",
        }
        assert data["findings"]["certifications"] == ["B Corporation Certified"]
        assert set(data["analysisMetrics"]) == {"totalDataPoints", "confidenceLevel", "analysisDepth"}

    def test_blank_brand_url_becomes_null(self, exxon_source):
        use_source(exxon_source)
        response = client.post("/brand-vetting", json={"brandName": "ExxonMobil", "brandUrl": "   "})

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["brandUrl"] is None
        assert data["tier"] == "Red"
        assert len(data["findings"]["greenwashingFlags"]) >= 2


# ===================================================================== #
#  Errors                                                                #
# ===================================================================== #

class TestErrors:
    def test_fictitious_name_is_400(self):
        source = use_source(StaticEvidenceSource())
        response = client.post("/brand-vetting", json={"brandName": "xyz123"})

        assert response.status_code == 400
        error = response.json()["error"]
        assert error["code"] == "BRAND_NOT_FOUND"
        assert "fictitious" in error["message"]
        assert error["details"] == {"reason": "fictitious"}
        assert error["timestamp"]
        assert source.calls == []

    @pytest.mark.parametrize(
        "brand_name,reason",
        [("xyz123", "fictitious"), (" a ", "too short"), ("12345", "no letters")],
    )
    def test_rejections_use_only_documented_codes(self, brand_name, reason):
        use_source(StaticEvidenceSource())
        response = client.post("/brand-vetting", json={"brandName": brand_name})

        assert response.status_code == 400
        error = response.json()["error"]
        assert error["code"] in ("BRAND_NOT_FOUND", "ANALYSIS_FAILED")
        assert error["details"]["reason"] == reason

    def test_unknown_brand_is_404_with_details(self, obscure_source):
        use_source(obscure_source)
        response = client.post("/brand-vetting", json={"brandName": "ObscureLocalCraftCo"})

        assert response.status_code == 404
        error = response.json()["error"]
        assert error["code"] == "BRAND_NOT_FOUND"
        assert error["details"] == {"searchResults": 1, "contentLength": 41, "sources": 1}

    def test_source_outage_is_500_without_internals(self):
        use_source(FailingEvidenceSource())
        response = client.post("/brand-vetting", json={"brandName": "Patagonia"})

        assert response.status_code == 500
        error = response.json()["error"]
        assert error["code"] == "ANALYSIS_FAILED"
        assert "connection refused" not in error["message"]
        assert "details" not in error

    def test_missing_brand_name_is_422(self):
        use_source(StaticEvidenceSource())
        response = client.post("/brand-vetting", json={"brandUrl": "https://x.example.com"})
        assert response.status_code == 422


# ===================================================================== #
#  Health                                                                #
# ===================================================================== #

class TestHealth:
    def test_router_health(self):
        response = client.get("/brand-vetting/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "service": "brand-vetting"}

    def test_global_health(self):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_root_lists_endpoints(self):
        response = client.get("/")
        assert response.status_code == 200
        assert "vet" in response.json()["endpoints"]
