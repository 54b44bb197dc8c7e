from __future__ import annotations

import pytest
from httpx import ASGITransport, AsyncClient

from tierwise.apps.api.main import create_app


def _analysis_body(**overrides) -> dict:
    body = {
        "organization": {
            "name": "Acme Health",
            "industry": "Healthcare",
            "workforce_size": 500,
            "employee_percent": 100,
            "contractor_percent": 0,
            "vendor_percent": 0,
            "compliance_frameworks": ["HIPAA"],
        },
        "scenario": {
            "managed_percent": 100,
            "unmanaged_percent": 0,
            "byod_percent": 0,
            "work_model": "office",
        },
        "app_ids": [],
        "apps": [
            {
                "id": "intranet",
                "name": "Intranet",
                "category": "Productivity",
                "data_classification": "internal",
            }
        ],
    }
    body.update(overrides)
    return body


def _client() -> AsyncClient:
    transport = ASGITransport(app=create_app())
    return AsyncClient(transport=transport, base_url="http://test")


@pytest.mark.asyncio
async def test_health_envelope() -> None:
    async with _client() as client:
        response = await client.get("/v1/health", headers={"X-Request-Id": "req-123"})
    assert response.status_code == 200
    payload = response.json()
    assert payload["data"]["status"] == "ok"
    assert payload["meta"] == {"request_id": "req-123", "api_version": "v1"}
    assert response.headers["X-Request-Id"] == "req-123"


@pytest.mark.asyncio
async def test_catalog_listing_and_filter() -> None:
    async with _client() as client:
        everything = await client.get("/v1/catalog/apps")
        crm = await client.get("/v1/catalog/apps", params={"category": "CRM"})
    assert everything.status_code == 200
    assert len(everything.json()["data"]["items"]) == 65
    items = crm.json()["data"]["items"]
    assert items and all(item["category"] == "CRM" for item in items)


@pytest.mark.asyncio
async def test_catalog_unknown_app_is_404() -> None:
    async with _client() as client:
        response = await client.get("/v1/catalog/apps/not-a-real-app")
    assert response.status_code == 404
    error = response.json()["error"]
    assert error["code"] == "APP_NOT_FOUND"
    assert error["details"] == {"app_id": "not-a-real-app"}


@pytest.mark.asyncio
async def test_analysis_returns_result_and_summaries() -> None:
    async with _client() as client:
        response = await client.post("/v1/analysis", json=_analysis_body(), params={"projection_months": 12})
    assert response.status_code == 200
    data = response.json()["data"]
    decisions = data["result"]["decisions"]
    assert len(decisions) == 1
    assert decisions[0]["risk_score"] == 16
    assert decisions[0]["recommendation"] == "secure_browser"
    assert data["result"]["total_annual_cost"] == 42000
    assert data["result"]["total_annual_savings"] == 168000
    assert data["summary"]["compliance_gaps"] == ["HIPAA-164.312(c)", "HIPAA-164.312(d)"]
    assert len(data["projection"]) == 13
    assert data["heatmap"]["rows"][0]["app_id"] == "intranet"


@pytest.mark.asyncio
async def test_analysis_rejects_small_workforce() -> None:
    body = _analysis_body()
    body["organization"]["workforce_size"] = 0
    async with _client() as client:
        response = await client.post("/v1/analysis", json=body)
    assert response.status_code == 422
    assert response.json()["error"]["code"] == "REQUEST_VALIDATION_ERROR"


@pytest.mark.asyncio
async def test_analysis_unknown_catalog_id_is_404() -> None:
    async with _client() as client:
        response = await client.post("/v1/analysis", json=_analysis_body(app_ids=["ghost-app"]))
    assert response.status_code == 404
    assert response.json()["error"]["code"] == "APP_NOT_FOUND"


@pytest.mark.asyncio
async def test_score_breakdown_for_catalog_app() -> None:
    body = {"app_id": "salesforce", "user_tier": "contractor", "device_trust": "byod", "location_risk": "remote"}
    async with _client() as client:
        response = await client.post("/v1/score-breakdown", json=body)
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["total"] == 52
    assert data["max_total"] == 64
    assert data["tier"] == "full_daas"
    assert data["deciding_rule"] == "confidential_data"
    assert [factor["key"] for factor in data["factors"]][0] == "vectors"


@pytest.mark.asyncio
async def test_score_breakdown_requires_one_app_source() -> None:
    body = {"user_tier": "employee", "device_trust": "managed"}
    async with _client() as client:
        response = await client.post("/v1/score-breakdown", json=body)
    assert response.status_code == 422
    assert response.json()["error"]["code"] == "INVALID_INPUT"


@pytest.mark.asyncio
async def test_wrong_method_uses_error_envelope() -> None:
    async with _client() as client:
        response = await client.get("/v1/analysis")
    assert response.status_code == 405
    payload = response.json()
    assert payload["error"]["code"] == "METHOD_NOT_ALLOWED"
    assert payload["meta"]["api_version"] == "v1"
    # Without a client header the generated id is echoed in both places.
    assert payload["meta"]["request_id"] == response.headers["X-Request-Id"]
    assert "POST" in response.headers["allow"]


@pytest.mark.asyncio
async def test_unhandled_error_returns_internal_envelope() -> None:
    app = create_app()

    async def explode() -> None:
        raise RuntimeError("boom")

    app.add_api_route("/v1/explode", explode, methods=["GET"])
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/v1/explode", headers={"X-Request-Id": "req-500"})
    assert response.status_code == 500
    assert response.json() == {
        "error": {"code": "INTERNAL_ERROR", "message": "Internal server error"},
        "meta": {"request_id": "req-500", "api_version": "v1"},
    }
