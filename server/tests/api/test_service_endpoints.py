"""API tests for service endpoints and cross-cutting behavior."""

import pytest

API = "/en/api/v1"


@pytest.mark.asyncio
async def test_root_lists_examples(test_client):
    """Test the welcome endpoint."""
    response = await test_client.get("/")

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["languages"] == ["ru", "en", "ky"]
    assert body["examples"]["en"]["tours"] == "http://test/en/api/v1/tours"


@pytest.mark.asyncio
async def test_health(test_client):
    """Test the health endpoint."""
    response = await test_client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["database"] == "ok"


@pytest.mark.asyncio
async def test_metrics_exposes_counters(test_client):
    """Test that Prometheus metrics are exposed."""
    await test_client.get(f"{API}/tours")

    response = await test_client.get("/metrics")

    assert response.status_code == 200
    assert "http_requests_total" in response.text
    assert "users_registered_total" in response.text


@pytest.mark.asyncio
@pytest.mark.parametrize("lang", ["de", "xx", "EN"])
async def test_unsupported_language(test_client, lang):
    """Test that an unknown language segment is a 404."""
    response = await test_client.get(f"/{lang}/api/v1/tours")

    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Invalid language"}


@pytest.mark.asyncio
@pytest.mark.parametrize("lang", ["ru", "en", "ky"])
async def test_supported_languages(test_client, lang):
    """Test that every supported language serves the API."""
    response = await test_client.get(f"/{lang}/api/v1/tours")

    assert response.status_code == 200
    assert response.json() == {"success": True, "count": 0, "tours": []}


@pytest.mark.asyncio
async def test_localized_error_messages(test_client):
    """Test that error messages follow the language segment."""
    english = await test_client.get(f"{API}/auth/me")
    russian = await test_client.get("/ru/api/v1/auth/me")

    assert english.json()["message"] == "Authorization required"
    assert russian.json()["message"] != english.json()["message"]


@pytest.mark.asyncio
async def test_request_id_is_echoed(test_client):
    """Test request correlation headers."""
    response = await test_client.get(f"{API}/tours", headers={"X-Request-ID": "abc-123"})

    assert response.headers["X-Request-ID"] == "abc-123"


@pytest.mark.asyncio
async def test_unknown_route_uses_envelope(test_client):
    """Test that unmatched routes still answer with the error envelope."""
    response = await test_client.get("/en/api/v1/nothing-here")

    assert response.status_code == 404
    assert response.json()["success"] is False
