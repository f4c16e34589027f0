"""
E2E tests for user personas against the mock spending data provider.

These tests require the mock provider to be running on PROVIDER_API_BASE:
    uvicorn mock.provider_server.main:app --port 8001

User personas:
- user_new: 3-day-old account, light spending, upgrade pending
- user_established: established account at 95% of the limit
- user_warning: established account in the warning band, approaching the cap
- user_overspent: spent past the limit
- user_zero_limit: misconfigured zero limit
- unknown users: provider reports failure
"""

import pytest
from fastapi.testclient import TestClient


@pytest.mark.integration
def test_user_new_upgrade_pending(client: TestClient):
    """
    user_new: probation limit, light usage
    Expected: ok tier with upgrade countdown
    """
    response = client.get("/v1/limits/status", params={"user_id": "user_new"})

    assert response.status_code == 200
    data = response.json()
    assert data["limit_type"] == "new_account"
    assert data["daily_limit"] == 3000
    assert data["status_tier"] == "ok"
    assert data["upgrade_eligible"] is True
    assert data["days_until_upgrade"] == 4
    assert data["upgraded_daily_limit"] == 10000


@pytest.mark.integration
def test_user_established_critical(client: TestClient):
    response = client.get("/v1/limits/status", params={"user_id": "user_established"})

    assert response.status_code == 200
    data = response.json()
    assert data["status_tier"] == "critical"
    assert data["approaching_limit"] is True
    assert data["remaining"] == 500
    assert data["upgrade_eligible"] is False


@pytest.mark.integration
def test_user_warning_band(client: TestClient):
    """85% used: warning tier and approaching notice together"""
    response = client.get("/v1/limits/status", params={"user_id": "user_warning"})

    assert response.status_code == 200
    data = response.json()
    assert data["status_tier"] == "warning"
    assert data["approaching_limit"] is True


@pytest.mark.integration
def test_user_overspent_unclamped(client: TestClient):
    response = client.get("/v1/limits/status", params={"user_id": "user_overspent"})

    assert response.status_code == 200
    data = response.json()
    assert data["remaining"] < 0
    assert data["usage_percentage"] > 100


@pytest.mark.integration
def test_user_zero_limit_not_computable(client: TestClient):
    response = client.get("/v1/limits/status", params={"user_id": "user_zero_limit"})
    assert response.status_code == 422


@pytest.mark.integration
def test_unknown_user_unavailable(client: TestClient):
    response = client.get("/v1/limits/status", params={"user_id": "nobody"})
    assert response.status_code == 503


@pytest.mark.integration
def test_transaction_check_against_provider(client: TestClient):
    """user_new has 2900 left of a 3000 limit"""
    allowed = client.post("/v1/limits/check", json={"user_id": "user_new", "amount": 2900})
    refused = client.post("/v1/limits/check", json={"user_id": "user_new", "amount": 2901})

    assert allowed.json()["allowed"] is True
    assert refused.json()["allowed"] is False
    assert refused.json()["remaining_limit"] == 2900
