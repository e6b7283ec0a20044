"""Tests for the fee preview API."""

from decimal import Decimal

from fastapi.testclient import TestClient


class TestFeePreview:
    """Test POST /api/v1/fees/preview."""

    def test_sterilized_adult_preview(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/fees/preview",
            json={"dog": {"sterilized": True, "date_of_birth": "2023-03-15"}},
        )

        assert response.status_code == 200
        data = response.json()
        assert Decimal(data["decision"]["fee"]) == Decimal("62.50")
        assert data["decision"]["license_type"] == "Lifetime"
        assert data["decision"]["category"] == "SpayedNeutered6Plus"
        assert data["evaluation_date"] == "2025-03-15"
        assert data["expiry_date"] == "2125-03-15"
        assert data["age_description"] == "2 years old"

    def test_dangerous_dog_replacement(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/fees/preview",
            json={
                "dog": {"is_nuisance": True, "is_dangerous": True},
                "operation": "replacement",
            },
        )

        assert response.status_code == 200
        decision = response.json()["decision"]
        assert Decimal(decision["fee"]) == Decimal("10.00")
        assert decision["license_type"] == "Replacement"

    def test_nuisance_dog_annual_expiry(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/fees/preview",
            json={"dog": {"is_nuisance": True}, "issue_date": "2025-04-01"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["decision"]["category"] == "NuisanceDog"
        assert data["expiry_date"] == "2026-04-01"

    def test_future_birth_date_is_bad_request(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/fees/preview",
            json={"dog": {"date_of_birth": "2025-06-01"}},
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "Date of birth is after the evaluation date"

    def test_preview_issue_date_past_supported_range_is_rejected(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/fees/preview",
            json={"dog": {}, "issue_date": "9950-01-01"},
        )

        assert response.status_code == 422
        assert "issue_date" in response.json()["detail"]

    def test_unknown_operation_is_rejected(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/fees/preview",
            json={"dog": {}, "operation": "transfer"},
        )

        assert response.status_code == 422
        assert "operation" in response.json()["detail"]


class TestExpiry:
    """Test POST /api/v1/fees/expiry."""

    def test_annual_expiry_without_status(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/fees/expiry",
            json={"issue_date": "2025-03-15", "license_type": "Annual"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["expiry_date"] == "2026-03-15"
        assert data["status"] is None

    def test_expiring_status(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/fees/expiry",
            json={"issue_date": "2025-03-15", "license_type": "Annual", "as_of": "2026-03-01"},
        )

        assert response.json()["status"] == "expiring"

    def test_expired_status(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/fees/expiry",
            json={"issue_date": "2025-03-15", "license_type": "Annual", "as_of": "2026-03-16"},
        )

        assert response.json()["status"] == "expired"

    def test_leap_day_annual_expiry(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/fees/expiry",
            json={"issue_date": "2024-02-29", "license_type": "Annual"},
        )

        assert response.status_code == 200
        assert response.json()["expiry_date"] == "2025-03-01"

    def test_issue_date_past_supported_range_is_rejected(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/fees/expiry",
            json={"issue_date": "9999-06-01", "license_type": "Annual"},
        )

        assert response.status_code == 422
        assert "issue_date" in response.json()["detail"]

    def test_lifetime_expiry(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/fees/expiry",
            json={"issue_date": "2025-03-15", "license_type": "Lifetime", "as_of": "2025-03-15"},
        )

        data = response.json()
        assert data["expiry_date"] == "2125-03-15"
        assert data["status"] == "active"


class TestScheduleAndHealth:
    """Test schedule and health endpoints."""

    def test_get_schedule(self, client: TestClient) -> None:
        response = client.get("/api/v1/fees/schedule")

        assert response.status_code == 200
        data = response.json()
        assert Decimal(data["dangerous"]) == Decimal("250.00")
        assert Decimal(data["spayed_neutered"]) == Decimal("62.50")
        assert Decimal(data["kennel"]) == Decimal("100.00")
        assert data["minimum_age_months"] == 6

    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}
