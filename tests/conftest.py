"""Shared fixtures for dog licence tests."""

from collections.abc import Iterator
from datetime import date

import pytest
from fastapi.testclient import TestClient

from dog_licence.config import get_settings
from dog_licence.dependencies import get_fee_service
from dog_licence.main import create_app
from dog_licence.services.fee_service import FeeService

EVALUATION_DATE = date(2025, 3, 15)


@pytest.fixture
def today() -> date:
    """Fixed evaluation date so age-based rules are deterministic."""
    return EVALUATION_DATE


@pytest.fixture
def fee_service(today: date) -> FeeService:
    """FeeService with the default schedule and a frozen clock."""
    return FeeService(clock=lambda: today)


@pytest.fixture
def client(fee_service: FeeService) -> Iterator[TestClient]:
    """Test client with the fee service clock frozen."""
    get_settings.cache_clear()
    app = create_app()
    app.dependency_overrides[get_fee_service] = lambda: fee_service
    with TestClient(app) as test_client:
        yield test_client
    get_settings.cache_clear()
