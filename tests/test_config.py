"""Tests for application settings."""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from dog_licence.config import Settings
from dog_licence.models.domain.fee import FeeSchedule


class TestSettings:
    """Test settings loading and validation."""

    def test_default_fee_schedule(self) -> None:
        assert Settings().fee_schedule == FeeSchedule()

    def test_fee_amounts_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FEE_NUISANCE", "150.00")
        monkeypatch.setenv("MINIMUM_AGE_MONTHS", "4")

        schedule = Settings().fee_schedule

        assert schedule.nuisance == Decimal("150.00")
        assert schedule.minimum_age_months == 4
        assert schedule.dangerous == Decimal("250.00")

    def test_kennel_fee_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FEE_KENNEL", "120.00")

        assert Settings().fee_schedule.kennel == Decimal("120.00")

    def test_negative_fee_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Settings(fee_replacement=Decimal("-5"))

    def test_negative_expiring_window_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Settings(expiring_within_days=-1)

    def test_debug_forbidden_in_production(self) -> None:
        with pytest.raises(ValidationError, match="DEBUG mode cannot be enabled"):
            Settings(environment="production", debug=True)

    def test_cors_origins_list(self) -> None:
        settings = Settings(cors_origins="http://a.example, https://b.example,")

        assert settings.cors_origins_list == ["http://a.example", "https://b.example"]
