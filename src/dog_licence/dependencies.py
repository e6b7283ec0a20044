"""Dependency injection factories for FastAPI."""

from fastapi import Depends

from dog_licence.config import Settings, get_settings
from dog_licence.services.fee_service import FeeService


def get_fee_service(settings: Settings = Depends(get_settings)) -> FeeService:
    """Get FeeService instance bound to the configured fee schedule."""
    return FeeService(settings.fee_schedule)
