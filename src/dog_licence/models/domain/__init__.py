"""Domain models package."""

from dog_licence.models.domain.fee import (
    DogAttributes,
    FeeCategory,
    FeeDecision,
    FeeSchedule,
    LicenseType,
    OperationKind,
)
from dog_licence.models.domain.license import LicenseStatus

__all__ = [
    "DogAttributes",
    "FeeCategory",
    "FeeDecision",
    "FeeSchedule",
    "LicenseStatus",
    "LicenseType",
    "OperationKind",
]
