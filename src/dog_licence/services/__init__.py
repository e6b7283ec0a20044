"""Services package."""

from dog_licence.services.expiration_service import license_status
from dog_licence.services.fee_service import (
    FeeService,
    age_in_months,
    classify_fee,
    compute_expiry,
    describe_age,
)

__all__ = [
    "FeeService",
    "age_in_months",
    "classify_fee",
    "compute_expiry",
    "describe_age",
    "license_status",
]
