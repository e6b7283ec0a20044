"""License domain model."""

from enum import StrEnum


class LicenseStatus(StrEnum):
    """License status derived from its expiry date."""

    ACTIVE = "active"
    EXPIRING = "expiring"
    EXPIRED = "expired"
