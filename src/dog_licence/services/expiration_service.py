"""Expiration status for issued licences.

Status is derived from the expiry date stored on the licence record, so
listing views can filter active, expiring and expired licences without a
scheduled job rewriting statuses.
"""

from datetime import date, timedelta

from dog_licence.constants import fees
from dog_licence.exceptions import InvalidExpiryWindowError
from dog_licence.models.domain.license import LicenseStatus


def license_status(
    expiry_date: date,
    today: date,
    expiring_within_days: int = fees.DEFAULT_EXPIRING_WITHIN_DAYS,
) -> LicenseStatus:
    """Derive a licence's status from its expiry date.

    A licence is still valid on its expiry date and counts as expiring when
    the expiry falls within the window, inclusive.

    Args:
        expiry_date: Licence expiry date
        today: Evaluation date
        expiring_within_days: Size of the expiring-soon window in days

    Returns:
        LicenseStatus for the licence

    Raises:
        InvalidExpiryWindowError: If the window is negative
    """
    if expiring_within_days < 0:
        raise InvalidExpiryWindowError(expiring_within_days)

    if expiry_date < today:
        return LicenseStatus.EXPIRED
    if expiry_date <= today + timedelta(days=expiring_within_days):
        return LicenseStatus.EXPIRING
    return LicenseStatus.ACTIVE
