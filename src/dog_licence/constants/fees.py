"""Municipal dog licence fee defaults.

Amounts are in the municipality's currency. They seed the default
``FeeSchedule`` and can be overridden through settings.
"""

from datetime import date
from decimal import Decimal
from typing import Final

# =============================================================================
# Fee Amounts
# =============================================================================

REPLACEMENT_FEE: Final[Decimal] = Decimal("10.00")
DANGEROUS_DOG_FEE: Final[Decimal] = Decimal("250.00")
NUISANCE_DOG_FEE: Final[Decimal] = Decimal("125.00")
UNDER_MINIMUM_AGE_FEE: Final[Decimal] = Decimal("0.00")
SPAYED_NEUTERED_FEE: Final[Decimal] = Decimal("62.50")
UNALTERED_FEE: Final[Decimal] = Decimal("90.00")
# Kennel licences are annual and cover all of an owner's dogs
KENNEL_LICENCE_FEE: Final[Decimal] = Decimal("100.00")

# =============================================================================
# Thresholds and Terms
# =============================================================================

# Dogs younger than this are not yet eligible for a lifetime licence
MINIMUM_AGE_MONTHS: Final[int] = 6

ANNUAL_TERM_YEARS: Final[int] = 1
# Lifetime and replacement licences get a concrete, effectively permanent expiry
LIFETIME_TERM_YEARS: Final[int] = 100

DEFAULT_EXPIRING_WITHIN_DAYS: Final[int] = 30

# Latest issue or evaluation date accepted from callers; a lifetime term
# from here still fits in the calendar
MAX_ISSUE_DATE: Final[date] = date(9999 - LIFETIME_TERM_YEARS, 12, 31)

CURRENCY_QUANTUM: Final[Decimal] = Decimal("0.01")
