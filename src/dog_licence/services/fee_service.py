"""Licence fee and expiry computation.

The module-level functions are pure: every date they depend on is passed in
explicitly and nothing reads the system clock. ``FeeService`` is the thin
layer the API uses; it owns the clock and the configured fee schedule.
"""

import calendar
import logging
from collections.abc import Callable
from datetime import MAXYEAR, MINYEAR, date, datetime
from decimal import Decimal

from dog_licence.constants import fees
from dog_licence.exceptions import DateOfBirthInFutureError
from dog_licence.models.domain.fee import (
    DogAttributes,
    FeeCategory,
    FeeDecision,
    FeeSchedule,
    LicenseType,
    OperationKind,
)
from dog_licence.models.dto.fee import FeePreview

logger = logging.getLogger(__name__)

DEFAULT_FEE_SCHEDULE = FeeSchedule()


def _as_date(value: date) -> date:
    """Reduce a datetime to its calendar date."""
    if isinstance(value, datetime):
        return value.date()
    return value


def _money(amount: Decimal) -> Decimal:
    return Decimal(amount).quantize(fees.CURRENCY_QUANTUM)


def add_years(value: date, years: int) -> date:
    """Add calendar years to a date.

    Feb 29 in a target year without a leap day rolls forward to Mar 1.
    Results past the last representable year clamp to ``date.max`` so the
    expiry stays effectively permanent instead of failing.
    """
    value = _as_date(value)
    target_year = value.year + years
    if target_year > MAXYEAR:
        return date.max
    if target_year < MINYEAR:
        return date.min
    if (value.month, value.day) == (2, 29) and not calendar.isleap(target_year):
        return date(target_year, 3, 1)
    return value.replace(year=target_year)


def age_in_months(date_of_birth: date | None, now: date) -> int:
    """Compute a dog's age in whole months using year and month fields only.

    Day-of-month is ignored, so a dog born on Jan 31 is one month old on
    Feb 1. Returns 0 when the birth date is unknown and clamps future birth
    dates to 0.
    """
    if date_of_birth is None:
        return 0

    years = now.year - date_of_birth.year
    months = now.month - date_of_birth.month
    return max(0, years * 12 + months)


def describe_age(
    date_of_birth: date | None,
    now: date,
    minimum_age_months: int = fees.MINIMUM_AGE_MONTHS,
) -> str:
    """Get a human-readable age string for display next to a fee."""
    if date_of_birth is None:
        return "Unknown age"

    months_old = age_in_months(date_of_birth, now)

    if months_old < minimum_age_months:
        return f"{months_old} months old (under {minimum_age_months} months)"
    if months_old < 12:
        return f"{months_old} months old"

    years, months = divmod(months_old, 12)
    year_text = f"{years} year{'s' if years > 1 else ''}"
    if months == 0:
        return f"{year_text} old"
    return f"{year_text} and {months} month{'s' if months > 1 else ''} old"


def classify_fee(
    dog: DogAttributes,
    operation: OperationKind | None,
    now: date,
    schedule: FeeSchedule | None = None,
) -> FeeDecision:
    """Classify a dog and licensing action into a fee decision.

    Rules are evaluated in order and the first match wins:

    1. Replacement licences cost the replacement fee for any dog.
    2. Dogs flagged both dangerous and nuisance pay the dangerous-dog fee
       annually. The dangerous flag alone does not qualify.
    3. Nuisance dogs pay the nuisance fee annually.
    4. Dogs under the minimum age get a zero-fee placeholder decision.
    5. Spayed or neutered dogs pay the lifetime spayed/neutered fee.
    6. Other dogs pay the lifetime unaltered fee.

    Args:
        dog: Dog attributes
        operation: Licensing action; None is treated as a new licence
        now: Evaluation date used for the age computation
        schedule: Fee amounts, defaults to the standard municipal schedule

    Returns:
        FeeDecision for the dog and action
    """
    schedule = schedule or DEFAULT_FEE_SCHEDULE
    operation = operation or OperationKind.NEW

    if operation == OperationKind.REPLACEMENT:
        return FeeDecision(
            fee=_money(schedule.replacement),
            license_type=LicenseType.REPLACEMENT,
            category=FeeCategory.REPLACEMENT_LICENSE,
            description="Replacement dog license - any dog type",
        )

    if dog.is_dangerous and dog.is_nuisance:
        return FeeDecision(
            fee=_money(schedule.dangerous),
            license_type=LicenseType.ANNUAL,
            category=FeeCategory.DANGEROUS_DOG,
            description="Dangerous dog - requires annual license renewal",
        )

    if dog.is_nuisance:
        return FeeDecision(
            fee=_money(schedule.nuisance),
            license_type=LicenseType.ANNUAL,
            category=FeeCategory.NUISANCE_DOG,
            description="Nuisance dog - requires annual license renewal",
        )

    minimum_age = schedule.minimum_age_months
    if age_in_months(dog.date_of_birth, _as_date(now)) < minimum_age:
        return FeeDecision(
            fee=_money(schedule.under_minimum_age),
            license_type=LicenseType.LIFETIME,
            category=FeeCategory.UNDER_6_MONTHS,
            description=(
                f"Dog under {minimum_age} months old - "
                f"license should be issued at {minimum_age} months of age"
            ),
        )

    if dog.sterilized:
        return FeeDecision(
            fee=_money(schedule.spayed_neutered),
            license_type=LicenseType.LIFETIME,
            category=FeeCategory.SPAYED_NEUTERED_6_PLUS,
            description=f"Spayed/neutered dog ({minimum_age}+ months) - lifetime license",
        )

    return FeeDecision(
        fee=_money(schedule.unaltered),
        license_type=LicenseType.LIFETIME,
        category=FeeCategory.UNALTERED_6_PLUS,
        description=f"Unaltered dog ({minimum_age}+ months) - lifetime license",
    )


def compute_expiry(issue_date: date, license_type: LicenseType) -> date:
    """Compute a licence expiry date from its issue date and type.

    Annual licences run one calendar year. Lifetime and replacement licences
    get an expiry 100 years out so every licence has a concrete date.
    """
    if license_type == LicenseType.ANNUAL:
        return add_years(issue_date, fees.ANNUAL_TERM_YEARS)
    return add_years(issue_date, fees.LIFETIME_TERM_YEARS)


class FeeService:
    """Service for previewing licence fees against the configured schedule."""

    def __init__(
        self,
        schedule: FeeSchedule | None = None,
        clock: Callable[[], date] = date.today,
    ) -> None:
        """Initialize service with a fee schedule and a clock."""
        self.schedule = schedule or DEFAULT_FEE_SCHEDULE
        self.clock = clock

    def preview(
        self,
        dog: DogAttributes,
        operation: OperationKind = OperationKind.NEW,
        evaluation_date: date | None = None,
        issue_date: date | None = None,
    ) -> FeePreview:
        """Preview the fee decision and expiry for a licensing action.

        Args:
            dog: Dog attributes collected by the licence form
            operation: New licence or replacement
            evaluation_date: Date the dog's age is computed at, defaults to today
            issue_date: Licence issue date, defaults to the evaluation date

        Returns:
            FeePreview with the decision and derived dates

        Raises:
            DateOfBirthInFutureError: If the dog is born after the evaluation date
        """
        evaluation_date = _as_date(evaluation_date or self.clock())
        issue_date = _as_date(issue_date or evaluation_date)

        if dog.date_of_birth is not None and dog.date_of_birth > evaluation_date:
            raise DateOfBirthInFutureError(dog.date_of_birth, evaluation_date)

        decision = classify_fee(dog, operation, evaluation_date, self.schedule)
        expiry_date = compute_expiry(issue_date, decision.license_type)

        logger.debug(
            "Fee preview: operation=%s category=%s fee=%s expiry=%s",
            operation,
            decision.category,
            decision.fee,
            expiry_date,
        )

        return FeePreview(
            decision=decision,
            evaluation_date=evaluation_date,
            issue_date=issue_date,
            expiry_date=expiry_date,
            age_months=age_in_months(dog.date_of_birth, evaluation_date),
            age_description=describe_age(
                dog.date_of_birth, evaluation_date, self.schedule.minimum_age_months
            ),
        )
