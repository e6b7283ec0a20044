"""Fee domain models."""

from datetime import date
from decimal import Decimal
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from dog_licence.constants import fees


class OperationKind(StrEnum):
    """Kind of licensing action being priced."""

    NEW = "new"
    REPLACEMENT = "replacement"


class LicenseType(StrEnum):
    """Licence type persisted on the licence record."""

    LIFETIME = "Lifetime"
    ANNUAL = "Annual"
    REPLACEMENT = "Replacement"


class FeeCategory(StrEnum):
    """Fee category a dog was classified into."""

    REPLACEMENT_LICENSE = "ReplacementLicense"
    DANGEROUS_DOG = "DangerousDog"
    NUISANCE_DOG = "NuisanceDog"
    UNDER_6_MONTHS = "Under6Months"
    SPAYED_NEUTERED_6_PLUS = "SpayedNeutered6Plus"
    UNALTERED_6_PLUS = "Unaltered6Plus"


class DogAttributes(BaseModel):
    """Dog attributes relevant to fee computation."""

    model_config = ConfigDict(frozen=True)

    sterilized: bool = False
    is_nuisance: bool = False
    # Only meaningful together with is_nuisance
    is_dangerous: bool = False
    date_of_birth: date | None = None


class FeeSchedule(BaseModel):
    """Municipal fee amounts and the minimum licensing age.

    Changing the schedule changes amounts and the age threshold only; the
    order of the classification rules is fixed.
    """

    model_config = ConfigDict(frozen=True)

    replacement: Decimal = Field(default=fees.REPLACEMENT_FEE, ge=0)
    dangerous: Decimal = Field(default=fees.DANGEROUS_DOG_FEE, ge=0)
    nuisance: Decimal = Field(default=fees.NUISANCE_DOG_FEE, ge=0)
    under_minimum_age: Decimal = Field(default=fees.UNDER_MINIMUM_AGE_FEE, ge=0)
    spayed_neutered: Decimal = Field(default=fees.SPAYED_NEUTERED_FEE, ge=0)
    unaltered: Decimal = Field(default=fees.UNALTERED_FEE, ge=0)
    kennel: Decimal = Field(default=fees.KENNEL_LICENCE_FEE, ge=0)
    minimum_age_months: int = Field(default=fees.MINIMUM_AGE_MONTHS, ge=0)


class FeeDecision(BaseModel):
    """Result of classifying a dog for a licensing action."""

    model_config = ConfigDict(frozen=True)

    fee: Decimal
    license_type: LicenseType
    category: FeeCategory
    # Display and audit only
    description: str
