"""Fee preview DTOs."""

from datetime import date

from pydantic import BaseModel, Field

from dog_licence.constants import fees
from dog_licence.models.domain.fee import (
    DogAttributes,
    FeeDecision,
    LicenseType,
    OperationKind,
)
from dog_licence.models.domain.license import LicenseStatus


class FeePreviewRequest(BaseModel):
    """Request body for previewing a licence fee."""

    dog: DogAttributes
    operation: OperationKind = OperationKind.NEW
    evaluation_date: date | None = Field(default=None, le=fees.MAX_ISSUE_DATE)
    issue_date: date | None = Field(default=None, le=fees.MAX_ISSUE_DATE)


class FeePreview(BaseModel):
    """Fee decision together with the dates derived from it."""

    decision: FeeDecision
    evaluation_date: date
    issue_date: date
    expiry_date: date
    age_months: int = Field(ge=0)
    age_description: str


class ExpiryRequest(BaseModel):
    """Request body for computing a licence expiry date."""

    issue_date: date = Field(le=fees.MAX_ISSUE_DATE)
    license_type: LicenseType
    as_of: date | None = None


class ExpiryResponse(BaseModel):
    """Expiry date, with the licence status when an evaluation date was given."""

    issue_date: date
    license_type: LicenseType
    expiry_date: date
    status: LicenseStatus | None = None
