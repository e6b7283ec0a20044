"""Fees router for licence fee and expiry previews."""

from typing import Annotated

from fastapi import APIRouter, Depends

from dog_licence.config import Settings, get_settings
from dog_licence.dependencies import get_fee_service
from dog_licence.models.domain.fee import FeeSchedule
from dog_licence.models.dto.fee import (
    ExpiryRequest,
    ExpiryResponse,
    FeePreview,
    FeePreviewRequest,
)
from dog_licence.services.expiration_service import license_status
from dog_licence.services.fee_service import FeeService, compute_expiry

router = APIRouter()


@router.get("/schedule", response_model=FeeSchedule)
async def get_fee_schedule(
    fee_service: Annotated[FeeService, Depends(get_fee_service)],
) -> FeeSchedule:
    """Get the active municipal fee schedule."""
    return fee_service.schedule


@router.post("/preview", response_model=FeePreview)
async def preview_fee(
    body: FeePreviewRequest,
    fee_service: Annotated[FeeService, Depends(get_fee_service)],
) -> FeePreview:
    """Preview the fee and expiry for a new or replacement licence.

    Called by the licence form whenever the dog's flags or the issue date
    change. Nothing is persisted.
    """
    return fee_service.preview(
        dog=body.dog,
        operation=body.operation,
        evaluation_date=body.evaluation_date,
        issue_date=body.issue_date,
    )


@router.post("/expiry", response_model=ExpiryResponse)
async def get_expiry(
    body: ExpiryRequest,
    settings: Annotated[Settings, Depends(get_settings)],
) -> ExpiryResponse:
    """Compute a licence expiry date, and its status when as_of is given."""
    expiry_date = compute_expiry(body.issue_date, body.license_type)
    status = None
    if body.as_of is not None:
        status = license_status(expiry_date, body.as_of, settings.expiring_within_days)

    return ExpiryResponse(
        issue_date=body.issue_date,
        license_type=body.license_type,
        expiry_date=expiry_date,
        status=status,
    )
