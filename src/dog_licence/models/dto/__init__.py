"""Data Transfer Objects package."""

from dog_licence.models.dto.fee import (
    ExpiryRequest,
    ExpiryResponse,
    FeePreview,
    FeePreviewRequest,
)

__all__ = [
    "ExpiryRequest",
    "ExpiryResponse",
    "FeePreview",
    "FeePreviewRequest",
]
