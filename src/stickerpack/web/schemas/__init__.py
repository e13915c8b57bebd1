"""Request and response schemas for the REST API."""

from stickerpack.web.schemas.requests import (
    ManifestValidateRequest,
    PackValidateRequest,
    StickerSchema,
)
from stickerpack.web.schemas.responses import (
    ManifestValidationSchema,
    PackValidationSchema,
    StickerValidationSchema,
)

__all__ = [
    "ManifestValidateRequest",
    "ManifestValidationSchema",
    "PackValidateRequest",
    "PackValidationSchema",
    "StickerSchema",
    "StickerValidationSchema",
]
