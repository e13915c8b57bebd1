"""Pydantic response schemas for the REST API."""

from pydantic import BaseModel, Field


class PackValidationSchema(BaseModel):
    """Response for pack validation."""

    is_valid: bool = Field(..., description="Whether the pack is valid")
    errors: list[str] = Field(default_factory=list, description="Error messages")
    warnings: list[str] = Field(default_factory=list, description="Warning messages")
    is_animated: bool = Field(..., description="Whether any sticker is animated")
    total_size: str = Field(..., description="Formatted total size of all images")


class StickerValidationSchema(BaseModel):
    """Response for single sticker validation."""

    is_valid: bool = Field(..., description="Whether the sticker is valid")
    error: str | None = Field(default=None, description="First rule violated")


class ManifestValidationSchema(BaseModel):
    """Response for manifest structure validation."""

    is_valid: bool = Field(..., description="Whether the manifest is well-formed")
    pack_identifiers: list[str] = Field(
        default_factory=list, description="Identifiers of the packs described"
    )
    image_files: list[str] = Field(
        default_factory=list, description="Image files the manifest references"
    )
