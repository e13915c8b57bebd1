"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import Base64Bytes, BaseModel, Field


class StickerSchema(BaseModel):
    """Sticker submitted for validation, with base64 image data."""

    image_file_name: str = Field(..., description="File name including extension")
    image_data: Base64Bytes = Field(..., description="Base64-encoded image bytes")
    emojis: list[str] = Field(default_factory=list, description="Sticker emojis")
    accessibility_text: str | None = Field(
        default=None, description="Optional accessibility description"
    )


class PackValidateRequest(BaseModel):
    """Request for validating a sticker pack."""

    identifier: str = Field(..., description="Pack identifier")
    name: str = Field(..., description="Pack display name")
    publisher: str = Field(..., description="Pack publisher")
    tray_image_data: Base64Bytes = Field(
        ..., description="Base64-encoded tray image bytes"
    )
    stickers: list[StickerSchema] = Field(
        default_factory=list, description="Stickers in display order"
    )
    publisher_email: str | None = Field(default=None, description="Publisher email")
    publisher_website: str | None = Field(default=None, description="Publisher URL")
    privacy_policy_website: str | None = Field(
        default=None, description="Privacy policy URL"
    )
    license_agreement_website: str | None = Field(
        default=None, description="License agreement URL"
    )
    image_data_version: str = Field(default="1", description="Image data version")
    avoid_cache: bool = Field(default=False, description="Skip host caching")


class ManifestValidateRequest(BaseModel):
    """Request for checking the structure of a manifest document."""

    manifest: dict[str, Any] = Field(..., description="Sticker manifest JSON")
