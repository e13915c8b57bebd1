"""Pydantic models for sticker pack manifest files.

A manifest is a JSON document listing one or more sticker packs and the
image files that belong to them. These models only enforce the document
shape (required fields, types, file references). The platform limits
(text lengths, counts, sizes) are left to pack validation so that every
violation is reported the same way regardless of where the pack came from.
"""

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
)

from stickerpack.domain.constants import LIMITS

# Supported schema versions for manifest files
# Version 1.0: Initial manifest format
# Version 1.1: Added app store links
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0", "1.1"})


def _extension(file_name: str) -> str:
    if "." not in file_name:
        return ""
    return file_name.rsplit(".", 1)[-1].lower()


class StickerConfig(BaseModel):
    """Configuration for a single sticker.

    Attributes:
        image_file: Path to the sticker image, relative to the manifest
        emojis: Emojis associated with the sticker
        accessibility_text: Optional accessibility description
    """

    model_config = ConfigDict(extra="forbid")

    image_file: str = Field(..., min_length=1)
    emojis: list[str] = Field(default_factory=list)
    accessibility_text: str | None = None


class StickerPackConfig(BaseModel):
    """Configuration for one sticker pack in a manifest.

    Attributes:
        identifier: Unique identifier of the pack
        name: Display name
        publisher: Publisher name
        tray_image_file: Path to the tray icon, relative to the manifest
        stickers: Sticker entries, in display order
        publisher_email: Optional contact email
        publisher_website: Optional website URL
        privacy_policy_website: Optional privacy policy URL
        license_agreement_website: Optional license URL
        image_data_version: Opaque version tag of the image data
        avoid_cache: Whether the host application should skip caching
    """

    model_config = ConfigDict(extra="forbid")

    identifier: str
    name: str
    publisher: str
    tray_image_file: str = Field(..., min_length=1)
    stickers: list[StickerConfig] = Field(default_factory=list)
    publisher_email: str | None = None
    publisher_website: str | None = None
    privacy_policy_website: str | None = None
    license_agreement_website: str | None = None
    image_data_version: str = "1"
    avoid_cache: bool = False

    @field_validator("tray_image_file")
    @classmethod
    def validate_tray_image_format(cls, v: str) -> str:
        """Ensure the tray image file uses a supported tray format."""
        if _extension(v) not in LIMITS.supported_tray_image_formats:
            supported = ", ".join(sorted(LIMITS.supported_tray_image_formats))
            raise ValueError(
                f"tray image must be one of: {supported} (got '{_extension(v)}')"
            )
        return v


class StickerManifest(BaseModel):
    """Root model of a sticker manifest file.

    Attributes:
        schema_version: Manifest format version
        android_play_store_link: Optional link to the companion Android app
        ios_app_store_link: Optional link to the companion iOS app
        sticker_packs: Packs described by this manifest (at least one)
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = "1.0"
    android_play_store_link: str | None = None
    ios_app_store_link: str | None = None
    sticker_packs: list[StickerPackConfig] = Field(..., min_length=1)

    @field_validator("schema_version")
    @classmethod
    def validate_schema_version(cls, v: str) -> str:
        """Ensure the manifest version is one we know how to read."""
        if v not in SUPPORTED_VERSIONS:
            supported = ", ".join(sorted(SUPPORTED_VERSIONS))
            raise ValueError(
                f"Unsupported schema version '{v}'. Supported versions: {supported}"
            )
        return v
