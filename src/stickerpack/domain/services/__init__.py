"""Domain services - sticker and pack validation."""

from .pack_validator import (
    PackValidator,
    ensure_valid,
    is_valid_email,
    is_valid_url,
    validate_pack,
)
from .sticker_validator import StickerValidator, text_length, validate_sticker

__all__ = [
    "PackValidator",
    "StickerValidator",
    "ensure_valid",
    "is_valid_email",
    "is_valid_url",
    "text_length",
    "validate_pack",
    "validate_sticker",
]
