"""Per-sticker validation.

A sticker is checked against format, size, emoji count and accessibility
text rules, in that order. Only the first violated rule is reported.
Dimensions are not checked here because they require decoding the image.
"""

from __future__ import annotations

from ..constants import LIMITS, ValidationLimits
from ..results import StickerCheck
from ..value_objects import Sticker


def format_kb(size_in_bytes: int, decimals: int) -> str:
    """Format a byte count as kilobytes with the given precision."""
    return f"{size_in_bytes / 1024:.{decimals}f}"


def text_length(text: str) -> int:
    """Length of text in UTF-16 code units.

    Characters outside the Basic Multilingual Plane, such as most emoji,
    count as two. Text limits are expressed in these units.
    """
    return len(text.encode("utf-16-le", "surrogatepass")) // 2


def validate_sticker(
    sticker: Sticker, limits: ValidationLimits = LIMITS
) -> StickerCheck:
    """Validate a single sticker.

    Args:
        sticker: The sticker to validate.
        limits: Constraint table to validate against.

    Returns:
        StickerCheck that is either valid or carries the first violation.
    """
    extension = sticker.file_extension
    if extension not in limits.supported_image_formats:
        supported = ", ".join(sorted(limits.supported_image_formats))
        return StickerCheck.fail(
            f"Unsupported image format: {extension}. Supported formats: {supported}"
        )

    max_size = limits.max_sticker_size(sticker.is_animated)
    if sticker.size_in_bytes > max_size:
        return StickerCheck.fail(
            f"Image size ({format_kb(sticker.size_in_bytes, 1)} KB) exceeds "
            f"maximum allowed size ({format_kb(max_size, 0)} KB)"
        )

    if len(sticker.emojis) > limits.max_emojis_per_sticker:
        return StickerCheck.fail(
            f"Too many emojis ({len(sticker.emojis)}). "
            f"Maximum allowed: {limits.max_emojis_per_sticker}"
        )

    if sticker.accessibility_text is not None:
        max_length = limits.max_accessibility_text_length(sticker.is_animated)
        length = text_length(sticker.accessibility_text)
        if length > max_length:
            return StickerCheck.fail(
                f"Accessibility text too long ({length} characters). "
                f"Maximum allowed: {max_length}"
            )

    return StickerCheck.ok()


class StickerValidator:
    """Validator wrapper around validate_sticker for a fixed limit table."""

    def __init__(self, limits: ValidationLimits = LIMITS) -> None:
        self.limits = limits

    @property
    def name(self) -> str:
        """Return the validator name."""
        return "sticker"

    def validate(self, sticker: Sticker) -> StickerCheck:
        """Validate one sticker against this validator's limits."""
        return validate_sticker(sticker, self.limits)
