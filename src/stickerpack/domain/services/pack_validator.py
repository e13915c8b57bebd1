"""Pack-level validation.

Unlike sticker validation, pack validation never stops early: every check
runs and every violation is collected, so a caller can present all
problems at once. Per-sticker failures are folded in with their 1-based
position.
"""

from __future__ import annotations

import re
from urllib.parse import urlsplit

from ..constants import LIMITS, ValidationLimits
from ..exceptions import StickerPackValidationError
from ..results import ValidationResult
from ..value_objects import StickerPack
from .sticker_validator import format_kb, text_length, validate_sticker

# One "@", a dot somewhere after it, no empty parts
EMAIL_PATTERN = re.compile(r"^[^@]+@[^@]+\.[^@]+$")

ALLOWED_URL_SCHEMES = frozenset({"http", "https"})


def is_valid_url(url: str) -> bool:
    """Check that a string parses as a URL with an http or https scheme."""
    try:
        parts = urlsplit(url)
    except ValueError:
        return False
    return parts.scheme in ALLOWED_URL_SCHEMES


def is_valid_email(email: str) -> bool:
    """Check that a string has the basic shape of an email address."""
    return EMAIL_PATTERN.fullmatch(email) is not None


def _check_text_field(
    label: str, value: str, limits: ValidationLimits, errors: list[str]
) -> None:
    if not value:
        errors.append(f"{label} cannot be empty")
    elif text_length(value) > limits.max_character_limit:
        errors.append(
            f"{label} too long ({text_length(value)} chars). "
            f"Maximum: {limits.max_character_limit}"
        )


def _check_tray_image(
    pack: StickerPack, limits: ValidationLimits, errors: list[str]
) -> None:
    tray_size = len(pack.tray_image_data)
    if tray_size == 0:
        errors.append("Tray image data cannot be empty")
    elif tray_size > limits.max_tray_image_size:
        errors.append(
            f"Tray image size ({format_kb(tray_size, 1)} KB) exceeds "
            f"maximum ({format_kb(limits.max_tray_image_size, 0)} KB)"
        )


def _check_sticker_count(
    pack: StickerPack, limits: ValidationLimits, errors: list[str]
) -> None:
    count = len(pack.stickers)
    if count < limits.min_stickers_per_pack:
        errors.append(
            f"Not enough stickers ({count}). "
            f"Minimum: {limits.min_stickers_per_pack}"
        )
    elif count > limits.max_stickers_per_pack:
        errors.append(
            f"Too many stickers ({count}). Maximum: {limits.max_stickers_per_pack}"
        )


def _check_stickers(
    pack: StickerPack, limits: ValidationLimits, errors: list[str]
) -> None:
    animated_pack = pack.is_animated
    for position, sticker in enumerate(pack.stickers, start=1):
        check = validate_sticker(sticker, limits)
        if not check.is_valid:
            errors.append(f"Sticker {position}: {check.error}")

        if animated_pack and not sticker.is_animated:
            errors.append(f"Sticker {position}: Animated pack contains static sticker")
        elif not animated_pack and sticker.is_animated:
            errors.append(f"Sticker {position}: Static pack contains animated sticker")


def _check_links(pack: StickerPack, errors: list[str]) -> None:
    url_fields = (
        ("Publisher website", pack.publisher_website),
        ("Privacy policy website", pack.privacy_policy_website),
        ("License agreement website", pack.license_agreement_website),
    )
    for label, url in url_fields:
        if url and not is_valid_url(url):
            errors.append(f"{label} is not a valid URL: {url}")

    if pack.publisher_email and not is_valid_email(pack.publisher_email):
        errors.append(f"Publisher email is not valid: {pack.publisher_email}")


def validate_pack(
    pack: StickerPack, limits: ValidationLimits = LIMITS
) -> ValidationResult:
    """Validate a sticker pack and all of its stickers.

    Checks run in a fixed order: identifier, name, publisher, tray image,
    sticker count, each sticker (including animated/static consistency),
    website URLs and publisher email.

    Args:
        pack: The sticker pack to validate.
        limits: Constraint table to validate against.

    Returns:
        ValidationResult with every violation found, empty when valid.
    """
    errors: list[str] = []

    _check_text_field("Identifier", pack.identifier, limits, errors)
    _check_text_field("Name", pack.name, limits, errors)
    _check_text_field("Publisher", pack.publisher, limits, errors)
    _check_tray_image(pack, limits, errors)
    _check_sticker_count(pack, limits, errors)
    _check_stickers(pack, limits, errors)
    _check_links(pack, errors)

    if errors:
        return ValidationResult.fail(errors)
    return ValidationResult.ok()


class PackValidator:
    """Validator that applies validate_pack to a whole pack.

    Named "pack". The ValidatorRegistry runs it as the rules that decide
    the verdict, ahead of any advisory validators.
    """

    def __init__(self, limits: ValidationLimits = LIMITS) -> None:
        self.limits = limits

    @property
    def name(self) -> str:
        """Return the validator name."""
        return "pack"

    def validate(self, pack: StickerPack) -> ValidationResult:
        """Validate the pack against this validator's limits."""
        return validate_pack(pack, self.limits)


def ensure_valid(pack: StickerPack, limits: ValidationLimits = LIMITS) -> StickerPack:
    """Return the pack unchanged, or raise if it fails validation.

    Raises:
        StickerPackValidationError: If the pack has any validation errors.
            The individual messages are available as validation_errors.
    """
    result = validate_pack(pack, limits)
    if not result.is_valid:
        raise StickerPackValidationError(
            "Sticker pack validation failed", list(result.errors)
        )
    return pack
