"""Domain layer - sticker pack model and validation rules."""

from .constants import LIMITS, ValidationLimits
from .exceptions import StickerPackError, StickerPackValidationError, TransportError
from .results import (
    Failure,
    Result,
    StickerCheck,
    Success,
    ValidationResult,
    error_message,
    fold_result,
    is_failure,
    is_success,
    map_result,
    value_or_none,
)
from .services import (
    PackValidator,
    StickerValidator,
    ensure_valid,
    validate_pack,
    validate_sticker,
)
from .value_objects import ImageDimensions, Sticker, StickerPack

__all__ = [
    "Failure",
    "ImageDimensions",
    "LIMITS",
    "PackValidator",
    "Result",
    "Sticker",
    "StickerCheck",
    "StickerPack",
    "StickerPackError",
    "StickerPackValidationError",
    "StickerValidator",
    "Success",
    "TransportError",
    "ValidationLimits",
    "ValidationResult",
    "ensure_valid",
    "error_message",
    "fold_result",
    "is_failure",
    "is_success",
    "map_result",
    "validate_pack",
    "validate_sticker",
    "value_or_none",
]
