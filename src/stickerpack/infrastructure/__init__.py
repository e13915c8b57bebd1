"""Infrastructure layer - asset I/O, image inspection and wire payloads."""

from .assets import (
    MINIMAL_PNG,
    create_test_sticker_pack,
    is_likely_animated,
    load_asset,
    load_assets,
    read_image_dimensions,
    read_image_format,
)
from .payload import pack_to_payload, sticker_to_payload

__all__ = [
    "MINIMAL_PNG",
    "create_test_sticker_pack",
    "is_likely_animated",
    "load_asset",
    "load_assets",
    "pack_to_payload",
    "read_image_dimensions",
    "read_image_format",
    "sticker_to_payload",
]
