"""Wire payload encoding for sticker packs.

Builds the JSON-ready dictionary a transport sends to a host integration.
Image bytes are base64 encoded; everything else is passed through.
"""

from __future__ import annotations

import base64
from typing import Any

from stickerpack.domain.value_objects import Sticker, StickerPack


def _encode(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def sticker_to_payload(sticker: Sticker) -> dict[str, Any]:
    """Encode one sticker as a payload dictionary."""
    return {
        "image_file_name": sticker.image_file_name,
        "image_data": _encode(sticker.image_data),
        "emojis": list(sticker.emojis),
        "accessibility_text": sticker.accessibility_text,
    }


def pack_to_payload(pack: StickerPack) -> dict[str, Any]:
    """Encode a sticker pack as a payload dictionary.

    Args:
        pack: The pack to encode.

    Returns:
        Dictionary safe to serialize with json.dumps.
    """
    return {
        "identifier": pack.identifier,
        "name": pack.name,
        "publisher": pack.publisher,
        "tray_image_data": _encode(pack.tray_image_data),
        "stickers": [sticker_to_payload(s) for s in pack.stickers],
        "publisher_email": pack.publisher_email,
        "publisher_website": pack.publisher_website,
        "privacy_policy_website": pack.privacy_policy_website,
        "license_agreement_website": pack.license_agreement_website,
        "image_data_version": pack.image_data_version,
        "avoid_cache": pack.avoid_cache,
        "animated_sticker_pack": pack.is_animated,
    }
