"""Asset loading and image inspection helpers.

Provides the I/O side of sticker handling: reading image files into
bytes, probing image headers for dimensions and format, and building a
small test pack for development.
"""

from __future__ import annotations

import io
import logging
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from stickerpack.domain.value_objects import ImageDimensions, Sticker, StickerPack

logger = logging.getLogger(__name__)

WEBP_SIGNATURE_LENGTH = 12

# Minimal 1x1 RGBA PNG: signature, IHDR and IEND chunks
MINIMAL_PNG: bytes = bytes(
    [
        0x89, 0x50, 0x4E, 0x47, 0x0D, 0x0A, 0x1A, 0x0A,
        0x00, 0x00, 0x00, 0x0D,
        0x49, 0x48, 0x44, 0x52,
        0x00, 0x00, 0x00, 0x01,
        0x00, 0x00, 0x00, 0x01,
        0x08, 0x06, 0x00, 0x00, 0x00,
        0x1F, 0x15, 0xC4, 0x89,
        0x00, 0x00, 0x00, 0x00,
        0x49, 0x45, 0x4E, 0x44,
        0xAE, 0x42, 0x60, 0x82,
    ]
)  # fmt: skip


def load_asset(path: Path) -> bytes:
    """Read an image file into memory.

    Args:
        path: Path to the image file.

    Returns:
        The raw file contents.

    Raises:
        OSError: If the file cannot be read.
    """
    data = path.read_bytes()
    logger.debug(f"Loaded asset {path} ({len(data)} bytes)")
    return data


def load_assets(paths: list[Path]) -> dict[str, bytes]:
    """Read several image files, keyed by the path as given."""
    return {str(path): load_asset(path) for path in paths}


def _open_image(data: bytes) -> Image.Image | None:
    try:
        return Image.open(io.BytesIO(data))
    except (
        UnidentifiedImageError,
        Image.DecompressionBombError,
        OSError,
        ValueError,
    ) as e:
        logger.debug(f"Could not decode image header: {e}")
        return None


def read_image_dimensions(data: bytes) -> ImageDimensions | None:
    """Decode the image header and return its pixel dimensions.

    Only the header is read; pixel data is not decoded.

    Returns:
        ImageDimensions, or None if the data is not a recognizable image.
    """
    image = _open_image(data)
    if image is None:
        return None
    with image:
        width, height = image.size
    return ImageDimensions(width=width, height=height)


def read_image_format(data: bytes) -> str | None:
    """Return the lower-cased format detected from the image header.

    Returns:
        A format name such as "png" or "webp", or None if undecodable.
    """
    image = _open_image(data)
    if image is None or image.format is None:
        return None
    with image:
        return image.format.lower()


def is_likely_animated(data: bytes) -> bool:
    """Heuristic check for a WebP file signature.

    Looks for the RIFF container tag followed by the WEBP form type. This
    does not inspect frames; a static WebP also matches.
    """
    if len(data) < WEBP_SIGNATURE_LENGTH:
        return False
    return data[0:4] == b"RIFF" and data[8:12] == b"WEBP"


def create_test_sticker_pack(
    identifier: str = "test_pack",
    name: str = "Test Stickers",
    publisher: str = "Test Publisher",
) -> StickerPack:
    """Create a minimal valid sticker pack for development and testing.

    The pack holds three static stickers built from a 1x1 PNG, so it passes
    pack validation but not the dimension advisory.
    """
    stickers = tuple(
        Sticker(
            image_file_name=f"test_sticker_{index}.png",
            image_data=MINIMAL_PNG,
            emojis=("😀",),
            accessibility_text=f"Test sticker {index}",
        )
        for index in range(1, 4)
    )
    return StickerPack(
        identifier=identifier,
        name=name,
        publisher=publisher,
        tray_image_data=MINIMAL_PNG,
        stickers=stickers,
    )
