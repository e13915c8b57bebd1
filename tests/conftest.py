"""Pytest configuration and shared fixtures for sticker pack tests."""

from __future__ import annotations

import io
import struct
import zlib
from typing import Callable

import pytest
from PIL import Image

from stickerpack.domain.value_objects import Sticker, StickerPack


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: end-to-end tests through the CLI or REST API"
    )


# =============================================================================
# Image helpers
# =============================================================================


def make_image_bytes(width: int, height: int, image_format: str = "PNG") -> bytes:
    """Render a solid-color RGBA image and return its encoded bytes."""
    buffer = io.BytesIO()
    Image.new("RGBA", (width, height), (255, 0, 0, 255)).save(buffer, image_format)
    return buffer.getvalue()


def _png_chunk(chunk_type: bytes, payload: bytes) -> bytes:
    crc = zlib.crc32(chunk_type + payload)
    return struct.pack(">I", len(payload)) + chunk_type + payload + struct.pack(">I", crc)


def png_header_bytes(width: int, height: int) -> bytes:
    """Build a PNG holding only a header that claims the given size."""
    ihdr = struct.pack(">IIBBBBB", width, height, 8, 6, 0, 0, 0)
    return (
        b"\x89PNG\r\n\x1a\n"
        + _png_chunk(b"IHDR", ihdr)
        + _png_chunk(b"IEND", b"")
    )


@pytest.fixture(scope="session")
def sticker_png() -> bytes:
    """A 512x512 PNG, well under the static size limit."""
    return make_image_bytes(512, 512)


@pytest.fixture(scope="session")
def tray_png() -> bytes:
    """A 96x96 PNG tray icon."""
    return make_image_bytes(96, 96)


# =============================================================================
# Domain factories
# =============================================================================


@pytest.fixture
def make_sticker() -> Callable[..., Sticker]:
    """Factory for stickers with sensible defaults."""

    def _make(
        file_name: str = "sticker.png",
        size: int = 1024,
        emojis: tuple[str, ...] = ("😀",),
        accessibility_text: str | None = None,
        data: bytes | None = None,
    ) -> Sticker:
        return Sticker(
            image_file_name=file_name,
            image_data=data if data is not None else b"\x00" * size,
            emojis=emojis,
            accessibility_text=accessibility_text,
        )

    return _make


@pytest.fixture
def make_pack(make_sticker: Callable[..., Sticker]) -> Callable[..., StickerPack]:
    """Factory for packs that are valid unless overridden."""

    def _make(stickers: list[Sticker] | None = None, **overrides: object) -> StickerPack:
        if stickers is None:
            stickers = [make_sticker(f"sticker_{i}.png") for i in range(1, 4)]
        fields: dict[str, object] = {
            "identifier": "cats",
            "name": "Cats",
            "publisher": "Jo Doe",
            "tray_image_data": b"\x89PNG" + b"\x00" * 100,
        }
        fields.update(overrides)
        return StickerPack(stickers=tuple(stickers), **fields)  # type: ignore[arg-type]

    return _make


@pytest.fixture
def make_image() -> Callable[..., bytes]:
    """Factory for encoded images of a given size and format."""
    return make_image_bytes


@pytest.fixture
def make_png_header() -> Callable[[int, int], bytes]:
    """Factory for header-only PNGs, used to claim huge dimensions cheaply."""
    return png_header_bytes
