"""Tests for asset loading, image probing and wire payloads."""

from __future__ import annotations

import base64
import json
from pathlib import Path

from stickerpack.domain.services import validate_pack
from stickerpack.domain.value_objects import ImageDimensions, Sticker, StickerPack
from stickerpack.infrastructure import (
    MINIMAL_PNG,
    create_test_sticker_pack,
    is_likely_animated,
    load_asset,
    load_assets,
    pack_to_payload,
    read_image_dimensions,
    read_image_format,
)


class TestLoadAsset:
    """Tests for reading files from disk."""

    def test_load_asset(self, tmp_path: Path) -> None:
        path = tmp_path / "a.png"
        path.write_bytes(b"data")

        assert load_asset(path) == b"data"

    def test_load_assets_keyed_by_path(self, tmp_path: Path) -> None:
        first = tmp_path / "a.png"
        second = tmp_path / "b.png"
        first.write_bytes(b"1")
        second.write_bytes(b"2")

        assets = load_assets([first, second])

        assert assets == {str(first): b"1", str(second): b"2"}


class TestImageProbing:
    """Tests for dimension and format detection."""

    def test_png_dimensions(self, make_image) -> None:
        data = make_image(512, 512)
        assert read_image_dimensions(data) == ImageDimensions(512, 512)

    def test_webp_dimensions_and_format(self, make_image) -> None:
        data = make_image(64, 32, "WEBP")

        assert read_image_dimensions(data) == ImageDimensions(64, 32)
        assert read_image_format(data) == "webp"

    def test_png_format(self, make_image) -> None:
        assert read_image_format(make_image(4, 4)) == "png"

    def test_garbage_returns_none(self) -> None:
        assert read_image_dimensions(b"not an image") is None
        assert read_image_format(b"not an image") is None

    def test_empty_returns_none(self) -> None:
        assert read_image_dimensions(b"") is None

    def test_oversized_header_returns_none(self, make_png_header) -> None:
        """Pillow refuses headers past its pixel limit; treat them as undecodable."""
        data = make_png_header(20000, 20000)

        assert read_image_dimensions(data) is None
        assert read_image_format(data) is None


class TestIsLikelyAnimated:
    """Tests for the WebP signature heuristic."""

    def test_webp_signature(self, make_image) -> None:
        assert is_likely_animated(make_image(8, 8, "WEBP")) is True

    def test_png_is_not(self, make_image) -> None:
        assert is_likely_animated(make_image(8, 8)) is False

    def test_short_data(self) -> None:
        assert is_likely_animated(b"RIFF") is False

    def test_riff_without_webp(self) -> None:
        assert is_likely_animated(b"RIFF\x00\x00\x00\x00WAVE") is False


class TestCreateTestStickerPack:
    """Tests for the development sample pack."""

    def test_defaults(self) -> None:
        pack = create_test_sticker_pack()

        assert pack.identifier == "test_pack"
        assert pack.name == "Test Stickers"
        assert pack.publisher == "Test Publisher"
        assert len(pack.stickers) == 3
        assert pack.stickers[0].image_file_name == "test_sticker_1.png"
        assert pack.stickers[2].accessibility_text == "Test sticker 3"
        assert pack.stickers[1].emojis == ("😀",)
        assert pack.tray_image_data == MINIMAL_PNG

    def test_is_valid(self) -> None:
        assert validate_pack(create_test_sticker_pack()).is_valid is True

    def test_custom_identity(self) -> None:
        pack = create_test_sticker_pack("dogs", "Dogs", "Sam")
        assert (pack.identifier, pack.name, pack.publisher) == ("dogs", "Dogs", "Sam")


class TestPackToPayload:
    """Tests for the wire payload."""

    def test_payload_is_json_ready(self) -> None:
        pack = StickerPack(
            identifier="cats",
            name="Cats",
            publisher="Jo",
            tray_image_data=b"tray",
            stickers=(Sticker("a.webp", b"img", ("😀",), "A cat"),),
            publisher_email="jo@example.com",
            avoid_cache=True,
        )

        payload = pack_to_payload(pack)
        json.dumps(payload)

        assert payload["tray_image_data"] == base64.b64encode(b"tray").decode()
        assert payload["stickers"] == [
            {
                "image_file_name": "a.webp",
                "image_data": base64.b64encode(b"img").decode(),
                "emojis": ["😀"],
                "accessibility_text": "A cat",
            }
        ]
        assert payload["animated_sticker_pack"] is True
        assert payload["avoid_cache"] is True
        assert payload["image_data_version"] == "1"
        assert payload["publisher_website"] is None
