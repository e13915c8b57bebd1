"""Tests for sticker pack validation."""

from __future__ import annotations

import pytest

from stickerpack.domain.exceptions import StickerPackValidationError
from stickerpack.domain.results import ValidationResult
from stickerpack.domain.services import (
    PackValidator,
    ensure_valid,
    is_valid_email,
    is_valid_url,
    validate_pack,
)

CARDINALITY_PREFIXES = ("Not enough stickers", "Too many stickers")


class TestValidPacks:
    """Packs within every limit are accepted."""

    def test_minimal_valid_pack(self, make_pack) -> None:
        result = validate_pack(make_pack())

        assert result.is_valid is True
        assert result.errors == ()

    @pytest.mark.parametrize("count", [3, 15, 30])
    def test_static_packs_of_allowed_sizes(self, make_pack, make_sticker, count) -> None:
        stickers = [make_sticker(f"s{i}.png") for i in range(count)]
        assert validate_pack(make_pack(stickers)).is_valid is True

    def test_uniformly_animated_pack(self, make_pack, make_sticker) -> None:
        stickers = [make_sticker(f"s{i}.webp", size=300 * 1024) for i in range(5)]
        assert validate_pack(make_pack(stickers)).is_valid is True

    def test_optional_links_well_formed(self, make_pack) -> None:
        pack = make_pack(
            publisher_email="jo@example.com",
            publisher_website="https://example.com",
            privacy_policy_website="http://example.com/privacy",
            license_agreement_website="https://example.com/license",
        )
        assert validate_pack(pack).is_valid is True

    def test_empty_optional_links_are_skipped(self, make_pack) -> None:
        pack = make_pack(
            publisher_email="",
            publisher_website="",
            privacy_policy_website="",
            license_agreement_website="",
        )
        assert validate_pack(pack).is_valid is True


class TestTextFields:
    """Identifier, name and publisher checks."""

    @pytest.mark.parametrize(
        "field_name,label",
        [("identifier", "Identifier"), ("name", "Name"), ("publisher", "Publisher")],
    )
    def test_empty_field(self, make_pack, field_name: str, label: str) -> None:
        result = validate_pack(make_pack(**{field_name: ""}))

        assert result.errors == (f"{label} cannot be empty",)

    @pytest.mark.parametrize(
        "field_name,label",
        [("identifier", "Identifier"), ("name", "Name"), ("publisher", "Publisher")],
    )
    def test_too_long_field(self, make_pack, field_name: str, label: str) -> None:
        result = validate_pack(make_pack(**{field_name: "x" * 129}))

        assert result.errors == (f"{label} too long (129 chars). Maximum: 128",)

    def test_exactly_128_characters_allowed(self, make_pack) -> None:
        assert validate_pack(make_pack(name="n" * 128)).is_valid is True

    def test_emoji_names_use_utf16_length(self, make_pack) -> None:
        """Each emoji outside the BMP counts as two characters."""
        assert validate_pack(make_pack(name="😀" * 64)).is_valid is True

        result = validate_pack(make_pack(name="😀" * 65))
        assert result.errors == ("Name too long (130 chars). Maximum: 128",)


class TestTrayImage:
    """Tray image checks."""

    def test_empty_tray(self, make_pack) -> None:
        result = validate_pack(make_pack(tray_image_data=b""))

        assert result.errors == ("Tray image data cannot be empty",)

    def test_tray_at_limit(self, make_pack) -> None:
        assert validate_pack(make_pack(tray_image_data=b"\x00" * 51200)).is_valid

    def test_tray_over_limit(self, make_pack) -> None:
        result = validate_pack(make_pack(tray_image_data=b"\x00" * (60 * 1024)))

        assert result.errors == ("Tray image size (60.0 KB) exceeds maximum (50 KB)",)


class TestStickerCount:
    """Sticker count checks."""

    @pytest.mark.parametrize("count", [0, 1, 2, 31, 45])
    def test_exactly_one_cardinality_message(
        self, make_pack, make_sticker, count: int
    ) -> None:
        stickers = [make_sticker(f"s{i}.png") for i in range(count)]
        result = validate_pack(make_pack(stickers))

        cardinality = [e for e in result.errors if e.startswith(CARDINALITY_PREFIXES)]
        assert result.is_valid is False
        assert len(cardinality) == 1

    def test_under_count_message(self, make_pack, make_sticker) -> None:
        result = validate_pack(make_pack([make_sticker("a.png")]))

        assert result.errors == ("Not enough stickers (1). Minimum: 3",)

    def test_over_count_message(self, make_pack, make_sticker) -> None:
        stickers = [make_sticker(f"s{i}.png") for i in range(31)]
        result = validate_pack(make_pack(stickers))

        assert result.errors == ("Too many stickers (31). Maximum: 30",)


class TestPerStickerErrors:
    """Sticker failures are folded in with their position."""

    def test_invalid_sticker_prefixed_with_position(
        self, make_pack, make_sticker
    ) -> None:
        stickers = [
            make_sticker("a.png"),
            make_sticker("b.png", emojis=("1", "2", "3", "4")),
            make_sticker("c.png"),
        ]
        result = validate_pack(make_pack(stickers))

        assert result.errors == ("Sticker 2: Too many emojis (4). Maximum allowed: 3",)

    def test_reordering_relabels_positions(self, make_pack, make_sticker) -> None:
        bad = make_sticker("bad.png", size=200 * 1024)
        good = make_sticker("good.png")

        first = validate_pack(make_pack([bad, good, good]))
        last = validate_pack(make_pack([good, good, bad]))

        assert first.errors[0].startswith("Sticker 1: Image size")
        assert last.errors[0].startswith("Sticker 3: Image size")
        assert first.errors[0][len("Sticker 1") :] == last.errors[0][len("Sticker 3") :]


class TestAnimatedConsistency:
    """Mixing animated and static stickers."""

    def test_one_animated_flags_every_static(self, make_pack, make_sticker) -> None:
        stickers = [
            make_sticker("a.png"),
            make_sticker("b.webp"),
            make_sticker("c.png"),
            make_sticker("d.png"),
        ]
        result = validate_pack(make_pack(stickers))

        assert result.errors == (
            "Sticker 1: Animated pack contains static sticker",
            "Sticker 3: Animated pack contains static sticker",
            "Sticker 4: Animated pack contains static sticker",
        )

    def test_all_static_never_flags(self, make_pack, make_sticker) -> None:
        stickers = [make_sticker(f"s{i}.png") for i in range(4)]
        result = validate_pack(make_pack(stickers))

        assert not any("pack contains" in e for e in result.errors)

    def test_consistency_reported_after_sticker_reason(
        self, make_pack, make_sticker
    ) -> None:
        """Both the sticker's own reason and the mismatch are reported."""
        stickers = [
            make_sticker("a.png", size=200 * 1024),
            make_sticker("b.webp"),
            make_sticker("c.webp"),
        ]
        result = validate_pack(make_pack(stickers))

        assert result.errors == (
            "Sticker 1: Image size (200.0 KB) exceeds maximum allowed size (100 KB)",
            "Sticker 1: Animated pack contains static sticker",
        )


class TestLinks:
    """URL and email checks."""

    def test_email_shape_is_the_only_error(self, make_pack) -> None:
        result = validate_pack(make_pack(publisher_email="not-an-email"))

        assert result.errors == ("Publisher email is not valid: not-an-email",)

    @pytest.mark.parametrize(
        "field_name,label",
        [
            ("publisher_website", "Publisher website"),
            ("privacy_policy_website", "Privacy policy website"),
            ("license_agreement_website", "License agreement website"),
        ],
    )
    def test_bad_url_names_field_and_value(
        self, make_pack, field_name: str, label: str
    ) -> None:
        result = validate_pack(make_pack(**{field_name: "ftp://example.com"}))

        assert result.errors == (f"{label} is not a valid URL: ftp://example.com",)

    def test_url_order(self, make_pack) -> None:
        pack = make_pack(
            license_agreement_website="nope",
            publisher_website="nope",
            publisher_email="x",
        )
        result = validate_pack(pack)

        assert result.errors == (
            "Publisher website is not a valid URL: nope",
            "License agreement website is not a valid URL: nope",
            "Publisher email is not valid: x",
        )

    @pytest.mark.parametrize(
        "url,expected",
        [
            ("https://example.com", True),
            ("http://example.com/a?b=c", True),
            ("HTTPS://EXAMPLE.COM", True),
            ("example.com", False),
            ("mailto:jo@example.com", False),
            ("http://[::1", False),
        ],
    )
    def test_is_valid_url(self, url: str, expected: bool) -> None:
        assert is_valid_url(url) is expected

    @pytest.mark.parametrize(
        "email,expected",
        [
            ("jo@example.com", True),
            ("a@b.c", True),
            ("jo@@example.com", False),
            ("jo@example", False),
            ("@example.com", False),
            ("jo@.com", False),
        ],
    )
    def test_is_valid_email(self, email: str, expected: bool) -> None:
        assert is_valid_email(email) is expected

    def test_email_check_stays_lax(self) -> None:
        """Shapes a strict validator would reject are still accepted."""
        assert is_valid_email("a b@c d.e f") is True


class TestAccumulation:
    """Every check runs regardless of earlier failures."""

    def test_all_checks_reported_in_order(self, make_pack, make_sticker) -> None:
        pack = make_pack(
            [make_sticker("a.jpg")],
            identifier="",
            name="n" * 200,
            publisher="",
            tray_image_data=b"",
            publisher_website="bad",
            publisher_email="bad",
        )
        result = validate_pack(pack)

        assert result.errors == (
            "Identifier cannot be empty",
            "Name too long (200 chars). Maximum: 128",
            "Publisher cannot be empty",
            "Tray image data cannot be empty",
            "Not enough stickers (1). Minimum: 3",
            "Sticker 1: Unsupported image format: jpg. Supported formats: png, webp",
            "Publisher website is not a valid URL: bad",
            "Publisher email is not valid: bad",
        )

    def test_idempotent(self, make_pack, make_sticker) -> None:
        pack = make_pack([make_sticker("a.webp"), make_sticker("b.png")])
        assert validate_pack(pack) == validate_pack(pack)


class TestPackValidatorAndEnsureValid:
    """Tests for the class wrapper and the raising helper."""

    def test_pack_validator_name(self) -> None:
        assert PackValidator().name == "pack"

    def test_pack_validator_delegates(self, make_pack) -> None:
        result = PackValidator().validate(make_pack(name=""))

        assert isinstance(result, ValidationResult)
        assert result.errors == ("Name cannot be empty",)

    def test_ensure_valid_returns_pack(self, make_pack) -> None:
        pack = make_pack()
        assert ensure_valid(pack) is pack

    def test_ensure_valid_raises_with_errors(self, make_pack) -> None:
        with pytest.raises(StickerPackValidationError) as exc_info:
            ensure_valid(make_pack(identifier="", name=""))

        assert exc_info.value.code == "validation_failed"
        assert exc_info.value.validation_errors == [
            "Identifier cannot be empty",
            "Name cannot be empty",
        ]
        assert "  - Name cannot be empty" in str(exc_info.value)
