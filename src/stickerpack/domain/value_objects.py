"""Value objects for the sticker pack domain."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any


@dataclass(frozen=True)
class ImageDimensions:
    """Decoded pixel dimensions of an image."""

    width: int
    height: int

    def matches(self, expected: tuple[int, int]) -> bool:
        """Check whether these dimensions equal an expected (width, height)."""
        return (self.width, self.height) == expected

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"


@dataclass(frozen=True)
class Sticker:
    """A single sticker image with its metadata.

    The image format is carried by the file extension: ``png`` stickers are
    static and ``webp`` stickers are animated. No frame inspection is done.

    Attributes:
        image_file_name: File name of the image, including extension.
        image_data: Raw image bytes.
        emojis: Emojis associated with the sticker.
        accessibility_text: Optional description for accessibility features.
    """

    image_file_name: str
    image_data: bytes
    emojis: tuple[str, ...] = field(default_factory=tuple)
    accessibility_text: str | None = None

    def __post_init__(self) -> None:
        # Accept lists from callers while keeping the object hashable
        if not isinstance(self.emojis, tuple):
            object.__setattr__(self, "emojis", tuple(self.emojis))
        if not isinstance(self.image_data, bytes):
            object.__setattr__(self, "image_data", bytes(self.image_data))

    @property
    def file_extension(self) -> str:
        """Lower-cased extension of the image file name, or empty string."""
        if "." not in self.image_file_name:
            return ""
        return self.image_file_name.rsplit(".", 1)[-1].lower()

    @property
    def is_animated(self) -> bool:
        """Whether this sticker uses the animated format (webp)."""
        return self.file_extension == "webp"

    @property
    def size_in_bytes(self) -> int:
        """Size of the image data in bytes."""
        return len(self.image_data)

    def with_changes(self, **changes: Any) -> Sticker:
        """Return a copy of this sticker with the given fields replaced."""
        return replace(self, **changes)

    def __repr__(self) -> str:
        return (
            f"Sticker(image_file_name={self.image_file_name!r}, "
            f"emojis={list(self.emojis)!r}, "
            f"accessibility_text={self.accessibility_text!r}, "
            f"size_in_bytes={self.size_in_bytes})"
        )


@dataclass(frozen=True)
class StickerPack:
    """A bundle of stickers plus the metadata submitted with it.

    Attributes:
        identifier: Identifier of the pack, intended to be globally unique.
        name: Display name of the pack.
        publisher: Publisher or creator of the pack.
        tray_image_data: Raw bytes of the tray icon (96x96 PNG).
        stickers: Stickers in the pack. Order only matters for error reporting.
        publisher_email: Optional publisher contact email.
        publisher_website: Optional publisher website URL.
        privacy_policy_website: Optional privacy policy URL.
        license_agreement_website: Optional license agreement URL.
        image_data_version: Opaque version tag of the image data.
        avoid_cache: Whether the host application should skip caching.
    """

    identifier: str
    name: str
    publisher: str
    tray_image_data: bytes
    stickers: tuple[Sticker, ...] = field(default_factory=tuple)
    publisher_email: str | None = None
    publisher_website: str | None = None
    privacy_policy_website: str | None = None
    license_agreement_website: str | None = None
    image_data_version: str = "1"
    avoid_cache: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.stickers, tuple):
            object.__setattr__(self, "stickers", tuple(self.stickers))
        if not isinstance(self.tray_image_data, bytes):
            object.__setattr__(self, "tray_image_data", bytes(self.tray_image_data))

    @property
    def is_animated(self) -> bool:
        """True if any sticker in the pack is animated."""
        return any(sticker.is_animated for sticker in self.stickers)

    @property
    def total_size_in_bytes(self) -> int:
        """Tray image size plus the size of every sticker."""
        return len(self.tray_image_data) + sum(
            sticker.size_in_bytes for sticker in self.stickers
        )

    @property
    def formatted_size(self) -> str:
        """Human readable total size in KB or MB."""
        size_kb = self.total_size_in_bytes / 1024
        if size_kb < 1024:
            return f"{size_kb:.1f} KB"
        return f"{size_kb / 1024:.1f} MB"

    def with_changes(self, **changes: Any) -> StickerPack:
        """Return a copy of this pack with the given fields replaced."""
        return replace(self, **changes)

    def __repr__(self) -> str:
        return (
            f"StickerPack(identifier={self.identifier!r}, "
            f"name={self.name!r}, "
            f"publisher={self.publisher!r}, "
            f"stickers={len(self.stickers)}, "
            f"is_animated={self.is_animated}, "
            f"total_size={self.formatted_size!r})"
        )
