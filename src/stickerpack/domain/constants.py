"""Sticker pack constraint table.

These limits reflect the constraints imposed by the host messaging platform
on sticker packs. They are fixed by the platform and must not be tuned.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ValidationLimits:
    """Read-only table of sticker and pack constraints.

    Sizes are in bytes, dimensions are (width, height) in pixels and text
    limits are in characters.
    """

    # ==========================================================================
    # File sizes
    # ==========================================================================

    max_static_sticker_size: int = 100 * 1024
    max_animated_sticker_size: int = 500 * 1024
    max_tray_image_size: int = 50 * 1024

    # ==========================================================================
    # Image dimensions
    # ==========================================================================

    sticker_dimensions: tuple[int, int] = (512, 512)
    tray_image_dimensions: tuple[int, int] = (96, 96)

    # ==========================================================================
    # Cardinality and text
    # ==========================================================================

    min_stickers_per_pack: int = 3
    max_stickers_per_pack: int = 30
    max_character_limit: int = 128
    max_emojis_per_sticker: int = 3
    max_static_accessibility_text_length: int = 125
    max_animated_accessibility_text_length: int = 255

    # ==========================================================================
    # Animation timing (milliseconds)
    # ==========================================================================

    min_animated_frame_duration_ms: int = 8
    max_animated_total_duration_ms: int = 10000

    # ==========================================================================
    # Formats
    # ==========================================================================

    supported_image_formats: frozenset[str] = frozenset({"png", "webp"})
    supported_tray_image_formats: frozenset[str] = frozenset({"png"})

    def max_sticker_size(self, animated: bool) -> int:
        """Size limit in bytes for a static or animated sticker."""
        if animated:
            return self.max_animated_sticker_size
        return self.max_static_sticker_size

    def max_accessibility_text_length(self, animated: bool) -> int:
        """Accessibility text limit for a static or animated sticker."""
        if animated:
            return self.max_animated_accessibility_text_length
        return self.max_static_accessibility_text_length


LIMITS: ValidationLimits = ValidationLimits()
