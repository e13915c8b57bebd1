"""Image dimension advisory for sticker packs.

Pack validation works on bytes and file names only. This validator decodes
image headers to compare pixel dimensions and the tray format with the
platform requirements. Its findings are reported as warnings so that the
pack verdict never depends on image decoding.
"""

from __future__ import annotations

from stickerpack.domain.constants import LIMITS, ValidationLimits
from stickerpack.domain.results import ValidationResult
from stickerpack.domain.value_objects import StickerPack
from stickerpack.infrastructure.assets import read_image_dimensions, read_image_format


def _expected(dimensions: tuple[int, int]) -> str:
    return f"{dimensions[0]}x{dimensions[1]}"


class DimensionValidator:
    """Validator for decoded image dimensions.

    Validates against:
    - Tray image must decode as a supported tray format (PNG)
    - Tray image must be 96x96 pixels
    - Every sticker must be 512x512 pixels
    """

    def __init__(self, limits: ValidationLimits = LIMITS) -> None:
        self.limits = limits

    @property
    def name(self) -> str:
        """Return the validator name."""
        return "dimensions"

    def validate(self, pack: StickerPack) -> ValidationResult:
        """Compare decoded image dimensions with the required sizes.

        Args:
            pack: The sticker pack to inspect.

        Returns:
            ValidationResult containing warnings only.
        """
        warnings: list[str] = []

        self._check_tray(pack, warnings)

        for position, sticker in enumerate(pack.stickers, start=1):
            dimensions = read_image_dimensions(sticker.image_data)
            if dimensions is None:
                warnings.append(
                    f"Sticker {position}: Image dimensions could not be determined"
                )
            elif not dimensions.matches(self.limits.sticker_dimensions):
                warnings.append(
                    f"Sticker {position}: Image dimensions ({dimensions}) do not "
                    f"match required dimensions "
                    f"({_expected(self.limits.sticker_dimensions)})"
                )

        return ValidationResult.ok(warnings)

    def _check_tray(self, pack: StickerPack, warnings: list[str]) -> None:
        """Check tray image format and dimensions."""
        if not pack.tray_image_data:
            # Reported as an error by pack validation
            return

        image_format = read_image_format(pack.tray_image_data)
        if image_format is None:
            warnings.append("Tray image: Image dimensions could not be determined")
            return

        if image_format not in self.limits.supported_tray_image_formats:
            supported = ", ".join(sorted(self.limits.supported_tray_image_formats))
            warnings.append(
                f"Tray image: Unsupported image format: {image_format}. "
                f"Supported formats: {supported}"
            )

        dimensions = read_image_dimensions(pack.tray_image_data)
        if dimensions is not None and not dimensions.matches(
            self.limits.tray_image_dimensions
        ):
            warnings.append(
                f"Tray image: Image dimensions ({dimensions}) do not match "
                f"required dimensions ({_expected(self.limits.tray_image_dimensions)})"
            )
