"""Validator protocol for sticker pack validation.

This module defines the protocol that all pack validators must implement,
enabling consistent validation across different validation concerns.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from stickerpack.domain.results import ValidationResult
    from stickerpack.domain.value_objects import StickerPack


@runtime_checkable
class Validator(Protocol):
    """Protocol for sticker pack validators.

    Validators check specific aspects of a StickerPack and return a
    ValidationResult containing any errors or warnings found.

    Attributes:
        name: Unique identifier for the validator (e.g., "pack", "dimensions").

    Example:
        class MyValidator:
            @property
            def name(self) -> str:
                return "my_validator"

            def validate(self, pack: StickerPack) -> ValidationResult:
                if problem_found:
                    return ValidationResult.fail(["Description of problem"])
                return ValidationResult.ok()
    """

    @property
    def name(self) -> str:
        """Return the unique name/identifier for this validator."""
        ...

    def validate(self, pack: StickerPack) -> ValidationResult:
        """Validate the given pack.

        Args:
            pack: A StickerPack instance to validate.

        Returns:
            ValidationResult containing any errors or warnings found.
        """
        ...
