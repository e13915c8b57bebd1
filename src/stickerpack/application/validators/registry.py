"""Validator registry combining the pack rules with advisory validators.

The pack rules always run and alone decide whether a pack is valid.
Advisory validators add findings on top of that verdict; whatever they
report, and any exception they raise, is surfaced as a warning.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from stickerpack.domain.constants import LIMITS, ValidationLimits
from stickerpack.domain.results import ValidationResult
from stickerpack.domain.services.pack_validator import PackValidator

if TYPE_CHECKING:
    from stickerpack.contracts.validators import Validator
    from stickerpack.domain.value_objects import StickerPack

logger = logging.getLogger(__name__)


class ValidatorRegistry:
    """Pack rules plus named advisory validators.

    Each registry owns its validators, so callers that build their own
    registry never see each other's registrations.

    Example:
        registry = ValidatorRegistry()
        registry.register(DimensionValidator())
        result = registry.validate_all(pack)
    """

    def __init__(self, limits: ValidationLimits = LIMITS) -> None:
        self.rules = PackValidator(limits)
        self._advisories: dict[str, Validator] = {}

    def register(self, validator: Validator) -> None:
        """Register an advisory validator.

        Raises:
            ValueError: If the validator uses the name of the pack rules.
        """
        name = validator.name
        if name == self.rules.name:
            raise ValueError(f"Validator name '{name}' is reserved for the pack rules")
        if name in self._advisories:
            logger.warning(f"Overwriting existing validator '{name}'")
        self._advisories[name] = validator
        logger.debug(f"Registered validator '{name}': {type(validator).__name__}")

    def get(self, name: str) -> Validator:
        """Get a validator by name, the pack rules included.

        Raises:
            KeyError: If no validator is registered with that name.
        """
        if name == self.rules.name:
            return self.rules
        if name not in self._advisories:
            raise KeyError(
                f"No validator registered with name '{name}'. "
                f"Available validators: {', '.join(self.available())}"
            )
        return self._advisories[name]

    def available(self) -> list[str]:
        """Sorted names of the pack rules and every advisory validator."""
        return sorted([self.rules.name, *self._advisories])

    def validate_all(self, pack: StickerPack) -> ValidationResult:
        """Run the pack rules, then every advisory validator in name order.

        Returns:
            The pack rules' errors, with the advisory findings appended to
            the warnings.
        """
        verdict = self.rules.validate(pack)
        warnings = list(verdict.warnings)

        for name in sorted(self._advisories):
            logger.debug(f"Running validator '{name}' on pack '{pack.identifier}'")
            try:
                advisory = self._advisories[name].validate(pack)
            except Exception as e:
                logger.warning(f"Validator '{name}' raised an exception: {e}")
                warnings.append(f"Validator '{name}' failed: {e}")
                continue
            warnings.extend(advisory.errors)
            warnings.extend(advisory.warnings)

        return ValidationResult(errors=verdict.errors, warnings=tuple(warnings))


def default_registry(limits: ValidationLimits = LIMITS) -> ValidatorRegistry:
    """Build a registry with the dimension advisory registered."""
    from .dimensions import DimensionValidator

    registry = ValidatorRegistry(limits)
    registry.register(DimensionValidator(limits))
    return registry
