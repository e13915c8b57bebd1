"""Validators subpackage - registry and advisory validators for packs.

The core pack rules live in the domain layer. This package adds:
- DimensionValidator: decoded image dimensions and tray format (warnings)

A ValidatorRegistry runs the pack rules and the advisory validators as
one pass.
"""

from .dimensions import DimensionValidator
from .registry import ValidatorRegistry, default_registry

__all__ = [
    "DimensionValidator",
    "ValidatorRegistry",
    "default_registry",
]
