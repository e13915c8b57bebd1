"""Application layer - manifests, validator registry and submission."""

from .config import ManifestError, load_manifest, manifest_to_packs
from .services import submit_pack
from .validators import (
    DimensionValidator,
    ValidatorRegistry,
    default_registry,
)

__all__ = [
    "DimensionValidator",
    "ManifestError",
    "ValidatorRegistry",
    "default_registry",
    "load_manifest",
    "manifest_to_packs",
    "submit_pack",
]
