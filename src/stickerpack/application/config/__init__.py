"""Manifest configuration - loading JSON manifests into sticker packs."""

from .adapter import config_to_pack, config_to_sticker, manifest_to_packs
from .loader import ManifestError, load_manifest, load_manifest_from_dict
from .schema import (
    SUPPORTED_VERSIONS,
    StickerConfig,
    StickerManifest,
    StickerPackConfig,
)

__all__ = [
    "ManifestError",
    "SUPPORTED_VERSIONS",
    "StickerConfig",
    "StickerManifest",
    "StickerPackConfig",
    "config_to_pack",
    "config_to_sticker",
    "load_manifest",
    "load_manifest_from_dict",
    "manifest_to_packs",
]
