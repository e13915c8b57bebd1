"""Adapter from manifest models to domain sticker packs.

Image files are resolved relative to the manifest's directory and read
into memory, producing fully-formed StickerPack values ready for
validation.
"""

from __future__ import annotations

import logging
from pathlib import Path

from stickerpack.application.config.loader import ManifestError
from stickerpack.application.config.schema import (
    StickerConfig,
    StickerManifest,
    StickerPackConfig,
)
from stickerpack.domain.value_objects import Sticker, StickerPack
from stickerpack.infrastructure.assets import load_asset

logger = logging.getLogger(__name__)


def _read_asset(base_dir: Path, file_name: str, json_path: str) -> bytes:
    """Read an asset referenced by the manifest.

    Raises:
        ManifestError: If the file is missing or unreadable.
    """
    asset_path = base_dir / file_name
    if not asset_path.is_file():
        raise ManifestError(
            message=f"Asset file not found: {asset_path}",
            error_type="asset_missing",
            path=asset_path,
            details=[{"path": json_path, "message": "Asset file not found"}],
        )
    try:
        return load_asset(asset_path)
    except OSError as e:
        raise ManifestError(
            message=f"Error reading asset file: {asset_path}: {e}",
            error_type="file_read_error",
            path=asset_path,
            details=[{"path": json_path, "message": str(e)}],
        )


def config_to_sticker(
    config: StickerConfig, base_dir: Path, json_path: str = "sticker"
) -> Sticker:
    """Build a Sticker from its manifest entry."""
    return Sticker(
        image_file_name=Path(config.image_file).name,
        image_data=_read_asset(base_dir, config.image_file, f"{json_path}.image_file"),
        emojis=tuple(config.emojis),
        accessibility_text=config.accessibility_text,
    )


def config_to_pack(
    config: StickerPackConfig, base_dir: Path, json_path: str = "sticker_pack"
) -> StickerPack:
    """Build a StickerPack from its manifest entry.

    Args:
        config: The pack entry from the manifest.
        base_dir: Directory that asset paths are relative to.
        json_path: Location of the entry, used in error details.

    Raises:
        ManifestError: If any referenced asset cannot be read.
    """
    tray = _read_asset(base_dir, config.tray_image_file, f"{json_path}.tray_image_file")
    stickers = tuple(
        config_to_sticker(sticker, base_dir, f"{json_path}.stickers[{i}]")
        for i, sticker in enumerate(config.stickers)
    )
    logger.debug(
        f"Built pack '{config.identifier}' with {len(stickers)} stickers from {base_dir}"
    )
    return StickerPack(
        identifier=config.identifier,
        name=config.name,
        publisher=config.publisher,
        tray_image_data=tray,
        stickers=stickers,
        publisher_email=config.publisher_email,
        publisher_website=config.publisher_website,
        privacy_policy_website=config.privacy_policy_website,
        license_agreement_website=config.license_agreement_website,
        image_data_version=config.image_data_version,
        avoid_cache=config.avoid_cache,
    )


def manifest_to_packs(manifest: StickerManifest, base_dir: Path) -> list[StickerPack]:
    """Build every StickerPack described by a manifest."""
    return [
        config_to_pack(pack, base_dir, f"sticker_packs[{i}]")
        for i, pack in enumerate(manifest.sticker_packs)
    ]
