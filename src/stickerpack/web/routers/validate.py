"""Sticker, pack and manifest validation endpoints."""

from fastapi import APIRouter

from stickerpack.application.config import load_manifest_from_dict
from stickerpack.domain.services import validate_sticker
from stickerpack.domain.value_objects import Sticker, StickerPack
from stickerpack.web.dependencies import RegistryDep
from stickerpack.web.schemas.requests import (
    ManifestValidateRequest,
    PackValidateRequest,
    StickerSchema,
)
from stickerpack.web.schemas.responses import (
    ManifestValidationSchema,
    PackValidationSchema,
    StickerValidationSchema,
)

router = APIRouter(prefix="/validate", tags=["validate"])


def _to_sticker(schema: StickerSchema) -> Sticker:
    return Sticker(
        image_file_name=schema.image_file_name,
        image_data=schema.image_data,
        emojis=tuple(schema.emojis),
        accessibility_text=schema.accessibility_text,
    )


def _to_pack(request: PackValidateRequest) -> StickerPack:
    return StickerPack(
        identifier=request.identifier,
        name=request.name,
        publisher=request.publisher,
        tray_image_data=request.tray_image_data,
        stickers=tuple(_to_sticker(s) for s in request.stickers),
        publisher_email=request.publisher_email,
        publisher_website=request.publisher_website,
        privacy_policy_website=request.privacy_policy_website,
        license_agreement_website=request.license_agreement_website,
        image_data_version=request.image_data_version,
        avoid_cache=request.avoid_cache,
    )


@router.post("", response_model=PackValidationSchema)
async def validate_pack_endpoint(
    request: PackValidateRequest,
    registry: RegistryDep,
) -> PackValidationSchema:
    """Validate a sticker pack, including dimension advisories.

    Args:
        request: Pack with base64-encoded images.

    Returns:
        Validation result with errors and warnings.
    """
    pack = _to_pack(request)
    result = registry.validate_all(pack)

    return PackValidationSchema(
        is_valid=result.is_valid,
        errors=list(result.errors),
        warnings=list(result.warnings),
        is_animated=pack.is_animated,
        total_size=pack.formatted_size,
    )


@router.post("/sticker", response_model=StickerValidationSchema)
async def validate_sticker_endpoint(
    request: StickerSchema,
) -> StickerValidationSchema:
    """Validate a single sticker.

    Returns:
        Validation result carrying the first rule violated, if any.
    """
    check = validate_sticker(_to_sticker(request))
    return StickerValidationSchema(is_valid=check.is_valid, error=check.error)


@router.post("/manifest", response_model=ManifestValidationSchema)
async def validate_manifest_endpoint(
    request: ManifestValidateRequest,
) -> ManifestValidationSchema:
    """Check the structure of a manifest without reading any images.

    Raises:
        ManifestError: If the manifest does not match the schema. Handled
            as a 422 response.
    """
    manifest = load_manifest_from_dict(request.manifest)

    image_files: list[str] = []
    for pack in manifest.sticker_packs:
        image_files.append(pack.tray_image_file)
        image_files.extend(sticker.image_file for sticker in pack.stickers)

    return ManifestValidationSchema(
        is_valid=True,
        pack_identifiers=[pack.identifier for pack in manifest.sticker_packs],
        image_files=image_files,
    )
