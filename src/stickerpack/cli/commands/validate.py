"""Validate command for checking sticker manifests.

This module provides the `validate` command that loads a JSON manifest,
reads the referenced images and checks every pack for errors and
dimension warnings.
"""

import logging
from pathlib import Path
from typing import Annotated

import typer

from stickerpack.application.config import (
    ManifestError,
    load_manifest,
    manifest_to_packs,
)
from stickerpack.application.validators import default_registry
from stickerpack.domain.results import ValidationResult
from stickerpack.domain.value_objects import StickerPack


def validate_command(
    manifest_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON sticker manifest to validate"),
    ],
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Validate a sticker manifest and the packs it describes.

    Checks the manifest for:
    - JSON syntax errors
    - Schema errors (missing fields, unknown fields, bad tray format)
    - Missing image files
    - Pack rules (text lengths, sticker count, sizes, emojis, links)
    - Image dimension advisories

    Exit codes:
        0 - All packs are valid with no warnings
        1 - The manifest could not be loaded or a pack has errors
        2 - All packs are valid but there are warnings

    Example:
        stickerpack validate contents.json
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG)

    typer.echo(f"Validating {manifest_file}...")
    typer.echo()

    try:
        manifest = load_manifest(manifest_file)
        packs = manifest_to_packs(manifest, manifest_file.parent)
    except ManifestError as e:
        _display_load_error(e)
        raise typer.Exit(code=1)

    registry = default_registry()

    results: list[ValidationResult] = []
    for pack in packs:
        result = registry.validate_all(pack)
        _display_pack_result(pack, result)
        results.append(result)

    _display_summary(results)
    raise typer.Exit(code=_exit_code(results))


def _exit_code(results: list[ValidationResult]) -> int:
    """Combine per-pack exit codes, errors taking precedence over warnings."""
    codes = {result.exit_code for result in results}
    if 1 in codes:
        return 1
    if 2 in codes:
        return 2
    return 0


def _display_load_error(error: ManifestError) -> None:
    """Display a manifest loading error."""
    typer.echo("Errors:", err=True)
    if error.error_type == "file_not_found":
        typer.echo(f"  File not found: {error.path}", err=True)
    elif error.error_type == "json_parse":
        typer.echo("  Invalid JSON syntax", err=True)
        for detail in error.details:
            line = detail.get("line", "?")
            column = detail.get("column", "?")
            message = detail.get("message", "Unknown error")
            typer.echo(f"    Line {line}, Column {column}: {message}", err=True)
    elif error.error_type in ("validation", "asset_missing"):
        for detail in error.details:
            path = detail.get("path", "unknown")
            message = detail.get("message", "Unknown error")
            typer.echo(f"  {path}: {message}", err=True)
        if error.error_type == "asset_missing":
            typer.echo(f"    File: {error.path}", err=True)
    else:
        typer.echo(f"  {error.message}", err=True)

    typer.echo()
    typer.echo("Validation failed.", err=True)


def _display_pack_result(pack: StickerPack, result: ValidationResult) -> None:
    """Display errors and warnings for a single pack."""
    kind = "animated" if pack.is_animated else "static"
    typer.echo(
        f"Pack '{pack.identifier}': {len(pack.stickers)} {kind} sticker(s), "
        f"{pack.formatted_size}"
    )

    if result.errors:
        typer.echo("Errors:", err=True)
        for error in result.errors:
            typer.echo(f"  {error}", err=True)

    if result.warnings:
        typer.echo("Warnings:")
        for warning in result.warnings:
            typer.echo(f"  {warning}")

    typer.echo()


def _display_summary(results: list[ValidationResult]) -> None:
    """Display the overall validation summary."""
    error_count = sum(len(r.errors) for r in results)
    warning_count = sum(len(r.warnings) for r in results)

    if error_count:
        typer.echo(
            f"Validation failed: {error_count} error(s), {warning_count} warning(s)",
            err=True,
        )
    elif warning_count:
        typer.echo(f"Validation passed with {warning_count} warning(s)")
    else:
        typer.echo(f"Validation passed. {len(results)} pack(s) valid.")
