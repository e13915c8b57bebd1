"""Check a single sticker image file against the sticker rules."""

from pathlib import Path
from typing import Annotated

import typer

from stickerpack.domain.constants import LIMITS
from stickerpack.domain.services import validate_sticker
from stickerpack.domain.value_objects import Sticker
from stickerpack.infrastructure.assets import load_asset, read_image_dimensions


def check_sticker_command(
    image_file: Annotated[
        Path,
        typer.Argument(help="Path to the sticker image (png or webp)"),
    ],
    emoji: Annotated[
        list[str] | None,
        typer.Option("--emoji", "-e", help="Emoji for the sticker (repeatable)"),
    ] = None,
    accessibility_text: Annotated[
        str | None,
        typer.Option("--accessibility-text", "-a", help="Accessibility description"),
    ] = None,
) -> None:
    """Check one sticker image for format, size, emoji and text limits.

    Exit codes:
        0 - Sticker is valid
        1 - Sticker is invalid or the file cannot be read
    """
    try:
        data = load_asset(image_file)
    except OSError as e:
        typer.echo(f"Error: cannot read {image_file}: {e}", err=True)
        raise typer.Exit(code=1)

    sticker = Sticker(
        image_file_name=image_file.name,
        image_data=data,
        emojis=tuple(emoji or ()),
        accessibility_text=accessibility_text,
    )
    check = validate_sticker(sticker)

    kind = "animated" if sticker.is_animated else "static"
    typer.echo(f"{image_file.name}: {kind}, {sticker.size_in_bytes} bytes")

    dimensions = read_image_dimensions(data)
    if dimensions is not None and not dimensions.matches(LIMITS.sticker_dimensions):
        width, height = LIMITS.sticker_dimensions
        typer.echo(
            f"Warning: image is {dimensions}, stickers should be {width}x{height}"
        )

    if not check.is_valid:
        typer.echo(f"Error: {check.error}", err=True)
        raise typer.Exit(code=1)

    typer.echo("Sticker is valid.")
