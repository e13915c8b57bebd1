"""Typer CLI for sticker pack validation."""

import typer

from stickerpack.cli.commands import check_sticker_command, validate_command

app = typer.Typer(
    name="stickerpack",
    help="Validate sticker packs against the platform's sticker requirements.",
)

app.command(name="validate")(validate_command)
app.command(name="check-sticker")(check_sticker_command)


if __name__ == "__main__":
    app()
