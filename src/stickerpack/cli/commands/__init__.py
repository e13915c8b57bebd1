"""CLI command implementations for the stickerpack application.

This package contains subcommands for the stickerpack CLI, including:
- validate: Validate a sticker manifest and its packs
- check-sticker: Check a single sticker image
"""

from stickerpack.cli.commands.check_sticker import check_sticker_command
from stickerpack.cli.commands.validate import validate_command

__all__ = ["check_sticker_command", "validate_command"]
