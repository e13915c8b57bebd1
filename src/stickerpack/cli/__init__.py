"""Command line interface for stickerpack."""
