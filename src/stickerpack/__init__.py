"""Sticker pack validation against the platform's sticker requirements."""

__version__ = "1.0.0"
