"""FastAPI REST API for sticker pack validation.

Usage:
    uvicorn stickerpack.web:app --reload
"""

from stickerpack.web.app import app, create_app

__all__ = ["app", "create_app"]
