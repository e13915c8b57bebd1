"""Exceptions raised by the sticker pack domain.

Validation failures are normally returned as values. These exceptions are
for callers that want to stop on an invalid pack, and for transport
collaborators that fail to deliver one.
"""

from __future__ import annotations


class StickerPackError(Exception):
    """Base exception for sticker pack errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        self.message = message
        self.code = code
        super().__init__(message)

    def __str__(self) -> str:
        return f"{type(self).__name__}({self.code}): {self.message}"


class StickerPackValidationError(StickerPackError):
    """Raised when a pack is rejected and the caller asked for an exception."""

    def __init__(
        self, message: str, validation_errors: list[str] | None = None
    ) -> None:
        self.validation_errors = list(validation_errors or [])
        super().__init__(message, code="validation_failed")

    def __str__(self) -> str:
        if self.validation_errors:
            bullets = "\n".join(f"  - {e}" for e in self.validation_errors)
            return f"{type(self).__name__}: {self.message}\nValidation errors:\n{bullets}"
        return super().__str__()


class TransportError(StickerPackError):
    """Raised by a transport when a pack cannot be handed over."""

    def __init__(self, message: str, code: str | None = "transport_error") -> None:
        super().__init__(message, code=code)
