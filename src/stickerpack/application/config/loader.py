"""Manifest file loader with comprehensive error handling.

This module loads and parses JSON sticker manifests. It handles file system
errors, JSON parsing errors, and Pydantic validation errors with clear,
actionable error messages.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from stickerpack.application.config.schema import StickerManifest


class ManifestError(Exception):
    """Exception raised for manifest-related errors.

    Attributes:
        message: The primary error message
        error_type: Category of error (file_not_found, permission_denied,
            file_read_error, json_parse, validation, asset_missing)
        path: Path to the manifest or asset file (if applicable)
        details: Additional details (line/column for JSON, validation errors, etc.)
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        """Format error message for display."""
        return self.message


def _format_json_path(loc: tuple[str | int, ...]) -> str:
    """Format a Pydantic location tuple as a JSON path string.

    Examples:
        >>> _format_json_path(("sticker_packs", 0, "name"))
        'sticker_packs[0].name'
        >>> _format_json_path(("sticker_packs", 0, "stickers", 2, "emojis"))
        'sticker_packs[0].stickers[2].emojis'
    """
    parts: list[str] = []
    for segment in loc:
        if isinstance(segment, int):
            if parts:
                parts[-1] = f"{parts[-1]}[{segment}]"
            else:
                parts.append(f"[{segment}]")
        else:
            parts.append(str(segment))
    return ".".join(parts)


def _extract_validation_errors(
    error: PydanticValidationError,
) -> list[dict[str, Any]]:
    """Extract path, message, value and error type from a Pydantic error."""
    details: list[dict[str, Any]] = []
    for err in error.errors():
        details.append(
            {
                "path": _format_json_path(err["loc"]),
                "message": err["msg"],
                "value": err.get("input"),
                "error_type": err["type"],
            }
        )
    return details


def _format_validation_error_message(details: list[dict[str, Any]]) -> str:
    """Format validation error details into a human-readable message."""
    lines = ["Manifest validation failed:"]
    for detail in details:
        path = detail["path"]
        message = detail["message"]
        value = detail.get("value")
        if value is not None and not isinstance(value, dict):
            lines.append(f"  - {path}: {message} (got: {value!r})")
        else:
            lines.append(f"  - {path}: {message}")
    return "\n".join(lines)


def load_manifest(path: Path) -> StickerManifest:
    """Load and validate a sticker manifest from a JSON file.

    Args:
        path: Path to the JSON manifest file

    Returns:
        A validated StickerManifest instance

    Raises:
        ManifestError: If the file cannot be loaded or validated.
            The error_type attribute indicates the specific error category:
            - "file_not_found": File does not exist
            - "permission_denied": File cannot be read
            - "file_read_error": Other I/O failure
            - "json_parse": Invalid JSON syntax
            - "validation": Schema validation failed
    """
    if not path.exists():
        raise ManifestError(
            message=f"Manifest file not found: {path}",
            error_type="file_not_found",
            path=path,
        )

    try:
        content = path.read_text(encoding="utf-8")
    except PermissionError:
        raise ManifestError(
            message=f"Permission denied reading manifest file: {path}",
            error_type="permission_denied",
            path=path,
        )
    except OSError as e:
        raise ManifestError(
            message=f"Error reading manifest file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        )

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ManifestError(
            message=f"Invalid JSON in manifest file: {path} (line {e.lineno}, column {e.colno}): {e.msg}",
            error_type="json_parse",
            path=path,
            details=[
                {
                    "line": e.lineno,
                    "column": e.colno,
                    "message": e.msg,
                }
            ],
        )

    try:
        return StickerManifest.model_validate(data)
    except PydanticValidationError as e:
        details = _extract_validation_errors(e)
        raise ManifestError(
            message=_format_validation_error_message(details),
            error_type="validation",
            path=path,
            details=details,
        )


def load_manifest_from_dict(data: dict[str, Any]) -> StickerManifest:
    """Load and validate a sticker manifest from a dictionary.

    Raises:
        ManifestError: If the data fails validation.
    """
    try:
        return StickerManifest.model_validate(data)
    except PydanticValidationError as e:
        details = _extract_validation_errors(e)
        raise ManifestError(
            message=_format_validation_error_message(details),
            error_type="validation",
            details=details,
        )
