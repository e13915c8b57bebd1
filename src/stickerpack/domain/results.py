"""Result types for sticker and pack validation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Generic, Literal, TypeVar, Union

T = TypeVar("T")
R = TypeVar("R")


@dataclass(frozen=True)
class StickerCheck:
    """Verdict for a single sticker.

    A sticker check carries at most one reason: the first rule the sticker
    violated.

    Attributes:
        is_valid: Whether the sticker passed every rule.
        error: Reason for rejection, None when valid.
    """

    is_valid: bool
    error: str | None = None

    @classmethod
    def ok(cls) -> StickerCheck:
        """Create a passing sticker check."""
        return cls(is_valid=True)

    @classmethod
    def fail(cls, error: str) -> StickerCheck:
        """Create a failing sticker check with its reason."""
        return cls(is_valid=False, error=error)


@dataclass(frozen=True)
class ValidationResult:
    """Result of pack validation.

    Contains every error found, in the order the checks ran, plus any
    advisory warnings. A pack is valid if there are no errors, even if
    there are warnings.

    Attributes:
        errors: Tuple of error messages (validation failures).
        warnings: Tuple of warning messages (non-fatal issues).
    """

    errors: tuple[str, ...] = field(default_factory=tuple)
    warnings: tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_valid(self) -> bool:
        """Check if validation passed (no errors)."""
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        """Check if there are any warnings."""
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """Get the CLI exit code based on validation status.

        Returns:
            0 if valid with no warnings
            1 if there are errors
            2 if valid but has warnings
        """
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    @classmethod
    def ok(cls, warnings: list[str] | None = None) -> ValidationResult:
        """Create a successful validation result."""
        return cls(warnings=tuple(warnings or []))

    @classmethod
    def fail(
        cls, errors: list[str], warnings: list[str] | None = None
    ) -> ValidationResult:
        """Create a failed validation result."""
        return cls(errors=tuple(errors), warnings=tuple(warnings or []))

    def merge(self, other: ValidationResult) -> ValidationResult:
        """Return a new result holding the messages of both results."""
        return ValidationResult(
            errors=self.errors + other.errors,
            warnings=self.warnings + other.warnings,
        )


# =============================================================================
# Tagged success/failure result
# =============================================================================


@dataclass(frozen=True)
class Success(Generic[T]):
    """Successful outcome carrying the accepted value."""

    value: T
    kind: Literal["success"] = field(default="success", init=False)


@dataclass(frozen=True)
class Failure:
    """Failed outcome carrying an error payload.

    Attributes:
        message: Human-readable description of the failure.
        code: Optional machine-readable error code (e.g. "validation_failed").
        details: Optional structured details, such as individual error strings.
    """

    message: str
    code: str | None = None
    details: tuple[Any, ...] = field(default_factory=tuple)
    kind: Literal["failure"] = field(default="failure", init=False)

    def __post_init__(self) -> None:
        if not isinstance(self.details, tuple):
            object.__setattr__(self, "details", tuple(self.details))


Result = Union[Success[T], Failure]


def is_success(result: Result[Any]) -> bool:
    """Return True if the result is a Success."""
    return result.kind == "success"


def is_failure(result: Result[Any]) -> bool:
    """Return True if the result is a Failure."""
    return result.kind == "failure"


def value_or_none(result: Result[T]) -> T | None:
    """Return the success value, or None for a failure."""
    if isinstance(result, Success):
        return result.value
    return None


def error_message(result: Result[Any]) -> str | None:
    """Return the failure message, or None for a success."""
    if isinstance(result, Failure):
        return result.message
    return None


def map_result(result: Result[T], transform: Callable[[T], R]) -> Result[R]:
    """Transform the success value, passing failures through unchanged."""
    if isinstance(result, Success):
        return Success(transform(result.value))
    return result


def fold_result(
    result: Result[T],
    on_success: Callable[[T], R],
    on_failure: Callable[[str, str | None, tuple[Any, ...]], R],
) -> R:
    """Collapse a result into a single value by handling both cases."""
    if isinstance(result, Success):
        return on_success(result.value)
    return on_failure(result.message, result.code, result.details)
