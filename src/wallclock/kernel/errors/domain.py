"""Domain errors – argument and invariant violations on clock values."""

from __future__ import annotations

from typing import Any

from wallclock.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a clock rule / invariant is violated."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """Input data does not meet validation rules.

    ``errors`` is a list of field-level validation failures.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base


class InvalidArgumentError(ValidationError):
    """A required argument is missing or of the wrong kind.

    Always raised before any clock state is touched.
    """

    default_code = "invalid_argument"

    def __init__(
        self,
        argument: str,
        message: str | None = None,
        *,
        value: Any = None,
        **kwargs: Any,
    ) -> None:
        msg = message or f"'{argument}' cannot be None"
        detail = {"argument": argument}
        if value is not None:
            detail["value"] = repr(value)
        super().__init__(msg, errors=[detail], **kwargs)
        self.argument = argument
        self.value = value


def require(value: Any, argument: str) -> Any:
    """Return *value* unchanged, raising :class:`InvalidArgumentError` if ``None``."""
    if value is None:
        raise InvalidArgumentError(argument)
    return value


__all__ = [
    "DomainError",
    "InvalidArgumentError",
    "ValidationError",
    "require",
]
