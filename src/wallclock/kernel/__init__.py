"""Kernel – framework-agnostic clock building blocks."""

from wallclock.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    InvalidArgumentError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "InvalidArgumentError",
    "ValidationError",
]
