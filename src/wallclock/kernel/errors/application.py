"""Application-layer errors – cross-cutting concerns above the kernel."""

from __future__ import annotations

from wallclock.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


__all__ = ["ApplicationError"]
