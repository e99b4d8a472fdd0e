"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError              (domain.py)
    │   └── ValidationError
    │       └── InvalidArgumentError
    └── ApplicationError         (application.py)
        └── ConfigError          (wallclock.config.validation)
"""

from wallclock.kernel.errors.application import ApplicationError
from wallclock.kernel.errors.base import BaseError
from wallclock.kernel.errors.domain import (
    DomainError,
    InvalidArgumentError,
    ValidationError,
    require,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "InvalidArgumentError",
    "ValidationError",
    "require",
]
