"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── ApplicationError     (application.py)
    │   └── ConfigError      (metric_pusher.config.validation)
    └── InfrastructureError  (infrastructure.py)
        └── ExportError
            ├── DialError
            ├── DeadlineError
            ├── WriteError
            └── CloseError
"""

from metric_pusher.kernel.errors.application import ApplicationError
from metric_pusher.kernel.errors.base import BaseError
from metric_pusher.kernel.errors.infrastructure import (
    CloseError,
    DeadlineError,
    DialError,
    ExportError,
    InfrastructureError,
    WriteError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "CloseError",
    "DeadlineError",
    "DialError",
    "ExportError",
    "InfrastructureError",
    "WriteError",
]
