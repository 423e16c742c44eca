"""Infrastructure errors — per-target network failures during a push."""

from __future__ import annotations

from typing import Any

from metric_pusher.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure."""

    default_code = "infrastructure_error"


class ExportError(InfrastructureError):
    """A push to one target failed at some step of the cycle."""

    default_code = "export_error"
    step: str = "export"

    def __init__(
        self,
        target: str,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"{self.step} to '{target}' failed", **kwargs)
        self.target = target

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["target"] = self.target
        return base


class DialError(ExportError):
    """Could not open a connection to the target."""

    default_code = "dial_error"
    step = "dial"


class DeadlineError(ExportError):
    """Could not arm the absolute deadline on an open connection."""

    default_code = "deadline_error"
    step = "set deadline"


class WriteError(ExportError):
    """Writing a rendered line failed or ran past the deadline."""

    default_code = "write_error"
    step = "write"


class CloseError(ExportError):
    """Closing the connection reported an error."""

    default_code = "close_error"
    step = "close"


__all__ = [
    "CloseError",
    "DeadlineError",
    "DialError",
    "ExportError",
    "InfrastructureError",
    "WriteError",
]
