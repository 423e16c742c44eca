"""Application-layer errors — wiring and configuration problems."""

from __future__ import annotations

from metric_pusher.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


__all__ = ["ApplicationError"]
