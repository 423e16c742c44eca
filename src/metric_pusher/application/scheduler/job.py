"""Application scheduler – Job dataclass."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

__all__ = ["Job"]


@dataclass
class Job:
    """Describes a periodic job."""

    id: str
    name: str
    handler: Callable[[], None]
    interval_seconds: float
    max_instances: int = 1   # >1 lets a slow tick overlap the next one
    enabled: bool = True

    def __post_init__(self) -> None:
        if self.interval_seconds <= 0:
            raise ValueError("Job 'interval_seconds' must be positive")
        if self.max_instances < 1:
            raise ValueError("Job 'max_instances' must be at least 1")
