"""Observability – Counter port."""
from __future__ import annotations

import abc


class Counter(abc.ABC):
    """Monotonically increasing counter."""

    @abc.abstractmethod
    def add(self, value: int = 1) -> None: ...

    @property
    @abc.abstractmethod
    def value(self) -> int: ...


__all__ = ["Counter"]
