"""Observability – AtomicCounter and CounterRegistry (export bookkeeping)."""
from __future__ import annotations

import threading

from metric_pusher.observability.metrics.ports import Counter

__all__ = ["AtomicCounter", "CounterRegistry"]


class AtomicCounter(Counter):
    """Lock-protected integer counter, safe to read from a status page at any time."""

    def __init__(self, name: str = "") -> None:
        self.name = name
        self._lock = threading.Lock()
        self._value = 0

    def add(self, value: int = 1) -> None:
        if value < 0:
            raise ValueError("counters only go up")
        with self._lock:
            self._value += value

    @property
    def value(self) -> int:
        with self._lock:
            return self._value

    def __repr__(self) -> str:
        return f"AtomicCounter(name={self.name!r}, value={self.value})"


class CounterRegistry:
    """Named process-lifetime counters, published for external inspection.

    ``counter(name)`` is idempotent: asking twice returns the same instance.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._counters: dict[str, AtomicCounter] = {}

    def counter(self, name: str) -> AtomicCounter:
        with self._lock:
            existing = self._counters.get(name)
            if existing is None:
                existing = self._counters[name] = AtomicCounter(name)
            return existing

    def snapshot(self) -> dict[str, int]:
        with self._lock:
            counters = list(self._counters.values())
        return {c.name: c.value for c in counters}

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._counters
