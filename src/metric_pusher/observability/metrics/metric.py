"""Observability – Metric, Datum and LabelSet.

A :class:`Metric` is one named instrument owned by the registry.  Each
distinct combination of label values is a separate time series backed by a
:class:`Datum`.  Producers mutate data through :meth:`Metric.get_datum`;
exporters read them through :meth:`Metric.emit_label_sets` while holding
:meth:`Metric.read_locked`.
"""
from __future__ import annotations

import dataclasses
import enum
import threading
import time
from collections.abc import Iterator
from contextlib import AbstractContextManager

from metric_pusher.observability.metrics.rwlock import ReadWriteLock

__all__ = ["Datum", "LabelSet", "Metric", "MetricKind", "format_time", "format_value"]


class MetricKind(enum.Enum):
    COUNTER = "counter"
    GAUGE = "gauge"
    TIMER = "timer"


class Datum:
    """A single numeric value and the unix time it was last updated."""

    def __init__(self, value: int | float = 0, timestamp: float | None = None) -> None:
        self._lock = threading.Lock()
        self._value = value
        self._time = time.time() if timestamp is None else timestamp

    def set(self, value: int | float, timestamp: float | None = None) -> None:
        with self._lock:
            self._value = value
            self._time = time.time() if timestamp is None else timestamp

    def inc_by(self, delta: int | float, timestamp: float | None = None) -> None:
        with self._lock:
            self._value += delta
            self._time = time.time() if timestamp is None else timestamp

    @property
    def value(self) -> int | float:
        with self._lock:
            return self._value

    @property
    def timestamp(self) -> float:
        with self._lock:
            return self._time

    def snapshot(self) -> tuple[int | float, float]:
        """Value and timestamp read together under one lock acquisition."""
        with self._lock:
            return self._value, self._time

    def value_string(self) -> str:
        return format_value(self.value)

    def time_string(self) -> str:
        """Unix seconds, the form every push backend expects."""
        return format_time(self.timestamp)

    def __repr__(self) -> str:
        value, timestamp = self.snapshot()
        return f"Datum(value={value!r}, timestamp={timestamp!r})"


def format_value(value: int | float) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_time(timestamp: float) -> str:
    return str(int(timestamp))


@dataclasses.dataclass(frozen=True)
class LabelSet:
    """One time series of a metric: its labels and the datum holding its value."""

    labels: dict[str, str]
    datum: Datum


class Metric:
    """A named instrument with zero or more label keys."""

    def __init__(
        self,
        name: str,
        program: str = "",
        kind: MetricKind = MetricKind.COUNTER,
        keys: tuple[str, ...] | list[str] = (),
    ) -> None:
        self.name = name
        self.program = program
        self.kind = kind
        self.keys: tuple[str, ...] = tuple(keys)
        self._lock = ReadWriteLock()
        self._data: dict[tuple[str, ...], Datum] = {}

    def get_datum(self, *label_values: str) -> Datum:
        """Return the datum for *label_values*, creating it on first use."""
        if len(label_values) != len(self.keys):
            raise ValueError(
                f"metric {self.name!r} expects {len(self.keys)} label values, got {len(label_values)}"
            )
        with self._lock.read_locked():
            datum = self._data.get(label_values)
        if datum is not None:
            return datum
        with self._lock.write_locked():
            return self._data.setdefault(label_values, Datum())

    def remove_datum(self, *label_values: str) -> None:
        with self._lock.write_locked():
            self._data.pop(label_values, None)

    def read_locked(self) -> AbstractContextManager[None]:
        return self._lock.read_locked()

    def emit_label_sets(self) -> Iterator[LabelSet]:
        """Yield one :class:`LabelSet` per time series.

        The caller must hold :meth:`read_locked` until the iterator is
        exhausted or closed.
        """
        for values, datum in list(self._data.items()):
            yield LabelSet(labels=dict(zip(self.keys, values)), datum=datum)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"Metric(name={self.name!r}, program={self.program!r}, kind={self.kind.name})"
