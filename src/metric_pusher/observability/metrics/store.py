"""Observability – Store, the in-process metrics registry."""
from __future__ import annotations

from contextlib import AbstractContextManager

from metric_pusher.observability.metrics.metric import Metric
from metric_pusher.observability.metrics.rwlock import ReadWriteLock

__all__ = ["Store"]


class Store:
    """Mapping of metric name to every :class:`Metric` registered under it.

    A name may map to several metrics, one per source program.  ``metrics``
    must only be read while :meth:`read_locked` is held.
    """

    def __init__(self) -> None:
        self._lock = ReadWriteLock()
        self.metrics: dict[str, list[Metric]] = {}

    def add(self, metric: Metric) -> Metric:
        with self._lock.write_locked():
            self.metrics.setdefault(metric.name, []).append(metric)
        return metric

    def clear(self) -> None:
        with self._lock.write_locked():
            self.metrics = {}

    def read_locked(self) -> AbstractContextManager[None]:
        return self._lock.read_locked()

    @property
    def lock(self) -> ReadWriteLock:
        return self._lock
