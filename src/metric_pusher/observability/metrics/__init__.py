"""Observability – metrics registry and export counters."""
from metric_pusher.observability.metrics.counters import AtomicCounter, CounterRegistry
from metric_pusher.observability.metrics.metric import Datum, LabelSet, Metric, MetricKind
from metric_pusher.observability.metrics.ports import Counter
from metric_pusher.observability.metrics.rwlock import ReadWriteLock
from metric_pusher.observability.metrics.store import Store

__all__ = [
    "AtomicCounter",
    "Counter",
    "CounterRegistry",
    "Datum",
    "LabelSet",
    "Metric",
    "MetricKind",
    "ReadWriteLock",
    "Store",
]
