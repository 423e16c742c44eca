"""Observability – logging setup, the metrics registry and export counters."""

from metric_pusher.observability.logging import JsonLoggerFactory, get_logger
from metric_pusher.observability.metrics import (
    AtomicCounter,
    Counter,
    CounterRegistry,
    Datum,
    LabelSet,
    Metric,
    MetricKind,
    Store,
)

__all__ = [
    "AtomicCounter",
    "Counter",
    "CounterRegistry",
    "Datum",
    "JsonLoggerFactory",
    "LabelSet",
    "Metric",
    "MetricKind",
    "Store",
    "get_logger",
]
