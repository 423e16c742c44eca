"""Export – per-backend line formats.

Every format is a callable ``(hostname, metric, label_set) -> str`` that
renders one time series as one line of backend text.  The label block is
produced by :func:`~metric_pusher.export.labels.format_labels` with the
format's own separator triple.
"""
from __future__ import annotations

import abc
import dataclasses
from typing import Protocol, runtime_checkable

from metric_pusher.export.labels import format_labels
from metric_pusher.observability.metrics import LabelSet, Metric, MetricKind
from metric_pusher.observability.metrics.metric import format_time, format_value

__all__ = [
    "CollectdFormat",
    "GraphiteFormat",
    "LineFormat",
    "StatsdFormat",
    "TextLineFormat",
]


@runtime_checkable
class LineFormat(Protocol):
    """Port: render one label set of *metric* for a push backend."""

    def __call__(self, hostname: str, metric: Metric, label_set: LabelSet) -> str: ...


@dataclasses.dataclass(frozen=True)
class TextLineFormat(abc.ABC):
    """Abstract base for the built-in formats.

    Carries the name prefix and separator triple; subclasses implement
    :meth:`__call__` and render each line from a single
    :meth:`~metric_pusher.observability.metrics.Datum.snapshot`, so value and
    timestamp always belong to the same update.
    """

    prefix: str = ""
    key_sep: str = "."
    pair_sep: str = "."
    replacement: str = "_"

    def series_name(self, metric: Metric, label_set: LabelSet) -> str:
        return format_labels(
            metric.name, label_set.labels, self.key_sep, self.pair_sep, self.replacement
        )

    @abc.abstractmethod
    def __call__(self, hostname: str, metric: Metric, label_set: LabelSet) -> str: ...


@dataclasses.dataclass(frozen=True)
class CollectdFormat(TextLineFormat):
    """collectd unixsock ``PUTVAL`` command."""

    key_sep: str = "-"
    pair_sep: str = "-"
    interval_seconds: int = 60
    plugin: str = "mtail"

    def __call__(self, hostname: str, metric: Metric, label_set: LabelSet) -> str:
        value, timestamp = label_set.datum.snapshot()
        return (
            f'PUTVAL "{hostname}/{self.prefix}{self.plugin}-{metric.program}/'
            f'{_collectd_type(metric.kind)}-{self.series_name(metric, label_set)}" '
            f"interval={self.interval_seconds} "
            f"{format_time(timestamp)}:{format_value(value)}\n"
        )


@dataclasses.dataclass(frozen=True)
class GraphiteFormat(TextLineFormat):
    """Graphite plaintext protocol: ``path value timestamp``."""

    def __call__(self, hostname: str, metric: Metric, label_set: LabelSet) -> str:
        value, timestamp = label_set.datum.snapshot()
        return (
            f"{self.prefix}{self.series_name(metric, label_set)} "
            f"{format_value(value)} {format_time(timestamp)}\n"
        )


_STATSD_TYPES = {
    MetricKind.COUNTER: "c",
    MetricKind.GAUGE: "g",
    MetricKind.TIMER: "ms",
}


@dataclasses.dataclass(frozen=True)
class StatsdFormat(TextLineFormat):
    """StatsD datagram: ``name:value|type``."""

    def __call__(self, hostname: str, metric: Metric, label_set: LabelSet) -> str:
        value, _ = label_set.datum.snapshot()
        return (
            f"{self.prefix}{self.series_name(metric, label_set)}:"
            f"{format_value(value)}|{_STATSD_TYPES[metric.kind]}"
        )


def _collectd_type(kind: MetricKind) -> str:
    # collectd has no timer type
    if kind is MetricKind.TIMER:
        return "gauge"
    return kind.value
