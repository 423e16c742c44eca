"""Export – snapshot traversal of the metrics registry."""
from __future__ import annotations

from collections.abc import Iterator

from metric_pusher.observability.metrics import LabelSet, Metric, Store

__all__ = ["iter_label_sets"]


def iter_label_sets(store: Store) -> Iterator[tuple[Metric, LabelSet]]:
    """Yield ``(metric, label_set)`` for every time series in *store*.

    The store's read lock is held for the whole pass and each metric's read
    lock while its label sets are being consumed, so producers block until
    the consumer has moved on.  The generator is single-use; close it (for
    example with :func:`contextlib.closing`) to release the locks early when
    the consumer stops before exhausting it.
    """
    with store.read_locked():
        for metrics in store.metrics.values():
            for metric in metrics:
                with metric.read_locked():
                    for label_set in metric.emit_label_sets():
                        yield metric, label_set
