"""
metric_pusher – periodic push export of an in-memory metrics registry.

Import path convention::

    from metric_pusher.observability.metrics import Store, Metric, MetricKind
    from metric_pusher.export import Exporter, PushTarget
    from metric_pusher.config import ExporterSettings
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
