"""Export – push metrics from the registry to collectd, graphite and statsd."""
from metric_pusher.export.backends import BackendEndpoint, endpoints_from_settings
from metric_pusher.export.exporter import PUSH_JOB_ID, Exporter
from metric_pusher.export.formats import (
    CollectdFormat,
    GraphiteFormat,
    LineFormat,
    StatsdFormat,
    TextLineFormat,
)
from metric_pusher.export.labels import format_labels
from metric_pusher.export.pusher import PushTarget, TargetPusher
from metric_pusher.export.snapshot import iter_label_sets
from metric_pusher.export.transport import Connection, SocketConnection, dial

__all__ = [
    "BackendEndpoint",
    "CollectdFormat",
    "Connection",
    "Exporter",
    "GraphiteFormat",
    "LineFormat",
    "PUSH_JOB_ID",
    "PushTarget",
    "SocketConnection",
    "StatsdFormat",
    "TargetPusher",
    "TextLineFormat",
    "dial",
    "endpoints_from_settings",
    "format_labels",
    "iter_label_sets",
]
