"""Export – the built-in push backends as configuration data."""
from __future__ import annotations

import dataclasses

from metric_pusher.config.settings import ExporterSettings
from metric_pusher.export.formats import CollectdFormat, GraphiteFormat, LineFormat, StatsdFormat
from metric_pusher.export.pusher import PushTarget
from metric_pusher.observability.metrics import CounterRegistry

__all__ = ["BackendEndpoint", "endpoints_from_settings"]


@dataclasses.dataclass(frozen=True)
class BackendEndpoint:
    """One backend endpoint: name, network kind, address and line format."""

    name: str
    network: str
    address: str
    line_format: LineFormat

    @property
    def enabled(self) -> bool:
        return bool(self.address)

    def to_target(self, counters: CounterRegistry) -> PushTarget:
        """Build a :class:`PushTarget` whose counters are published in *counters*."""
        return PushTarget(
            name=self.name,
            network=self.network,
            address=self.address,
            line_format=self.line_format,
            total=counters.counter(f"{self.name}_export_total"),
            success=counters.counter(f"{self.name}_export_success"),
        )


def endpoints_from_settings(settings: ExporterSettings) -> list[BackendEndpoint]:
    """Return the enabled collectd, graphite and statsd endpoints, in that order."""
    endpoints = [
        BackendEndpoint(
            "collectd",
            "unix",
            settings.collectd_socket_path,
            CollectdFormat(prefix=settings.collectd_prefix, interval_seconds=settings.push_interval_seconds),
        ),
        BackendEndpoint(
            "graphite",
            "tcp",
            settings.graphite_host_port,
            GraphiteFormat(prefix=settings.graphite_prefix),
        ),
        BackendEndpoint(
            "statsd",
            "udp",
            settings.statsd_host_port,
            StatsdFormat(prefix=settings.statsd_prefix),
        ),
    ]
    return [e for e in endpoints if e.enabled]
