"""Config settings – ExporterSettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from metric_pusher.config.settings.base import Settings
from metric_pusher.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class ExporterSettings(Settings):
    """Push interval, write deadline and backend endpoints.

    A backend whose address field is empty is disabled.  Loaded from
    ``METRIC_PUSH_*`` environment variables by
    :class:`~metric_pusher.config.settings.loaders.EnvSettingsLoader`.
    """

    _prefix: ClassVar[str] = "METRIC_PUSH"

    push_interval_seconds: int = 60
    write_deadline_seconds: float = 10.0
    max_overlapping_ticks: int = 10

    collectd_socket_path: str = ""
    collectd_prefix: str = ""
    graphite_host_port: str = ""
    graphite_prefix: str = ""
    statsd_host_port: str = ""
    statsd_prefix: str = ""

    def _validate(self) -> None:
        if self.push_interval_seconds <= 0:
            raise InvalidSettingValueError(
                "push_interval_seconds", self.push_interval_seconds, "must be positive"
            )
        if self.write_deadline_seconds <= 0:
            raise InvalidSettingValueError(
                "write_deadline_seconds", self.write_deadline_seconds, "must be positive"
            )
        if self.max_overlapping_ticks < 1:
            raise InvalidSettingValueError(
                "max_overlapping_ticks", self.max_overlapping_ticks, "must be at least 1"
            )


__all__ = ["ExporterSettings"]
