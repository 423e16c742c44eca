"""Export – Exporter: registered push targets driven by a periodic scheduler."""
from __future__ import annotations

import logging
import socket

from metric_pusher.application.scheduler import APSchedulerAdapter, Job, Scheduler
from metric_pusher.config.settings import ExporterSettings
from metric_pusher.config.validation import ConfigError
from metric_pusher.export.backends import endpoints_from_settings
from metric_pusher.export.pusher import PushTarget, TargetPusher
from metric_pusher.export.transport import Dialer, dial
from metric_pusher.observability.metrics import CounterRegistry, Store

__all__ = ["Exporter", "PUSH_JOB_ID"]

logger = logging.getLogger(__name__)

PUSH_JOB_ID = "metric-push"


class Exporter:
    """Pushes the contents of a :class:`Store` to every registered target.

    Targets come from the enabled endpoints in *settings* and from explicit
    :meth:`register_push_export` calls.  :meth:`push_metrics` runs one tick:
    each target in registration order, one after the other.
    :meth:`start_metric_push` schedules ticks every
    ``settings.push_interval_seconds``.

    Parameters
    ----------
    store:
        The metrics registry to export.  Required.
    hostname:
        Passed to every line format; defaults to :func:`socket.gethostname`.
    settings:
        Interval, write deadline and backend endpoints.
    scheduler:
        Runs the periodic tick; defaults to an :class:`APSchedulerAdapter`.
    dialer:
        Opens connections; replaceable in tests.
    counters:
        Where the per-backend export counters are published.
    """

    def __init__(
        self,
        store: Store | None,
        *,
        hostname: str | None = None,
        settings: ExporterSettings | None = None,
        scheduler: Scheduler | None = None,
        dialer: Dialer = dial,
        counters: CounterRegistry | None = None,
    ) -> None:
        if store is None:
            raise ConfigError("exporter needs a Store")
        if not hostname:
            try:
                hostname = socket.gethostname()
            except OSError as exc:
                raise ConfigError("getting hostname", cause=exc) from exc

        self.store = store
        self.hostname = hostname
        self.settings = settings or ExporterSettings()
        self.counters = counters or CounterRegistry()
        self._scheduler: Scheduler = scheduler or APSchedulerAdapter()
        self._pusher = TargetPusher(
            store, hostname, self.settings.write_deadline_seconds, dialer
        )
        self._push_targets: list[PushTarget] = []

        for endpoint in endpoints_from_settings(self.settings):
            self.register_push_export(endpoint.to_target(self.counters))

    def register_push_export(self, target: PushTarget) -> None:
        """Add a dialable target; it receives every metric on each tick."""
        self._push_targets.append(target)

    @property
    def push_targets(self) -> tuple[PushTarget, ...]:
        return tuple(self._push_targets)

    def push_metrics(self) -> None:
        """Run one tick: push to each target in registration order."""
        for target in tuple(self._push_targets):
            try:
                self._pusher.push(target)
            except Exception as exc:  # noqa: BLE001
                logger.warning("push.failed target=%s exc=%r", target.name, exc)

    def start_metric_push(self) -> bool:
        """Schedule :meth:`push_metrics` every interval.

        Does nothing and returns ``False`` when no target is registered.
        """
        if not self._push_targets:
            return False
        self._scheduler.add_job(
            Job(
                id=PUSH_JOB_ID,
                name="Push metrics",
                handler=self.push_metrics,
                interval_seconds=self.settings.push_interval_seconds,
                max_instances=self.settings.max_overlapping_ticks,
            )
        )
        self._scheduler.start()
        logger.info(
            "metric_push.started targets=%s interval_seconds=%s",
            ",".join(t.name for t in self._push_targets),
            self.settings.push_interval_seconds,
        )
        return True

    def export_counters(self) -> dict[str, int]:
        """Attempted / succeeded counts per target, for a status page."""
        counts: dict[str, int] = {}
        for target in self._push_targets:
            counts[f"{target.name}_export_total"] = target.total.value
            counts[f"{target.name}_export_success"] = target.success.value
        return counts
