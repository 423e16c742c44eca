"""Export – PushTarget and TargetPusher.

One push cycle for one target is dial → set deadline → write every label
set → close.  Failures are logged and end the cycle for that target only.
"""
from __future__ import annotations

import contextlib
import dataclasses
import logging

from metric_pusher.config.validation import ConfigError
from metric_pusher.export.formats import LineFormat
from metric_pusher.export.snapshot import iter_label_sets
from metric_pusher.export.transport import NETWORKS, Connection, Dialer, dial
from metric_pusher.kernel.errors import CloseError, DeadlineError, DialError, WriteError
from metric_pusher.observability.metrics import AtomicCounter, Counter, Store
from metric_pusher.resilience.timeouts import Deadline

__all__ = ["PushTarget", "TargetPusher"]

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class PushTarget:
    """A configured backend: where to dial and how to render lines for it.

    ``total`` counts attempted label-set exports, ``success`` the ones that
    were written without error.
    """

    name: str
    network: str
    address: str
    line_format: LineFormat
    total: Counter = dataclasses.field(default_factory=AtomicCounter)
    success: Counter = dataclasses.field(default_factory=AtomicCounter)

    def __post_init__(self) -> None:
        if self.network not in NETWORKS:
            raise ConfigError(f"push target '{self.name}' has unknown network {self.network!r}")
        if not self.address:
            raise ConfigError(f"push target '{self.name}' has no address")


class TargetPusher:
    """Performs one push cycle against one target."""

    def __init__(
        self,
        store: Store,
        hostname: str,
        write_deadline_seconds: float = 10.0,
        dialer: Dialer = dial,
    ) -> None:
        self._store = store
        self._hostname = hostname
        self._write_deadline_seconds = write_deadline_seconds
        self._dialer = dialer

    def push(self, target: PushTarget) -> bool:
        """Push every label set to *target*; return ``True`` if all writes succeeded."""
        logger.debug("push.dialing target=%s address=%s", target.name, target.address)
        try:
            conn = self._dialer(target.network, target.address, self._write_deadline_seconds)
        except DialError as exc:
            logger.info("push.dial_failed target=%s error=%s", target.name, exc.message)
            return False

        try:
            conn.set_deadline(Deadline.after(self._write_deadline_seconds))
        except DeadlineError as exc:
            logger.info("push.deadline_failed target=%s error=%s", target.name, exc.message)

        ok = True
        try:
            self.write_metrics(conn, target)
        except WriteError as exc:
            ok = False
            logger.info("push.write_failed target=%s error=%s", target.name, exc.message)
        finally:
            try:
                conn.close()
            except CloseError as exc:
                logger.info("push.close_failed target=%s error=%s", target.name, exc.message)
        return ok

    def write_metrics(self, conn: Connection, target: PushTarget) -> None:
        """Render and write each label set; the first failed write aborts the rest."""
        with contextlib.closing(iter_label_sets(self._store)) as label_sets:
            for metric, label_set in label_sets:
                target.total.add()
                line = target.line_format(self._hostname, metric, label_set)
                sent = conn.write(line)
                logger.debug("push.sent target=%s bytes=%d", target.name, sent)
                target.success.add()
