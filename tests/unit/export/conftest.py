"""Shared fakes for the export tests."""
from __future__ import annotations

import pytest

from metric_pusher.kernel.errors import CloseError, DeadlineError, DialError, WriteError
from metric_pusher.observability.metrics import Metric, MetricKind, Store
from metric_pusher.resilience.timeouts import Deadline


class FakeConnection:
    """Records every line written; can be told to fail at any step."""

    def __init__(
        self,
        *,
        fail_on_write: int | None = None,
        fail_deadline: bool = False,
        fail_close: bool = False,
    ) -> None:
        self.lines: list[str] = []
        self.deadline: Deadline | None = None
        self.closed = False
        self._writes = 0
        self._fail_on_write = fail_on_write
        self._fail_deadline = fail_deadline
        self._fail_close = fail_close

    def set_deadline(self, deadline: Deadline) -> None:
        if self._fail_deadline:
            raise DeadlineError("fake", "cannot set deadline")
        self.deadline = deadline

    def write(self, text: str) -> int:
        self._writes += 1
        if self._fail_on_write is not None and self._writes >= self._fail_on_write:
            raise WriteError("fake", "broken pipe")
        self.lines.append(text)
        return len(text)

    def close(self) -> None:
        self.closed = True
        if self._fail_close:
            raise CloseError("fake", "close failed")


class FakeDialer:
    """Hands out one FakeConnection per dial; addresses in ``unreachable`` fail."""

    def __init__(self, **conn_kwargs) -> None:
        self.conn_kwargs = conn_kwargs
        self.dials: list[tuple[str, str, float]] = []
        self.connections: dict[str, list[FakeConnection]] = {}
        self.unreachable: set[str] = set()

    def __call__(self, network: str, address: str, timeout: float) -> FakeConnection:
        self.dials.append((network, address, timeout))
        if address in self.unreachable:
            raise DialError(address, f"dial {network} {address}: connection refused")
        conn = FakeConnection(**self.conn_kwargs)
        self.connections.setdefault(address, []).append(conn)
        return conn

    def lines(self, address: str) -> list[str]:
        return [line for conn in self.connections.get(address, []) for line in conn.lines]


@pytest.fixture
def store() -> Store:
    """``requests{region}`` with us=5 and eu=3, as a counter from ``app.mtail``."""
    s = Store()
    m = s.add(Metric("requests", program="app.mtail", kind=MetricKind.COUNTER, keys=("region",)))
    m.get_datum("us").set(5, timestamp=1_700_000_000)
    m.get_datum("eu").set(3, timestamp=1_700_000_000)
    return s


@pytest.fixture
def dialer() -> FakeDialer:
    return FakeDialer()


@pytest.fixture
def make_dialer():
    """Factory for dialers whose connections fail in a chosen way."""
    return FakeDialer
