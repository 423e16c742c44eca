"""Unit tests for the collectd, graphite and statsd line formats."""

from __future__ import annotations

import pytest

from metric_pusher.export import CollectdFormat, GraphiteFormat, LineFormat, StatsdFormat, TextLineFormat
from metric_pusher.observability.metrics import Datum, LabelSet, Metric, MetricKind


def _series(kind: MetricKind, labels: dict[str, str], value: int | float = 37) -> tuple[Metric, LabelSet]:
    metric = Metric("foo", program="test.mtail", kind=kind, keys=tuple(labels))
    datum = metric.get_datum(*labels.values())
    datum.set(value, timestamp=1_343_124_840)
    return metric, LabelSet(labels=labels, datum=datum)


class TestCollectdFormat:
    def test_unlabelled_counter(self) -> None:
        metric, ls = _series(MetricKind.COUNTER, {})
        line = CollectdFormat(interval_seconds=60)("gunstar", metric, ls)
        assert line == 'PUTVAL "gunstar/mtail-test.mtail/counter-foo" interval=60 1343124840:37\n'

    def test_labels_and_prefix(self) -> None:
        metric, ls = _series(MetricKind.GAUGE, {"label": "a-b"})
        line = CollectdFormat(prefix="prefix", interval_seconds=30)("gunstar", metric, ls)
        assert line == (
            'PUTVAL "gunstar/prefixmtail-test.mtail/gauge-foo-label-a_b" interval=30 1343124840:37\n'
        )

    def test_custom_plugin_name(self) -> None:
        metric, ls = _series(MetricKind.COUNTER, {})
        assert CollectdFormat(plugin="logs")("h", metric, ls).startswith('PUTVAL "h/logs-test.mtail/')

    def test_timer_is_reported_as_gauge(self) -> None:
        metric, ls = _series(MetricKind.TIMER, {})
        assert "/gauge-foo" in CollectdFormat()("h", metric, ls)


class TestGraphiteFormat:
    def test_unlabelled(self) -> None:
        metric, ls = _series(MetricKind.COUNTER, {})
        assert GraphiteFormat()("gunstar", metric, ls) == "foo 37 1343124840\n"

    def test_labels_and_prefix(self) -> None:
        metric, ls = _series(MetricKind.COUNTER, {"host": "a.b"})
        assert GraphiteFormat(prefix="prefix")("gunstar", metric, ls) == (
            "prefixfoo.host.a_b 37 1343124840\n"
        )


class TestStatsdFormat:
    @pytest.mark.parametrize(
        ("kind", "suffix"),
        [(MetricKind.COUNTER, "c"), (MetricKind.GAUGE, "g"), (MetricKind.TIMER, "ms")],
    )
    def test_type_suffix(self, kind: MetricKind, suffix: str) -> None:
        metric, ls = _series(kind, {})
        assert StatsdFormat()("gunstar", metric, ls) == f"foo:37|{suffix}"

    def test_labels_and_prefix(self) -> None:
        metric, ls = _series(MetricKind.COUNTER, {"l": "v"})
        assert StatsdFormat(prefix="prefix")("gunstar", metric, ls) == "prefixfoo.l.v:37|c"

    def test_float_value(self) -> None:
        metric, ls = _series(MetricKind.GAUGE, {}, value=0.5)
        assert StatsdFormat()("h", metric, ls) == "foo:0.5|g"


def test_builtin_formats_satisfy_protocol() -> None:
    for fmt in (CollectdFormat(), GraphiteFormat(), StatsdFormat()):
        assert isinstance(fmt, LineFormat)


def test_custom_format_is_just_a_callable() -> None:
    def influx(hostname: str, metric: Metric, label_set: LabelSet) -> str:
        return f"{metric.name},host={hostname} value={label_set.datum.value_string()}\n"

    metric, ls = _series(MetricKind.GAUGE, {})
    assert isinstance(influx, LineFormat)
    assert influx("h", metric, ls) == "foo,host=h value=37\n"


def test_text_line_format_is_abstract() -> None:
    with pytest.raises(TypeError):
        TextLineFormat()


class _ShiftingDatum(Datum):
    """Datum whose separate accessors disagree with its snapshot."""

    @property
    def value(self) -> int | float:
        return 999

    @property
    def timestamp(self) -> float:
        return 1.0


@pytest.mark.parametrize(
    ("fmt", "expected"),
    [
        (GraphiteFormat(), "foo 37 1343124840\n"),
        (StatsdFormat(), "foo:37|c"),
        (CollectdFormat(), 'PUTVAL "h/mtail-test.mtail/counter-foo" interval=60 1343124840:37\n'),
    ],
)
def test_line_renders_from_a_single_snapshot(fmt: LineFormat, expected: str) -> None:
    metric = Metric("foo", program="test.mtail", kind=MetricKind.COUNTER, keys=())
    datum = _ShiftingDatum(37, timestamp=1_343_124_840)
    assert fmt("h", metric, LabelSet(labels={}, datum=datum)) == expected
