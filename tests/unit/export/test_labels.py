"""Unit tests for format_labels."""

from __future__ import annotations

import pytest

from metric_pusher.export import format_labels


class TestFormatLabels:
    def test_empty_labels_returns_name(self) -> None:
        assert format_labels("latency", {}, "=", ",", "_") == "latency"

    def test_single_pair(self) -> None:
        assert format_labels("latency", {"path": "/a"}, "=", ",", "_") == "latency,path=/a"

    def test_pair_separator_in_value_is_replaced(self) -> None:
        assert format_labels("latency", {"path": "/a,b"}, "=", ",", "_") == "latency,path=/a_b"

    def test_key_separator_in_key_and_value_is_replaced(self) -> None:
        assert format_labels("m", {"a=b": "c=d"}, "=", ",", "_") == "m,a_b=c_d"

    def test_pairs_are_sorted_by_key(self) -> None:
        labels = {"zone": "z1", "host": "h1", "method": "GET"}
        assert format_labels("m", labels, "=", ",", "_") == "m,host=h1,method=GET,zone=z1"

    def test_same_input_same_output(self) -> None:
        labels = {f"k{i}": str(i) for i in range(20)}
        assert format_labels("m", labels, ".", ".", "_") == format_labels("m", dict(reversed(labels.items())), ".", ".", "_")

    def test_graphite_style_dots(self) -> None:
        assert format_labels("bytes", {"host": "www.example.com"}, ".", ".", "_") == (
            "bytes.host.www_example_com"
        )

    def test_collectd_style_dashes(self) -> None:
        assert format_labels("bytes", {"code": "2-xx"}, "-", "-", "_") == "bytes-code-2_xx"

    def test_name_is_not_escaped(self) -> None:
        assert format_labels("a.b", {"k": "v"}, ".", ".", "_") == "a.b.k.v"

    @pytest.mark.parametrize(
        "labels",
        [
            {"p,a=t,h": "v=a,l"},
            {",": "="},
            {"a": ",,,", "b": "==="},
            {"k1": "x=y", "k2": "1,2", "k=3": "z"},
        ],
    )
    def test_no_unescaped_separators_outside_structure(self, labels: dict[str, str]) -> None:
        out = format_labels("m", labels, "=", ",", "_")
        pairs = out.split(",")
        assert pairs[0] == "m"
        assert len(pairs) == len(labels) + 1
        for pair in pairs[1:]:
            assert pair.count("=") == 1
