"""Export – label serialisation shared by every line format."""
from __future__ import annotations

from collections.abc import Mapping

__all__ = ["format_labels"]


def format_labels(
    name: str,
    labels: Mapping[str, str],
    key_sep: str,
    pair_sep: str,
    replacement: str,
) -> str:
    """Render *name* and *labels* as ``name<pair_sep>k1<key_sep>v1<pair_sep>...``.

    Occurrences of *key_sep* and *pair_sep* inside a key or value are
    replaced with *replacement* so that label text can never be read back as
    a delimiter.  Pairs are rendered in sorted key order, so identical input
    always yields identical output.
    """
    if not labels:
        return name

    def _escape(text: str) -> str:
        return text.replace(key_sep, replacement).replace(pair_sep, replacement)

    pairs = [f"{_escape(k)}{key_sep}{_escape(labels[k])}" for k in sorted(labels)]
    return pair_sep.join([name, *pairs])
