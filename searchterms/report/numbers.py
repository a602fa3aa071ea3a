from __future__ import annotations

import math
import re
from enum import Enum

"""Locale-tolerant number parsing for metric sorting.

Google Ads exports format metrics with the account's locale: ``€1,234.56``,
``1 234,56``, ``1.234`` and so on. Values are only ever compared with each
other, so the parser aims for a stable ordering rather than exact money.
"""

__all__ = [
    "MISSING",
    "Missing",
    "MetricValue",
    "parse_metric_number",
    "metric_sort_key",
    "is_missing",
]


class Missing(Enum):
    """Sentinel for metric cells that hold no number."""
    MISSING = "missing"

    def __repr__(self) -> str:  # pragma: no cover (trivial)
        return "MISSING"


MISSING = Missing.MISSING

MetricValue = float | Missing

_EMPTY_MARKERS = {"", "—", "-"}
_NON_NUMERIC_RE = re.compile(r"[^0-9,.\-]")
# Leading numeric prefix, mirrors how lenient float parsing stops at junk
_NUMBER_PREFIX_RE = re.compile(r"^[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")


def is_missing(value: MetricValue) -> bool:
    return value is MISSING


def _to_float(cleaned: str) -> MetricValue:
    match = _NUMBER_PREFIX_RE.match(cleaned)
    if not match:
        return MISSING
    number = float(match.group(0))
    if not math.isfinite(number):
        return MISSING
    return number


def _split_on_last(cleaned: str, sep: str) -> str:
    """Resolve a string that only uses ``sep`` as separator.

    A trailing run of 1-2 digits marks the last separator as decimal, every
    other occurrence is a thousands separator.
    """
    last = cleaned.rfind(sep)
    decimals = len(cleaned) - last - 1
    if 1 <= decimals <= 2:
        head, _, tail = cleaned.rpartition(sep)
        return head.replace(sep, "") + "." + tail
    return cleaned.replace(sep, "")


def parse_metric_number(raw: object) -> MetricValue:
    """Parse a metric cell into a float or ``MISSING``.

    Examples:
        >>> parse_metric_number("1,234.56")
        1234.56
        >>> parse_metric_number("1 234,56")
        1234.56
        >>> parse_metric_number("€1,234")
        1234.0
        >>> parse_metric_number("1,23")
        1.23
        >>> parse_metric_number("—") is MISSING
        True
    """
    if raw is None:
        return MISSING
    text = str(raw).strip()
    if text in _EMPTY_MARKERS:
        return MISSING

    cleaned = _NON_NUMERIC_RE.sub("", text)
    last_dot = cleaned.rfind(".")
    last_comma = cleaned.rfind(",")

    if last_dot != -1 and last_comma != -1:
        decimal_sep = "." if last_dot > last_comma else ","
        thousands_sep = "," if decimal_sep == "." else "."
        cleaned = cleaned.replace(thousands_sep, "")
        if decimal_sep == ",":
            cleaned = cleaned.replace(",", ".")
    elif last_comma != -1:
        cleaned = _split_on_last(cleaned, ",")
    elif last_dot != -1:
        cleaned = _split_on_last(cleaned, ".")

    return _to_float(cleaned)


def metric_sort_key(value: MetricValue, descending: bool = False) -> tuple[int, float]:
    """Key for ``sorted`` that keeps ``MISSING`` last in both directions."""
    if value is MISSING:
        return (1, 0.0)
    return (0, -value if descending else value)
