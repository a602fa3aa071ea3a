from __future__ import annotations

from collections.abc import Sequence

from ..models.report import ReportRow
from .text import collation_key, normalize_header

"""Stable ordering of "Total: X" rows.

Google Ads appends one total row per channel bucket (``Total: Search``,
``Total: Performance Max`` ...) in no particular order. Known buckets follow
``TOTALS_ORDER``; anything else goes after them, alphabetically.
"""

__all__ = [
    "TOTALS_ORDER",
    "UNKNOWN_BUCKET_RANK",
    "total_bucket",
    "bucket_rank",
    "sort_totals",
]

TOTALS_ORDER = (
    "performance max",
    "display",
    "demand gen",
    "account",
    "filtered search terms",
    "search",
)

UNKNOWN_BUCKET_RANK = 999


def total_bucket(label: str) -> str:
    """Normalized text after the first colon (whole label when there is none)."""
    cleaned = str(label or "").strip()
    head, sep, tail = cleaned.partition(":")
    if not sep:
        return normalize_header(cleaned)
    return normalize_header(tail.strip())


def bucket_rank(bucket: str) -> int:
    """Position of a bucket in ``TOTALS_ORDER``.

    Args:
        bucket: Normalized bucket text as returned by ``total_bucket``

    Returns:
        0-based rank, or ``UNKNOWN_BUCKET_RANK`` for buckets not listed
    """
    try:
        return TOTALS_ORDER.index(bucket)
    except ValueError:
        return UNKNOWN_BUCKET_RANK


def _label(row: ReportRow, search_term_column: str | None) -> str:
    value = row.values.get(search_term_column) if search_term_column else None
    return value if value is not None else row.search_term


def sort_totals(total_rows: Sequence[ReportRow], search_term_column: str | None) -> list[ReportRow]:
    """Order total rows by bucket priority, then bucket text (stable)."""
    def _key(row: ReportRow) -> tuple[int, tuple[str, str]]:
        bucket = total_bucket(_label(row, search_term_column))
        return (bucket_rank(bucket), collation_key(bucket))

    return sorted(total_rows, key=_key)
