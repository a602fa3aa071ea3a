from __future__ import annotations

import re
from collections.abc import Callable, Sequence

"""Date range extraction from the preamble above the header row.

Exports usually carry the reporting period on its own line, e.g.
``10 February 2026 - 13 February 2026`` or ``1 февраля 2026 – 7 февраля 2026``.
The matching line is returned verbatim; no date parsing is attempted.
"""

__all__ = [
    "extract_date_range",
    "DATE_RANGE_MATCHERS",
]

_DATE = r"[0-9]{1,2}\s+[A-Za-zА-Яа-яЁё]+\s+[0-9]{4}"
_DASH = r"[-–—]"
_DATE_RANGE_RE = re.compile(rf"({_DATE})\s*{_DASH}\s*({_DATE})")
_YEAR_RE = re.compile(r"[0-9]{4}")
_DASH_RE = re.compile(_DASH)


def _explicit_range(line: str) -> bool:
    return bool(_DATE_RANGE_RE.search(line))


def _year_with_dash(line: str) -> bool:
    return bool(_YEAR_RE.search(line)) and bool(_DASH_RE.search(line))


# Tried in order over all lines; the first strategy with a hit wins.
DATE_RANGE_MATCHERS: tuple[Callable[[str], bool], ...] = (
    _explicit_range,
    _year_with_dash,
)


def extract_date_range(lines: Sequence[str]) -> str | None:
    """First preamble line that looks like a date range.

    Args:
        lines: Preamble lines above the header row

    Returns:
        The stripped line, or ``None`` when no line matches
    """
    candidates = [str(line).strip() for line in lines if line and str(line).strip()]
    for matcher in DATE_RANGE_MATCHERS:
        for line in candidates:
            if matcher(line):
                return line
    return None
