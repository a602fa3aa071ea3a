from __future__ import annotations

from collections.abc import Iterable

from ..models.report import ReportRow, RowKind
from ..report.text import collation_key

"""Campaign listing for campaign-scoped negative keywords."""

__all__ = [
    "UNKNOWN_CAMPAIGN",
    "campaign_key",
    "extract_campaigns",
]

UNKNOWN_CAMPAIGN = "Unknown campaign"


def campaign_key(name: object, unknown_label: str = UNKNOWN_CAMPAIGN) -> str:
    """Trimmed campaign name; empty names map to ``unknown_label``."""
    cleaned = "" if name is None else str(name).strip()
    return cleaned or unknown_label


def extract_campaigns(rows: Iterable[ReportRow], unknown_label: str = UNKNOWN_CAMPAIGN) -> list[str]:
    """Sorted distinct campaigns of data rows; ``[unknown_label]`` when none.

    Meta and total rows never contribute.
    """
    names = {row.campaign.strip() for row in rows if row.kind is RowKind.DATA and row.campaign.strip()}
    if not names:
        return [unknown_label]
    return sorted(names, key=collation_key)
