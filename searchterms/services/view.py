from __future__ import annotations

import logging

from ..models.field_map import CanonicalField, MetricColumns
from ..models.report import Report, ReportRow, RowKind
from ..report.numbers import metric_sort_key, parse_metric_number

"""Read-only display view over a report.

Only the data segment is filtered and sorted; the date-range row stays on
top and total rows stay at the bottom in their assembled order.
"""

__all__ = [
    "SORT_DIRECTIONS",
    "METRIC_LABELS",
    "has_value",
    "visible_rows",
    "metric_summary",
]

logger = logging.getLogger(__name__)

SORT_DIRECTIONS = ("asc", "desc")

METRIC_LABELS = (
    (CanonicalField.COST, "Cost"),
    (CanonicalField.IMPRESSIONS, "Impr."),
    (CanonicalField.CLICKS, "Clicks"),
    (CanonicalField.CONVERSIONS, "Conv."),
    (CanonicalField.COST_PER_CONVERSION, "Cost/conv."),
)


def has_value(value: object) -> bool:
    """False for blank cells and the dash placeholders Google Ads prints."""
    s = "" if value is None else str(value).strip()
    return s not in ("", "—", "-")


def _matches(row: ReportRow, query: str) -> bool:
    return query in row.search_term.lower() or query in row.campaign.lower()


def visible_rows(
    report: Report,
    filter_text: str = "",
    sort_by: CanonicalField | str | None = None,
    direction: str | None = None,
    metrics: MetricColumns | None = None,
) -> list[ReportRow]:
    """Rows in display order: meta, filtered/sorted data, totals.

    Args:
        report: Parsed report (not modified).
        filter_text: Case-insensitive substring matched against search term
            or campaign of data rows.
        sort_by: Metric role to sort data rows by; ``None`` keeps source order.
        direction: ``"asc"`` or ``"desc"``; anything else disables sorting.
        metrics: Metric column assignment; defaults to the one detected
            when the report was parsed.

    Rows whose metric is missing always come last; equal values keep their
    source order.
    """
    meta_rows: list[ReportRow] = []
    data_rows: list[ReportRow] = []
    total_rows: list[ReportRow] = []
    for row in report.rows:
        if row.kind is RowKind.META:
            meta_rows.append(row)
        elif row.kind is RowKind.TOTAL:
            total_rows.append(row)
        else:
            data_rows.append(row)

    query = (filter_text or "").strip().lower()
    if query:
        data_rows = [r for r in data_rows if _matches(r, query)]

    if sort_by is not None and direction in SORT_DIRECTIONS:
        if metrics is None:
            metrics = report.field_map.metrics
        column = metrics.get(sort_by)
        if column is None:
            logger.debug("sort by %s ignored: column not detected", sort_by)
        else:
            descending = direction == "desc"
            data_rows = sorted(
                data_rows,
                key=lambda r: metric_sort_key(parse_metric_number(r.values.get(column)), descending),
            )

    return [*meta_rows, *data_rows, *total_rows]


def metric_summary(row: ReportRow, metrics: MetricColumns) -> list[str]:
    """``"Label: value"`` items for the metrics present on a row."""
    items: list[str] = []
    for role, label in METRIC_LABELS:
        column = metrics.get(role)
        if column and has_value(row.values.get(column)):
            items.append(f"{label}: {str(row.values[column]).strip()}")
    return items
