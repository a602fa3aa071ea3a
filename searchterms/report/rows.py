from __future__ import annotations

from collections.abc import Sequence

from ..models.field_map import CanonicalFieldMap
from ..models.report import META_ROW_ID, ReportRow, RowKind
from .text import normalize_header, to_text

"""Row classification: data rows, total rows and the synthetic date-range row."""

__all__ = [
    "TOTAL_PREFIXES",
    "is_total_label",
    "pad_cells",
    "map_cells",
    "build_row",
    "build_meta_row",
    "classify_rows",
]

TOTAL_PREFIXES = ("total:", "итого:", "всего:")


def is_total_label(term: str) -> bool:
    """True for "Total: ...", "Итого: ..." and "Всего: ..." labels (any case)."""
    return normalize_header(term).startswith(TOTAL_PREFIXES)


def pad_cells(columns: Sequence[str], cells: Sequence[str]) -> tuple[str, ...]:
    """Cells cut or padded with empty strings to the header width."""
    width = len(columns)
    padded = tuple(to_text(c) for c in cells[:width])
    return padded + ("",) * (width - len(padded))


def map_cells(columns: Sequence[str], cells: Sequence[str]) -> dict[str, str]:
    """Column name -> cell text. A repeated column name keeps its last value."""
    return dict(zip(columns, pad_cells(columns, cells), strict=True))


def build_row(row_id: int, values: dict[str, str], field_map: CanonicalFieldMap,
              cells: Sequence[str] = ()) -> ReportRow:
    """Turn one mapped table row into a ReportRow.

    Args:
        row_id: 1-based position of the row in the table body
        values: Column name -> cell text
        field_map: Detected columns; the search term label decides the row kind
        cells: Positional cells, kept for repeated column names

    Returns:
        A TOTAL row when the search term is a total label, otherwise a DATA row
        (campaign and ad group are empty when the header lacks those columns)
    """
    term = values.get(field_map.search_term, "")
    kind = RowKind.TOTAL if is_total_label(term) else RowKind.DATA
    return ReportRow(
        row_id=row_id,
        kind=kind,
        values=values,
        search_term=term,
        campaign=values.get(field_map.campaign, "") if field_map.campaign else "",
        ad_group=values.get(field_map.ad_group, "") if field_map.ad_group else "",
        cells=tuple(cells),
    )


def build_meta_row(columns: Sequence[str], field_map: CanonicalFieldMap, date_range: str) -> ReportRow:
    """Synthetic row showing the export date range in the search term column."""
    values = {col: "" for col in columns}
    values[field_map.search_term or columns[0]] = date_range
    return ReportRow(
        row_id=META_ROW_ID,
        kind=RowKind.META,
        values=values,
        search_term=date_range,
        cells=tuple(values.get(col, "") for col in columns),
    )


def classify_rows(
    columns: Sequence[str],
    raw_rows: Sequence[Sequence[str]],
    field_map: CanonicalFieldMap,
) -> tuple[list[ReportRow], list[ReportRow]]:
    """Build rows from positional cells and split them into (data, totals).

    Identifiers are 1-based positions in the source table, so they stay the
    same whatever order the rows are later displayed in.

    Args:
        columns: Header labels
        raw_rows: Body rows as decoded; short rows are padded, long rows cut
        field_map: Detected columns

    Returns:
        (data rows, total rows), each in source order
    """
    data: list[ReportRow] = []
    totals: list[ReportRow] = []
    for index, cells in enumerate(raw_rows):
        padded = pad_cells(columns, cells)
        row = build_row(index + 1, map_cells(columns, padded), field_map, padded)
        (totals if row.kind is RowKind.TOTAL else data).append(row)
    return data, totals
