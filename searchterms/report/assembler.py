from __future__ import annotations

import logging
from collections.abc import Sequence

from ..models.report import Report, ReportMeta, ReportRow
from .dates import extract_date_range
from .headers import DEFAULT_SEARCH_TERM_COLUMN, detect_field_map, find_header_row_index, normalize_columns
from .reader import decode_grid, first_warning, overlong_rows, read_simple_table
from .rows import build_meta_row, classify_rows
from .text import strip_bom
from .totals import sort_totals

"""Report assembly: raw export text -> ``Report``.

Typical export layout::

    Search terms report
    10 February 2026 - 13 February 2026
    Search term,Match type,Campaign,Ad group,Cost,Impr.,Clicks,...
    buy shoes,Exact,Brand,Shoes,€1.20,10,2,...
    Total: Search,,,,€12.50,100,5,...

The header row is found by content, not position. Lines above it are the
preamble (kept as display lines, scanned for the date range). When no header
row can be detected the text is read as a plain CSV whose first line is the
header ("simple mode"), without preamble handling.

The function is pure: same text in, structurally identical report out.
"""

__all__ = [
    "parse_search_terms_csv",
    "join_row_cells",
]

logger = logging.getLogger(__name__)


def join_row_cells(cells: Sequence[str]) -> str:
    """Flatten a preamble row into one display line."""
    return ", ".join(c.strip() for c in cells if c and c.strip()).strip()


def _assemble(
    columns: list[str],
    raw_rows: Sequence[Sequence[str]],
    warnings: list[str],
    preamble_lines: list[str],
    date_range: str | None,
) -> Report:
    field_map = detect_field_map(columns)
    data_rows, total_rows = classify_rows(columns, raw_rows, field_map)

    rows: list[ReportRow] = []
    if date_range:
        rows.append(build_meta_row(columns, field_map, date_range))
    rows.extend(data_rows)
    rows.extend(sort_totals(total_rows, field_map.search_term))

    return Report(
        columns=columns,
        rows=rows,
        field_map=field_map,
        warnings=warnings,
        meta=ReportMeta(preamble_lines=preamble_lines, date_range=date_range),
    )


def _parse_simple(text: str, grid_rows: Sequence[Sequence[str]], errors: Sequence[str]) -> Report:
    """Read ``text`` with its first line as the header (no preamble handling).

    Column labels come from the grid so repeated names stay as exported
    (pandas would rename the second ``Cost`` to ``Cost.1``). When pandas cannot
    decode the text at all, the rows recovered by the grid decode are used.
    """
    table = read_simple_table(text)
    errors = [*errors, *table.errors]
    if grid_rows:
        columns = normalize_columns(grid_rows[0])
        errors.extend(overlong_rows(grid_rows[1:], len(columns)))
    else:
        columns = table.columns or [DEFAULT_SEARCH_TERM_COLUMN]

    if table.columns:
        body: Sequence[Sequence[str]] = table.cells
    else:
        if grid_rows:
            logger.debug("simple decode failed, using %d grid rows", len(grid_rows) - 1)
        body = grid_rows[1:]
    return _assemble(columns, body, first_warning(errors), preamble_lines=[], date_range=None)


def parse_search_terms_csv(text: str) -> Report:
    """Parse a Google Ads "Search terms" export into a ``Report``.

    Never raises for decodable text: decode problems are reported in
    ``Report.warnings`` (only the first problem is kept) and whatever rows
    could be recovered are returned.

    Args:
        text: Full file content, already decoded to ``str``.

    Returns:
        Report with rows ordered meta -> data (source order) -> totals.
    """
    text = strip_bom(text or "")
    grid = decode_grid(text)

    header_index = find_header_row_index(grid.rows)
    if header_index is None:
        logger.debug("no header row detected, reading first line as header")
        return _parse_simple(text, grid.rows, grid.errors)

    logger.debug("header row at index %d", header_index)
    preamble_lines = [line for line in map(join_row_cells, grid.rows[:header_index]) if line]
    columns = normalize_columns(grid.rows[header_index])
    return _assemble(
        columns,
        grid.rows[header_index + 1:],
        first_warning(grid.errors),
        preamble_lines=preamble_lines,
        date_range=extract_date_range(preamble_lines),
    )
