from __future__ import annotations

import csv
import io
import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

import pandas as pd

from .text import strip_bom, to_text

"""CSV decoding for Search Terms exports.

Two decoders are used by the assembler:

- ``decode_grid``: header-less scan into a ragged grid of text cells. Preamble
  lines have one or two cells while the table has many, so this uses the
  ``csv`` module (pandas requires a fixed field count per line).
- ``read_simple_table``: pandas ``read_csv`` with the first line as header,
  used when no header row could be detected in the grid.

Neither raises on malformed input; problems are returned in ``errors`` and the
rows recovered so far are kept.
"""

__all__ = [
    "DecodedGrid",
    "SimpleTable",
    "PARSE_WARNING_PREFIX",
    "decode_grid",
    "read_simple_table",
    "overlong_rows",
    "first_warning",
]

logger = logging.getLogger(__name__)

PARSE_WARNING_PREFIX = "CSV parse warning: "


@dataclass
class DecodedGrid:
    rows: list[list[str]]
    errors: list[str] = field(default_factory=list)


@dataclass
class SimpleTable:
    columns: list[str]
    records: list[dict[str, str]]  # column name -> raw text
    cells: list[tuple[str, ...]] = field(default_factory=list)  # same rows by position
    errors: list[str] = field(default_factory=list)


def first_warning(errors: Sequence[str]) -> list[str]:
    """Only the first decode error is surfaced to the caller."""
    if not errors:
        return []
    return [f"{PARSE_WARNING_PREFIX}{errors[0] or 'Unknown parsing issue'}"]


def _read_rows(text: str, strict: bool) -> list[list[str]]:
    return list(csv.reader(io.StringIO(text, newline=""), strict=strict))


def _read_rows_lenient(text: str) -> list[list[str]]:
    rows: list[list[str]] = []
    reader = csv.reader(io.StringIO(text, newline=""), strict=False)
    try:
        for row in reader:
            rows.append(row)
    except csv.Error as e:
        # already reported by the strict pass; keep what was recovered
        logger.debug("lenient decode stopped at line %d: %s", reader.line_num, e)
    return rows


def decode_grid(text: str) -> DecodedGrid:
    """Decode CSV text into rows of cells without assuming a header.

    Blank lines are skipped. A strict pass detects malformed quoting; when it
    fails the text is decoded again leniently so the rows are still returned.
    """
    text = strip_bom(text)
    errors: list[str] = []
    try:
        rows = _read_rows(text, strict=True)
    except csv.Error as e:
        errors.append(str(e))
        rows = _read_rows_lenient(text)
    if errors:
        logger.debug("grid decode warning: %s", errors[0])
    return DecodedGrid(rows=[row for row in rows if row], errors=errors)


def _clean_header(columns: Sequence[object]) -> list[str]:
    cleaned: list[str] = []
    for i, col in enumerate(columns):
        label = strip_bom(to_text(col)).strip()
        if not label or label.startswith("Unnamed: "):
            label = f"Column {i + 1}"
        cleaned.append(label)
    return cleaned


def _read_csv_kwargs() -> dict[str, object]:
    return {
        "sep": ",",
        "dtype": str,
        "keep_default_na": False,
        "na_filter": False,
        "skip_blank_lines": True,
        "index_col": False,
    }


def overlong_rows(rows: Sequence[Sequence[str]], width: int) -> list[str]:
    """Messages for rows carrying more fields than the header."""
    return [
        f"Too many fields: expected {width} fields but parsed {len(row)} (row {i + 1})"
        for i, row in enumerate(rows)
        if len(row) > width
    ]


def read_simple_table(text: str) -> SimpleTable:
    """Decode CSV text taking its first line as the header row.

    Short rows are padded with empty strings, extra trailing fields are
    dropped (see ``overlong_rows`` to report them).
    """
    text = strip_bom(text)
    errors: list[str] = []
    try:
        # header first: its width bounds usecols so long rows are cut, not fatal
        header = pd.read_csv(io.StringIO(text), nrows=0, **_read_csv_kwargs())
        width = len(header.columns)
        df = pd.read_csv(io.StringIO(text), usecols=range(width), **_read_csv_kwargs())
    except pd.errors.EmptyDataError:
        logger.debug("simple decode: no columns")
        return SimpleTable(columns=[], records=[], errors=errors)
    except (pd.errors.ParserError, csv.Error) as e:
        errors.append(str(e))
        return SimpleTable(columns=[], records=[], errors=errors)

    columns = _clean_header(df.columns)
    df.columns = columns
    df = df.fillna("")

    records: list[dict[str, str]] = []
    cells: list[tuple[str, ...]] = []
    for raw in df.itertuples(index=False, name=None):
        values = tuple(to_text(v) for v in raw)
        cells.append(values)
        records.append(dict(zip(columns, values, strict=False)))
    return SimpleTable(columns=columns, records=records, cells=cells, errors=errors)
