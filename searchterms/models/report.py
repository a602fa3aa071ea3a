from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any

import pandas as pd

from .field_map import CanonicalFieldMap

"""Report domain model: the normalized result of parsing one Search Terms export.

Rows are created once by the assembler and never mutated afterwards. Any UI
state (negative keywords, selections) is kept outside and keyed by ``row_id``.
"""

__all__ = [
    "RowKind",
    "ReportRow",
    "ReportMeta",
    "Report",
    "META_ROW_ID",
]

META_ROW_ID = "meta-date-range"


class RowKind(Enum):
    """Row category inside a report.

    Display order at assembly time: META -> DATA (source order) -> TOTAL.
    """
    DATA = "data"
    META = "meta"
    TOTAL = "total"


@dataclass(frozen=True)
class ReportRow:
    """One parsed row.

    ``values`` holds every original column verbatim (column name -> raw text)
    as a read-only mapping; ``cells`` keeps the same values by position so
    duplicate column names are still addressable.
    """
    row_id: int | str  # META_ROW_ID for the date-range row, 1-based source index otherwise
    kind: RowKind
    values: Mapping[str, str]
    search_term: str = ""
    campaign: str = ""
    ad_group: str = ""
    cells: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", MappingProxyType(dict(self.values)))
        object.__setattr__(self, "cells", tuple(self.cells))

    def get(self, column: str | None, default: str = "") -> str:
        if column is None:
            return default
        return self.values.get(column, default)

    def to_dict(self) -> dict[str, Any]:
        """External shape: raw columns overlaid with the derived fields."""
        out: dict[str, Any] = {"__rowId": self.row_id, "__rowType": self.kind.value}
        out.update(self.values)
        out["searchTerm"] = self.search_term
        out["campaign"] = self.campaign
        out["adGroup"] = self.ad_group
        return out


@dataclass(frozen=True)
class ReportMeta:
    preamble_lines: tuple[str, ...] = ()
    date_range: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "preamble_lines", tuple(self.preamble_lines))

    def to_dict(self) -> dict[str, Any]:
        return {"preambleLines": list(self.preamble_lines), "dateRange": self.date_range}


@dataclass(frozen=True)
class Report:
    """Parsed Search Terms report.

    Read-only once built: sequences are stored as tuples and row values as
    mapping proxies. Consumers derive sort order, filters and negative keyword
    lists into new collections.

    Column labels are the exported header cells (blank cells named
    ``Column N``); a repeated label appears twice in ``columns`` and each row
    keeps its last value under that name in ``values``.
    """
    columns: tuple[str, ...]
    rows: tuple[ReportRow, ...]
    field_map: CanonicalFieldMap
    warnings: tuple[str, ...] = ()
    meta: ReportMeta = field(default_factory=ReportMeta)

    def __post_init__(self) -> None:
        object.__setattr__(self, "columns", tuple(self.columns))
        object.__setattr__(self, "rows", tuple(self.rows))
        object.__setattr__(self, "warnings", tuple(self.warnings))

    @property
    def search_term_column_name(self) -> str:
        return self.field_map.search_term

    @property
    def campaign_column_name(self) -> str | None:
        return self.field_map.campaign

    @property
    def ad_group_column_name(self) -> str | None:
        return self.field_map.ad_group

    def rows_of_kind(self, kind: RowKind) -> list[ReportRow]:
        return [r for r in self.rows if r.kind is kind]

    @property
    def data_rows(self) -> list[ReportRow]:
        return self.rows_of_kind(RowKind.DATA)

    @property
    def total_rows(self) -> list[ReportRow]:
        return self.rows_of_kind(RowKind.TOTAL)

    @property
    def meta_rows(self) -> list[ReportRow]:
        return self.rows_of_kind(RowKind.META)

    def to_dict(self) -> dict[str, Any]:
        return {
            "columns": list(self.columns),
            "rows": [r.to_dict() for r in self.rows],
            "searchTermColumnName": self.search_term_column_name,
            "campaignColumnName": self.campaign_column_name,
            "adGroupColumnName": self.ad_group_column_name,
            "warnings": list(self.warnings),
            "meta": self.meta.to_dict(),
        }

    def to_frame(self) -> pd.DataFrame:
        """Rows as a DataFrame (``__rowId``, ``__rowType`` then the report columns)."""
        header = ["__rowId", "__rowType", *dict.fromkeys(self.columns)]
        records = []
        for row in self.rows:
            record: dict[str, Any] = {"__rowId": row.row_id, "__rowType": row.kind.value}
            for col in header[2:]:
                record[col] = row.get(col)
            records.append(record)
        return pd.DataFrame(records, columns=header)
