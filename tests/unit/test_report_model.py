from __future__ import annotations

import pytest

from searchterms.models.field_map import CanonicalField, CanonicalFieldMap, MetricColumns
from searchterms.models.report import ReportRow, RowKind
from searchterms.report.assembler import parse_search_terms_csv


def test_row_to_dict_overlays_derived_fields():
    row = ReportRow(
        row_id=1,
        kind=RowKind.DATA,
        values={"Search term": "shoes", "Campaign": "Brand", "campaign": "raw"},
        search_term="shoes",
        campaign="Brand",
    )
    out = row.to_dict()

    assert out["__rowId"] == 1
    assert out["__rowType"] == "data"
    assert out["Search term"] == "shoes"
    assert out["searchTerm"] == "shoes"
    assert out["campaign"] == "Brand"
    assert out["adGroup"] == ""


def test_row_get():
    row = ReportRow(row_id=1, kind=RowKind.DATA, values={"Cost": "1"})
    assert row.get("Cost") == "1"
    assert row.get("Clicks") == ""
    assert row.get(None, "n/a") == "n/a"


def test_field_map_get_roles():
    field_map = CanonicalFieldMap(
        search_term="Search term",
        campaign="Campaign",
        metrics=MetricColumns(cost="Cost"),
    )
    assert field_map.get(CanonicalField.SEARCH_TERM) == "Search term"
    assert field_map.get("campaign") == "Campaign"
    assert field_map.get("adGroup") is None
    assert field_map.get("cost") == "Cost"
    assert field_map.get("clicks") is None


def test_report_to_dict_shape(export_en):
    out = parse_search_terms_csv(export_en).to_dict()

    assert set(out) == {
        "columns",
        "rows",
        "searchTermColumnName",
        "campaignColumnName",
        "adGroupColumnName",
        "warnings",
        "meta",
    }
    assert out["searchTermColumnName"] == "Search term"
    assert out["campaignColumnName"] == "Campaign"
    assert out["adGroupColumnName"] is None
    assert out["meta"] == {
        "preambleLines": ["Search terms report", "10 February 2026 - 13 February 2026"],
        "dateRange": "10 February 2026 - 13 February 2026",
    }
    assert out["rows"][0]["__rowId"] == "meta-date-range"
    assert out["rows"][0]["__rowType"] == "meta"
    assert out["rows"][-1]["__rowType"] == "total"


def test_report_to_frame(export_en):
    frame = parse_search_terms_csv(export_en).to_frame()

    assert list(frame.columns[:3]) == ["__rowId", "__rowType", "Search term"]
    assert len(frame) == 5
    assert list(frame["__rowType"]) == ["meta", "data", "data", "data", "total"]
    assert frame.loc[1, "Cost"] == "€5.20"


def test_report_is_read_only(export_en):
    report = parse_search_terms_csv(export_en)

    with pytest.raises(TypeError):
        report.rows[1].values["Cost"] = "0"
    with pytest.raises(AttributeError):
        report.rows.append(report.rows[0])
    with pytest.raises(AttributeError):
        report.warnings.append("late warning")
    assert isinstance(report.columns, tuple)
    assert isinstance(report.meta.preamble_lines, tuple)


def test_row_values_copied_from_input():
    values = {"Search term": "shoes"}
    row = ReportRow(row_id=1, kind=RowKind.DATA, values=values, search_term="shoes")
    values["Search term"] = "boots"
    assert row.values["Search term"] == "shoes"
