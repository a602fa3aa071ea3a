from __future__ import annotations

from searchterms import parse_search_terms_csv

REPORT_KEYS = {
    "columns",
    "rows",
    "searchTermColumnName",
    "campaignColumnName",
    "adGroupColumnName",
    "warnings",
    "meta",
}


def test_report_dict_keys(export_en):
    out = parse_search_terms_csv(export_en).to_dict()
    assert set(out) == REPORT_KEYS
    assert set(out["meta"]) == {"preambleLines", "dateRange"}


def test_every_row_has_identity_and_derived_fields(export_en):
    out = parse_search_terms_csv(export_en).to_dict()
    for row in out["rows"]:
        assert {"__rowId", "__rowType", "searchTerm", "campaign", "adGroup"} <= set(row)
        assert row["__rowType"] in {"meta", "data", "total"}
        for col in out["columns"]:
            assert col in row


def test_row_ids_unique(export_en, export_ru):
    for text in (export_en, export_ru):
        ids = [r["__rowId"] for r in parse_search_terms_csv(text).to_dict()["rows"]]
        assert len(ids) == len(set(ids))


def test_row_segments_in_order(export_ru):
    types = [r["__rowType"] for r in parse_search_terms_csv(export_ru).to_dict()["rows"]]
    rank = {"meta": 0, "data": 1, "total": 2}
    assert types == sorted(types, key=rank.__getitem__)


def test_empty_report_dict():
    out = parse_search_terms_csv("").to_dict()
    assert out["rows"] == []
    assert out["columns"] == ["Search term"]
    assert out["searchTermColumnName"] == "Search term"
    assert out["campaignColumnName"] is None
    assert out["meta"] == {"preambleLines": [], "dateRange": None}
