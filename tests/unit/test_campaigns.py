from __future__ import annotations

from searchterms.models.report import ReportRow, RowKind
from searchterms.report.assembler import parse_search_terms_csv
from searchterms.services.campaigns import UNKNOWN_CAMPAIGN, campaign_key, extract_campaigns


def test_extract_campaigns_from_data_rows(export_en):
    assert extract_campaigns(parse_search_terms_csv(export_en).rows) == ["Brand", "Generic"]


def test_extract_campaigns_russian(export_ru):
    assert extract_campaigns(parse_search_terms_csv(export_ru).rows) == ["Бренд", "Общая"]


def test_extract_campaigns_ignores_totals_and_meta():
    rows = [
        ReportRow(row_id="meta-date-range", kind=RowKind.META, values={}, campaign="Meta"),
        ReportRow(row_id=1, kind=RowKind.DATA, values={}, campaign=" zeta "),
        ReportRow(row_id=2, kind=RowKind.TOTAL, values={}, campaign="Totals"),
        ReportRow(row_id=3, kind=RowKind.DATA, values={}, campaign="Alpha"),
        ReportRow(row_id=4, kind=RowKind.DATA, values={}, campaign="zeta"),
    ]
    assert extract_campaigns(rows) == ["Alpha", "zeta"]


def test_extract_campaigns_unknown_when_missing():
    report = parse_search_terms_csv("Search term,Cost,Clicks\nshoes,1,2\n")
    assert extract_campaigns(report.rows) == [UNKNOWN_CAMPAIGN]
    assert extract_campaigns(report.rows, "Без кампании") == ["Без кампании"]


def test_campaign_key():
    assert campaign_key(" Brand ") == "Brand"
    assert campaign_key("") == UNKNOWN_CAMPAIGN
    assert campaign_key(None, "n/a") == "n/a"
