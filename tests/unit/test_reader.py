from __future__ import annotations

from searchterms.report.reader import (
    PARSE_WARNING_PREFIX,
    decode_grid,
    first_warning,
    overlong_rows,
    read_simple_table,
)


def test_decode_grid_ragged_rows_and_blank_lines():
    text = 'Search terms report\n\nSearch term,Campaign,Cost\n"shoes, red",Brand,"1,20"\n'
    grid = decode_grid(text)

    assert grid.errors == []
    assert grid.rows == [
        ["Search terms report"],
        ["Search term", "Campaign", "Cost"],
        ["shoes, red", "Brand", "1,20"],
    ]


def test_decode_grid_strips_bom():
    grid = decode_grid("\ufeffSearch term,Campaign,Cost\n")
    assert grid.rows[0][0] == "Search term"


def test_decode_grid_malformed_quotes_still_returns_rows():
    grid = decode_grid('Search term,Campaign,Cost\nshoes,"Bra"nd,1\n')

    assert len(grid.errors) == 1
    assert grid.rows[0] == ["Search term", "Campaign", "Cost"]
    assert grid.rows[1][0] == "shoes"
    assert len(grid.rows) == 2


def test_first_warning_only_first_message():
    assert first_warning([]) == []
    assert first_warning(["bad quote", "other"]) == [f"{PARSE_WARNING_PREFIX}bad quote"]
    assert first_warning([""]) == [f"{PARSE_WARNING_PREFIX}Unknown parsing issue"]


def test_overlong_rows():
    rows = [["a", "1"], ["b", "2", "x"], ["c"]]
    assert overlong_rows(rows, 2) == ["Too many fields: expected 2 fields but parsed 3 (row 2)"]


def test_read_simple_table_pads_short_rows():
    table = read_simple_table("Keyword,Clicks,Cost\nshoes,4\nboots,2,1.50\n")

    assert table.errors == []
    assert table.columns == ["Keyword", "Clicks", "Cost"]
    assert table.cells == [("shoes", "4", ""), ("boots", "2", "1.50")]
    assert table.records[1] == {"Keyword": "boots", "Clicks": "2", "Cost": "1.50"}


def test_read_simple_table_keeps_text_verbatim():
    table = read_simple_table("Keyword,Clicks\n007,NA\n")
    assert table.cells == [("007", "NA")]


def test_read_simple_table_names_blank_header_cells():
    table = read_simple_table("Keyword,,Cost\nshoes,x,1\n")
    assert table.columns == ["Keyword", "Column 2", "Cost"]


def test_read_simple_table_empty_text():
    table = read_simple_table("")
    assert table.columns == []
    assert table.records == []
    assert table.errors == []
