from __future__ import annotations

import pytest

from searchterms.report.numbers import MISSING, is_missing, metric_sort_key, parse_metric_number


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("1,234.56", 1234.56),
        ("1.234,56", 1234.56),
        ("1 234,56", 1234.56),
        ("1\u00a0234,56", 1234.56),
        ("€1,234.50", 1234.5),
        ("1,234", 1234.0),
        ("1.234", 1234.0),
        ("1,23", 1.23),
        ("0.5", 0.5),
        ("12", 12.0),
        ("-3,5", -3.5),
        ("45.10%", 45.1),
    ],
)
def test_parse_metric_number_locales(raw, expected):
    assert parse_metric_number(raw) == pytest.approx(expected)


@pytest.mark.parametrize("raw", [None, "", "   ", "—", "-", "n/a", "abc"])
def test_parse_metric_number_missing(raw):
    assert parse_metric_number(raw) is MISSING
    assert is_missing(parse_metric_number(raw))


def test_parse_metric_number_accepts_numbers():
    assert parse_metric_number(7) == 7.0
    assert parse_metric_number(2.5) == 2.5


def test_metric_sort_key_missing_last_both_directions():
    values = [3.0, MISSING, 10.0, 1.0]

    asc = sorted(values, key=lambda v: metric_sort_key(v))
    desc = sorted(values, key=lambda v: metric_sort_key(v, descending=True))

    assert asc == [1.0, 3.0, 10.0, MISSING]
    assert desc == [10.0, 3.0, 1.0, MISSING]


def test_metric_sort_key_equal_values_keep_order():
    items = [("a", 1.0), ("b", 1.0), ("c", 2.0)]
    ordered = sorted(items, key=lambda it: metric_sort_key(it[1], descending=True))
    assert [name for name, _ in ordered] == ["c", "a", "b"]
