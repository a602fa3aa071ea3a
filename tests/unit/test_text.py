from __future__ import annotations

from searchterms.report.text import collation_key, normalize_header, strip_bom, to_text


def test_strip_bom_only_leading():
    assert strip_bom("\ufeffSearch term") == "Search term"
    assert strip_bom("Search\ufeff") == "Search\ufeff"


def test_normalize_header():
    assert normalize_header("\ufeff  Search Term ") == "search term"
    assert normalize_header(None) == ""
    assert to_text(None) == ""


def test_collation_key_folds_accents_and_case():
    names = ["Éclair", "apple", "Banana", "eclair"]
    assert sorted(names, key=collation_key) == ["apple", "Banana", "eclair", "Éclair"]
