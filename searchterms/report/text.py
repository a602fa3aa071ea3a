from __future__ import annotations

import unicodedata

"""Text helpers shared by the header, row and totals classifiers."""

BOM = "\ufeff"


def strip_bom(value: str) -> str:
    """Remove a single leading byte-order-mark."""
    return value[1:] if value.startswith(BOM) else value


def to_text(value: object) -> str:
    return "" if value is None else str(value)


def normalize_header(value: object) -> str:
    """Trimmed, lower-cased, BOM-free form used for every label comparison."""
    return strip_bom(to_text(value)).strip().lower()


def collation_key(value: str) -> tuple[str, str]:
    """Sort key approximating a locale-aware comparison.

    Accents are folded into their base letter for the primary key; the
    case-folded original breaks ties so the order stays total.
    """
    decomposed = unicodedata.normalize("NFKD", value)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return (base.casefold(), value.casefold())
