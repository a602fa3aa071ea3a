from __future__ import annotations

import logging
import re
from collections.abc import Callable, Sequence

from ..models.field_map import CanonicalFieldMap, MetricColumns
from .text import normalize_header, strip_bom, to_text

"""Header row detection and column role classification.

Google Ads exports put a variable preamble (report title, date range, account
name) above the real header row, and the header labels vary with the UI
language and the user's column setup. Everything here works on normalized
labels (see ``normalize_header``) and is independent of column order except
where two columns match a role equally well, in which case the first one wins.

Matching is expressed as ordered strategy lists: each entry is tried against
every column before falling through to the next, so an exact label anywhere in
the header beats a substring heuristic on an earlier column.
"""

__all__ = [
    "DEFAULT_SEARCH_TERM_COLUMN",
    "MIN_HEADER_CELLS",
    "is_search_term_header_key",
    "find_header_row_index",
    "normalize_columns",
    "detect_search_term_column",
    "detect_campaign_column",
    "detect_ad_group_column",
    "is_cost_per_conversion_key",
    "is_conversion_rate_key",
    "score_cost",
    "score_impressions",
    "score_clicks",
    "score_conversions",
    "score_cost_per_conversion",
    "pick_best_column",
    "detect_metric_columns",
    "detect_field_map",
]

logger = logging.getLogger(__name__)

Matcher = Callable[[str], bool]
ScoreRule = tuple[Matcher, int]

DEFAULT_SEARCH_TERM_COLUMN = "Search term"
MIN_HEADER_CELLS = 3

SEARCH_TERM_HEADERS = frozenset({
    # English
    "search term",
    "search terms",
    "customer search term",
    "search query",
    "queries",
    # Russian
    "поисковый запрос",
    "поисковые запросы",
    "поисковый термин",
    "поисковые термины",
    "поисковая фраза",
    "поисковые фразы",
})

CAMPAIGN_HEADERS = frozenset({
    "campaign",
    "campaign name",
    "campaigns",
    "кампания",
    "кампании",
    "имя кампании",
})

AD_GROUP_HEADERS = frozenset({
    "ad group",
    "adgroup",
    "ad group name",
    "ad groups",
    "группа объявлений",
    "группы объявлений",
    "группа",
})


def _contains_any(key: str, *tokens: str) -> bool:
    return any(t in key for t in tokens)


# ---------------------------------------------------------------------------
# Search term / campaign / ad group
# ---------------------------------------------------------------------------

def _search_term_en(key: str) -> bool:
    return "search" in key and _contains_any(key, "term", "query")


def _search_term_ru(key: str) -> bool:
    return _contains_any(key, "поиск", "поисков") and _contains_any(key, "запрос", "термин", "фраз")


def _campaign_en(key: str) -> bool:
    return "campaign" in key


def _campaign_ru(key: str) -> bool:
    return "кампан" in key


def _ad_group_en(key: str) -> bool:
    return _contains_any(key, "ad group", "adgroup")


def _ad_group_ru(key: str) -> bool:
    return "групп" in key and "объяв" in key


SEARCH_TERM_MATCHERS: tuple[Matcher, ...] = (
    SEARCH_TERM_HEADERS.__contains__,
    _search_term_en,
    _search_term_ru,
)
CAMPAIGN_MATCHERS: tuple[Matcher, ...] = (
    CAMPAIGN_HEADERS.__contains__,
    _campaign_en,
    _campaign_ru,
)
AD_GROUP_MATCHERS: tuple[Matcher, ...] = (
    AD_GROUP_HEADERS.__contains__,
    _ad_group_en,
    _ad_group_ru,
)


def is_search_term_header_key(key: str) -> bool:
    """True when a normalized header label denotes the search term column."""
    return any(matcher(key) for matcher in SEARCH_TERM_MATCHERS)


def _first_match(columns: Sequence[str], matchers: Sequence[Matcher]) -> str | None:
    keys = [(col, normalize_header(col)) for col in columns]
    for matcher in matchers:
        for col, key in keys:
            if matcher(key):
                return col
    return None


def find_header_row_index(rows: Sequence[Sequence[str]]) -> int | None:
    """Index of the first row that looks like the table header, or ``None``.

    Rows with fewer than ``MIN_HEADER_CELLS`` cells are preamble candidates
    only (a one-cell "Search terms report" title must never win).

    Args:
        rows: Decoded CSV rows, preamble included

    Returns:
        0-based index of the header row, ``None`` when no row qualifies
    """
    for index, row in enumerate(rows):
        if len(row) < MIN_HEADER_CELLS:
            continue
        if any(is_search_term_header_key(normalize_header(cell)) for cell in row):
            return index
    return None


def normalize_columns(header_cells: Sequence[str]) -> list[str]:
    """Trimmed header labels; blank cells become ``Column N`` (1-based)."""
    columns: list[str] = []
    for i, cell in enumerate(header_cells):
        cleaned = strip_bom(to_text(cell)).strip()
        columns.append(cleaned or f"Column {i + 1}")
    return columns


def detect_search_term_column(columns: Sequence[str]) -> str:
    """Search term column; falls back to the first column, never absent."""
    if not columns:
        return DEFAULT_SEARCH_TERM_COLUMN
    return _first_match(columns, SEARCH_TERM_MATCHERS) or columns[0]


def detect_campaign_column(columns: Sequence[str]) -> str | None:
    """Campaign column of a header.

    Args:
        columns: Header labels as exported (not normalized)

    Returns:
        The exact label match if any column has one, otherwise the first column
        matching the English then the Russian heuristic; ``None`` when no
        column names a campaign
    """
    if not columns:
        return None
    return _first_match(columns, CAMPAIGN_MATCHERS)


def detect_ad_group_column(columns: Sequence[str]) -> str | None:
    """Ad group column, same precedence as ``detect_campaign_column``."""
    if not columns:
        return None
    return _first_match(columns, AD_GROUP_MATCHERS)


# ---------------------------------------------------------------------------
# Metric columns
# ---------------------------------------------------------------------------

_COST_PER_CONV_RE = re.compile(r"cost\s*/\s*conv")
_COST_CURRENCY_RE = re.compile(r"^cost\s*\(.+\)$")
_RU_SPEND_CURRENCY_RE = re.compile(r"^расход\s*\(.+\)$")
_RU_COST_CURRENCY_RE = re.compile(r"^стоимость\s*\(.+\)$")
_CONV_SHORT_RE = re.compile(r"^conv\.?$")


def is_cost_per_conversion_key(key: str) -> bool:
    """Cost per conversion labels ("Cost / conv.", "CPA", Russian equivalents)."""
    return (
        bool(_COST_PER_CONV_RE.search(key))
        or _contains_any(key, "cost/conv", "cost per conv", "cpa")
        or ("стоим" in key and "конв" in key)
        or ("расход" in key and "конв" in key)
    )


def is_conversion_rate_key(key: str) -> bool:
    """Conversion rate style columns ("Conv. rate", "%", "коэф.")."""
    return _contains_any(key, "rate", "%", "коэф")


def _weak_cost_en(key: str) -> bool:
    return "cost" in key and not _contains_any(key, "per", "conv", "conversion", "rate", "/")


def _weak_cost_ru(key: str) -> bool:
    return _contains_any(key, "расход", "стоимость") and not _contains_any(key, "конв", "коэф", "/")


# Each table is evaluated top to bottom; the first matching predicate gives the
# score. Exact labels > currency variants > substring heuristics > loose roots.
COST_RULES: tuple[ScoreRule, ...] = (
    (lambda k: k == "cost", 120),
    (lambda k: k in ("расход", "стоимость"), 120),
    (lambda k: bool(_RU_SPEND_CURRENCY_RE.match(k) or _RU_COST_CURRENCY_RE.match(k)), 120),
    (lambda k: bool(_COST_CURRENCY_RE.match(k)), 115),
    (_weak_cost_en, 60),
    (_weak_cost_ru, 60),
)

IMPRESSIONS_RULES: tuple[ScoreRule, ...] = (
    (lambda k: k in ("impr.", "impressions"), 110),
    (lambda k: "показ" in k, 90),
    (lambda k: k.startswith("impr"), 80),
    (lambda k: "impression" in k, 80),
)

CLICKS_RULES: tuple[ScoreRule, ...] = (
    (lambda k: k in ("clicks", "click"), 110),
    (lambda k: "click" in k, 80),
    (lambda k: "клик" in k, 80),
)

CONVERSIONS_RULES: tuple[ScoreRule, ...] = (
    (lambda k: k == "conversions", 110),
    (lambda k: bool(_CONV_SHORT_RE.match(k)), 105),
    (lambda k: "конверс" in k, 85),
    (lambda k: "conversion" in k, 80),
)

COST_PER_CONVERSION_RULES: tuple[ScoreRule, ...] = (
    (is_cost_per_conversion_key, 100),
)


def _score(key: str, rules: Sequence[ScoreRule], exclusions: Sequence[Matcher] = ()) -> int:
    if any(excluded(key) for excluded in exclusions):
        return 0
    for predicate, score in rules:
        if predicate(key):
            return score
    return 0


def score_cost(key: str) -> int:
    """Score of a normalized label as the cost column (0 = not cost)."""
    # cost-per-conversion is excluded first so "Cost / conv." never scores as cost
    return _score(key, COST_RULES, exclusions=(is_cost_per_conversion_key,))


def score_impressions(key: str) -> int:
    return _score(key, IMPRESSIONS_RULES)


def score_clicks(key: str) -> int:
    return _score(key, CLICKS_RULES)


def score_conversions(key: str) -> int:
    return _score(
        key,
        CONVERSIONS_RULES,
        exclusions=(is_conversion_rate_key, is_cost_per_conversion_key),
    )


def score_cost_per_conversion(key: str) -> int:
    return _score(key, COST_PER_CONVERSION_RULES)


def pick_best_column(columns: Sequence[str], scorer: Callable[[str], int]) -> str | None:
    """Column with the strictly highest positive score; ties keep the first seen.

    Args:
        columns: Header labels; each is normalized before scoring
        scorer: One of the ``score_*`` functions

    Returns:
        The winning label, or ``None`` when every column scores 0
    """
    best: str | None = None
    best_score = 0
    for col in columns:
        score = scorer(normalize_header(col))
        if score > best_score:
            best, best_score = col, score
    return best


def detect_metric_columns(columns: Sequence[str]) -> MetricColumns:
    """Best scoring column per metric.

    Each metric is picked independently, so one column may in principle serve
    two metrics; the exclusions in the scorers keep the usual Google Ads labels
    apart ("Cost" vs "Cost / conv.", "Conversions" vs "Conv. rate").

    Args:
        columns: Header labels

    Returns:
        MetricColumns with ``None`` for every metric no column scores for
    """
    return MetricColumns(
        cost=pick_best_column(columns, score_cost),
        impressions=pick_best_column(columns, score_impressions),
        clicks=pick_best_column(columns, score_clicks),
        conversions=pick_best_column(columns, score_conversions),
        cost_per_conversion=pick_best_column(columns, score_cost_per_conversion),
    )


def detect_field_map(columns: Sequence[str]) -> CanonicalFieldMap:
    """Resolve every canonical field of a header.

    Steps:
    1. Search term column (falls back to the first column)
    2. Campaign and ad group columns (may be absent)
    3. Metric columns by score
    """
    field_map = CanonicalFieldMap(
        search_term=detect_search_term_column(columns),
        campaign=detect_campaign_column(columns),
        ad_group=detect_ad_group_column(columns),
        metrics=detect_metric_columns(columns),
    )
    logger.debug("field map: %s", field_map.as_dict())
    return field_map
