"""Search Terms export parsing: header detection, row classification, assembly."""

from .assembler import parse_search_terms_csv
from .numbers import MISSING, metric_sort_key, parse_metric_number

__all__ = [
    "parse_search_terms_csv",
    "parse_metric_number",
    "metric_sort_key",
    "MISSING",
]
