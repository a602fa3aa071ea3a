"""Google Ads "Search terms" report ingestion.

Turns a raw CSV export into a normalized ``Report`` that a negative-keyword
curation UI can display, filter and sort.
"""

from .models.field_map import CanonicalField, CanonicalFieldMap, MetricColumns
from .models.report import Report, ReportMeta, ReportRow, RowKind
from .report import MISSING, parse_metric_number, parse_search_terms_csv

__all__ = [
    "CanonicalField",
    "CanonicalFieldMap",
    "MetricColumns",
    "Report",
    "ReportMeta",
    "ReportRow",
    "RowKind",
    "MISSING",
    "parse_metric_number",
    "parse_search_terms_csv",
]

__version__ = "0.1.0"
