"""Domain models for Search Terms report ingestion."""

from .field_map import CanonicalField, CanonicalFieldMap, MetricColumns
from .processing_result import FileStat, ProcessingResult
from .report import META_ROW_ID, Report, ReportMeta, ReportRow, RowKind
from .report_file import FileStatus, ReportFile
from .warning_record import WarningRecord

__all__ = [
    # Report models
    "CanonicalField",
    "CanonicalFieldMap",
    "MetricColumns",
    "META_ROW_ID",
    "Report",
    "ReportMeta",
    "ReportRow",
    "RowKind",
    # Processing models
    "FileStat",
    "FileStatus",
    "ProcessingResult",
    "ReportFile",
    "WarningRecord",
]
