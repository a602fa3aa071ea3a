from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from .report_file import ReportFile

"""Batch processing result models.

``ProcessingResult`` carries the numbers for the SUMMARY line plus the
per-file outcomes (with their parsed reports) for inspection output.
"""


@dataclass(frozen=True)
class FileStat:
    """Per-file statistics."""
    file_name: str
    status: str  # success/failed
    data_rows: int = 0
    total_rows: int = 0
    meta_rows: int = 0
    warnings: int = 0
    elapsed_seconds: float = 0.0


@dataclass(frozen=True)
class ProcessingResult:
    success_files: int
    failed_files: int
    total_data_rows: int
    total_total_rows: int
    warning_count: int
    start_time: datetime
    end_time: datetime
    elapsed_seconds: float
    file_stats: list[FileStat] | None = None
    files: list[ReportFile] = field(default_factory=list)

    @property
    def total_files(self) -> int:
        return self.success_files + self.failed_files
