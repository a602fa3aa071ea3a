from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path

from .report import Report

"""ReportFile domain model and FileStatus enum.

Outcome of one export file in a batch run. A file only fails when its
content cannot be read; parser warnings do not fail a file.
"""

__all__ = [
    "FileStatus",
    "ReportFile",
]


class FileStatus(Enum):
    SUCCESS = "success"
    FAILED = "failed"


@dataclass(frozen=True)
class ReportFile:
    path: Path
    name: str
    status: FileStatus
    report: Report | None = None        # set on success
    start_time: datetime | None = None  # UTC
    end_time: datetime | None = None    # UTC
    error: str | None = None            # read failure reason

    @property
    def elapsed_seconds(self) -> float:
        if self.start_time is None or self.end_time is None:
            return 0.0
        return (self.end_time - self.start_time).total_seconds()
