from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from datetime import UTC, datetime

"""WarningRecord model for the per-run warnings log.

One record per parser warning or per file that could not be read. ``row`` is
-1 for file-level records (every parser warning is file-level today since the
decoder only reports its first message).
"""

__all__ = [
    "WarningRecord",
    "CSV_PARSE_WARNING",
    "READ_ERROR",
]

CSV_PARSE_WARNING = "CSV_PARSE_WARNING"
READ_ERROR = "READ_ERROR"


@dataclass(frozen=True)
class WarningRecord:
    """Structured warning record for JSON Lines logging.

    Attributes:
        timestamp: ISO8601 UTC timestamp with 'Z' suffix
        file: Export file name
        row: 1-based row number, -1 when not tied to a row
        warning_type: Classification in UPPER_SNAKE_CASE
        message: Human readable message
    """
    timestamp: str
    file: str
    row: int
    warning_type: str
    message: str

    @staticmethod
    def create(file: str, row: int, warning_type: str, message: str) -> WarningRecord:
        ts = datetime.now(UTC).isoformat().replace("+00:00", "Z")
        return WarningRecord(
            timestamp=ts,
            file=file,
            row=row,
            warning_type=warning_type,
            message=message,
        )

    def to_json_line(self) -> str:
        return json.dumps(asdict(self), ensure_ascii=False)
