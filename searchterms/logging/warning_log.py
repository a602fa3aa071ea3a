from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path

from ..models.warning_record import WarningRecord

"""Warnings log buffering.

Records collected during a batch run are written once, as JSON Lines, to
``logs/warnings-YYYYMMDD-HHMMSS.log`` (UTC). Nothing is written when the run
produced no records.
"""

__all__ = [
    "WarningRecord",
    "WarningLogBuffer",
]

LOGS_DIR = Path("./logs")
TIMESTAMP_FMT = "%Y%m%d-%H%M%S"


class WarningLogBuffer:
    """In-memory buffer for warning records. ``flush`` appends JSON Lines."""

    def __init__(self, logs_dir: Path = LOGS_DIR) -> None:
        self._records: list[WarningRecord] = []
        self._logs_dir = logs_dir
        self._file_path: Path | None = None

    @property
    def file_path(self) -> Path:
        if self._file_path is None:
            stamp = datetime.now(UTC).strftime(TIMESTAMP_FMT)
            self._file_path = self._logs_dir / f"warnings-{stamp}.log"
        return self._file_path

    def append(self, record: WarningRecord) -> None:
        self._records.append(record)

    def __len__(self) -> int:  # pragma: no cover (trivial)
        return len(self._records)

    def flush(self) -> Path | None:
        """Append buffered records to the log file and clear the buffer.

        Returns:
            The log file path, or ``None`` when nothing was buffered (no file is created)
        """
        if not self._records:
            return None
        fp = self.file_path
        fp.parent.mkdir(parents=True, exist_ok=True)
        with fp.open("a", encoding="utf-8") as f:
            for r in self._records:
                f.write(r.to_json_line() + "\n")
        self._records.clear()
        return fp
