from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

from tqdm import tqdm
from tqdm.std import tqdm as TqdmType

"""Progress display for batch runs with tqdm (TTY only).

One bar per run, advanced once per export file. The postfix shows how many
files parsed, how many failed and how many data rows were read so far. The
bar is disabled when stdout is not a TTY so CI logs stay free of control
sequences; the counters are kept either way.
"""

__all__ = [
    "ProgressTracker",
    "is_tty_enabled",
]


def is_tty_enabled() -> bool:
    """True when stdout is a TTY and the bar should be drawn."""
    return sys.stdout.isatty()


class ProgressTracker:
    """File-level progress for one batch run.

    Usage::

        with ProgressTracker(len(paths)) as progress:
            for path in paths:
                progress.start_file(path)
                ...
                progress.finish_file(success=True, data_rows=12)
    """

    def __init__(self, total_files: int, *, description: str = "Parsing exports") -> None:
        """Create the tracker (and the bar on a TTY).

        Args:
            total_files: Number of export files in the run
            description: Bar label; the current file name is appended while it is parsed
        """
        self.description = description
        self.succeeded = 0
        self.failed = 0
        self.data_rows = 0

        self.pbar: TqdmType[Any] | None = None
        if is_tty_enabled():
            self.pbar = tqdm(
                total=total_files,
                desc=description,
                unit="file",
                disable=False,
                leave=True,
                position=0,
                ncols=80,
                ascii=True,
            )

    def start_file(self, file_path: Path) -> None:
        if self.pbar is not None:
            self.pbar.set_description(f"{self.description} ({file_path.name})")

    def finish_file(self, success: bool, data_rows: int = 0) -> None:
        """Count one finished file and advance the bar.

        Args:
            success: Whether the file was read and parsed
            data_rows: Data rows of the parsed report (ignored for failures)
        """
        if success:
            self.succeeded += 1
            self.data_rows += data_rows
        else:
            self.failed += 1

        if self.pbar is not None:
            self.pbar.set_postfix(success=self.succeeded, failed=self.failed, rows=self.data_rows)
            self.pbar.update(1)
            self.pbar.set_description(self.description)

    def close(self) -> None:
        if self.pbar is not None:
            self.pbar.close()
            self.pbar = None

    def __enter__(self) -> ProgressTracker:
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()
