from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import UTC, datetime
from pathlib import Path

from ..config.loader import ReportConfig
from ..logging.warning_log import WarningLogBuffer
from ..models.processing_result import FileStat, ProcessingResult
from ..models.report import RowKind
from ..models.report_file import FileStatus, ReportFile
from ..models.warning_record import CSV_PARSE_WARNING, READ_ERROR, WarningRecord
from ..report.assembler import parse_search_terms_csv
from .progress import ProgressTracker

"""Batch orchestration: read export files, parse each one, aggregate results.

Each file is independent: a file that cannot be read is marked failed and the
run continues. Parser warnings are collected into the warnings log but do not
fail the file.
"""

__all__ = [
    "ProcessingError",
    "scan_csv_files",
    "collect_paths",
    "process_file",
    "process_all",
]

logger = logging.getLogger(__name__)


class ProcessingError(Exception):
    """Fatal error that prevents a batch run (bad source directory)."""


def scan_csv_files(directory: Path, pattern: str = "*.csv") -> list[Path]:
    """Files matching ``pattern`` in ``directory`` (non-recursive, sorted by name).

    Raises:
        ProcessingError: If the directory doesn't exist or can't be read
    """
    if not directory.exists():
        raise ProcessingError(f"Directory not found: {directory}")

    if not directory.is_dir():
        raise ProcessingError(f"Path is not a directory: {directory}")

    try:
        return sorted(p for p in directory.glob(pattern) if p.is_file())
    except OSError as e:
        raise ProcessingError(f"Error reading directory {directory}: {e}") from e


def collect_paths(config: ReportConfig, paths: Sequence[Path] | None = None) -> list[Path]:
    """Explicit paths (directories expanded with the configured pattern) or the source directory."""
    if not paths:
        return scan_csv_files(Path(config.source_directory), config.file_pattern)
    files: list[Path] = []
    for p in paths:
        if p.is_dir():
            files.extend(scan_csv_files(p, config.file_pattern))
        else:
            files.append(p)
    return files


def process_file(file_path: Path, config: ReportConfig, warning_log: WarningLogBuffer | None = None) -> ReportFile:
    """Read and parse a single export file."""
    start_time = datetime.now(UTC)
    try:
        text = file_path.read_text(encoding=config.encoding)
    except (OSError, UnicodeDecodeError) as e:
        logger.error("read failed: %s: %s", file_path.name, e)
        if warning_log is not None:
            warning_log.append(WarningRecord.create(file_path.name, -1, READ_ERROR, str(e)))
        return ReportFile(
            path=file_path,
            name=file_path.name,
            start_time=start_time,
            end_time=datetime.now(UTC),
            status=FileStatus.FAILED,
            error=str(e),
        )

    report = parse_search_terms_csv(text)
    for message in report.warnings:
        logger.warning("%s: %s", file_path.name, message)
        if warning_log is not None:
            warning_log.append(WarningRecord.create(file_path.name, -1, CSV_PARSE_WARNING, message))

    return ReportFile(
        path=file_path,
        name=file_path.name,
        report=report,
        start_time=start_time,
        end_time=datetime.now(UTC),
        status=FileStatus.SUCCESS,
    )


def _file_stat(result: ReportFile) -> FileStat:
    report = result.report
    if report is None:
        return FileStat(
            file_name=result.name,
            status=result.status.value,
            elapsed_seconds=result.elapsed_seconds,
        )
    return FileStat(
        file_name=result.name,
        status=result.status.value,
        data_rows=len(report.rows_of_kind(RowKind.DATA)),
        total_rows=len(report.rows_of_kind(RowKind.TOTAL)),
        meta_rows=len(report.rows_of_kind(RowKind.META)),
        warnings=len(report.warnings),
        elapsed_seconds=result.elapsed_seconds,
    )


def process_all(config: ReportConfig, paths: Sequence[Path] | None = None) -> ProcessingResult:
    """Parse every export file of a run.

    Args:
        config: Report configuration (source directory, pattern, encoding)
        paths: Explicit files/directories; the configured source directory
            is scanned when omitted

    Returns:
        ProcessingResult with aggregated counts, file stats and parsed reports

    Raises:
        ProcessingError: For a missing or unreadable source directory
    """
    start_time = datetime.now(UTC)
    file_paths = collect_paths(config, paths)
    warning_log = WarningLogBuffer(Path(config.logs_directory)) if config.warnings_log else None

    files: list[ReportFile] = []
    file_stats: list[FileStat] = []
    total_rows = 0
    warning_count = 0

    with ProgressTracker(len(file_paths)) as progress:
        for file_path in file_paths:
            progress.start_file(file_path)
            result = process_file(file_path, config, warning_log)
            stat = _file_stat(result)

            success = result.status is FileStatus.SUCCESS
            if success:
                total_rows += stat.total_rows
                warning_count += stat.warnings
            progress.finish_file(success=success, data_rows=stat.data_rows)
            files.append(result)
            file_stats.append(stat)

    if warning_log is not None:
        try:
            written = warning_log.flush()
        except OSError as e:
            logger.warning("warnings log not written: %s", e)
        else:
            if written is not None:
                logger.info("warnings log: %s", written)

    end_time = datetime.now(UTC)
    return ProcessingResult(
        success_files=progress.succeeded,
        failed_files=progress.failed,
        total_data_rows=progress.data_rows,
        total_total_rows=total_rows,
        warning_count=warning_count,
        start_time=start_time,
        end_time=end_time,
        elapsed_seconds=(end_time - start_time).total_seconds(),
        file_stats=file_stats,
        files=files,
    )
