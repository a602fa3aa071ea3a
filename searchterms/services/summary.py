from __future__ import annotations

from ..models.processing_result import ProcessingResult

"""SUMMARY line rendering for batch runs."""


def _format_seconds(value: float) -> str:
    if value == 0:
        return "0"
    if value == int(value):
        return str(int(value))
    if value < 0.01:
        # avoid scientific notation
        return f"{value:.6f}".rstrip("0").rstrip(".")
    return f"{value:.3f}".rstrip("0").rstrip(".")


def render_summary_line(result: ProcessingResult) -> str:
    """Render the SUMMARY line.

    Format:
    SUMMARY files={total} success={success} failed={failed} data_rows={data}
    total_rows={totals} warnings={warnings} elapsed_sec={elapsed}

    Examples:
        >>> from datetime import datetime, timezone
        >>> start = datetime(2026, 2, 13, 10, 0, 0, tzinfo=timezone.utc)
        >>> end = datetime(2026, 2, 13, 10, 0, 2, tzinfo=timezone.utc)
        >>> result = ProcessingResult(
        ...     success_files=1, failed_files=0, total_data_rows=120,
        ...     total_total_rows=2, warning_count=0, start_time=start,
        ...     end_time=end, elapsed_seconds=2.0,
        ... )
        >>> render_summary_line(result)
        'SUMMARY files=1 success=1 failed=0 data_rows=120 total_rows=2 warnings=0 elapsed_sec=2'
    """
    return (
        f"SUMMARY files={result.total_files} "
        f"success={result.success_files} "
        f"failed={result.failed_files} "
        f"data_rows={result.total_data_rows} "
        f"total_rows={result.total_total_rows} "
        f"warnings={result.warning_count} "
        f"elapsed_sec={_format_seconds(result.elapsed_seconds)}"
    )
