from __future__ import annotations

from datetime import UTC, datetime

import pytest

from searchterms.models.processing_result import ProcessingResult
from searchterms.services.summary import render_summary_line


def _result(elapsed: float, failed: int = 0) -> ProcessingResult:
    now = datetime.now(UTC)
    return ProcessingResult(
        success_files=2,
        failed_files=failed,
        total_data_rows=5,
        total_total_rows=2,
        warning_count=1,
        start_time=now,
        end_time=now,
        elapsed_seconds=elapsed,
    )


def test_render_summary_line_format():
    assert render_summary_line(_result(1.5, failed=1)) == (
        "SUMMARY files=3 success=2 failed=1 data_rows=5 total_rows=2 warnings=1 elapsed_sec=1.5"
    )


@pytest.mark.parametrize(
    "elapsed,expected",
    [(0, "0"), (2.0, "2"), (0.1234, "0.123"), (0.0012, "0.0012"), (12.3456, "12.346")],
)
def test_render_summary_line_elapsed(elapsed, expected):
    assert render_summary_line(_result(elapsed)).endswith(f"elapsed_sec={expected}")
