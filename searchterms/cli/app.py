from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from searchterms.config.loader import DEFAULT_CONFIG_PATH, ConfigError, ReportConfig, default_config, load_config
from searchterms.logging.init import log_summary, set_debug, setup_logging
from searchterms.models.report import Report, RowKind
from searchterms.services.campaigns import campaign_key, extract_campaigns
from searchterms.services.orchestrator import ProcessingError, process_all
from searchterms.services.summary import render_summary_line
from searchterms.services.tokens import tokenize_search_term
from searchterms.services.view import metric_summary, visible_rows

"""CLI entrypoint.

Flow:
- Load config (``--config`` or ``config/report.yml``; defaults when neither
  exists and paths are given)
- Parse every export file (explicit paths or the configured directory)
- Optionally print an inspection view, the reports as JSON, or write each
  report's rows as CSV (``--csv DIR``)
- Print the SUMMARY line and exit with 0 (all parsed), 2 (some file failed)
  or 1 (fatal)
"""

EXIT_SUCCESS_ALL = 0
EXIT_PARTIAL_FAILURE = 2
EXIT_FATAL = 1

INSPECT_ROWS = 5


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Google Ads search terms report parser")
    p.add_argument("paths", nargs="*", type=Path, help="CSV exports or directories (default: source_directory)")
    p.add_argument("--config", type=Path, default=None, help=f"YAML config (default: {DEFAULT_CONFIG_PATH})")
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    p.add_argument("--inspect-data", action="store_true", help="Print detected columns & first rows")
    p.add_argument("--json", action="store_true", help="Print each parsed report as JSON")
    p.add_argument("--csv", type=Path, default=None, metavar="DIR", help="Write each report's rows as CSV into DIR")
    return p.parse_args(argv)


def _resolve_config(args: argparse.Namespace) -> ReportConfig:
    if args.config is not None:
        return load_config(args.config)
    if DEFAULT_CONFIG_PATH.exists():
        return load_config(DEFAULT_CONFIG_PATH)
    if args.paths:
        return default_config()
    raise ConfigError(f"config file not found: {DEFAULT_CONFIG_PATH}")


def _inspect_report(name: str, report: Report, cfg: ReportConfig) -> None:
    metrics = report.field_map.metrics
    print(f"FILE: {name}")
    print(f"  columns={list(report.columns)}")
    print(
        f"  search_term={report.search_term_column_name!r} "
        f"campaign={report.campaign_column_name!r} ad_group={report.ad_group_column_name!r}"
    )
    print(f"  metrics={metrics.as_dict()}")
    print(f"  date_range={report.meta.date_range!r}")
    print(f"  campaigns={extract_campaigns(report.rows, cfg.unknown_campaign_label)}")
    for warning in report.warnings:
        print(f"  warning={warning}")
    rows = visible_rows(
        report,
        filter_text=cfg.view.filter,
        sort_by=cfg.view.sort_by,
        direction=cfg.view.direction,
    )
    for row in rows[:INSPECT_ROWS]:
        summary = "; ".join(metric_summary(row, metrics))
        print(f"    [{row.kind.value}] #{row.row_id} {row.search_term!r} {summary}")
        if row.kind is RowKind.DATA:
            campaign = campaign_key(row.campaign, cfg.unknown_campaign_label)
            print(f"      campaign={campaign!r} tokens={tokenize_search_term(row.search_term)}")


def _export_rows(out_dir: Path, name: str, report: Report) -> Path:
    """Write the report rows as CSV (``__rowId``, ``__rowType``, then the columns).

    Args:
        out_dir: Target directory, created when missing
        name: Source export file name; the output is ``<stem>.rows.csv``
        report: Parsed report

    Returns:
        Path of the written file
    """
    out_dir.mkdir(parents=True, exist_ok=True)
    target = out_dir / f"{Path(name).stem}.rows.csv"
    report.to_frame().to_csv(target, index=False, encoding="utf-8")
    return target


def main(argv: list[str] | None = None) -> int:
    logger = setup_logging()

    # None only: an empty list from tests must not pull in pytest's own argv
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)

    if args.debug:
        set_debug(logger)
        logger.debug("debug mode enabled")

    try:
        cfg = _resolve_config(args)
    except ConfigError as e:
        logger.error(f"config: {e}")
        return EXIT_FATAL

    if not args.paths:
        directory = Path(cfg.source_directory)
        if not directory.exists():
            logger.error(f"directory not found: {directory}")
            return EXIT_FATAL
        logger.info(f"Processing files from: {directory}")

    try:
        result = process_all(cfg, args.paths or None)
    except ProcessingError as e:
        logger.error(f"processing: {e}")
        return EXIT_FATAL

    for report_file in result.files:
        if report_file.report is None:
            continue
        if args.inspect_data:
            _inspect_report(report_file.name, report_file.report, cfg)
        if args.json:
            print(json.dumps({"file": report_file.name, **report_file.report.to_dict()}, ensure_ascii=False))
        if args.csv is not None:
            try:
                written = _export_rows(args.csv, report_file.name, report_file.report)
            except OSError as e:
                logger.error(f"csv export: {report_file.name}: {e}")
                return EXIT_FATAL
            logger.info(f"rows written: {written}")

    log_summary(render_summary_line(result).removeprefix("SUMMARY "))

    if result.failed_files > 0:
        return EXIT_PARTIAL_FAILURE
    return EXIT_SUCCESS_ALL

