from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError

"""Config loader.

Responsibilities:
- Load YAML (default ``config/report.yml``)
- Validate against ``report_schema.json`` (unknown keys rejected)
- Apply defaults for every optional key
"""

__all__ = [
    "ConfigError",
    "ViewConfig",
    "ReportConfig",
    "DEFAULT_CONFIG_PATH",
    "SCHEMA_PATH",
    "default_config",
    "load_config",
]

DEFAULT_CONFIG_PATH = Path("config/report.yml")
SCHEMA_PATH = Path(__file__).with_name("report_schema.json")


class ConfigError(Exception):
    pass


@dataclass(frozen=True)
class ViewConfig:
    sort_by: str | None = None  # metric role, e.g. "cost"
    direction: str = "desc"
    filter: str = ""


@dataclass(frozen=True)
class ReportConfig:
    source_directory: str
    file_pattern: str = "*.csv"
    encoding: str = "utf-8"
    unknown_campaign_label: str = "Unknown campaign"
    warnings_log: bool = True
    logs_directory: str = "./logs"
    view: ViewConfig = field(default_factory=ViewConfig)


def default_config(source_directory: str = ".") -> ReportConfig:
    return ReportConfig(source_directory=source_directory)


def _validate_config_schema(data: dict[str, Any]) -> None:
    """Validate config data against the JSON schema.

    Raises:
        ConfigError: schema file missing or invalid, or data fails validation.
    """
    if not SCHEMA_PATH.exists():
        raise ConfigError(f"config schema not found: {SCHEMA_PATH}")

    try:
        schema = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
        jsonschema.validate(data, schema)
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid schema file: {e}") from e
    except ValidationError as e:
        raise ConfigError(f"config validation failed: {e.message}") from e


def load_config(path: Path) -> ReportConfig:
    """Load and validate a YAML config file.

    Args:
        path: YAML file; only ``source_directory`` is required

    Returns:
        ReportConfig with defaults filled in for omitted keys

    Raises:
        ConfigError: missing file, invalid YAML, non-mapping root or schema violation
    """
    if not path.exists():
        raise ConfigError(f"config file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid yaml: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"config root must be a mapping: {path}")

    _validate_config_schema(data)

    defaults = default_config(data["source_directory"])
    view_raw = data.get("view") or {}
    view = ViewConfig(
        sort_by=view_raw.get("sort_by"),
        direction=view_raw.get("direction", defaults.view.direction),
        filter=view_raw.get("filter", defaults.view.filter),
    )
    return ReportConfig(
        source_directory=data["source_directory"],
        file_pattern=data.get("file_pattern", defaults.file_pattern),
        encoding=data.get("encoding", defaults.encoding),
        unknown_campaign_label=data.get("unknown_campaign_label", defaults.unknown_campaign_label),
        warnings_log=data.get("warnings_log", defaults.warnings_log),
        logs_directory=data.get("logs_directory", defaults.logs_directory),
        view=view,
    )
