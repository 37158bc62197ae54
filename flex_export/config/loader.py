from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError

from ..services.flex_grid import DEFAULT_PRICE_FACTOR
from ..services.row_filter import (
    DEFAULT_AVAILABILITY,
    DEFAULT_EXCLUDED_FROM_DAYS,
    DEFAULT_EXCLUDED_VEHICLE_CODES,
    DEFAULT_VEHICLE_CODE_REWRITES,
)

"""Config loader.

Responsibilities:
- Load the optional YAML file (default: config/flex_export.yml)
- Validate it against config_schema.json (unknown keys rejected)
- Fill every key that is not given with the built-in business rules

A missing config file is not an error: the defaults reproduce the standard
Grid.csv / Flexfiles*.csv processing.
"""

SCHEMA_PATH = Path(__file__).with_name("config_schema.json")
DEFAULT_CONFIG_PATH = Path("config/flex_export.yml")

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    pass


@dataclass(frozen=True)
class ExportConfig:
    grid_file: str = "Grid.csv"
    input_prefix: str = "Flexfiles"
    input_suffix: str = ".csv"
    output_prefix: str = "processed_"
    output_suffix: str = ".txt"
    excluded_from_days: frozenset[str] = DEFAULT_EXCLUDED_FROM_DAYS
    excluded_vehicle_codes: frozenset[str] = DEFAULT_EXCLUDED_VEHICLE_CODES
    vehicle_code_rewrites: Mapping[str, str] = field(
        default_factory=lambda: dict(DEFAULT_VEHICLE_CODE_REWRITES)
    )
    price_factor: float = DEFAULT_PRICE_FACTOR
    availability_code: str = DEFAULT_AVAILABILITY
    # 既存の呼び出し側はエラー時も exit 0 を前提としている
    exit_nonzero_on_error: bool = False


def _validate_config_schema(data: dict[str, Any]) -> None:
    """Validate config data against the bundled JSON schema.

    Raises:
        ConfigError: schema file unreadable or the data violates it
    """
    try:
        schema = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"invalid schema file: {e}") from e
    try:
        jsonschema.validate(data, schema)
    except ValidationError as e:
        raise ConfigError(f"config validation failed: {e.message}") from e


def load_config(path: Path = DEFAULT_CONFIG_PATH) -> ExportConfig:
    if not path.exists():
        logger.debug("config file not found, using defaults: %s", path)
        return ExportConfig()
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid yaml: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"config root must be a mapping: {path}")

    _validate_config_schema(data)

    defaults = ExportConfig()
    return ExportConfig(
        grid_file=data.get("grid_file", defaults.grid_file),
        input_prefix=data.get("input_prefix", defaults.input_prefix),
        input_suffix=data.get("input_suffix", defaults.input_suffix),
        output_prefix=data.get("output_prefix", defaults.output_prefix),
        output_suffix=data.get("output_suffix", defaults.output_suffix),
        excluded_from_days=frozenset(data.get("excluded_from_days", defaults.excluded_from_days)),
        excluded_vehicle_codes=frozenset(
            data.get("excluded_vehicle_codes", defaults.excluded_vehicle_codes)
        ),
        vehicle_code_rewrites=dict(data.get("vehicle_code_rewrites", defaults.vehicle_code_rewrites)),
        price_factor=float(data.get("price_factor", defaults.price_factor)),
        availability_code=data.get("availability_code", defaults.availability_code),
        exit_nonzero_on_error=data.get("exit_nonzero_on_error", defaults.exit_nonzero_on_error),
    )
