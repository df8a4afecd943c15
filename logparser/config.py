"""Configuration loading from CLI args, env vars, and optional YAML file."""

import logging
import os
from dataclasses import dataclass

import yaml

logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ("text", "json")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(ValueError):
    """Raised for unreadable or invalid configuration values."""


@dataclass(frozen=True)
class Config:
    severity_threshold: int = 50
    output_format: str = "text"   # "text" or "json"
    color: bool = False
    log_level: str = "WARNING"


def load_yaml_config(path: str | None) -> dict:
    """Load settings from a YAML file. Returns empty dict if no path."""
    if not path:
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        logger.warning("Config file %s not found, using defaults", path)
        return {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")
    logger.info("Loaded YAML config from %s", path)
    return data


def _to_int(value, name: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"{name} must be an integer, got {value!r}") from e


def _to_bool(value) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)


def load_config(cli_args, yaml_data: dict) -> Config:
    """Build Config from defaults, YAML data, env vars, then CLI args (last wins)."""
    defaults = Config()

    threshold = yaml_data.get("severity_threshold", defaults.severity_threshold)
    output_format = yaml_data.get("output_format", defaults.output_format)
    color = yaml_data.get("color", defaults.color)
    log_level = yaml_data.get("log_level", defaults.log_level)

    threshold = os.environ.get("LOG_PARSER_SEVERITY", threshold)
    output_format = os.environ.get("LOG_PARSER_OUTPUT", output_format)
    color = os.environ.get("LOG_PARSER_COLOR", color)
    log_level = os.environ.get("LOG_PARSER_LOG_LEVEL", log_level)

    if getattr(cli_args, "severity", None) is not None:
        threshold = cli_args.severity
    if getattr(cli_args, "output", None):
        output_format = cli_args.output
    if getattr(cli_args, "color", False):
        color = True
    if getattr(cli_args, "verbose", False):
        log_level = "DEBUG"

    if output_format not in OUTPUT_FORMATS:
        raise ConfigError(
            f"output_format must be one of {', '.join(OUTPUT_FORMATS)}, got {output_format!r}"
        )

    log_level = str(log_level).upper()
    if log_level not in LOG_LEVELS:
        raise ConfigError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {log_level!r}")

    return Config(
        severity_threshold=_to_int(threshold, "severity_threshold"),
        output_format=output_format,
        color=_to_bool(color),
        log_level=log_level,
    )
