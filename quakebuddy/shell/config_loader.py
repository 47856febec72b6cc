"""Configuration Loader - Imperative Shell.

This module handles loading configuration from YAML files and
environment variables. All I/O is contained here.

Models (Config, QueryFilters, DisplayPreferences) are defined in the core
package to avoid information leakage between layers.
"""

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from quakebuddy.core.config import Config
from quakebuddy.core.display import DisplayPreferences, TIME_DISPLAY_AGO
from quakebuddy.core.formatter import NEAR_THE
from quakebuddy.core.query import DEFAULT_LIMIT, USGS_API_BASE, QueryFilters


logger = logging.getLogger(__name__)


DEFAULT_CONFIG_PATH = "config/config.yaml"

_TRUE_VALUES = {"1", "true", "yes", "on", "enabled"}


def _parse_bool(value: Any, default: bool) -> bool:
    """Parse a boolean from YAML or an environment string."""
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in _TRUE_VALUES


def _parse_filters(data: dict[str, Any]) -> QueryFilters:
    """Parse query filters from config data.

    Magnitudes are kept as strings so they reach the service verbatim.
    """
    return QueryFilters(
        time_period=str(data.get("time_period", "24")),
        min_magnitude=str(data.get("min_magnitude", "2.5")),
        order_by=str(data.get("order_by", "time")),
        limit=int(data.get("limit", DEFAULT_LIMIT)),
    )


def _parse_display(data: dict[str, Any]) -> DisplayPreferences:
    """Parse display preferences from config data."""
    return DisplayPreferences(
        time_display=str(data.get("time_display", TIME_DISPLAY_AGO)),
        tsunami_theme=_parse_bool(data.get("tsunami_theme"), True),
        use_24_hour=_parse_bool(data.get("use_24_hour"), False),
        near_label=str(data.get("near_label", NEAR_THE)),
    )


def load_config_from_dict(data: dict[str, Any]) -> Config:
    """Load configuration from a dictionary.

    Pure function.

    Args:
        data: Configuration dictionary

    Returns:
        Parsed Config object
    """
    return Config(
        base_url=data.get("base_url", USGS_API_BASE),
        filters=_parse_filters(data.get("filters") or {}),
        display=_parse_display(data.get("display") or {}),
        timezone=data.get("timezone"),
    )


def load_config(config_path: str | Path | None = None) -> Config:
    """Load configuration from a YAML file.

    This method performs file I/O.

    Args:
        config_path: Path to YAML config file.
                    If None, uses CONFIG_PATH env var or default.

    Returns:
        Parsed Config object

    Raises:
        yaml.YAMLError: If config file is invalid YAML
    """
    if config_path is None:
        config_path = os.environ.get("CONFIG_PATH", DEFAULT_CONFIG_PATH)

    path = Path(config_path)

    logger.info("Loading configuration from %s", path)

    if not path.exists():
        logger.warning("Config file not found: %s, using defaults", path)
        return Config()

    with open(path, "r") as f:
        data = yaml.safe_load(f)

    if data is None:
        logger.warning("Config file is empty, using defaults")
        return Config()

    config = load_config_from_dict(data)

    logger.info(
        "Loaded config: time_period=%s, min_magnitude=%s, order_by=%s",
        config.filters.time_period,
        config.filters.min_magnitude,
        config.filters.order_by,
    )

    return config


def load_config_from_env() -> Config:
    """Load configuration from environment variables.

    Useful for running without a YAML file.

    Environment variables:
        USGS_BASE_URL: Service endpoint
        QUAKE_TIME_PERIOD: "24", "48", "7" or "14"
        QUAKE_MIN_MAGNITUDE: Minimum magnitude
        QUAKE_ORDER_BY: FDSN orderby value
        QUAKE_LIMIT: Maximum results
        QUAKE_TIME_DISPLAY: "ago" or "standard"
        QUAKE_TSUNAMI_THEME: Highlight today's tsunami warnings
        QUAKE_24_HOUR: Use a 24-hour clock
        QUAKE_TIMEZONE: IANA time zone name

    Returns:
        Config object from environment
    """
    filters = QueryFilters(
        time_period=os.environ.get("QUAKE_TIME_PERIOD", "24"),
        min_magnitude=os.environ.get("QUAKE_MIN_MAGNITUDE", "2.5"),
        order_by=os.environ.get("QUAKE_ORDER_BY", "time"),
        limit=int(os.environ.get("QUAKE_LIMIT", str(DEFAULT_LIMIT))),
    )

    display = DisplayPreferences(
        time_display=os.environ.get("QUAKE_TIME_DISPLAY", TIME_DISPLAY_AGO),
        tsunami_theme=_parse_bool(os.environ.get("QUAKE_TSUNAMI_THEME"), True),
        use_24_hour=_parse_bool(os.environ.get("QUAKE_24_HOUR"), False),
    )

    return Config(
        base_url=os.environ.get("USGS_BASE_URL", USGS_API_BASE),
        filters=filters,
        display=display,
        timezone=os.environ.get("QUAKE_TIMEZONE"),
    )
