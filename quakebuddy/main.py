"""Command-line entry point.

Loads configuration, runs one fetch-parse cycle and prints the rendered
earthquake list.

Usage:
    # Last 24 hours, magnitude 2.5 and up
    python -m quakebuddy.main

    # Last week, strongest first, clock times
    python -m quakebuddy.main --time-period 7 --order-by magnitude --standard-time

Environment:
    CONFIG_PATH: Path to config file (default: config/config.yaml)
    LOG_LEVEL: Logging level (default: WARNING)
"""

import argparse
import json
import logging
import os
import sys
from dataclasses import asdict, replace
from datetime import datetime, tzinfo
from zoneinfo import ZoneInfo

from quakebuddy.core.config import Config, validate_config
from quakebuddy.core.display import TIME_DISPLAY_STANDARD, ListItem, render_list
from quakebuddy.orchestrator import Orchestrator
from quakebuddy.shell.config_loader import load_config, load_config_from_env


logger = logging.getLogger(__name__)


def configure_logging() -> None:
    """Configure root logging from the LOG_LEVEL environment variable."""
    log_level = os.environ.get("LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="quakebuddy",
        description="List recent earthquakes from the USGS event service.",
    )
    parser.add_argument("--config", help="Path to YAML config file")
    parser.add_argument(
        "--time-period",
        help='Look-back window: "24", "48" (hours), "7" or "14" (days)',
    )
    parser.add_argument("--min-magnitude", help="Minimum magnitude, e.g. 4.5")
    parser.add_argument(
        "--order-by",
        help="Sort order: time, time-asc, magnitude, magnitude-asc",
    )
    parser.add_argument("--limit", type=int, help="Maximum number of results")
    parser.add_argument(
        "--standard-time",
        action="store_true",
        help="Show clock time and date instead of relative times",
    )
    parser.add_argument("--json", action="store_true", help="Print rows as JSON")
    return parser


def _get_config(args: argparse.Namespace) -> Config:
    """Load configuration from file or environment, then apply CLI overrides."""
    if args.config or os.environ.get("CONFIG_PATH"):
        config = load_config(args.config)
    else:
        config = load_config_from_env()

    overrides = {
        "time_period": args.time_period,
        "min_magnitude": args.min_magnitude,
        "order_by": args.order_by,
        "limit": args.limit,
    }
    overrides = {k: v for k, v in overrides.items() if v is not None}
    if overrides:
        config.filters = replace(config.filters, **overrides)

    if args.standard_time:
        config.display = replace(config.display, time_display=TIME_DISPLAY_STANDARD)

    return config


def _resolve_timezone(config: Config) -> tzinfo | None:
    """Configured zone, or None to follow the system zone's DST rules."""
    if config.timezone:
        return ZoneInfo(config.timezone)
    return None


def format_row(item: ListItem) -> str:
    """Format a rendered item as one line of text."""
    when = " ".join(part for part in (item.time_text, item.date_text) if part)
    marker = " [TSUNAMI]" if item.tsunami_alert else ""
    return f"{item.magnitude:>5}  {item.location_offset}{item.primary_location}  ({when}){marker}"


def main(argv: list[str] | None = None) -> int:
    configure_logging()
    args = build_parser().parse_args(argv)

    config = _get_config(args)

    validation = validate_config(config)
    for warning in validation.warnings:
        logger.warning("%s: %s", warning.field, warning.message)
    if not validation.valid:
        for error in validation.critical_errors:
            logger.error("%s: %s", error.field, error.message)
        return 2

    now = datetime.now().astimezone()
    tz = _resolve_timezone(config)

    result = Orchestrator().process(config, now)
    items = render_list(result.earthquakes, now, tz, config.display)

    if args.json:
        print(json.dumps([asdict(item) for item in items], indent=2))
    elif not items:
        print("No earthquakes found.")
    else:
        for item in items:
            print(format_row(item))

    return 0 if result.success else 1


if __name__ == "__main__":
    sys.exit(main())
