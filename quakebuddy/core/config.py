"""Configuration models - Pure data structures.

These are domain models for configuration. The actual loading
(I/O) is handled by the shell layer.
"""

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from quakebuddy.core.display import DisplayPreferences, TIME_DISPLAY_OPTIONS
from quakebuddy.core.query import (
    ORDER_BY_OPTIONS,
    TIME_PERIODS,
    USGS_API_BASE,
    QueryFilters,
)


@dataclass
class Config:
    """Application configuration.

    This is a pure data structure - no I/O or side effects.

    Attributes:
        base_url: USGS FDSN event query endpoint
        filters: Query filters sent to the service
        display: List display preferences
        timezone: IANA zone name for clock times (None for system local)
    """
    base_url: str = USGS_API_BASE
    filters: QueryFilters = field(default_factory=QueryFilters)
    display: DisplayPreferences = field(default_factory=DisplayPreferences)
    timezone: str | None = None


@dataclass
class ValidationError:
    """A configuration validation error.

    Attributes:
        field: The field that has an error
        message: Human-readable error description
        severity: 'error' or 'warning'
    """
    field: str
    message: str
    severity: str = "error"


@dataclass
class ValidationResult:
    """Result of validating configuration.

    Attributes:
        valid: True if no errors (warnings are OK)
        errors: List of validation errors/warnings
    """
    valid: bool
    errors: list[ValidationError] = field(default_factory=list)

    @property
    def warnings(self) -> list[ValidationError]:
        """Get only warnings."""
        return [e for e in self.errors if e.severity == "warning"]

    @property
    def critical_errors(self) -> list[ValidationError]:
        """Get only critical errors."""
        return [e for e in self.errors if e.severity == "error"]


def validate_filters(filters: QueryFilters) -> list[ValidationError]:
    """Validate query filters.

    Pure function. Unknown time periods and sort orders are only warnings
    since the service is the final judge of what it accepts.

    Args:
        filters: Filters to validate

    Returns:
        List of validation errors (empty if valid)
    """
    errors = []

    if filters.time_period not in TIME_PERIODS:
        errors.append(ValidationError(
            field="filters.time_period",
            message=(
                f"Unknown time period '{filters.time_period}', "
                f"start time will be now. Expected one of {list(TIME_PERIODS)}"
            ),
            severity="warning",
        ))

    try:
        numeric = Decimal(filters.min_magnitude).is_finite()
    except (InvalidOperation, TypeError):
        numeric = False
    if not numeric:
        errors.append(ValidationError(
            field="filters.min_magnitude",
            message=f"Minimum magnitude '{filters.min_magnitude}' is not a number",
        ))

    if filters.order_by not in ORDER_BY_OPTIONS:
        errors.append(ValidationError(
            field="filters.order_by",
            message=(
                f"Unknown order_by '{filters.order_by}'. "
                f"Expected one of {list(ORDER_BY_OPTIONS)}"
            ),
            severity="warning",
        ))

    if filters.limit <= 0:
        errors.append(ValidationError(
            field="filters.limit",
            message=f"Limit must be positive, got {filters.limit}",
        ))

    return errors


def validate_config(config: Config) -> ValidationResult:
    """Validate configuration for errors and warnings.

    Pure function.

    Args:
        config: Configuration to validate

    Returns:
        ValidationResult with any errors/warnings found
    """
    errors = validate_filters(config.filters)

    if not config.base_url.startswith(("http://", "https://")):
        errors.append(ValidationError(
            field="base_url",
            message=f"Base URL must be http(s), got '{config.base_url}'",
        ))

    if config.display.time_display not in TIME_DISPLAY_OPTIONS:
        errors.append(ValidationError(
            field="display.time_display",
            message=(
                f"Unknown time display '{config.display.time_display}', "
                "relative times will be shown"
            ),
            severity="warning",
        ))

    if config.timezone is not None:
        try:
            ZoneInfo(config.timezone)
        except (ZoneInfoNotFoundError, ValueError):
            errors.append(ValidationError(
                field="timezone",
                message=f"Unknown time zone '{config.timezone}'",
            ))

    has_critical = any(e.severity == "error" for e in errors)

    return ValidationResult(
        valid=not has_critical,
        errors=errors,
    )
