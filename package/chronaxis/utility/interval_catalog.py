"""Ranked tables of candidate time intervals for tick labels."""

from typing import NamedTuple

from .data_models import TimeInterval, TimeUnit
from .errors import CatalogError
from .time_format import DIRECTIVES, find_directives


class IntervalCatalog(NamedTuple):
    minor_intervals: tuple[TimeInterval, ...]
    """Finest first"""
    major_intervals: tuple[TimeInterval, ...]
    """Finest first"""
    minor_to_major: tuple[int, ...]
    """Lowest minor index that maps to each major index"""


# These are for minor tick labels.
MINOR_INTERVALS = (
    TimeInterval(TimeUnit.SECOND, 1, "%I:%M:%S %p"),
    TimeInterval(TimeUnit.SECOND, 5, "%I:%M:%S %p"),
    TimeInterval(TimeUnit.SECOND, 10, "%I:%M:%S %p"),
    TimeInterval(TimeUnit.SECOND, 15, "%I:%M:%S %p"),
    TimeInterval(TimeUnit.SECOND, 30, "%I:%M:%S %p"),
    TimeInterval(TimeUnit.MINUTE, 1, "%I:%M %p"),
    TimeInterval(TimeUnit.MINUTE, 5, "%I:%M %p"),
    TimeInterval(TimeUnit.MINUTE, 10, "%I:%M %p"),
    TimeInterval(TimeUnit.MINUTE, 15, "%I:%M %p"),
    TimeInterval(TimeUnit.MINUTE, 30, "%I:%M %p"),
    TimeInterval(TimeUnit.HOUR, 1, "%I %p"),
    TimeInterval(TimeUnit.HOUR, 3, "%I %p"),
    TimeInterval(TimeUnit.HOUR, 6, "%I %p"),
    TimeInterval(TimeUnit.HOUR, 12, "%I %p"),
    TimeInterval(TimeUnit.DAY, 1, "%a %e"),
    TimeInterval(TimeUnit.DAY, 1, "%e"),
    TimeInterval(TimeUnit.MONTH, 1, "%B"),
    TimeInterval(TimeUnit.MONTH, 1, "%b"),
    TimeInterval(TimeUnit.MONTH, 3, "%B"),
    TimeInterval(TimeUnit.MONTH, 6, "%B"),
    TimeInterval(TimeUnit.YEAR, 1, "%Y"),
    TimeInterval(TimeUnit.YEAR, 1, "%y"),
    TimeInterval(TimeUnit.YEAR, 5, "%Y"),
    TimeInterval(TimeUnit.YEAR, 25, "%Y"),
)

# These are for major tick labels.
MAJOR_INTERVALS = (
    TimeInterval(TimeUnit.DAY, 1, "%B %e, %Y"),
    TimeInterval(TimeUnit.MONTH, 1, "%B %Y"),
    TimeInterval(TimeUnit.YEAR, 1, "%Y"),
    TimeInterval(TimeUnit.YEAR, 100000, ""),  # effectively blank
)

MINOR_TO_MAJOR = (
    14,  # [0, 13] -> days
    16,  # [14, 15] -> months
    20,  # [16, 19] -> years
    1000000,  # [20, infinity) -> blank
)


def validate_interval(interval: TimeInterval) -> None:
    """Check a single catalog entry."""
    if not isinstance(interval.unit, TimeUnit):
        msg = f"Unrecognized time unit in {interval}"
        raise CatalogError(msg)
    if interval.step <= 0:
        msg = f"Interval step must be positive in {interval}"
        raise CatalogError(msg)
    try:
        directives = find_directives(interval.format_string)
    except ValueError as error:
        raise CatalogError(str(error)) from error
    for directive in directives:
        if directive not in DIRECTIVES:
            msg = f"Unsupported directive '%{directive}' in {interval}"
            raise CatalogError(msg)


def validate_catalog(catalog: IntervalCatalog) -> None:
    """Check the ordering and threshold invariants of a catalog."""
    if not catalog.minor_intervals:
        msg = "At least one minor interval is required"
        raise CatalogError(msg)
    if not catalog.major_intervals:
        msg = "At least one major interval is required"
        raise CatalogError(msg)
    if len(catalog.minor_to_major) != len(catalog.major_intervals):
        msg = "Correlation thresholds must match the major intervals one to one"
        raise CatalogError(msg)

    for interval in catalog.minor_intervals + catalog.major_intervals:
        validate_interval(interval)

    thresholds = catalog.minor_to_major
    for turn in range(1, len(thresholds)):
        if thresholds[turn] < thresholds[turn - 1]:
            msg = f"Correlation thresholds must not decrease: {thresholds}"
            raise CatalogError(msg)
    if thresholds[-1] < len(catalog.minor_intervals):
        # the last threshold has to cover every minor index
        msg = "The last correlation threshold must exceed every minor index"
        raise CatalogError(msg)


DEFAULT_CATALOG = IntervalCatalog(
    minor_intervals=MINOR_INTERVALS,
    major_intervals=MAJOR_INTERVALS,
    minor_to_major=MINOR_TO_MAJOR,
)
validate_catalog(DEFAULT_CATALOG)
