"""Pick the minor and major tick levels for a domain and width."""

from logging import getLogger

from .data_models import TickLevels, TimeDomain
from .interval_catalog import DEFAULT_CATALOG, IntervalCatalog
from .space_estimation import EnumerateTicks, MeasureText, fits

logger = getLogger(__name__)


def correlate_major_index(minor_index: int, minor_to_major: tuple[int, ...]) -> int:
    """Find the smallest major index whose threshold is above the minor index."""
    for major_index, threshold in enumerate(minor_to_major):
        if threshold > minor_index:
            return major_index
    msg = f"No correlation threshold covers minor index {minor_index}"
    raise IndexError(msg)


def select_tick_levels(
    domain: TimeDomain,
    available_width: float,
    measure_text: MeasureText,
    enumerate_ticks: EnumerateTicks,
    tick_label_padding: float = 5.0,
    catalog: IntervalCatalog = DEFAULT_CATALOG,
) -> TickLevels:
    """Choose the finest minor interval that fits and its correlated major.

    When no minor interval fits, the coarsest one is used so that
    the axis always renders something.
    """
    minor_intervals = catalog.minor_intervals

    chosen_index = None
    for minor_index, interval in enumerate(minor_intervals):
        if fits(
            interval,
            domain,
            available_width,
            measure_text,
            enumerate_ticks,
            tick_label_padding,
        ):
            chosen_index = minor_index
            break

    if chosen_index is None:
        chosen_index = len(minor_intervals) - 1
        logger.debug(
            f"No time interval fits in {available_width:.0f}px,"
            f" falling back to {minor_intervals[chosen_index]}"
        )

    major_index = correlate_major_index(chosen_index, catalog.minor_to_major)
    return TickLevels(minor_index=chosen_index, major_index=major_index)
