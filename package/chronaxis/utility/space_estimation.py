"""Decide whether the labels of a time interval fit in the available width."""

from collections.abc import Callable
from datetime import datetime

from .data_models import TimeDomain, TimeInterval, TimeUnit
from .time_format import compile_format
from .time_units import offset_time

MAX_TICKS_PER_PROBE = 50

MeasureText = Callable[[str], float]
EnumerateTicks = Callable[[TimeUnit, int], list[datetime]]


def exceeds_tick_budget(interval: TimeInterval, domain: TimeDomain) -> bool:
    """Tell if the interval would produce more than the allowed tick count.

    This is only a rough estimate based on calendar arithmetic,
    used to skip text measurement for obviously dense intervals.
    """
    start, end = domain
    tick_budget = interval.step * MAX_TICKS_PER_PROBE
    budget_end = offset_time(start, interval.unit, tick_budget)
    return budget_end < end


def labels_fit(
    interval: TimeInterval,
    domain: TimeDomain,
    available_width: float,
    measure_text: MeasureText,
    enumerate_ticks: EnumerateTicks,
    tick_label_padding: float,
) -> bool:
    """Measure the actual labels of the interval against the width."""
    tick_values = list(enumerate_ticks(interval.unit, interval.step))
    # Add start and end points just in case there are zero ticks.
    tick_values.append(domain[0])
    tick_values.append(domain[1])

    formatter = compile_format(interval.format_string)
    max_label_width = max(measure_text(formatter(t)) for t in tick_values)

    label_footprint = 2 * tick_label_padding + max_label_width
    return label_footprint * (len(tick_values) + 1) < available_width


def fits(
    interval: TimeInterval,
    domain: TimeDomain,
    available_width: float,
    measure_text: MeasureText,
    enumerate_ticks: EnumerateTicks,
    tick_label_padding: float = 5.0,
) -> bool:
    """Tell if the labels of the interval fit without overlapping."""
    if exceeds_tick_budget(interval, domain):
        return False
    return labels_fit(
        interval,
        domain,
        available_width,
        measure_text,
        enumerate_ticks,
        tick_label_padding,
    )
