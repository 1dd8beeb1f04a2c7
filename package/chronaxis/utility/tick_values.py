"""Tick marks and label anchor positions for chosen time intervals."""

from collections.abc import Callable, Iterable
from datetime import datetime, timedelta

from .data_models import (
    AxisOrientation,
    TextAnchor,
    TickLevel,
    TickMark,
    TimeDomain,
    TimeInterval,
)
from .space_estimation import EnumerateTicks
from .time_units import EPOCH

# Label rows count from 1 and tick mark rows from 0.
LABEL_LEVEL_INDEX = {TickLevel.MINOR: 1, TickLevel.MAJOR: 2}
MARK_LEVEL_INDEX = {TickLevel.MINOR: 0, TickLevel.MAJOR: 1}


def tick_key(moment: datetime) -> int:
    """Identity of a tick, in whole milliseconds since the epoch."""
    return (moment - EPOCH) // timedelta(milliseconds=1)


def union_tick_values(*tick_groups: Iterable[datetime]) -> list[datetime]:
    """Merge tick groups, dropping repeated instants and sorting by time."""
    unique: dict[int, datetime] = {}
    for tick_group in tick_groups:
        for moment in tick_group:
            unique.setdefault(tick_key(moment), moment)
    return [unique[key] for key in sorted(unique)]


def raw_tick_positions(
    interval: TimeInterval,
    domain: TimeDomain,
    enumerate_ticks: EnumerateTicks,
) -> list[datetime]:
    """Enumerated ticks wrapped by the domain bounds.

    A tick that coincides with a bound appears twice, which yields repeated
    label keys. The label join keeps only the first of them.
    """
    start, end = domain
    return [start, *enumerate_ticks(interval.unit, interval.step), end]


def is_centered(interval: TimeInterval) -> bool:
    """Only unit-step intervals put their labels between ticks."""
    return interval.step == 1


def label_positions(
    interval: TimeInterval,
    domain: TimeDomain,
    enumerate_ticks: EnumerateTicks,
) -> list[datetime]:
    """Moments where the labels of the interval are anchored."""
    tick_positions = raw_tick_positions(interval, domain, enumerate_ticks)
    if not is_centered(interval):
        return tick_positions

    return [
        (tick_positions[i + 1] - tick_positions[i]) / 2 + tick_positions[i]
        for i in range(len(tick_positions) - 1)
    ]


def label_anchor(interval: TimeInterval) -> TextAnchor:
    return TextAnchor.MIDDLE if is_centered(interval) else TextAnchor.START


def label_x_offset(interval: TimeInterval, tick_label_padding: float) -> float:
    return 0.0 if is_centered(interval) else tick_label_padding


def label_vertical_offset(
    tick_length: float,
    level_index: int,
    orientation: AxisOrientation,
    available_height: float,
) -> float:
    """Distance of a label row from the top edge of the axis.

    Minor labels sit closer to the axis line and major labels further out,
    which stacks the two label rows.
    """
    offset = tick_length / (2 - level_index + 1)
    if orientation == AxisOrientation.BOTTOM:
        return offset
    return available_height - offset


def tick_mark_length(tick_length: float, level_index: int) -> float:
    """Major tick marks are drawn longer than minor ones."""
    return tick_length / (2 - level_index)


def build_tick_marks(
    minor_ticks: list[datetime],
    major_ticks: list[datetime],
    tick_length: float,
    position: Callable[[datetime], float],
) -> list[TickMark]:
    """Deduplicated tick marks of both levels, a shared instant being major."""
    major_keys = {tick_key(t) for t in major_ticks}

    tick_marks: list[TickMark] = []
    for moment in union_tick_values(minor_ticks, major_ticks):
        key = tick_key(moment)
        level = TickLevel.MAJOR if key in major_keys else TickLevel.MINOR
        tick_marks.append(
            TickMark(
                key=key,
                position=position(moment),
                length=tick_mark_length(tick_length, MARK_LEVEL_INDEX[level]),
                level=level,
            )
        )
    return tick_marks
