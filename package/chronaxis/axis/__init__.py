"""Axis implementations and the interface they share."""

from .label_join import JoinSummary, KeyedJoin
from .linear_axis import LinearAxis
from .protocol import Axis, AxisSurface, LabelHandle
from .time_axis import TimeAxis

__all__ = [
    "Axis",
    "AxisSurface",
    "JoinSummary",
    "KeyedJoin",
    "LabelHandle",
    "LinearAxis",
    "TimeAxis",
]
