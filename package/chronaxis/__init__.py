from .axis import Axis, AxisSurface, LabelHandle, LinearAxis, TimeAxis
from .utility import (
    DEFAULT_CATALOG,
    AxisOrientation,
    AxisSettings,
    FixedPitchMeasurer,
    IntervalCatalog,
    LinearScale,
    TickLevels,
    TimeInterval,
    TimeScale,
    TimeUnit,
    select_tick_levels,
)

__all__ = [
    "DEFAULT_CATALOG",
    "Axis",
    "AxisOrientation",
    "AxisSettings",
    "AxisSurface",
    "FixedPitchMeasurer",
    "IntervalCatalog",
    "LabelHandle",
    "LinearAxis",
    "LinearScale",
    "TickLevels",
    "TimeAxis",
    "TimeInterval",
    "TimeScale",
    "TimeUnit",
    "select_tick_levels",
]
