from datetime import datetime
from enum import Enum
from typing import NamedTuple

# We use `BaseModel` when parsing, validation, or mutability is needed.
# Otherwise, `NamedTuple` is preferred because it's more performant.


class TimeUnit(Enum):
    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    MONTH = "month"
    YEAR = "year"


class AxisOrientation(Enum):
    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"

    def is_horizontal(self) -> bool:
        return self in (
            AxisOrientation.TOP,
            AxisOrientation.BOTTOM,
        )


class TextAnchor(Enum):
    START = "start"
    MIDDLE = "middle"


class TickLevel(Enum):
    MINOR = "minor"
    MAJOR = "major"


class TimeInterval(NamedTuple):
    unit: TimeUnit
    step: int
    format_string: str
    """Strftime-style pattern used for labels at this interval"""


class TickLevels(NamedTuple):
    minor_index: int
    major_index: int


class SpaceRequest(NamedTuple):
    width: float
    height: float
    wants_width: bool
    wants_height: bool


class TickMark(NamedTuple):
    key: int | float
    """Identity of the tick, milliseconds since the epoch on time axes"""
    position: float
    """Pixel coordinate along the axis"""
    length: float
    level: TickLevel


class LabelPlacement(NamedTuple):
    key: int | float
    text: str
    position: float
    """Pixel coordinate of the anchor point along the axis"""
    x_offset: float
    y_offset: float
    anchor: TextAnchor


class AxisRendering(NamedTuple):
    tick_marks: list[TickMark]
    labels: dict[TickLevel, list[LabelPlacement]]


TimeDomain = tuple[datetime, datetime]
