from .axis_settings import AxisSettings, read_axis_settings, save_axis_settings
from .data_models import (
    AxisOrientation,
    AxisRendering,
    LabelPlacement,
    SpaceRequest,
    TextAnchor,
    TickLevel,
    TickLevels,
    TickMark,
    TimeDomain,
    TimeInterval,
    TimeUnit,
)
from .errors import AxisStateError, CatalogError
from .interval_catalog import (
    DEFAULT_CATALOG,
    MAJOR_INTERVALS,
    MINOR_INTERVALS,
    MINOR_TO_MAJOR,
    IntervalCatalog,
    validate_catalog,
)
from .scale import LinearScale, TimeScale, from_timestamp, nice_step
from .simply_format import format_fixed_float
from .space_estimation import (
    MAX_TICKS_PER_PROBE,
    exceeds_tick_budget,
    fits,
    labels_fit,
)
from .text_measure import FixedPitchMeasurer, TextMeasurer
from .tick_levels import correlate_major_index, select_tick_levels
from .tick_values import (
    LABEL_LEVEL_INDEX,
    MARK_LEVEL_INDEX,
    build_tick_marks,
    is_centered,
    label_anchor,
    label_positions,
    label_vertical_offset,
    label_x_offset,
    raw_tick_positions,
    tick_key,
    tick_mark_length,
    union_tick_values,
)
from .time_format import compile_format, format_time
from .time_units import (
    EPOCH,
    enumerate_ticks,
    floor_time,
    offset_time,
    to_utc,
    unit_number,
)
from .timing import DurationRecorder
from .type_safety import Implements

__all__ = [
    "DEFAULT_CATALOG",
    "EPOCH",
    "LABEL_LEVEL_INDEX",
    "MAJOR_INTERVALS",
    "MARK_LEVEL_INDEX",
    "MAX_TICKS_PER_PROBE",
    "MINOR_INTERVALS",
    "MINOR_TO_MAJOR",
    "AxisOrientation",
    "AxisRendering",
    "AxisSettings",
    "AxisStateError",
    "CatalogError",
    "DurationRecorder",
    "FixedPitchMeasurer",
    "Implements",
    "IntervalCatalog",
    "LabelPlacement",
    "LinearScale",
    "SpaceRequest",
    "TextAnchor",
    "TextMeasurer",
    "TickLevel",
    "TickLevels",
    "TickMark",
    "TimeDomain",
    "TimeInterval",
    "TimeScale",
    "TimeUnit",
    "build_tick_marks",
    "compile_format",
    "correlate_major_index",
    "enumerate_ticks",
    "exceeds_tick_budget",
    "fits",
    "floor_time",
    "format_fixed_float",
    "format_time",
    "from_timestamp",
    "is_centered",
    "label_anchor",
    "label_positions",
    "label_vertical_offset",
    "label_x_offset",
    "labels_fit",
    "nice_step",
    "offset_time",
    "raw_tick_positions",
    "read_axis_settings",
    "save_axis_settings",
    "select_tick_levels",
    "tick_key",
    "tick_mark_length",
    "to_utc",
    "union_tick_values",
    "unit_number",
]
