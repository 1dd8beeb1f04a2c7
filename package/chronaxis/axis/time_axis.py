"""Horizontal time axis with stacked minor and major label rows."""

from logging import getLogger

from chronaxis.utility import (
    DEFAULT_CATALOG,
    LABEL_LEVEL_INDEX,
    AxisRendering,
    AxisSettings,
    AxisStateError,
    DurationRecorder,
    Implements,
    IntervalCatalog,
    LabelPlacement,
    SpaceRequest,
    TextMeasurer,
    TickLevel,
    TickLevels,
    TickMark,
    TimeInterval,
    TimeScale,
    build_tick_marks,
    compile_format,
    label_anchor,
    label_positions,
    label_vertical_offset,
    label_x_offset,
    select_tick_levels,
    tick_key,
    validate_catalog,
)

from .label_join import KeyedJoin
from .protocol import Axis, AxisSurface

logger = getLogger(__name__)

RENDER_TASK_NAME = "render_time_axis"

lambda: Implements[Axis](TimeAxis)


class TimeAxis:
    """Chooses tick granularity from the domain and width on every render."""

    def __init__(
        self,
        scale: TimeScale,
        measurer: TextMeasurer,
        settings: AxisSettings | None = None,
        catalog: IntervalCatalog = DEFAULT_CATALOG,
    ) -> None:
        if settings is None:
            settings = AxisSettings()
        if not settings.orientation.is_horizontal():
            msg = f"Time axis cannot be oriented {settings.orientation.value}"
            raise ValueError(msg)
        validate_catalog(catalog)

        self.scale = scale
        self.measurer = measurer
        self.settings = settings
        self.catalog = catalog

        self._surface: AxisSurface | None = None
        self._label_joins = {
            TickLevel.MAJOR: KeyedJoin[int, LabelPlacement](),
            TickLevel.MINOR: KeyedJoin[int, LabelPlacement](),
        }
        self._computed_height: float | None = None
        self._shown_levels: TickLevels | None = None

    def request_space(
        self,
        offered_width: float,
        offered_height: float,
    ) -> SpaceRequest:
        # A time axis always spans the offered width.
        if self._computed_height is None:
            self._computed_height = self.settings.tick_length + self.measurer.height()
        if self.settings.height is None:
            requested_height = self._computed_height
        else:
            requested_height = self.settings.height

        return SpaceRequest(
            width=min(offered_width, 0.0),
            height=min(offered_height, requested_height),
            wants_width=False,
            wants_height=offered_height < requested_height,
        )

    def setup(self, surface: AxisSurface) -> None:
        if self._surface is not None:
            for label_join in self._label_joins.values():
                label_join.clear()
        self._surface = surface
        self._computed_height = None

    def tick_levels(self, available_width: float) -> TickLevels:
        return select_tick_levels(
            self.scale.domain(),
            available_width,
            self.measurer.width,
            self.scale.tick_values,
            self.settings.tick_label_padding,
            self.catalog,
        )

    def intervals(self, tick_levels: TickLevels) -> dict[TickLevel, TimeInterval]:
        return {
            TickLevel.MINOR: self.catalog.minor_intervals[tick_levels.minor_index],
            TickLevel.MAJOR: self.catalog.major_intervals[tick_levels.major_index],
        }

    def tick_marks(self, tick_levels: TickLevels) -> list[TickMark]:
        intervals = self.intervals(tick_levels)
        minor_interval = intervals[TickLevel.MINOR]
        major_interval = intervals[TickLevel.MAJOR]
        return build_tick_marks(
            self.scale.tick_values(minor_interval.unit, minor_interval.step),
            self.scale.tick_values(major_interval.unit, major_interval.step),
            self.settings.tick_length,
            self.scale.position,
        )

    def label_placements(
        self,
        interval: TimeInterval,
        level: TickLevel,
        available_height: float,
    ) -> list[LabelPlacement]:
        formatter = compile_format(interval.format_string)
        x_offset = label_x_offset(interval, self.settings.tick_label_padding)
        y_offset = label_vertical_offset(
            self.settings.tick_length,
            LABEL_LEVEL_INDEX[level],
            self.settings.orientation,
            available_height,
        )
        anchor = label_anchor(interval)

        positions = label_positions(
            interval,
            self.scale.domain(),
            self.scale.tick_values,
        )
        return [
            LabelPlacement(
                key=tick_key(moment),
                text=formatter(moment),
                position=self.scale.position(moment),
                x_offset=x_offset,
                y_offset=y_offset,
                anchor=anchor,
            )
            for moment in positions
        ]

    def render(
        self,
        available_width: float,
        available_height: float,
    ) -> AxisRendering:
        surface = self._surface
        if surface is None:
            msg = "Time axis has to be set up with a surface before rendering"
            raise AxisStateError(msg)

        duration_recorder = DurationRecorder(RENDER_TASK_NAME)

        tick_levels = self.tick_levels(available_width)
        if tick_levels != self._shown_levels:
            intervals = self.intervals(tick_levels)
            logger.debug(
                f"Time axis levels changed to {tick_levels}:"
                f" minor {intervals[TickLevel.MINOR]},"
                f" major {intervals[TickLevel.MAJOR]}"
            )
            self._shown_levels = tick_levels

        labels: dict[TickLevel, list[LabelPlacement]] = {}
        for level, interval in self.intervals(tick_levels).items():
            placements = self.label_placements(interval, level, available_height)
            label_join = self._label_joins[level]
            label_join.reconcile(
                ((p.key, p) for p in placements),
                create=lambda level=level: surface.create_label(level),
                update=lambda handle, placement: handle.update(placement),
            )
            drawn: dict[int | float, LabelPlacement] = {}
            for placement in placements:
                drawn.setdefault(placement.key, placement)
            labels[level] = list(drawn.values())

        tick_marks = self.tick_marks(tick_levels)
        surface.draw_tick_marks(tick_marks)

        duration = duration_recorder.record()
        logger.debug(f"Rendered time axis in {duration * 1000:.2f}ms")

        return AxisRendering(tick_marks=tick_marks, labels=labels)
