"""Numeric axis with evenly spaced round ticks."""

from chronaxis.utility import (
    AxisOrientation,
    AxisRendering,
    AxisSettings,
    AxisStateError,
    Implements,
    LabelPlacement,
    LinearScale,
    SpaceRequest,
    TextAnchor,
    TextMeasurer,
    TickLevel,
    TickMark,
    format_fixed_float,
)

from .label_join import KeyedJoin
from .protocol import Axis, AxisSurface

lambda: Implements[Axis](LinearAxis)


class LinearAxis:
    def __init__(
        self,
        scale: LinearScale,
        measurer: TextMeasurer,
        settings: AxisSettings | None = None,
        label_width: int = 6,
    ) -> None:
        if settings is None:
            settings = AxisSettings()
        self.scale = scale
        self.measurer = measurer
        self.settings = settings
        self.label_width = label_width

        self._surface: AxisSurface | None = None
        self._label_join = KeyedJoin[float, LabelPlacement]()

    def _tick_mark_length(self) -> float:
        return self.settings.tick_length / 2

    def _widest_label(self) -> float:
        return self.measurer.width("0" * self.label_width)

    def request_space(
        self,
        offered_width: float,
        offered_height: float,
    ) -> SpaceRequest:
        if self.settings.orientation.is_horizontal():
            requested_width = 0.0
            requested_height = self._tick_mark_length() + self.measurer.height()
        else:
            requested_width = (
                self._tick_mark_length()
                + self.settings.tick_label_padding
                + self._widest_label()
            )
            requested_height = 0.0
        if self.settings.height is not None:
            requested_height = self.settings.height

        return SpaceRequest(
            width=min(offered_width, requested_width),
            height=min(offered_height, requested_height),
            wants_width=offered_width < requested_width,
            wants_height=offered_height < requested_height,
        )

    def setup(self, surface: AxisSurface) -> None:
        if self._surface is not None:
            self._label_join.clear()
        self._surface = surface

    def render(
        self,
        available_width: float,
        available_height: float,
    ) -> AxisRendering:
        surface = self._surface
        if surface is None:
            msg = "Linear axis has to be set up with a surface before rendering"
            raise AxisStateError(msg)

        orientation = self.settings.orientation
        padding = self.settings.tick_label_padding
        if orientation.is_horizontal():
            extent = available_width
            label_footprint = self._widest_label() + 2 * padding
        else:
            extent = available_height
            label_footprint = self.measurer.height() + 2 * padding
        target_count = max(2, int(extent // max(label_footprint, 1.0)))
        tick_values = self.scale.tick_values(target_count)

        mark_length = self._tick_mark_length()
        tick_marks = [
            TickMark(
                key=value,
                position=self.scale.position(value),
                length=mark_length,
                level=TickLevel.MAJOR,
            )
            for value in tick_values
        ]

        if orientation == AxisOrientation.BOTTOM:
            x_offset, y_offset = 0.0, mark_length
            anchor = TextAnchor.MIDDLE
        elif orientation == AxisOrientation.TOP:
            x_offset, y_offset = 0.0, available_height - mark_length
            anchor = TextAnchor.MIDDLE
        elif orientation == AxisOrientation.LEFT:
            x_offset, y_offset = padding, 0.0
            anchor = TextAnchor.START
        else:
            x_offset, y_offset = mark_length + padding, 0.0
            anchor = TextAnchor.START

        placements = [
            LabelPlacement(
                key=value,
                text=format_fixed_float(value, self.label_width),
                position=self.scale.position(value),
                x_offset=x_offset,
                y_offset=y_offset,
                anchor=anchor,
            )
            for value in tick_values
        ]
        self._label_join.reconcile(
            ((p.key, p) for p in placements),
            create=lambda: surface.create_label(TickLevel.MAJOR),
            update=lambda handle, placement: handle.update(placement),
        )
        surface.draw_tick_marks(tick_marks)

        return AxisRendering(
            tick_marks=tick_marks,
            labels={TickLevel.MAJOR: placements},
        )
