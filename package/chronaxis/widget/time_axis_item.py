from typing import override

from pyqtgraph import AxisItem
from PySide6.QtCore import QPointF
from PySide6.QtGui import QFont, QFontMetricsF, QPainter, QPen
from PySide6.QtWidgets import QGraphicsItem, QGraphicsSimpleTextItem

from chronaxis.axis import AxisSurface, LabelHandle, TimeAxis
from chronaxis.utility import (
    DEFAULT_CATALOG,
    AxisOrientation,
    AxisSettings,
    Implements,
    IntervalCatalog,
    LabelPlacement,
    TextAnchor,
    TextMeasurer,
    TickLevel,
    TickMark,
    TimeScale,
)

# We're not using pyqtgraph's default DateAxisItem
# because it shows local time and a single row of labels.

lambda: Implements[TextMeasurer](FontTextMeasurer)


class FontTextMeasurer:
    """Measures text with the metrics of a Qt font."""

    def __init__(self, font: QFont) -> None:
        self.set_font(font)

    def set_font(self, font: QFont) -> None:
        self._metrics = QFontMetricsF(font)

    def width(self, text: str) -> float:
        return self._metrics.horizontalAdvance(text)

    def height(self) -> float:
        return self._metrics.height()


lambda: Implements[LabelHandle](GraphicsLabel)


class GraphicsLabel:
    """Tick label drawn as a text item inside the axis."""

    def __init__(self, axis_item: AxisItem, font: QFont) -> None:
        self.item = QGraphicsSimpleTextItem(axis_item)
        self.item.setFont(font)
        self.item.setBrush(axis_item.textPen().color())

    def update(self, placement: LabelPlacement) -> None:
        if self.item.text() != placement.text:
            self.item.setText(placement.text)
        bounds = self.item.boundingRect()

        x = placement.position + placement.x_offset
        if placement.anchor == TextAnchor.MIDDLE:
            x -= bounds.width() / 2
        # The offset marks where the text ends vertically.
        y = placement.y_offset - bounds.height()
        self.item.setPos(x, y)

    def release(self) -> None:
        scene = self.item.scene()
        self.item.setParentItem(None)
        if scene is not None:
            scene.removeItem(self.item)


lambda: Implements[AxisSurface](TimeAxisItem)


class TimeAxisItem(AxisItem):
    """Horizontal pyqtgraph axis that picks its time granularity by itself.

    Values on the linked view are unix timestamps in seconds, shown in UTC.
    """

    _time_axis: TimeAxis | None = None

    def __init__(
        self,
        orientation: str = "bottom",
        settings: AxisSettings | None = None,
        catalog: IntervalCatalog = DEFAULT_CATALOG,
        **kwargs,
    ) -> None:
        if orientation not in ("top", "bottom"):
            msg = f"Time axis item cannot be oriented {orientation}"
            raise ValueError(msg)
        super().__init__(orientation, **kwargs)
        self.enableAutoSIPrefix(False)
        self.setFlag(QGraphicsItem.GraphicsItemFlag.ItemClipsChildrenToShape, True)

        if settings is None:
            settings = AxisSettings()
        settings = settings.model_copy(
            update={"orientation": AxisOrientation(orientation)}
        )

        self._tick_marks: list[TickMark] = []
        self._measurer = FontTextMeasurer(self._tick_font())
        self.time_scale = TimeScale()
        self.time_scale.set_timestamps(*self.range)

        time_axis = TimeAxis(self.time_scale, self._measurer, settings, catalog)
        time_axis.setup(self)
        self._time_axis = time_axis
        self._apply_requested_height()

    @property
    def time_axis(self) -> TimeAxis:
        if self._time_axis is None:
            msg = "Time axis item is not initialized"
            raise RuntimeError(msg)
        return self._time_axis

    def _tick_font(self) -> QFont:
        tick_font = self.style.get("tickFont")
        if tick_font is None:
            return QFont()
        return tick_font

    def _apply_requested_height(self) -> None:
        space_request = self.time_axis.request_space(0.0, float("inf"))
        self.setHeight(space_request.height)

    def create_label(self, layer: TickLevel) -> GraphicsLabel:
        return GraphicsLabel(self, self._tick_font())

    def draw_tick_marks(self, tick_marks: list[TickMark]) -> None:
        self._tick_marks = tick_marks
        self.picture = None
        self.update()

    def redraw(self) -> None:
        """Lay out tick marks and labels for the current range and size."""
        if self._time_axis is None:
            return
        bounds = self.mapRectFromParent(self.geometry())
        self.time_scale.set_pixel_range(bounds.left(), bounds.right())
        self._time_axis.render(bounds.width(), bounds.height())

    @override
    def setRange(self, mn: float, mx: float) -> None:
        super().setRange(mn, mx)
        if self._time_axis is None:
            return
        self.time_scale.set_timestamps(mn, mx)
        self.redraw()

    @override
    def resizeEvent(self, ev=None) -> None:
        super().resizeEvent(ev)
        self.redraw()

    @override
    def setTickFont(self, font: QFont | None) -> None:
        super().setTickFont(font)
        if self._time_axis is None:
            return
        self._measurer.set_font(self._tick_font())
        # Existing labels keep their font, so start over.
        self.time_axis.setup(self)
        self._apply_requested_height()
        self.redraw()

    @override
    def generateDrawSpecs(self, p: QPainter):
        bounds = self.mapRectFromParent(self.geometry())
        tick_pen = self.tickPen()

        if self.orientation == "bottom":
            axis_spec = (self.pen(), bounds.topLeft(), bounds.topRight())
            tick_specs = [
                (
                    tick_pen,
                    QPointF(m.position, bounds.top()),
                    QPointF(m.position, bounds.top() + m.length),
                )
                for m in self._tick_marks
            ]
        else:
            axis_spec = (self.pen(), bounds.bottomLeft(), bounds.bottomRight())
            tick_specs = [
                (
                    tick_pen,
                    QPointF(m.position, bounds.bottom()),
                    QPointF(m.position, bounds.bottom() - m.length),
                )
                for m in self._tick_marks
            ]

        linked_view = self.linkedView()
        if self.grid is not False and linked_view is not None:
            # Grid lines span the linked view at the alpha set by `setGrid`.
            view_bounds = linked_view.mapRectToItem(self, linked_view.boundingRect())
            grid_pen = QPen(tick_pen)
            grid_color = grid_pen.color()
            grid_color.setAlpha(int(self.grid))
            grid_pen.setColor(grid_color)
            tick_specs += [
                (
                    grid_pen,
                    QPointF(m.position, view_bounds.top()),
                    QPointF(m.position, view_bounds.bottom()),
                )
                for m in self._tick_marks
            ]

        return axis_spec, tick_specs, []
