from collections.abc import Sequence

import numpy as np
from pyqtgraph import AxisItem, PlotItem, PlotWidget, mkPen
from PySide6.QtGui import QFont

from chronaxis.utility import AxisSettings

from .time_axis_item import TimeAxisItem


class TimePlot:
    """Plot of a time series with adaptive time axes on top and bottom."""

    def __init__(self, settings: AxisSettings | None = None) -> None:
        # Create widgets.
        self.widget = PlotWidget()

        # Create plots.
        plot = self.widget.plotItem
        if not isinstance(plot, PlotItem):
            raise ValueError("Plot item is invalid")
        self.plot = plot

        self.top_axis = TimeAxisItem(orientation="top", settings=settings)
        self.bottom_axis = TimeAxisItem(orientation="bottom", settings=settings)
        plot.setAxisItems(
            {
                "top": self.top_axis,
                "bottom": self.bottom_axis,
                "left": AxisItem(orientation="left"),
                "right": AxisItem(orientation="right"),
            }
        )

        self.line = plot.plot(
            pen=mkPen("#5A8CC2"),
            connect="finite",
        )

        # Configure UX.
        self._configure_widget()

    def _configure_widget(self) -> None:
        self.widget.setBackground("#252525")
        self.widget.setMouseEnabled(y=False)
        self.widget.enableAutoRange(y=True)

        self.plot.setDownsampling(auto=True, mode="subsample")
        self.plot.setClipToView(True)
        self.plot.showGrid(x=True, y=True, alpha=0.1)

        tick_font = QFont("Source Code Pro", 7)
        for position in ["top", "bottom", "left", "right"]:
            self.plot.getAxis(position).setTickFont(tick_font)
        self.plot.getAxis("left").setWidth(40)
        self.plot.getAxis("right").setWidth(40)

    def set_series(self, timestamps: Sequence[float], values: Sequence[float]) -> None:
        """Show values against unix timestamps in seconds."""
        data_x = np.asarray(timestamps, dtype=np.float64)
        data_y = np.asarray(values, dtype=np.float32)
        if data_x.shape != data_y.shape:
            msg = "Timestamps and values must have the same length"
            raise ValueError(msg)
        self.line.setData(data_x, data_y)
        if len(data_x) > 0:
            self.plot.setXRange(float(data_x.min()), float(data_x.max()), padding=0)
