"""Qt widgets that put adaptive time axes on pyqtgraph plots."""

from .time_axis_item import FontTextMeasurer, GraphicsLabel, TimeAxisItem
from .time_plot import TimePlot

__all__ = [
    "FontTextMeasurer",
    "GraphicsLabel",
    "TimeAxisItem",
    "TimePlot",
]
