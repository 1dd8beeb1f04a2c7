"""Capabilities shared by every kind of axis and its drawing surface."""

from typing import Protocol

from chronaxis.utility import (
    AxisRendering,
    LabelPlacement,
    SpaceRequest,
    TickLevel,
    TickMark,
)


class LabelHandle(Protocol):
    """A drawn label that survives across render passes."""

    def update(self, placement: LabelPlacement) -> None: ...

    def release(self) -> None: ...


class AxisSurface(Protocol):
    """Where an axis puts its tick marks and labels."""

    def create_label(self, layer: TickLevel) -> LabelHandle: ...

    def draw_tick_marks(self, tick_marks: list[TickMark]) -> None: ...


class Axis(Protocol):
    def request_space(
        self,
        offered_width: float,
        offered_height: float,
    ) -> SpaceRequest: ...

    def setup(self, surface: AxisSurface) -> None: ...

    def render(
        self,
        available_width: float,
        available_height: float,
    ) -> AxisRendering: ...
