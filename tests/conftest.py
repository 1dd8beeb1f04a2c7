import os
from datetime import UTC, datetime

import pytest

# Widgets are tested without a display.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from chronaxis.utility import FixedPitchMeasurer, LabelPlacement, TickLevel, TickMark


def utc(*args: int) -> datetime:
    return datetime(*args, tzinfo=UTC)


class RecordingLabel:
    def __init__(self, layer: TickLevel) -> None:
        self.layer = layer
        self.placements: list[LabelPlacement] = []
        self.released = False

    def update(self, placement: LabelPlacement) -> None:
        self.placements.append(placement)

    def release(self) -> None:
        self.released = True


class RecordingSurface:
    def __init__(self) -> None:
        self.labels: list[RecordingLabel] = []
        self.tick_mark_batches: list[list[TickMark]] = []

    def create_label(self, layer: TickLevel) -> RecordingLabel:
        label = RecordingLabel(layer)
        self.labels.append(label)
        return label

    def draw_tick_marks(self, tick_marks: list[TickMark]) -> None:
        self.tick_mark_batches.append(tick_marks)

    def live_labels(self, layer: TickLevel) -> list[RecordingLabel]:
        return [
            label
            for label in self.labels
            if label.layer == layer and not label.released
        ]


@pytest.fixture
def measurer() -> FixedPitchMeasurer:
    return FixedPitchMeasurer(character_width=7.0, line_height=14.0)


@pytest.fixture
def surface() -> RecordingSurface:
    return RecordingSurface()
