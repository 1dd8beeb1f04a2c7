"""Text measurement used for label layout."""

from typing import Protocol


class TextMeasurer(Protocol):
    def width(self, text: str) -> float: ...

    def height(self) -> float: ...


class FixedPitchMeasurer:
    """Measures text as if every character had the same advance.

    This is enough for headless layout and for monospace tick fonts.
    """

    def __init__(self, character_width: float = 7.0, line_height: float = 14.0):
        self.character_width = character_width
        self.line_height = line_height

    def width(self, text: str) -> float:
        return len(text) * self.character_width

    def height(self) -> float:
        return self.line_height
