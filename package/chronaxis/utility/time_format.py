"""Strftime-style formatting that behaves the same on every platform."""

from collections.abc import Callable
from datetime import datetime
from functools import lru_cache

WEEKDAY_NAMES = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)
MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

# The platform `strftime` does not support `%e` everywhere
# and follows the process locale, so directives are rendered here.
DIRECTIVES: dict[str, Callable[[datetime], str]] = {
    "a": lambda d: WEEKDAY_NAMES[d.weekday()][:3],
    "A": lambda d: WEEKDAY_NAMES[d.weekday()],
    "b": lambda d: MONTH_NAMES[d.month - 1][:3],
    "B": lambda d: MONTH_NAMES[d.month - 1],
    "d": lambda d: f"{d.day:02}",
    "e": lambda d: f"{d.day:>2}",
    "H": lambda d: f"{d.hour:02}",
    "I": lambda d: f"{(d.hour % 12) or 12:02}",
    "m": lambda d: f"{d.month:02}",
    "M": lambda d: f"{d.minute:02}",
    "p": lambda d: "AM" if d.hour < 12 else "PM",
    "S": lambda d: f"{d.second:02}",
    "y": lambda d: f"{d.year % 100:02}",
    "Y": lambda d: f"{d.year}",
    "%": lambda d: "%",
}


def find_directives(format_string: str) -> list[str]:
    """List the directive characters used in a format string."""
    directives: list[str] = []
    index = 0
    while index < len(format_string):
        if format_string[index] == "%":
            if index + 1 >= len(format_string):
                msg = f"Dangling '%' in format {format_string!r}"
                raise ValueError(msg)
            directives.append(format_string[index + 1])
            index += 2
        else:
            index += 1
    return directives


@lru_cache(maxsize=128)
def compile_format(format_string: str) -> Callable[[datetime], str]:
    """Turn a format string into a function of a datetime."""
    pieces: list[Callable[[datetime], str]] = []
    literal = ""
    index = 0
    while index < len(format_string):
        character = format_string[index]
        if character != "%":
            literal += character
            index += 1
            continue
        if index + 1 >= len(format_string):
            msg = f"Dangling '%' in format {format_string!r}"
            raise ValueError(msg)
        directive = format_string[index + 1]
        render = DIRECTIVES.get(directive)
        if render is None:
            msg = f"Unsupported directive '%{directive}' in {format_string!r}"
            raise ValueError(msg)
        if literal:
            pieces.append(lambda _, text=literal: text)
            literal = ""
        pieces.append(render)
        index += 2
    if literal:
        pieces.append(lambda _, text=literal: text)

    def formatter(moment: datetime) -> str:
        return "".join(piece(moment) for piece in pieces)

    return formatter


def format_time(format_string: str, moment: datetime) -> str:
    """Render a moment with a strftime-style format string."""
    return compile_format(format_string)(moment)
