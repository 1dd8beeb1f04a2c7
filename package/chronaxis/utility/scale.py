"""Linear mappings from domain values to pixel coordinates."""

import math
from collections.abc import Sequence
from datetime import UTC, datetime, timedelta

import numpy as np

from .data_models import TimeDomain, TimeUnit
from .time_units import EPOCH, enumerate_ticks, to_utc

ONE_SECOND = timedelta(seconds=1)

# A day of margin on both ends keeps calendar arithmetic representable.
MIN_TIMESTAMP = (datetime(1, 1, 2, tzinfo=UTC) - EPOCH) / ONE_SECOND
MAX_TIMESTAMP = (datetime(9999, 12, 30, tzinfo=UTC) - EPOCH) / ONE_SECOND


def from_timestamp(timestamp: float) -> datetime:
    """Convert unix seconds to a UTC datetime, clamped to representable time."""
    # `datetime.fromtimestamp` fails before 1970 on Windows.
    clamped = min(max(timestamp, MIN_TIMESTAMP), MAX_TIMESTAMP)
    return EPOCH + timedelta(seconds=clamped)


class TimeScale:
    """Time scale over a domain of moments and a range of pixels."""

    def __init__(
        self,
        domain: TimeDomain | None = None,
        pixel_range: tuple[float, float] = (0.0, 1.0),
    ) -> None:
        if domain is None:
            domain = (EPOCH, EPOCH + ONE_SECOND)
        self.set_domain(*domain)
        self._pixel_range = pixel_range

    def domain(self) -> TimeDomain:
        return self._domain

    def set_domain(self, start: datetime, end: datetime) -> None:
        start = to_utc(start)
        end = to_utc(end)
        if end < start:
            msg = "Time domain must not be reversed"
            raise ValueError(msg)
        self._domain = (start, end)

    def set_timestamps(self, first: float, last: float) -> None:
        """Set the domain from unix seconds, in either order."""
        self.set_domain(
            from_timestamp(min(first, last)),
            from_timestamp(max(first, last)),
        )

    def pixel_range(self) -> tuple[float, float]:
        return self._pixel_range

    def set_pixel_range(self, start: float, end: float) -> None:
        self._pixel_range = (start, end)

    def tick_values(self, unit: TimeUnit, step: int) -> list[datetime]:
        """Aligned ticks of the unit and step inside the domain."""
        start, end = self._domain
        return enumerate_ticks(unit, step, start, end)

    def position(self, moment: datetime) -> float:
        """Pixel coordinate of a moment."""
        start, end = self._domain
        first_pixel, last_pixel = self._pixel_range
        span = (end - start) / ONE_SECOND
        if span == 0:
            return first_pixel
        elapsed = (to_utc(moment) - start) / ONE_SECOND
        return first_pixel + elapsed / span * (last_pixel - first_pixel)

    def positions(self, moments: Sequence[datetime]) -> np.ndarray:
        """Pixel coordinates of many moments at once."""
        start, end = self._domain
        first_pixel, last_pixel = self._pixel_range
        span = (end - start) / ONE_SECOND
        elapsed = np.array(
            [(to_utc(m) - start) / ONE_SECOND for m in moments],
            dtype=np.float64,
        )
        if span == 0:
            return np.full(len(elapsed), first_pixel, dtype=np.float64)
        return first_pixel + elapsed / span * (last_pixel - first_pixel)


NICE_FACTORS = (1.0, 2.0, 5.0, 10.0)


def nice_step(span: float, target_count: int) -> float:
    """Round step such as 0.2, 5 or 100 giving about `target_count` ticks."""
    if span <= 0 or target_count <= 0:
        return 1.0
    rough_step = span / target_count
    magnitude = 10 ** math.floor(math.log10(rough_step))
    for factor in NICE_FACTORS:
        if rough_step <= factor * magnitude:
            return factor * magnitude
    return 10 * magnitude


class LinearScale:
    """Linear scale over a numeric domain and a range of pixels."""

    def __init__(
        self,
        domain: tuple[float, float] = (0.0, 1.0),
        pixel_range: tuple[float, float] = (0.0, 1.0),
    ) -> None:
        self._domain = domain
        self._pixel_range = pixel_range

    def domain(self) -> tuple[float, float]:
        return self._domain

    def set_domain(self, first: float, last: float) -> None:
        self._domain = (min(first, last), max(first, last))

    def pixel_range(self) -> tuple[float, float]:
        return self._pixel_range

    def set_pixel_range(self, start: float, end: float) -> None:
        self._pixel_range = (start, end)

    def position(self, value: float) -> float:
        first, last = self._domain
        first_pixel, last_pixel = self._pixel_range
        if last == first:
            return first_pixel
        return first_pixel + (value - first) / (last - first) * (
            last_pixel - first_pixel
        )

    def tick_values(self, target_count: int) -> list[float]:
        first, last = self._domain
        step = nice_step(last - first, target_count)
        ticks = np.arange(math.ceil(first / step), math.floor(last / step) + 1) * step
        # Rounding keeps values like 0.30000000000000004 out of labels.
        return [round(float(t), 12) for t in ticks]
