"""Render duration recording."""

from collections import deque
from time import perf_counter
from typing import ClassVar, NamedTuple


class DurationRecord(NamedTuple):
    """Record of task duration with timestamp."""

    duration: float
    written_at: float


class DurationRecorder:
    """Records and tracks task execution durations."""

    task_durations: ClassVar[dict[str, deque[DurationRecord]]] = {}

    def __init__(self, task_name: str) -> None:
        """Initialize duration recorder."""
        self._task_name = task_name
        self._start_time = perf_counter()
        self._did_record = False

    def record(self) -> float:
        """Record task completion time and return the duration."""
        # Check that this is the first time.
        if self._did_record:
            msg = "Cannot record more than once"
            raise RuntimeError(msg)
        self._did_record = True

        task_name = self._task_name
        now_time = perf_counter()

        record_deque = self.task_durations.get(task_name)
        if record_deque is None:
            record_deque = deque[DurationRecord](maxlen=1024)
            self.task_durations[task_name] = record_deque

        duration = now_time - self._start_time
        record_deque.append(DurationRecord(duration=duration, written_at=now_time))

        # Remove items that are more than a minute old.
        preserve_from = now_time - 60.0
        while record_deque and record_deque[0].written_at < preserve_from:
            record_deque.popleft()

        return duration

    @classmethod
    def mean_duration(cls, task_name: str) -> float | None:
        """Average duration of the task within the last minute."""
        record_deque = cls.task_durations.get(task_name)
        if not record_deque:
            return None
        return sum(r.duration for r in record_deque) / len(record_deque)
