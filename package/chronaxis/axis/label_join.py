"""Keep drawn labels in step with the labels a render pass wants."""

from collections.abc import Callable, Hashable, Iterable
from typing import NamedTuple

from .protocol import LabelHandle


class JoinSummary(NamedTuple):
    entered: int
    updated: int
    exited: int


class KeyedJoin[K: Hashable, V]:
    """Maps keys to label handles and reconciles them on every pass.

    Handles whose key reappears are reused as they are, so labels persist
    across nearby redraws instead of being recreated wholesale.
    """

    def __init__(self) -> None:
        self._handles: dict[K, LabelHandle] = {}

    def __len__(self) -> int:
        return len(self._handles)

    def __contains__(self, key: object) -> bool:
        return key in self._handles

    def handle(self, key: K) -> LabelHandle:
        return self._handles[key]

    def reconcile(
        self,
        items: Iterable[tuple[K, V]],
        create: Callable[[], LabelHandle],
        update: Callable[[LabelHandle, V], None],
    ) -> JoinSummary:
        """Create, update and release handles to match the given items.

        When a key repeats within one pass, only its first item is used.
        """
        entered = 0
        updated = 0
        wanted: dict[K, LabelHandle] = {}

        for key, item in items:
            if key in wanted:
                continue
            handle = self._handles.get(key)
            if handle is None:
                handle = create()
                entered += 1
            else:
                updated += 1
            update(handle, item)
            wanted[key] = handle

        exited = 0
        for key, handle in self._handles.items():
            if key not in wanted:
                handle.release()
                exited += 1

        self._handles = wanted
        return JoinSummary(entered=entered, updated=updated, exited=exited)

    def clear(self) -> int:
        """Release every handle."""
        count = len(self._handles)
        for handle in self._handles.values():
            handle.release()
        self._handles = {}
        return count
