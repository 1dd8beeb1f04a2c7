"""Helpers that let type checkers verify protocol conformance."""


class Implements[T]:
    """Marks a class as satisfying a protocol such as `Axis`.

    Writing `lambda: Implements[Axis](TimeAxis)` next to a class makes the
    type checker compare the class against the protocol, while nothing
    happens at runtime.
    """

    def __init__(self, cls: type[T]) -> None:
        self.cls = cls
