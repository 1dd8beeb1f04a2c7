class CatalogError(Exception):
    """Raised when static interval tables break their ordering invariants."""


class AxisStateError(Exception):
    pass
