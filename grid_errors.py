class GridError(Exception):
    """Base class for failures raised by Grid and the edit operations."""


class OutOfRangeError(GridError, IndexError):
    pass


class InvalidContentError(GridError, ValueError):
    pass


class EmptyGridError(GridError):
    pass
