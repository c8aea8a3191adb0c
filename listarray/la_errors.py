class ListArrayError(Exception):
    """Base class for every error raised by the list-array package."""


class InvalidSizeError(ListArrayError, ValueError):
    """A requested size is negative."""


class IndexOutOfRangeError(ListArrayError, IndexError):
    """An index falls outside [0, size)."""


class NoSuchElementError(ListArrayError, LookupError):
    """The cursor has no further element to advance to."""


class IllegalCursorStateError(ListArrayError, RuntimeError):
    """Cursor removal attempted before an advance, or twice for one advance."""
