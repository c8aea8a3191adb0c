from enum import Enum, auto
from typing import Optional

from listarray.la_errors import IllegalCursorStateError, NoSuchElementError


class CursorState(Enum):
    BEFORE_FIRST = auto()
    POSITIONED = auto()
    REMOVED = auto()
    EXHAUSTED = auto()


class ListArrayCursor:
    """
    Forward-only cursor over one ListArray's chain.

    ``remove()`` deletes the element returned by the last ``next()`` and is
    legal once per advance. Removal goes back through the owning array so the
    chain and the array's size change together.
    """

    def __init__(self, array):
        self._array = array
        self._chain = array._chain
        self._current: int = self._chain.head
        self._prev: Optional[int] = None
        self._state = CursorState.BEFORE_FIRST

    @property
    def state(self) -> CursorState:
        if self._state is not CursorState.POSITIONED and not self.has_next():
            return CursorState.EXHAUSTED
        return self._state

    def has_next(self) -> bool:
        return self._chain.next_of(self._current) is not None

    def next(self):
        if not self.has_next():
            raise NoSuchElementError("No more elements")
        self._prev = self._current
        self._current = self._chain.next_of(self._current)
        self._state = CursorState.POSITIONED
        return self._chain.value_of(self._current)

    def remove(self):
        if self._state is not CursorState.POSITIONED:
            raise IllegalCursorStateError("remove() requires a preceding next()")
        self._array._unlink_after(self._prev)
        # fall back to the predecessor; its next is now the following element
        self._current = self._prev
        self._prev = None
        self._state = CursorState.REMOVED

    # ---------- Python iterator protocol ----------

    def __iter__(self):
        return self

    def __next__(self):
        if not self.has_next():
            raise StopIteration
        return self.next()
