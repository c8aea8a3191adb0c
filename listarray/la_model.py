import copy
import logging
from typing import Any, Generic, Iterable, List, Optional, Protocol, TypeVar

from listarray.la_chain import NodeChain
from listarray.la_cursor import ListArrayCursor
from listarray.la_errors import IndexOutOfRangeError, InvalidSizeError

logger = logging.getLogger(__name__)


class Comparable(Protocol):
    def __lt__(self, other: Any) -> bool: ...


T = TypeVar("T", bound=Comparable)


class ListArray(Generic[T]):
    """
    Dynamically resizable array stored in a singly linked node chain.

    The array keeps its own size counter; every structural change updates the
    chain and the counter in the same step. Slots created by growth are filled
    with the ``default_value`` given at construction time.
    """

    def __init__(self, size: int = 0, default_value: Optional[T] = None):
        _check_int(size, "size")
        if size < 0:
            raise InvalidSizeError("Size is less than zero")

        self._chain = NodeChain()
        self._size = 0
        self._default_value = default_value

        last = self._chain.head
        for _ in range(size):
            last = self._append_after(last, default_value)

    @classmethod
    def copy_of(cls, other: "ListArray[T]", memo=None) -> "ListArray[T]":
        """Deep copy ``other``: new chain, copied values, same default value."""
        if memo is None:
            memo = {}
        duplicate = cls(0)
        # self-references resolve to the duplicate through memo
        memo[id(other)] = duplicate
        duplicate._default_value = copy.deepcopy(other._default_value, memo)
        last = duplicate._chain.head
        for value in other.iterator():
            last = duplicate._append_after(last, copy.deepcopy(value, memo))
        logger.debug("copied list array of size %d", duplicate._size)
        return duplicate

    @classmethod
    def from_iterable(cls, values: Iterable[T], default_value: Optional[T] = None) -> "ListArray[T]":
        array = cls(0, default_value)
        last = array._chain.head
        for value in values:
            last = array._append_after(last, value)
        return array

    @property
    def default_value(self) -> Optional[T]:
        return self._default_value

    def size(self) -> int:
        return self._size

    def resize(self, size: int):
        """
        Truncate to, or grow to, ``size`` elements.

        Growth appends ``default_value`` slots after the current last node;
        truncation drops everything after the node at ``size - 1``.
        """
        _check_int(size, "size")
        if size < 0:
            raise InvalidSizeError("Size is less than zero")

        if size < self._size:
            last = self._chain.walk(size)
            dropped = self._chain.truncate_after(last)
            self._size -= dropped
            logger.debug("truncated %d nodes, size now %d", dropped, self._size)
        elif size > self._size:
            last = self._chain.walk(self._size)
            grow_by = size - self._size
            for _ in range(grow_by):
                last = self._append_after(last, self._default_value)
            logger.debug("appended %d nodes, size now %d", grow_by, self._size)

    def get(self, index: int) -> T:
        return self._chain.value_of(self._seek(index))

    def set(self, index: int, value: T):
        self._chain.set_value(self._seek(index), value)

    def remove(self, index: int) -> T:
        """
        Remove the element at ``index`` and return it. Later elements shift
        down by one position.
        """
        self._range_check(index)
        cursor = self.iterator()
        value = None
        for _ in range(index + 1):
            value = cursor.next()
        cursor.remove()
        return value

    def compare_to(self, other: "ListArray[T]") -> int:
        """
        Lexicographic comparison.

        Returns the first non-zero element ordering (-1 or 1) over the common
        prefix, otherwise ``self.size() - other.size()``.
        """
        lhs = self._chain.head
        rhs = other._chain.head
        for _ in range(min(self._size, other._size)):
            lhs = self._chain.next_of(lhs)
            rhs = other._chain.next_of(rhs)
            result = _compare_values(self._chain.value_of(lhs), other._chain.value_of(rhs))
            if result != 0:
                return result
        return self._size - other._size

    def iterator(self) -> ListArrayCursor:
        return ListArrayCursor(self)

    def copy(self) -> "ListArray[T]":
        return self.copy_of(self)

    def snapshot(self) -> List[Any]:
        return list(self._chain.values())

    # ---------- Chain helpers ----------

    def _append_after(self, prev_id: int, value) -> int:
        node_id = self._chain.splice_after(prev_id, value)
        self._size += 1
        return node_id

    def _unlink_after(self, prev_id: int):
        value = self._chain.unlink_after(prev_id)
        self._size -= 1
        return value

    def _range_check(self, index: int):
        _check_int(index, "index")
        if index < 0 or index >= self._size:
            raise IndexOutOfRangeError("Index out of range")

    def _seek(self, index: int) -> int:
        self._range_check(index)
        return self._chain.walk(index + 1)

    # ---------- Python protocols ----------

    def __len__(self):
        return self._size

    def __getitem__(self, index):
        return self.get(index)

    def __setitem__(self, index, value):
        self.set(index, value)

    def __delitem__(self, index):
        self.remove(index)

    def __iter__(self):
        return self.iterator()

    def __copy__(self):
        return self.copy()

    def __deepcopy__(self, memo):
        return self.copy_of(self, memo)

    def __eq__(self, other):
        if not isinstance(other, ListArray):
            return NotImplemented
        return self.compare_to(other) == 0

    def __lt__(self, other):
        if not isinstance(other, ListArray):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other):
        if not isinstance(other, ListArray):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other):
        if not isinstance(other, ListArray):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other):
        if not isinstance(other, ListArray):
            return NotImplemented
        return self.compare_to(other) >= 0

    __hash__ = None

    def __repr__(self):
        return f"{type(self).__name__}({self.snapshot()!r}, default_value={self._default_value!r})"


def _check_int(value, name: str):
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, not {type(value).__name__}")


def _compare_values(lhs, rhs) -> int:
    # equality first so unordered fill values such as None compare equal
    if lhs == rhs:
        return 0
    return -1 if lhs < rhs else 1
