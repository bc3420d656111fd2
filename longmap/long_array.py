from __future__ import annotations
import ctypes
from typing import Any, Generic, Iterable, Iterator, Optional, TypeVar, overload

T = TypeVar("T")
U = TypeVar("U")


class LongArray(Generic[T]):
    """A fixed-length, typed sequence backed by a raw ctypes buffer.

    Implementation notes
    --------------------
    • Storage is a ctypes array (``c_int64`` for keys, ``py_object`` for
      arbitrary values), not Python's built-in list.
    • The length is set at construction and never changes.
    • Negative indices are normalized (like built-in list semantics).
    • Slicing returns another LongArray with the same element type.
    • `.get()` is a safe accessor that never raises IndexError.
    """

    __slots__ = ("_buf", "_length", "_ctype")

    def __init__(self, length: int, ctype: Any = ctypes.py_object) -> None:
        if length < 0:
            raise ValueError("length must be >= 0")
        self._length = length
        self._ctype = ctype
        self._buf = self._make_array(length, ctype)

    @classmethod
    def from_iterable(cls, items: Iterable[T], length: int, ctype: Any = ctypes.py_object) -> "LongArray[T]":
        """Fill a new array of *length* from *items*.

        Raises:
            ValueError: if *items* yields a different number of elements.
        """
        out: LongArray[T] = cls(length, ctype)
        i = 0
        for v in items:
            if i >= length:
                raise ValueError(f"more than {length} items supplied")
            out._buf[i] = v
            i += 1
        if i != length:
            raise ValueError(f"expected {length} items, got {i}")
        return out

    # ------------------------------- internals -------------------------------

    @staticmethod
    def _make_array(length: int, ctype: Any):
        """Allocate a raw ctypes array holding `length` elements of `ctype`."""
        buf = (max(length, 1) * ctype)()
        if ctype is ctypes.py_object:
            # py_object slots start out NULL and raise ValueError on read.
            for i in range(length):
                buf[i] = None
        return buf

    @staticmethod
    def _normalize_index(idx: int, size: int) -> int:
        """Map negative indices and validate bounds.

        Returns the non-negative index in [0, size).
        Raises IndexError if out of range.
        """
        if idx < 0:
            idx += size
        if idx < 0 or idx >= size:
            raise IndexError("LongArray index out of range")
        return idx

    # --------------------------------- API -----------------------------------

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[T]:
        for i in range(self._length):
            yield self._buf[i]  # type: ignore[misc]

    @overload
    def __getitem__(self, idx: int) -> T: ...
    @overload
    def __getitem__(self, idx: slice) -> "LongArray[T]": ...

    def __getitem__(self, idx):
        if isinstance(idx, slice):
            start, stop, step = idx.indices(self._length)
            picked = range(start, stop, step)
            return LongArray.from_iterable((self._buf[i] for i in picked), len(picked), self._ctype)

        i = self._normalize_index(idx, self._length)
        return self._buf[i]

    def __setitem__(self, idx: int, value: T) -> None:
        i = self._normalize_index(idx, self._length)
        self._buf[i] = value

    def __contains__(self, value: object) -> bool:
        for i in range(self._length):
            if self._buf[i] == value:
                return True
        return False

    def index(self, value: T) -> int:
        """Return first index of `value`. O(n).

        Raises:
            ValueError: if the value is not present.
        """
        for i in range(self._length):
            if self._buf[i] == value:
                return i
        raise ValueError(f"{value!r} is not in LongArray")

    def count(self, value: T) -> int:
        return sum(1 for v in self if v == value)

    @overload
    def get(self, idx: int) -> Optional[T]: ...
    @overload
    def get(self, idx: int, default: U) -> T | U: ...

    def get(self, idx: int, default: U | None = None) -> T | U | None:
        """Return the item at `idx`, or `default` when out of range."""
        try:
            return self[idx]
        except IndexError:
            return default

    def to_py(self) -> list[T]:
        """Copy the contents into a plain Python list."""
        return [self._buf[i] for i in range(self._length)]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, LongArray):
            other = other.to_py()
        if not isinstance(other, (list, tuple)):
            return NotImplemented
        return self.to_py() == list(other)

    __hash__ = None  # type: ignore[assignment]

    def __bool__(self) -> bool:  # pragma: no cover - trivial
        return self._length != 0

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"LongArray({self.to_py()!r})"
