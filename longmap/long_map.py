from __future__ import annotations
import ctypes
import logging
import math
import operator
from typing import Generic, Iterator, Optional, Tuple, TypeVar

from .chain import Chain, _Entry
from .long_array import LongArray

V = TypeVar("V")

logger = logging.getLogger(__name__)

DEFAULT_INITIAL_CAPACITY = 16
DEFAULT_LOAD_FACTOR = 0.75

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1


class InvalidArgument(ValueError):
    """Raised when a LongMap is constructed with an unusable configuration."""


def long_hash(key: int) -> int:
    """Fold a 64-bit key into a signed 32-bit hash.

    XORs the high 32 bits into the low 32 bits and reinterprets the result
    as a signed int. Depends on the key alone, never on table capacity.
    """
    bits = key & 0xFFFFFFFFFFFFFFFF
    h = (bits ^ (bits >> 32)) & 0xFFFFFFFF
    if h >= 0x80000000:
        h -= 0x100000000
    return h


def _as_key(key) -> int:
    """Coerce *key* to a storable 64-bit integer for insertion."""
    k = operator.index(key)
    if not INT64_MIN <= k <= INT64_MAX:
        raise OverflowError(f"key out of 64-bit range: {k}")
    return k


class LongMap(Generic[V]):
    """A separate-chaining hash table keyed by 64-bit integers.

    - The bucket table is allocated on the first :meth:`put`, never earlier.
    - Each occupied slot holds a :class:`~longmap.chain.Chain`; empty slots
      stay ``None``.
    - Before an insertion, if ``size > capacity * load_factor`` the table
      doubles and every entry is re-placed against the new capacity.
    - :meth:`clear` drops all entries but keeps the allocated capacity.
    """

    __slots__ = ("_initial_cap", "_load", "_buckets", "_size")

    def __init__(self, initial_capacity: int = DEFAULT_INITIAL_CAPACITY, load_factor: float = DEFAULT_LOAD_FACTOR) -> None:
        if isinstance(initial_capacity, bool) or not isinstance(initial_capacity, int):
            raise InvalidArgument(f"Illegal initial capacity: {initial_capacity!r}")
        if initial_capacity < 0:
            raise InvalidArgument(f"Illegal initial capacity: {initial_capacity}")
        try:
            load = float(load_factor)
        except (TypeError, ValueError):
            raise InvalidArgument(f"Illegal load factor: {load_factor!r}") from None
        if math.isnan(load) or load <= 0.0:
            raise InvalidArgument(f"Illegal load factor: {load_factor!r}")

        self._initial_cap: int = initial_capacity
        self._load: float = load
        # Allocated lazily by put()
        self._buckets: Optional[list[Optional[Chain[V]]]] = None
        self._size: int = 0

    # -----------------------------
    # Internal helpers
    # -----------------------------
    def _bucket_index(self, key: int, capacity: int) -> int:
        return long_hash(key) % capacity

    def _allocate(self) -> None:
        cap = max(self._initial_cap, 1)
        self._buckets = [None] * cap
        logger.debug("Allocated LongMap table with %d buckets", cap)

    def _resize(self) -> None:
        """Double the capacity and re-place every entry in the new table."""
        old_buckets = self._buckets
        new_cap = len(old_buckets) * 2
        new_buckets: list[Optional[Chain[V]]] = [None] * new_cap

        for bucket in old_buckets:
            if bucket is None:
                continue
            for e in bucket.entries():
                idx = self._bucket_index(e.key, new_cap)
                if new_buckets[idx] is None:
                    new_buckets[idx] = Chain()
                new_buckets[idx].append(e.key, e.value)

        self._buckets = new_buckets
        logger.debug("Resized LongMap from %d to %d buckets (%d entries)", len(old_buckets), new_cap, self._size)

    def _find(self, key) -> Optional[_Entry[V]]:
        if self._buckets is None:
            return None
        try:
            k = operator.index(key)
        except TypeError:
            return None
        bucket = self._buckets[self._bucket_index(k, len(self._buckets))]
        if bucket is None:
            return None
        return bucket.find(k)

    def _walk(self) -> Iterator[_Entry[V]]:
        """Yield entries by bucket index, then head to tail within a chain."""
        if self._buckets is None:
            return
        for bucket in self._buckets:
            if bucket is not None:
                yield from bucket.entries()

    # -----------------------------
    # Core operations
    # -----------------------------
    def put(self, key: int, value: V) -> Optional[V]:
        """Associate *value* with *key*; return the previous value or None."""
        k = _as_key(key)
        if self._buckets is None:
            self._allocate()
        elif self._size > len(self._buckets) * self._load:
            self._resize()

        idx = self._bucket_index(k, len(self._buckets))
        bucket = self._buckets[idx]
        if bucket is None:
            bucket = self._buckets[idx] = Chain()
        inserted, previous = bucket.append_or_replace(k, value)
        if inserted:
            self._size += 1
        return previous

    def get(self, key: int, default: Optional[V] = None) -> Optional[V]:
        """Return the value stored under *key*, or *default*."""
        e = self._find(key)
        return default if e is None else e.value

    def remove(self, key: int) -> Optional[V]:
        """Remove *key* and return its value; None if it was not present."""
        if self._buckets is None:
            return None
        try:
            k = operator.index(key)
        except TypeError:
            return None
        idx = self._bucket_index(k, len(self._buckets))
        bucket = self._buckets[idx]
        if bucket is None:
            return None
        e = bucket.unlink(k)
        if e is None:
            return None
        if not bucket:
            self._buckets[idx] = None
        self._size -= 1
        return e.value

    def is_empty(self) -> bool:
        return self._buckets is None or self._size == 0

    def contains_key(self, key: int) -> bool:
        return self._find(key) is not None

    def contains_value(self, value: V) -> bool:
        """Linear scan over every chain; O(size)."""
        for e in self._walk():
            if e.value == value:
                return True
        return False

    def keys(self) -> LongArray[int]:
        return LongArray.from_iterable((e.key for e in self._walk()), self._size, ctypes.c_int64)

    def values(self) -> LongArray[V]:
        return LongArray.from_iterable((e.value for e in self._walk()), self._size)

    def items(self) -> Iterator[Tuple[int, V]]:
        for e in self._walk():
            yield e.key, e.value

    def size(self) -> int:
        return self._size

    def clear(self) -> None:
        """Drop every entry; the allocated capacity is kept for reuse."""
        if self._buckets is None:
            return
        for i in range(len(self._buckets)):
            self._buckets[i] = None
        self._size = 0
        logger.debug("Cleared LongMap, keeping %d buckets", len(self._buckets))

    # -----------------------------
    # Configuration
    # -----------------------------
    @property
    def capacity(self) -> int:
        """Current bucket count; 0 until the first put."""
        return 0 if self._buckets is None else len(self._buckets)

    @property
    def initial_capacity(self) -> int:
        return self._initial_cap

    @property
    def load_factor(self) -> float:
        return self._load

    # -----------------------------
    # Standard magic methods
    # -----------------------------
    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        for e in self._walk():
            yield e.key

    def __contains__(self, key: object) -> bool:
        return self.contains_key(key)  # type: ignore[arg-type]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LongMap):
            return NotImplemented
        if self._size != other._size:
            return False
        for k, v in self.items():
            e = other._find(k)
            if e is None or e.value != v:
                return False
        return True

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:  # pragma: no cover - trivial
        pairs = ", ".join(f"{k!r}: {v!r}" for k, v in self.items())
        return f"LongMap({{{pairs}}})"
