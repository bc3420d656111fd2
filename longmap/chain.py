from __future__ import annotations
from typing import Generic, Iterator, Optional, Tuple, TypeVar

V = TypeVar("V")


class _Entry(Generic[V]):
    """One key/value association inside a bucket chain."""

    __slots__ = ("key", "value", "next")

    def __init__(self, key: int, value: V, next: Optional["_Entry[V]"] = None) -> None:
        self.key = key
        self.value = value
        self.next = next

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"_Entry({self.key!r}, {self.value!r})"


class Chain(Generic[V]):
    """Singly-linked collision chain for one bucket slot.

    New keys are appended at the tail, so entries stay in the order they
    arrived in this bucket (oldest first). The chain keeps a tail pointer and
    a length so appends and ``len()`` are O(1).
    """

    __slots__ = ("head", "tail", "_length")

    def __init__(self) -> None:
        self.head: Optional[_Entry[V]] = None
        self.tail: Optional[_Entry[V]] = None
        self._length = 0

    def append(self, key: int, value: V) -> _Entry[V]:
        """Append a new entry without looking for *key* first."""
        entry = _Entry(key, value)
        if self.tail is None:
            self.head = entry
        else:
            self.tail.next = entry
        self.tail = entry
        self._length += 1
        return entry

    def append_or_replace(self, key: int, value: V) -> Tuple[bool, Optional[V]]:
        """Replace the value stored under *key*, or append a new entry.

        Returns ``(True, None)`` when a new entry was appended and
        ``(False, previous_value)`` when an existing entry was updated.
        """
        e = self.head
        while e is not None:
            if e.key == key:
                previous = e.value
                e.value = value
                return False, previous
            e = e.next
        self.append(key, value)
        return True, None

    def find(self, key: int) -> Optional[_Entry[V]]:
        """Return the entry for *key*, or None if the chain has none."""
        e = self.head
        while e is not None:
            if e.key == key:
                return e
            e = e.next
        return None

    def unlink(self, key: int) -> Optional[_Entry[V]]:
        """Detach and return the entry for *key*; None if absent.

        Only the head pointer changes when the head itself is removed;
        any other entry is bypassed through its predecessor.
        """
        prev: Optional[_Entry[V]] = None
        cur = self.head
        while cur is not None:
            if cur.key == key:
                if prev is None:
                    self.head = cur.next
                else:
                    prev.next = cur.next
                if cur is self.tail:
                    self.tail = prev
                cur.next = None
                self._length -= 1
                return cur
            prev, cur = cur, cur.next
        return None

    def entries(self) -> Iterator[_Entry[V]]:
        """Yield entries head to tail."""
        e = self.head
        while e is not None:
            yield e
            e = e.next

    def __len__(self) -> int:
        return self._length

    def __bool__(self) -> bool:
        return self.head is not None

    def __repr__(self) -> str:  # pragma: no cover - trivial
        pairs = ", ".join(f"{e.key!r}: {e.value!r}" for e in self.entries())
        return f"Chain([{pairs}])"
