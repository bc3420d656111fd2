from __future__ import annotations
from typing import Generic, Iterable, Iterator, Optional, Tuple, TypeVar, Union

from .long_array import LongArray
from .long_map import DEFAULT_INITIAL_CAPACITY, DEFAULT_LOAD_FACTOR, LongMap

V = TypeVar("V")

_MISSING = object()


class LongDict(Generic[V]):
    """A mapping-like wrapper around :class:`LongMap`.

    Adds ``d[k]`` / ``del d[k]`` with ``KeyError`` semantics on top of the
    map's absence-returning API.
    """

    __slots__ = ("_map",)

    def __init__(
        self,
        it: Optional[Union[Iterable[Tuple[int, V]], "LongDict[V]", LongMap[V]]] = None,
        initial_capacity: int = DEFAULT_INITIAL_CAPACITY,
        load_factor: float = DEFAULT_LOAD_FACTOR,
    ) -> None:
        self._map: LongMap[V] = LongMap(initial_capacity, load_factor)
        if it is not None:
            # Accept dict-like or iterable of pairs
            if hasattr(it, "items"):
                for k, v in it.items():  # type: ignore[union-attr]
                    self[k] = v
            else:
                for k, v in it:
                    self[k] = v

    def __setitem__(self, key: int, value: V) -> None:
        self._map.put(key, value)

    def __getitem__(self, key: int) -> V:
        val = self._map.get(key, _MISSING)  # type: ignore[arg-type]
        if val is _MISSING:
            raise KeyError(key)
        return val  # type: ignore[return-value]

    def __delitem__(self, key: int) -> None:
        if not self._map.contains_key(key):
            raise KeyError(key)
        self._map.remove(key)

    def get(self, key: int, default: Optional[V] = None) -> Optional[V]:
        return self._map.get(key, default)

    def pop(self, key: int, default=_MISSING):
        """Remove *key* and return its value, or *default* if given."""
        if not self._map.contains_key(key):
            if default is _MISSING:
                raise KeyError(key)
            return default
        return self._map.remove(key)

    def __contains__(self, key: object) -> bool:
        return self._map.contains_key(key)  # type: ignore[arg-type]

    def keys(self) -> LongArray[int]:
        return self._map.keys()

    def values(self) -> LongArray[V]:
        return self._map.values()

    def items(self) -> Iterator[Tuple[int, V]]:
        return self._map.items()

    def clear(self) -> None:
        self._map.clear()

    def __len__(self) -> int:
        return len(self._map)

    def to_py(self) -> dict[int, V]:
        """Convert to a native *dict*."""
        return {k: v for k, v in self._map.items()}

    def __iter__(self) -> Iterator[int]:
        return iter(self._map)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, LongDict):
            return self._map == other._map
        if isinstance(other, dict):
            return self.to_py() == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"LongDict({self.to_py()!r})"
