"""A mapping that keeps its contents ordered by key."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, MutableMapping
from typing import Any, Generic, TypeVar

from sorted_bounds.bounds import lower_bound, upper_bound

K = TypeVar("K")
V = TypeVar("V")


def _pair_key(pair: tuple[Any, Any]) -> Any:
    return pair[0]


class SortedDict(MutableMapping, Generic[K, V]):
    """Dictionary backed by a list of ``(key, value)`` pairs sorted by key.

    Lookups and the position of inserts are binary searches; inserts and
    deletes shift the tail of the list.
    """

    def __init__(
        self,
        items: Mapping[K, V] | Iterable[tuple[K, V]] | None = None,
        **kwargs: V,
    ) -> None:
        self._storage: list[tuple[K, V]] = []
        if items is not None:
            self.update(items)
        if kwargs:
            self.update(kwargs)

    def _find(self, key: K) -> tuple[int, bool]:
        idx = lower_bound(self._storage, key, key=_pair_key, check=False)
        found = idx < len(self._storage) and self._storage[idx][0] == key
        return idx, found

    def __getitem__(self, key: K) -> V:
        idx, found = self._find(key)
        if not found:
            raise KeyError(key)
        return self._storage[idx][1]

    def __setitem__(self, key: K, value: V) -> None:
        idx, found = self._find(key)
        if found:
            self._storage[idx] = (key, value)
        else:
            self._storage.insert(idx, (key, value))

    def __delitem__(self, key: K) -> None:
        idx, found = self._find(key)
        if not found:
            raise KeyError(key)
        del self._storage[idx]

    def __contains__(self, key: object) -> bool:
        return self._find(key)[1]  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[K]:
        return (pair[0] for pair in list(self._storage))

    def __reversed__(self) -> Iterator[K]:
        return (pair[0] for pair in reversed(list(self._storage)))

    def __len__(self) -> int:
        return len(self._storage)

    def __repr__(self) -> str:
        body = ", ".join(f"{key!r}: {value!r}" for key, value in self._storage)
        return f"{type(self).__name__}({{{body}}})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SortedDict):
            return self._storage == other._storage
        return super().__eq__(other)

    def copy(self) -> SortedDict[K, V]:
        clone: SortedDict[K, V] = type(self)()
        clone._storage = list(self._storage)
        return clone

    def bisect_left(self, key: K) -> int:
        return lower_bound(self._storage, key, key=_pair_key, check=False)

    def bisect_right(self, key: K) -> int:
        return upper_bound(self._storage, key, key=_pair_key, check=False)

    def index(self, key: K) -> int:
        idx, found = self._find(key)
        if not found:
            raise ValueError(f"{key!r} is not in SortedDict")
        return idx

    def peekitem(self, index: int = -1) -> tuple[K, V]:
        if not self._storage:
            raise IndexError("peekitem on empty SortedDict")
        return self._storage[index]

    def irange(self, minimum: K | None = None, maximum: K | None = None) -> Iterator[K]:
        """Keys in ``[minimum, maximum]``; ``None`` leaves that side open."""
        start = 0 if minimum is None else self.bisect_left(minimum)
        stop = len(self._storage) if maximum is None else self.bisect_right(maximum)
        for idx in range(start, stop):
            yield self._storage[idx][0]
