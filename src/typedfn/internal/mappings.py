from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Generic, TypeVar

K = TypeVar("K")
V = TypeVar("V")


class frozendict(Mapping[K, V], Generic[K, V]):
    """An immutable, hashable mapping that preserves insertion order."""

    def __init__(self, arg: Mapping[K, V] | Iterable[tuple[K, V]] = (), **kwargs: V) -> None:
        self._data = dict[K, V](arg, **kwargs)
        # Values need not be hashable until the mapping itself is hashed.
        self._hash: int | None = None

    def __getitem__(self, key: K) -> V:
        return self._data[key]

    def __hash__(self) -> int:
        if self._hash is None:
            self._hash = hash(frozenset(self._data.items()))
        return self._hash

    def __iter__(self) -> Iterator[K]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"
