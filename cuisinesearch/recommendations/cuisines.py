from __future__ import annotations

import threading
from typing import Iterator

UNKNOWN_CUISINE = "unknown"


class CuisineTable:
    """
    Mapping of cuisine id to display name, built once per load.

    Writes are serialized by a lock while the table is being populated.
    Once ``freeze()`` has been called the table rejects further writes,
    so lookups never need the lock.
    """

    def __init__(self) -> None:
        self._names: dict[int, str] = {}
        self._lock = threading.Lock()
        self._frozen = False

    def add(self, cuisine_id: int, name: str) -> None:
        with self._lock:
            if self._frozen:
                raise RuntimeError("cuisine table is frozen")
            self._names[cuisine_id] = name

    def freeze(self) -> None:
        with self._lock:
            self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def resolve(self, cuisine_id: int) -> str:
        """Return the display name, or ``"unknown"`` for absent or blank entries."""
        return self._names.get(cuisine_id) or UNKNOWN_CUISINE

    def __len__(self) -> int:
        return len(self._names)

    def __contains__(self, cuisine_id: object) -> bool:
        return cuisine_id in self._names

    def __iter__(self) -> Iterator[int]:
        return iter(self._names)


def resolve(table: CuisineTable, cuisine_id: int) -> str:
    return table.resolve(cuisine_id)
