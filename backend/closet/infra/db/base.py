"""In-memory table shared by the repository implementations."""
import copy
import dataclasses
import threading
from typing import Callable, Generic, Optional, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


def _with_id(row: T, row_id: int) -> T:
    if isinstance(row, BaseModel):
        return row.model_copy(update={"id": row_id}, deep=True)
    return dataclasses.replace(copy.deepcopy(row), id=row_id)


class InMemoryTable(Generic[T]):
    """Insertion-ordered rows keyed by a monotonic integer id.

    Rows go in and come out as copies, so nothing outside the table ever
    holds a reference into storage. Each table has its own lock.
    """

    def __init__(self) -> None:
        self._rows: dict[int, T] = {}
        self._next_id = 1
        self._lock = threading.RLock()

    @property
    def lock(self):
        return self._lock

    def insert(self, row: T) -> T:
        with self._lock:
            stored = _with_id(row, self._next_id)
            self._next_id += 1
            self._rows[stored.id] = stored
            return copy.deepcopy(stored)

    def get(self, row_id: int) -> Optional[T]:
        with self._lock:
            row = self._rows.get(row_id)
            return copy.deepcopy(row) if row is not None else None

    def find(self, predicate: Callable[[T], bool]) -> Optional[T]:
        with self._lock:
            for row in self._rows.values():
                if predicate(row):
                    return copy.deepcopy(row)
            return None

    def filter(self, predicate: Callable[[T], bool]) -> list[T]:
        with self._lock:
            return [copy.deepcopy(r) for r in self._rows.values() if predicate(r)]

    def replace(self, row: T) -> T:
        with self._lock:
            if row.id not in self._rows:
                raise KeyError(row.id)
            self._rows[row.id] = copy.deepcopy(row)
            return copy.deepcopy(row)

    def delete(self, row_id: int) -> bool:
        with self._lock:
            return self._rows.pop(row_id, None) is not None

    def __len__(self) -> int:
        with self._lock:
            return len(self._rows)
