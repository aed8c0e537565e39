"""Task identifier generators.

Both generators hand out strictly increasing integers and can be seeded from
the identifiers of a freshly loaded list so new tasks never collide with
restored ones.
"""

from __future__ import annotations

import time
from collections.abc import Callable, Iterable
from typing import Literal, Protocol


class IdGenerator(Protocol):
    """Source of task identifiers."""

    def seed(self, existing: Iterable[int]) -> None: ...

    def allocate(self) -> int: ...


class CounterIds:
    """Sequential counter, seeded one past the largest loaded id."""

    def __init__(self, start: int = 0) -> None:
        self.start = start
        self._next = start

    def seed(self, existing: Iterable[int]) -> None:
        # Never move backwards: ids stay unique for the whole session.
        highest = max(existing, default=self.start - 1)
        self._next = max(self._next, highest + 1)

    def allocate(self) -> int:
        nid = self._next
        self._next += 1
        return nid

    @property
    def next_id(self) -> int:
        return self._next


class TimestampIds:
    """Millisecond timestamps, bumped past the last issued id.

    Two adds within the same clock tick would otherwise get the same id.
    """

    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        self._clock = clock
        self._last = -1

    def seed(self, existing: Iterable[int]) -> None:
        self._last = max(self._last, max(existing, default=-1))

    def allocate(self) -> int:
        candidate = int(self._clock() * 1000)
        if candidate <= self._last:
            candidate = self._last + 1
        self._last = candidate
        return candidate


def make_id_generator(
    strategy: Literal["counter", "timestamp"] = "counter",
    start: int = 0,
) -> IdGenerator:
    """Build the identifier generator for a configured strategy."""
    if strategy == "timestamp":
        return TimestampIds()
    return CounterIds(start)
