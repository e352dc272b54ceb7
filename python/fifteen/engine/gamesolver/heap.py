"""Binary min-heap ordered by a caller-supplied score."""

from __future__ import annotations

import heapq
import itertools
from collections.abc import Callable
from typing import Generic, TypeVar

T = TypeVar("T")


class MinHeap(Generic[T]):
    """Pops the lowest-scored item first.

    Scores are computed once, on push. Items with equal scores come out in
    insertion order.
    """

    def __init__(self, score: Callable[[T], float]) -> None:
        self._score = score
        self._heap: list[tuple[float, int, T]] = []
        self._counter = itertools.count()

    def push(self, item: T) -> None:
        heapq.heappush(self._heap, (self._score(item), next(self._counter), item))

    def pop(self) -> T | None:
        """Remove and return the minimum item, or ``None`` if empty."""
        if not self._heap:
            return None
        return heapq.heappop(self._heap)[2]

    def peek(self) -> T | None:
        return self._heap[0][2] if self._heap else None

    def __len__(self) -> int:
        return len(self._heap)
