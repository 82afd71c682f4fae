"""Thread-safe in-memory interval repository."""

from __future__ import annotations

import threading
from dataclasses import replace

from pomotimer.interval import (
    Category,
    Interval,
    InvalidIDError,
    NoIntervalsError,
    Repository,
)

__all__ = ["InMemoryRepository"]


class InMemoryRepository(Repository):
    """Keeps intervals in a list; identifiers are 1-based positions."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._intervals: list[Interval] = []

    def _index(self, interval_id: int) -> int:
        if not 1 <= interval_id <= len(self._intervals):
            raise InvalidIDError(f"invalid interval id: {interval_id}")
        return interval_id - 1

    def create(self, interval: Interval) -> int:
        with self._lock:
            new_id = len(self._intervals) + 1
            self._intervals.append(replace(interval, id=new_id))
            return new_id

    def update(self, interval: Interval) -> None:
        with self._lock:
            self._intervals[self._index(interval.id)] = interval

    def by_id(self, interval_id: int) -> Interval:
        with self._lock:
            return self._intervals[self._index(interval_id)]

    def last(self) -> Interval:
        with self._lock:
            if not self._intervals:
                raise NoIntervalsError()
            return self._intervals[-1]

    def breaks(self, n: int) -> list[Interval]:
        with self._lock:
            found: list[Interval] = []
            for interval in reversed(self._intervals):
                if interval.category == Category.POMODORO:
                    continue
                found.append(interval)
                if len(found) == n:
                    break
            return found