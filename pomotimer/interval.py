"""Pomodoro intervals: categories, states, scheduling and the timer loop."""

from __future__ import annotations

import abc
import threading
import time
from dataclasses import dataclass, replace
from datetime import datetime, timedelta
from enum import Enum, IntEnum
from typing import Callable, Optional

__all__ = [
    "Category",
    "State",
    "Interval",
    "Repository",
    "PomodoroError",
    "NoIntervalsError",
    "IntervalNotRunningError",
    "IntervalCompletedError",
    "InvalidStateError",
    "InvalidIDError",
    "IntervalConfig",
    "get_interval",
]

_TICK = timedelta(seconds=1)


class Category(str, Enum):
    """Kind of interval: focused work or a break."""

    POMODORO = "Pomodoro"
    SHORT_BREAK = "ShortBreak"
    LONG_BREAK = "LongBreak"


class State(IntEnum):
    """Lifecycle state of an interval."""

    NOT_STARTED = 0
    RUNNING = 1
    PAUSED = 2
    DONE = 3
    CANCELLED = 4


class PomodoroError(Exception):
    """Base class for interval errors."""


class NoIntervalsError(PomodoroError):
    """The repository holds no intervals."""

    def __init__(self, message: str = "no intervals") -> None:
        super().__init__(message)


class IntervalNotRunningError(PomodoroError):
    """The interval is not running."""

    def __init__(self, message: str = "interval is not running") -> None:
        super().__init__(message)


class IntervalCompletedError(PomodoroError):
    """The interval is already done or cancelled."""

    def __init__(self, message: str = "interval is done or cancelled") -> None:
        super().__init__(message)


class InvalidStateError(PomodoroError):
    """The interval has a state that is not recognised."""


class InvalidIDError(PomodoroError):
    """The interval identifier does not refer to a stored interval."""


@dataclass(frozen=True)
class Interval:
    """A single pomodoro or break interval."""

    id: int = 0
    start_time: Optional[datetime] = None
    planned_duration: timedelta = timedelta(0)
    actual_duration: timedelta = timedelta(0)
    category: Category = Category.POMODORO
    state: State = State.NOT_STARTED

    def start(
        self,
        config: IntervalConfig,
        on_start: Callback,
        on_tick: Callback,
        on_end: Callback,
        cancel_event: Optional[threading.Event] = None,
    ) -> None:
        """Run the interval until it expires, is paused or is cancelled.

        Blocks the calling thread. Setting ``cancel_event`` cancels it.
        """
        if self.state == State.RUNNING:
            return
        if self.state == State.NOT_STARTED:
            running = replace(self, start_time=datetime.now(), state=State.RUNNING)
        elif self.state == State.PAUSED:
            running = replace(self, state=State.RUNNING)
        elif self.state in (State.CANCELLED, State.DONE):
            raise IntervalCompletedError("cannot start a finished interval")
        else:
            raise InvalidStateError(f"invalid interval state: {self.state}")

        config.repo.update(running)
        _run(running.id, config, on_start, on_tick, on_end, cancel_event)

    def pause(self, config: IntervalConfig) -> None:
        """Pause a running interval."""
        if self.state != State.RUNNING:
            raise IntervalNotRunningError()
        config.repo.update(replace(self, state=State.PAUSED))


Callback = Callable[[Interval], None]


class Repository(abc.ABC):
    """Storage for intervals."""

    @abc.abstractmethod
    def create(self, interval: Interval) -> int:
        """Store a new interval and return its identifier."""

    @abc.abstractmethod
    def update(self, interval: Interval) -> None:
        """Replace the stored interval that has the same identifier."""

    @abc.abstractmethod
    def by_id(self, interval_id: int) -> Interval:
        """Return the interval with the given identifier."""

    @abc.abstractmethod
    def last(self) -> Interval:
        """Return the most recent interval; raise NoIntervalsError if none."""

    @abc.abstractmethod
    def breaks(self, n: int) -> list[Interval]:
        """Return up to ``n`` most recent break intervals, newest first."""


class IntervalConfig:
    """Durations for each interval category and the repository to use."""

    DEFAULT_POMODORO = timedelta(minutes=25)
    DEFAULT_SHORT_BREAK = timedelta(minutes=5)
    DEFAULT_LONG_BREAK = timedelta(minutes=15)

    def __init__(
        self,
        repo: Repository,
        pomodoro: Optional[timedelta] = None,
        short_break: Optional[timedelta] = None,
        long_break: Optional[timedelta] = None,
    ) -> None:
        self.repo = repo
        self.pomodoro_duration = _positive_or(pomodoro, self.DEFAULT_POMODORO)
        self.short_break_duration = _positive_or(short_break, self.DEFAULT_SHORT_BREAK)
        self.long_break_duration = _positive_or(long_break, self.DEFAULT_LONG_BREAK)

    def duration_for(self, category: Category) -> timedelta:
        """Return the planned duration for a category."""
        return {
            Category.POMODORO: self.pomodoro_duration,
            Category.SHORT_BREAK: self.short_break_duration,
            Category.LONG_BREAK: self.long_break_duration,
        }[category]

    def __repr__(self) -> str:
        return (
            f"IntervalConfig(pomodoro={self.pomodoro_duration!r}, "
            f"short_break={self.short_break_duration!r}, "
            f"long_break={self.long_break_duration!r})"
        )


def _positive_or(value: Optional[timedelta], default: timedelta) -> timedelta:
    if value is not None and value > timedelta(0):
        return value
    return default


def _next_category(repo: Repository) -> Category:
    try:
        last = repo.last()
    except NoIntervalsError:
        return Category.POMODORO

    if last.category in (Category.SHORT_BREAK, Category.LONG_BREAK):
        return Category.POMODORO

    recent_breaks = repo.breaks(3)
    if len(recent_breaks) < 3:
        return Category.SHORT_BREAK
    if any(b.category == Category.LONG_BREAK for b in recent_breaks):
        return Category.SHORT_BREAK
    return Category.LONG_BREAK


def _new_interval(config: IntervalConfig) -> Interval:
    category = _next_category(config.repo)
    interval = Interval(category=category, planned_duration=config.duration_for(category))
    return replace(interval, id=config.repo.create(interval))


def get_interval(config: IntervalConfig) -> Interval:
    """Return the active interval, or create the next one in the cycle."""
    try:
        last = config.repo.last()
    except NoIntervalsError:
        return _new_interval(config)
    if last.state not in (State.CANCELLED, State.DONE):
        return last
    return _new_interval(config)


def _wait(cancel_event: Optional[threading.Event], timeout: float) -> bool:
    if cancel_event is None:
        time.sleep(timeout)
        return False
    return cancel_event.wait(timeout)


def _run(
    interval_id: int,
    config: IntervalConfig,
    on_start: Callback,
    on_tick: Callback,
    on_end: Callback,
    cancel_event: Optional[threading.Event],
) -> None:
    repo = config.repo
    interval = repo.by_id(interval_id)
    began = time.monotonic()
    tick_seconds = _TICK.total_seconds()
    next_tick = began + tick_seconds
    expire_at = began + (interval.planned_duration - interval.actual_duration).total_seconds()
    on_start(interval)

    while True:
        deadline = min(next_tick, expire_at)
        timeout = max(0.0, deadline - time.monotonic())
        if _wait(cancel_event, timeout):
            current = repo.by_id(interval_id)
            repo.update(replace(current, state=State.CANCELLED))
            return
        if time.monotonic() < deadline:
            continue

        if next_tick <= expire_at:
            next_tick += tick_seconds
            current = repo.by_id(interval_id)
            if current.state == State.PAUSED:
                return
            current = replace(current, actual_duration=current.actual_duration + _TICK)
            repo.update(current)
            on_tick(current)
        else:
            current = replace(repo.by_id(interval_id), state=State.DONE)
            on_end(current)
            repo.update(current)
            return