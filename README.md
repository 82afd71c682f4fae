# pomotimer

A small library for running Pomodoro-technique intervals: focused work
periods ("pomodoros") alternated with short and long breaks. Interval state
is kept in a repository, so a running interval can be paused, resumed or
cancelled, and the kind of the next interval is chosen from the history.

## Installation

```
pip install .
```

## How intervals follow each other

- With no history, the first interval is a pomodoro.
- After any break comes a pomodoro.
- After a pomodoro comes a short break, unless the last three breaks were all
  short, in which case it is a long break.

So a full cycle is: pomodoro, short, pomodoro, short, pomodoro, short,
pomodoro, long.

`IntervalConfig(repo, pomodoro, short_break, long_break)` takes the durations
as `timedelta` values. Defaults are 25 minutes (pomodoro), 5 minutes (short
break) and 15 minutes (long break); a positive duration overrides a default,
while `None`, zero or a negative value keeps it.

## Usage

```python
import threading
from datetime import timedelta

from pomotimer.interval import IntervalConfig, State, get_interval
from pomotimer.memory import InMemoryRepository

repo = InMemoryRepository()
config = IntervalConfig(
    repo,
    timedelta(minutes=25),
    timedelta(minutes=5),
    timedelta(minutes=15),
)

interval = get_interval(config)   # the running/paused one, or a new one
print(interval.category, interval.planned_duration)

cancel = threading.Event()

def on_start(i):
    print("started", i.category)

def on_tick(i):
    print("elapsed", i.actual_duration)

def on_end(i):
    print("done", i.category)

# Blocks until the interval finishes, is paused, or `cancel` is set.
interval.start(config, on_start, on_tick, on_end, cancel)

print(repo.by_id(interval.id).state is State.DONE)
```

`get_interval` returns the last stored interval if it is neither done nor
cancelled; otherwise it creates and stores the next interval in the cycle.

`Interval` is an immutable dataclass with `id`, `start_time`,
`planned_duration`, `actual_duration`, `category` (a `Category`) and `state`
(a `State`: `NOT_STARTED`, `RUNNING`, `PAUSED`, `DONE`, `CANCELLED`).

`start` does nothing for an interval that is already running. For a new
interval it records the start time, marks it running and runs the timer loop:
once a second it adds one second to `actual_duration`, stores it and calls
`on_tick`; when the remaining time runs out it marks the interval done, calls
`on_end` and stores it. Setting `cancel_event` marks the interval cancelled
and returns. The `cancel_event` argument may be left out, in which case the
loop runs until the interval expires or is paused.

To pause a running interval (from another thread, or inside `on_tick`), call
`pause(config)` on it; the timer loop sees the paused state on its next tick
and returns. Calling `start` on the paused interval resumes it from the time
already accumulated.

## Errors

All errors derive from `PomodoroError`:

- `NoIntervalsError` — the repository holds no intervals yet.
- `IntervalNotRunningError` — pausing an interval that is not running.
- `IntervalCompletedError` — starting an interval that is done or cancelled.
- `InvalidStateError` — the interval has an unknown state.
- `InvalidIDError` — an interval id that does not refer to a stored interval
  was given to `InMemoryRepository`.

## Custom storage

Implement the abstract class `Repository` (`create`, `update`, `by_id`,
`last`, `breaks`) to keep intervals somewhere other than memory.
`InMemoryRepository` is the only implementation included; it is thread-safe
and numbers intervals 1, 2, 3, ... in the order they are created.

## What this package does not do

It is a library only: there is no command-line program and no screen for
running the timer, and intervals are not saved anywhere that outlives the
process. Persistent storage needs a `Repository` of your own.

## Running the tests

```
pip install .[test]
pytest
```