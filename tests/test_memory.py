from datetime import timedelta

import pytest

from pomotimer.interval import (
    Category,
    Interval,
    InvalidIDError,
    NoIntervalsError,
    State,
)
from pomotimer.memory import InMemoryRepository


@pytest.fixture
def repo():
    return InMemoryRepository()


def test_create_assigns_sequential_ids(repo):
    assert repo.create(Interval()) == 1
    assert repo.create(Interval(category=Category.SHORT_BREAK)) == 2
    assert repo.by_id(2).id == 2
    assert repo.by_id(2).category == Category.SHORT_BREAK


def test_update_replaces_interval(repo):
    new_id = repo.create(Interval())
    repo.update(Interval(id=new_id, state=State.RUNNING, actual_duration=timedelta(seconds=3)))
    stored = repo.by_id(new_id)
    assert stored.state == State.RUNNING
    assert stored.actual_duration == timedelta(seconds=3)


def test_update_zero_id_raises(repo):
    repo.create(Interval())
    with pytest.raises(InvalidIDError):
        repo.update(Interval(id=0))


@pytest.mark.parametrize("bad_id", [0, -1, 5])
def test_by_id_invalid_raises(repo, bad_id):
    repo.create(Interval())
    with pytest.raises(InvalidIDError):
        repo.by_id(bad_id)


def test_last_empty_raises(repo):
    with pytest.raises(NoIntervalsError):
        repo.last()


def test_last_returns_most_recent(repo):
    repo.create(Interval())
    repo.create(Interval(category=Category.LONG_BREAK))
    assert repo.last().id == 2
    assert repo.last().category == Category.LONG_BREAK


def test_breaks_newest_first_and_limited(repo):
    categories = [
        Category.POMODORO,
        Category.SHORT_BREAK,
        Category.POMODORO,
        Category.LONG_BREAK,
        Category.POMODORO,
        Category.SHORT_BREAK,
        Category.POMODORO,
        Category.SHORT_BREAK,
    ]
    for category in categories:
        repo.create(Interval(category=category))

    assert [b.id for b in repo.breaks(3)] == [8, 6, 4]
    assert [b.id for b in repo.breaks(10)] == [8, 6, 4, 2]


def test_breaks_skip_pomodoros(repo):
    repo.create(Interval(category=Category.POMODORO))
    repo.create(Interval(category=Category.POMODORO))
    assert repo.breaks(3) == []