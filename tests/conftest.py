"""
Shared fixtures: an in-memory SQLite store with a clock the tests control.
No terminal and no file on disk are needed.
"""
from datetime import datetime

import pytest
from sqlalchemy.pool import StaticPool

from fitness_tracker.app import FitnessApp
from fitness_tracker.db import init_db, make_engine, make_session_factory
from fitness_tracker.repositories.workout_repo import WorkoutRepository


class FakeClock:
    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture
def clock():
    return FakeClock(datetime(2024, 3, 15, 9, 30, 0, 123456))


@pytest.fixture
def engine():
    eng = make_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    init_db(eng)
    yield eng
    eng.dispose()


@pytest.fixture
def repo(engine, clock):
    db = make_session_factory(engine)()
    r = WorkoutRepository(db, clock=clock)
    yield r
    r.close()


@pytest.fixture
def app(repo, clock):
    return FitnessApp(repo, clock=clock)
