# fitness_tracker/repositories/base.py
from __future__ import annotations
from contextlib import contextmanager
from datetime import date
from typing import Generic, Iterator, Protocol, TypeVar

from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from fitness_tracker.errors import StorageFailure
from fitness_tracker.models import ExerciseKind
from fitness_tracker.schemas.workout import WorkoutEvent

T = TypeVar("T")  # SQLAlchemy model type

class WorkoutStore(Protocol):
    """What the state machine and the frame builders need from storage."""

    def record(self, exercise: ExerciseKind, count: int) -> WorkoutEvent: ...

    def events_on_date(self, day: date) -> list[WorkoutEvent]: ...

    def events_today(self) -> list[WorkoutEvent]: ...

    def distinct_dates(self) -> list[date]: ...

    def most_recent_date_before(self, day: date) -> date | None: ...

class BaseRepository(Generic[T]):
    """Lightweight base for repositories using SQLAlchemy 2.0 style."""
    def __init__(self, db: Session):
        self.db = db

    @contextmanager
    def storage_errors(self, action: str) -> Iterator[None]:
        """Translate SQLAlchemy errors into StorageFailure, rolling back first.

        Rows that cannot be decoded (bad timestamp text, unknown exercise,
        non-positive count) are corrupt data and fail the same way.
        """
        try:
            yield
        except (SQLAlchemyError, ValidationError, ValueError, LookupError) as exc:
            self.db.rollback()
            raise StorageFailure(f"{action} failed: {exc}") from exc

    def add_and_refresh(self, entity: T) -> T:
        self.db.add(entity)
        self.db.flush()
        self.db.refresh(entity)
        return entity

    def close(self) -> None:
        self.db.close()
