from __future__ import annotations
import logging
from datetime import date, datetime, time, timedelta
from typing import Callable, Optional
from sqlalchemy import select, func
from sqlalchemy.orm import Session
from fitness_tracker.models import ExerciseKind, Workout
from fitness_tracker.repositories.base import BaseRepository
from fitness_tracker.schemas.workout import WorkoutEvent

log = logging.getLogger(__name__)

def _day_bounds(day: date) -> tuple[datetime, datetime]:
    start = datetime.combine(day, time.min)
    return start, start + timedelta(days=1)

class WorkoutRepository(BaseRepository[Workout]):
    """Append-only workout log over a single long-lived session.

    ``clock`` returns the current naive local time; tests pass a fixed one.
    """
    def __init__(self, db: Session, *, clock: Callable[[], datetime] = datetime.now):
        super().__init__(db)
        self.clock = clock

    # WRITES
    def record(self, exercise: ExerciseKind, count: int) -> WorkoutEvent:
        # count > 0 is guaranteed by the caller
        row = Workout(
            exercise_type=exercise,
            count=count,
            timestamp=self.clock().replace(microsecond=0),
        )
        # nothing is committed unless the row also reads back as a valid event
        with self.storage_errors("record workout"):
            self.add_and_refresh(row)
            event = WorkoutEvent.model_validate(row)
            self.db.commit()
        log.info("recorded %d %s at %s", count, exercise.value, row.timestamp)
        return event

    # READS
    def events_on_date(self, day: date) -> list[WorkoutEvent]:
        start, end = _day_bounds(day)
        stmt = select(Workout).where(Workout.timestamp >= start, Workout.timestamp < end)\
                              .order_by(Workout.timestamp.asc(), Workout.id.asc())
        with self.storage_errors(f"load workouts for {day}"):
            rows = self.db.execute(stmt).scalars().all()
            return [WorkoutEvent.model_validate(r) for r in rows]

    def events_today(self) -> list[WorkoutEvent]:
        return self.events_on_date(self.clock().date())

    def distinct_dates(self) -> list[date]:
        workout_date = func.date(Workout.timestamp).label("workout_date")
        # unparseable timestamp text has no date() and is left out
        stmt = select(workout_date).where(workout_date.is_not(None))\
                                   .distinct().order_by(workout_date.desc())
        with self.storage_errors("load workout dates"):
            values = self.db.execute(stmt).scalars().all()
            return [date.fromisoformat(v) for v in values]

    def most_recent_date_before(self, day: date) -> Optional[date]:
        start, _ = _day_bounds(day)
        stmt = select(func.max(func.date(Workout.timestamp))).where(Workout.timestamp < start)
        with self.storage_errors(f"find session before {day}"):
            value = self.db.execute(stmt).scalar_one()
            return date.fromisoformat(value) if value else None
