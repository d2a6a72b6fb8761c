from datetime import datetime
from enum import Enum
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import Integer, String, Enum as SAEnum
from sqlalchemy.types import TypeDecorator
from fitness_tracker.db import Base

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

class ExerciseKind(str, Enum):
    squats = "squats"
    push_ups = "push-ups"

    @property
    def label(self) -> str:
        return _LABELS[self]

    def next(self) -> "ExerciseKind":
        """Following kind in declaration order, wrapping to the first."""
        members = list(type(self))
        return members[(members.index(self) + 1) % len(members)]

_LABELS = {
    ExerciseKind.squats: "Squats",
    ExerciseKind.push_ups: "Push-ups",
}

class LocalTimestamp(TypeDecorator):
    """Naive local datetime stored as 'YYYY-MM-DD HH:MM:SS' text."""
    impl = String(19)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        if isinstance(value, datetime):
            return value.strftime(TIMESTAMP_FORMAT)
        return value

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return datetime.strptime(value, TIMESTAMP_FORMAT)

class Workout(Base):
    __tablename__ = "workouts"
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    exercise_type: Mapped[ExerciseKind] = mapped_column(
        SAEnum(
            ExerciseKind,
            name="exercise_kind",
            native_enum=False,
            create_constraint=False,
            length=20,
            values_callable=lambda kinds: [k.value for k in kinds],
        ),
        nullable=False,
    )
    count: Mapped[int] = mapped_column(Integer, nullable=False)
    timestamp: Mapped[datetime] = mapped_column(LocalTimestamp, nullable=False, index=True)
