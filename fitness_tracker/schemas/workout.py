from datetime import datetime
from pydantic import AliasChoices, BaseModel, Field, PositiveInt

from fitness_tracker.models import ExerciseKind

class WorkoutEvent(BaseModel):
    id: int
    # ORM rows call it exercise_type (the column name)
    exercise: ExerciseKind = Field(validation_alias=AliasChoices("exercise", "exercise_type"))
    count: PositiveInt
    timestamp: datetime

    model_config = {"from_attributes": True, "frozen": True}
