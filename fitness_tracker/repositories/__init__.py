from fitness_tracker.repositories.base import BaseRepository, WorkoutStore
from fitness_tracker.repositories.workout_repo import WorkoutRepository

__all__ = ["BaseRepository", "WorkoutStore", "WorkoutRepository"]
