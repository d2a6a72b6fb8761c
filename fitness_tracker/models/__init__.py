from fitness_tracker.models.workout import ExerciseKind, LocalTimestamp, Workout, TIMESTAMP_FORMAT

__all__ = ["ExerciseKind", "LocalTimestamp", "Workout", "TIMESTAMP_FORMAT"]
