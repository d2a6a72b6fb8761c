class FitnessTrackerError(Exception):
    """Base class for errors raised by the fitness tracker."""


class StorageFailure(FitnessTrackerError):
    """The workout store could not be opened, queried or written.

    Raised with the underlying SQLAlchemy error as ``__cause__``.
    """
