import logging

from sqlalchemy import Engine, create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker, DeclarativeBase

from .errors import StorageFailure
from .settings import Settings, get_settings

log = logging.getLogger(__name__)

# Define the base class that all models should inherit from
class Base(DeclarativeBase):
    pass

def make_engine(url: str, **kwargs) -> Engine:
    return create_engine(url, **kwargs)

def init_db(engine: Engine) -> None:
    """Create the workouts table if it does not exist yet (additive only)."""
    from . import models  # noqa: F401  # registers Workout on Base.metadata
    Base.metadata.create_all(engine)

def make_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autocommit=False, autoflush=False, expire_on_commit=False)

def open_store(settings: Settings | None = None):
    """Open (and create if absent) the on-disk store.

    Returns a WorkoutRepository owning one long-lived session. Any failure
    is fatal for the caller and surfaces as StorageFailure.
    """
    from .repositories.workout_repo import WorkoutRepository

    s = settings or get_settings()
    try:
        engine = make_engine(s.DATABASE_URL)
        init_db(engine)
    except SQLAlchemyError as exc:
        raise StorageFailure(f"cannot open workout store at {s.DB_PATH}: {exc}") from exc
    log.info("opened workout store at %s", s.DB_PATH)
    return WorkoutRepository(make_session_factory(engine)())
