import logging
from logging.handlers import RotatingFileHandler

from fitness_tracker.settings import Settings

FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

def configure_logging(settings: Settings) -> logging.Logger:
    """Send the package's logs to a rotating file; the screen belongs to curses."""
    logger = logging.getLogger("fitness_tracker")
    logger.setLevel(settings.LOG_LEVEL.upper())
    handler = RotatingFileHandler(settings.LOG_FILE, maxBytes=1_000_000, backupCount=3)
    handler.setFormatter(logging.Formatter(FORMAT))
    logger.addHandler(handler)
    return logger
