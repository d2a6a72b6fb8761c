# fitness_tracker/main.py
import curses
import logging
import sys

from fitness_tracker.app import FitnessApp
from fitness_tracker.db import open_store
from fitness_tracker.errors import StorageFailure
from fitness_tracker.logging_config import configure_logging
from fitness_tracker.settings import get_settings
from fitness_tracker.ui.terminal import run

log = logging.getLogger(__name__)

def main() -> int:
    settings = get_settings()
    configure_logging(settings)
    log.info("fitness tracker starting")

    # The store comes first: without it there is nothing to show
    try:
        store = open_store(settings)
    except StorageFailure as exc:
        log.exception("cannot start without a workout store")
        print(f"fitness-tracker: {exc}", file=sys.stderr)
        return 1

    app = FitnessApp(store, clock=store.clock)
    finished = False

    def session(stdscr):
        nonlocal finished
        run(stdscr, app)
        finished = True

    try:
        # wrapper restores the terminal on every exit path
        curses.wrapper(session)
    except StorageFailure as exc:
        # Failed writes (and key-driven reads) end the session
        log.exception("storage failure, exiting")
        print(f"fitness-tracker: {exc}", file=sys.stderr)
        return 1
    except curses.error as exc:
        if finished:
            # the user already quit; restoring the terminal is best effort
            log.warning("terminal teardown failed: %s", exc)
        else:
            log.exception("terminal error")
            print(f"fitness-tracker: terminal error: {exc}", file=sys.stderr)
            return 1
    finally:
        store.close()

    log.info("fitness tracker exiting")
    return 0

if __name__ == "__main__":
    sys.exit(main())
