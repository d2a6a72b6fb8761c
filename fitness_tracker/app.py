"""The navigation/input state machine.

``FitnessApp`` is the one context object of the program: it owns the
``AppState``, the workout store and the clock, and is handed explicitly to
the frame builders and the terminal loop.
"""
from __future__ import annotations
import logging
from datetime import date, datetime
from typing import Callable, Optional

from fitness_tracker.repositories.base import WorkoutStore
from fitness_tracker.state import ADD_KEY, HISTORY_KEY, QUIT_KEY, AppState, Key, KeyInput, Screen

log = logging.getLogger(__name__)

DIGITS = "0123456789"
MAX_COUNT = 2**31 - 1

def parse_count(text: str) -> Optional[int]:
    """Positive base-10 count, or None when the buffer is not one."""
    if not text or not all(c in DIGITS for c in text):
        return None
    value = int(text)
    if value <= 0 or value > MAX_COUNT:
        return None
    return value

class FitnessApp:
    def __init__(
        self,
        store: WorkoutStore,
        *,
        state: AppState | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.store = store
        self.state = state or AppState()
        self.clock = clock

    def today(self) -> date:
        return self.clock().date()

    def handle_input(self, key: KeyInput) -> bool:
        """Apply one key press. Returns True when the user asked to quit.

        StorageFailure from the store is not caught here.
        """
        handler = {
            Screen.main: self._handle_main,
            Screen.add_workout: self._handle_add_workout,
            Screen.history: self._handle_history,
        }[self.state.screen]
        return handler(key)

    def _go(self, screen: Screen) -> None:
        log.debug("screen %s -> %s", self.state.screen.value, screen.value)
        self.state.screen = screen

    def _handle_main(self, key: KeyInput) -> bool:
        s = self.state
        if key == QUIT_KEY:
            return True
        if key == ADD_KEY:
            self._go(Screen.add_workout)
            s.input_buffer = ""
            s.status_message = None
        elif key == HISTORY_KEY:
            self._go(Screen.history)
            s.history_cursor = 0
            s.selected_date = None
            s.status_message = None
        return False

    def _handle_add_workout(self, key: KeyInput) -> bool:
        s = self.state
        if key is Key.esc:
            self._go(Screen.main)
            s.input_buffer = ""
        elif key is Key.tab:
            s.selected_exercise = s.selected_exercise.next()
        elif isinstance(key, str) and len(key) == 1 and key in DIGITS:
            s.input_buffer += key
        elif key is Key.backspace:
            s.input_buffer = s.input_buffer[:-1]
        elif key is Key.enter:
            count = parse_count(s.input_buffer)
            # Anything else is dropped without feedback
            if count is not None:
                exercise = s.selected_exercise
                self.store.record(exercise, count)
                s.status_message = f"Added {count} {exercise.value}!"
                s.input_buffer = ""
        return False

    def _handle_history(self, key: KeyInput) -> bool:
        s = self.state
        if s.selected_date is not None:
            # day detail: only Esc does anything, and it pops one level
            if key is Key.esc:
                s.selected_date = None
            return False

        if key is Key.esc:
            self._go(Screen.main)
        elif key is Key.up:
            s.history_cursor = max(0, s.history_cursor - 1)
        elif key is Key.down:
            dates = self.store.distinct_dates()
            s.history_cursor = max(0, min(len(dates) - 1, s.history_cursor + 1))
        elif key is Key.enter:
            dates = self.store.distinct_dates()
            if 0 <= s.history_cursor < len(dates):
                s.selected_date = dates[s.history_cursor]
        return False
