from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional, Union

from fitness_tracker.models import ExerciseKind

class Screen(str, Enum):
    main = "main"
    add_workout = "add_workout"
    history = "history"

class Key(Enum):
    """Named (non-printable) keys. Printable keys travel as 1-char str."""
    up = "up"
    down = "down"
    enter = "enter"
    esc = "esc"
    tab = "tab"
    backspace = "backspace"

KeyInput = Union[Key, str]

QUIT_KEY = "q"
ADD_KEY = "a"
HISTORY_KEY = "h"

@dataclass(slots=True)
class AppState:
    screen: Screen = Screen.main
    selected_exercise: ExerciseKind = next(iter(ExerciseKind))
    input_buffer: str = ""
    history_cursor: int = 0
    selected_date: Optional[date] = None
    status_message: Optional[str] = None
