"""Turn the app state plus fresh store queries into a list of styled lines.

Nothing in here touches curses, so frames can be checked in tests. Every
frame re-queries the store; a failing read degrades to an empty view.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Callable, TypeVar

from fitness_tracker.app import FitnessApp
from fitness_tracker.errors import StorageFailure
from fitness_tracker.state import Screen
from fitness_tracker.summary import ComparisonTable, DailyTotals, comparison_for, daily_totals

log = logging.getLogger(__name__)

T = TypeVar("T")

class Style(str, Enum):
    normal = "normal"
    title = "title"
    heading = "heading"
    value = "value"
    highlight = "highlight"
    status = "status"
    help = "help"

@dataclass(frozen=True, slots=True)
class Line:
    text: str
    style: Style = Style.normal

HELP = {
    Screen.main: "[a] Add Workout  [h] History  [q] Quit",
    Screen.add_workout: "[Tab] Switch Exercise  [Enter] Save  [Esc] Back",
    Screen.history: "[Up/Down] Navigate  [Enter] Select  [Esc] Back",
}

def _degrade(query: Callable[[], T], fallback: T, what: str) -> T:
    try:
        return query()
    except StorageFailure as exc:
        log.warning("rendering %s without data: %s", what, exc)
        return fallback

def build_frame(app: FitnessApp) -> list[Line]:
    screen = app.state.screen
    if screen is Screen.main:
        body = main_lines(app)
    elif screen is Screen.add_workout:
        body = add_workout_lines(app)
    else:
        body = history_lines(app)
    return body + [Line(""), Line(HELP[screen], Style.help)]

def main_lines(app: FitnessApp) -> list[Line]:
    lines = [Line("Fitness Tracker", Style.title), Line("")]

    events = _degrade(app.store.events_today, [], "today's workouts")
    lines += totals_lines(daily_totals(events))

    table = _degrade(lambda: comparison_for(app.store, app.today()), None, "session comparison")
    if table is not None:
        lines.append(Line(""))
        lines += comparison_lines(table)
    return lines

def totals_lines(t: DailyTotals) -> list[Line]:
    lines = [Line("Today's Stats:", Style.heading), Line("")]
    for kind, total in t.totals.items():
        lines.append(Line(f"{kind.label}: {total}", Style.value))
    lines += [Line(""), Line(f"Total workouts: {t.workouts}", Style.status)]
    return lines

def comparison_lines(table: ComparisonTable) -> list[Line]:
    if table.previous_date is None:
        heading = "Today (no previous session)"
    else:
        heading = f"Today vs {table.previous_date.isoformat()}"
    lines = [Line(heading, Style.heading)]

    cols = table.columns
    label_w = max([len(r.exercise.label) for r in table.rows] + [0])
    day_w = max([len(r.label) for r in table.rows] + [0])
    cell_w = max([len(str(c)) for r in table.rows for c in r.counts] + [3])
    for row in table.rows:
        cells = " ".join(c.rjust(cell_w) for c in row.cells(cols))
        text = f"{row.exercise.label.ljust(label_w)}  {row.label.ljust(day_w)}  {cells}  = {row.total}"
        lines.append(Line(text))
    return lines

def add_workout_lines(app: FitnessApp) -> list[Line]:
    s = app.state
    lines = [
        Line("Exercise Type", Style.heading),
        Line(f"{s.selected_exercise.label} (Tab to switch)", Style.title),
        Line(""),
        Line("Count (Enter to save)", Style.heading),
        Line(s.input_buffer, Style.value),
    ]
    if s.status_message:
        lines += [Line(""), Line("Status", Style.heading), Line(s.status_message, Style.status)]
    return lines

def history_lines(app: FitnessApp) -> list[Line]:
    s = app.state
    if s.selected_date is not None:
        return day_detail_lines(app, s.selected_date)

    lines = [Line("Workout History (Enter to view)", Style.heading)]
    for i, day in enumerate(_degrade(app.store.distinct_dates, [], "history dates")):
        style = Style.highlight if i == s.history_cursor else Style.normal
        lines.append(Line(day.isoformat(), style))
    return lines

def day_detail_lines(app: FitnessApp, day: date) -> list[Line]:
    lines = [Line(f"Workouts on {day.isoformat()}", Style.heading)]
    for ev in _degrade(lambda: app.store.events_on_date(day), [], f"workouts on {day}"):
        lines.append(Line(f"{ev.timestamp:%H:%M:%S} - {ev.count} {ev.exercise.value}"))
    return lines
