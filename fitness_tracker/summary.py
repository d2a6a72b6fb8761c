"""Aggregations behind the main screen: today's totals and the comparison
of today's sets against the most recent earlier session."""
from __future__ import annotations
from dataclasses import dataclass, field
from datetime import date
from typing import Iterable, Optional, Sequence

from fitness_tracker.models import ExerciseKind
from fitness_tracker.repositories.base import WorkoutStore
from fitness_tracker.schemas.workout import WorkoutEvent

TODAY_LABEL = "Today"

@dataclass(slots=True)
class DailyTotals:
    totals: dict[ExerciseKind, int]
    workouts: int

@dataclass(slots=True)
class ComparisonRow:
    exercise: ExerciseKind
    label: str
    counts: list[int] = field(default_factory=list)

    @property
    def total(self) -> int:
        return sum(self.counts)

    def cells(self, columns: int) -> list[str]:
        """Counts as text, padded with empty cells up to ``columns``."""
        padded = [str(c) for c in self.counts]
        return padded + [""] * (columns - len(padded))

@dataclass(slots=True)
class ComparisonTable:
    previous_date: Optional[date]
    rows: list[ComparisonRow]

    @property
    def columns(self) -> int:
        return max((len(r.counts) for r in self.rows), default=0)

def daily_totals(events: Iterable[WorkoutEvent]) -> DailyTotals:
    totals = {kind: 0 for kind in ExerciseKind}
    n = 0
    for ev in events:
        totals[ev.exercise] += ev.count
        n += 1
    return DailyTotals(totals=totals, workouts=n)

def _counts(events: Sequence[WorkoutEvent], kind: ExerciseKind) -> list[int]:
    ordered = sorted(events, key=lambda e: e.timestamp)
    return [e.count for e in ordered if e.exercise == kind]

def build_comparison(
    today_events: Sequence[WorkoutEvent],
    previous_date: Optional[date],
    previous_events: Sequence[WorkoutEvent] = (),
) -> ComparisonTable:
    rows: list[ComparisonRow] = []
    for kind in ExerciseKind:
        rows.append(ComparisonRow(kind, TODAY_LABEL, _counts(today_events, kind)))
        # no earlier session: the previous row is left out entirely
        if previous_date is not None:
            rows.append(ComparisonRow(kind, previous_date.isoformat(), _counts(previous_events, kind)))
    return ComparisonTable(previous_date=previous_date, rows=rows)

def comparison_for(store: WorkoutStore, today: date) -> ComparisonTable:
    previous = store.most_recent_date_before(today)
    previous_events = store.events_on_date(previous) if previous is not None else []
    return build_comparison(store.events_on_date(today), previous, previous_events)
