"""
Workout aggregations for the dashboard and the recovery screen.

Functions take already-loaded workouts exposing ``workout_date``,
``category``, ``muscle_groups`` and ``exercises`` (entries with ``name``,
``reps``, ``weight``).
"""

from __future__ import annotations

from collections import Counter, defaultdict
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Dict, List, Optional, Sequence

from domain.enums import TimeRange, VolumeFilter, VolumeMetric
from domain.units import to_user_weight

# Rep selector value meaning "20 reps or more"
HIGH_REP_BUCKET = 21


@dataclass
class WeeklyProgress:
    completed_count: int
    total_goal: int
    percentage: float
    active_weekdays: List[int] = field(default_factory=list)


@dataclass
class RecoveryStatus:
    muscle: str
    days_since: Optional[int]


@dataclass
class CategoryCount:
    category: str
    count: int


@dataclass
class DailyValue:
    day: date
    value: float


def start_of_week(day: date) -> date:
    """Monday of the week containing day."""
    return day - timedelta(days=day.weekday())


def filter_by_range(workouts: Sequence, time_range: TimeRange, today: date) -> list:
    start = TimeRange(time_range).start_date(today)
    if start is None:
        return list(workouts)
    return [w for w in workouts if w.workout_date >= start]


def weekly_progress(workouts: Sequence, weekly_goal: int, today: date) -> WeeklyProgress:
    """Workouts completed in the current Monday-based week against the goal."""
    monday = start_of_week(today)
    next_monday = monday + timedelta(days=7)
    this_week = [w for w in workouts if monday <= w.workout_date < next_monday]

    count = len(this_week)
    percentage = min(count / weekly_goal, 1.0) if weekly_goal > 0 else 0.0
    weekdays = sorted({w.workout_date.isoweekday() for w in this_week})
    return WeeklyProgress(
        completed_count=count,
        total_goal=weekly_goal,
        percentage=percentage,
        active_weekdays=weekdays,
    )


def days_since_last_trained(workouts: Sequence, muscle: str, today: date) -> Optional[int]:
    trained = [w.workout_date for w in workouts if muscle in (w.muscle_groups or [])]
    if not trained:
        return None
    return (today - max(trained)).days


def recovery_status(
    workouts: Sequence, muscles: Sequence[str], today: date
) -> List[RecoveryStatus]:
    return [
        RecoveryStatus(muscle=m, days_since=days_since_last_trained(workouts, m, today))
        for m in muscles
    ]


def category_distribution(
    workouts: Sequence, time_range: TimeRange, today: date
) -> List[CategoryCount]:
    counts = Counter(w.category for w in filter_by_range(workouts, time_range, today))
    ordered = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    return [CategoryCount(category=c, count=n) for c, n in ordered]


def _matches_reps(reps: int, selected: int) -> bool:
    if selected == HIGH_REP_BUCKET:
        return reps >= 20
    return reps == selected


def strength_history(
    workouts: Sequence,
    exercise_name: str,
    reps: int,
    unit_system,
    time_range: TimeRange,
    today: date,
) -> List[DailyValue]:
    """Heaviest weight per day lifted for exactly `reps` of one exercise."""
    best: Dict[date, float] = {}
    for workout in filter_by_range(workouts, time_range, today):
        for entry in workout.exercises or []:
            if entry.name != exercise_name or entry.weight is None:
                continue
            if not _matches_reps(entry.reps or 0, reps):
                continue
            converted = to_user_weight(entry.weight, unit_system)
            if converted > best.get(workout.workout_date, 0):
                best[workout.workout_date] = converted
    return [DailyValue(day=d, value=v) for d, v in sorted(best.items())]


def volume_history(
    workouts: Sequence,
    metric: VolumeMetric,
    filter_type: VolumeFilter,
    selection: str,
    unit_system,
    time_range: TimeRange,
    today: date,
) -> List[DailyValue]:
    """Daily training volume for a workout category or a single exercise."""
    totals: Dict[date, float] = defaultdict(float)
    for workout in filter_by_range(workouts, time_range, today):
        if filter_type == VolumeFilter.WORKOUT:
            entries = workout.exercises if workout.category == selection else []
        else:
            entries = [e for e in workout.exercises or [] if e.name == selection]

        for entry in entries or []:
            if metric == VolumeMetric.VOLUME_LOAD:
                weight = to_user_weight(entry.weight or 0.0, unit_system)
                totals[workout.workout_date] += weight * (entry.reps or 0)
            elif metric == VolumeMetric.TOTAL_REPS:
                totals[workout.workout_date] += entry.reps or 0
            else:
                totals[workout.workout_date] += 1

    return [DailyValue(day=d, value=v) for d, v in sorted(totals.items()) if v > 0]


def exercise_names(workouts: Sequence) -> List[str]:
    return sorted({e.name for w in workouts for e in (w.exercises or [])})
