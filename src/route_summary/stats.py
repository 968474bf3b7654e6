"""
Secondary statistics derived from a folded YearSummary.

Everything here runs once, after every workout of the year has been folded.
A year without workouts short-circuits to NoWorkouts so that no average or
rate is ever divided by zero.
"""

from __future__ import annotations

import math
from datetime import date
from typing import Iterable, Optional, Tuple, Union

from route_summary.models import (
    BucketRow,
    BucketStats,
    NoWorkouts,
    WorkoutRecord,
    YearStatistics,
    YearSummary,
)


def pace_parts(total_seconds, total_km) -> Optional[Tuple[int, int]]:
    """
    Split a pace into (minutes, seconds) per km.

    Seconds are rounded half up; a rounded value of 60 carries into the
    minutes. Returns None when there is no distance to divide by.
    """
    if total_km <= 0:
        return None
    sec_per_km = float(total_seconds) / total_km
    minutes = int(math.floor(sec_per_km / 60))
    seconds = int(math.floor(sec_per_km % 60 + 0.5))
    if seconds == 60:
        minutes += 1
        seconds = 0
    return minutes, seconds


def pace_min_per_km(total_seconds, total_km) -> Optional[str]:
    """Pace formatted as ``"M:SS /km"``, or None without distance."""
    parts = pace_parts(total_seconds, total_km)
    if parts is None:
        return None
    return f"{parts[0]}:{parts[1]:02d} /km"


def weeks_in_year(year: int) -> int:
    """Number of ISO weeks in a year. Dec 28 always falls in the last one."""
    return date(year, 12, 28).isocalendar()[1]


def longest_by_distance(workouts: Iterable[WorkoutRecord]) -> WorkoutRecord:
    # max() keeps the first of equal items
    return max(workouts, key=lambda w: w.distance_km)


def longest_by_duration(workouts: Iterable[WorkoutRecord]) -> WorkoutRecord:
    return max(workouts, key=lambda w: w.duration_seconds)


def _bucket_row(key, stats: BucketStats) -> BucketRow:
    return BucketRow(key=key, stats=stats, pace=pace_min_per_km(stats.time_seconds, stats.distance_km))


def derive_statistics(summary: YearSummary) -> Union[YearStatistics, NoWorkouts]:
    if summary.workout_days == 0:
        return NoWorkouts(year=summary.year)

    days = summary.workout_days
    weeks = weeks_in_year(summary.year)

    monthly = tuple(
        _bucket_row(key, summary.monthly[key]) for key in sorted(summary.monthly)
    )
    # All seven weekdays are listed, empty ones as zero rows
    weekday = tuple(
        _bucket_row(index, summary.weekday.get(index, BucketStats())) for index in range(7)
    )

    return YearStatistics(
        year=summary.year,
        workout_days=days,
        total_distance_km=summary.total_distance_km,
        total_time_seconds=summary.total_time_seconds,
        avg_distance_km=summary.total_distance_km / days,
        avg_time_seconds=float(summary.total_time_seconds) / days,
        avg_pace=pace_min_per_km(summary.total_time_seconds, summary.total_distance_km),
        longest_distance=longest_by_distance(summary.workouts),
        longest_duration=longest_by_duration(summary.workouts),
        weeks_in_year=weeks,
        avg_workouts_per_week=float(days) / weeks,
        monthly=monthly,
        weekday=weekday,
    )
