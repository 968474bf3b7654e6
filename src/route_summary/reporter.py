"""
Reporting and output functions.

This module handles all display and export operations:
- Rendering the yearly text report
- Building a per-workout DataFrame
- Saving that DataFrame to CSV
"""

from __future__ import annotations

import os
from typing import Iterable, List, Union

import pandas as pd

from route_summary.constants import CSV_EXPORT_COLUMNS, WEEKDAY_NAMES
from route_summary.models import NoWorkouts, WorkoutRecord, YearStatistics
from route_summary.stats import pace_min_per_km


def seconds_to_hms(total_seconds) -> str:
    total_seconds = int(total_seconds)
    h = total_seconds // 3600
    m = (total_seconds % 3600) // 60
    s = total_seconds % 60
    return f"{h:02d}:{m:02d}:{s:02d}"


def _hours(seconds) -> float:
    return seconds / 3600.0


def render_report(result: Union[YearStatistics, NoWorkouts], folder_path: str = '') -> List[str]:
    """Render derived statistics as report lines."""
    if isinstance(result, NoWorkouts):
        line = f"No workouts found for year {result.year}."
        if folder_path:
            line += f" Check file names and directory '{folder_path}'."
        return [line]

    r = result
    lines = [
        f"\nResults for the year {r.year}:",
        f"Workout days: {r.workout_days}",
        f"Total distance: {r.total_distance_km:.2f} km",
        f"Total time: {_hours(r.total_time_seconds):.2f} hours ({seconds_to_hms(r.total_time_seconds)})",
        "",
        "(1) Average per workout:",
        f"  Distance: {r.avg_distance_km:.2f} km",
        f"  Time: {_hours(r.avg_time_seconds):.2f} hours ({seconds_to_hms(r.avg_time_seconds)})",
        f"  Pace: {r.avg_pace or 'N/A'}",
        "",
        "(2) Longest workouts:",
        f"  Distance: {r.longest_distance.distance_km:.2f} km ({r.longest_distance.date.isoformat()})",
        (
            f"  Time: {_hours(r.longest_duration.duration_seconds):.2f} hours "
            f"({seconds_to_hms(r.longest_duration.duration_seconds)}) "
            f"({r.longest_duration.date.isoformat()})"
        ),
        "",
        "(3) Monthly summary:",
        "  Month   Count   Dist(km)   Time(h)   Pace",
    ]
    for row in r.monthly:
        s = row.stats
        lines.append(
            f"  {row.key:<7} {s.count:4d} {s.distance_km:10.2f} {_hours(s.time_seconds):8.2f}   {row.pace or 'N/A'}"
        )

    lines.append("")
    lines.append("(4) Weekday summary:")
    lines.append("  Day   Count   Dist(km)   Time(h)")
    for row in r.weekday:
        s = row.stats
        lines.append(
            f"  {WEEKDAY_NAMES[row.key]:<3} {s.count:6d} {s.distance_km:10.2f} {_hours(s.time_seconds):8.2f}"
        )

    lines.append("")
    lines.append(
        f"  Average per week: {r.avg_workouts_per_week:.2f} workouts/week "
        f"(ISO weeks: {r.weeks_in_year})"
    )
    return lines


def workouts_dataframe(workouts: Iterable[WorkoutRecord]) -> pd.DataFrame:
    """One row per workout, in processing order."""
    rows = [
        {
            'date': w.date.isoformat(),
            'filename': w.source,
            'weekday': WEEKDAY_NAMES[w.weekday],
            'month': w.month_key,
            'distance_km': round(w.distance_km, 3),
            'duration_seconds': w.duration_seconds,
            'pace': pace_min_per_km(w.duration_seconds, w.distance_km) or '',
        }
        for w in workouts
    ]
    return pd.DataFrame(rows, columns=list(CSV_EXPORT_COLUMNS))


def export_csv(workouts: Iterable[WorkoutRecord], destination_dir: str, year: int) -> str:
    """Write the workout table to CSV and return the saved file path."""
    df = workouts_dataframe(workouts)
    os.makedirs(destination_dir, exist_ok=True)
    file_path = os.path.join(destination_dir, f"route_summary_{year}.csv")
    df.to_csv(file_path, index=False)
    return file_path
