"""
Folding workout records into yearly, monthly and weekday totals.

Weekday buckets use ``date.weekday()``: Monday=0 .. Sunday=6.
"""

from __future__ import annotations

from typing import Dict, Hashable, Iterable

from route_summary.models import BucketStats, WorkoutRecord, YearSummary


def get_or_create_bucket(buckets: Dict[Hashable, BucketStats], key) -> BucketStats:
    """Return the bucket for key, inserting a zeroed one on first use."""
    bucket = buckets.get(key)
    if bucket is None:
        bucket = BucketStats()
        buckets[key] = bucket
    return bucket


def fold(summary: YearSummary, record: WorkoutRecord) -> YearSummary:
    """Add one workout to the running summary and return it."""
    summary.workout_days += 1
    summary.total_distance_km += record.distance_km
    summary.total_time_seconds += record.duration_seconds

    get_or_create_bucket(summary.monthly, record.month_key).add(record)
    get_or_create_bucket(summary.weekday, record.weekday).add(record)

    summary.workouts.append(record)
    return summary


def aggregate(year: int, records: Iterable[WorkoutRecord]) -> YearSummary:
    summary = YearSummary(year=year)
    for record in records:
        fold(summary, record)
    return summary
