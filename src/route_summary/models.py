"""
Data models for the route summary engine.

- GeoSample: one track point as read from a GPX file
- WorkoutRecord: one workout (one route file)
- BucketStats: running totals for a month or a weekday
- YearSummary: folded state for one calendar year
- YearStatistics / NoWorkouts: derived results handed to the reporter
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Dict, List, Optional, Tuple


@dataclass(frozen=True)
class GeoSample:
    latitude: float
    longitude: float
    timestamp: Optional[datetime] = None


@dataclass(frozen=True)
class SegmentTotals:
    """Distance and moving time accumulated over one track."""
    distance_km: float = 0.0
    duration_seconds: int = 0


@dataclass(frozen=True)
class WorkoutRecord:
    """Normalized workout record. The date comes from the file name."""
    date: date
    distance_km: float
    duration_seconds: int
    source: str = ''

    @property
    def month_key(self) -> str:
        return f"{self.date.year:04d}-{self.date.month:02d}"

    @property
    def weekday(self) -> int:
        return self.date.weekday()


@dataclass
class BucketStats:
    count: int = 0
    distance_km: float = 0.0
    time_seconds: int = 0

    def add(self, record: WorkoutRecord) -> None:
        self.count += 1
        self.distance_km += record.distance_km
        self.time_seconds += record.duration_seconds


@dataclass
class YearSummary:
    year: int
    workout_days: int = 0
    total_distance_km: float = 0.0
    total_time_seconds: int = 0
    monthly: Dict[str, BucketStats] = field(default_factory=dict)
    weekday: Dict[int, BucketStats] = field(default_factory=dict)
    workouts: List[WorkoutRecord] = field(default_factory=list)


@dataclass(frozen=True)
class BucketRow:
    """One line of the monthly or weekday table."""
    key: object
    stats: BucketStats
    pace: Optional[str]


@dataclass(frozen=True)
class NoWorkouts:
    year: int


@dataclass(frozen=True)
class YearStatistics:
    year: int
    workout_days: int
    total_distance_km: float
    total_time_seconds: int
    avg_distance_km: float
    avg_time_seconds: float
    avg_pace: Optional[str]
    longest_distance: WorkoutRecord
    longest_duration: WorkoutRecord
    weeks_in_year: int
    avg_workouts_per_week: float
    monthly: Tuple[BucketRow, ...] = ()
    weekday: Tuple[BucketRow, ...] = ()
