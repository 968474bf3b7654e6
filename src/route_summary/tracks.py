"""
GPX track reading and per-track distance/time accumulation.

Consumer GPS logs are noisy: points arrive without a timestamp, twice with
the same timestamp, or out of order. Such segments are skipped, never
subtracted, and the following segment is still measured from the point
that was skipped.
"""

from __future__ import annotations

import logging
import os
from datetime import date
from typing import Iterable, Iterator, Optional

import gpxpy
import gpxpy.gpx

from route_summary.geo import haversine_distance_m
from route_summary.models import GeoSample, SegmentTotals, WorkoutRecord


logger = logging.getLogger(__name__)


class TrackParseError(ValueError):
    """Raised when a route file cannot be read as a GPX document."""


def iter_gpx_samples(file_path: str) -> Iterator[GeoSample]:
    """
    Yield every track point of a GPX file in document order.

    Points of all tracks and segments are chained together, so the caller
    sees one continuous sequence per file.

    Raises:
        TrackParseError: the file is missing, unreadable or not valid GPX
    """
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            gpx = gpxpy.parse(f)
    except (OSError, UnicodeDecodeError) as e:
        raise TrackParseError(f"Cannot read {file_path}: {e}") from e
    except gpxpy.gpx.GPXException as e:
        raise TrackParseError(f"Invalid GPX in {file_path}: {e}") from e

    for track in gpx.tracks:
        for segment in track.segments:
            for point in segment.points:
                yield GeoSample(
                    latitude=point.latitude,
                    longitude=point.longitude,
                    timestamp=point.time,
                )


def _elapsed_seconds(previous: GeoSample, current: GeoSample) -> Optional[int]:
    """Whole seconds between two samples, or None when either has no usable time."""
    if previous.timestamp is None or current.timestamp is None:
        return None
    try:
        return int((current.timestamp - previous.timestamp).total_seconds())
    except TypeError:
        # naive and aware datetimes mixed in one file
        return None


def accumulate_segments(samples: Iterable[GeoSample]) -> SegmentTotals:
    """
    Sum segment distance (km) and elapsed time (s) over an ordered sample stream.

    A segment counts only when both ends carry a timestamp and the second
    one is strictly later (in whole seconds). The cursor moves forward on
    every sample either way.
    """
    distance_km = 0.0
    duration_seconds = 0
    previous = None

    for index, sample in enumerate(samples):
        if previous is not None:
            elapsed = _elapsed_seconds(previous, sample)
            if elapsed is not None and elapsed > 0:
                distance_m = haversine_distance_m(
                    previous.latitude, previous.longitude,
                    sample.latitude, sample.longitude,
                )
                distance_km += distance_m / 1000.0
                duration_seconds += elapsed
            else:
                logger.debug("Skipped segment ending at point %d (elapsed=%s)", index, elapsed)
        previous = sample

    return SegmentTotals(distance_km=distance_km, duration_seconds=duration_seconds)


def build_workout_record(file_path: str, record_date: date, totals: SegmentTotals) -> WorkoutRecord:
    """Wrap one file's totals into a WorkoutRecord dated by its file name."""
    return WorkoutRecord(
        date=record_date,
        distance_km=totals.distance_km,
        duration_seconds=totals.duration_seconds,
        source=os.path.basename(file_path),
    )
