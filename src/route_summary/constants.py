"""Shared constants for route file discovery and reporting."""

from __future__ import annotations

from typing import Tuple

EARTH_RADIUS_KM = 6371.0

DEFAULT_ROUTES_DIR = 'workout-routes'

# Apple Health style export names: route_2023-01-05_7.32am.gpx
ROUTE_FILE_GLOB = 'route_*.gpx'
ROUTE_FILE_PATTERN = r'route_(\d{4})-(\d{2})-(\d{2})_\d{1,2}\.\d{2}(am|pm)\.gpx$'

# Indexed by date.weekday(): Monday=0 .. Sunday=6
WEEKDAY_NAMES: Tuple[str, ...] = (
    'Mon',
    'Tue',
    'Wed',
    'Thu',
    'Fri',
    'Sat',
    'Sun',
)

CSV_EXPORT_COLUMNS: Tuple[str, ...] = (
    'date',
    'filename',
    'weekday',
    'month',
    'distance_km',
    'duration_seconds',
    'pace',
)
