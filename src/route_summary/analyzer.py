"""
Route Summary - Core Analysis Engine
Walks a routes folder, measures each GPX track and folds the year's workouts.
"""

import logging
import os
from datetime import date
from typing import Optional

from route_summary.aggregator import fold
from route_summary.constants import ROUTE_FILE_GLOB
from route_summary.discovery import scan_route_files, select_year
from route_summary.models import WorkoutRecord, YearSummary
from route_summary.tracks import (
    TrackParseError,
    accumulate_segments,
    build_workout_record,
    iter_gpx_samples,
)


logger = logging.getLogger(__name__)


class RouteAnalyzer:
    """Builds a YearSummary from a folder of route_*.gpx files."""

    def __init__(self, output_callback=None):
        """
        Initialize analyzer.

        Args:
            output_callback: Optional function to call with output lines
        """
        self.output_callback = output_callback or self._default_output

    def _default_output(self, text: str):
        print(text)

    def _emit(self, text: str):
        self.output_callback(text)

    def analyze_file(self, filename: str, record_date: date) -> Optional[WorkoutRecord]:
        """
        Measure a single route file.

        Args:
            filename: Path to GPX file
            record_date: Workout date taken from the file name

        Returns:
            WorkoutRecord, or None if the file could not be parsed
        """
        try:
            totals = accumulate_segments(iter_gpx_samples(filename))
        except TrackParseError as e:
            logger.warning("Skipping %s: %s", filename, e)
            self._emit(f"⚠️ Skipped unreadable route: {os.path.basename(filename)}")
            return None

        logger.debug(
            "%s: %.3f km in %d s",
            os.path.basename(filename), totals.distance_km, totals.duration_seconds,
        )
        return build_workout_record(filename, record_date, totals)

    def analyze_folder(self, folder_path: str, year: int) -> YearSummary:
        """
        Analyze every route file of one year in a folder.

        Args:
            folder_path: Directory holding route_*.gpx files
            year: Calendar year to keep

        Returns:
            Folded YearSummary (possibly without workouts)

        Raises:
            ValueError: folder_path is not a directory
        """
        if not os.path.isdir(folder_path):
            raise ValueError(f"Directory '{folder_path}' does not exist.")

        summary = YearSummary(year=year)

        files = scan_route_files(folder_path)
        if not files:
            pattern = os.path.join(folder_path, ROUTE_FILE_GLOB)
            self._emit(f"Warning: No GPX files found in '{folder_path}' (pattern: {pattern})")
            return summary

        selected = select_year(files, year)
        logger.info("Found %d route file(s), %d in %d", len(files), len(selected), year)

        for filepath, record_date in selected:
            record = self.analyze_file(filepath, record_date)
            if record is not None:
                fold(summary, record)

        return summary
