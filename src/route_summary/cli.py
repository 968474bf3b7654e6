"""
Route Summary - Command Line Interface
Summarize one year of route_*.gpx workouts from the terminal.
"""

import argparse
import logging
import os
import sys

from route_summary.analyzer import RouteAnalyzer
from route_summary.constants import DEFAULT_ROUTES_DIR
from route_summary.models import NoWorkouts
from route_summary.reporter import export_csv, render_report
from route_summary.stats import derive_statistics


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="route-summary",
        description="Yearly distance/time summary of GPX workout routes.",
    )
    parser.add_argument("-y", "--year", type=int, default=None,
                        help="Specify the year to filter records")
    parser.add_argument("-d", "--dir", dest="folder", default=DEFAULT_ROUTES_DIR,
                        help=f"Directory holding route_*.gpx files (default: {DEFAULT_ROUTES_DIR})")
    parser.add_argument("--csv", dest="csv_dir", default=None,
                        help="Also write the per-workout table as CSV into this directory")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Trace per-file and per-segment processing")
    return parser


def main(argv=None):
    """CLI entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.year is None:
        print("Error: Please specify a year using the -y or --year option.", file=sys.stderr)
        sys.exit(1)

    if not os.path.isdir(args.folder):
        print(f"Error: Directory '{args.folder}' does not exist.", file=sys.stderr)
        sys.exit(1)

    analyzer = RouteAnalyzer()
    summary = analyzer.analyze_folder(args.folder, args.year)
    result = derive_statistics(summary)

    for line in render_report(result, args.folder):
        print(line)

    if args.csv_dir and not isinstance(result, NoWorkouts):
        path = export_csv(summary.workouts, args.csv_dir, args.year)
        print(f"\nSaved workout table to {path}")


if __name__ == "__main__":
    main()
