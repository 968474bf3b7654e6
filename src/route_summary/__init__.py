"""
Route Summary
Yearly distance, time and pace statistics from a folder of GPX workout routes.
"""

__version__ = "1.0.0"
__author__ = ""

from route_summary.analyzer import RouteAnalyzer
from route_summary.cli import main

__all__ = ["RouteAnalyzer", "main"]
