"""Route file discovery and file-name date parsing."""

from __future__ import annotations

import glob
import logging
import os
import re
from datetime import date
from typing import Iterable, List, Optional, Tuple

from route_summary.constants import ROUTE_FILE_GLOB, ROUTE_FILE_PATTERN


logger = logging.getLogger(__name__)

_ROUTE_NAME_RE = re.compile(ROUTE_FILE_PATTERN)


def parse_route_date(file_name: str) -> Optional[date]:
    """
    Return the workout date encoded in a route file name.

    Returns None when the name does not follow
    ``route_YYYY-MM-DD_H.MMam.gpx`` or names an impossible date.
    """
    match = _ROUTE_NAME_RE.search(os.path.basename(file_name))
    if not match:
        return None
    try:
        return date(int(match.group(1)), int(match.group(2)), int(match.group(3)))
    except ValueError:
        return None


def scan_route_files(directory: str) -> List[str]:
    """List ``route_*.gpx`` files directly inside a directory, sorted by name."""
    pattern = os.path.join(glob.escape(directory), ROUTE_FILE_GLOB)
    return sorted(glob.glob(pattern))


def select_year(paths: Iterable[str], year: int) -> List[Tuple[str, date]]:
    """Keep the files whose name parses to a date in the given year."""
    selected = []
    for path in paths:
        record_date = parse_route_date(path)
        if record_date is None:
            logger.debug("Ignoring %s: name does not match route pattern", path)
            continue
        if record_date.year != year:
            continue
        selected.append((path, record_date))
    return selected
