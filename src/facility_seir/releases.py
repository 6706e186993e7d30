"""Resolve planned releases (scheduled population reductions) into per-day population changes."""

from collections import namedtuple
from datetime import date
from typing import Iterable
from typing import Optional

import numpy as np

from facility_seir.utils import as_date

PlannedRelease = namedtuple("PlannedRelease", ["date", "count"])


def release_date(value) -> Optional[date]:
    """Calendar date of a release, None when the date is missing or cannot be parsed."""
    try:
        return as_date(value)
    except ValueError:
        return None


def _fields(release):
    if isinstance(release, dict):
        return release.get("date"), release.get("count")
    return release.date, release.count


def expected_population_changes(planned_releases: Optional[Iterable], num_days: int, today: date) -> np.ndarray:
    """
    Index expected population adjustments by simulated day.

    Each release is placed at the calendar-day difference between its date and ``today``.
    A release of ``count`` people contributes ``-count`` to that day, multiple releases on
    the same day accumulate.

    Incomplete records (no date, an unparseable date, or a zero/missing count) are skipped,
    as are releases that fall before ``today`` or beyond the simulation horizon.

    Parameters:

        planned_releases (Iterable, optional): PlannedRelease records or dicts with "date" and "count".
        num_days (int): Number of simulated days, including day zero.
        today (date): Reference date corresponding to day zero.

    Returns:

        np.ndarray: Signed population change for each day (float64, length num_days).
    """

    changes = np.zeros(num_days, dtype=np.float64)
    today = as_date(today)

    for release in planned_releases or []:
        when, count = _fields(release)
        when = release_date(when)
        # skip incomplete or malformed records
        if not count or when is None:
            continue
        offset = (when - today).days
        if 0 <= offset < num_days:
            changes[offset] -= count

    return changes
