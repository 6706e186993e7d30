"""Tests for resolving planned releases into daily population changes."""

import unittest
from datetime import date
from datetime import datetime

import numpy as np

from facility_seir.releases import PlannedRelease
from facility_seir.releases import expected_population_changes

TODAY = date(2026, 3, 1)


class TestExpectedPopulationChanges(unittest.TestCase):
    def test_single_release(self):
        changes = expected_population_changes([PlannedRelease(date(2026, 3, 4), 50)], 10, TODAY)
        expected = np.zeros(10)
        expected[3] = -50
        assert np.all(changes == expected), f"Expected {expected}, got {changes}"

    def test_releases_on_same_day_accumulate(self):
        releases = [PlannedRelease(date(2026, 3, 2), 5), {"date": "2026-03-02", "count": 7}]
        changes = expected_population_changes(releases, 5, TODAY)
        assert changes[1] == -12

    def test_incomplete_records_skipped(self):
        releases = [
            PlannedRelease(None, 10),
            PlannedRelease(date(2026, 3, 2), 0),
            PlannedRelease(date(2026, 3, 2), None),
            {"count": 4},
            {"date": "2026-03-03"},
        ]
        changes = expected_population_changes(releases, 5, TODAY)
        assert np.all(changes == 0)

    def test_unparseable_dates_skipped(self):
        releases = [
            {"date": "", "count": 5},
            {"date": "not-a-date", "count": 5},
            PlannedRelease("2026-13-45", 5),
            {"date": "2026-03-04", "count": 50},
        ]
        changes = expected_population_changes(releases, 10, TODAY)
        expected = np.zeros(10)
        expected[3] = -50
        assert np.all(changes == expected), f"Expected {expected}, got {changes}"

    def test_utc_timestamp_date(self):
        changes = expected_population_changes([{"date": "2026-03-03T12:00:00.000Z", "count": 4}], 5, TODAY)
        assert changes[2] == -4

    def test_out_of_horizon_dropped(self):
        releases = [PlannedRelease(date(2026, 3, 11), 10), PlannedRelease(date(2026, 2, 20), 10)]
        changes = expected_population_changes(releases, 10, TODAY)
        assert np.all(changes == 0)
        assert len(changes) == 10

    def test_calendar_day_difference(self):
        # time of day is ignored, only the calendar date matters
        changes = expected_population_changes([PlannedRelease(datetime(2026, 3, 3, 23, 59), 3)], 5, datetime(2026, 3, 1, 0, 1))
        assert changes[2] == -3

    def test_negative_count_adds_population(self):
        changes = expected_population_changes([PlannedRelease(date(2026, 3, 2), -20)], 3, TODAY)
        assert changes[1] == 20

    def test_no_releases(self):
        assert np.all(expected_population_changes(None, 4, TODAY) == 0)
        assert np.all(expected_population_changes([], 4, TODAY) == 0)


if __name__ == "__main__":
    unittest.main()
