"""Tests for projection grid summaries."""

import unittest

import numpy as np
import pytest

from facility_seir.compartments import AgeGroup
from facility_seir.compartments import Compartment
from facility_seir.report import compartment_totals
from facility_seir.report import incarcerated_totals
from facility_seir.report import peak
from facility_seir.report import staff_totals
from facility_seir.report import summary


class TestReport(unittest.TestCase):
    def setUp(self):
        # 10 compartments, 4 days, 9 groups
        self.grid = np.ones((10, 4, 9))
        self.grid[Compartment.INFECTIOUS, :, AgeGroup.STAFF] = [1, 5, 3, 2]
        self.grid[Compartment.FATALITIES, :, AgeGroup.AGE_85] = [0, 1, 2, 4]

    def test_compartment_totals(self):
        totals = compartment_totals(self.grid)
        assert totals.shape == (10, 4)
        assert totals[Compartment.SUSCEPTIBLE, 0] == 9

    def test_split_totals(self):
        incarcerated = incarcerated_totals(self.grid)
        staff = staff_totals(self.grid)
        assert np.all(incarcerated + staff == compartment_totals(self.grid))
        assert np.all(staff[Compartment.INFECTIOUS] == [1, 5, 3, 2])
        assert np.all(incarcerated[Compartment.INFECTIOUS] == 8)

    def test_peak(self):
        assert peak([1, 5, 3, 5]) == (1, 5.0)

    def test_summary(self):
        result = summary(self.grid)
        assert result["staff"]["peak_infectious"] == (1, 5.0)
        assert result["staff"]["peak_hospitalized"] == (0, 3.0)
        assert result["incarcerated"]["fatalities"] == pytest.approx(7 + 4)
        assert result["staff"]["fatalities"] == 1


if __name__ == "__main__":
    unittest.main()
