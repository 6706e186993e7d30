"""Tests for the single group, single day transition."""

import unittest

import numpy as np
import pytest

from facility_seir.compartments import Compartment
from facility_seir.rates import R_EXPOSED_TO_INFECTIOUS
from facility_seir.seir import simulate_one_day
from facility_seir.seir import simulate_one_day_inner


def susceptible_only(count):
    prior = np.zeros(len(Compartment))
    prior[Compartment.SUSCEPTIBLE] = count
    return prior


class TestSimulateOneDay(unittest.TestCase):
    def setUp(self):
        self.kwargs = {
            "fatality_rate": 0.026,
            "rate_of_spread_cells": 3.0,
            "rate_of_spread_dorms": 5.0,
            "facility_dormitory_pct": 0.5,
            "total_infectious": 10.0,
            "total_population": 1000.0,
            "total_susceptible_incarcerated": 500.0,
        }

    def test_staff_exposure_ignores_housing(self):
        result = simulate_one_day(susceptible_only(100), simulate_staff=True, population_adjustment=-50, **self.kwargs)
        exposures = 3.0 / 5.1 * 10 * 100 / 1000
        assert result[Compartment.SUSCEPTIBLE] == pytest.approx(100 - exposures)
        assert result[Compartment.EXPOSED] == pytest.approx(exposures)

    def test_staff_ignores_dormitory_pct(self):
        prior = susceptible_only(100)
        prior[Compartment.INFECTIOUS] = 4
        low = simulate_one_day(prior, simulate_staff=True, **(self.kwargs | {"facility_dormitory_pct": 0.1}))
        high = simulate_one_day(prior, simulate_staff=True, **(self.kwargs | {"facility_dormitory_pct": 0.9}))
        assert np.all(low == high)

    def test_incarcerated_exposure_weights_housing(self):
        result = simulate_one_day(susceptible_only(100), simulate_staff=False, **self.kwargs)
        exposures = 0.5 * (3.0 / 5.1) * 10 * 100 / 1000 + 0.5 * (5.0 / 5.1) * 10 * 100 / 1000
        assert result[Compartment.SUSCEPTIBLE] == pytest.approx(100 - exposures)
        assert result[Compartment.EXPOSED] == pytest.approx(exposures)

    def test_population_adjustment_is_proportional(self):
        # this group holds 100 of 500 incarcerated susceptibles so receives 1/5 of a -50 adjustment
        result = simulate_one_day(susceptible_only(100), simulate_staff=False, population_adjustment=-50, **self.kwargs)
        susceptible = 90.0
        exposures = 0.5 * (3.0 / 5.1) * 10 * susceptible / 1000 + 0.5 * (5.0 / 5.1) * 10 * susceptible / 1000
        assert result[Compartment.SUSCEPTIBLE] == pytest.approx(susceptible - exposures)

    def test_population_adjustment_with_empty_pool(self):
        kwargs = self.kwargs | {"total_susceptible_incarcerated": 0.0, "total_infectious": 0.0}
        result = simulate_one_day(susceptible_only(100), simulate_staff=False, population_adjustment=-50, **kwargs)
        assert result[Compartment.SUSCEPTIBLE] == 100

    def test_non_finite_exposures_become_zero(self):
        # known quirk: a zero total population hides the division by zero and projects no new exposures
        prior = susceptible_only(100)
        prior[Compartment.INFECTIOUS] = 10
        for total_infectious in (0.0, 10.0):
            kwargs = self.kwargs | {"total_population": 0.0, "total_infectious": total_infectious}
            result = simulate_one_day(prior, simulate_staff=False, **kwargs)
            assert result[Compartment.SUSCEPTIBLE] == 100
            assert np.all(np.isfinite(result))

    def test_non_finite_exposures_are_flagged(self):
        _, nonfinite = simulate_one_day_inner(susceptible_only(100), 0.026, True, 3.0, 5.0, 0.5, 10.0, 0.0, 100.0, 0.0)
        assert nonfinite
        _, nonfinite = simulate_one_day_inner(susceptible_only(100), 0.026, True, 3.0, 5.0, 0.5, 10.0, 1000.0, 100.0, 0.0)
        assert not nonfinite

    def test_susceptible_clamped_at_zero(self):
        kwargs = self.kwargs | {"rate_of_spread_cells": 3.7, "total_infectious": 2000.0}
        result = simulate_one_day(susceptible_only(1), simulate_staff=True, **kwargs)
        assert result[Compartment.SUSCEPTIBLE] == 0
        assert result[Compartment.EXPOSED] == pytest.approx(3.7 / 5.1 * 2)

    def test_mass_conservation(self):
        prior = np.array([500, 20, 30, 10, 5, 2, 1, 0.5, 3, 4], dtype=np.float64)
        for simulate_staff in (False, True):
            result = simulate_one_day(prior, simulate_staff=simulate_staff, **self.kwargs)
            assert result.sum() == pytest.approx(prior.sum())
            assert np.all(result >= 0)

    def test_progression_without_exposure(self):
        prior = np.zeros(len(Compartment))
        prior[Compartment.EXPOSED] = 10
        kwargs = self.kwargs | {"total_infectious": 0.0}
        result = simulate_one_day(prior, simulate_staff=False, **kwargs)
        assert result[Compartment.EXPOSED] == pytest.approx(10 * (1 - R_EXPOSED_TO_INFECTIOUS))
        assert result[Compartment.INFECTIOUS] == pytest.approx(10 * R_EXPOSED_TO_INFECTIOUS)

    def test_fatalities_depend_on_fatality_rate(self):
        prior = np.zeros(len(Compartment))
        prior[Compartment.HOSPITALIZED] = 100
        none = simulate_one_day(prior, simulate_staff=False, **(self.kwargs | {"fatality_rate": 0.0}))
        some = simulate_one_day(prior, simulate_staff=False, **(self.kwargs | {"fatality_rate": 0.1885}))
        assert none[Compartment.FATALITIES] == 0
        assert some[Compartment.FATALITIES] == pytest.approx(100 * 0.1885 / 8.3)
        assert some[Compartment.RECOVERED_HOSPITALIZED] == pytest.approx(100 * (1 - 0.1885 - 0.3) / 22)


if __name__ == "__main__":
    unittest.main()
