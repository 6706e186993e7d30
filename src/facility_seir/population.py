"""Starting population adjustments and day-zero state for the facility SEIR model."""

import numpy as np

from facility_seir.compartments import NUM_AGE_GROUPS
from facility_seir.compartments import NUM_COMPARTMENTS
from facility_seir.compartments import AgeGroup
from facility_seir.compartments import Compartment
from facility_seir.rates import INITIAL_CASE_DISTRIBUTION
from facility_seir.rates import POPULATION_ADJUSTMENT_RATIO
from facility_seir.rates import R_EXPOSED_TO_INFECTIOUS


def adjust_populations(age_group_populations, population_turnover: float) -> np.ndarray:
    """
    Inflate each group's starting population for expected turnover.

    Staff are not subject to turnover and are returned unchanged.

    Parameters:

        age_group_populations (array-like): Starting population for each group, indexed by AgeGroup.
        population_turnover (float): Expected fraction of the population replaced per unit time.

    Returns:

        np.ndarray: Adjusted populations (float64), indexed by AgeGroup.
    """

    populations = np.asarray(age_group_populations, dtype=np.float64)
    adjust_rate = population_turnover * POPULATION_ADJUSTMENT_RATIO

    adjusted = populations + populations * adjust_rate
    adjusted[AgeGroup.STAFF] = populations[AgeGroup.STAFF]

    return adjusted


def initial_state(age_group_populations, age_group_initially_infected) -> np.ndarray:
    """
    Build the day-zero state matrix, one row per group and one column per compartment.

    Each group's cases are spread across the infection-stage compartments by
    INITIAL_CASE_DISTRIBUTION, exposed is seeded at cases * R_EXPOSED_TO_INFECTIOUS,
    and the balance of the group is susceptible.
    """

    populations = np.asarray(age_group_populations, dtype=np.float64)
    cases = np.asarray(age_group_initially_infected, dtype=np.float64)
    assert populations.shape == (NUM_AGE_GROUPS,), f"Expected {NUM_AGE_GROUPS} group populations, got {populations.shape}"
    assert cases.shape == populations.shape, "Initially infected counts must align with group populations"

    state = np.zeros((NUM_AGE_GROUPS, NUM_COMPARTMENTS), dtype=np.float64)

    exposed = cases * R_EXPOSED_TO_INFECTIOUS
    state[:, Compartment.EXPOSED] = exposed
    state[:, Compartment.SUSCEPTIBLE] = populations - cases - exposed
    for compartment, share in INITIAL_CASE_DISTRIBUTION.items():
        state[:, compartment] = cases * share

    return state
