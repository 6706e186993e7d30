"""
Single group, single day state transition for the facility SEIR model.

The kernel is compiled with Numba. We use ``error_model="numpy"`` so a zero total
population yields a non-finite exposure count (which is then replaced with 0) rather
than raising ZeroDivisionError inside compiled code.
"""

import math

import numba as nb
import numpy as np

from facility_seir.compartments import NUM_COMPARTMENTS
from facility_seir.compartments import Compartment
from facility_seir.rates import D_HOSPITALIZED
from facility_seir.rates import D_HOSPITALIZED_FATALITY
from facility_seir.rates import D_INFECTIOUS
from facility_seir.rates import P_ICU
from facility_seir.rates import R_EXPOSED_TO_INFECTIOUS
from facility_seir.rates import R_HOSPITAL_RECOVERY_TO_RECOVERED
from facility_seir.rates import R_HOSPITALIZED_TO_ICU
from facility_seir.rates import R_ICU_TO_FATALITY
from facility_seir.rates import R_ICU_TO_HOSPITAL_RECOVERY
from facility_seir.rates import R_INFECTIOUS_TO_QUARANTINED
from facility_seir.rates import R_INFECTIOUS_TO_RECOVERED
from facility_seir.rates import R_QUARANTINED_TO_HOSPITALIZED
from facility_seir.rates import R_QUARANTINED_TO_RECOVERED

# Numba freezes module level ints, IntEnum members are converted here
_S = int(Compartment.SUSCEPTIBLE)
_E = int(Compartment.EXPOSED)
_I = int(Compartment.INFECTIOUS)
_Q = int(Compartment.QUARANTINED)
_H = int(Compartment.HOSPITALIZED)
_ICU = int(Compartment.ICU)
_HR = int(Compartment.HOSPITAL_RECOVERY)
_F = int(Compartment.FATALITIES)
_RM = int(Compartment.RECOVERED_MILD)
_RH = int(Compartment.RECOVERED_HOSPITALIZED)
_NCOMPARTMENTS = NUM_COMPARTMENTS


@nb.njit(nogil=True, cache=True, error_model="numpy")
def simulate_one_day_inner(
    prior,
    fatality_rate,
    simulate_staff,
    rate_of_spread_cells,
    rate_of_spread_dorms,
    facility_dormitory_pct,
    total_infectious,
    total_population,
    total_susceptible_incarcerated,
    population_adjustment,
):
    """Return (next day compartment values, True if the exposure count was non-finite and replaced with 0)."""

    # aka beta
    r_susceptible_to_exposed_cells = rate_of_spread_cells / D_INFECTIOUS
    r_susceptible_to_exposed_dorms = rate_of_spread_dorms / D_INFECTIOUS

    # these depend on the non-ICU fatality rate for this group
    r_hospitalized_to_fatality = fatality_rate * (1 / D_HOSPITALIZED_FATALITY)
    p_hospital_recovery = 1 - fatality_rate - P_ICU
    r_hospitalized_to_recovered = p_hospital_recovery * (1 / D_HOSPITALIZED)

    facility_cells_pct = 1 - facility_dormitory_pct

    susceptible = prior[_S]
    exposed = prior[_E]
    infectious = prior[_I]
    quarantined = prior[_Q]
    hospitalized = prior[_H]
    icu = prior[_ICU]
    hospital_recovery = prior[_HR]

    if simulate_staff:
        # facility housing type is assumed to have a negligible effect on staff, cells R0 is the baseline
        new_exposures = r_susceptible_to_exposed_cells * total_infectious * susceptible / total_population
    else:
        # population adjustments apply to the incarcerated only, in proportion to their share of susceptibles
        if total_susceptible_incarcerated != 0:
            susceptible += population_adjustment * (susceptible / total_susceptible_incarcerated)
        new_exposures = (
            facility_cells_pct * r_susceptible_to_exposed_cells * total_infectious * susceptible / total_population
            + facility_dormitory_pct * r_susceptible_to_exposed_dorms * total_infectious * susceptible / total_population
        )

    nonfinite = not math.isfinite(new_exposures)
    if nonfinite:
        new_exposures = 0.0

    delta = np.zeros(_NCOMPARTMENTS, dtype=np.float64)
    delta[_S] = -new_exposures
    delta[_E] = new_exposures - R_EXPOSED_TO_INFECTIOUS * exposed
    delta[_I] = R_EXPOSED_TO_INFECTIOUS * exposed - (R_INFECTIOUS_TO_QUARANTINED + R_INFECTIOUS_TO_RECOVERED) * infectious
    delta[_Q] = R_INFECTIOUS_TO_QUARANTINED * infectious - (R_QUARANTINED_TO_HOSPITALIZED + R_QUARANTINED_TO_RECOVERED) * quarantined
    delta[_H] = (
        R_QUARANTINED_TO_HOSPITALIZED * quarantined
        - (R_HOSPITALIZED_TO_ICU + r_hospitalized_to_recovered) * hospitalized
        - r_hospitalized_to_fatality * hospitalized
    )
    delta[_ICU] = R_HOSPITALIZED_TO_ICU * hospitalized - R_ICU_TO_FATALITY * icu - R_ICU_TO_HOSPITAL_RECOVERY * icu
    delta[_HR] = R_ICU_TO_HOSPITAL_RECOVERY * icu - R_HOSPITAL_RECOVERY_TO_RECOVERED * hospital_recovery
    delta[_F] = R_ICU_TO_FATALITY * icu + r_hospitalized_to_fatality * hospitalized
    delta[_RM] = R_INFECTIOUS_TO_RECOVERED * infectious + R_QUARANTINED_TO_RECOVERED * quarantined
    delta[_RH] = r_hospitalized_to_recovered * hospitalized + R_HOSPITAL_RECOVERY_TO_RECOVERED * hospital_recovery

    next_day = np.empty(_NCOMPARTMENTS, dtype=np.float64)
    for c in range(_NCOMPARTMENTS):
        next_day[c] = prior[c] + delta[c]
    # the susceptible pool may have been adjusted above, and is the only compartment that can overshoot zero
    next_day[_S] = max(susceptible + delta[_S], 0.0)

    return next_day, nonfinite


def simulate_one_day(
    prior,
    fatality_rate: float,
    simulate_staff: bool,
    rate_of_spread_cells: float,
    rate_of_spread_dorms: float,
    facility_dormitory_pct: float,
    total_infectious: float,
    total_population: float,
    total_susceptible_incarcerated: float,
    population_adjustment: float = 0.0,
) -> np.ndarray:
    """
    Advance one group's compartment values by one day.

    Parameters:

        prior (array-like): The group's compartment values for the prior day, indexed by Compartment.
        fatality_rate (float): Fraction of the group's hospitalized cases who die.
        simulate_staff (bool): True for the staff group, which ignores housing type and population adjustments.
        rate_of_spread_cells (float): Occupancy adjusted R0 for cells.
        rate_of_spread_dorms (float): Occupancy adjusted R0 for dormitories.
        facility_dormitory_pct (float): Fraction of the incarcerated population housed in dormitories.
        total_infectious (float): Infectious count across all groups on the prior day.
        total_population (float): Total facility population on the prior day.
        total_susceptible_incarcerated (float): Susceptible count across all non-staff groups on the prior day.
        population_adjustment (float): Signed population change for the whole incarcerated population today.

    Returns:

        np.ndarray: The group's compartment values for the next day.
    """

    next_day, _nonfinite = simulate_one_day_inner(
        np.asarray(prior, dtype=np.float64),
        float(fatality_rate),
        bool(simulate_staff),
        float(rate_of_spread_cells),
        float(rate_of_spread_dorms),
        float(facility_dormitory_pct),
        float(total_infectious),
        float(total_population),
        float(total_susceptible_incarcerated),
        float(population_adjustment),
    )

    return next_day
