"""Summaries of a projection grid ([compartment, day, group]) for reporting."""

from typing import Iterable
from typing import Optional
from typing import Tuple

import numpy as np

from facility_seir.compartments import INCARCERATED_GROUPS
from facility_seir.compartments import AgeGroup
from facility_seir.compartments import Compartment


def compartment_totals(projection_grid: np.ndarray, groups: Optional[Iterable[AgeGroup]] = None) -> np.ndarray:
    """
    Sum the projection over groups.

    Parameters:

        projection_grid (np.ndarray): Projection indexed by [compartment, day, group].
        groups (Iterable[AgeGroup], optional): Groups to include, default is all groups.

    Returns:

        np.ndarray: Totals indexed by [compartment, day].
    """

    if groups is None:
        return projection_grid.sum(axis=2)
    return projection_grid[:, :, list(groups)].sum(axis=2)


def incarcerated_totals(projection_grid: np.ndarray) -> np.ndarray:
    return compartment_totals(projection_grid, INCARCERATED_GROUPS)


def staff_totals(projection_grid: np.ndarray) -> np.ndarray:
    return compartment_totals(projection_grid, [AgeGroup.STAFF])


def peak(series) -> Tuple[int, float]:
    """Return (day, value) of the maximum of a daily series, the first day wins ties."""
    series = np.asarray(series)
    day = int(np.argmax(series))
    return day, float(series[day])


def summary(projection_grid: np.ndarray) -> dict:
    """Headline numbers for the incarcerated population and for staff."""

    result = {}
    for name, totals in (("incarcerated", incarcerated_totals(projection_grid)), ("staff", staff_totals(projection_grid))):
        # hospital load includes ICU and post-ICU recovery beds
        hospital = totals[Compartment.HOSPITALIZED] + totals[Compartment.ICU] + totals[Compartment.HOSPITAL_RECOVERY]
        result[name] = {
            "peak_infectious": peak(totals[Compartment.INFECTIOUS]),
            "peak_hospitalized": peak(hospital),
            "peak_icu": peak(totals[Compartment.ICU]),
            "fatalities": float(totals[Compartment.FATALITIES, -1]),
        }

    return result
