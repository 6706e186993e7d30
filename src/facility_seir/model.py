"""Facility SEIR projection driver: advances every age/role group through the requested horizon."""

import json
from collections import namedtuple
from datetime import date
from datetime import datetime
from datetime import timezone
from pathlib import Path
from typing import Optional
from typing import Tuple

import click
import numpy as np
from tqdm import tqdm

from facility_seir.compartments import INCARCERATED_GROUPS
from facility_seir.compartments import NUM_AGE_GROUPS
from facility_seir.compartments import NUM_COMPARTMENTS
from facility_seir.compartments import AgeGroup
from facility_seir.compartments import Compartment
from facility_seir.parameters import ProjectionParameters
from facility_seir.population import adjust_populations
from facility_seir.population import initial_state
from facility_seir.rates import AGE_GROUP_FATALITY_RATES
from facility_seir.releases import expected_population_changes
from facility_seir.seir import simulate_one_day_inner
from facility_seir.transmission import adjusted_rates_of_spread
from facility_seir.utils import NumpyJSONEncoder

CurveProjection = namedtuple("CurveProjection", ["total_population_by_day", "projection_grid", "expected_population_changes"])


class DiseaseModel:
    """Base class for day-stepped projection models."""

    def __init__(self):
        self._day = 0
        return

    def initialize(self) -> None:
        raise NotImplementedError

    def step(self, day: int) -> None:
        raise NotImplementedError

    def finalize(self, directory: Path) -> None:
        raise NotImplementedError

    def run(self, days: int, progress: bool = False) -> None:
        for _ in tqdm(range(days), disable=not progress):
            self.step(self._day + 1)
            self._day += 1
        return


class FacilitySEIR(DiseaseModel):
    """Deterministic, age/role group stratified SEIR projection for a single facility."""

    INITIALIZING = "initializing"
    SIMULATING = "simulating"
    COMPLETE = "complete"

    def __init__(self, parameters=None):
        super().__init__()
        self.parameters = ProjectionParameters(parameters) if parameters is not None else ProjectionParameters()
        self.status = self.INITIALIZING

        self.rate_of_spread_cells = None
        self.rate_of_spread_dorms = None
        self.populations = None
        self.state = None
        self.projection_grid = None
        self.total_population_by_day = None
        self.expected_population_changes = None
        self.nonfinite_exposures = []

        return

    @property
    def num_days(self) -> int:
        return int(self.parameters.num_days)

    def echo(self, message: str, err: bool = False) -> None:
        if self.parameters.verbose:
            click.echo(message, err=err)
        return

    def initialize(self) -> None:
        """
        Prepare day zero.

        Rates of spread and turnover adjusted populations are computed once here. Planned
        releases are resolved against ``parameters.today``, or the current date if unset.
        """

        p = self.parameters
        num_days = self.num_days

        # calculate R0 adjusted for housing type and occupancy
        self.rate_of_spread_cells, self.rate_of_spread_dorms = adjusted_rates_of_spread(p.rate_of_spread_factor, p.facility_occupancy_pct)

        # adjust population figures based on expected turnover
        self.populations = adjust_populations(p.age_group_populations, p.population_turnover)

        self.total_population_by_day = np.zeros(num_days, dtype=np.float64)
        self.total_population_by_day[0] = self.populations.sum()

        # rows are groups, columns are compartments
        self.state = initial_state(self.populations, p.age_group_initially_infected)

        today = p.today if p.today is not None else date.today()
        self.expected_population_changes = expected_population_changes(p.planned_releases, num_days, today)

        # [compartment, day, group]
        self.projection_grid = np.zeros((NUM_COMPARTMENTS, num_days, NUM_AGE_GROUPS), dtype=np.float64)
        self.projection_grid[:, 0, :] = self.state.T

        self._day = 0
        self.nonfinite_exposures = []
        self.status = self.SIMULATING if num_days > 1 else self.COMPLETE

        self.echo(
            f"Initialized {num_days} day projection: population {self.total_population_by_day[0]:,.1f}, "
            f"R0 cells {self.rate_of_spread_cells:.3f}, R0 dorms {self.rate_of_spread_dorms:.3f}"
        )

        return

    def step(self, day: int) -> None:
        """Simulate ``day`` from the finalized state of ``day - 1``."""

        assert self.status == self.SIMULATING, f"Cannot step a model which is {self.status}"
        assert day == self._day + 1, f"Days must be simulated in order (expected {self._day + 1}, got {day})"

        prior = self.state
        # every group's projection needs the prior day's totals
        total_infectious = prior[:, Compartment.INFECTIOUS].sum()
        total_susceptible_incarcerated = prior[INCARCERATED_GROUPS, Compartment.SUSCEPTIBLE].sum()
        # prior day's total population goes along with prior day's state
        total_population = self.total_population_by_day[day - 1]
        population_adjustment = self.expected_population_changes[day]

        current = np.empty_like(prior)
        for group in AgeGroup:
            current[group], nonfinite = simulate_one_day_inner(
                prior[group],
                AGE_GROUP_FATALITY_RATES[group],
                group == AgeGroup.STAFF,
                self.rate_of_spread_cells,
                self.rate_of_spread_dorms,
                float(self.parameters.facility_dormitory_pct),
                total_infectious,
                total_population,
                total_susceptible_incarcerated,
                population_adjustment,
            )
            if nonfinite:
                self.nonfinite_exposures.append((day, group))
                self.echo(f"WARNING: non-finite exposures for {group.name} on day {day} (total population {total_population}), using 0", err=True)

        self.state = current
        self.projection_grid[:, day, :] = current.T

        # the next day depends on today's adjusted total
        self.total_population_by_day[day] = total_population + population_adjustment

        if day == self.num_days - 1:
            self.status = self.COMPLETE

        return

    def run(self, days: Optional[int] = None, progress: bool = False) -> CurveProjection:
        """Initialize if necessary and simulate days 1 .. num_days-1 (or the next ``days`` days)."""

        if self.status == self.INITIALIZING:
            self.initialize()
        remaining = self.num_days - 1 - self._day
        days = remaining if days is None else min(days, remaining)
        start = datetime.now(timezone.utc)
        super().run(days, progress=progress)
        self.echo(f"elapsed time: {datetime.now(timezone.utc) - start}")

        return self.results

    @property
    def results(self) -> CurveProjection:
        return CurveProjection(self.total_population_by_day, self.projection_grid, self.expected_population_changes)

    def finalize(self, directory: Path, prefix: Optional[str] = None) -> Tuple[Path, Path, Path]:
        """Write parameters (JSON), the projection grid (.npy), and daily population (CSV) to ``directory``."""

        directory = Path(directory)
        directory.mkdir(parents=True, exist_ok=True)
        prefix = prefix if prefix else datetime.now(timezone.utc).strftime("%Y%m%d-%H%M%S")

        paramfile = directory / f"{prefix}-parameters.json"
        paramfile.write_text(json.dumps(self.parameters.to_dict(), indent=4, cls=NumpyJSONEncoder))
        self.echo(f"Wrote parameters to '{paramfile}'.")

        npyfile = directory / f"{prefix}-{self.num_days}-projection.npy"
        np.save(npyfile, self.projection_grid)
        self.echo(f"Wrote SEIR compartments, by day and group, to '{npyfile}'.")

        csvfile = directory / f"{prefix}-population.csv"
        days = np.arange(self.num_days)
        np.savetxt(
            csvfile,
            np.column_stack((days, self.total_population_by_day, self.expected_population_changes)),
            delimiter=",",
            header="day,total_population,population_change",
            comments="",
            fmt=["%d", "%.6f", "%.6f"],
        )
        self.echo(f"Wrote population by day to '{csvfile}'.")

        return paramfile, npyfile, csvfile


def get_all_bracket_curves(
    age_group_populations,
    age_group_initially_infected,
    num_days: int,
    facility_dormitory_pct: float,
    facility_occupancy_pct: float,
    rate_of_spread_factor,
    population_turnover: float = 0.0,
    planned_releases=None,
    today: Optional[date] = None,
) -> CurveProjection:
    """
    Project every age/role group through ``num_days`` days (including day zero).

    Returns:

        CurveProjection: (total_population_by_day, projection_grid[compartment, day, group], expected_population_changes)
    """

    model = FacilitySEIR(
        {
            "age_group_populations": list(age_group_populations),
            "age_group_initially_infected": list(age_group_initially_infected),
            "num_days": num_days,
            "facility_dormitory_pct": facility_dormitory_pct,
            "facility_occupancy_pct": facility_occupancy_pct,
            "rate_of_spread_factor": rate_of_spread_factor,
            "population_turnover": population_turnover,
            "planned_releases": list(planned_releases or []),
            "today": today,
        }
    )

    return model.run()
