"""
Command line front end: run a facility projection from a JSON scenario and/or options,
echo headline numbers for the incarcerated population and staff, and optionally write
the projection files.
"""

from pathlib import Path

import click

from facility_seir.compartments import NUM_AGE_GROUPS
from facility_seir.model import FacilitySEIR
from facility_seir.parameters import ProjectionParameters
from facility_seir.report import summary
from facility_seir.transmission import RateOfSpread


def _group_counts(ctx, param, value):
    if value is None:
        return None
    try:
        counts = [float(v) for v in value.split(",")]
    except ValueError:
        raise click.BadParameter("expected comma separated numbers") from None
    if len(counts) != NUM_AGE_GROUPS:
        raise click.BadParameter(f"expected {NUM_AGE_GROUPS} values (one per age group and staff), got {len(counts)}")
    return counts


@click.command()
@click.option("-p", "--parameters", "paramfile", type=click.Path(exists=True, dir_okay=False, path_type=Path), help="JSON scenario file.")
@click.option("--populations", callback=_group_counts, help="Comma separated population per group (unknown, 0, 20, 45, 55, 65, 75, 85, staff).")
@click.option("--infected", callback=_group_counts, help="Comma separated initially infected per group.")
@click.option("-d", "--days", type=click.IntRange(min=1), help="Days to project, including today.")
@click.option("--occupancy", type=float, help="Facility occupancy as a fraction of capacity.")
@click.option("--dormitory", type=float, help="Fraction of the incarcerated population housed in dormitories.")
@click.option("--spread", type=click.Choice([r.value for r in RateOfSpread], case_sensitive=False), help="Rate of spread.")
@click.option("--turnover", type=float, help="Population turnover rate.")
@click.option("--today", type=click.DateTime(formats=["%Y-%m-%d"]), help="Reference date for planned releases (default: today).")
@click.option("-o", "--output", type=click.Path(file_okay=False, path_type=Path), help="Directory for projection output files.")
@click.option("--progress/--no-progress", default=False, help="Show a progress bar.")
@click.option("-v", "--verbose", is_flag=True, help="Echo model diagnostics.")
def main(paramfile, populations, infected, days, occupancy, dormitory, spread, turnover, today, output, progress, verbose):
    """Project disease spread through a facility population by age group and staff."""

    try:
        parameters = ProjectionParameters.load(paramfile) if paramfile else ProjectionParameters()
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--parameters") from e

    overrides = {
        "age_group_populations": populations,
        "age_group_initially_infected": infected,
        "num_days": days,
        "facility_occupancy_pct": occupancy,
        "facility_dormitory_pct": dormitory,
        "rate_of_spread_factor": spread,
        "population_turnover": turnover,
        "today": today.date() if today else None,
    }
    parameters <<= {key: value for key, value in overrides.items() if value is not None}
    parameters.verbose = verbose or bool(parameters.verbose)

    if len(parameters.age_group_populations) != NUM_AGE_GROUPS or len(parameters.age_group_initially_infected) != NUM_AGE_GROUPS:
        raise click.UsageError(f"Populations and initially infected must each have {NUM_AGE_GROUPS} values.")

    model = FacilitySEIR(parameters)
    totals, _grid, _changes = model.run(progress=progress)

    click.echo(f"Projected {model.num_days} days, final population {totals[-1]:,.1f}")
    for population, numbers in summary(model.projection_grid).items():
        click.echo(
            f"{population:>12}: peak infectious {numbers['peak_infectious'][1]:,.1f} (day {numbers['peak_infectious'][0]}), "
            f"peak hospitalized {numbers['peak_hospitalized'][1]:,.1f} (day {numbers['peak_hospitalized'][0]}), "
            f"fatalities {numbers['fatalities']:,.1f}"
        )

    if output:
        for path in model.finalize(output):
            click.echo(f"Wrote '{path}'.")
