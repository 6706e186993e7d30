"""
Configuration for a facility projection.

ProjectionParameters is a dictionary-like bag with ``.property`` access, seeded with the
model defaults. Scenario files are JSON; dates are written and read as ISO 8601 strings.

Examples
--------
    >>> from facility_seir import ProjectionParameters
    >>> params = ProjectionParameters({"num_days": 30})
    >>> params.facility_occupancy_pct
    1.0
    >>> params <<= {"rate_of_spread_factor": "high"}     # override existing keys only
    >>> params |= {"notes": "baseline scenario"}         # add or override
    >>> params.save("scenario.json")
    >>> ProjectionParameters.load("scenario.json") == params
    True
"""

import json
from pathlib import Path

from facility_seir.compartments import NUM_AGE_GROUPS
from facility_seir.releases import PlannedRelease
from facility_seir.releases import release_date
from facility_seir.transmission import RateOfSpread
from facility_seir.utils import NumpyJSONEncoder
from facility_seir.utils import as_date


def default_parameters() -> dict:
    """Return a fresh dictionary of the default projection parameters."""
    return {
        "age_group_populations": [0] * NUM_AGE_GROUPS,
        "age_group_initially_infected": [0] * NUM_AGE_GROUPS,
        "num_days": 90,
        "facility_dormitory_pct": 0.15,
        "facility_occupancy_pct": 1.0,
        "rate_of_spread_factor": RateOfSpread.MODERATE.value,
        "population_turnover": 0.0,
        "planned_releases": [],
        "today": None,
        "verbose": False,
    }


class ProjectionParameters:
    """Projection inputs with attribute (``ps.num_days``) and item (``ps["num_days"]``) access."""

    def __init__(self, *bags, defaults: bool = True):
        """
        Initialize from the defaults, then apply each bag (dict or ProjectionParameters) in order.

        Parameters
        ----------
        *bags : dict | ProjectionParameters
            Values layered over the defaults, later bags win.
        defaults : bool
            Start from default_parameters() (True) or from an empty bag (False).
        """

        if defaults:
            self.__dict__.update(default_parameters())
        for bag in bags:
            assert isinstance(bag, (type(self), dict))
            for key, value in _items(bag):
                setattr(self, key, value)

        self._normalize()

    def _normalize(self):
        # dates arrive as strings from JSON and records as lists or dicts
        if "today" in self.__dict__:
            self.today = as_date(self.today)
        if "rate_of_spread_factor" in self.__dict__:
            self.rate_of_spread_factor = RateOfSpread.parse(self.rate_of_spread_factor).value
        if self.__dict__.get("planned_releases"):
            self.planned_releases = [_as_release(release) for release in self.planned_releases]

    def to_dict(self) -> dict:
        """Convert to a plain dictionary, planned releases become {"date", "count"} dictionaries."""
        result = dict(self.__dict__)
        if "planned_releases" in result:
            result["planned_releases"] = [release._asdict() for release in result["planned_releases"] or []]
        return result

    def save(self, filename) -> None:
        """Write the parameters to ``filename`` as JSON."""
        Path(filename).write_text(str(self))

    @staticmethod
    def load(filename) -> "ProjectionParameters":
        """Read parameters from a JSON file written by save() (or by hand), missing keys take defaults."""
        with Path(filename).open("r") as file:
            data = json.load(file)
        return ProjectionParameters(data)

    def __getitem__(self, key):
        return getattr(self, key)

    def __setitem__(self, key, value):
        setattr(self, key, value)

    def __add__(self, other):
        return ProjectionParameters(self, other, defaults=False)

    def __ilshift__(self, other):
        """``<<=`` overrides existing values, unknown keys raise ValueError."""
        assert isinstance(other, (type(self), dict))
        for key, value in _items(other):
            if not hasattr(self, key):
                raise ValueError(f"Cannot override missing key '{key}'.")
            setattr(self, key, value)
        self._normalize()
        return self

    def __lshift__(self, other):
        result = ProjectionParameters(self, defaults=False)
        result <<= other
        return result

    def __ior__(self, other):
        """``|=`` adds new values or overrides existing ones."""
        assert isinstance(other, (type(self), dict))
        for key, value in _items(other):
            setattr(self, key, value)
        self._normalize()
        return self

    def __or__(self, other):
        result = ProjectionParameters(self, defaults=False)
        result |= other
        return result

    def __len__(self):
        return len(self.__dict__)

    def __contains__(self, key):
        return key in self.__dict__

    def __eq__(self, other):
        if not isinstance(other, ProjectionParameters):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), indent=4, cls=NumpyJSONEncoder)

    def __repr__(self) -> str:
        return f"ProjectionParameters({self.to_dict()!s})"


def _items(bag):
    return (bag.__dict__ if isinstance(bag, ProjectionParameters) else bag).items()


def _as_release(release) -> PlannedRelease:
    if isinstance(release, PlannedRelease):
        return release
    if isinstance(release, dict):
        return PlannedRelease(release_date(release.get("date")), release.get("count"))
    when, count = release
    return PlannedRelease(release_date(when), count)
