"""Housing type and occupancy adjusted rates of spread (R0) for a facility."""

from enum import Enum
from typing import Tuple


class RateOfSpread(str, Enum):
    """Categorical spread intensity selector."""

    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"

    @classmethod
    def parse(cls, value) -> "RateOfSpread":
        """Accept a RateOfSpread, its value ("low"), or its name ("LOW")."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise ValueError(f"Unknown rate of spread '{value}', expected one of {[r.value for r in cls]}.") from None


# base reproduction numbers by housing type
R0_CELLS = {
    RateOfSpread.LOW: 2.4,
    RateOfSpread.MODERATE: 3.0,
    RateOfSpread.HIGH: 3.7,
}

R0_DORMS = {
    RateOfSpread.LOW: 3.0,
    RateOfSpread.MODERATE: 5.0,
    RateOfSpread.HIGH: 7.0,
}

# rates of spread at zero occupancy
R0_CELLS_FLOOR = 0.8
R0_DORMS_FLOOR = 1.7


def adjust_for_occupancy(r0: float, floor: float, occupancy_pct: float) -> float:
    """Linearly interpolate r0 down toward floor as occupancy drops below 1."""
    return r0 - (1 - occupancy_pct) * (r0 - floor)


def adjusted_rates_of_spread(rate_of_spread, facility_occupancy_pct: float) -> Tuple[float, float]:
    """
    Calculate the occupancy adjusted rates of spread for cells and dormitories.

    Occupancy is not range checked, values outside [0, 1] extrapolate the linear adjustment.

    Parameters:

        rate_of_spread (RateOfSpread | str): Spread intensity selector.
        facility_occupancy_pct (float): Current occupancy as a fraction of capacity.

    Returns:

        Tuple[float, float]: (cells, dorms) adjusted rates of spread.
    """

    rate_of_spread = RateOfSpread.parse(rate_of_spread)
    cells = adjust_for_occupancy(R0_CELLS[rate_of_spread], R0_CELLS_FLOOR, facility_occupancy_pct)
    dorms = adjust_for_occupancy(R0_DORMS[rate_of_spread], R0_DORMS_FLOOR, facility_occupancy_pct)

    return cells, dorms
