__version__ = "0.1.0"

from .compartments import AgeGroup
from .compartments import Compartment
from .model import CurveProjection
from .model import FacilitySEIR
from .model import get_all_bracket_curves
from .parameters import ProjectionParameters
from .population import adjust_populations
from .releases import PlannedRelease
from .seir import simulate_one_day
from .transmission import RateOfSpread
from .transmission import adjusted_rates_of_spread

__all__ = [
    "AgeGroup",
    "Compartment",
    "CurveProjection",
    "FacilitySEIR",
    "PlannedRelease",
    "ProjectionParameters",
    "RateOfSpread",
    "__version__",
    "adjust_populations",
    "adjusted_rates_of_spread",
    "get_all_bracket_curves",
    "simulate_one_day",
]
