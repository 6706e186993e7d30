"""Index enumerations for the compartment and age/role group axes of the model state."""

from enum import IntEnum


class Compartment(IntEnum):
    """Disease/outcome states, in storage order."""

    SUSCEPTIBLE = 0
    EXPOSED = 1
    INFECTIOUS = 2
    QUARANTINED = 3
    HOSPITALIZED = 4
    ICU = 5
    HOSPITAL_RECOVERY = 6  # post-ICU recovery in a regular hospital bed
    FATALITIES = 7
    RECOVERED_MILD = 8
    RECOVERED_HOSPITALIZED = 9


class AgeGroup(IntEnum):
    """Population partitions: age brackets plus staff, in storage order."""

    AGE_UNKNOWN = 0
    AGE_0 = 1
    AGE_20 = 2
    AGE_45 = 3
    AGE_55 = 4
    AGE_65 = 5
    AGE_75 = 6
    AGE_85 = 7
    STAFF = 8


NUM_COMPARTMENTS = len(Compartment)
NUM_AGE_GROUPS = len(AgeGroup)

# every group except staff, i.e., the incarcerated population
INCARCERATED_GROUPS = [group for group in AgeGroup if group != AgeGroup.STAFF]
