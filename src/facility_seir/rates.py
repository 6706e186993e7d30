"""
Transition rates for the facility SEIR model.

Each rate is (probability of taking the path) * (1 / mean duration of the path in days).
Probabilities fanning out of a single compartment sum to 1.

The hospitalized -> fatality and hospitalized -> recovered rates depend on the group's
fatality rate and are derived per group by the daily transition function.
"""

import numpy as np

from facility_seir.compartments import AgeGroup
from facility_seir.compartments import Compartment

# non-contagious incubation period
D_INCUBATION = 2.0
R_EXPOSED_TO_INFECTIOUS = 1 / D_INCUBATION  # aka alpha

P_SYMPTOMATIC = 0.821
D_INFECTIOUS = 5.1  # days in infectious period
R_INFECTIOUS_TO_QUARANTINED = P_SYMPTOMATIC * (1 / D_INFECTIOUS)

D_ASYMPTOMATIC_INFECTIOUS = 7.0
R_INFECTIOUS_TO_RECOVERED = (1 - P_SYMPTOMATIC) * (1 / D_ASYMPTOMATIC_INFECTIOUS)

# "mild" here means not hospitalized
P_QUARANTINED_MILD = 0.74
D_MILD_RECOVERY = 9.9
R_QUARANTINED_TO_RECOVERED = P_QUARANTINED_MILD * (1 / D_MILD_RECOVERY)

D_HOSPITAL_LAG = 2.9
R_QUARANTINED_TO_HOSPITALIZED = (1 - P_QUARANTINED_MILD) * (1 / D_HOSPITAL_LAG)

P_ICU = 0.3
D_ICU_LAG = 2.0
R_HOSPITALIZED_TO_ICU = P_ICU * (1 / D_ICU_LAG)

# days from hospital admission to hospital release (non-fatality scenario)
D_HOSPITALIZED = 22.0
D_HOSPITALIZED_FATALITY = 8.3

D_POST_ICU_RECOVERY = 12.0
R_HOSPITAL_RECOVERY_TO_RECOVERED = 1 / D_POST_ICU_RECOVERY

P_ICU_FATALITY = 0.15
D_ICU_FATALITY = 6.3
D_ICU_RECOVERY = 5.0
R_ICU_TO_FATALITY = P_ICU_FATALITY * (1 / D_ICU_FATALITY)
R_ICU_TO_HOSPITAL_RECOVERY = (1 - P_ICU_FATALITY) * (1 / D_ICU_RECOVERY)

# factor for estimating population adjustment based on expected turnover
POPULATION_ADJUSTMENT_RATIO = 0.0879

# fraction of hospitalized cases in each group who die, staff use the "unknown" rate
AGE_GROUP_FATALITY_RATES = np.zeros(len(AgeGroup), dtype=np.float64)
AGE_GROUP_FATALITY_RATES[AgeGroup.AGE_UNKNOWN] = 0.026
AGE_GROUP_FATALITY_RATES[AgeGroup.AGE_0] = 0.0
AGE_GROUP_FATALITY_RATES[AgeGroup.AGE_20] = 0.0015
AGE_GROUP_FATALITY_RATES[AgeGroup.AGE_45] = 0.0065
AGE_GROUP_FATALITY_RATES[AgeGroup.AGE_55] = 0.02
AGE_GROUP_FATALITY_RATES[AgeGroup.AGE_65] = 0.038
AGE_GROUP_FATALITY_RATES[AgeGroup.AGE_75] = 0.074
AGE_GROUP_FATALITY_RATES[AgeGroup.AGE_85] = 0.1885
AGE_GROUP_FATALITY_RATES[AgeGroup.STAFF] = AGE_GROUP_FATALITY_RATES[AgeGroup.AGE_UNKNOWN]

# distribution of initially infected cases across compartments, based on curve ratios
INITIAL_CASE_DISTRIBUTION = {
    Compartment.INFECTIOUS: 0.57,
    Compartment.QUARANTINED: 0.253,
    Compartment.HOSPITALIZED: 0.041,
    Compartment.ICU: 0.012,
    Compartment.HOSPITAL_RECOVERY: 0.004,
    Compartment.RECOVERED_MILD: 0.074,
    Compartment.RECOVERED_HOSPITALIZED: 0.045,
    Compartment.FATALITIES: 0.001,
}
