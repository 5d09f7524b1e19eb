"""Reference data lookups and parameter reconciliation"""

from .exceptions import (
    EpiParamsError,
    InvalidArgumentError,
    NotFoundError,
    DataUnavailableError,
    Notice,
)
from .reference_data import ReferenceData, get_reference_data, AGE_GROUPS, ELDERLY_AGE_GROUPS
from .population import (
    HealthcareCapacity,
    PopulationMixing,
    get_population,
    get_elderly_population,
    get_mixing_matrix,
    get_healthcare_capacity,
    get_lmic_countries,
    parse_country_population_mixing_matrix,
    plot_population,
    plot_mixing_matrix,
)
from .disease_params import (
    SeverityMode,
    SeverityAssumptions,
    SeverityParameters,
    DurationParameters,
    DEFAULT_ASSUMPTIONS,
    DEFAULT_SEVERITY,
    DEFAULT_DURATIONS,
    elderly_ifr,
    parse_country_severity,
    parse_durations,
)

__all__ = [
    'EpiParamsError',
    'InvalidArgumentError',
    'NotFoundError',
    'DataUnavailableError',
    'Notice',
    'ReferenceData',
    'get_reference_data',
    'AGE_GROUPS',
    'ELDERLY_AGE_GROUPS',
    'HealthcareCapacity',
    'PopulationMixing',
    'get_population',
    'get_elderly_population',
    'get_mixing_matrix',
    'get_healthcare_capacity',
    'get_lmic_countries',
    'parse_country_population_mixing_matrix',
    'plot_population',
    'plot_mixing_matrix',
    'SeverityMode',
    'SeverityAssumptions',
    'SeverityParameters',
    'DurationParameters',
    'DEFAULT_ASSUMPTIONS',
    'DEFAULT_SEVERITY',
    'DEFAULT_DURATIONS',
    'elderly_ifr',
    'parse_country_severity',
    'parse_durations',
]
