"""
Population Lookups
==================
Resolves a country (or ISO3 code) to its age-structured population,
elderly population, contact mixing matrix and healthcare bed capacity
"""

import logging
import warnings
from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np
import pandas as pd

from .exceptions import DataUnavailableError, InvalidArgumentError, NotFoundError, Notice
from .reference_data import ReferenceData, get_reference_data

logger = logging.getLogger(__name__)

SIMPLE_SEIR_TERMINAL_GROUP = "75+"

# Unclassified but not a low/middle income setting
LMIC_EXCLUDED = ("China, Taiwan Province of China",)


@dataclass
class HealthcareCapacity:
    """Hospital and ICU beds per 1000 population"""
    hosp_beds: float
    ICU_beds: float
    source: str = "country"  # 'country' or 'income_group'


@dataclass
class PopulationMixing:
    """Population vector and contact matrix for one model run"""
    population: np.ndarray
    country: Optional[str]
    contact_matrix_set: np.ndarray


def _check_string(value, name: str):
    if not isinstance(value, str):
        raise InvalidArgumentError(f"{name} must be a string, got {type(value).__name__}")


def _resolve_identifier(country: Optional[str],
                        iso3c: Optional[str]) -> Tuple[str, str]:
    """
    Pick the identifier used for a lookup

    Returns:
        (column, value) where column is 'country' or 'iso3c'
    """
    if country is not None and iso3c is not None:
        warnings.warn(
            "Both iso3c and country were provided. Country will be used",
            Notice,
            stacklevel=4,
        )
        iso3c = None

    if country is not None:
        _check_string(country, "country")
        return "country", country
    if iso3c is not None:
        _check_string(iso3c, "iso3c")
        return "iso3c", iso3c

    raise InvalidArgumentError("One of country or iso3c must be provided")


def _simplify(pc: pd.DataFrame) -> pd.DataFrame:
    """
    Collapse the final two age bins into a single '75+' bin

    The summed count moves into the second-to-last row and the
    now-redundant last row is dropped.
    """
    n = pc["n"].to_numpy()
    collapsed = np.concatenate([n[:-2], [n[-2:].sum(), 0]]).astype(n.dtype)
    labels = pc["age_group"].astype(str).to_list()[:-1]
    labels[-1] = SIMPLE_SEIR_TERMINAL_GROUP

    pc = pc.iloc[:-1].copy()
    pc["n"] = collapsed[:-1]
    pc["age_group"] = pd.Categorical(labels, categories=labels, ordered=True)
    return pc.reset_index(drop=True)


def _lookup(table: str,
            country: Optional[str],
            iso3c: Optional[str],
            data: ReferenceData) -> pd.DataFrame:
    column, value = _resolve_identifier(country, iso3c)
    if table == "elderly":
        pc = data.elderly_rows(column, value)
    else:
        pc = data.population_rows(column, value)

    if pc.empty:
        raise NotFoundError(f"{'Country' if column == 'country' else 'iso3c'} not found: {value}")

    logger.debug("Resolved %s=%s to %d %s rows", column, value, len(pc), table)
    return pc


def get_population(country: Optional[str] = None,
                   iso3c: Optional[str] = None,
                   simple_SEIR: bool = False,
                   data: Optional[ReferenceData] = None) -> pd.DataFrame:
    """
    Get population data

    Args:
        country: Country name
        iso3c: ISO 3C country code
        simple_SEIR: Collapse the last two age bins for the simple SEIR model
        data: Reference data (bundled data if None)

    Returns:
        DataFrame of (country, iso3c, age_group, n, matrix), ascending by age
    """
    data = data or get_reference_data()
    pc = _lookup("population", country, iso3c, data)
    if simple_SEIR:
        pc = _simplify(pc)
    return pc


def get_elderly_population(country: Optional[str] = None,
                           iso3c: Optional[str] = None,
                           simple_SEIR: bool = False,
                           data: Optional[ReferenceData] = None) -> pd.DataFrame:
    """
    Get elderly population data (5 year breakdown for 80-84, 85-89 and 90+)

    Args:
        country: Country name
        iso3c: ISO 3C country code
        simple_SEIR: Collapse the last two age bins
        data: Reference data (bundled data if None)

    Returns:
        DataFrame of (country, iso3c, age_group, n), ascending by age
    """
    data = data or get_reference_data()
    pc = _lookup("elderly", country, iso3c, data)
    if simple_SEIR:
        pc = _simplify(pc)
    return pc


def get_mixing_matrix(country: Optional[str] = None,
                      iso3c: Optional[str] = None,
                      data: Optional[ReferenceData] = None) -> np.ndarray:
    """
    Get the age contact mixing matrix assigned to a country

    Args:
        country: Country name
        iso3c: ISO 3C country code
        data: Reference data (bundled data if None)

    Returns:
        Square matrix with one row/column per age group
    """
    data = data or get_reference_data()
    pop = _lookup("population", country, iso3c, data)

    key = pop["matrix"].iloc[0]
    mm = data.contact_matrix(key)
    if mm is None:
        raise DataUnavailableError(f"Contact matrix {key!r} is not in the reference data")
    return mm


def get_healthcare_capacity(country: Optional[str] = None,
                            iso3c: Optional[str] = None,
                            simple_SEIR: bool = False,
                            data: Optional[ReferenceData] = None) -> HealthcareCapacity:
    """
    Get healthcare capacity data

    Uses the country-specific bed counts where available, otherwise the
    typical capacity of the country's income group.

    Args:
        country: Country name
        iso3c: ISO 3C country code
        simple_SEIR: Accepted for call compatibility, has no effect
        data: Reference data (bundled data if None)

    Returns:
        HealthcareCapacity
    """
    data = data or get_reference_data()
    pop = _lookup("population", country, iso3c, data)
    country = pop["country"].iloc[0]

    beds = data.country_capacity_of(country)
    if beds is not None:
        return HealthcareCapacity(
            hosp_beds=float(beds["hosp_beds"]),
            ICU_beds=float(beds["ICU_beds"]),
            source="country",
        )

    income_group = data.income_group_of(country)
    beds = data.income_capacity_of(income_group) if income_group is not None else None
    if beds is None:
        raise DataUnavailableError(
            f"Healthcare capacity data not available for {country} - "
            "specify hospital and ICU beds manually"
        )

    logger.debug("Using %s bed capacity for %s", income_group, country)
    return HealthcareCapacity(
        hosp_beds=float(beds["hosp_beds"]),
        ICU_beds=float(beds["ICU_beds"]),
        source="income_group",
    )


def get_lmic_countries(data: Optional[ReferenceData] = None) -> List[str]:
    """Supported low and middle income countries (including unclassified ones)"""
    data = data or get_reference_data()
    ig = data.income_group
    lmic = ig["country"][ig["income_group"].notna() & (ig["income_group"] != "High income")]
    unclassified = ig["country"][ig["income_group"].isna() & ~ig["country"].isin(LMIC_EXCLUDED)]
    return pd.concat([lmic, unclassified]).to_list()


def parse_country_population_mixing_matrix(country: Optional[str] = None,
                                           population=None,
                                           contact_matrix_set=None,
                                           data: Optional[ReferenceData] = None) -> PopulationMixing:
    """
    Resolve the population vector and contact matrix for a model run

    Either a country, or both a population and a contact matrix set,
    must be given. Anything missing is filled from the country.
    """
    if country is None and (population is None or contact_matrix_set is None):
        raise InvalidArgumentError(
            "User must provide either the country being simulated or "
            "both the population size and contact_matrix_set"
        )

    if population is None:
        population = get_population(country, data=data)["n"].to_numpy()
        if contact_matrix_set is None:
            contact_matrix_set = get_mixing_matrix(country, data=data)

    return PopulationMixing(
        population=np.asarray(population),
        country=country,
        contact_matrix_set=np.asarray(contact_matrix_set, dtype=float),
    )


def plot_population(df: pd.DataFrame, title: Optional[str] = None):
    """
    Plot an age-structured population table as a bar chart

    Args:
        df: Table from get_population or get_elderly_population
        title: Plot title (defaults to the country name)
    """
    import matplotlib.pyplot as plt

    fig, ax = plt.subplots(figsize=(12, 5))
    labels = df["age_group"].astype(str)
    ax.bar(labels, df["n"], color='steelblue')

    ax.set_xlabel('Age group', fontsize=12)
    ax.set_ylabel('Population', fontsize=12)
    ax.set_title(title or str(df["country"].iloc[0]), fontsize=14, fontweight='bold')
    ax.tick_params(axis='x', rotation=45)
    ax.grid(True, axis='y', alpha=0.3)

    plt.tight_layout()
    return fig


def plot_mixing_matrix(matrix: np.ndarray,
                       age_groups=None,
                       title: str = "Contact mixing matrix"):
    """
    Heatmap of a contact mixing matrix

    Args:
        matrix: Square contact matrix
        age_groups: Axis labels (one per row)
        title: Plot title
    """
    import matplotlib.pyplot as plt

    fig, ax = plt.subplots(figsize=(8, 7))
    im = ax.imshow(matrix, origin='lower', cmap='viridis')
    fig.colorbar(im, ax=ax, label='Relative contact rate')

    if age_groups is not None:
        ticks = np.arange(len(age_groups))
        ax.set_xticks(ticks)
        ax.set_xticklabels(age_groups, rotation=90)
        ax.set_yticks(ticks)
        ax.set_yticklabels(age_groups)

    ax.set_xlabel('Age of contact', fontsize=12)
    ax.set_ylabel('Age of individual', fontsize=12)
    ax.set_title(title, fontsize=14, fontweight='bold')

    plt.tight_layout()
    return fig


if __name__ == "__main__":
    pop = get_population("Nigeria")
    print("Population Lookup Test")
    print("=" * 50)
    print(pop[["age_group", "n"]].to_string(index=False))
    print(f"\nTotal: {pop['n'].sum():,d}")

    simple = get_population("Nigeria", simple_SEIR=True)
    print(f"Simple SEIR bins: {len(simple)} (terminal {simple['age_group'].iloc[-1]})")

    mm = get_mixing_matrix(iso3c="ITA")
    print(f"\nItaly mixing matrix shape: {mm.shape}")

    for country in ["Italy", "Nigeria"]:
        hc = get_healthcare_capacity(country)
        print(f"{country}: hosp={hc.hosp_beds:.2f} ICU={hc.ICU_beds:.3f} ({hc.source})")

    print(f"\nLMIC countries: {get_lmic_countries()}")
