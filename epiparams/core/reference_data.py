"""
Reference Data
==============
Read-only repository over the bundled demographic and healthcare tables.

Tables are loaded from CSV once per process (see `get_reference_data`) and
every accessor hands out copies, so nothing a caller does can leak back
into the cache.
"""

import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Dict, List, Optional, Union

import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)

DATA_PATH = Path(__file__).parent.parent / "data"

AGE_GROUPS = (
    "0-4", "5-9", "10-14", "15-19", "20-24", "25-29", "30-34", "35-39",
    "40-44", "45-49", "50-54", "55-59", "60-64", "65-69", "70-74", "75-79",
    "80+",
)
ELDERLY_AGE_GROUPS = ("80-84", "85-89", "90+")
INCOME_GROUPS = (
    "Low income",
    "Lower middle income",
    "Upper middle income",
    "High income",
)

# File names inside a reference data directory
POPULATION_FILE = "population.csv"
ELDERLY_POPULATION_FILE = "elderly_population.csv"
INCOME_GROUP_FILE = "income_group.csv"
CONTACT_MATRICES_FILE = "contact_matrices.csv"
COUNTRY_CAPACITY_FILE = "country_healthcare_capacity.csv"
INCOME_CAPACITY_FILE = "income_strata_healthcare_capacity.csv"


def _ordered_age_groups(series: pd.Series, categories) -> pd.Categorical:
    """Age labels as an ordered categorical so sorting follows age"""
    return pd.Categorical(series, categories=list(categories), ordered=True)


@dataclass(frozen=True)
class ReferenceData:
    """
    Immutable bundle of reference tables

    Attributes:
        population: rows of (country, iso3c, age_group, n, matrix)
        elderly_population: rows of (country, iso3c, age_group, n) for 80+ bins
        income_group: rows of (country, iso3c, income_group), NaN when unclassified
        contact_matrices: matrix key -> square contact matrix
        country_capacity: rows of (country, iso3c, hosp_beds, ICU_beds)
        income_capacity: rows of (income_group, hosp_beds, ICU_beds)
    """
    population: pd.DataFrame
    elderly_population: pd.DataFrame
    income_group: pd.DataFrame
    contact_matrices: Dict[str, np.ndarray]
    country_capacity: pd.DataFrame
    income_capacity: pd.DataFrame

    @classmethod
    def from_directory(cls, path: Union[str, Path]) -> "ReferenceData":
        """
        Load all tables from a directory of CSV files

        Args:
            path: Directory holding the reference CSV files

        Returns:
            ReferenceData instance
        """
        path = Path(path)
        logger.debug("Loading reference data from %s", path)

        population = pd.read_csv(path / POPULATION_FILE)
        population["age_group"] = _ordered_age_groups(population["age_group"], AGE_GROUPS)

        elderly = pd.read_csv(path / ELDERLY_POPULATION_FILE)
        elderly["age_group"] = _ordered_age_groups(elderly["age_group"], ELDERLY_AGE_GROUPS)

        income_group = pd.read_csv(path / INCOME_GROUP_FILE)
        country_capacity = pd.read_csv(path / COUNTRY_CAPACITY_FILE)
        income_capacity = pd.read_csv(path / INCOME_CAPACITY_FILE)

        return cls(
            population=population,
            elderly_population=elderly,
            income_group=income_group,
            contact_matrices=_read_contact_matrices(path / CONTACT_MATRICES_FILE),
            country_capacity=country_capacity,
            income_capacity=income_capacity,
        )

    # Membership

    def countries(self) -> List[str]:
        """All countries with a population table"""
        return list(self.population["country"].unique())

    def has_country(self, country: str) -> bool:
        return country in set(self.population["country"])

    def has_iso3c(self, iso3c: str) -> bool:
        return iso3c in set(self.population["iso3c"])

    # Row lookups (empty frame when nothing matches)

    def population_rows(self, column: str, value: str) -> pd.DataFrame:
        """Population rows where `column` equals `value`, sorted by age group"""
        return _select(self.population, column, value)

    def elderly_rows(self, column: str, value: str) -> pd.DataFrame:
        """Elderly population rows where `column` equals `value`, sorted by age group"""
        return _select(self.elderly_population, column, value)

    # Scalar / record lookups (None when nothing matches)

    def income_group_of(self, country: str) -> Optional[str]:
        """Income group classification, None when unknown or unclassified"""
        rows = self.income_group[self.income_group["country"] == country]
        if rows.empty:
            return None
        group = rows["income_group"].iloc[0]
        if pd.isna(group):
            return None
        return str(group)

    def contact_matrix(self, key: str) -> Optional[np.ndarray]:
        matrix = self.contact_matrices.get(key)
        if matrix is None:
            return None
        return matrix.copy()

    def country_capacity_of(self, country: str) -> Optional[pd.Series]:
        """Country-specific bed capacity row, None without an exact entry"""
        rows = self.country_capacity[self.country_capacity["country"] == country]
        if rows.empty:
            return None
        return rows.iloc[0].copy()

    def income_capacity_of(self, income_group: str) -> Optional[pd.Series]:
        """Bed capacity row for an income group bucket"""
        rows = self.income_capacity[self.income_capacity["income_group"] == income_group]
        if rows.empty:
            return None
        return rows.iloc[0].copy()


def _select(table: pd.DataFrame, column: str, value: str) -> pd.DataFrame:
    rows = table[table[column] == value]
    return rows.sort_values("age_group", kind="stable").reset_index(drop=True)


def _read_contact_matrices(csv_path: Path) -> Dict[str, np.ndarray]:
    """
    Parse the wide contact matrix table

    Each matrix occupies one row per age group, with one column per
    contacted age group.
    """
    df = pd.read_csv(csv_path)
    matrices = {}
    for key, rows in df.groupby("matrix", sort=False):
        rows = rows.assign(age_group=_ordered_age_groups(rows["age_group"], AGE_GROUPS))
        rows = rows.sort_values("age_group")
        matrix = rows[list(AGE_GROUPS)].to_numpy(dtype=float)
        if matrix.shape != (len(AGE_GROUPS), len(AGE_GROUPS)):
            raise ValueError(f"Contact matrix {key!r} has shape {matrix.shape}")
        matrix.setflags(write=False)
        matrices[key] = matrix
    return matrices


@lru_cache(maxsize=None)
def get_reference_data() -> ReferenceData:
    """Bundled reference data, loaded on first use and shared afterwards"""
    return ReferenceData.from_directory(DATA_PATH)


if __name__ == "__main__":
    data = get_reference_data()

    print("Reference Data")
    print("=" * 50)
    print(f"Countries: {len(data.countries())}")
    for country in data.countries():
        rows = data.population_rows("country", country)
        print(f"  {country:40s} {rows['n'].sum():>12,d}  matrix={rows['matrix'].iloc[0]}")
    print(f"\nContact matrices: {sorted(data.contact_matrices)}")
