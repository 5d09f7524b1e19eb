"""
Pytest configuration and shared fixtures
"""

import matplotlib
matplotlib.use("Agg")

import numpy as np
import pandas as pd
import pytest

from epiparams.core.reference_data import (
    AGE_GROUPS,
    ELDERLY_AGE_GROUPS,
    ReferenceData,
    get_reference_data,
)


def make_reference_data(elderly_n=(1000, 500, 250), n_per_group=1000) -> ReferenceData:
    """
    Single-country ('Testland', TST) reference data with a chosen 80+ split

    Rows are written in reverse age order so lookups must sort them.
    """
    population = pd.DataFrame({
        "country": "Testland",
        "iso3c": "TST",
        "age_group": pd.Categorical(list(AGE_GROUPS)[::-1], categories=list(AGE_GROUPS), ordered=True),
        "n": np.arange(len(AGE_GROUPS), 0, -1) * n_per_group,
        "matrix": "Testland",
    })
    elderly = pd.DataFrame({
        "country": "Testland",
        "iso3c": "TST",
        "age_group": pd.Categorical(list(ELDERLY_AGE_GROUPS), categories=list(ELDERLY_AGE_GROUPS), ordered=True),
        "n": list(elderly_n),
    })
    income_group = pd.DataFrame({
        "country": ["Testland"], "iso3c": ["TST"], "income_group": ["Low income"],
    })
    country_capacity = pd.DataFrame(columns=["country", "iso3c", "hosp_beds", "ICU_beds"])
    income_capacity = pd.DataFrame({
        "income_group": ["Low income"], "hosp_beds": [1.0], "ICU_beds": [0.01],
    })
    return ReferenceData(
        population=population,
        elderly_population=elderly,
        income_group=income_group,
        contact_matrices={"Testland": np.eye(len(AGE_GROUPS))},
        country_capacity=country_capacity,
        income_capacity=income_capacity,
    )


@pytest.fixture
def reference_data():
    """Bundled reference data"""
    return get_reference_data()


@pytest.fixture
def testland():
    """Synthetic single-country reference data"""
    return make_reference_data()


@pytest.fixture
def make_data():
    """Factory for synthetic reference data with a custom 80+ split"""
    return make_reference_data
