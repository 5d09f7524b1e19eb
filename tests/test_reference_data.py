"""Tests for the bundled reference tables"""

import numpy as np
import pytest

from epiparams.core.reference_data import (
    AGE_GROUPS,
    DATA_PATH,
    ELDERLY_AGE_GROUPS,
    INCOME_GROUPS,
    ReferenceData,
    get_reference_data,
)


def test_loaded_once():
    assert get_reference_data() is get_reference_data()


def test_from_directory_matches_bundled(reference_data):
    data = ReferenceData.from_directory(DATA_PATH)
    assert data.countries() == reference_data.countries()
    assert sorted(data.contact_matrices) == sorted(reference_data.contact_matrices)


def test_every_country_is_complete(reference_data):
    for country in reference_data.countries():
        pop = reference_data.population_rows("country", country)
        assert list(pop["age_group"].astype(str)) == list(AGE_GROUPS)

        elderly = reference_data.elderly_rows("country", country)
        assert list(elderly["age_group"].astype(str)) == list(ELDERLY_AGE_GROUPS)

        assert pop["matrix"].nunique() == 1
        assert pop["matrix"].iloc[0] in reference_data.contact_matrices

        assert country in set(reference_data.income_group["country"])


def test_income_groups_are_known(reference_data):
    groups = reference_data.income_group["income_group"].dropna()
    assert set(groups) <= set(INCOME_GROUPS)
    assert set(reference_data.income_capacity["income_group"]) == set(INCOME_GROUPS)


def test_contact_matrices_are_square_and_read_only(reference_data):
    for key, matrix in reference_data.contact_matrices.items():
        assert matrix.shape == (len(AGE_GROUPS), len(AGE_GROUPS))
        assert np.all(matrix >= 0)
        with pytest.raises(ValueError):
            matrix[0, 0] = 1.0


def test_contact_matrix_lookup_returns_copy(reference_data):
    matrix = reference_data.contact_matrix("Italy")
    matrix[0, 0] = -1.0
    assert reference_data.contact_matrix("Italy")[0, 0] != -1.0


def test_missing_entries_are_none(reference_data):
    assert reference_data.contact_matrix("Atlantis") is None
    assert reference_data.income_group_of("Atlantis") is None
    assert reference_data.income_group_of("China, Taiwan Province of China") is None
    assert reference_data.country_capacity_of("Nigeria") is None
    assert reference_data.income_capacity_of("Atlantis") is None
    assert reference_data.population_rows("country", "Atlantis").empty


def test_synthetic_rows_are_sorted(testland):
    pop = testland.population_rows("iso3c", "TST")
    assert list(pop["age_group"].astype(str)) == list(AGE_GROUPS)


def test_elderly_bins_sum_to_80_plus(reference_data):
    for country in reference_data.countries():
        pop = reference_data.population_rows("country", country)
        elderly = reference_data.elderly_rows("country", country)
        assert elderly["n"].sum() == pop["n"].iloc[-1], country
