import logging
import math
import numpy as np
import pandas as pd
import pytest
from trophdiv import INDEX_COLUMNS, TrophicDiversityService, trophdiv
from trophdiv.indices.errors import (
    DimensionMismatchError,
    InvalidInputError,
    NameMismatchError,
)
from trophdiv.io import generate_example

SPECIES = ["sp1", "sp2", "sp3"]

@pytest.fixture
def ab():
    return pd.DataFrame(
        [[10, 0, 5], [0, 20, 0]],
        index=["com1", "com2"],
        columns=SPECIES,
        dtype=float,
    )

@pytest.fixture
def tl():
    return pd.Series([2.0, 3.0, 4.0], index=SPECIES)

@pytest.fixture
def service():
    return TrophicDiversityService()

# --- Reference scenario ---

def test_result_shape(service, ab, tl):
    res = service.compute(ab, tl)
    assert list(res.columns) == INDEX_COLUMNS
    assert list(res.index) == ["com1", "com2"]
    assert res["nbsp"].dtype == "Int64"
    assert res["FROm"].dtype == "float64"

def test_two_species_community(service, ab, tl):
    row = service.compute(ab, tl).loc["com1"]
    assert row["abtot"] == 15.0
    assert row["nbsp"] == 2
    assert row["nbtl"] == 2
    assert row["mintl"] == 2.0
    assert row["maxtl"] == 4.0
    assert row["rgetl"] == 2.0
    assert row["meantl"] == 2.667
    assert row["sdtl"] == 0.942
    assert row["FDvar"] == 0.312
    assert pd.isna(row["FROm"])  # only 2 trophic levels

def test_single_species_community(service, ab, tl):
    row = service.compute(ab, tl).loc["com2"]
    assert row["abtot"] == 20.0
    assert row["nbsp"] == 1
    assert row["nbtl"] == 1
    assert row["mintl"] == row["maxtl"] == row["meantl"] == 3.0
    assert row["rgetl"] == 0.0
    assert row["sdtl"] == 0.0
    assert row["FDvar"] == 0.0
    assert pd.isna(row["FROm"])

def test_module_function_matches_service(service, ab, tl):
    pd.testing.assert_frame_equal(trophdiv(ab, tl), service.compute(ab, tl))

def test_inputs_not_mutated(service, ab, tl):
    ab_before, tl_before = ab.copy(), tl.copy()
    service.compute(ab, tl)
    pd.testing.assert_frame_equal(ab, ab_before)
    pd.testing.assert_series_equal(tl, tl_before)

# --- Evenness ---

def test_even_community_has_from_one(service):
    ab = pd.DataFrame([[4, 4, 4]], index=["even"], columns=SPECIES, dtype=float)
    tl = pd.Series([2.0, 3.0, 4.0], index=SPECIES)
    res = service.compute(ab, tl)
    assert res.loc["even", "nbtl"] == 3
    assert res.loc["even", "FROm"] == 1.0

def test_from_defined_only_from_three_levels(service):
    species = ["a", "b", "c", "d"]
    ab = pd.DataFrame(
        [[1, 1, 2, 0], [1, 1, 0, 0], [3, 3, 0, 1]],
        index=["three", "two", "tied"],
        columns=species,
        dtype=float,
    )
    tl = pd.Series([2.0, 3.0, 4.0, 3.0], index=species)
    res, report = service.compute_with_report(ab, tl)

    assert res.loc["three", "FROm"] == 0.8
    assert pd.isna(res.loc["two", "FROm"])
    # b and d share level 3.0: 3 species but only 2 levels
    assert res.loc["tied", "nbsp"] == 3
    assert res.loc["tied", "nbtl"] == 2
    assert pd.isna(res.loc["tied", "FROm"])
    assert report.evenness_skipped == ["two", "tied"]

# --- Missing / empty ---

def test_missing_abundance_treated_as_absent(service, tl):
    ab = pd.DataFrame([[10, np.nan, 5]], index=["com1"], columns=SPECIES)
    row = service.compute(ab, tl).loc["com1"]
    assert row["nbsp"] == 2
    assert row["abtot"] == 15.0
    assert row["meantl"] == 2.667

def test_empty_community_row_is_missing(service, tl, caplog):
    ab = pd.DataFrame(
        [[0, np.nan, 0], [1, 1, 1]],
        index=["empty", "full"],
        columns=SPECIES,
    )
    with caplog.at_level(logging.WARNING):
        res, report = service.compute_with_report(ab, tl)

    assert res.loc["empty"].isna().all()
    assert res.loc["full", "nbsp"] == 3
    assert res.loc["full", "FROm"] == 1.0
    assert report.failure_count == 1
    assert report.failed_communities == ["empty"]
    assert report.failures[0].position == 0
    assert report.computed == ["full"]
    assert "empty" in caplog.text

def test_repeated_empty_labels_each_reported(service, tl):
    ab = pd.DataFrame(
        [[0, 0, 0], [1, 2, 3], [np.nan, 0, np.nan]],
        index=["site", "site", "site"],
        columns=SPECIES,
    )
    res, report = service.compute_with_report(ab, tl)

    assert report.failure_count == 2
    assert [f.position for f in report.failures] == [0, 2]
    assert res.iloc[0].isna().all()
    assert res.iloc[1]["nbsp"] == 3
    assert res.iloc[2].isna().all()

def test_presence_summary_logged_at_debug(service, ab, tl, caplog):
    with caplog.at_level(logging.DEBUG, logger="trophdiv.indices.service"):
        service.compute(ab, tl)
    assert "Presence filter for 'com1'" in caplog.text
    assert "positive_abundance" in caplog.text

# --- Input shapes ---

def test_unlabeled_inputs_pair_by_position(service):
    res = service.compute(np.array([[10.0, 0.0, 5.0]]), [2.0, 3.0, 4.0])
    assert res.loc[0, "meantl"] == 2.667

def test_validation_errors_propagate(service, ab):
    with pytest.raises(DimensionMismatchError):
        service.compute(ab, pd.Series([2.0, 3.0], index=["sp1", "sp2"]))
    with pytest.raises(InvalidInputError):
        service.compute(ab, pd.Series([2.0, np.nan, 4.0], index=SPECIES))
    with pytest.raises(NameMismatchError):
        service.compute(ab, pd.Series([2.0, 3.0, 4.0], index=["sp3", "sp2", "sp1"]))

# --- Properties ---

def test_species_order_invariance(service):
    species = ["a", "b", "c", "d", "e"]
    ab = pd.DataFrame(
        [[5, 1, 0, 7, 3], [2, 2, 2, np.nan, 9], [0, 4, 4, 1, 0]],
        index=["c1", "c2", "c3"],
        columns=species,
        dtype=float,
    )
    tl = pd.Series([2.1, 3.0, 3.0, 4.4, 2.5], index=species)
    perm = ["d", "b", "e", "a", "c"]

    pd.testing.assert_frame_equal(
        service.compute(ab[perm], tl[perm]),
        service.compute(ab, tl),
    )

@pytest.mark.parametrize("seed", range(10))
def test_index_bounds_on_example_data(service, seed):
    ab, tl = generate_example(n_communities=8, n_species=10, seed=seed)
    res = service.compute(ab, tl).dropna(subset=["nbsp"])

    for _, row in res.iterrows():
        assert row["rgetl"] == pytest.approx(row["maxtl"] - row["mintl"])
        assert row["rgetl"] >= 0
        assert row["mintl"] <= row["meantl"] <= row["maxtl"]
        assert row["nbtl"] <= row["nbsp"]
        assert row["sdtl"] >= 0
        assert 0 <= row["FDvar"] < 1
        if row["nbtl"] > 2:
            assert 0 <= row["FROm"] <= 1
        else:
            assert math.isnan(row["FROm"])

def test_tied_levels_ordered_by_abundance(service):
    # b and c share level 3.0 with different abundances; column order puts
    # the larger one first, so only the abundance tie-break yields 0.5
    species = ["a", "b", "c", "d"]
    ab = pd.DataFrame([[1, 5, 1, 1]], index=["tied"], columns=species, dtype=float)
    tl = pd.Series([2.0, 3.0, 3.0, 5.0], index=species)

    res = service.compute(ab, tl)
    assert res.loc["tied", "nbtl"] == 3
    # sorted (2,1) (3,1) (3,5) (5,1): PEW = [.6, 0, .4] capped at 1/3
    assert res.loc["tied", "FROm"] == 0.5

    for perm in (["a", "c", "b", "d"], ["d", "b", "a", "c"], ["c", "d", "b", "a"]):
        pd.testing.assert_frame_equal(service.compute(ab[perm], tl[perm]), res)
