"""Tests for the raw metric functions (no validation layer)."""

import math

import numpy as np
import pytest

from simscore.modes import SimilarityMode
from simscore.similarity_metrics import (
    METRICS,
    as_vector,
    cosine_similarity,
    dice_coefficient,
    dot,
    hamming_distance,
    jaccard_distance,
    jaccard_index,
    magnitude,
    ochiai_similarity,
    tanimoto_similarity,
    value_set,
)


def test_dot_and_magnitude():
    assert dot([1.0, 2.0, 3.0], [4.0, 5.0, 6.0]) == 32.0
    assert magnitude([3.0, 4.0]) == 5.0


def test_cosine_identical_vectors():
    assert cosine_similarity([1.0, 2.0, 3.0], [1.0, 2.0, 3.0]) == pytest.approx(1.0)


def test_cosine_orthogonal_vectors():
    assert cosine_similarity([1.0, 0.0], [0.0, 1.0]) == 0.0


def test_cosine_opposite_vectors():
    assert cosine_similarity([1.0, 0.0], [-1.0, 0.0]) == pytest.approx(-1.0)


def test_cosine_zero_vector_is_nan():
    assert math.isnan(cosine_similarity([0.0, 0.0], [1.0, 1.0]))


def test_tanimoto_identical_vectors():
    assert tanimoto_similarity([1.0, 2.0], [1.0, 2.0]) == pytest.approx(1.0)


def test_tanimoto_known_value():
    # dot = 2, |a|^2 = 2, |b|^2 = 4 -> 2 / (2 + 4 - 2)
    assert tanimoto_similarity([1.0, 1.0], [2.0, 0.0]) == pytest.approx(0.5)


def test_value_set_collapses_order_and_duplicates():
    assert value_set([1.0, 1.0, 2.0]) == value_set([2.0, 1.0])
    assert value_set([]) == frozenset()


def test_ochiai_uses_set_sizes():
    # A = {1, 2}, B = {2, 3, 4}; |A∩B| = 1
    assert ochiai_similarity([1.0, 2.0, 2.0], [2.0, 3.0, 4.0]) == pytest.approx(1 / math.sqrt(6))


def test_jaccard_index_example():
    assert jaccard_index([1.0, 2.0, 3.0], [2.0, 3.0, 4.0]) == 0.5


def test_jaccard_distance_is_complement():
    a, b = [1.0, 2.0, 5.0], [2.0, 7.0]
    assert jaccard_distance(a, b) == pytest.approx(1.0 - jaccard_index(a, b))


def test_dice_example():
    # {1,2,3} vs {2,3,4}: 2*2 / (3+3)
    assert dice_coefficient([1.0, 2.0, 3.0], [2.0, 3.0, 4.0]) == pytest.approx(2 / 3)


def test_set_metrics_ignore_multiplicity():
    assert jaccard_index([1.0, 1.0, 1.0], [1.0]) == 1.0
    assert dice_coefficient([2.0, 1.0], [1.0, 2.0, 2.0]) == 1.0


def test_hamming_counts_differences():
    assert hamming_distance([1.0, 2.0, 3.0], [1.0, 5.0, 3.0]) == 1.0
    assert hamming_distance([1.0, 2.0], [3.0, 4.0]) == 2.0


def test_hamming_empty_is_zero():
    assert hamming_distance([], []) == 0.0


def test_metrics_accept_numpy_arrays():
    a = np.array([1.0, 0.0])
    b = np.array([1.0, 0.0])
    assert cosine_similarity(a, b) == 1.0
    assert hamming_distance(a, b) == 0.0


def test_every_mode_has_a_metric():
    assert set(METRICS) == set(SimilarityMode)


def test_results_are_python_floats():
    for fn in METRICS.values():
        assert type(fn([1.0, 2.0], [2.0, 3.0])) is float


def test_as_vector_rejects_scalars_and_matrices():
    with pytest.raises(ValueError):
        as_vector(3.0)
    with pytest.raises(ValueError):
        as_vector(np.ones((2, 2)))
    assert as_vector([]).shape == (0,)
