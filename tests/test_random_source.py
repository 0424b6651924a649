import numpy as np
import pytest

from errors import InvalidParameter
from random_source import RandomSource


def test_same_seed_same_sequence():
    first = RandomSource(123)
    second = RandomSource(123)
    assert np.array_equal(first.gaussian(0.0, 1.0, 10), second.gaussian(0.0, 1.0, 10))
    assert np.array_equal(first.weighted_indices([1, 2, 3], 10),
                          second.weighted_indices([1, 2, 3], 10))


def test_reseed_restarts_sequence():
    source = RandomSource(5)
    draws = source.gaussian(0.0, 1.0, 5)
    source.reseed(5)
    assert np.array_equal(draws, source.gaussian(0.0, 1.0, 5))


def test_zero_std_returns_mean():
    assert RandomSource(1).gaussian(2.5, 0.0) == 2.5


def test_negative_std():
    with pytest.raises(InvalidParameter):
        RandomSource(1).gaussian(0.0, -1.0)


def test_weighted_indices_needs_positive_sum():
    with pytest.raises(InvalidParameter):
        RandomSource(1).weighted_indices([0.0, 0.0], 3)


def test_uniform_indices_in_range():
    indexes = RandomSource(1).uniform_indices(4, 1000)
    assert indexes.min() >= 0
    assert indexes.max() <= 3
    assert set(indexes.tolist()) == {0, 1, 2, 3}


def test_weighted_indices_huge_weights():
    indexes = RandomSource(1).weighted_indices([1e308, 1e308, 0.0], 200)
    assert set(indexes.tolist()) == {0, 1}


def test_nan_std():
    with pytest.raises(InvalidParameter):
        RandomSource(1).gaussian(0.0, float("nan"))
