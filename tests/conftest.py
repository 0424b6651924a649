import pytest

from landmark_map import Landmark, LandmarkMap
from random_source import RandomSource


@pytest.fixture
def random_source():
    return RandomSource(42)


@pytest.fixture
def landmark_map():
    return LandmarkMap([
        Landmark(1, 5.0, 3.0),
        Landmark(2, 2.0, 1.0),
        Landmark(3, 6.0, 1.0),
        Landmark(4, 7.0, 4.0),
        Landmark(5, 4.0, 7.0),
    ])
