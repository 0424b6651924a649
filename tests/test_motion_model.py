import math

import numpy as np
import pytest

from errors import InvalidParameter
from motion_model import MotionModel
from particle import Particle


def test_straight_line_is_exact(random_source):
    motion_model = MotionModel(random_source)
    particle = Particle(0, 0.0, 0.0, 0.0)
    motion_model.sample_motion_model(particle, 0.5, [0, 0, 0], 3.0, 0.0)
    assert particle.x == 3.0 * 0.5
    assert particle.y == 0.0
    assert particle.theta == 0.0


def test_arc_matches_closed_form(random_source):
    motion_model = MotionModel(random_source)
    v, w, t = 2.0, 0.4, 1.5
    particle = Particle(0, 0.0, 0.0, 0.0)
    motion_model.sample_motion_model(particle, t, [0, 0, 0], v, w)
    assert particle.x == pytest.approx((v/w) * math.sin(w*t))
    assert particle.y == pytest.approx((v/w) * (1 - math.cos(w*t)))
    assert particle.theta == pytest.approx(w*t)


def test_negative_yaw_rate_turns_clockwise(random_source):
    motion_model = MotionModel(random_source)
    x, y, theta = motion_model.predict_pose(0.0, 0.0, 0.0, 1.0, 1.0, -0.5)
    assert x > 0
    assert y < 0
    assert theta == pytest.approx(-0.5)


def test_yaw_rate_below_threshold_goes_straight(random_source):
    motion_model = MotionModel(random_source)
    x, y, theta = motion_model.predict_pose(1.0, 2.0, math.pi/2, 2.0, 1.0, 1e-9)
    assert x == pytest.approx(1.0)
    assert y == pytest.approx(4.0)
    assert theta == pytest.approx(math.pi/2 + 2e-9)


def test_arc_converges_to_straight_line(random_source):
    motion_model = MotionModel(random_source)
    arc = motion_model.predict_pose(0.0, 0.0, 0.3, 1.0, 5.0, 1e-4)
    line = motion_model.predict_pose(0.0, 0.0, 0.3, 1.0, 5.0, 0.0)
    assert np.allclose(arc, line, atol=1e-3)


def test_noise_spread_matches_std(random_source):
    motion_model = MotionModel(random_source)
    particles = [Particle(i, 0.0, 0.0, 0.0) for i in range(4000)]
    for particle in particles:
        motion_model.sample_motion_model(particle, 1.0, [0.5, 0.2, 0.05], 0.0, 0.0)
    xs = np.array([p.x for p in particles])
    ys = np.array([p.y for p in particles])
    thetas = np.array([p.theta for p in particles])
    assert abs(xs.mean()) < 0.05
    assert xs.std() == pytest.approx(0.5, rel=0.1)
    assert ys.std() == pytest.approx(0.2, rel=0.1)
    assert thetas.std() == pytest.approx(0.05, rel=0.1)


def test_weight_is_untouched(random_source):
    motion_model = MotionModel(random_source)
    particle = Particle(0, 0.0, 0.0, 0.0, weight=0.25)
    motion_model.sample_motion_model(particle, 1.0, [0.1, 0.1, 0.1], 1.0, 0.1)
    assert particle.weight == 0.25


@pytest.mark.parametrize("delta_t, std_pos", [
    (0.0, [0, 0, 0]),
    (-0.1, [0, 0, 0]),
    (0.1, [0.1, -0.1, 0]),
    (0.1, [0.1, 0.1]),
])
def test_invalid_parameters(random_source, delta_t, std_pos):
    motion_model = MotionModel(random_source)
    with pytest.raises(InvalidParameter):
        motion_model.check_parameters(delta_t, std_pos)
