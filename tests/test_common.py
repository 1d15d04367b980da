import random

import pytest

from pangsim.common import (
    BallSize,
    distance,
    rand_bit,
    rand_dom,
    rand_domf,
    segment_distance_sq,
)


class FixedRandom:
    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value


def test_ball_sizes_are_ordered():
    assert BallSize.SMALL < BallSize.MEDIUM < BallSize.BIG
    assert BallSize(BallSize.BIG - 1) is BallSize.MEDIUM
    assert BallSize(BallSize.MEDIUM - 1) is BallSize.SMALL


def test_ball_size_zero_is_invalid():
    with pytest.raises(ValueError):
        BallSize(BallSize.SMALL - 1)


def test_distance_pythagorean():
    assert distance(0, 0, 3, 4) == pytest.approx(5.0)


def test_distance_is_symmetric_and_zero_on_self():
    assert distance(1.5, -2.0, 7.0, 3.0) == pytest.approx(distance(7.0, 3.0, 1.5, -2.0))
    assert distance(2.0, 2.0, 2.0, 2.0) == 0.0


def test_segment_distance_point_on_segment_is_zero():
    assert segment_distance_sq(2.0, 0.0, 0.0, 0.0, 4.0, 0.0) == pytest.approx(0.0)


def test_segment_distance_perpendicular():
    assert segment_distance_sq(1.0, 2.0, 0.0, 0.0, 4.0, 0.0) == pytest.approx(4.0)


def test_segment_distance_before_a_uses_a():
    got = segment_distance_sq(-3.0, 1.0, 0.0, 0.0, 4.0, 0.0)
    assert got == pytest.approx(distance(-3.0, 1.0, 0.0, 0.0) ** 2)


def test_segment_distance_past_b_uses_b():
    got = segment_distance_sq(7.0, -2.0, 0.0, 0.0, 4.0, 0.0)
    assert got == pytest.approx(distance(7.0, -2.0, 4.0, 0.0) ** 2)


def test_segment_distance_degenerate_segment():
    got = segment_distance_sq(1.0, 1.0, 3.0, 3.0, 3.0, 3.0)
    assert got == pytest.approx(distance(1.0, 1.0, 3.0, 3.0) ** 2)


def test_segment_distance_never_exceeds_endpoint_distance():
    rng = random.Random(7)
    for _ in range(200):
        px, py, ax, ay, bx, by = (rng.uniform(-10, 10) for _ in range(6))
        d = segment_distance_sq(px, py, ax, ay, bx, by)
        assert d <= distance(px, py, ax, ay) ** 2 + 1e-9
        assert d <= distance(px, py, bx, by) ** 2 + 1e-9


def test_rand_dom_bounds():
    assert rand_dom(FixedRandom(0.0), 0, 20) == 0
    assert rand_dom(FixedRandom(0.9999999), 0, 20) == 20


def test_rand_dom_stays_in_range():
    rng = random.Random(3)
    values = {rand_dom(rng, -2, 2) for _ in range(500)}
    assert values == {-2, -1, 0, 1, 2}


def test_rand_domf_range():
    assert rand_domf(FixedRandom(0.0), 2.5, 7.5) == 2.5
    rng = random.Random(11)
    for _ in range(200):
        assert 2.5 <= rand_domf(rng, 2.5, 7.5) < 7.5


def test_rand_bit():
    assert rand_bit(FixedRandom(0.5)) == 1
    assert rand_bit(FixedRandom(0.49)) == 0