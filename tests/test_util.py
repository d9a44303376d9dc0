import math
from unittest import mock

import pytest

from overhead import util


@pytest.mark.parametrize("n", [1, 2, 7, 100])
def test_random_up_to_in_range(n):
    values = {util.random_up_to(n) for _ in range(200)}
    assert all(0 <= v < n for v in values)


def test_random_up_to_one_is_zero():
    assert {util.random_up_to(1) for _ in range(20)} == {0}


@pytest.mark.parametrize("n", [0, -3])
def test_random_up_to_rejects_non_positive(n):
    with pytest.raises(ValueError):
        util.random_up_to(n)


def test_sample_unit_in_range():
    samples = [util.sample_unit() for _ in range(500)]
    assert all(0.0 <= s <= 1.0 for s in samples)


def test_sample_unit_circle_has_unit_length():
    for _ in range(100):
        x, y = util.sample_unit_circle()
        assert math.hypot(x, y) == pytest.approx(1.0)


def test_init_random_is_deterministic_for_same_time():
    with mock.patch("time.time", return_value=1234.0):
        util.init_random()
        first = [util.random_up_to(1000) for _ in range(10)]
        util.init_random()
        second = [util.random_up_to(1000) for _ in range(10)]
    assert first == second