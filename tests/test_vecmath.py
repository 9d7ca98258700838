import math

import pytest

from meshrand.vecmath import (
    add,
    cross,
    dist,
    dist_sq,
    dot,
    mag,
    midpoint,
    normalize,
    scale,
    sub,
)


def test_add_sub_scale():
    a = (1.0, 2.0, 3.0)
    b = (0.5, -1.0, 2.0)
    assert add(a, b) == (1.5, 1.0, 5.0)
    assert sub(a, b) == (0.5, 3.0, 1.0)
    assert scale(a, 2.0) == (2.0, 4.0, 6.0)


def test_cross_is_right_handed():
    x = (1.0, 0.0, 0.0)
    y = (0.0, 1.0, 0.0)
    assert cross(x, y) == (0.0, 0.0, 1.0)
    assert cross(y, x) == (0.0, 0.0, -1.0)


def test_dot_mag_dist():
    assert dot((1.0, 2.0, 3.0), (4.0, -5.0, 6.0)) == 12.0
    assert mag((3.0, 4.0, 0.0)) == 5.0
    assert dist_sq((1.0, 1.0, 1.0), (2.0, 3.0, 3.0)) == 9.0
    assert dist((1.0, 1.0, 1.0), (2.0, 3.0, 3.0)) == 3.0


def test_midpoint_and_normalize():
    assert midpoint((0.0, 0.0, 0.0), (2.0, 4.0, -2.0)) == (1.0, 2.0, -1.0)
    n = normalize((0.0, 3.0, 4.0))
    assert math.isclose(mag(n), 1.0)
    assert n == pytest.approx((0.0, 0.6, 0.8))
