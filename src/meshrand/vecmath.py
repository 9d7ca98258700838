## three-vector arithmetic for meshrand
## Copyright (c) 2026 the meshrand authors

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""three-vector arithmetic for **meshrand**

Vectors are plain ``(x, y, z)`` tuples of floats.  All functions are
pure and return new tuples.
"""

from __future__ import annotations

from math import sqrt
from typing import Tuple

Vec3 = Tuple[float, float, float]


def add(a: Vec3, b: Vec3) -> Vec3:
    """ 3 vector, `a + b`"""
    return (a[0] + b[0], a[1] + b[1], a[2] + b[2])


def sub(a: Vec3, b: Vec3) -> Vec3:
    """ 3 vector, `a - b`"""
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def scale(a: Vec3, c: float) -> Vec3:
    """ 3 vector ``a`` times scalar ``c``"""
    return (a[0] * c, a[1] * c, a[2] * c)


def cross(a: Vec3, b: Vec3) -> Vec3:
    """ 3 vector ``a`` cross ``b``, right-handed"""
    return (a[1] * b[2] - a[2] * b[1],
            a[2] * b[0] - a[0] * b[2],
            a[0] * b[1] - a[1] * b[0])


def dot(a: Vec3, b: Vec3) -> float:
    """ 3 vector ``a`` dot ``b`` """
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def mag_sq(a: Vec3) -> float:
    return a[0] * a[0] + a[1] * a[1] + a[2] * a[2]


def mag(a: Vec3) -> float:
    """ compute the magnitude of 3 vector ``a``"""
    return sqrt(mag_sq(a))


def dist_sq(a: Vec3, b: Vec3) -> float:
    """squared euclidean distance between points ``a`` and ``b``"""
    dx = a[0] - b[0]
    dy = a[1] - b[1]
    dz = a[2] - b[2]
    return dx * dx + dy * dy + dz * dz


def dist(a: Vec3, b: Vec3) -> float:
    return sqrt(dist_sq(a, b))


def midpoint(a: Vec3, b: Vec3) -> Vec3:
    return ((a[0] + b[0]) / 2.0, (a[1] + b[1]) / 2.0, (a[2] + b[2]) / 2.0)


def normalize(a: Vec3) -> Vec3:
    """Return ``a`` scaled to unit length.

    Raises ``ZeroDivisionError`` for the zero vector; callers that may
    see degenerate input check the magnitude first.
    """

    length = mag(a)
    return (a[0] / length, a[1] / length, a[2] / length)


__all__ = [
    "Vec3",
    "add",
    "sub",
    "scale",
    "cross",
    "dot",
    "mag_sq",
    "mag",
    "dist_sq",
    "dist",
    "midpoint",
    "normalize",
]
