## triangle geometry and in-triangle sampling for meshrand
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

"""Triangle geometry and in-triangle sampling.

A :class:`Triangle` is an immutable snapshot of one mesh face.  Its
normal follows the right-hand rule of the ``(p1, p2, p3)`` winding, so
swapping any two vertices flips it; outward-facing normals survive as
long as the face winding does.
"""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from typing import Iterable, Protocol, Tuple

from meshrand.errors import DegenerateTriangleError
from meshrand.vecmath import Vec3, add, cross, dist_sq, dot, mag, normalize, scale, sub


class RandomSource(Protocol):
    """Anything with a ``random()`` method returning floats in ``[0, 1)``.

    Both :class:`random.Random` and :class:`numpy.random.Generator`
    qualify.
    """

    def random(self) -> float: ...


def is_normal_area(area: float) -> bool:
    """Return ``True`` if ``area`` is finite, positive and not subnormal."""

    return math.isfinite(area) and area >= sys.float_info.min


def points_within_sphere(points: Iterable[Vec3], center: Vec3, r: float) -> bool:
    """Return ``True`` if any of ``points`` lies within ``r`` of ``center``."""

    r_sq = r * r
    return any(dist_sq(center, p) <= r_sq for p in points)


@dataclass(frozen=True)
class Triangle:
    """Immutable triangle with precomputed edge vectors, normal and area.

    ``u`` and ``v`` are the edge vectors ``p2 - p1`` and ``p3 - p1``
    spanning the triangle from ``origin = p1``.
    """

    points: Tuple[Vec3, Vec3, Vec3]
    origin: Vec3
    u: Vec3
    v: Vec3
    normal: Vec3
    area: float

    @classmethod
    def from_points(cls, p1: Vec3, p2: Vec3, p3: Vec3) -> "Triangle":
        """Build a triangle, raising ``DegenerateTriangleError`` if it has no area."""

        u = sub(p2, p1)
        v = sub(p3, p1)
        normal_dir = cross(u, v)
        length = mag(normal_dir)
        area = length / 2.0
        if not is_normal_area(area):
            raise DegenerateTriangleError(
                f"triangle area too close to 0 or not finite ({area!r})",
                {'points': (p1, p2, p3), 'area': area})
        normal = normalize(normal_dir)
        return cls(points=(p1, p2, p3), origin=p1, u=u, v=v, normal=normal, area=area)

    @property
    def centroid(self) -> Vec3:
        p1, p2, p3 = self.points
        return ((p1[0] + p2[0] + p3[0]) / 3.0,
                (p1[1] + p2[1] + p3[1]) / 3.0,
                (p1[2] + p2[2] + p3[2]) / 3.0)

    @property
    def max_edge_sq(self) -> float:
        """Squared length of the longest edge."""
        p1, p2, p3 = self.points
        return max(dist_sq(p1, p2), dist_sq(p2, p3), dist_sq(p3, p1))

    def sample_point(self, rng: RandomSource) -> Vec3:
        """Return a point uniformly distributed over the triangle's area.

        Two uniform draws pick a point in the parallelogram spanned by
        ``u`` and ``v``; points falling in the far half are folded back
        by reflecting both coordinates, which maps the parallelogram onto
        the triangle with uniform density and consumes exactly two draws.
        """

        a = rng.random()
        b = rng.random()
        if a + b > 1.0:
            a = 1.0 - a
            b = 1.0 - b
        return add(self.origin, add(scale(self.v, b), scale(self.u, a)))

    def intersects_sphere(self, center: Vec3, r: float) -> bool:
        """Approximate test: is any vertex within ``r`` of ``center``?

        This is not an exact triangle/sphere distance.  It is a safe
        proximity test only for triangles whose edges are all no longer
        than ``r``, as produced by :func:`meshrand.subdivision.refine`;
        use :meth:`distance_sq` when an exact answer is needed.
        """

        return points_within_sphere(self.points, center, r)

    def closest_point(self, p: Vec3) -> Vec3:
        """Return the point of the triangle nearest to ``p``.

        Classifies ``p`` against the Voronoi regions of the triangle's
        vertices, edges and face, so no projection onto the plane is
        needed.
        """

        a, b, c = self.points
        ab = self.u
        ac = self.v

        ap = sub(p, a)
        d1 = dot(ab, ap)
        d2 = dot(ac, ap)
        if d1 <= 0.0 and d2 <= 0.0:
            return a

        bp = sub(p, b)
        d3 = dot(ab, bp)
        d4 = dot(ac, bp)
        if d3 >= 0.0 and d4 <= d3:
            return b

        vc = d1 * d4 - d3 * d2
        if vc <= 0.0 and d1 >= 0.0 and d3 <= 0.0:
            return add(a, scale(ab, d1 / (d1 - d3)))

        cp = sub(p, c)
        d5 = dot(ab, cp)
        d6 = dot(ac, cp)
        if d6 >= 0.0 and d5 <= d6:
            return c

        vb = d5 * d2 - d1 * d6
        if vb <= 0.0 and d2 >= 0.0 and d6 <= 0.0:
            return add(a, scale(ac, d2 / (d2 - d6)))

        va = d3 * d6 - d5 * d4
        if va <= 0.0 and (d4 - d3) >= 0.0 and (d5 - d6) >= 0.0:
            w = (d4 - d3) / ((d4 - d3) + (d5 - d6))
            return add(b, scale(sub(c, b), w))

        denom = 1.0 / (va + vb + vc)
        return add(a, add(scale(ab, vb * denom), scale(ac, vc * denom)))

    def distance_sq(self, p: Vec3) -> float:
        """Exact squared distance from ``p`` to the triangle."""
        return dist_sq(p, self.closest_point(p))


__all__ = [
    'RandomSource',
    'Triangle',
    'is_normal_area',
    'points_within_sphere',
]
