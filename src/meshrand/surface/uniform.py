## area-uniform surface sampling for meshrand
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

"""Area-uniform sampling of a mesh surface.

A triangle is picked with probability proportional to its area, then a
point is picked uniformly inside it, so positions are uniform with
respect to surface area.

Example
-------
>>> import random
>>> from meshrand import build_uniform_surface
>>> verts = [(1, 0, 0), (0, 1, 0), (0, 0, 1), (1, 2, 0)]
>>> faces = [(0, 1, 2), (0, 1, 3)]
>>> surface = build_uniform_surface(verts, faces)
>>> sample = surface.sample(random.Random(7))
>>> sample.triangle_index in (0, 1)
True
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Sequence

from meshrand.alias import AliasTable
from meshrand.errors import DegenerateTriangleError, EmptyInputError
from meshrand.mesh import SurfaceMesh
from meshrand.triangle import RandomSource, Triangle
from meshrand.vecmath import Vec3

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SurfaceSample:
    """A point generated on a mesh surface.

    Attributes:
        position: The generated point
        triangle_index: Index of the face containing the point, in the
            face buffer the sampler was built from
        triangle: The triangle containing the point
    """
    position: Vec3
    triangle_index: int
    triangle: Triangle

    @property
    def normal(self) -> Vec3:
        """Unit normal of the containing triangle, following its winding."""
        return self.triangle.normal


class UniformSurfaceSampler:
    """Distribution of points uniform over the area of a triangle mesh."""

    def __init__(self, triangles: Sequence[Triangle], face_indices: Sequence[int]):
        if len(triangles) != len(face_indices):
            raise ValueError("triangles and face_indices must have the same length")
        self._triangles = list(triangles)
        self._face_indices = list(face_indices)
        # AliasTable raises EmptyInputError when there is nothing to sample
        self._table = AliasTable([t.area for t in self._triangles])

    @classmethod
    def from_mesh(cls, mesh: SurfaceMesh) -> "UniformSurfaceSampler":
        """Build a sampler over the faces of ``mesh``.

        Degenerate faces are skipped.  Raises ``EmptyInputError`` if
        there are no faces or none of them has a usable area.
        """

        triangles: List[Triangle] = []
        face_indices: List[int] = []
        degenerate = 0
        for f_id in range(mesh.face_count):
            try:
                triangle = mesh.triangle(f_id)
            except DegenerateTriangleError:
                degenerate += 1
                continue
            triangles.append(triangle)
            face_indices.append(f_id)

        if degenerate:
            logger.debug(f"skipped {degenerate} degenerate faces out of {mesh.face_count}")
        if not triangles:
            if mesh.face_count == 0:
                message = "faces array is empty"
            else:
                message = f"all {mesh.face_count} faces are degenerate"
            raise EmptyInputError(message, {'faces': mesh.face_count,
                                            'degenerate': degenerate})
        return cls(triangles, face_indices)

    def __len__(self) -> int:
        return len(self._triangles)

    @property
    def triangles(self) -> List[Triangle]:
        return list(self._triangles)

    @property
    def face_indices(self) -> List[int]:
        """Face index of each sampled triangle, in the same order."""
        return list(self._face_indices)

    @property
    def total_area(self) -> float:
        return sum(t.area for t in self._triangles)

    def sample(self, rng: RandomSource) -> SurfaceSample:
        """Draw one :class:`SurfaceSample`."""
        slot = self._table.sample(rng)
        triangle = self._triangles[slot]
        return SurfaceSample(position=triangle.sample_point(rng),
                             triangle_index=self._face_indices[slot],
                             triangle=triangle)

    def sample_many(self, count: int, rng: RandomSource) -> List[SurfaceSample]:
        if count < 0:
            raise ValueError(f"count must be >= 0, got {count}")
        return [self.sample(rng) for _ in range(count)]


def build_uniform_surface(vertices, faces) -> UniformSurfaceSampler:
    """Build a :class:`UniformSurfaceSampler` from vertex and face buffers.

    Raises ``IndexOutOfRangeError`` if a face references a missing
    vertex and ``EmptyInputError`` if no usable triangle remains.
    """
    return UniformSurfaceSampler.from_mesh(SurfaceMesh(vertices, faces))


__all__ = ['SurfaceSample', 'UniformSurfaceSampler', 'build_uniform_surface']
