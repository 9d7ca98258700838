## adjacency-guided Poisson-disk surface sampling for meshrand
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

"""Poisson-disk ("blue noise") sampling of a mesh surface.

Dart throwing: candidates are drawn from the area-uniform distribution
and accepted only if no previously accepted point lies within the
separation radius ``r``.  Comparing every candidate against every
accepted point costs O(n) per candidate.  Instead, the mesh is first
refined so that no edge is longer than ``r``, and accepted points are
stored in one bucket per face.  A conflict check is then a breadth-first
walk over the face adjacency graph starting at the candidate's face,
which only continues through faces close enough to the candidate to
matter.  With roughly uniform curvature that is a bounded neighbourhood,
giving expected O(1) work per candidate.

How close is "close enough" is ``search_reach * r``.  On flat regions a
reach of 1.0 already finds every conflict; a crease with dihedral angle
``theta`` needs ``search_reach >= 1 / sin(theta)``.  Points on parts of
the surface that are close in space but far apart along the surface
are not checked against each other.  For example, on two sheets folded
into a narrow V with a 10 degree opening, points on opposite sheets a
few ``r`` away from the fold line are within ``r`` of each other in
space but several ``r`` apart along the mesh, beyond any reasonable
reach, so they can both be accepted.  Thin shells and self-intersecting
meshes behave the same way.

The result lists the accepted points bucket by bucket in face-index
order, each bucket in acceptance order.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import List, Optional, Sequence

from meshrand.config import PoissonDiskConfig, SEARCH_REACH, check_radius, check_search_reach
from meshrand.mesh import SurfaceMesh, has_repeated_vertex
from meshrand.subdivision import refine
from meshrand.surface.uniform import UniformSurfaceSampler
from meshrand.topology import MeshTopology
from meshrand.triangle import RandomSource, Triangle, points_within_sphere
from meshrand.vecmath import Vec3, dist_sq

logger = logging.getLogger(__name__)


class PoissonDiskSampler:
    """Minimum-separation sampler over a mesh refined to spacing ``radius``.

    Build it with :func:`build_poisson_disk_surface`; the constructor
    expects a mesh already refined to ``radius`` together with its
    topology and a uniform sampler over the same faces.
    """

    def __init__(self, radius: float, mesh: SurfaceMesh, topology: MeshTopology,
                 sampler: UniformSurfaceSampler, search_reach: float = SEARCH_REACH):
        self.radius = check_radius(radius)
        self.search_reach = check_search_reach(search_reach)
        self.mesh = mesh
        self.topology = topology
        self.sampler = sampler

        self._triangles: List[Optional[Triangle]] = [None] * mesh.face_count
        for f_id, triangle in zip(sampler.face_indices, sampler.triangles):
            self._triangles[f_id] = triangle

    @property
    def face_count(self) -> int:
        return self.mesh.face_count

    def sample_blue_noise(self, retry_limit: int, max_samples: int,
                          rng: RandomSource) -> List[Vec3]:
        """Run dart throwing and return the accepted points.

        Stops after ``retry_limit`` consecutive rejections or once
        ``max_samples`` points were accepted, whichever comes first.
        Running out of retries is the normal way for a dense run to end.
        """

        buckets = self.sample_blue_noise_buckets(retry_limit, max_samples, rng)
        return [p for bucket in buckets for p in bucket]

    def sample_blue_noise_buckets(self, retry_limit: int, max_samples: int,
                                  rng: RandomSource) -> List[List[Vec3]]:
        """Like :meth:`sample_blue_noise`, but keep the per-face buckets.

        ``buckets[f]`` holds the points accepted on face ``f`` of the
        refined mesh, in acceptance order.
        """

        if retry_limit < 0:
            raise ValueError(f"retry_limit must be >= 0, got {retry_limit}")
        if max_samples < 0:
            raise ValueError(f"max_samples must be >= 0, got {max_samples}")

        buckets: List[List[Vec3]] = [[] for _ in range(self.face_count)]
        accepted = 0
        failures = 0
        while failures < retry_limit and accepted < max_samples:
            candidate = self.sampler.sample(rng)
            position = candidate.position
            root = candidate.triangle_index
            if self._has_conflict(position, root, buckets):
                failures += 1
            else:
                buckets[root].append(position)
                accepted += 1
                failures = 0

        if accepted < max_samples:
            logger.debug(f"stopped after {retry_limit} consecutive rejections "
                         f"with {accepted} points accepted")
        return buckets

    def _within_reach(self, f_id: int, position: Vec3, reach: float) -> bool:
        triangle = self._triangles[f_id]
        if triangle is None:
            # no area, so every point of the face is within r/2 of a corner
            return points_within_sphere(self.mesh.face_points(f_id), position,
                                        reach + self.radius)
        if triangle.intersects_sphere(position, reach):
            return True
        return triangle.distance_sq(position) <= reach * reach

    def _has_conflict(self, position: Vec3, root: int,
                      buckets: Sequence[Sequence[Vec3]]) -> bool:
        r_sq = self.radius * self.radius
        reach = self.search_reach * self.radius

        visited = {root}
        frontier = deque([root])
        while frontier:
            f_id = frontier.popleft()
            if f_id != root and not self._within_reach(f_id, position, reach):
                continue
            for p in buckets[f_id]:
                if dist_sq(p, position) < r_sq:
                    return True
            for other in self.topology.neighbors(f_id):
                if other not in visited:
                    visited.add(other)
                    frontier.append(other)
        return False


def build_poisson_disk_surface(radius: float, vertices, faces,
                               search_reach: float = SEARCH_REACH) -> PoissonDiskSampler:
    """Refine a copy of the mesh to spacing ``radius`` and build a sampler.

    Faces that repeat a vertex index have no area and cannot be split;
    they are dropped before refinement.  Raises ``IndexOutOfRangeError``,
    ``NonManifoldEdgeError`` or ``EmptyInputError`` for unusable input.
    """

    radius = check_radius(radius)
    search_reach = check_search_reach(search_reach)
    mesh = SurfaceMesh(vertices, faces)

    kept = [face for face in mesh.faces if not has_repeated_vertex(face)]
    if len(kept) != mesh.face_count:
        logger.debug(f"dropped {mesh.face_count - len(kept)} faces with repeated vertices")
        mesh = SurfaceMesh.from_trusted(mesh.vertices, kept)

    topology = refine(mesh, radius)
    sampler = UniformSurfaceSampler.from_mesh(mesh)
    logger.info(f"refined mesh to radius {radius}: {mesh.face_count} faces "
                f"({len(sampler)} sampled), max edge {mesh.max_edge_length():.6g}")
    return PoissonDiskSampler(radius, mesh, topology, sampler, search_reach)


def poisson_disk_sample(vertices, faces, config: PoissonDiskConfig,
                        rng: RandomSource) -> List[Vec3]:
    """Build a sampler from ``config`` and run it once."""

    sampler = build_poisson_disk_surface(config.radius, vertices, faces,
                                         search_reach=config.search_reach)
    return sampler.sample_blue_noise(config.retry_limit, config.max_samples, rng)


__all__ = [
    'PoissonDiskSampler',
    'build_poisson_disk_surface',
    'poisson_disk_sample',
]
