## adaptive edge subdivision for meshrand
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

"""Adaptive edge subdivision.

:func:`refine` splits edges at their midpoints until no edge is longer
than a target radius.  Work proceeds breadth-first from a FIFO queue of
too-long edges.  A split halves the edge it acts on, so an edge of
length ``L`` is split at most ``ceil(log2(L / r))`` times along its
length and the final face count is ``O(area / r**2)``.

Afterwards every edge is no longer than ``r``, the total area is
unchanged and each face keeps the orientation of the face it was cut
from.
"""

from __future__ import annotations

import logging
import math
from collections import deque
from typing import Optional, Tuple

from meshrand.config import check_radius
from meshrand.mesh import SurfaceMesh
from meshrand.topology import MeshTopology

logger = logging.getLogger(__name__)


def refine(mesh: SurfaceMesh, radius: float,
           topology: Optional[MeshTopology] = None) -> MeshTopology:
    """Split every edge of ``mesh`` longer than ``radius``, in place.

    Returns the topology kept up to date during refinement, building one
    first if ``topology`` is not given.  Edges of non-finite length
    (from non-finite vertex coordinates) are left alone.
    """

    radius = check_radius(radius)
    if topology is None:
        topology = MeshTopology(mesh)
    elif topology.mesh is not mesh:
        raise ValueError("topology was built for a different mesh")

    r_sq = radius * radius

    # an edge touching a non-finite vertex would split forever
    def too_long(edge):
        length_sq = mesh.edge_length_sq(edge)
        return math.isfinite(length_sq) and length_sq > r_sq

    skipped = [e for e in topology.edges() if not math.isfinite(mesh.edge_length_sq(e))]
    if skipped:
        logger.warning(f"{len(skipped)} edges have non-finite length and will not be refined")

    queue = deque(e for e in topology.edges() if too_long(e))
    logger.debug(f"refining to radius {radius}: {len(queue)} edges too long")

    splits = 0
    while queue:
        edge = queue.popleft()
        if edge not in topology:
            continue
        queue.extend(e for e in topology.split_edge(edge) if too_long(e))
        splits += 1

    logger.debug(f"refinement done: {splits} splits, "
                 f"{mesh.vertex_count} vertices, {mesh.face_count} faces")
    return topology


def refined_copy(vertices, faces, radius: float) -> Tuple[SurfaceMesh, MeshTopology]:
    """Validate ``vertices``/``faces`` into a new mesh and refine it.

    The caller's buffers are not modified.
    """

    mesh = SurfaceMesh(vertices, faces)
    topology = refine(mesh, radius)
    return mesh, topology


__all__ = ['refine', 'refined_copy']
