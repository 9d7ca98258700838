## edge/face adjacency for meshrand meshes
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

"""Edge to face adjacency for triangle meshes.

:class:`MeshTopology` maps every canonical edge key to the one or two
faces that use it, and answers "which faces share an edge with face
``f``?".  The adjacency graph over faces doubles as a spatial index for
the Poisson-disk sampler, so it has to stay exact while the mesh is
refined.  All mutation goes through :meth:`MeshTopology.split_edge`.
"""

from __future__ import annotations

from typing import Dict, Iterator, List, Tuple

from meshrand.errors import DegenerateTriangleError, NonManifoldEdgeError
from meshrand.mesh import EdgeKey, SurfaceMesh, edge_key, face_edges, has_repeated_vertex
from meshrand.vecmath import midpoint

AdjacencyIndex = Dict[EdgeKey, List[int]]


def _build_index(mesh: SurfaceMesh) -> AdjacencyIndex:
    index: AdjacencyIndex = {}
    for f_id, face in enumerate(mesh.faces):
        if has_repeated_vertex(face):
            raise DegenerateTriangleError(
                f"face at index {f_id} repeats a vertex index: {face}",
                {'face': f_id})
        for key in face_edges(face):
            index.setdefault(key, []).append(f_id)
    return index


def _check_manifold(index: AdjacencyIndex) -> None:
    for key, incident in index.items():
        if len(incident) > 2:
            raise NonManifoldEdgeError(
                f"edge {key} is shared by more than two faces: {incident}",
                {'edge': key, 'faces': list(incident)})


class MeshTopology:
    """Adjacency index over the faces of a :class:`SurfaceMesh`.

    The topology holds a reference to ``mesh`` and mutates it in
    :meth:`split_edge`; nothing else may edit the mesh while the
    topology is in use.
    """

    def __init__(self, mesh: SurfaceMesh):
        self.mesh = mesh
        self._index = _build_index(mesh)
        _check_manifold(self._index)

    @classmethod
    def build(cls, mesh: SurfaceMesh) -> "MeshTopology":
        return cls(mesh)

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, edge) -> bool:
        return edge_key(*edge) in self._index

    def edges(self) -> Iterator[EdgeKey]:
        return iter(list(self._index))

    def incident_faces(self, edge: EdgeKey) -> Tuple[int, ...]:
        return tuple(self._index.get(edge_key(*edge), ()))

    def neighbors(self, face_index: int) -> Iterator[int]:
        """Yield the faces sharing an edge with ``face_index``.

        ``face_index`` itself is never yielded.  A face sharing two edges
        with ``face_index`` is yielded twice; callers de-duplicate.
        """

        for key in face_edges(self.mesh.faces[face_index]):
            for other in self._index[key]:
                if other != face_index:
                    yield other

    def is_consistent(self) -> bool:
        """Does the incremental index match a fresh build of the current faces?"""

        fresh = _build_index(self.mesh)
        if fresh.keys() != self._index.keys():
            return False
        return all(sorted(fresh[k]) == sorted(self._index[k]) for k in fresh)

    def split_edge(self, edge: EdgeKey) -> List[EdgeKey]:
        """Split ``edge`` at its midpoint and return the edges that changed.

        Each face ``f`` incident to ``edge = (e0, e1)`` is cut in two
        along the line from the new midpoint vertex ``m`` to the vertex
        ``c`` opposite the edge.  ``f`` keeps its slot and becomes the
        ``e0`` half; the ``e1`` half is appended as a new face.  Both
        halves keep the winding of ``f``.

        The returned keys are every distinct ``(m, c)``, then ``(m, e1)``
        and ``(e0, m)``: the new edges whose length the caller may need
        to re-check.  When two incident faces have the same vertex set,
        their spokes coincide and that edge ends up shared by four faces.
        """

        e0, e1 = edge_key(*edge)
        key = (e0, e1)
        if key not in self._index:
            raise ValueError(f"edge {key} is not part of the mesh")
        mesh = self.mesh

        nv = mesh.add_vertex(midpoint(mesh.vertices[e0], mesh.vertices[e1]))
        incident = self._index.pop(key)

        new_edges: List[EdgeKey] = []
        new_faces: List[int] = []
        for f_id in incident:
            face = mesh.faces[f_id]
            c = next(i for i in face if i != e0 and i != e1)

            mesh.faces[f_id] = tuple(nv if i == e1 else i for i in face)
            new_id = mesh.add_face(tuple(nv if i == e0 else i for i in face))
            new_faces.append(new_id)

            outer = self._index[edge_key(e1, c)]
            outer[outer.index(f_id)] = new_id

            # coincident faces (a double-sided sheet) share the same c
            spoke = edge_key(nv, c)
            shared = self._index.setdefault(spoke, [])
            if not shared:
                new_edges.append(spoke)
            shared.extend((f_id, new_id))

        upper = edge_key(nv, e1)
        self._index[upper] = new_faces
        new_edges.append(upper)

        lower = edge_key(e0, nv)
        self._index[lower] = incident
        new_edges.append(lower)
        return new_edges


__all__ = ['AdjacencyIndex', 'MeshTopology']
