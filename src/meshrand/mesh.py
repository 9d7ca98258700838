## indexed triangle mesh buffers for meshrand
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

"""Indexed triangle mesh buffers.

A :class:`SurfaceMesh` holds parallel ``vertices`` and ``faces`` lists.
Faces are triples of 0-based vertex indices.  Both lists only grow:
refinement appends vertices and faces and may overwrite a face slot in
place, but never removes or reorders anything, so an index handed out
once stays valid.
"""

from __future__ import annotations

from typing import Iterable, Iterator, List, Sequence, Tuple

import numpy as np

from meshrand.errors import IndexOutOfRangeError, MeshError
from meshrand.triangle import Triangle
from meshrand.vecmath import Vec3, dist_sq

Face = Tuple[int, int, int]
EdgeKey = Tuple[int, int]


def edge_key(a: int, b: int) -> EdgeKey:
    """Canonical (sorted) key for the edge between vertices ``a`` and ``b``."""
    return (a, b) if a < b else (b, a)


def face_edges(face: Sequence[int]) -> Tuple[EdgeKey, EdgeKey, EdgeKey]:
    a, b, c = face
    return edge_key(a, b), edge_key(b, c), edge_key(c, a)


def has_repeated_vertex(face: Sequence[int]) -> bool:
    a, b, c = face
    return a == b or b == c or c == a


def _vertex_array(vertices) -> np.ndarray:
    arr = np.asarray(vertices, dtype=np.float64)
    if arr.size == 0:
        return arr.reshape(0, 3)
    if arr.ndim != 2 or arr.shape[1] != 3:
        raise MeshError(f"vertices must have shape (n, 3), got {arr.shape}",
                        {'shape': arr.shape})
    return arr


def _face_array(faces) -> np.ndarray:
    arr = np.asarray(faces)
    if arr.size == 0:
        return np.zeros((0, 3), dtype=np.int64)
    if arr.ndim != 2 or arr.shape[1] != 3:
        raise MeshError(f"faces must have shape (n, 3), got {arr.shape}",
                        {'shape': arr.shape})
    if not np.issubdtype(arr.dtype, np.integer):
        raise MeshError(f"face indices must be integers, got {arr.dtype}",
                        {'dtype': str(arr.dtype)})
    return arr.astype(np.int64)


def check_face_indices(faces: np.ndarray, vertex_count: int) -> None:
    """Raise ``IndexOutOfRangeError`` for the first face with a bad index."""

    bad = (faces < 0) | (faces >= vertex_count)
    if bad.any():
        f_id, col = (int(x) for x in np.argwhere(bad)[0])
        index = int(faces[f_id, col])
        raise IndexOutOfRangeError(
            f"face at index {f_id} referenced vertex index {index} "
            f"which is out of range (vertex count = {vertex_count})",
            {'face': f_id, 'index': index, 'vertex_count': vertex_count})


class SurfaceMesh:
    """Validated, index-addressed vertex and face buffers.

    ``vertices`` and ``faces`` may be any array-like of shape ``(n, 3)``
    (nested lists, tuples or numpy arrays).  The mesh keeps its own copy,
    so the caller's buffers are never mutated.
    """

    def __init__(self, vertices, faces):
        v = _vertex_array(vertices)
        f = _face_array(faces)
        check_face_indices(f, len(v))
        self.vertices: List[Vec3] = [tuple(p) for p in v.tolist()]
        self.faces: List[Face] = [tuple(face) for face in f.tolist()]

    @classmethod
    def from_trusted(cls, vertices: Iterable[Vec3], faces: Iterable[Face]) -> "SurfaceMesh":
        """Wrap already validated buffers (copied, not checked)."""
        mesh = cls.__new__(cls)
        mesh.vertices = list(vertices)
        mesh.faces = list(faces)
        return mesh

    def copy(self) -> "SurfaceMesh":
        return SurfaceMesh.from_trusted(self.vertices, self.faces)

    def __repr__(self) -> str:
        return f"SurfaceMesh(vertices={len(self.vertices)}, faces={len(self.faces)})"

    @property
    def vertex_count(self) -> int:
        return len(self.vertices)

    @property
    def face_count(self) -> int:
        return len(self.faces)

    def face_points(self, index: int) -> Tuple[Vec3, Vec3, Vec3]:
        i, j, k = self.faces[index]
        return self.vertices[i], self.vertices[j], self.vertices[k]

    def triangle(self, index: int) -> Triangle:
        """Return the :class:`Triangle` for face ``index``.

        Raises ``DegenerateTriangleError`` if the face has no usable area.
        """
        return Triangle.from_points(*self.face_points(index))

    def edge_length_sq(self, edge: EdgeKey) -> float:
        return dist_sq(self.vertices[edge[0]], self.vertices[edge[1]])

    def edges(self) -> Iterator[EdgeKey]:
        """Yield each distinct edge key once, in first-seen order."""
        seen = set()
        for face in self.faces:
            for key in face_edges(face):
                if key not in seen:
                    seen.add(key)
                    yield key

    def add_vertex(self, p: Vec3) -> int:
        self.vertices.append(p)
        return len(self.vertices) - 1

    def add_face(self, face: Face) -> int:
        self.faces.append(face)
        return len(self.faces) - 1

    def as_arrays(self) -> Tuple[np.ndarray, np.ndarray]:
        """Return ``(vertices, faces)`` as ``(n, 3)`` float64 and int64 arrays."""
        v = np.asarray(self.vertices, dtype=np.float64).reshape(-1, 3)
        f = np.asarray(self.faces, dtype=np.int64).reshape(-1, 3)
        return v, f

    def face_areas(self) -> np.ndarray:
        v, f = self.as_arrays()
        if not len(f):
            return np.zeros(0, dtype=np.float64)
        a = v[f[:, 0]]
        b = v[f[:, 1]]
        c = v[f[:, 2]]
        return 0.5 * np.linalg.norm(np.cross(b - a, c - a), axis=1)

    def total_area(self) -> float:
        return float(self.face_areas().sum())

    def max_edge_length(self) -> float:
        """Length of the longest edge, or 0.0 for a mesh without faces."""
        longest = 0.0
        for key in self.edges():
            longest = max(longest, self.edge_length_sq(key))
        return float(np.sqrt(longest))


__all__ = [
    'EdgeKey',
    'Face',
    'SurfaceMesh',
    'check_face_indices',
    'edge_key',
    'face_edges',
    'has_repeated_vertex',
]
