import pytest

from meshrand.errors import DegenerateTriangleError, NonManifoldEdgeError
from meshrand.mesh import SurfaceMesh
from meshrand.subdivision import refine
from meshrand.topology import MeshTopology
from meshrand.vecmath import dot


def _square():
    vertices = [(0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (1.0, 1.0, 0.0), (0.0, 1.0, 0.0)]
    faces = [(0, 1, 2), (0, 2, 3)]
    return SurfaceMesh(vertices, faces)


def _tetrahedron():
    vertices = [(1.0, 1.0, 1.0), (1.0, -1.0, -1.0), (-1.0, 1.0, -1.0), (-1.0, -1.0, 1.0)]
    faces = [(0, 1, 2), (0, 3, 1), (0, 2, 3), (1, 3, 2)]
    return SurfaceMesh(vertices, faces)


def test_build_indexes_every_edge():
    topo = MeshTopology.build(_square())
    assert len(topo) == 5
    assert topo.incident_faces((0, 2)) == (0, 1)
    assert topo.incident_faces((2, 0)) == (0, 1)
    assert topo.incident_faces((0, 1)) == (0,)
    assert topo.incident_faces((1, 3)) == ()
    assert (2, 0) in topo
    assert (1, 3) not in topo


def test_neighbors_exclude_self():
    topo = MeshTopology(_tetrahedron())
    for f_id in range(4):
        found = set(topo.neighbors(f_id))
        assert f_id not in found
        assert found == set(range(4)) - {f_id}


def test_neighbors_are_symmetric():
    topo = MeshTopology(_square())
    assert list(topo.neighbors(0)) == [1]
    assert list(topo.neighbors(1)) == [0]


def test_closed_mesh_edges_have_two_faces():
    topo = MeshTopology(_tetrahedron())
    assert len(topo) == 6
    assert all(len(topo.incident_faces(e)) == 2 for e in topo.edges())


def test_non_manifold_edge():
    vertices = [(0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (0.0, 1.0, 0.0),
                (0.0, -1.0, 0.0), (0.0, 0.0, 1.0)]
    mesh = SurfaceMesh(vertices, [(0, 1, 2), (1, 0, 3), (0, 1, 4)])
    with pytest.raises(NonManifoldEdgeError) as info:
        MeshTopology(mesh)
    assert info.value.details['edge'] == (0, 1)


def test_repeated_vertex_face():
    vertices = [(0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (0.0, 1.0, 0.0)]
    mesh = SurfaceMesh(vertices, [(0, 1, 2), (0, 0, 1)])
    with pytest.raises(DegenerateTriangleError):
        MeshTopology(mesh)


def test_split_interior_edge():
    mesh = _square()
    topo = MeshTopology(mesh)
    changed = topo.split_edge((2, 0))

    assert mesh.vertex_count == 5
    assert mesh.vertices[4] == (0.5, 0.5, 0.0)
    assert mesh.faces == [(0, 1, 4), (0, 4, 3), (4, 1, 2), (4, 2, 3)]
    assert changed == [(1, 4), (3, 4), (2, 4), (0, 4)]
    assert (0, 2) not in topo
    assert topo.incident_faces((1, 2)) == (2,)
    assert topo.incident_faces((2, 3)) == (3,)
    assert sorted(topo.incident_faces((2, 4))) == [2, 3]
    assert topo.is_consistent()


def test_split_boundary_edge():
    mesh = _square()
    topo = MeshTopology(mesh)
    changed = topo.split_edge((0, 1))

    assert mesh.vertices[4] == (0.5, 0.0, 0.0)
    assert mesh.faces == [(0, 4, 2), (0, 2, 3), (4, 1, 2)]
    assert changed == [(2, 4), (1, 4), (0, 4)]
    assert topo.incident_faces((1, 4)) == (2,)
    assert topo.incident_faces((0, 4)) == (0,)
    assert topo.is_consistent()


def test_split_preserves_winding():
    mesh = _tetrahedron()
    topo = MeshTopology(mesh)
    for edge in [(0, 1), (2, 3), (1, 4)]:
        topo.split_edge(edge)
    assert mesh.face_count == 10
    for f_id in range(mesh.face_count):
        tri = mesh.triangle(f_id)
        assert dot(tri.normal, tri.centroid) > 0.0
    assert topo.is_consistent()


def test_split_preserves_area():
    mesh = _tetrahedron()
    before = mesh.total_area()
    topo = MeshTopology(mesh)
    topo.split_edge((1, 3))
    topo.split_edge((0, 2))
    assert mesh.total_area() == pytest.approx(before)


def test_split_missing_edge():
    topo = MeshTopology(_square())
    with pytest.raises(ValueError):
        topo.split_edge((1, 3))


def test_is_consistent_detects_outside_edits():
    mesh = _square()
    topo = MeshTopology(mesh)
    assert topo.is_consistent()
    mesh.faces[1] = (0, 3, 2)
    assert topo.is_consistent()
    mesh.add_vertex((2.0, 0.0, 0.0))
    mesh.add_face((1, 4, 2))
    assert not topo.is_consistent()


def _double_sided_triangle():
    vertices = [(0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (0.0, 1.0, 0.0)]
    return SurfaceMesh(vertices, [(0, 1, 2), (0, 2, 1)])


def test_split_edge_of_double_sided_triangle():
    mesh = _double_sided_triangle()
    topo = MeshTopology(mesh)
    changed = topo.split_edge((0, 1))

    assert mesh.faces == [(0, 3, 2), (0, 2, 3), (3, 1, 2), (3, 2, 1)]
    assert changed == [(2, 3), (1, 3), (0, 3)]
    assert sorted(topo.incident_faces((2, 3))) == [0, 1, 2, 3]
    assert sorted(topo.incident_faces((1, 2))) == [2, 3]
    assert topo.is_consistent()

    # the shared spoke can be split again
    topo.split_edge((2, 3))
    assert mesh.face_count == 8
    assert topo.is_consistent()


def test_refine_double_sided_triangle():
    mesh = _double_sided_triangle()
    topo = refine(mesh, 0.3)
    assert topo.is_consistent()
    assert all(mesh.edge_length_sq(e) <= 0.3 * 0.3 for e in topo.edges())
    assert mesh.total_area() == pytest.approx(1.0)
