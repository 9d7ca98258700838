import random

import numpy as np
import pytest

from meshrand.errors import EmptyInputError, IndexOutOfRangeError
from meshrand.mesh import SurfaceMesh
from meshrand.surface.uniform import (
    SurfaceSample,
    UniformSurfaceSampler,
    build_uniform_surface,
)


def _square():
    vertices = [(0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (1.0, 1.0, 0.0), (0.0, 1.0, 0.0)]
    faces = [(0, 1, 2), (0, 2, 3)]
    return vertices, faces


def _tetrahedron():
    vertices = [(1.0, 1.0, 1.0), (1.0, -1.0, -1.0), (-1.0, 1.0, -1.0), (-1.0, -1.0, 1.0)]
    faces = [(0, 1, 2), (0, 3, 1), (0, 2, 3), (1, 3, 2)]
    return vertices, faces


def _chi_squared(counts, expected):
    counts = np.asarray(counts, dtype=np.float64)
    expected = np.asarray(expected, dtype=np.float64)
    return float(np.sum((counts - expected) ** 2 / expected))


def test_samples_lie_on_their_triangle():
    surface = build_uniform_surface(*_square())
    rng = random.Random(2)
    for s in surface.sample_many(2000, rng):
        assert isinstance(s, SurfaceSample)
        x, y, z = s.position
        assert z == 0.0
        assert -1e-12 <= x <= 1.0 + 1e-12
        assert -1e-12 <= y <= 1.0 + 1e-12
        assert s.triangle.distance_sq(s.position) < 1e-20
        assert s.normal == (0.0, 0.0, 1.0)


def test_faces_chosen_by_area():
    vertices = [(0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (0.0, 1.0, 0.0),
                (2.0, 0.0, 0.0), (5.0, 0.0, 0.0), (2.0, 1.0, 0.0)]
    surface = build_uniform_surface(vertices, [(0, 1, 2), (3, 4, 5)])
    assert surface.total_area == pytest.approx(2.0)
    rng = random.Random(17)
    n = 20000
    counts = [0, 0]
    for _ in range(n):
        counts[surface.sample(rng).triangle_index] += 1
    # 1 degree of freedom, p = 0.001
    assert _chi_squared(counts, [n * 0.25, n * 0.75]) < 10.83


def test_equal_faces_chosen_evenly():
    surface = build_uniform_surface(*_tetrahedron())
    rng = random.Random(99)
    n = 8000
    counts = [0] * 4
    for s in surface.sample_many(n, rng):
        counts[s.triangle_index] += 1
    # 3 degrees of freedom, p = 0.001
    assert _chi_squared(counts, [n / 4.0] * 4) < 16.27


def test_mean_position_is_area_centroid():
    surface = build_uniform_surface(*_square())
    rng = random.Random(4)
    pts = np.array([s.position for s in surface.sample_many(10000, rng)])
    assert pts.mean(axis=0).tolist() == pytest.approx([0.5, 0.5, 0.0], abs=0.02)


def test_degenerate_faces_are_skipped():
    vertices = [(0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (2.0, 0.0, 0.0)]
    faces = [(0, 1, 3), (0, 0, 2), (0, 1, 2)]
    surface = build_uniform_surface(vertices, faces)
    assert len(surface) == 1
    assert surface.face_indices == [2]
    rng = random.Random(8)
    assert all(s.triangle_index == 2 for s in surface.sample_many(100, rng))


def test_no_faces():
    with pytest.raises(EmptyInputError) as info:
        build_uniform_surface(_square()[0], [])
    assert 'empty' in str(info.value)


def test_all_faces_degenerate():
    vertices = [(0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (2.0, 0.0, 0.0)]
    with pytest.raises(EmptyInputError) as info:
        build_uniform_surface(vertices, [(0, 1, 2), (2, 1, 0)])
    assert info.value.details == {'faces': 2, 'degenerate': 2}


def test_index_out_of_range():
    vertices, faces = _square()
    with pytest.raises(IndexOutOfRangeError):
        build_uniform_surface(vertices, faces + [(1, 2, 7)])


def test_same_seed_same_samples():
    surface = build_uniform_surface(*_tetrahedron())
    a = [s.position for s in surface.sample_many(50, random.Random(5))]
    b = [s.position for s in surface.sample_many(50, random.Random(5))]
    assert a == b


def test_numpy_generator_as_random_source():
    surface = build_uniform_surface(*_square())
    rng = np.random.default_rng(3)
    samples = surface.sample_many(100, rng)
    assert len(samples) == 100
    assert all(s.triangle_index in (0, 1) for s in samples)


def test_sample_many_count():
    surface = build_uniform_surface(*_square())
    assert surface.sample_many(0, random.Random(0)) == []
    with pytest.raises(ValueError):
        surface.sample_many(-1, random.Random(0))


def test_from_mesh_matches_builder():
    mesh = SurfaceMesh(*_tetrahedron())
    surface = UniformSurfaceSampler.from_mesh(mesh)
    assert len(surface) == 4
    assert surface.face_indices == [0, 1, 2, 3]
    assert surface.total_area == pytest.approx(mesh.total_area())


def test_mismatched_constructor_arguments():
    surface = build_uniform_surface(*_square())
    with pytest.raises(ValueError):
        UniformSurfaceSampler(surface.triangles, [0])
