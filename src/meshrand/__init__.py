# -*- coding: utf-8 -*-
"""Random point distributions on the surface of triangle meshes.

>>> import random
>>> import meshrand
>>> verts = [(0, 0, 0), (1, 0, 0), (0, 1, 0), (0, 0, 1)]
>>> faces = [(1, 0, 2), (2, 0, 3), (0, 1, 3), (1, 2, 3)]
>>> surface = meshrand.build_poisson_disk_surface(0.1, verts, faces)
>>> points = surface.sample_blue_noise(1000, 50, random.Random(1))
>>> len(points) <= 50
True
"""

import logging
from importlib.metadata import PackageNotFoundError, version

from meshrand.alias import AliasTable
from meshrand.config import PoissonDiskConfig
from meshrand.errors import (
    DegenerateTriangleError,
    EmptyInputError,
    IndexOutOfRangeError,
    MeshError,
    NonManifoldEdgeError,
)
from meshrand.mesh import SurfaceMesh
from meshrand.subdivision import refine, refined_copy
from meshrand.surface import (
    PoissonDiskSampler,
    SurfaceSample,
    UniformSurfaceSampler,
    build_poisson_disk_surface,
    build_uniform_surface,
    poisson_disk_sample,
)
from meshrand.topology import MeshTopology
from meshrand.triangle import Triangle

try:
    __version__ = version("meshrand")
except PackageNotFoundError:  # pragma: no cover - handled when package not installed
    __version__ = "unknown"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'AliasTable',
    'DegenerateTriangleError',
    'EmptyInputError',
    'IndexOutOfRangeError',
    'MeshError',
    'MeshTopology',
    'NonManifoldEdgeError',
    'PoissonDiskConfig',
    'PoissonDiskSampler',
    'SurfaceMesh',
    'SurfaceSample',
    'Triangle',
    'UniformSurfaceSampler',
    'build_poisson_disk_surface',
    'build_uniform_surface',
    'poisson_disk_sample',
    'refine',
    'refined_copy',
]
