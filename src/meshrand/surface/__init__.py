"""Surface distributions: area-uniform and Poisson-disk sampling."""

from .uniform import SurfaceSample, UniformSurfaceSampler, build_uniform_surface
from .poisson_disk import PoissonDiskSampler, build_poisson_disk_surface, poisson_disk_sample

__all__ = [
    'SurfaceSample',
    'UniformSurfaceSampler',
    'build_uniform_surface',
    'PoissonDiskSampler',
    'build_poisson_disk_surface',
    'poisson_disk_sample',
]
