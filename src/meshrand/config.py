## sampling constants and run configuration for meshrand
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

"""Sampling constants and run configuration.

``DEFAULT_RETRY_LIMIT`` and ``DEFAULT_MAX_SAMPLES`` are the budgets used
by :class:`PoissonDiskConfig` when none are given.

``SEARCH_REACH`` scales the separation radius to give the distance
within which the Poisson-disk conflict search keeps expanding faces.
A reach of 1.0 is enough on flat regions; across a crease of dihedral
angle ``theta`` the search needs ``reach >= 1 / sin(theta)`` to find
every conflict.  The default of 2.0 covers creases down to 30 degrees.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

DEFAULT_RETRY_LIMIT = 1000
DEFAULT_MAX_SAMPLES = 10000
SEARCH_REACH = 2.0


def check_radius(radius: float) -> float:
    """Return ``radius`` as a float, or raise ``ValueError`` if unusable."""

    radius = float(radius)
    if not math.isfinite(radius) or radius <= 0.0:
        raise ValueError(f"radius must be finite and positive, got {radius}")
    return radius


def check_search_reach(search_reach: float) -> float:
    search_reach = float(search_reach)
    if not math.isfinite(search_reach) or search_reach < 1.0:
        raise ValueError(f"search_reach must be finite and >= 1, got {search_reach}")
    return search_reach


@dataclass(frozen=True)
class PoissonDiskConfig:
    """Parameters for one Poisson-disk sampling run.

    Attributes:
        radius: Minimum separation between accepted points; also the
            maximum edge length the mesh is refined to
        retry_limit: Consecutive rejections tolerated before stopping
        max_samples: Stop once this many points have been accepted
        search_reach: Conflict search distance, as a multiple of radius
    """
    radius: float
    retry_limit: int = DEFAULT_RETRY_LIMIT
    max_samples: int = DEFAULT_MAX_SAMPLES
    search_reach: float = SEARCH_REACH

    def __post_init__(self):
        check_radius(self.radius)
        check_search_reach(self.search_reach)
        if self.retry_limit < 0:
            raise ValueError(f"retry_limit must be >= 0, got {self.retry_limit}")
        if self.max_samples < 0:
            raise ValueError(f"max_samples must be >= 0, got {self.max_samples}")


__all__ = [
    'DEFAULT_RETRY_LIMIT',
    'DEFAULT_MAX_SAMPLES',
    'SEARCH_REACH',
    'PoissonDiskConfig',
    'check_radius',
    'check_search_reach',
]
