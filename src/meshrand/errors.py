## exceptions raised while building meshrand distributions
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

"""Exceptions raised while building surface distributions.

All of them are raised at construction or refinement time.  Once a
sampler exists, sampling never raises: a rejected candidate is an
expected outcome, not an error.
"""


class MeshError(ValueError):
    """Base exception for malformed mesh input."""

    def __init__(self, message, details=None):
        super().__init__(message)
        self.details = details or {}


class IndexOutOfRangeError(MeshError):
    """A face references a vertex index outside the vertex buffer."""
    pass


class DegenerateTriangleError(MeshError):
    """A triangle has no usable area (zero, subnormal, NaN or infinite)."""
    pass


class EmptyInputError(MeshError):
    """No triangle survived filtering, or there were no faces at all."""
    pass


class NonManifoldEdgeError(MeshError):
    """An edge is shared by more than two faces."""
    pass


__all__ = [
    'MeshError',
    'IndexOutOfRangeError',
    'DegenerateTriangleError',
    'EmptyInputError',
    'NonManifoldEdgeError',
]
