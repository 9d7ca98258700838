## weighted discrete sampling for meshrand
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

"""Weighted discrete sampling with Vose's alias method.

Building the table is O(n); each draw is O(1) and consumes exactly two
values from the random source.
"""

from __future__ import annotations

from typing import List, Sequence

import numpy as np

from meshrand.errors import EmptyInputError
from meshrand.triangle import RandomSource


class AliasTable:
    """Immutable table for drawing indices with probability proportional to weight."""

    def __init__(self, weights: Sequence[float]):
        w = np.asarray(weights, dtype=np.float64)
        if w.ndim != 1:
            raise ValueError(f"weights must be one-dimensional, got shape {w.shape}")
        if w.size == 0:
            raise EmptyInputError("cannot build an alias table from no weights")
        if not np.all(np.isfinite(w)) or np.any(w < 0.0):
            raise ValueError("weights must be finite and non-negative")
        total = float(w.sum())
        if not np.isfinite(total) or total <= 0.0:
            raise EmptyInputError("weights sum to zero or overflow",
                                  {'total': total})

        n = int(w.size)
        self._probabilities = w / total
        scaled: List[float] = (self._probabilities * n).tolist()
        prob = [0.0] * n
        alias = list(range(n))

        small = [i for i, s in enumerate(scaled) if s < 1.0]
        large = [i for i, s in enumerate(scaled) if s >= 1.0]
        while small and large:
            s = small.pop()
            g = large.pop()
            prob[s] = scaled[s]
            alias[s] = g
            scaled[g] = (scaled[g] + scaled[s]) - 1.0
            if scaled[g] < 1.0:
                small.append(g)
            else:
                large.append(g)
        # leftovers are 1.0 up to rounding
        for i in large + small:
            prob[i] = 1.0

        self._prob = prob
        self._alias = alias
        self._n = n

    def __len__(self) -> int:
        return self._n

    @property
    def probabilities(self) -> np.ndarray:
        """Normalised weights, as a copy."""
        return self._probabilities.copy()

    def probability(self, index: int) -> float:
        return float(self._probabilities[index])

    def sample(self, rng: RandomSource) -> int:
        """Draw one index."""
        i = int(rng.random() * self._n)
        if i >= self._n:
            i = self._n - 1
        if rng.random() < self._prob[i]:
            return i
        return self._alias[i]


__all__ = ['AliasTable']
