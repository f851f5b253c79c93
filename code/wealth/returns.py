import math
from typing import Optional

import numpy as np


class ReturnGenerator:
    """Normal yearly return samples drawn with the Box-Muller transform.

    Each sample consumes two uniform(0, 1) draws from the wrapped numpy
    generator and keeps the cosine branch only. A generator is meant to be
    owned by a single trial.
    """

    def __init__(self, rng: Optional[np.random.Generator] = None):
        self._rng = rng if rng is not None else np.random.default_rng()

    @classmethod
    def seeded(cls, seed) -> "ReturnGenerator":
        return cls(np.random.default_rng(seed))

    def _uniform(self) -> float:
        # log(0) guard
        u = 0.0
        while u == 0.0:
            u = float(self._rng.random())
        return u

    def sample(self, mean: float, volatility: float) -> float:
        u = self._uniform()
        v = self._uniform()
        z = math.sqrt(-2.0 * math.log(u)) * math.cos(2.0 * math.pi * v)
        return z * volatility + mean
