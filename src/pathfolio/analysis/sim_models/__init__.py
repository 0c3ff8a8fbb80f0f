"""Monte Carlo price path models package.

- normal: Box-Muller standard normal variates
- gbm: Geometric Brownian Motion (constant drift and volatility)
"""

from typing import Protocol, TypedDict

import numpy as np


class UniformSource(Protocol):
    """Anything producing uniform reals in [0, 1), e.g. ``np.random.Generator``."""

    def random(self, size=None) -> float | np.ndarray: ...


class PricePoint(TypedDict):
    step: int
    price: float


class SimulationPath(TypedDict):
    """One simulated trajectory, step 0 through the horizon."""
    label: str
    points: list[PricePoint]


__all__ = ["UniformSource", "PricePoint", "SimulationPath"]
