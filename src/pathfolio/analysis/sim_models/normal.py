"""Standard normal variates via the Box-Muller transform."""

import numpy as np

from . import UniformSource


def _open_uniform(source: UniformSource, size=None) -> float | np.ndarray:
    """Draw uniforms in (0, 1), re-drawing any exact zero."""
    if size is None:
        u = 0.0
        while u == 0.0:
            u = float(source.random())
        return u

    u = np.asarray(source.random(size), dtype=float)
    zeros = u == 0.0
    while np.any(zeros):
        u[zeros] = source.random(int(zeros.sum()))
        zeros = u == 0.0
    return u


def box_muller(source: UniformSource, size=None) -> float | np.ndarray:
    """Return N(0, 1) samples built from two uniform draws each.

    Only the cosine branch is used; its sine twin is dropped.

    Args:
        source: Uniform generator with a ``random(size)`` method.
        size: None for a single float, otherwise the output array shape.
    """
    u = _open_uniform(source, size)
    v = _open_uniform(source, size)
    if size is None:
        return float(np.sqrt(-2.0 * np.log(u)) * np.cos(2.0 * np.pi * v))
    return np.sqrt(-2.0 * np.log(u)) * np.cos(2.0 * np.pi * v)
