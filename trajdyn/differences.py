"""
Finite-difference derivative estimators on a (possibly non-uniform) time grid.

first_difference:
    interior   d(i) = (f(i+1) - f(i-1)) / (t(i+1) - t(i-1))     central
    i = 0      d(0) = (f(1) - f(0)) / (t(1) - t(0))               forward
    i = n-1    d(n-1) = (f(n-1) - f(n-2)) / (t(n-1) - t(n-2))     backward

second_difference (direct three-point stencil on f):
    interior   d2(i) = 2 * (s(i) - s(i-1)) / (t(i+1) - t(i-1)),
               s(i) = (f(i+1) - f(i)) / (t(i+1) - t(i))
    boundary   repeats the nearest interior value; NaN when n < 3

step_difference:
    i >= 1     f(i) - f(i-1)
    i = 0      NaN  (no previous sample)

All inputs are assumed validated: finite, equal length, t strictly increasing,
n >= 2.
"""

import numpy as np


def first_difference(f: np.ndarray, t: np.ndarray) -> np.ndarray:
    """Central difference with one-sided fallback at both ends."""
    f = np.asarray(f, dtype=np.float64)
    t = np.asarray(t, dtype=np.float64)
    n = len(f)

    d = np.empty(n, dtype=np.float64)
    d[0] = (f[1] - f[0]) / (t[1] - t[0])
    d[-1] = (f[-1] - f[-2]) / (t[-1] - t[-2])
    if n > 2:
        d[1:-1] = (f[2:] - f[:-2]) / (t[2:] - t[:-2])
    return d


def second_difference(f: np.ndarray, t: np.ndarray) -> np.ndarray:
    """Three-point second-derivative stencil directly on f."""
    f = np.asarray(f, dtype=np.float64)
    t = np.asarray(t, dtype=np.float64)
    n = len(f)

    d2 = np.full(n, np.nan)
    if n < 3:
        return d2

    slope = np.diff(f) / np.diff(t)  # (n-1,)
    d2[1:-1] = 2.0 * (slope[1:] - slope[:-1]) / (t[2:] - t[:-2])
    d2[0] = d2[1]
    d2[-1] = d2[-2]
    return d2


def step_difference(f: np.ndarray) -> np.ndarray:
    """Change since the previous sample; NaN on the first row."""
    f = np.asarray(f, dtype=np.float64)
    d = np.full(len(f), np.nan)
    d[1:] = np.diff(f)
    return d


SCHEMES = ('velocity', 'stencil')


def acceleration(
    position: np.ndarray,
    velocity: np.ndarray,
    t: np.ndarray,
    scheme: str = 'velocity',
) -> np.ndarray:
    """
    Estimate acceleration along one axis.

    Args:
        position: Coordinate values
        velocity: first_difference(position, t)
        t: Timestamps
        scheme: 'velocity' differentiates the velocity sequence with the same
                central/one-sided pattern (two-pass); 'stencil' applies the
                three-point second difference to position directly.
    """
    if scheme == 'velocity':
        return first_difference(velocity, t)
    if scheme == 'stencil':
        return second_difference(position, t)
    raise ValueError(f"unknown acceleration scheme '{scheme}'; expected one of {SCHEMES}")
