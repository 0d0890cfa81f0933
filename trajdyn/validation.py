"""
Trajectory validation.

Runs once, before any derivative is estimated. Checks, in order:

    1. at least one sample                 EmptyInputError
    2. every t, x, y finite                InvalidValueError
    3. t strictly increasing               NonMonotonicTimeError
    4. at least two samples                InsufficientSamplesError

The first failing check raises; nothing is computed on invalid input.
"""

import numpy as np

from trajdyn.errors import (
    EmptyInputError,
    InsufficientSamplesError,
    InvalidValueError,
    NonMonotonicTimeError,
)
from trajdyn.types import Trajectory


MIN_SAMPLES = 2


def check_finite(values: np.ndarray, field: str) -> None:
    """Raise InvalidValueError at the first NaN or infinite entry."""
    bad = np.flatnonzero(~np.isfinite(values))
    if len(bad):
        i = int(bad[0])
        raise InvalidValueError(field, i, float(values[i]))


def check_strictly_increasing(t: np.ndarray) -> None:
    """Raise NonMonotonicTimeError at the first step with dt <= 0."""
    bad = np.flatnonzero(np.diff(t) <= 0)
    if len(bad):
        i = int(bad[0]) + 1
        raise NonMonotonicTimeError(i, float(t[i - 1]), float(t[i]))


def validate_arrays(t: np.ndarray, x: np.ndarray, y: np.ndarray) -> int:
    """
    Validate parallel t, x, y columns.

    Returns:
        Number of samples.
    """
    n = len(t)
    if n < 1:
        raise EmptyInputError()

    for field, values in (('t', t), ('x', x), ('y', y)):
        check_finite(values, field)

    check_strictly_increasing(t)

    if n < MIN_SAMPLES:
        raise InsufficientSamplesError(n, MIN_SAMPLES)

    return n


def validate_trajectory(trajectory: Trajectory) -> int:
    return validate_arrays(trajectory.t, trajectory.x, trajectory.y)
