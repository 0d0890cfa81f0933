"""
Trajectory input errors.

All of these are raised by the up-front validation pass and are fatal to
the call. Per-sample degeneracies (zero speed, first-row displacement) are
not errors; they show up as missing values on the affected fields.
"""

from typing import Any, Optional


class TrajectoryError(ValueError):
    """Base class for invalid trajectory input."""


class EmptyInputError(TrajectoryError):
    """Raised when the trajectory has no samples."""

    def __init__(self, message: str = "trajectory has no samples"):
        super().__init__(message)


class InsufficientSamplesError(TrajectoryError):
    """Raised when there are too few samples to estimate any derivative."""

    def __init__(self, n_samples: int, required: int = 2):
        self.n_samples = n_samples
        self.required = required
        super().__init__(
            f"need at least {required} samples to differentiate, got {n_samples}"
        )


class NonMonotonicTimeError(TrajectoryError):
    """Raised when timestamps are not strictly increasing."""

    def __init__(self, index: int, previous: float, current: float):
        self.index = index
        self.previous = previous
        self.current = current
        super().__init__(
            f"t must be strictly increasing: t[{index - 1}]={previous!r} "
            f"is followed by t[{index}]={current!r}"
        )


class InvalidValueError(TrajectoryError):
    """Raised when t, x or y holds a NaN, infinite or non-numeric value."""

    def __init__(self, field: str, index: int, value: Any = None, reason: str = "non-finite"):
        self.field = field
        self.index = index
        self.value = value
        self.reason = reason
        super().__init__(f"{reason} {field}[{index}]={value!r}")
