"""
trajdyn - kinematics of sampled 2D trajectories

Computes velocity, speed, acceleration, signed curvature, curvature radius
and per-step displacement for every sample of a (t, x, y) trajectory.

    from trajdyn import Trajectory, compute
    enriched = compute(Trajectory.from_arrays(t, x, y))
    enriched.to_frame()          # polars DataFrame, missing = null

Also:
    trajdyn.summary      Whole-trajectory aggregates (path length, straightness)
    trajdyn.io           CSV / TSV / Parquet readers and writers
    trajdyn.generators   Parametric test trajectories
    trajdyn.config       Settings (acceleration scheme, min speed, column names)
"""

__version__ = "0.1.0"

from trajdyn.engine import compute, compute_frame
from trajdyn.errors import (
    EmptyInputError,
    InsufficientSamplesError,
    InvalidValueError,
    NonMonotonicTimeError,
    TrajectoryError,
)
from trajdyn.summary import TrajectorySummary, summarize
from trajdyn.types import (
    EnrichedSample,
    EnrichedTrajectory,
    MissingColumnError,
    Sample,
    Trajectory,
)

__all__ = [
    '__version__',
    # Engine
    'compute',
    'compute_frame',
    'summarize',
    # Types
    'Sample',
    'Trajectory',
    'EnrichedSample',
    'EnrichedTrajectory',
    'TrajectorySummary',
    # Errors
    'TrajectoryError',
    'EmptyInputError',
    'InsufficientSamplesError',
    'NonMonotonicTimeError',
    'InvalidValueError',
    'MissingColumnError',
]
