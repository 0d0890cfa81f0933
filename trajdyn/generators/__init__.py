"""Synthetic (t, x, y) trajectories from parametric formulas."""

from trajdyn.generators.parametric import (
    GENERATORS,
    circle,
    linear,
    lissajous,
    sample_times,
    spiral,
    write_trajectory,
)

__all__ = [
    'GENERATORS',
    'circle',
    'linear',
    'lissajous',
    'sample_times',
    'spiral',
    'write_trajectory',
]
