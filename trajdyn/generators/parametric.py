"""
Parametric test trajectories.

    linear      x = x0 + vx*t,             y = y0 + vy*t
    circle      x = cx + r*cos(w*t),       y = cy + r*sin(w*t)
    lissajous   x = A*sin(a*t + delta),    y = B*sin(b*t)
    spiral      x = (r0 + k*t)*cos(w*t),   y = (r0 + k*t)*sin(w*t)

Sampling is uniform over [0, duration) unless jitter > 0, in which case each
timestamp is shifted by up to +/- jitter/2 of the step (jitter < 1 keeps t
strictly increasing).
"""

from pathlib import Path
from typing import Optional, Union

import numpy as np

from trajdyn.io import write_table
from trajdyn.types import Trajectory


# Defaults
DEFAULT_N_SAMPLES = 200
DEFAULT_DURATION = 2 * np.pi


def sample_times(
    n_samples: int = DEFAULT_N_SAMPLES,
    duration: float = DEFAULT_DURATION,
    jitter: float = 0.0,
    seed: Optional[int] = None,
) -> np.ndarray:
    if n_samples < 1:
        raise ValueError(f"n_samples must be >= 1, got {n_samples}")
    if not duration > 0:
        raise ValueError(f"duration must be > 0, got {duration}")
    if not 0.0 <= jitter < 1.0:
        raise ValueError(f"jitter must be in [0, 1), got {jitter}")

    dt = duration / n_samples
    t = np.arange(n_samples, dtype=np.float64) * dt
    if jitter > 0:
        rng = np.random.default_rng(seed)
        t = t + rng.uniform(-0.5, 0.5, n_samples) * jitter * dt
        t[0] = 0.0
    return t


def linear(
    n_samples: int = DEFAULT_N_SAMPLES,
    duration: float = DEFAULT_DURATION,
    vx: float = 1.0,
    vy: float = 0.0,
    x0: float = 0.0,
    y0: float = 0.0,
    jitter: float = 0.0,
    seed: Optional[int] = None,
) -> Trajectory:
    t = sample_times(n_samples, duration, jitter, seed)
    return Trajectory(t=t, x=x0 + vx * t, y=y0 + vy * t)


def circle(
    n_samples: int = DEFAULT_N_SAMPLES,
    duration: float = DEFAULT_DURATION,
    radius: float = 1.0,
    omega: float = 1.0,
    cx: float = 0.0,
    cy: float = 0.0,
    jitter: float = 0.0,
    seed: Optional[int] = None,
) -> Trajectory:
    """Counter-clockwise for omega > 0 (positive curvature 1/radius)."""
    t = sample_times(n_samples, duration, jitter, seed)
    return Trajectory(
        t=t,
        x=cx + radius * np.cos(omega * t),
        y=cy + radius * np.sin(omega * t),
    )


def lissajous(
    n_samples: int = DEFAULT_N_SAMPLES,
    duration: float = DEFAULT_DURATION,
    amp_x: float = 1.0,
    amp_y: float = 1.0,
    freq_x: float = 1.0,
    freq_y: float = 2.0,
    phase: float = np.pi / 2,
    jitter: float = 0.0,
    seed: Optional[int] = None,
) -> Trajectory:
    t = sample_times(n_samples, duration, jitter, seed)
    return Trajectory(
        t=t,
        x=amp_x * np.sin(freq_x * t + phase),
        y=amp_y * np.sin(freq_y * t),
    )


def spiral(
    n_samples: int = DEFAULT_N_SAMPLES,
    duration: float = DEFAULT_DURATION,
    r0: float = 1.0,
    growth: float = 0.1,
    omega: float = 1.0,
    jitter: float = 0.0,
    seed: Optional[int] = None,
) -> Trajectory:
    t = sample_times(n_samples, duration, jitter, seed)
    r = r0 + growth * t
    return Trajectory(t=t, x=r * np.cos(omega * t), y=r * np.sin(omega * t))


GENERATORS = {
    'linear': linear,
    'circle': circle,
    'lissajous': lissajous,
    'spiral': spiral,
}


def write_trajectory(trajectory: Trajectory, output_path: Union[str, Path]) -> Path:
    """Write a raw (t, x, y) table; format from the file suffix."""
    output_path = write_table(trajectory.to_frame(), output_path)
    print(f"  {len(trajectory)} samples, t in [{trajectory.t[0]:.3f}, {trajectory.t[-1]:.3f}]")
    print(f"  → {output_path}")
    return output_path
