"""
Dynamics engine.

Turns a sampled (t, x, y) trajectory into an enriched trajectory:

    v(i)      = D[x](i), D[y](i)                 central / one-sided difference
    aspeed(i) = |v(i)|
    a(i)      = D[v](i)                          two-pass (default)
              | D2[x](i)                         direct stencil ('stencil')
    aaccel(i) = |a(i)|
    curv(i)   = (vx*ay - vy*ax) / aspeed^3       signed; missing where aspeed <= min_speed
    radius(i) = 1 / |curv(i)|                    +inf where curv == 0
    disp(i)   = p(i) - p(i-1)                    missing at i = 0
    adisp(i)  = |disp(i)|

Pure function: the input is validated up front and never modified. Each
row depends only on its +/-1 neighbours (+/-2 for two-pass acceleration).
"""

import logging
from typing import Any, Dict, Optional

import numpy as np
import polars as pl

from trajdyn.config import get_setting
from trajdyn.differences import acceleration, first_difference, step_difference
from trajdyn.types import EnrichedTrajectory, Trajectory
from trajdyn.validation import validate_trajectory


logger = logging.getLogger(__name__)


def signed_curvature(
    vx: np.ndarray,
    vy: np.ndarray,
    ax: np.ndarray,
    ay: np.ndarray,
    min_speed: float = 0.0,
) -> np.ndarray:
    """Planar curvature; NaN where speed is at or below min_speed."""
    speed = np.hypot(vx, vy)
    curv = np.full(len(speed), np.nan)
    moving = speed > min_speed
    s = speed[moving]
    # Divide in stages: s**3 overflows for speeds above ~1e103
    ux, uy = vx[moving] / s, vy[moving] / s
    curv[moving] = (ux * ay[moving] - uy * ax[moving]) / s / s
    return curv


def curvature_radius(curv: np.ndarray) -> np.ndarray:
    """1/|curv|; +inf for straight motion, NaN stays NaN."""
    radius = np.full(len(curv), np.nan)
    defined = ~np.isnan(curv)
    straight = defined & (curv == 0.0)
    turning = defined & ~straight
    radius[straight] = np.inf
    radius[turning] = 1.0 / np.abs(curv[turning])
    return radius


def compute(
    trajectory: Trajectory,
    acceleration_scheme: Optional[str] = None,
    min_speed: Optional[float] = None,
    config: Optional[Dict[str, Any]] = None,
) -> EnrichedTrajectory:
    """
    Compute kinematic descriptors for every sample of a trajectory.

    Args:
        trajectory: Ordered samples with finite values and strictly increasing t
        acceleration_scheme: 'velocity' (two-pass) or 'stencil'
                             (from config if not provided)
        min_speed: Speed at or below which curvature is missing
                   (from config if not provided)
        config: Settings dict as returned by trajdyn.config.load_config;
                defaults to DYNAMICS_CONFIG

    Returns:
        EnrichedTrajectory with one row per input sample, in input order.

    Raises:
        EmptyInputError, InvalidValueError, NonMonotonicTimeError,
        InsufficientSamplesError: on invalid input, before anything is computed
        ValueError: on an unknown acceleration scheme or a negative min_speed
    """
    if acceleration_scheme is None:
        acceleration_scheme = get_setting('derivatives.acceleration_scheme', 'velocity', config=config)
    if min_speed is None:
        min_speed = get_setting('curvature.min_speed', 0.0, config=config)
    if min_speed < 0:
        raise ValueError(f"min_speed must be non-negative, got {min_speed!r}")

    n = validate_trajectory(trajectory)
    t, x, y = trajectory.t, trajectory.x, trajectory.y
    logger.debug("computing dynamics for %d samples (acceleration=%s)", n, acceleration_scheme)

    # Velocity
    vx = first_difference(x, t)
    vy = first_difference(y, t)
    aspeed = np.hypot(vx, vy)

    # Acceleration
    ax = acceleration(x, vx, t, scheme=acceleration_scheme)
    ay = acceleration(y, vy, t, scheme=acceleration_scheme)
    aaccel = np.hypot(ax, ay)

    # Curvature
    curv = signed_curvature(vx, vy, ax, ay, min_speed=min_speed)
    radius = curvature_radius(curv)

    # Displacement
    disp_x = step_difference(x)
    disp_y = step_difference(y)
    adisp = np.hypot(disp_x, disp_y)

    n_stationary = int(np.count_nonzero(aspeed <= min_speed))
    if n_stationary:
        logger.info("%d of %d samples at or below min_speed; curvature missing there", n_stationary, n)

    return EnrichedTrajectory(
        t=t, x=x, y=y,
        vx=vx, vy=vy, aspeed=aspeed,
        ax=ax, ay=ay, aaccel=aaccel,
        curv=curv, curv_radius=radius,
        disp_x=disp_x, disp_y=disp_y, adisp=adisp,
    )


def compute_frame(
    df: pl.DataFrame,
    time_col: Optional[str] = None,
    x_col: Optional[str] = None,
    y_col: Optional[str] = None,
    acceleration_scheme: Optional[str] = None,
    min_speed: Optional[float] = None,
    config: Optional[Dict[str, Any]] = None,
) -> pl.DataFrame:
    """
    DataFrame in, DataFrame out.

    Reads the time/x/y columns (names from config if not provided) and
    returns the enriched table with columns t, x, y followed by the derived
    columns. Missing values are null.
    """
    trajectory = Trajectory.from_frame(
        df,
        time_col=time_col or get_setting('columns.time', 't', config=config),
        x_col=x_col or get_setting('columns.x', 'x', config=config),
        y_col=y_col or get_setting('columns.y', 'y', config=config),
    )
    enriched = compute(
        trajectory,
        acceleration_scheme=acceleration_scheme,
        min_speed=min_speed,
        config=config,
    )
    return enriched.to_frame()
