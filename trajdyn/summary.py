"""
Whole-trajectory summary of an enriched trajectory.

    path_length       sum of adisp over rows 1..n-1
    net_displacement  |p(n-1) - p(0)|
    straightness      net_displacement / path_length  (NaN if path_length == 0)

Speed, acceleration and curvature aggregates skip missing values.
"""

from dataclasses import dataclass, asdict
from typing import Any, Dict

import numpy as np

from trajdyn.types import EnrichedTrajectory


@dataclass
class TrajectorySummary:
    n_samples: int
    duration: float
    path_length: float
    net_displacement: float
    straightness: float
    mean_speed: float
    max_speed: float
    mean_acceleration: float
    max_acceleration: float
    mean_abs_curvature: float
    n_stationary: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _nan_stat(func, values: np.ndarray) -> float:
    finite = values[~np.isnan(values)]
    if len(finite) == 0:
        return float('nan')
    return float(func(finite))


def summarize(enriched: EnrichedTrajectory) -> TrajectorySummary:
    t, x, y = enriched.t, enriched.x, enriched.y

    path_length = float(np.nansum(enriched.adisp))
    net = float(np.hypot(x[-1] - x[0], y[-1] - y[0]))
    straightness = net / path_length if path_length > 0 else float('nan')

    return TrajectorySummary(
        n_samples=len(enriched),
        duration=float(t[-1] - t[0]),
        path_length=path_length,
        net_displacement=net,
        straightness=straightness,
        mean_speed=_nan_stat(np.mean, enriched.aspeed),
        max_speed=_nan_stat(np.max, enriched.aspeed),
        mean_acceleration=_nan_stat(np.mean, enriched.aaccel),
        max_acceleration=_nan_stat(np.max, enriched.aaccel),
        mean_abs_curvature=_nan_stat(lambda v: np.mean(np.abs(v)), enriched.curv),
        n_stationary=int(np.count_nonzero(np.isnan(enriched.curv))),
    )
