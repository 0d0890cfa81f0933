"""
Trajectory containers.

Sample / Trajectory       raw (t, x, y) input, caller-owned
EnrichedSample            one output row with derived kinematic fields
EnrichedTrajectory        full engine output, one row per input sample

Column arrays are float64 and read-only. Inside arrays, NaN is the missing
marker; row objects and DataFrames expose missing values as None / null.
"""

import math
from dataclasses import dataclass, fields
from typing import Any, Dict, Iterable, Iterator, List, NamedTuple, Optional, Sequence

import numpy as np
import polars as pl

from trajdyn.errors import InvalidValueError


RAW_COLUMNS = ('t', 'x', 'y')

DERIVED_COLUMNS = (
    'vx', 'vy', 'aspeed',
    'ax', 'ay', 'aaccel',
    'curv', 'curv_radius',
    'disp_x', 'disp_y', 'adisp',
)

ENRICHED_COLUMNS = RAW_COLUMNS + DERIVED_COLUMNS


def _frozen_column(values: Any, name: str) -> np.ndarray:
    arr = np.array(values, dtype=np.float64, copy=True)
    if arr.ndim != 1:
        raise ValueError(f"column '{name}' must be one-dimensional, got shape {arr.shape}")
    arr.setflags(write=False)
    return arr


def _as_optional(value: float) -> Optional[float]:
    value = float(value)
    return None if math.isnan(value) else value


class Sample(NamedTuple):
    """A single (t, x, y) observation."""
    t: float
    x: float
    y: float


@dataclass(frozen=True, eq=False)
class Trajectory:
    """
    Ordered sequence of samples held as three parallel columns.

    The arrays are copied on construction and marked read-only, so the
    engine can never mutate caller data. Values are not validated here;
    `trajdyn.engine.compute` validates before differentiating.
    """
    t: np.ndarray
    x: np.ndarray
    y: np.ndarray

    def __post_init__(self):
        for name in RAW_COLUMNS:
            object.__setattr__(self, name, _frozen_column(getattr(self, name), name))
        if not (len(self.t) == len(self.x) == len(self.y)):
            raise ValueError(
                f"t, x, y must have equal length, got "
                f"{len(self.t)}, {len(self.x)}, {len(self.y)}"
            )

    @classmethod
    def from_arrays(cls, t: Sequence[float], x: Sequence[float], y: Sequence[float]) -> 'Trajectory':
        return cls(t=t, x=x, y=y)

    @classmethod
    def from_samples(cls, samples: Iterable[Sequence[float]]) -> 'Trajectory':
        """Build from (t, x, y) tuples or Sample instances."""
        rows = [Sample(*s) for s in samples]
        return cls(
            t=[s.t for s in rows],
            x=[s.x for s in rows],
            y=[s.y for s in rows],
        )

    @classmethod
    def from_frame(
        cls,
        df: pl.DataFrame,
        time_col: str = 't',
        x_col: str = 'x',
        y_col: str = 'y',
    ) -> 'Trajectory':
        """
        Build from a polars DataFrame. Nulls are read as NaN.

        Raises:
            MissingColumnError: If a column is absent
            InvalidValueError: If a value cannot be read as a number
        """
        missing = [c for c in (time_col, x_col, y_col) if c not in df.columns]
        if missing:
            raise MissingColumnError(missing, df.columns)

        def col(name: str) -> np.ndarray:
            raw = df[name]
            values = raw.cast(pl.Float64, strict=False)
            failed = (values.is_null() & raw.is_not_null()).arg_true()
            if len(failed):
                i = int(failed[0])
                raise InvalidValueError(name, i, raw[i], reason='non-numeric')
            return values.fill_null(float('nan')).to_numpy()

        return cls(t=col(time_col), x=col(x_col), y=col(y_col))

    def __len__(self) -> int:
        return len(self.t)

    def __getitem__(self, i: int) -> Sample:
        return Sample(float(self.t[i]), float(self.x[i]), float(self.y[i]))

    def __iter__(self) -> Iterator[Sample]:
        for i in range(len(self)):
            yield self[i]

    def to_frame(self) -> pl.DataFrame:
        return pl.DataFrame({'t': self.t, 'x': self.x, 'y': self.y})


class MissingColumnError(KeyError):
    """Raised when a table lacks a required trajectory column."""

    def __init__(self, missing: List[str], available: Sequence[str]):
        self.missing = list(missing)
        self.available = list(available)
        super().__init__(
            f"missing column(s) {self.missing}; available: {self.available}"
        )


@dataclass(frozen=True)
class EnrichedSample:
    """One output row. Missing derived fields are None."""
    t: float
    x: float
    y: float
    vx: Optional[float]
    vy: Optional[float]
    aspeed: Optional[float]
    ax: Optional[float]
    ay: Optional[float]
    aaccel: Optional[float]
    curv: Optional[float]
    curv_radius: Optional[float]
    disp_x: Optional[float]
    disp_y: Optional[float]
    adisp: Optional[float]

    @property
    def sample(self) -> Sample:
        return Sample(self.t, self.x, self.y)

    def to_dict(self) -> Dict[str, Optional[float]]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass(frozen=True, eq=False)
class EnrichedTrajectory:
    """
    Engine output: the input columns plus every derived column.

    Built once by the engine and never modified afterwards. Use
    `column(name)` for vectorised access (NaN = missing), indexing or
    iteration for EnrichedSample rows, and `to_frame()` for a polars table.
    """
    t: np.ndarray
    x: np.ndarray
    y: np.ndarray
    vx: np.ndarray
    vy: np.ndarray
    aspeed: np.ndarray
    ax: np.ndarray
    ay: np.ndarray
    aaccel: np.ndarray
    curv: np.ndarray
    curv_radius: np.ndarray
    disp_x: np.ndarray
    disp_y: np.ndarray
    adisp: np.ndarray

    def __post_init__(self):
        n = None
        for name in ENRICHED_COLUMNS:
            arr = _frozen_column(getattr(self, name), name)
            if n is None:
                n = len(arr)
            elif len(arr) != n:
                raise ValueError(f"column '{name}' has length {len(arr)}, expected {n}")
            object.__setattr__(self, name, arr)

    def __len__(self) -> int:
        return len(self.t)

    def __getitem__(self, i: int) -> EnrichedSample:
        if i < 0:
            i += len(self)
        if not 0 <= i < len(self):
            raise IndexError(f"row {i} out of range for {len(self)} samples")
        values = {name: _as_optional(getattr(self, name)[i]) for name in DERIVED_COLUMNS}
        return EnrichedSample(
            t=float(self.t[i]),
            x=float(self.x[i]),
            y=float(self.y[i]),
            **values,
        )

    def __iter__(self) -> Iterator[EnrichedSample]:
        for i in range(len(self)):
            yield self[i]

    def column(self, name: str) -> np.ndarray:
        if name not in ENRICHED_COLUMNS:
            raise KeyError(f"unknown column '{name}'; expected one of {ENRICHED_COLUMNS}")
        return getattr(self, name)

    def to_trajectory(self) -> Trajectory:
        return Trajectory(t=self.t, x=self.x, y=self.y)

    def to_frame(self) -> pl.DataFrame:
        """Polars table with one row per sample; NaN markers become null."""
        df = pl.DataFrame({name: getattr(self, name) for name in ENRICHED_COLUMNS})
        return df.with_columns([
            pl.col(name).fill_nan(None) for name in DERIVED_COLUMNS
        ])

    def to_dicts(self) -> List[Dict[str, Optional[float]]]:
        return [row.to_dict() for row in self]
