"""
Table I/O
=========

Read raw trajectories from CSV, TSV or Parquet and write enriched tables.
"""

from pathlib import Path
from typing import Optional, Union

import polars as pl

from trajdyn.types import Trajectory


SUPPORTED_FORMATS = {
    '.csv': 'csv',
    '.tsv': 'tsv',
    '.txt': 'tsv',
    '.parquet': 'parquet',
    '.pq': 'parquet',
}

FORMAT_SUFFIXES = {
    'csv': '.csv',
    'tsv': '.tsv',
    'parquet': '.parquet',
}


def detect_format(filename: Union[str, Path]) -> str:
    """
    Detect file format from filename.

    Returns:
        'csv', 'tsv', or 'parquet'

    Raises:
        ValueError: If format not supported
    """
    suffix = Path(filename).suffix.lower()

    if suffix not in SUPPORTED_FORMATS:
        raise ValueError(
            f"Unsupported format: {suffix}. "
            f"Supported: {', '.join(SUPPORTED_FORMATS.keys())}"
        )

    return SUPPORTED_FORMATS[suffix]


def read_table(path: Union[str, Path]) -> pl.DataFrame:
    path = Path(path).expanduser()
    fmt = detect_format(path)

    if fmt == 'parquet':
        return pl.read_parquet(path)
    if fmt == 'tsv':
        return pl.read_csv(path, separator='\t', comment_prefix='#')
    return pl.read_csv(path, comment_prefix='#')


def read_trajectory(
    path: Union[str, Path],
    time_col: str = 't',
    x_col: str = 'x',
    y_col: str = 'y',
) -> Trajectory:
    """Load a raw (t, x, y) table. Rows are kept in file order."""
    return Trajectory.from_frame(read_table(path), time_col=time_col, x_col=x_col, y_col=y_col)


def write_table(df: pl.DataFrame, path: Union[str, Path], fmt: Optional[str] = None) -> Path:
    """
    Write a table, creating parent directories.

    Args:
        df: Table to write
        path: Destination file
        fmt: 'csv', 'tsv' or 'parquet' (detected from the suffix if not provided)

    Returns:
        Path written
    """
    path = Path(path).expanduser()
    fmt = fmt or detect_format(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    if fmt == 'parquet':
        df.write_parquet(path)
    elif fmt == 'tsv':
        df.write_csv(path, separator='\t')
    elif fmt == 'csv':
        df.write_csv(path)
    else:
        raise ValueError(f"Unsupported format: {fmt}. Supported: {', '.join(FORMAT_SUFFIXES)}")

    return path
