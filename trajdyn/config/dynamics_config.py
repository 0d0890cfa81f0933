# trajdyn Dynamics Configuration
# ==============================
# Settings for the derivative engine, table readers and the CLI.
#
# Usage:
#   from trajdyn.config import DYNAMICS_CONFIG, get_setting
#   scheme = get_setting('derivatives.acceleration_scheme')
#
#   config = load_config('my_settings.yaml')   # defaults + YAML overrides
#   scheme = get_setting('derivatives.acceleration_scheme', config=config)

import copy
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from trajdyn.differences import SCHEMES


DYNAMICS_CONFIG = {

    # =========================================================
    # Derivative estimation
    # =========================================================
    'derivatives': {
        # 'velocity': differentiate the velocity sequence (two-pass)
        # 'stencil':  three-point second difference on position
        'acceleration_scheme': 'velocity',
    },

    # =========================================================
    # Curvature
    # =========================================================
    'curvature': {
        # Curvature is missing where aspeed <= min_speed
        'min_speed': 0.0,
    },

    # =========================================================
    # Input table columns
    # =========================================================
    'columns': {
        'time': 't',
        'x': 'x',
        'y': 'y',
    },

    # =========================================================
    # CLI output
    # =========================================================
    'io': {
        'default_format': 'parquet',
    },
}


ACCELERATION_SCHEMES = SCHEMES
OUTPUT_FORMATS = ('parquet', 'csv', 'tsv')


def get_setting(path: str, default=None, config: Optional[Dict[str, Any]] = None):
    """
    Get a setting by dot-notation path.

    Example:
        get_setting('curvature.min_speed')          # Returns 0.0
        get_setting('columns.time')                 # Returns 't'
    """
    value = DYNAMICS_CONFIG if config is None else config
    for key in path.split('.'):
        if isinstance(value, dict) and key in value:
            value = value[key]
        else:
            return default
    return value


def _deep_merge(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def validate_config(config: Optional[Dict[str, Any]] = None) -> List[str]:
    """Check config for internal consistency."""
    config = DYNAMICS_CONFIG if config is None else config
    errors = []

    scheme = get_setting('derivatives.acceleration_scheme', config=config)
    if scheme not in ACCELERATION_SCHEMES:
        errors.append(
            f"derivatives.acceleration_scheme must be one of {ACCELERATION_SCHEMES}, got {scheme!r}"
        )

    min_speed = get_setting('curvature.min_speed', config=config)
    if not isinstance(min_speed, (int, float)) or isinstance(min_speed, bool) or min_speed < 0:
        errors.append(f"curvature.min_speed must be a non-negative number, got {min_speed!r}")

    for key in ('time', 'x', 'y'):
        name = get_setting(f'columns.{key}', config=config)
        if not isinstance(name, str) or not name:
            errors.append(f"columns.{key} must be a non-empty string, got {name!r}")

    fmt = get_setting('io.default_format', config=config)
    if fmt not in OUTPUT_FORMATS:
        errors.append(f"io.default_format must be one of {OUTPUT_FORMATS}, got {fmt!r}")

    return errors


def load_config(path: Union[str, Path, None] = None) -> Dict[str, Any]:
    """
    Load defaults merged with an optional YAML override file.

    YAML format (any subset of DYNAMICS_CONFIG):
        derivatives:
          acceleration_scheme: stencil
        curvature:
          min_speed: 1.0e-9

    Raises:
        ValueError: If the merged config is inconsistent
    """
    if path is None:
        return copy.deepcopy(DYNAMICS_CONFIG)

    with open(Path(path).expanduser()) as f:
        overrides = yaml.safe_load(f) or {}

    if not isinstance(overrides, dict):
        raise ValueError(f"config file {path} must contain a mapping, got {type(overrides).__name__}")

    config = _deep_merge(DYNAMICS_CONFIG, overrides)
    errors = validate_config(config)
    if errors:
        raise ValueError(f"invalid config {path}:\n" + "\n".join(f"  - {e}" for e in errors))
    return config


if __name__ == '__main__':
    import json
    print(json.dumps(DYNAMICS_CONFIG, indent=2))

    errors = validate_config()
    if errors:
        print("\nValidation errors:")
        for e in errors:
            print(f"  - {e}")
    else:
        print("\nConfig valid")
