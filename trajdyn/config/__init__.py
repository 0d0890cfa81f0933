"""trajdyn configuration module."""

from .dynamics_config import (
    DYNAMICS_CONFIG,
    ACCELERATION_SCHEMES,
    OUTPUT_FORMATS,
    get_setting,
    load_config,
    validate_config,
)

__all__ = [
    "DYNAMICS_CONFIG",
    "ACCELERATION_SCHEMES",
    "OUTPUT_FORMATS",
    "get_setting",
    "load_config",
    "validate_config",
]
