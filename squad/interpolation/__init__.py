"""
Interpolation module for SQUAD.

Provides interpolation utilities for:
- Quaternions (SQUAD blend and its building blocks)
- Attitudes (rotation matrices along a SQUAD segment)
"""

from .squad_interpolator import (
    inv_log_product,
    control_rotation,
    slerp,
    squad,
    build_interpolator,
)

from .attitude_interpolator import interpolate_attitudes

__all__ = [
    # Core routines
    'inv_log_product',
    'control_rotation',
    'slerp',
    'squad',
    # Public interpolators
    'build_interpolator',
    'interpolate_attitudes',
]
