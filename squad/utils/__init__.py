"""
Quaternion utilities for SQUAD interpolation.
"""

from .quaternion_utils import (
    Quaternion,
    as_wxyz,
    dot,
    negate,
    norm,
    to_quaternion,
    to_array,
    check_unit_norm,
)

__all__ = [
    'Quaternion',
    'as_wxyz',
    'dot',
    'negate',
    'norm',
    'to_quaternion',
    'to_array',
    'check_unit_norm',
]
