"""
Configuration schema for SQUAD interpolation.
"""

from dataclasses import dataclass


@dataclass
class SquadConfig:
    """
    Runtime options for building SQUAD interpolators.

    The numerical routines are fixed; these options only cover input
    checking and the shape of the values an interpolator returns.
    """
    # Input checking: 'ignore', 'warn' or 'raise'
    unit_norm_policy: str = "ignore"
    unit_norm_tolerance: float = 1e-6

    # Interpolator output: 'tuple', 'array' or 'quaternion'
    output_format: str = "tuple"
