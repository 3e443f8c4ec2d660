"""
SQUAD: smooth spherical quadrangle interpolation of unit quaternions.

Main components:
- build_interpolator: SQUAD interpolator for one keyframe segment
- interpolate_attitudes: rotation matrices along a SQUAD segment
- SquadConfig / SquadConfigManager: interpolation options and YAML loading
- Quaternion: (w, x, y, z) value type
"""

from .config import SquadConfig, SquadConfigManager
from .interpolation import build_interpolator, interpolate_attitudes
from .utils import Quaternion

__version__ = "1.0.0"

__all__ = [
    'build_interpolator',
    'interpolate_attitudes',
    'SquadConfig',
    'SquadConfigManager',
    'Quaternion',
]
