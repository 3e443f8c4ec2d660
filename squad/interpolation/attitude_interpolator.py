"""
Attitude interpolation over a single SQUAD segment.

Accepts the four attitudes of a segment as quaternions or rotation matrices
and returns rotation matrices along the smooth curve between the middle two.
"""

import logging
import numpy as np
import quaternion
from typing import Any, List, Optional, Union

from ..config.squad_config_schemas import SquadConfig
from .squad_interpolator import build_interpolator

logger = logging.getLogger(__name__)


def interpolate_attitudes(
    attitudes: List[Any],
    fractions: Union[float, np.ndarray],
    att_format: str = 'quaternion',
    config: Optional[SquadConfig] = None
) -> np.ndarray:
    """
    Interpolate attitude matrices between the middle two of four keyframes.

    Parameters:
    -----------
    attitudes : list
        Exactly four attitudes [a0, a1, a2, a3]; the curve runs from a1 to a2
        and a0, a3 shape its tangents. Quaternions may be numpy-quaternion
        objects or [w, x, y, z] arrays.
    fractions : float or np.ndarray
        Segment fraction(s) in [0, 1] to evaluate
    att_format : str
        'quaternion' or 'matrix'
    config : Optional[SquadConfig]
        Passed to build_interpolator (output_format is ignored here)

    Returns:
    --------
    np.ndarray
        Attitude matrices of shape (N, 3, 3)

    Example:
    --------
    att_matrices = interpolate_attitudes([R0, R1, R2, R3], np.linspace(0, 1, 20), att_format='matrix')
    """
    if len(attitudes) != 4:
        raise ValueError(f"Exactly 4 attitudes are required for a SQUAD segment, got {len(attitudes)}")

    if att_format == 'matrix':
        # Convert rotation matrices to quaternions
        keyframe_quats = [
            quaternion.from_rotation_matrix(np.asarray(R, dtype=np.float64)) for R in attitudes
        ]
    elif att_format == 'quaternion':
        keyframe_quats = list(attitudes)
    else:
        raise ValueError(f"Unknown attitude format: {att_format}")

    if config is None:
        config = SquadConfig()
    segment_config = SquadConfig(
        unit_norm_policy=config.unit_norm_policy,
        unit_norm_tolerance=config.unit_norm_tolerance,
        output_format='quaternion'
    )

    interpolator = build_interpolator(*keyframe_quats, config=segment_config)
    interpolated_quats = interpolator(fractions)

    # Convert to rotation matrices
    if np.ndim(fractions) == 0:
        att_matrices = np.array([quaternion.as_rotation_matrix(interpolated_quats)])
    else:
        att_matrices = np.array([
            quaternion.as_rotation_matrix(q) for q in interpolated_quats
        ])

    logger.debug(f"Interpolated {len(att_matrices)} attitudes")
    return att_matrices
