"""
Quaternion helpers shared by the SQUAD interpolation modules.

Provides:
- Quaternion: immutable (w, x, y, z) value type
- as_wxyz: coerce sequences, arrays and numpy-quaternion objects to Quaternion
- dot, negate, norm: small scalar helpers
- to_quaternion / to_array: output conversions
- check_unit_norm: apply the configured unit-norm policy to an input
"""

import logging
from typing import NamedTuple, Sequence, Union

import numpy as np
import quaternion

logger = logging.getLogger(__name__)

UNIT_NORM_POLICIES = ('ignore', 'warn', 'raise')


class Quaternion(NamedTuple):
    """Unit rotation in scalar-first order."""
    w: float
    x: float
    y: float
    z: float


QuaternionLike = Union[Quaternion, Sequence[float], np.ndarray, quaternion.quaternion]


def as_wxyz(q: QuaternionLike) -> Quaternion:
    """
    Convert a quaternion-like input to a Quaternion of Python floats.

    Args:
        q: quaternion.quaternion, numpy array of shape (4,), or any
           4-element sequence in scalar-first order [w, x, y, z].

    Returns:
        Quaternion with float components.
    """
    if isinstance(q, quaternion.quaternion):
        return Quaternion(float(q.w), float(q.x), float(q.y), float(q.z))

    if isinstance(q, (str, bytes)):
        raise TypeError(f"Expected a quaternion, got {type(q).__name__}")

    try:
        arr = np.asarray(q, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise TypeError(f"Cannot interpret {q!r} as a quaternion: {e}") from e

    if arr.shape != (4,):
        raise ValueError(f"Quaternion must have exactly 4 components [w, x, y, z], got shape {arr.shape}")

    return Quaternion(*(float(c) for c in arr))


def dot(q0: Sequence[float], q1: Sequence[float]) -> float:
    """4D dot product of two quaternions."""
    return q0[0]*q1[0] + q0[1]*q1[1] + q0[2]*q1[2] + q0[3]*q1[3]


def negate(q: Sequence[float]) -> Quaternion:
    return Quaternion(-q[0], -q[1], -q[2], -q[3])


def norm(q: Sequence[float]) -> float:
    return float(np.sqrt(dot(q, q)))


def to_quaternion(q: Sequence[float]) -> quaternion.quaternion:
    """Convert a (w, x, y, z) tuple to a numpy-quaternion object."""
    return quaternion.quaternion(q[0], q[1], q[2], q[3])


def to_array(q: Sequence[float]) -> np.ndarray:
    """Convert a (w, x, y, z) tuple to a float64 array of shape (4,)."""
    return np.array([q[0], q[1], q[2], q[3]], dtype=np.float64)


def check_unit_norm(q: Quaternion, policy: str = 'ignore',
                    tolerance: float = 1e-6, name: str = 'q') -> None:
    """
    Apply the unit-norm policy to an input quaternion.

    The interpolation routines assume unit quaternions and never normalize.
    With policy 'ignore' nothing is checked, 'warn' logs a warning and 'raise'
    raises ValueError when | |q| - 1 | exceeds tolerance.
    """
    if policy == 'ignore':
        return
    if policy not in UNIT_NORM_POLICIES:
        raise ValueError(f"Unknown unit norm policy: {policy}")

    deviation = abs(norm(q) - 1.0)
    if deviation <= tolerance:
        return

    message = f"Quaternion {name}={tuple(q)} is not unit length (| |q| - 1 | = {deviation:.3e})"
    if policy == 'raise':
        raise ValueError(message)
    logger.warning(message)
