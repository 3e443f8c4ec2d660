"""
Spherical quadrangle (SQUAD) interpolation of unit quaternions.

Provides:
- inv_log_product: scaled log of the relative rotation between two quaternions
- control_rotation: tangent quaternion at the middle of three orientations
- slerp: spherical linear interpolation with a precomputed dot product
- squad: core blend over four orientations, returns a closure of t
- build_interpolator: public entry point with input coercion and output formats

All quaternions are scalar-first (w, x, y, z) and assumed to be unit length.
Products are expanded inline rather than going through a generic multiply.
"""

import logging
from typing import Callable, Optional, Sequence, Union

import numpy as np
import quaternion

from ..config.squad_config_schemas import SquadConfig
from ..config.squad_config_manager import SquadConfigManager
from ..utils.quaternion_utils import (
    Quaternion,
    QuaternionLike,
    as_wxyz,
    check_unit_norm,
    dot,
    negate,
    to_array,
    to_quaternion,
)

logger = logging.getLogger(__name__)

# Below these magnitudes the closed forms divide by ~0; series are used instead
LOG_SERIES_THRESHOLD = 1e-4
EXP_SERIES_THRESHOLD = 1e-4
SLERP_LINEAR_THRESHOLD = 0.9999


def inv_log_product(q0: Sequence[float], q1: Sequence[float]) -> tuple:
    """
    Vector part of log(q1 * inv(q0)) / 4, i.e. the negated quarter log of q0 * inv(q1).

    For a relative rotation of angle a about unit axis u the result is
    u * a / 8.

    Parameters:
    -----------
    q0, q1 : sequence of 4 floats
        Unit quaternions [w, x, y, z]. q1 is inverted by conjugation.

    Returns:
    --------
    tuple
        3-vector (x, y, z)
    """
    w0, x0, y0, z0 = q0
    w1, x1, y1, z1 = q1

    w = w0*w1 + x0*x1 + y0*y1 + z0*z1
    x = w0*x1 - x0*w1 + y0*z1 - z0*y1
    y = w0*y1 - x0*z1 - y0*w1 + z0*x1
    z = w0*z1 + x0*y1 - y0*x1 - z0*w1

    v = np.sqrt(x*x + y*y + z*z)
    if v > LOG_SERIES_THRESHOLD:
        t = np.arctan2(v, w)/(4*v)
    else:
        # atan2(v, w)/(4v) as v -> 0
        t = 8/21 + w*(-27/140 + w*(8/105 - w/70))

    return x*t, y*t, z*t


def control_rotation(q0: Sequence[float], q1: Sequence[float], q2: Sequence[float]) -> Quaternion:
    """
    Generate the control rotation at q1 from its neighbours q0 and q2.

    Parameters:
    -----------
    q0 : sequence of 4 floats
        Previous orientation
    q1 : sequence of 4 floats
        Orientation the control rotation is anchored at
    q2 : sequence of 4 floats
        Next orientation

    Returns:
    --------
    Quaternion
        Control (tangent) quaternion near q1
    """
    w0, x0, y0, z0 = q0
    w1, x1, y1, z1 = q1
    w2, x2, y2, z2 = q2

    # Keep both neighbours on q1's hemisphere
    if w0*w1 + x0*x1 + y0*y1 + z0*z1 < 0:
        w0, x0, y0, z0 = -w0, -x0, -y0, -z0
    if w2*w1 + x2*x1 + y2*y1 + z2*z1 < 0:
        w2, x2, y2, z2 = -w2, -x2, -y2, -z2

    bx0, by0, bz0 = inv_log_product((w0, x0, y0, z0), (w1, x1, y1, z1))
    bx1, by1, bz1 = inv_log_product((w2, x2, y2, z2), (w1, x1, y1, z1))

    mx = bx0 + bx1
    my = by0 + by1
    mz = bz0 + bz1

    n = np.sqrt(mx*mx + my*my + mz*mz)
    if n > EXP_SERIES_THRESHOLD:
        m = np.sin(n)/n
    else:
        m = 1 + n*n*(n*n/120 - 1/6)

    ew = np.cos(n)
    ex = m*mx
    ey = m*my
    ez = m*mz

    return Quaternion(
        ew*w1 - ex*x1 - ey*y1 - ez*z1,
        ex*w1 + ew*x1 - ez*y1 + ey*z1,
        ey*w1 + ez*x1 + ew*y1 - ex*z1,
        ez*w1 - ey*x1 + ex*y1 + ew*z1,
    )


def slerp(t: float, q0: Sequence[float], q1: Sequence[float], d: float) -> Quaternion:
    """
    Spherical linear interpolation between q0 and q1.

    No shortest-path correction is done here: callers pass q1 already on
    q0's hemisphere together with d = dot(q0, q1).

    Parameters:
    -----------
    t : float
        Interpolation parameter, t = 0 returns q0 and t = 1 returns q1
    q0, q1 : sequence of 4 floats
        Unit quaternions [w, x, y, z]
    d : float
        Dot product of q0 and q1

    Returns:
    --------
    Quaternion
        Interpolated quaternion
    """
    w0, x0, y0, z0 = q0
    w1, x1, y1, z1 = q1

    if d < SLERP_LINEAR_THRESHOLD:
        d0 = y0*x1 + w0*z1 - x0*y1 - z0*w1
        d1 = y0*w1 - w0*y1 + z0*x1 - x0*z1
        d2 = y0*z1 - w0*x1 - z0*y1 + x0*w1
        theta = np.arctan2(np.sqrt(d0*d0 + d1*d1 + d2*d2), d)
        rsa = np.sqrt(1 - d*d)
        t0, t1 = np.sin((1 - t)*theta)/rsa, np.sin(t*theta)/rsa
    else:
        t0, t1 = 1 - t, t

    return Quaternion(
        w0*t0 + w1*t1,
        x0*t0 + x1*t1,
        y0*t0 + y1*t1,
        z0*t0 + z1*t1,
    )


def squad(q0: Sequence[float], q1: Sequence[float],
          q2: Sequence[float], q3: Sequence[float]) -> Callable[[float], Quaternion]:
    """
    Build the SQUAD closure for the segment between q1 and q2.

    q0 and q3 are the neighbouring keyframes used for the tangents. The
    returned function maps t in [0, 1] to the orientation along the
    segment, passing through q1 at t = 0 and q2 (up to sign) at t = 1.
    """
    q1 = Quaternion(*q1)
    q2 = Quaternion(*q2)

    p0 = control_rotation(q0, q1, q2)
    p1 = control_rotation(q1, q2, q3)

    dq = dot(q1, q2)
    dp = abs(dot(p0, p1))

    # Flip q2 and p1 together so both slerps take the short arc
    if dq < 0:
        p1 = negate(p1)
        q2 = negate(q2)
        dq = -dq

    def interpolate(t: float) -> Quaternion:
        w0, x0, y0, z0 = slerp(t, q1, q2, dq)
        w1, x1, y1, z1 = slerp(t, p0, p1, dp)

        return slerp(2*t*(1 - t), (w0, x0, y0, z0), (w1, x1, y1, z1),
                     w0*w1 + x0*x1 + y0*y1 + z0*z1)

    return interpolate


def build_interpolator(q0: QuaternionLike, q1: QuaternionLike,
                       q2: QuaternionLike, q3: QuaternionLike,
                       config: Optional[SquadConfig] = None) -> Callable:
    """
    Create a SQUAD interpolator for the segment between q1 and q2.

    Parameters:
    -----------
    q0, q1, q2, q3 : array-like or quaternion
        Consecutive keyframe orientations in scalar-first format [w, x, y, z]
        or numpy-quaternion objects. q0 and q3 are the segment's neighbours;
        for boundary segments the caller decides what to pass (e.g. q0 = q1).
    config : Optional[SquadConfig]
        Input checking and output format options (defaults if None)

    Returns:
    --------
    function
        Interpolation function that takes t (scalar or array-like in [0, 1])
        and returns the interpolated quaternion(s)

    Example:
    --------
    interpolator = build_interpolator(q0, q1, q2, q3)
    q_mid = interpolator(0.5)
    path = interpolator(np.linspace(0.0, 1.0, 50))
    """
    if config is None:
        config = SquadConfig()
    else:
        config = SquadConfigManager.validate(config)

    keyframes = [as_wxyz(q) for q in (q0, q1, q2, q3)]
    for i, q in enumerate(keyframes):
        check_unit_norm(q, config.unit_norm_policy, config.unit_norm_tolerance, name=f"q{i}")

    segment = squad(*keyframes)
    logger.debug(f"Built SQUAD segment from {keyframes[1]} to {keyframes[2]}")

    output_format = config.output_format
    if output_format == 'quaternion':
        convert = to_quaternion
    elif output_format == 'array':
        convert = to_array
    else:
        convert = as_wxyz

    def interpolator(t: Union[float, np.ndarray]):
        """
        Return the SQUAD-interpolated orientation at t.

        Parameters:
        -----------
        t : float or array-like
            Segment fraction(s) in [0, 1]

        Returns:
        --------
        Quaternion, array or quaternion object for scalar t; for array-like t
        a float array of shape t.shape + (4,), or a quaternion array of shape
        t.shape when the output format is 'quaternion'
        """
        if np.ndim(t) == 0:
            return convert(segment(float(t)))

        t = np.asarray(t, dtype=np.float64)
        path = np.empty(t.shape + (4,), dtype=np.float64)
        for index in np.ndindex(t.shape):
            path[index] = segment(float(t[index]))

        if output_format == 'quaternion':
            return quaternion.as_quat_array(path)
        return path

    return interpolator
