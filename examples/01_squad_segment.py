#!/usr/bin/env python3
"""
SQUAD Example 1: Smooth Keyframe Segment
========================================

This script demonstrates how to interpolate between quaternion keyframes
with SQUAD and compares the result to plain piecewise SLERP.

Shows:
- Building an interpolator from four consecutive keyframes
- Evaluating it at scalar and array parameters
- Loading options from config/squad_config.yaml
- Angular velocity continuity at a shared keyframe

Run from project root:
    python examples/01_squad_segment.py
"""

import sys
import logging
from pathlib import Path

# Setup project root
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

import numpy as np
import quaternion  # numpy-quaternion library

from squad import SquadConfigManager, build_interpolator, interpolate_attitudes
from squad.interpolation import slerp
from squad.utils import dot


def axis_angle(axis, angle_deg):
    """Unit quaternion [w, x, y, z] for a rotation about axis."""
    axis = np.asarray(axis, dtype=float)
    axis = axis / np.linalg.norm(axis)
    half = np.radians(angle_deg) / 2
    return np.concatenate([[np.cos(half)], np.sin(half) * axis])


def angular_speed(q_a, q_b, dt):
    """Rotation angle between two quaternions divided by dt (deg/unit)."""
    d = min(1.0, abs(dot(q_a, q_b)))
    return np.degrees(2 * np.arccos(d)) / dt


def main():
    logging.basicConfig(level=logging.INFO, format='%(levelname)s %(name)s: %(message)s')

    print("=" * 60)
    print("SQUAD Example 1: Smooth Keyframe Segment")
    print("=" * 60)

    # =========================================================================
    # SETUP
    # =========================================================================
    print("\n[Setup] Loading configuration...")
    config = SquadConfigManager(PROJECT_ROOT).load_config("squad_config.yaml")

    keyframes = [
        axis_angle([1, 0, 0], 0),
        axis_angle([1, 0, 0], 60),
        axis_angle([0, 1, 1], 90),
        axis_angle([0, 0, 1], 45),
        axis_angle([1, 1, 0], 120),
    ]

    # Boundary segments repeat the end keyframe as their missing neighbour
    padded = [keyframes[0]] + keyframes + [keyframes[-1]]
    segments = [
        build_interpolator(*padded[i:i + 4], config=config)
        for i in range(len(keyframes) - 1)
    ]
    print(f"  Built {len(segments)} segments from {len(keyframes)} keyframes")

    # =========================================================================
    # EVALUATION
    # =========================================================================
    print("\n[Evaluate] Sampling segment 1...")
    fractions = np.linspace(0.0, 1.0, 5)
    for t, q in zip(fractions, segments[1](fractions)):
        print(f"  t={t:.2f}  q=[{q[0]:+.4f}, {q[1]:+.4f}, {q[2]:+.4f}, {q[3]:+.4f}]  |q|={np.linalg.norm(q):.6f}")

    # =========================================================================
    # CONTINUITY AT KEYFRAME 2
    # =========================================================================
    print("\n[Continuity] Angular speed either side of keyframe 2...")
    h = 1e-3
    squad_in = angular_speed(segments[1](1 - h), segments[1](1.0), h)
    squad_out = angular_speed(segments[2](0.0), segments[2](h), h)

    q1, q2, q3 = keyframes[1], keyframes[2], keyframes[3]
    slerp_in = angular_speed(slerp(1 - h, q1, q2, dot(q1, q2)), q2, h)
    slerp_out = angular_speed(q2, slerp(h, q2, q3, dot(q2, q3)), h)

    print(f"  SQUAD: {squad_in:8.3f} -> {squad_out:8.3f} deg/segment")
    print(f"  SLERP: {slerp_in:8.3f} -> {slerp_out:8.3f} deg/segment")

    # =========================================================================
    # ATTITUDE MATRICES
    # =========================================================================
    print("\n[Attitudes] Rotation matrix halfway through segment 1...")
    matrices = interpolate_attitudes(
        [quaternion.as_rotation_matrix(quaternion.from_float_array(q)) for q in padded[1:5]],
        0.5,
        att_format='matrix'
    )
    print(np.array2string(matrices[0], precision=4, suppress_small=True))

    print("\nDone.")


if __name__ == '__main__':
    main()
