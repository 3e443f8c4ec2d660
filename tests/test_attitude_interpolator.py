"""Tests for attitude interpolation over a SQUAD segment."""

import numpy as np
import pytest
import quaternion

from squad.interpolation import interpolate_attitudes


def rotation_about(axis, angle_rad):
    axis = np.asarray(axis, dtype=float)
    return quaternion.from_rotation_vector(axis / np.linalg.norm(axis) * angle_rad)


ATTITUDES = [
    rotation_about([1, 0, 0], 0.2),
    rotation_about([1, 0, 0], 0.7),
    rotation_about([0, 1, 0], 1.1),
    rotation_about([0, 0, 1], 0.9),
]
MATRICES = [quaternion.as_rotation_matrix(q) for q in ATTITUDES]


def test_quaternion_input_endpoints():
    """Checks the matrices start at a1 and end at a2."""
    result = interpolate_attitudes(ATTITUDES, np.array([0.0, 1.0]))
    assert result.shape == (2, 3, 3)
    assert np.allclose(result[0], MATRICES[1], atol=1e-6)
    assert np.allclose(result[1], MATRICES[2], atol=1e-6)


def test_matrix_input_matches_quaternion_input():
    """Checks matrix and quaternion inputs give the same attitudes."""
    fractions = np.linspace(0.0, 1.0, 7)
    from_quats = interpolate_attitudes(ATTITUDES, fractions)
    from_matrices = interpolate_attitudes(MATRICES, fractions, att_format='matrix')
    assert np.allclose(from_quats, from_matrices, atol=1e-9)


def test_array_quaternion_input():
    """Checks [w, x, y, z] arrays are accepted."""
    arrays = [np.array([q.w, q.x, q.y, q.z]) for q in ATTITUDES]
    result = interpolate_attitudes(arrays, 0.0)
    assert np.allclose(result[0], MATRICES[1], atol=1e-6)


def test_scalar_fraction_shape():
    """Checks a scalar fraction returns a single matrix stack."""
    assert interpolate_attitudes(ATTITUDES, 0.5).shape == (1, 3, 3)


def test_matrices_are_rotations():
    """Checks every result is orthonormal with determinant 1."""
    for R in interpolate_attitudes(ATTITUDES, np.linspace(0.0, 1.0, 11)):
        assert np.allclose(R @ R.T, np.eye(3), atol=1e-6)
        assert np.isclose(np.linalg.det(R), 1.0, atol=1e-6)


def test_wrong_count_raises():
    """Checks a segment needs exactly four attitudes."""
    with pytest.raises(ValueError):
        interpolate_attitudes(ATTITUDES[:3], 0.5)


def test_unknown_format_raises():
    """Checks an unknown attitude format raises ValueError."""
    with pytest.raises(ValueError):
        interpolate_attitudes(ATTITUDES, 0.5, att_format='euler')
