"""Tests for the 3D tier: angles between vectors and quaternion rotations."""

import math

import numpy as np
import pytest

from gfxmath.quaternion import Quaternion
from gfxmath.vector_types import Point3, Vector3


def assert_vectors_close(actual, expected, atol: float = 1e-9) -> None:
    np.testing.assert_allclose(np.asarray(actual), np.asarray(expected), rtol=0, atol=atol)


class TestAbsAngle:
    def test_identical_vectors(self) -> None:
        v = Vector3(1, 2, 3)
        assert v.abs_angle(v) == pytest.approx(0.0, abs=1e-7)

    def test_opposite_vectors(self) -> None:
        v = Vector3(1, 2, 3)
        assert v.abs_angle(-v) == pytest.approx(math.pi)

    def test_perpendicular_vectors(self) -> None:
        assert Vector3(1, 0, 0).abs_angle(Vector3(0, 0, 7)) == pytest.approx(math.pi / 2)

    def test_ignores_magnitude(self) -> None:
        assert Vector3(2, 0, 0).abs_angle(Vector3(3, 3, 0)) == pytest.approx(math.pi / 4)

    def test_direction_agnostic(self, random_vectors) -> None:
        for a, b in zip(random_vectors, random_vectors[1:]):
            assert a.abs_angle(b) == pytest.approx(b.abs_angle(a))

    def test_always_in_range(self, random_vectors) -> None:
        for a, b in zip(random_vectors, random_vectors[1:]):
            angle = a.abs_angle(b)
            assert 0.0 <= angle <= math.pi

    def test_parallel_vectors_never_nan(self, random_vectors) -> None:
        """Rounding can push the cosine past 1; it is clamped before acos."""
        for v in random_vectors:
            for scale in (1.0, 3.7, 1e-3, 1e6):
                assert not math.isnan(v.abs_angle(v * scale))
                assert not math.isnan(v.abs_angle(v * -scale))


class TestRotatedByAngle:
    def test_quarter_turn_around_z(self) -> None:
        assert_vectors_close(Vector3(1, 0, 0).rotated(math.pi / 2, Vector3(0, 0, 1)), Vector3(0, 1, 0))

    def test_half_turn_around_y(self) -> None:
        assert_vectors_close(Vector3(1, 0, 0).rotated(math.pi, Vector3(0, 1, 0)), Vector3(-1, 0, 0))

    def test_angle_is_in_radians(self) -> None:
        rotated = Vector3(0, 1, 0).rotated(math.radians(90), Vector3(1, 0, 0))
        assert_vectors_close(rotated, Vector3(0, 0, 1))

    def test_axis_is_normalized(self) -> None:
        v = Vector3(1, 2, 3)
        assert_vectors_close(v.rotated(0.7, Vector3(0, 0, 5)), v.rotated(0.7, Vector3(0, 0, 1)))

    def test_zero_angle_is_identity(self, random_vectors, random_axes) -> None:
        for v, axis in zip(random_vectors, random_axes):
            assert_vectors_close(v.rotated(0.0, axis), v)

    def test_round_trip(self, random_vectors, random_axes, rng) -> None:
        for v, axis in zip(random_vectors, random_axes):
            theta = rng.uniform(-2 * math.pi, 2 * math.pi)
            assert_vectors_close(v.rotated(theta, axis).rotated(-theta, axis), v)

    def test_preserves_length(self, random_vectors, random_axes, rng) -> None:
        for v, axis in zip(random_vectors, random_axes):
            theta = rng.uniform(-math.pi, math.pi)
            assert v.rotated(theta, axis).length() == pytest.approx(v.length())

    def test_rotation_about_own_axis_is_identity(self) -> None:
        v = Vector3(0, 0, 2)
        assert_vectors_close(v.rotated(1.234, v), v)

    def test_keeps_concrete_type(self) -> None:
        rotated = Point3(1, 0, 0).rotated(math.pi / 2, Vector3(0, 0, 1))
        assert type(rotated) is Point3
        assert_vectors_close(rotated, Point3(0, 1, 0))

    def test_does_not_mutate(self) -> None:
        v = Vector3(1, 0, 0)
        v.rotated(math.pi / 2, Vector3(0, 0, 1))
        assert v == Vector3(1, 0, 0)


class TestRotatedByQuaternion:
    def test_prebuilt_quaternion(self) -> None:
        half = math.pi / 4
        q = Quaternion(math.cos(half), Vector3(0, 0, math.sin(half)))
        assert_vectors_close(Vector3(1, 0, 0).rotated_by(q), Vector3(0, 1, 0))

    def test_matches_angle_axis_form(self, random_vectors, random_axes, rng) -> None:
        for v, axis in zip(random_vectors, random_axes):
            theta = rng.uniform(-math.pi, math.pi)
            q = Quaternion.from_angle(theta / 2, axis)
            assert_vectors_close(v.rotated_by(q), v.rotated(theta, axis))

    def test_composition(self) -> None:
        """Rotating by q2 * q1 equals rotating by q1 then q2."""
        q1 = Quaternion.from_angle(0.3, Vector3(1, 0, 0))
        q2 = Quaternion.from_angle(-0.8, Vector3(0, 1, 1))
        v = Vector3(1, 2, 3)
        assert_vectors_close(v.rotated_by(q2 * q1), v.rotated_by(q1).rotated_by(q2))

    def test_identity_quaternion(self) -> None:
        v = Vector3(4, -5, 6)
        assert_vectors_close(v.rotated_by(Quaternion(1.0, Vector3.zero())), v)
