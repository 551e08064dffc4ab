"""Tests for sampling and reflection helpers."""

import random

import pytest

from gfxmath.utils import random_in_unit_sphere, random_unit_vector, reflect
from gfxmath.vector_types import Vector2, Vector3


class TestSampling:
    def test_in_unit_sphere(self, rng) -> None:
        for _ in range(100):
            p = random_in_unit_sphere(rng)
            assert p.dot(p) < 1.0

    def test_unit_vector(self, rng) -> None:
        for _ in range(100):
            assert random_unit_vector(rng).length() == pytest.approx(1.0)

    def test_seeded_generators_agree(self) -> None:
        assert random_unit_vector(random.Random(7)) == random_unit_vector(random.Random(7))

    def test_default_generator(self) -> None:
        assert type(random_unit_vector()) is Vector3


class TestReflect:
    def test_reflect_off_floor(self) -> None:
        assert reflect(Vector3(1, -1, 0), Vector3(0, 1, 0)) == Vector3(1, 1, 0)

    def test_parallel_to_surface_is_unchanged(self) -> None:
        assert reflect(Vector3(1, 0, 0), Vector3(0, 1, 0)) == Vector3(1, 0, 0)

    def test_preserves_length(self, random_vectors, random_axes) -> None:
        for v, n in zip(random_vectors, random_axes):
            assert reflect(v, n).length() == pytest.approx(v.length())

    def test_2d(self) -> None:
        assert reflect(Vector2(2, -3), Vector2(0, 1)) == Vector2(2, 3)
