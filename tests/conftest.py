"""Shared pytest fixtures for gfxmath tests."""

import random

import pytest

from gfxmath.utils import random_unit_vector
from gfxmath.vector_types import Vector3


@pytest.fixture
def rng() -> random.Random:
    """Seeded generator so property loops are reproducible."""
    return random.Random(42)


@pytest.fixture
def random_vectors(rng: random.Random) -> list:
    """Twenty vectors with components in [-10, 10]."""
    return [
        Vector3(rng.uniform(-10, 10), rng.uniform(-10, 10), rng.uniform(-10, 10))
        for _ in range(20)
    ]


@pytest.fixture
def random_axes(rng: random.Random) -> list:
    """Twenty unit vectors uniformly distributed over the sphere."""
    return [random_unit_vector(rng) for _ in range(20)]
