# gfxmath/utils.py
import random
from typing import Optional

from gfxmath.vector import VectorProtocol
from gfxmath.vector_types import Vector3


def random_in_unit_sphere(rng: Optional[random.Random] = None) -> Vector3:
    """
    Returns a random point inside a unit sphere.
    """
    rng = rng or random
    while True:
        p = Vector3(rng.uniform(-1, 1),
                    rng.uniform(-1, 1),
                    rng.uniform(-1, 1))
        if p.dot(p) < 1.0:
            return p


def random_unit_vector(rng: Optional[random.Random] = None) -> Vector3:
    """
    Returns a random unit vector (uniformly distributed over the sphere).
    """
    while True:
        p = random_in_unit_sphere(rng)
        # Points too close to the center lose precision when scaled up.
        if p.dot(p) > 1e-12:
            return p.normalized()


def reflect(v: VectorProtocol, n: VectorProtocol) -> VectorProtocol:
    """
    Reflects vector v about the normal n.
    """
    return v - n * 2 * v.dot(n)
