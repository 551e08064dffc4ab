# gfxmath/ray.py
from gfxmath.vector import VectorProtocol


class Ray:
    """
    A half-line with an origin and direction, in any dimension.
    """
    def __init__(self, origin: VectorProtocol, direction: VectorProtocol):
        self.origin = origin
        self.direction = direction

    def at(self, t: float) -> VectorProtocol:
        """
        Returns the point along the ray at parameter t.
        """
        return self.origin + self.direction * t

    def __repr__(self) -> str:
        return f"Ray({self.origin!r}, {self.direction!r})"
