# gfxmath/aabb.py
import numpy as np

from gfxmath import vector
from gfxmath.ray import Ray
from gfxmath.vector import OrderedVectorProtocol


class AABB:
    """
    Axis-aligned bounding box spanned by two corner vectors.
    """
    def __init__(self, minimum: OrderedVectorProtocol, maximum: OrderedVectorProtocol):
        self.minimum = minimum
        self.maximum = maximum

    def contains(self, point: OrderedVectorProtocol) -> bool:
        return self.minimum <= point <= self.maximum

    def hit(self, ray: Ray, t_min: float, t_max: float) -> bool:
        # Slab method: for each axis, find intersection intervals.
        # A zero direction component gives an infinite slab distance.
        with np.errstate(divide="ignore", invalid="ignore"):
            for a in range(self.minimum.count):
                invD = 1.0 / ray.direction[a]
                t0 = (self.minimum[a] - ray.origin[a]) * invD
                t1 = (self.maximum[a] - ray.origin[a]) * invD
                if invD < 0:
                    t0, t1 = t1, t0
                t_min = t0 if t0 > t_min else t_min
                t_max = t1 if t1 < t_max else t_max
                if t_max <= t_min:
                    return False
        return True

    def surface_area(self) -> float:
        d = self.maximum - self.minimum
        return 2 * (d[0] * d[1] + d[0] * d[2] + d[1] * d[2])

    @staticmethod
    def surrounding_box(box0: "AABB", box1: "AABB") -> "AABB":
        small = vector.min(box0.minimum, box1.minimum)
        big = vector.max(box0.maximum, box1.maximum)
        return AABB(small, big)

    def __repr__(self) -> str:
        return f"AABB({self.minimum!r}, {self.maximum!r})"
