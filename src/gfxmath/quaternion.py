# gfxmath/quaternion.py
import logging
import math
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gfxmath.vector import Vector3Protocol

logger = logging.getLogger(__name__)


class Quaternion:
    """
    A quaternion w + xi + yj + zk, stored as a scalar part ``w`` and a
    3-vector ``axis`` holding (x, y, z).

    The axis can be any 3D vector type; results of arithmetic keep the
    concrete type of the left operand's axis.
    """
    def __init__(self, w, axis: "Vector3Protocol"):
        self.w = w
        self.axis = axis

    @classmethod
    def from_angle(cls, angle: float, axis: "Vector3Protocol") -> "Quaternion":
        """
        Builds (cos(angle), sin(angle) * axis / |axis|).

        ``angle`` is used as given, in radians. A rotation by theta needs the
        half angle theta / 2, which is what ``Vector3Protocol.rotated`` passes.
        """
        unit_axis = axis.normalized()
        if unit_axis.length() == 0:
            logger.debug("Building a quaternion from a zero-length axis %r", axis)
        return cls(unit_axis.element_type(math.cos(angle)), unit_axis * math.sin(angle))

    @property
    def x(self):
        return self.axis[0]

    @property
    def y(self):
        return self.axis[1]

    @property
    def z(self):
        return self.axis[2]

    def __mul__(self, other: "Quaternion") -> "Quaternion":
        # Hamilton product
        w = self.w * other.w - self.axis.dot(other.axis)
        axis = self.axis * other.w + other.axis * self.w + self.axis.cross(other.axis)
        return Quaternion(w, axis)

    @property
    def conjugate(self) -> "Quaternion":
        return Quaternion(self.w, -self.axis)

    def length_squared(self):
        return self.w * self.w + self.axis.dot(self.axis)

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def normalized(self) -> "Quaternion":
        l = self.length()
        return Quaternion(self.w / l, self.axis / l)

    @property
    def inverse(self) -> "Quaternion":
        """
        The conjugate divided by the squared norm. Equal to the conjugate for
        unit quaternions.
        """
        conjugate = self.conjugate
        norm_sq = self.length_squared()
        return Quaternion(conjugate.w / norm_sq, conjugate.axis / norm_sq)

    def __eq__(self, other):
        if not isinstance(other, Quaternion):
            return NotImplemented
        return bool(self.w == other.w) and self.axis == other.axis

    __hash__ = None

    def __repr__(self) -> str:
        return f"Quaternion(w={self.w}, x={self.x}, y={self.y}, z={self.z})"
