# gfxmath/vector.py
"""
Generic vector operators, layered in capability tiers.

A concrete vector type picks the tiers its element type supports:

* ``VectorProtocol``: dot product, ``+``, ``-``, ``*`` (element needs + - * and a zero)
* ``OrderedVectorProtocol``: ``<``, ``<=``, ``>``, ``>=`` (element is totally ordered)
* ``FloatingVectorProtocol``: ``/``, ``length``, ``normalized`` (element is a floating field)
* ``Vector3Protocol``: angles and rotations of 3D vectors

Operators the element type cannot support are simply absent from the type.
"""
import logging
import math
import numbers
from typing import ClassVar, Generic, Iterable, Iterator, List, Type, TypeVar

import numpy as np

from gfxmath import config
from gfxmath.dimension import Dimension
from gfxmath.quaternion import Quaternion

logger = logging.getLogger(__name__)

D = TypeVar("D", bound=Dimension)
E = TypeVar("E")
V = TypeVar("V", bound="VectorProtocol")


class VectorProtocol(Generic[D, E]):
    """
    A fixed-length, indexable sequence of scalar elements.

    Subclasses provide storage through ``__getitem__``, ``__setitem__`` and
    ``from_elements``, and set the ``dimension`` and ``element_type`` class
    attributes. Operands of a binary operator are expected to share both;
    this is not checked.
    """
    dimension: ClassVar[Type[Dimension]]
    element_type: ClassVar[type]

    # Make numpy defer to our reflected operators instead of broadcasting.
    __array_ufunc__ = None

    @classmethod
    def from_elements(cls: Type[V], elements: Iterable) -> V:
        raise NotImplementedError("from_elements() must be implemented by subclasses.")

    def __getitem__(self, index: int) -> E:
        raise NotImplementedError("__getitem__() must be implemented by subclasses.")

    def __setitem__(self, index: int, value: E) -> None:
        raise NotImplementedError("__setitem__() must be implemented by subclasses.")

    @classmethod
    def zero(cls: Type[V]) -> V:
        return cls.from_elements([cls.element_type(0)] * cls.dimension.size)

    @property
    def count(self) -> int:
        return self.dimension.size

    @property
    def rows(self) -> int:
        return self.count

    @property
    def elements(self) -> List[E]:
        return [self[i] for i in range(self.count)]

    def copy(self: V) -> V:
        return self.from_elements(self.elements)

    def __len__(self) -> int:
        return self.count

    def __iter__(self) -> Iterator[E]:
        return iter(self.elements)

    def dot(self, other: "VectorProtocol[D, E]") -> E:
        result = self.element_type(0)
        for i in range(self.count):
            result += self[i] * other[i]
        return result

    def __iadd__(self: V, other: "VectorProtocol[D, E]") -> V:
        if not isinstance(other, VectorProtocol):
            return NotImplemented
        for i in range(self.rows):
            self[i] += other[i]
        return self

    def __add__(self: V, other: "VectorProtocol[D, E]") -> V:
        if not isinstance(other, VectorProtocol):
            return NotImplemented
        result = self.copy()
        result += other
        return result

    def __isub__(self: V, other: "VectorProtocol[D, E]") -> V:
        if not isinstance(other, VectorProtocol):
            return NotImplemented
        for i in range(self.rows):
            self[i] -= other[i]
        return self

    def __sub__(self: V, other: "VectorProtocol[D, E]") -> V:
        if not isinstance(other, VectorProtocol):
            return NotImplemented
        result = self.copy()
        result -= other
        return result

    def __imul__(self: V, other) -> V:
        if isinstance(other, numbers.Number):
            for i in range(self.count):
                self[i] *= other
            return self
        # Element-wise product only between vectors of the same concrete type.
        if type(other) is not type(self):
            return NotImplemented
        for i in range(self.rows):
            self[i] *= other[i]
        return self

    def __mul__(self: V, other) -> V:
        if not isinstance(other, numbers.Number) and type(other) is not type(self):
            return NotImplemented
        result = self.copy()
        result *= other
        return result

    def __rmul__(self: V, other) -> V:
        if not isinstance(other, numbers.Number):
            return NotImplemented
        return self * other

    def __neg__(self: V) -> V:
        result = self.copy()
        result *= -1
        return result

    def __eq__(self, other) -> bool:
        if not isinstance(other, VectorProtocol):
            return NotImplemented
        if self.count != other.count:
            return False
        return all(self[i] == other[i] for i in range(self.count))

    # Vectors are mutable through compound assignment.
    __hash__ = None

    def isclose(self, other: "VectorProtocol[D, E]", rel_tol: float = None, abs_tol: float = None) -> bool:
        """
        Component-wise ``math.isclose``; tolerances default to the configured ones.
        """
        rel_tol = config.REL_TOLERANCE if rel_tol is None else rel_tol
        abs_tol = config.ABS_TOLERANCE if abs_tol is None else abs_tol
        if self.count != other.count:
            return False
        return all(
            math.isclose(self[i], other[i], rel_tol=rel_tol, abs_tol=abs_tol)
            for i in range(self.count)
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(str(e) for e in self.elements)})"


class OrderedVectorProtocol(VectorProtocol[D, E]):
    """
    Relational operators for totally ordered elements.

    Every comparison holds only if it holds for all components: against a
    scalar, each element is compared to it; against a vector, each pair of
    corresponding elements is compared. This is a partial order, so two
    vectors can be neither ``<`` nor ``>=`` one another.
    """
    def __lt__(self, other) -> bool:
        if isinstance(other, VectorProtocol):
            for i in range(self.rows):
                if not (self[i] < other[i]):
                    return False
            return True
        return all(e < other for e in self.elements)

    def __le__(self, other) -> bool:
        if isinstance(other, VectorProtocol):
            for i in range(self.rows):
                if not (self[i] <= other[i]):
                    return False
            return True
        return all(e <= other for e in self.elements)

    def __gt__(self, other) -> bool:
        if isinstance(other, VectorProtocol):
            for i in range(self.rows):
                if not (self[i] > other[i]):
                    return False
            return True
        return all(e > other for e in self.elements)

    def __ge__(self, other) -> bool:
        if isinstance(other, VectorProtocol):
            for i in range(self.rows):
                if not (self[i] >= other[i]):
                    return False
            return True
        return all(e >= other for e in self.elements)


class FloatingVectorProtocol(VectorProtocol[D, E]):
    """
    Division, length and normalization for floating point elements.

    Division by zero follows the element type: numpy floats give inf or nan
    and emit a RuntimeWarning.
    """
    def __itruediv__(self: V, other) -> V:
        if isinstance(other, numbers.Number):
            for i in range(self.count):
                self[i] = self[i] / other
            return self
        if type(other) is not type(self):
            return NotImplemented
        for i in range(self.count):
            self[i] /= other[i]
        return self

    def __truediv__(self: V, other) -> V:
        if not isinstance(other, numbers.Number) and type(other) is not type(self):
            return NotImplemented
        result = self.copy()
        result /= other
        return result

    def length(self) -> float:
        return math.sqrt(self.dot(self))

    def normalized(self: V) -> V:
        l = self.length()
        if l == 0:
            logger.debug("Normalizing zero-length vector %r", self)
            return self.zero()
        return self / l


class Vector3Protocol(FloatingVectorProtocol[D, E]):
    """
    Operations that only make sense for 3D floating point vectors.
    """
    def cross(self: V, other: "VectorProtocol[D, E]") -> V:
        return self.from_elements([
            self[1] * other[2] - self[2] * other[1],
            self[2] * other[0] - self[0] * other[2],
            self[0] * other[1] - self[1] * other[0]
        ])

    def abs_angle(self, other: "Vector3Protocol[D, E]") -> E:
        """
        Angle between two vectors, from 0 to pi (positive only).
        """
        cosine = self.normalized().dot(other.normalized())
        clamped = np.clip(cosine, -1.0, 1.0)
        if clamped != cosine:
            logger.debug("Clamped angle cosine %r into [-1, 1]", cosine)
        return self.element_type(math.acos(clamped))

    def rotated(self: V, angle: float, axis: "Vector3Protocol") -> V:
        """
        Internally constructs a quaternion to perform the rotation.

        Args:
            angle: angle by which to rotate, in radians (use math.radians for degrees)
            axis: axis around which to rotate, will be normalized automatically
        """
        rotation = Quaternion.from_angle(angle / 2, axis)
        return self.rotated_by(rotation)

    def rotated_by(self: V, quaternion: Quaternion) -> V:
        """
        Applies q * v * q^-1, with v lifted into a pure quaternion.
        The quaternion must be of unit length for a pure rotation.
        """
        lifted = Quaternion(self.element_type(0), self)
        rotated = quaternion * lifted * quaternion.inverse
        return self.from_elements(rotated.axis.elements)


def min(vec1: V, vec2: V) -> V:
    """
    Returns: The component-wise min of two given vectors.
    """
    return vec1.from_elements([
        vec1[i] if vec1[i] < vec2[i] else vec2[i] for i in range(vec1.count)
    ])


def max(vec1: V, vec2: V) -> V:
    """
    Returns: The component-wise max of two given vectors.
    """
    return vec1.from_elements([
        vec1[i] if vec1[i] > vec2[i] else vec2[i] for i in range(vec1.count)
    ])
