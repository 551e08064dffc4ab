# gfxmath/vector_types.py
from typing import Iterable, Type, TypeVar

import numpy as np

from gfxmath import config
from gfxmath.dimension import Dim2, Dim3, Dim4
from gfxmath.vector import (
    FloatingVectorProtocol,
    OrderedVectorProtocol,
    Vector3Protocol,
    VectorProtocol,
)

A = TypeVar("A", bound="ArrayVector")


def _component(index: int, doc: str) -> property:
    def getter(self):
        return self[index]

    def setter(self, value):
        self[index] = value

    return property(getter, setter, doc=doc)


class ArrayVector(VectorProtocol):
    """
    Vector storage backed by a 1-D numpy array of ``element_type``.
    Components are passed positionally, e.g. ``Vector3(1, 2, 3)``.
    """
    def __init__(self, *components):
        data = np.array(components, dtype=self.element_type)
        if data.shape != (self.dimension.size,):
            raise ValueError(
                f"{type(self).__name__} expects {self.dimension.size} components, got {len(components)}"
            )
        self._data = data

    @classmethod
    def from_elements(cls: Type[A], elements: Iterable) -> A:
        return cls(*elements)

    def __getitem__(self, index: int):
        return self._data[index]

    def __setitem__(self, index: int, value) -> None:
        self._data[index] = value

    @property
    def elements(self) -> list:
        return self._data.tolist()

    def copy(self: A) -> A:
        result = object.__new__(type(self))
        result._data = self._data.copy()
        return result

    def __array__(self, dtype=None, copy=None):
        return np.array(self._data, dtype=dtype)


class Vector2(ArrayVector, OrderedVectorProtocol, FloatingVectorProtocol):
    """
    A 2D floating point vector.
    """
    dimension = Dim2
    element_type = config.FLOAT_ELEMENT

    x = _component(0, "First component.")
    y = _component(1, "Second component.")


class Vector3(ArrayVector, OrderedVectorProtocol, Vector3Protocol):
    """
    A 3D floating point vector supporting arithmetic, comparisons, dot and
    cross products, normalization and rotation.
    """
    dimension = Dim3
    element_type = config.FLOAT_ELEMENT

    x = _component(0, "First component.")
    y = _component(1, "Second component.")
    z = _component(2, "Third component.")


class Vector4(ArrayVector, OrderedVectorProtocol, FloatingVectorProtocol):
    """
    A 4D floating point vector, e.g. homogeneous coordinates or RGBA colors.
    """
    dimension = Dim4
    element_type = config.FLOAT_ELEMENT

    x = _component(0, "First component.")
    y = _component(1, "Second component.")
    z = _component(2, "Third component.")
    w = _component(3, "Fourth component.")


class Point3(ArrayVector, OrderedVectorProtocol, Vector3Protocol):
    """
    A location in 3D space. Shares dimension and element type with Vector3,
    so the two can be added and subtracted: ``Point3 + Vector3 -> Point3``.
    """
    dimension = Dim3
    element_type = config.FLOAT_ELEMENT

    x = _component(0, "First component.")
    y = _component(1, "Second component.")
    z = _component(2, "Third component.")


class UV(ArrayVector, OrderedVectorProtocol, FloatingVectorProtocol):
    """
    Represents a 2D texture coordinate.
    """
    dimension = Dim2
    element_type = config.FLOAT_ELEMENT

    u = _component(0, "Horizontal texture coordinate.")
    v = _component(1, "Vertical texture coordinate.")


class IVector2(ArrayVector, OrderedVectorProtocol):
    """
    A 2D integer vector, e.g. pixel coordinates. Has no division.
    """
    dimension = Dim2
    element_type = config.INT_ELEMENT

    x = _component(0, "First component.")
    y = _component(1, "Second component.")


class IVector3(ArrayVector, OrderedVectorProtocol):
    """
    A 3D integer vector, e.g. grid cell indices. Has no division.
    """
    dimension = Dim3
    element_type = config.INT_ELEMENT

    x = _component(0, "First component.")
    y = _component(1, "Second component.")
    z = _component(2, "Third component.")
