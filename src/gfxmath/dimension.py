# gfxmath/dimension.py
from functools import lru_cache
from typing import ClassVar, Type


class Dimension:
    """
    Type-level marker for the number of components of a vector.

    Two vectors are meant to be combined only when they carry the same tag.
    The tag is a static contract; operators do not compare tags at runtime.
    """
    size: ClassVar[int] = 0

    def __init__(self):
        raise TypeError("Dimension tags are used as types, not instantiated.")


@lru_cache(maxsize=None)
def dimension_of(size: int) -> Type[Dimension]:
    """
    Returns the tag for ``size`` components. The same class is returned for
    the same size, so tags can be compared with ``is``.
    """
    if size < 0:
        raise ValueError(f"dimension size must be non-negative, got {size}")
    return type(f"Dim{size}", (Dimension,), {"size": size, "__module__": __name__})


Dim2 = dimension_of(2)
Dim3 = dimension_of(3)
Dim4 = dimension_of(4)
