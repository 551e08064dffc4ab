"""
Configuration & Global Constants
================================
Central registry for the element types of the shipped vector classes and
the numeric tolerances used by approximate comparisons.

Every value can be overridden through an environment variable, read once
when the module is imported.

Exports:
    FLOAT_ELEMENT: Element type of the floating point vectors.
    INT_ELEMENT: Element type of the integer vectors.
    ABS_TOLERANCE (float): Default absolute tolerance for ``isclose``.
    REL_TOLERANCE (float): Default relative tolerance for ``isclose``.
    LOG_LEVEL (str): Level used by ``setup_logging`` when none is given.
"""
import os

import numpy as np


def env_float(name: str, default: float) -> float:
    """
    Read a float from the environment, falling back to ``default`` when unset.
    """
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


# Element types
FLOAT_ELEMENT = np.float64
INT_ELEMENT = np.int64

# Tolerances
ABS_TOLERANCE: float = env_float("GFXMATH_ABS_TOLERANCE", 1e-9)
REL_TOLERANCE: float = env_float("GFXMATH_REL_TOLERANCE", 1e-9)

LOG_LEVEL: str = os.environ.get("GFXMATH_LOG_LEVEL", "WARNING").upper()
