"""
3D vectors - Int3, Float3, Double3.

Adds to the shared contract:
    cross(other)              right-handed cross product, receiver's kind
    rotate_x/y/z(angle)       axis rotations, result Double3
    zyx()                     reverse swizzle
    angle(other)              atan2(|a × b|, a · b), in [0, pi]

The atan2 form stays accurate near 0 and pi, where acos(a·b / |a||b|)
loses most of its digits.
"""

import math
from dataclasses import dataclass
from typing import Any

import numpy as np

from ..scalars.kinds import INT32, FLOAT32, FLOAT64
from .base import Vector, install_constants
from .capabilities import Swizzle3, HasCross, HasAxisRotation3D


@dataclass(frozen=True, eq=False, repr=False)
class Vector3(Swizzle3, HasCross, HasAxisRotation3D, Vector):
    """Three components (x, y, z). Abstract: use Int3, Float3 or Double3."""

    x: Any
    y: Any
    z: Any

    dim = 3

    def angle(self, other) -> float:
        """Unsigned angle between self and other, radians."""
        self._check_other(other, 'angle')
        a = self._as_float64()
        b = other._as_float64()
        return math.atan2(float(np.linalg.norm(np.cross(a, b))), float(np.dot(a, b)))


@install_constants
class Int3(Vector3):
    kind = INT32


@install_constants
class Float3(Vector3):
    kind = FLOAT32


@install_constants
class Double3(Vector3):
    kind = FLOAT64
