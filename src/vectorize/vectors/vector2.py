"""
2D vectors - Int2, Float2, Double2.

Adds to the shared contract:
    rotate(angle)   rotation in the plane, result Double2
    yx()            swap swizzle
    angle(other)    SIGNED angle atan2(a × b, a · b), in (-pi, pi]
"""

import math
from dataclasses import dataclass
from typing import Any

from ..scalars.kinds import INT32, FLOAT32, FLOAT64
from .base import Vector, install_constants
from .capabilities import Swizzle2, HasRotate2D


@dataclass(frozen=True, eq=False, repr=False)
class Vector2(Swizzle2, HasRotate2D, Vector):
    """Two components (x, y). Abstract: use Int2, Float2 or Double2."""

    x: Any
    y: Any

    dim = 2

    def angle(self, other) -> float:
        """
        Signed angle from self to other, radians.

        Uses the 2D cross product (determinant) so the rotation direction
        survives: counter-clockwise positive.
        """
        self._check_other(other, 'angle')
        x1, y1 = self._as_float64()
        x2, y2 = other._as_float64()
        return math.atan2(x1 * y2 - y1 * x2, x1 * x2 + y1 * y2)


@install_constants
class Int2(Vector2):
    kind = INT32


@install_constants
class Float2(Vector2):
    kind = FLOAT32


@install_constants
class Double2(Vector2):
    kind = FLOAT64
