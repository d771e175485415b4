"""
4D vectors - Int4, Float4, Double4.

No cross product and no rotation: neither has a canonical 4D form.

angle(other) uses acos(a · b / (|a| |b|)), NOT the atan2 form of 2D/3D.
4D has no orientation to sign the angle with, and a zero-length operand
is an error here (InvalidOperationError) rather than atan2(0, 0) = 0.
"""

from dataclasses import dataclass
from typing import Any

import numpy as np

from ..scalars.kinds import INT32, FLOAT32, FLOAT64
from ..spec.errors import InvalidOperationError
from .base import Vector, install_constants


@dataclass(frozen=True, eq=False, repr=False)
class Vector4(Vector):
    """Four components (x, y, z, w). Abstract: use Int4, Float4 or Double4."""

    x: Any
    y: Any
    z: Any
    w: Any

    dim = 4

    def angle(self, other) -> float:
        """
        Unsigned angle between self and other, radians.

        The cosine is clipped to [-1, 1] so rounding on (anti)parallel
        vectors cannot leave the acos domain.

        Raises:
            InvalidOperationError: either operand has zero length
        """
        self._check_other(other, 'angle')
        denominator = self.length() * other.length()
        if denominator == 0.0:
            raise InvalidOperationError(
                "Cannot calculate the angle with a zero-length vector"
            )
        cos_a = float(np.dot(self._as_float64(), other._as_float64())) / denominator
        return float(np.arccos(np.clip(cos_a, -1.0, 1.0)))


@install_constants
class Int4(Vector4):
    kind = INT32


@install_constants
class Float4(Vector4):
    kind = FLOAT32


@install_constants
class Double4(Vector4):
    kind = FLOAT64
