"""
Capability mixins - dimension-specific extensions.

Only the dimensions that support an extension inherit it:

    Capability          | 2D | 3D | 4D
    --------------------|----|----|----
    Swizzle2 (yx)       | x  |    |
    HasRotate2D         | x  |    |
    Swizzle3 (zyx)      |    | x  |
    HasCross            |    | x  |
    HasAxisRotation3D   |    | x  |

so `isinstance(v, HasCross)` is a valid capability test. Mixins rely on
the Vector internals (`_values`, `_from_values`, `_check_other`).

Rotations are floating operations: the result is always the Float64
vector of the same dimension, whatever the receiver's kind.
"""

import numpy as np
from scipy.spatial.transform import Rotation

from ..scalars.kinds import FLOAT64
from ..spec.constants import ROTATION_AXES
from ..spec.errors import InvalidArgumentError
from .registry import vector_type


class Swizzle2:
    """Two-component swizzles."""

    def yx(self):
        x, y = self._values
        return self._from_values([y, x])


class Swizzle3:
    """Three-component swizzles."""

    def zyx(self):
        return self._from_values(self._values[::-1])


class HasRotate2D:
    """Rotation about the origin in the plane."""

    def rotate(self, angle: float):
        """
        Counter-clockwise rotation by `angle` radians.

            x' = x cos(a) - y sin(a)
            y' = x sin(a) + y cos(a)

        Returns:
            Double2
        """
        cos_a = np.cos(angle)
        sin_a = np.sin(angle)
        matrix = np.array([[cos_a, -sin_a],
                           [sin_a, cos_a]])
        return vector_type(2, FLOAT64)._from_values(matrix @ self._as_float64())


class HasCross:
    """Right-handed cross product."""

    def cross(self, other):
        """
        a × b in the receiver's kind (Int32 wraps on overflow).

        Raises:
            TypeMismatchError: `other` is not the receiver's type
        """
        self._check_other(other, 'cross')
        with np.errstate(all='ignore'):
            return self._from_values(np.cross(self._values, other._values))


class HasAxisRotation3D:
    """Rotations about the coordinate axes (right-hand rule)."""

    def rotate_axis(self, axis: str, angle: float):
        """
        Rotate by `angle` radians about coordinate axis `axis`.

        Args:
            axis: 'x', 'y' or 'z' (case-insensitive)
            angle: radians, counter-clockwise looking down the axis

        Returns:
            Double3
        """
        axis = axis.lower()
        if axis not in ROTATION_AXES:
            raise InvalidArgumentError(
                f"axis must be one of {ROTATION_AXES}, got {axis!r}",
                expected=ROTATION_AXES,
                actual=axis,
            )
        matrix = Rotation.from_euler(axis, float(angle)).as_matrix()
        return vector_type(3, FLOAT64)._from_values(matrix @ self._as_float64())

    def rotate_x(self, angle: float):
        return self.rotate_axis('x', angle)

    def rotate_y(self, angle: float):
        return self.rotate_axis('y', angle)

    def rotate_z(self, angle: float):
        return self.rotate_axis('z', angle)
