"""
Vector types - the generic contract, its capabilities and the nine
concrete (dimension x kind) classes.

Import order matters: the dimension modules register their concrete
classes on import, and conversions/normalize look them up at call time.
"""

from .base import Vector
from .capabilities import (
    Swizzle2,
    Swizzle3,
    HasRotate2D,
    HasCross,
    HasAxisRotation3D,
)
from .vector2 import Vector2, Int2, Float2, Double2
from .vector3 import Vector3, Int3, Float3, Double3
from .vector4 import Vector4, Int4, Float4, Double4
from .conversions import convert, vector_from_array
from .registry import vector_type, registered_types
