"""
vectorize
=========

Immutable 2D/3D/4D vectors over three scalar kinds.

             | Int32  | Float32 | Float64
    ---------|--------|---------|--------
    2D       | Int2   | Float2  | Double2
    3D       | Int3   | Float3  | Double3
    4D       | Int4   | Float4  | Double4

Modules:
    spec     - constants and error kinds
    scalars  - scalar kind arithmetic (Int32 wraps, floats are IEEE-754)
    vectors  - generic contract, 2D/3D/4D specializations, conversions
    direction - unit offset table

Requirements:
    Python >= 3.9
    numpy >= 1.20
    scipy >= 1.11
"""

import sys

# Python version check
if sys.version_info < (3, 9):
    raise ImportError(f"vectorize requires Python >= 3.9, got {sys.version}")

# numpy version check
import numpy as np
_numpy_version = tuple(int(p) for p in np.__version__.split('.')[:2] if p.isdigit())
if _numpy_version < (1, 20):
    raise ImportError(f"vectorize requires numpy >= 1.20, got {np.__version__}")

# scipy version check (Rotation.from_euler single-axis API)
import scipy
_scipy_version = tuple(int(p) for p in scipy.__version__.split('.')[:2] if p.isdigit())
if _scipy_version < (1, 11):
    raise ImportError(f"vectorize requires scipy >= 1.11, got {scipy.__version__}")

from .spec import (
    VectorizeError,
    TypeMismatchError,
    DivisionByZeroError,
    InvalidOperationError,
    InvalidArgumentError,
    NarrowingWarning,
)
from .scalars import ScalarKind, INT32, FLOAT32, FLOAT64, KINDS
from .vectors import (
    Vector,
    Vector2,
    Vector3,
    Vector4,
    Int2, Float2, Double2,
    Int3, Float3, Double3,
    Int4, Float4, Double4,
    Swizzle2,
    Swizzle3,
    HasRotate2D,
    HasCross,
    HasAxisRotation3D,
    convert,
    vector_from_array,
    vector_type,
    registered_types,
)
from .direction import Direction

__version__ = "1.0.2"
