"""
Vector Contract - the operation vocabulary shared by all nine types
===================================================================

One base class carries every operation; the scalar kind supplies the
arithmetic and the dimension classes (Vector2/3/4) supply the component
fields and the dimension-specific angle formula.

    Vector
    ├── Vector2 (x, y)        Int2   Float2   Double2
    ├── Vector3 (x, y, z)     Int3   Float3   Double3
    └── Vector4 (x, y, z, w)  Int4   Float4   Double4

VALUE SEMANTICS:
    Instances are frozen. Components are stored once as a read-only numpy
    array of the kind's dtype (`_values`) and mirrored in the dataclass
    fields. Equality and hash are structural over (type, components):
    Int2(1, 2) != Double2(1, 2).

TYPE RULE:
    Binary vector operations require the operand to be EXACTLY the
    receiver's type (same dimension and same kind). Anything else raises
    TypeMismatchError before any arithmetic happens.

RESULT KINDS:
    add/subtract/multiply/divide/pow/negate/abs/cross   receiver's kind
    dot                                                  receiver's kind
    normalize, rotate*                                   Float64 vector
    floor, ceil                                          Int32 vector
    length, length_squared, distance*, angle             Python float
"""

import math
from dataclasses import FrozenInstanceError
from typing import ClassVar, Iterator, Union

import numpy as np

from ..scalars.kinds import ScalarKind, INT32, FLOAT32, FLOAT64, narrow_to_int32
from ..spec.constants import COMPONENT_NAMES
from ..spec.errors import (
    TypeMismatchError,
    DivisionByZeroError,
    InvalidOperationError,
    InvalidArgumentError,
)
from .conversions import convert, cast_from, check_array_length
from .registry import register, vector_type

Scalar = Union[int, float, np.number]


class Vector:
    """
    Immutable vector of `dim` components of scalar kind `kind`.

    Concrete subclasses set `kind` and are registered automatically.
    """

    kind: ClassVar[ScalarKind] = None
    dim: ClassVar[int] = 0

    # Keep numpy from treating vectors as array-likes in mixed expressions
    # (np.float64(2) * v must call v.__rmul__)
    __array_ufunc__ = None

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if cls.__dict__.get('kind') is not None:
            register(cls)

    def __post_init__(self):
        kind = type(self).kind
        if kind is None:
            raise TypeError(
                f"{type(self).__name__} has no scalar kind, "
                f"instantiate a concrete type such as Double{self.dim}"
            )
        self._freeze(kind.coerce_many([getattr(self, name) for name in self._names()]))

    def _freeze(self, values: np.ndarray):
        values.flags.writeable = False
        object.__setattr__(self, '_values', values)
        for name, value in zip(self._names(), values):
            object.__setattr__(self, name, value)

    def __setattr__(self, name, value):
        raise FrozenInstanceError(f"cannot assign to field {name!r}")

    def __delattr__(self, name):
        raise FrozenInstanceError(f"cannot delete field {name!r}")

    @classmethod
    def _names(cls):
        return COMPONENT_NAMES[:cls.dim]

    @classmethod
    def _from_values(cls, values):
        """Build from an array already valid for this kind (no coercion)."""
        obj = object.__new__(cls)
        obj._freeze(np.array(values, dtype=cls.kind.dtype))
        return obj

    # =================================================================
    # CONSTRUCTORS
    # =================================================================

    @classmethod
    def full(cls, scalar: Scalar):
        """Broadcast constructor: every component equals `scalar`."""
        return cls(*([scalar] * cls.dim))

    @classmethod
    def from_array(cls, values):
        """
        Build from a flat sequence of exactly `dim` components.

        Raises:
            InvalidArgumentError: length differs from `dim`
            TypeMismatchError: element not representable in the kind
        """
        return cls(*check_array_length(values, cls.dim))

    @classmethod
    def from_vector(cls, vector):
        """Cross-kind constructor, e.g. Int3.from_vector(Double3(1.9, -1.9, 0))."""
        return cast_from(cls, vector)

    # =================================================================
    # OPERAND RESOLUTION
    # =================================================================

    def _check_other(self, other, operation: str):
        if type(other) is not type(self):
            raise TypeMismatchError(type(self).__name__, type(other).__name__, operation)

    def _operand(self, other, operation: str):
        """Right-hand side as an array (vector) or kind scalar (broadcast)."""
        if isinstance(other, Vector):
            self._check_other(other, operation)
            return other._values
        return self.kind.coerce(other)

    def _operands(self, operands, operation: str):
        """Accept one vector/scalar operand, or exactly `dim` bare components."""
        if len(operands) == 1:
            return self._operand(operands[0], operation)
        if len(operands) == self.dim:
            return self.kind.coerce_many(operands)
        raise InvalidArgumentError(
            f"{operation} takes a vector, a scalar or {self.dim} components, "
            f"got {len(operands)} arguments",
            expected=self.dim,
            actual=len(operands),
        )

    def _describe(self, values) -> str:
        return ", ".join(
            f"{name}: {self.kind.format(value)}"
            for name, value in zip(self._names(), values)
        )

    def _as_float64(self) -> np.ndarray:
        return self._values.astype(np.float64)

    # =================================================================
    # ARITHMETIC (vector, scalar or components)
    # =================================================================

    def add(self, *operands):
        rhs = self._operands(operands, 'add')
        return self._from_values(self.kind.add(self._values, rhs))

    def subtract(self, *operands):
        rhs = self._operands(operands, 'subtract')
        return self._from_values(self.kind.sub(self._values, rhs))

    def multiply(self, *operands):
        rhs = self._operands(operands, 'multiply')
        return self._from_values(self.kind.mul(self._values, rhs))

    def divide(self, *operands):
        """
        Componentwise division.

        The zero check covers the whole divisor: one zero component fails
        the division even when the others are non-zero.

        Raises:
            DivisionByZeroError: scalar divisor or any divisor component == 0
        """
        rhs = self._operands(operands, 'divide')
        if self.kind.any_zero(rhs):
            if np.ndim(rhs) == 0:
                raise DivisionByZeroError("'other' cannot be zero")
            raise DivisionByZeroError(
                f"'other' cannot have a zero component ({self._describe(rhs)})"
            )
        return self._from_values(self.kind.div(self._values, rhs))

    def pow(self, *operands):
        """Componentwise power (Int32: float64 power, truncated and saturated, see scalars.kinds)."""
        rhs = self._operands(operands, 'pow')
        return self._from_values(self.kind.pow(self._values, rhs))

    def negate(self):
        return self._from_values(self.kind.negate(self._values))

    def abs(self):
        return self._from_values(self.kind.abs(self._values))

    # =================================================================
    # NORMS AND PRODUCTS
    # =================================================================

    def dot(self, other) -> Scalar:
        """Dot product in the receiver's kind (Int32 wraps, Float32 stays single)."""
        self._check_other(other, 'dot')
        return self.kind.dot(self._values, other._values)

    def angle(self, other) -> float:
        raise NotImplementedError

    def length_squared(self) -> float:
        values = self._as_float64()
        return float(np.dot(values, values))

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def distance_squared(self, other) -> float:
        self._check_other(other, 'distance_squared')
        delta = self._as_float64() - other._as_float64()
        return float(np.dot(delta, delta))

    def distance(self, other) -> float:
        return math.sqrt(self.distance_squared(other))

    def normalize(self):
        """
        Unit vector in the same direction, ALWAYS materialized as Float64.

        Raises:
            InvalidOperationError: length is exactly zero
        """
        length = self.length()
        if length == 0.0:
            raise InvalidOperationError("Cannot normalize a zero-length vector")
        return vector_type(self.dim, FLOAT64)._from_values(self._as_float64() / length)

    # =================================================================
    # ROUNDING
    # =================================================================
    #
    # Int vectors return themselves. Floating vectors return an Int vector
    # for floor/ceil, so both paths produce the same type.

    def floor(self):
        if self.kind.is_integer:
            return self
        return vector_type(self.dim, INT32)._from_values(narrow_to_int32(np.floor(self._values)))

    def ceil(self):
        if self.kind.is_integer:
            return self
        return vector_type(self.dim, INT32)._from_values(narrow_to_int32(np.ceil(self._values)))

    def fract(self):
        """
        self - floor(self), in the receiver's kind.

        floor() saturates at the Int32 range, so components beyond it do not
        land in [0, 1): Double3(1e10, 0.5, -0.25).fract().x == 1e10 - INT32_MAX.
        """
        if self.kind.is_integer:
            return self
        return self.subtract(convert(self.floor(), self.kind))

    # =================================================================
    # CONVERSIONS
    # =================================================================

    def to_int(self):
        """Truncate toward zero; NaN -> 0, out-of-range values saturate."""
        return convert(self, INT32)

    def to_float(self):
        return convert(self, FLOAT32)

    def to_double(self):
        return convert(self, FLOAT64)

    def to_array(self) -> np.ndarray:
        """Fresh (writable) array of the components, x, y[, z[, w]] order."""
        return self._values.copy()

    # =================================================================
    # PYTHON PROTOCOLS
    # =================================================================

    def __add__(self, other):
        return self.add(other)

    def __radd__(self, other):
        return self.add(other)

    def __sub__(self, other):
        return self.subtract(other)

    def __rsub__(self, other):
        return self.negate().add(other)

    def __mul__(self, other):
        return self.multiply(other)

    def __rmul__(self, other):
        return self.multiply(other)

    def __truediv__(self, other):
        return self.divide(other)

    def __pow__(self, other):
        return self.pow(other)

    def __neg__(self):
        return self.negate()

    def __abs__(self):
        return self.abs()

    def __iter__(self) -> Iterator:
        return iter(self._values)

    def __len__(self) -> int:
        return self.dim

    def __getitem__(self, index):
        return self._values[index]

    def __eq__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return type(other) is type(self) and bool(np.array_equal(self._values, other._values))

    def __hash__(self):
        return hash((type(self).__name__, tuple(self._values.tolist())))

    def __repr__(self):
        components = ", ".join(self.kind.format(value) for value in self._values)
        return f"{type(self).__name__}({components})"

    __str__ = __repr__


def install_constants(cls):
    """Class decorator: attach ZERO, ONE and UNIT_<AXIS> to a concrete type."""
    cls.ZERO = cls.full(0)
    cls.ONE = cls.full(1)
    for i, name in enumerate(cls._names()):
        unit = [0] * cls.dim
        unit[i] = 1
        setattr(cls, f"UNIT_{name.upper()}", cls(*unit))
    return cls
