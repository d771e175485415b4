"""
Scalar Kinds - Int32, Float32, Float64
======================================

The three closed component domains of every vector. A kind owns the
storage dtype, the validation of incoming scalars and the componentwise
arithmetic; vectors never do arithmetic on raw numbers themselves.

ARITHMETIC RULES:
    Int32    two's complement, wraps on overflow
             div  truncates toward zero      (-7 / 2 = -3)
             pow  computed in float64, truncated toward zero
                  and narrowed back with saturation; double-rounding
                  artifacts are part of the contract
    Float32  IEEE-754 single precision; pow computed in float64, narrowed
    Float64  IEEE-754 double precision

    Trig, length, distance and angle are always Float64, whatever the kind.

NARROWING (float -> Int32):
    Truncate toward zero, NaN -> 0, saturate at INT32_MIN / INT32_MAX.
    Explicit conversions warn (NarrowingWarning) when NaN or saturation
    occurs; arithmetic (Int32 pow) does not.

All operations take and return 1-D numpy arrays of the kind's dtype,
except coerce() / scalar() / dot() which work on single values.
"""

import numbers
import warnings

import numpy as np

from ..spec.constants import (
    INT32_MIN,
    INT32_MAX,
    KIND_INT32,
    KIND_FLOAT32,
    KIND_FLOAT64,
    KIND_PREFIXES,
    DISPLAY_DECIMALS,
)
from ..spec.errors import (
    TypeMismatchError,
    InvalidArgumentError,
    NarrowingWarning,
)


def narrow_to_int32(values, warn=True):
    """
    Saturating, truncating cast of floating values to int32.

    Args:
        values: array-like of floats
        warn: emit NarrowingWarning when NaN or saturation occurs

    Returns:
        int32 array: trunc(values), NaN -> 0, clamped to the int32 range
    """
    arr = np.trunc(np.asarray(values, dtype=np.float64))
    nan_mask = np.isnan(arr)
    saturated = (arr < INT32_MIN) | (arr > INT32_MAX)

    if warn and (nan_mask.any() or saturated.any()):
        warnings.warn(
            f"Int32 narrowing of {np.asarray(values).tolist()} is lossy: "
            f"NaN maps to 0 and out-of-range values saturate.",
            NarrowingWarning,
            stacklevel=2
        )

    arr = np.where(nan_mask, 0.0, arr)
    return np.clip(arr, INT32_MIN, INT32_MAX).astype(np.int32)


class ScalarKind:
    """
    One component domain: storage dtype plus arithmetic.

    Subclasses: IntegerKind (Int32), FloatingKind (Float32, Float64).
    Use the module singletons INT32, FLOAT32, FLOAT64; kinds compare by
    identity.
    """

    is_integer = False

    def __init__(self, name: str, dtype):
        self.name = name
        self.dtype = np.dtype(dtype)
        self.prefix = KIND_PREFIXES[name]

    def __repr__(self):
        return f"ScalarKind({self.name})"

    # -----------------------------------------------------------------
    # Validation
    # -----------------------------------------------------------------

    def scalar(self, value):
        """Wrap an already-validated value as this kind's numpy scalar."""
        return self.dtype.type(value)

    def coerce(self, value):
        raise NotImplementedError

    def coerce_many(self, values) -> np.ndarray:
        """Coerce every element of `values`; returns a 1-D array."""
        return np.array([self.coerce(v) for v in values], dtype=self.dtype)

    # -----------------------------------------------------------------
    # Componentwise arithmetic
    # -----------------------------------------------------------------

    def add(self, a, b) -> np.ndarray:
        with np.errstate(all='ignore'):
            return np.add(a, b, dtype=self.dtype)

    def sub(self, a, b) -> np.ndarray:
        with np.errstate(all='ignore'):
            return np.subtract(a, b, dtype=self.dtype)

    def mul(self, a, b) -> np.ndarray:
        with np.errstate(all='ignore'):
            return np.multiply(a, b, dtype=self.dtype)

    def div(self, a, b) -> np.ndarray:
        raise NotImplementedError

    def pow(self, a, b) -> np.ndarray:
        raise NotImplementedError

    def negate(self, a) -> np.ndarray:
        with np.errstate(all='ignore'):
            return np.negative(a, dtype=self.dtype)

    def abs(self, a) -> np.ndarray:
        with np.errstate(all='ignore'):
            return np.abs(a, dtype=self.dtype)

    def is_zero(self, values) -> np.ndarray:
        """Exact zero test per component (-0.0 is zero, NaN is not)."""
        return np.asarray(values) == 0

    def any_zero(self, values) -> bool:
        return bool(np.any(self.is_zero(values)))

    def dot(self, a, b):
        """Sum of products, accumulated in this kind."""
        with np.errstate(all='ignore'):
            return self.scalar(np.sum(self.mul(a, b), dtype=self.dtype))

    # -----------------------------------------------------------------
    # Conversion and display
    # -----------------------------------------------------------------

    def cast(self, values, source: "ScalarKind", warn=True) -> np.ndarray:
        raise NotImplementedError

    def format(self, value) -> str:
        raise NotImplementedError


class IntegerKind(ScalarKind):
    """Int32: wrapping integer arithmetic."""

    is_integer = True

    def coerce(self, value):
        if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Integral):
            raise TypeMismatchError(self.name, type(value).__name__)
        value = int(value)
        if not INT32_MIN <= value <= INT32_MAX:
            raise InvalidArgumentError(
                f"{value} is outside the {self.name} range [{INT32_MIN}, {INT32_MAX}]",
                expected=(INT32_MIN, INT32_MAX),
                actual=value,
            )
        return self.dtype.type(value)

    def div(self, a, b) -> np.ndarray:
        # int64 keeps |INT32_MIN| representable; the final cast wraps
        # INT32_MIN / -1 back to INT32_MIN
        a64 = np.asarray(a, dtype=np.int64)
        b64 = np.asarray(b, dtype=np.int64)
        quotient = np.abs(a64) // np.abs(b64)
        quotient = np.where((a64 < 0) != (b64 < 0), -quotient, quotient)
        return quotient.astype(self.dtype)

    def pow(self, a, b) -> np.ndarray:
        with np.errstate(all='ignore'):
            powered = np.power(np.asarray(a, dtype=np.float64),
                               np.asarray(b, dtype=np.float64))
        return narrow_to_int32(powered, warn=False)

    def cast(self, values, source, warn=True) -> np.ndarray:
        if source.is_integer:
            return np.array(values, dtype=self.dtype)
        return narrow_to_int32(values, warn=warn)

    def format(self, value) -> str:
        return f"{int(value):d}"


class FloatingKind(ScalarKind):
    """Float32 / Float64: IEEE-754, NaN and inf pass through unguarded."""

    def coerce(self, value):
        if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Real):
            raise TypeMismatchError(self.name, type(value).__name__)
        try:
            as_float = float(value)
        except OverflowError:
            raise InvalidArgumentError(
                f"{value} is outside the {self.name} range",
                expected=self.name,
                actual=value,
            ) from None
        with np.errstate(all='ignore'):
            return self.dtype.type(as_float)

    def div(self, a, b) -> np.ndarray:
        with np.errstate(all='ignore'):
            return np.divide(a, b, dtype=self.dtype)

    def pow(self, a, b) -> np.ndarray:
        with np.errstate(all='ignore'):
            powered = np.power(np.asarray(a, dtype=np.float64),
                               np.asarray(b, dtype=np.float64))
            return powered.astype(self.dtype)

    def cast(self, values, source, warn=True) -> np.ndarray:
        with np.errstate(all='ignore'):
            return np.array(values, dtype=self.dtype)

    def format(self, value) -> str:
        return f"{float(value):.{DISPLAY_DECIMALS}f}"


INT32 = IntegerKind(KIND_INT32, np.int32)
FLOAT32 = FloatingKind(KIND_FLOAT32, np.float32)
FLOAT64 = FloatingKind(KIND_FLOAT64, np.float64)

KINDS = (INT32, FLOAT32, FLOAT64)


def resolve_kind(kind) -> ScalarKind:
    """
    Accept a ScalarKind or its name ("Int32") / class prefix ("Int").

    Raises:
        InvalidArgumentError: unknown name
    """
    if isinstance(kind, ScalarKind):
        return kind
    for candidate in KINDS:
        if kind in (candidate.name, candidate.prefix):
            return candidate
    raise InvalidArgumentError(
        f"Unknown scalar kind {kind!r}, expected one of "
        f"{[k.name for k in KINDS]}",
        expected=[k.name for k in KINDS],
        actual=kind,
    )
