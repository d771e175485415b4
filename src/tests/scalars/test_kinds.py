"""
Scalar Kind Tests
=================

Arithmetic rules of Int32 / Float32 / Float64 in isolation:
- Int32 wraps, divides toward zero, pow = truncated float64 power
- exact zero tests
- scalar validation (coerce)
- saturating float -> int32 narrowing

Run: python -m pytest tests/scalars/test_kinds.py -v
"""

import math

import numpy as np
import pytest

from vectorize.scalars.kinds import (
    INT32,
    FLOAT32,
    FLOAT64,
    KINDS,
    resolve_kind,
    narrow_to_int32,
)
from vectorize.spec.constants import INT32_MIN, INT32_MAX
from vectorize.spec.errors import (
    TypeMismatchError,
    InvalidArgumentError,
    NarrowingWarning,
)


def ints(*values):
    return np.array(values, dtype=np.int32)


def doubles(*values):
    return np.array(values, dtype=np.float64)


# =============================================================================
# K1: Int32 arithmetic
# =============================================================================

def test_int32_add_wraps():
    """K1.1: INT32_MAX + 1 wraps to INT32_MIN (two's complement)."""
    result = INT32.add(ints(INT32_MAX, 5), ints(1, 5))
    assert result.dtype == np.int32
    assert result.tolist() == [INT32_MIN, 10]


def test_int32_sub_and_mul_wrap():
    """K1.2: Subtraction and multiplication wrap as well."""
    assert INT32.sub(ints(INT32_MIN), ints(1)).tolist() == [INT32_MAX]
    assert INT32.mul(ints(65536), ints(65536)).tolist() == [0]


def test_int32_div_truncates_toward_zero():
    """K1.3: -7 / 2 = -3 and 7 / -2 = -3 (not floor division)."""
    result = INT32.div(ints(-7, 7, 7, -7), ints(2, -2, 2, -2))
    assert result.tolist() == [-3, -3, 3, 3]


def test_int32_div_min_by_minus_one_wraps():
    """K1.4: INT32_MIN / -1 overflows back to INT32_MIN."""
    assert INT32.div(ints(INT32_MIN), ints(-1)).tolist() == [INT32_MIN]


def test_int32_pow_is_truncated_float_pow():
    """K1.5: pow computed in float64 then truncated toward zero."""
    result = INT32.pow(ints(2, 3, 2, -3, 7), ints(10, 2, -1, 3, 0))
    assert result.tolist() == [1024, 9, 0, -27, 1]


def test_int32_pow_saturates():
    """K1.6: Results beyond the int32 range saturate instead of wrapping."""
    result = INT32.pow(ints(2, -2, 0), ints(31, 31, -1))
    # 2**31 -> INT32_MAX, (-2)**31 == INT32_MIN exactly, 0**-1 = inf -> INT32_MAX
    assert result.tolist() == [INT32_MAX, INT32_MIN, INT32_MAX]


def test_int32_pow_keeps_double_rounding():
    """K1.7: Powers go through float64: exact below 2**53, saturating above int32."""
    exact = 3 ** 19
    assert INT32.pow(ints(3), ints(19)).tolist() == [exact]
    # 3**35 overflows int32 and saturates, no wrap-around modulo 2**32
    assert INT32.pow(ints(3), ints(35)).tolist() == [INT32_MAX]


def test_int32_negate_and_abs_wrap():
    """K1.8: -INT32_MIN and abs(INT32_MIN) are INT32_MIN."""
    assert INT32.negate(ints(INT32_MIN, 4)).tolist() == [INT32_MIN, -4]
    assert INT32.abs(ints(INT32_MIN, -4)).tolist() == [INT32_MIN, 4]


def test_int32_dot_accumulates_in_kind():
    """K1.9: Dot product wraps in int32 instead of widening."""
    result = INT32.dot(ints(65536, 3), ints(65536, 4))
    assert isinstance(result, np.int32)
    assert result == 12


# =============================================================================
# K2: Floating arithmetic
# =============================================================================

def test_float32_stays_single_precision():
    """K2.1: Float32 arithmetic keeps the float32 dtype."""
    a = np.array([0.1, 0.2], dtype=np.float32)
    for op in (FLOAT32.add, FLOAT32.sub, FLOAT32.mul, FLOAT32.div):
        assert op(a, a).dtype == np.float32
    assert isinstance(FLOAT32.dot(a, a), np.float32)


def test_float32_pow_narrows_from_double():
    """K2.2: Float32 pow is float64 pow rounded to float32."""
    a = np.array([2.0, 10.0], dtype=np.float32)
    b = np.array([0.5, -1.0], dtype=np.float32)
    result = FLOAT32.pow(a, b)
    assert result.dtype == np.float32
    assert result[0] == np.float32(math.sqrt(2.0))
    assert result[1] == np.float32(0.1)


def test_float64_ieee_passthrough():
    """K2.3: inf and NaN are produced, not guarded."""
    result = FLOAT64.div(doubles(1.0, -1.0), doubles(1e-320, 1e-320))
    assert np.isinf(result).all()
    assert np.isnan(FLOAT64.pow(doubles(-8.0), doubles(1.0 / 3.0)))[0]


# =============================================================================
# K3: Zero test
# =============================================================================

@pytest.mark.parametrize("kind", [FLOAT32, FLOAT64])
def test_is_zero_exact(kind):
    """K3.1: -0.0 is zero, NaN and tiny values are not."""
    values = np.array([0.0, -0.0, np.nan, 1e-30], dtype=kind.dtype)
    assert kind.is_zero(values).tolist() == [True, True, False, False]


def test_any_zero_scalar_and_array():
    """K3.2: any_zero works on a scalar and on a whole operand."""
    assert INT32.any_zero(np.int32(0))
    assert not INT32.any_zero(np.int32(3))
    assert INT32.any_zero(ints(2, 0))
    assert not INT32.any_zero(ints(2, 1))


# =============================================================================
# K4: Validation
# =============================================================================

def test_int32_coerce_rejects_non_integral():
    """K4.1: 2.5, 2.0, True and strings are not Int32 scalars."""
    for value in (2.5, 2.0, np.float64(2.0), True, "2", None):
        with pytest.raises(TypeMismatchError):
            INT32.coerce(value)


def test_int32_coerce_range():
    """K4.2: Values outside the int32 range are rejected."""
    assert INT32.coerce(INT32_MAX) == INT32_MAX
    assert INT32.coerce(np.int64(INT32_MIN)) == INT32_MIN
    with pytest.raises(InvalidArgumentError):
        INT32.coerce(INT32_MAX + 1)
    with pytest.raises(InvalidArgumentError):
        INT32.coerce(INT32_MIN - 1)


def test_float_coerce_accepts_reals():
    """K4.3: Float kinds accept ints and floats of any width."""
    assert FLOAT32.coerce(0.1) == np.float32(0.1)
    assert isinstance(FLOAT32.coerce(3), np.float32)
    assert isinstance(FLOAT64.coerce(np.int32(3)), np.float64)
    with pytest.raises(TypeMismatchError):
        FLOAT64.coerce(1 + 2j)
    with pytest.raises(TypeMismatchError):
        FLOAT64.coerce("1.0")


def test_coerce_many_builds_kind_array():
    """K4.4: coerce_many returns a 1-D array of the kind's dtype."""
    arr = FLOAT32.coerce_many([1, 2.5, np.float64(3)])
    assert arr.dtype == np.float32
    assert arr.tolist() == [1.0, 2.5, 3.0]


# =============================================================================
# K5: Narrowing and casts
# =============================================================================

def test_narrow_truncates_toward_zero():
    """K5.1: 1.9 -> 1, -1.9 -> -1, no warning in range."""
    assert narrow_to_int32([1.9, -1.9, 0.5, -0.5]).tolist() == [1, -1, 0, 0]


def test_narrow_nan_and_saturation_warn():
    """K5.2: NaN -> 0, +-inf / huge values saturate, with a warning."""
    with pytest.warns(NarrowingWarning):
        result = narrow_to_int32([np.nan, np.inf, -1e20, 2147483647.5])
    assert result.tolist() == [0, INT32_MAX, INT32_MIN, INT32_MAX]


def test_int_cast_from_float_kind():
    """K5.3: Float64 -> Int32 uses narrowing, Int32 -> Int32 copies."""
    assert INT32.cast(doubles(2.7, -2.7), FLOAT64).tolist() == [2, -2]
    assert INT32.cast(ints(5), INT32).tolist() == [5]


def test_float32_cast_overflows_to_inf():
    """K5.4: Float64 beyond float32 range becomes inf."""
    result = FLOAT32.cast(doubles(1e300, -1e300), FLOAT64)
    assert result.dtype == np.float32
    assert result.tolist() == [math.inf, -math.inf]


# =============================================================================
# K6: Display and lookup
# =============================================================================

def test_format():
    """K6.1: %d for Int32, %f (6 decimals) for floating kinds."""
    assert INT32.format(np.int32(-5)) == "-5"
    assert FLOAT64.format(1.0) == "1.000000"
    assert FLOAT32.format(np.float32(0.5)) == "0.500000"


def test_resolve_kind():
    """K6.2: Kinds resolve from names and class prefixes."""
    assert resolve_kind("Int32") is INT32
    assert resolve_kind("Float") is FLOAT32
    assert resolve_kind("Double") is FLOAT64
    assert resolve_kind(FLOAT64) is FLOAT64
    with pytest.raises(InvalidArgumentError):
        resolve_kind("Int64")


def test_kind_table():
    """K6.3: Exactly three kinds, one integer."""
    assert [k.name for k in KINDS] == ["Int32", "Float32", "Float64"]
    assert [k.is_integer for k in KINDS] == [True, False, False]
    assert [k.dtype for k in KINDS] == [np.dtype(np.int32), np.dtype(np.float32), np.dtype(np.float64)]


def test_float_coerce_rejects_ints_beyond_float64():
    """K4.5: An int too large for float64 is an invalid argument."""
    with pytest.raises(InvalidArgumentError):
        FLOAT64.coerce(10 ** 400)
    with pytest.raises(InvalidArgumentError):
        FLOAT32.coerce(-10 ** 400)
    # inside float64 but beyond float32 rounds to inf
    assert FLOAT32.coerce(10 ** 300) == np.float32(np.inf)
