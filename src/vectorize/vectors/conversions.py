"""
Conversions - cross-kind casts and array marshalling.

Casts keep the dimension and change the kind:

    Int32   -> Float32 / Float64   exact (Float32 rounds above 2**24)
    Float64 -> Float32             round to nearest, overflow -> +-inf
    Float*  -> Int32               truncate toward zero, NaN -> 0, saturate

Arrays are the only interchange boundary: a flat sequence of exactly
`dim` components in x, y[, z[, w]] order, no framing.
"""

from typing import List

import numpy as np

from ..scalars.kinds import FLOAT64, resolve_kind
from ..spec.constants import SUPPORTED_DIMENSIONS
from ..spec.errors import InvalidArgumentError, TypeMismatchError
from .registry import vector_type


def convert(vector, kind, warn=True):
    """
    Cast `vector` into `kind`, keeping its dimension.

    Args:
        vector: any concrete vector
        kind: ScalarKind or kind name
        warn: emit NarrowingWarning on saturating float -> Int32 casts

    Returns:
        `vector` itself when it already has `kind`, else a new vector
    """
    kind = resolve_kind(kind)
    if vector.kind is kind:
        return vector
    target = vector_type(vector.dim, kind)
    return target._from_values(kind.cast(vector._values, vector.kind, warn=warn))


def cast_from(cls, vector):
    """Cross-kind constructor: build a `cls` from a same-dimension vector."""
    if not hasattr(vector, '_values') or vector.dim != cls.dim:
        raise TypeMismatchError(
            f"vector of dimension {cls.dim}", type(vector).__name__, "from_vector"
        )
    return convert(vector, cls.kind)


def check_array_length(values, dim: int) -> List:
    """
    Validate an array argument for a `dim`-component constructor.

    Raises:
        InvalidArgumentError: not one-dimensional, or length != dim
    """
    if isinstance(values, np.ndarray):
        if values.ndim != 1:
            raise InvalidArgumentError(
                f"'array' must be one-dimensional, found shape {values.shape}",
                expected=(dim,),
                actual=values.shape,
            )
        values = values.tolist()
    else:
        values = list(values)

    if len(values) != dim:
        raise InvalidArgumentError(
            f"'array' must have a length of {dim}, found {len(values)}",
            expected=dim,
            actual=len(values),
        )
    return values


def vector_from_array(values, kind=FLOAT64):
    """
    Build a vector whose dimension is the length of `values`.

    Args:
        values: sequence of 2, 3 or 4 scalars
        kind: ScalarKind or kind name (default Float64)

    Raises:
        InvalidArgumentError: length not in (2, 3, 4)
    """
    if not isinstance(values, np.ndarray):
        values = list(values)
    if len(values) not in SUPPORTED_DIMENSIONS:
        raise InvalidArgumentError(
            f"'array' must have a length in {SUPPORTED_DIMENSIONS}, found {len(values)}",
            expected=SUPPORTED_DIMENSIONS,
            actual=len(values),
        )
    return vector_type(len(values), kind).from_array(values)
