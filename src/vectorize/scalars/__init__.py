"""Scalar kinds - the component domains of every vector."""

from .kinds import (
    ScalarKind,
    IntegerKind,
    FloatingKind,
    INT32,
    FLOAT32,
    FLOAT64,
    KINDS,
    resolve_kind,
    narrow_to_int32,
)
