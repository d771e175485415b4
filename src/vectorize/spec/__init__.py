"""Constants and error kinds shared by every vectorize layer."""

from .constants import (
    INT32_MIN,
    INT32_MAX,
    SUPPORTED_DIMENSIONS,
    COMPONENT_NAMES,
    ROTATION_AXES,
    KIND_INT32,
    KIND_FLOAT32,
    KIND_FLOAT64,
    KIND_PREFIXES,
    DISPLAY_DECIMALS,
    EPS_FLOAT64,
    EPS_FLOAT32,
    EPS_ANGLE,
    DEFAULT_SEED,
)

from .errors import (
    VectorizeError,
    TypeMismatchError,
    DivisionByZeroError,
    InvalidOperationError,
    InvalidArgumentError,
    NarrowingWarning,
)
