"""
Global constants for vectorize
==============================

All limits and magic numbers in ONE place.
"""

# ---------------------------------------------------------------------
# SCALAR LIMITS
# ---------------------------------------------------------------------

# Two's complement 32-bit range (storage of the Int32 kind)
INT32_MIN = -2**31
INT32_MAX = 2**31 - 1

# ---------------------------------------------------------------------
# VECTOR SHAPES
# ---------------------------------------------------------------------

SUPPORTED_DIMENSIONS = (2, 3, 4)

# Fixed component order: x, y[, z[, w]]
COMPONENT_NAMES = ('x', 'y', 'z', 'w')

# Axis letters accepted by the 3D rotations
ROTATION_AXES = ('x', 'y', 'z')

# ---------------------------------------------------------------------
# KIND NAMES
# ---------------------------------------------------------------------
#
# Kind name   | class prefix | numpy dtype
# ------------|--------------|------------
# Int32       | Int          | int32
# Float32     | Float        | float32
# Float64     | Double       | float64
#
KIND_INT32 = "Int32"
KIND_FLOAT32 = "Float32"
KIND_FLOAT64 = "Float64"

KIND_PREFIXES = {
    KIND_INT32: "Int",
    KIND_FLOAT32: "Float",
    KIND_FLOAT64: "Double",
}

# ---------------------------------------------------------------------
# DISPLAY
# ---------------------------------------------------------------------

# Floating components print as fixed-point with this many decimals ("%f")
DISPLAY_DECIMALS = 6

# ---------------------------------------------------------------------
# TEST TOLERANCES
# ---------------------------------------------------------------------
#
# The library itself never compares with a tolerance (zero tests are exact).
# These are the defaults the test-suite uses for floating comparisons.

EPS_FLOAT64 = 1e-12    # Float64 round-trips and identities
EPS_FLOAT32 = 1e-5     # Float32 round-trips (about 2**-17 relative)
EPS_ANGLE = 1e-9       # Angle identities (radians)

# Default random seed for property sampling (reproducibility)
DEFAULT_SEED = 42
