"""
Concrete vector type registry.

Maps (dimension, kind) -> concrete class (e.g. (3, FLOAT64) -> Double3).
Concrete classes register themselves when defined (Vector.__init_subclass__),
so operations that materialize a different kind (normalize -> Float64,
floor -> Int32) look the target up here instead of importing it.
"""

from typing import Dict, Tuple

from ..scalars.kinds import resolve_kind
from ..spec.constants import SUPPORTED_DIMENSIONS
from ..spec.errors import InvalidArgumentError

_REGISTRY: Dict[Tuple[int, str], type] = {}


def register(cls) -> type:
    """Record `cls` under (cls.dim, cls.kind). Re-registration replaces."""
    _REGISTRY[(cls.dim, cls.kind.name)] = cls
    return cls


def vector_type(dim: int, kind) -> type:
    """
    Look up the concrete vector class.

    Args:
        dim: 2, 3 or 4
        kind: ScalarKind or kind name ("Float64" / "Double")

    Raises:
        InvalidArgumentError: unsupported dimension or unknown kind
    """
    kind = resolve_kind(kind)
    if dim not in SUPPORTED_DIMENSIONS:
        raise InvalidArgumentError(
            f"Vectors have {SUPPORTED_DIMENSIONS} components, got {dim}",
            expected=SUPPORTED_DIMENSIONS,
            actual=dim,
        )
    try:
        return _REGISTRY[(dim, kind.name)]
    except KeyError:
        # Only reachable before vector2/3/4 are imported
        raise LookupError(f"No vector type registered for ({dim}, {kind.name})") from None


def registered_types() -> Tuple[type, ...]:
    """All concrete classes, ordered by (dim, kind name)."""
    return tuple(_REGISTRY[key] for key in sorted(_REGISTRY))
