"""Fixed-dimension numeric vectors with element-type aware arithmetic, reductions and casts."""

from .settings import Settings
from .errors import CastError, UnsupportedOperationError
from .types import (
    ElementKind, ElementType, element_type,
    I8, I16, I32, I64, I128, U8, U16, U32, U64, U128, F32, F64,
    Vector, Vec2, Vec3,
)

__version__ = "0.1.0"


def vector(*components, dtype=None) -> Vector:
    """Literal shorthand: ``vector(1, 2, 3)`` is ``Vector([1, 2, 3])``."""
    return Vector(components, dtype)


__all__ = [
    "Settings", "CastError", "UnsupportedOperationError",
    "ElementKind", "ElementType", "element_type",
    "I8", "I16", "I32", "I64", "I128", "U8", "U16", "U32", "U64", "U128", "F32", "F64",
    "Vector", "Vec2", "Vec3", "vector", "__version__",
]
