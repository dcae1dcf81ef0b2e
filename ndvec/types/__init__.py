# Main __init__.py for the types sub-package

from .enums import ElementKind
from .element import (
    ElementType, element_type, infer_element_type,
    I8, I16, I32, I64, I128, U8, U16, U32, U64, U128, F32, F64,
)
from .vector import Vector, Vec2, Vec3


__all__ = [
    "ElementKind", "ElementType", "element_type", "infer_element_type",
    "I8", "I16", "I32", "I64", "I128", "U8", "U16", "U32", "U64", "U128", "F32", "F64",
    "Vector", "Vec2", "Vec3",
]
