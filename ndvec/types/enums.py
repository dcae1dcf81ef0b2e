from enum import Enum


class ElementKind(Enum):
    """Numeric family of a vector's element type."""
    SIGNED = "signed"       # Two's complement integer
    UNSIGNED = "unsigned"   # Non-negative integer
    FLOAT = "float"         # IEEE-754 binary floating point

    @property
    def is_integer(self) -> bool:
        return self is not ElementKind.FLOAT


if __name__ == '__main__':
    print(f"ElementKind.SIGNED: {ElementKind.SIGNED.value}")
    assert ElementKind.UNSIGNED.is_integer
    assert not ElementKind.FLOAT.is_integer
