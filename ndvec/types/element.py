"""
Element types for vector components.

Python numbers are unbounded (int) or double precision (float), so each vector
carries an ElementType describing the fixed-width numeric type its components
emulate. The element type owns the per-component arithmetic (overflow checks,
single-precision rounding, IEEE division) and the three conversion protocols
used by vector casting:

- num_convert: permissive, any numeric pair; returns None when the value
  is not representable.
- try_convert: integer narrowing with a range check, plus every lossless
  conversion; raises CastError when the value does not fit.
- convert: lossless widening only.
"""
import dataclasses
import math
import numbers
from typing import Optional

from ndvec.errors import CastError
from ndvec.settings import Settings
from ndvec.types.enums import ElementKind
from ndvec.utils.helpers import (
    round_to_float32, fits_float32, ieee_divide, ieee_remainder, integer_bounds,
)


def _is_integral(value) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


@dataclasses.dataclass(frozen=True, slots=True)
class ElementType:
    """A fixed-width numeric type, e.g. i32 or f64."""
    name: str
    kind: ElementKind
    bits: int

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"ElementType('{self.name}')"

    # --- Capabilities ---

    @property
    def is_integer(self) -> bool:
        return self.kind.is_integer

    @property
    def is_signed(self) -> bool:
        """Signed integers and floats have additive inverses for every value."""
        return self.kind is not ElementKind.UNSIGNED

    @property
    def is_real(self) -> bool:
        """Supports real-number operations such as square root."""
        return self.kind is ElementKind.FLOAT

    @property
    def is_totally_ordered(self) -> bool:
        # NaN breaks total ordering for floats.
        return self.kind.is_integer

    @property
    def min_value(self):
        if self.is_integer:
            return integer_bounds(self.bits, self.is_signed)[0]
        return -math.inf

    @property
    def max_value(self):
        if self.is_integer:
            return integer_bounds(self.bits, self.is_signed)[1]
        return math.inf

    @property
    def zero(self):
        """Additive identity."""
        return 0 if self.is_integer else 0.0

    def default(self):
        """The value a default-constructed component takes; a call so non-zero defaults stay possible. Zero for every numeric type."""
        return self.zero

    # --- Validation ---

    def coerce(self, value):
        """Validates a component supplied by a caller and returns it in this type's representation."""
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            raise TypeError(f"{self.name} components must be real numbers, got {type(value).__name__}.")
        if self.is_integer:
            if not isinstance(value, numbers.Integral):
                raise TypeError(f"{self.name} components must be integers, got {value!r}.")
            value = int(value)
            if not self.min_value <= value <= self.max_value:
                raise OverflowError(f"{value} is out of range for {self.name}.")
            return value
        return self._round(float(value))

    def check(self, value, operation: str = "compute"):
        """Normalizes an arithmetic result. Integer results outside the range raise OverflowError."""
        if self.is_integer:
            if not self.min_value <= value <= self.max_value:
                raise OverflowError(f"attempt to {operation} with overflow ({value} does not fit in {self.name})")
            return value
        return self._round(value)

    def _round(self, value: float) -> float:
        if self.bits == 32:
            return round_to_float32(value)
        return float(value)

    # --- Arithmetic ---

    def add(self, a, b):
        return self.check(a + b, "add")

    def sub(self, a, b):
        return self.check(a - b, "subtract")

    def mul(self, a, b):
        return self.check(a * b, "multiply")

    def _truncated_quotient(self, a: int, b: int, operation: str) -> int:
        # Rounds toward zero; a zero divisor raises ZeroDivisionError.
        quotient = abs(a) // abs(b)
        if (a < 0) != (b < 0):
            quotient = -quotient
        return self.check(quotient, operation)

    def div(self, a, b):
        if self.is_integer:
            return self._truncated_quotient(a, b, "divide")
        return self._round(ieee_divide(a, b))

    def rem(self, a, b):
        """Remainder carrying the dividend's sign (fmod semantics)."""
        if self.is_integer:
            return a - b * self._truncated_quotient(a, b, "calculate the remainder")
        return self._round(ieee_remainder(a, b))

    def neg(self, a):
        return self.sub(self.zero, a)

    def abs(self, a):
        return self.check(abs(a), "take the absolute value")

    def signum(self, a):
        if self.is_real and math.isnan(a):
            return a
        sign = (a > 0) - (a < 0)
        return float(sign) if self.is_real else sign

    def sqrt(self, a):
        return self._round(math.sqrt(a))

    # --- Conversions ---

    def can_convert_from(self, source: "ElementType") -> bool:
        """True if every value of source is exactly representable in this type."""
        if source == self:
            return True
        if source.is_integer and self.is_integer:
            if source.is_signed and not self.is_signed:
                return False
            return self.bits > source.bits
        if source.is_integer:
            # Integers up to half the mantissa width survive exactly.
            return source.bits <= (16 if self.bits == 32 else 32)
        return self.is_real and self.bits >= source.bits

    def can_try_convert_from(self, source: "ElementType") -> bool:
        return (source.is_integer and self.is_integer) or self.can_convert_from(source)

    def convert(self, value, source: "ElementType"):
        """Lossless conversion. Callers must check can_convert_from first."""
        if self.is_integer:
            return value
        return self._round(float(value))

    def try_convert(self, value, source: "ElementType"):
        """Range-checked conversion. Raises CastError when the value does not fit."""
        if self.is_integer and not self.min_value <= value <= self.max_value:
            raise CastError(f"out of range integral type conversion attempted: {value} ({source.name}) does not fit in {self.name}")
        return self.convert(value, source)

    def num_convert(self, value, source: "ElementType") -> Optional[object]:
        """Permissive conversion. Returns None if the value is not representable in this type."""
        if self.is_integer:
            if not source.is_integer:
                if math.isnan(value) or math.isinf(value):
                    return None
                value = math.trunc(value)
            if not self.min_value <= value <= self.max_value:
                return None
            return value
        if source.is_real and self.bits < source.bits and math.isfinite(value) and not fits_float32(value):
            return None
        return self._round(float(value))


_REGISTRY: dict[str, ElementType] = {}

def _register(name: str, kind: ElementKind, bits: int) -> ElementType:
    _REGISTRY[name] = ElementType(name, kind, bits)
    return _REGISTRY[name]

I8 = _register("i8", ElementKind.SIGNED, 8)
I16 = _register("i16", ElementKind.SIGNED, 16)
I32 = _register("i32", ElementKind.SIGNED, 32)
I64 = _register("i64", ElementKind.SIGNED, 64)
I128 = _register("i128", ElementKind.SIGNED, 128)
U8 = _register("u8", ElementKind.UNSIGNED, 8)
U16 = _register("u16", ElementKind.UNSIGNED, 16)
U32 = _register("u32", ElementKind.UNSIGNED, 32)
U64 = _register("u64", ElementKind.UNSIGNED, 64)
U128 = _register("u128", ElementKind.UNSIGNED, 128)
F32 = _register("f32", ElementKind.FLOAT, 32)
F64 = _register("f64", ElementKind.FLOAT, 64)


def element_type(spec) -> ElementType:
    """
    Resolves an element type from an ElementType, a registered name ("u8", "f32", ...),
    or the builtins int / float, which map to the Settings defaults.
    """
    if isinstance(spec, ElementType):
        return spec
    if spec is int:
        spec = Settings.DEFAULT_INTEGER_TYPE
    elif spec is float:
        spec = Settings.DEFAULT_FLOAT_TYPE
    if not isinstance(spec, str):
        raise TypeError(f"Element type must be an ElementType, a type name, int or float, not {type(spec).__name__}.")
    try:
        return _REGISTRY[spec.lower()]
    except KeyError:
        raise ValueError(f"Unknown element type '{spec}'. Known types: {', '.join(_REGISTRY)}.") from None


def infer_element_type(values) -> ElementType:
    """All-integer components give the default integer type, anything else the default float type."""
    if values and all(_is_integral(v) for v in values):
        return element_type(int)
    return element_type(float)
