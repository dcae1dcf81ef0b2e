import math
import struct

# Largest finite single-precision value.
FLOAT32_MAX = struct.unpack('<f', b'\xff\xff\x7f\x7f')[0]

# --- Precision Helpers ---

def round_to_float32(value: float) -> float:
    """Rounds a double to the nearest single-precision float. Values past FLOAT32_MAX become +/-inf."""
    try:
        return struct.unpack('<f', struct.pack('<f', value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)

def fits_float32(value: float) -> bool:
    """True if a finite double lies inside the single-precision range."""
    return abs(value) <= FLOAT32_MAX

# --- IEEE-754 Arithmetic ---
# Python raises ZeroDivisionError for float division by zero and floors its
# modulo; these follow the hardware float contract (IEEE divide, C fmod) instead.

def ieee_divide(dividend: float, divisor: float) -> float:
    """Divides two floats, producing +/-inf or NaN for a zero divisor."""
    if divisor == 0.0:
        if dividend == 0.0 or math.isnan(dividend):
            return math.nan
        return math.copysign(math.inf, dividend) * math.copysign(1.0, divisor)
    return dividend / divisor

def ieee_remainder(dividend: float, divisor: float) -> float:
    """Truncated float remainder (C fmod), taking the dividend's sign. NaN for a zero divisor or infinite dividend."""
    if divisor == 0.0 or math.isinf(dividend):
        return math.nan
    return math.fmod(dividend, divisor)

# --- Integer Ranges ---

def integer_bounds(bits: int, signed: bool) -> tuple[int, int]:
    """Returns the (min, max) values of a fixed-width integer."""
    if signed:
        return -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    return 0, (1 << bits) - 1
