"""
Number formatting helpers.
"""

import math
import struct
from decimal import Decimal


def _to_float32(value: float) -> float:
    return struct.unpack("<f", struct.pack("<f", value))[0]


def format_float32(value: float) -> str:
    """
    Format a single precision value with the fewest digits that round-trip.

    Integral values print without a fractional part ("120", not "120.0").
    Positional notation is used for decimal exponents in [-4, 21), scientific
    notation outside of it.

    Args:
        value: A float holding a float32 value (e.g. from struct "<f")

    Returns:
        Shortest decimal representation, e.g. "98.4" for float32(98.4)
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"

    target = _to_float32(value)
    for digits in range(1, 10):
        text = f"{target:.{digits}g}"
        if _to_float32(float(text)) == target:
            break

    shortest = Decimal(text)
    exponent = shortest.adjusted()
    if -4 <= exponent < 21:
        rendered = format(shortest, "f")
        if "." in rendered:
            rendered = rendered.rstrip("0").rstrip(".")
        return rendered

    mantissa, _, power = f"{shortest:e}".partition("e")
    if "." in mantissa:
        mantissa = mantissa.rstrip("0").rstrip(".")
    sign = power[0] if power[0] in "+-" else "+"
    digits_part = power.lstrip("+-").rjust(2, "0")
    return f"{mantissa}e{sign}{digits_part}"
