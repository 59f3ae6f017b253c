"""
Numeric interop - bridge between magnitudes and Python's native int and float.

This is for bootstrapping small values and for approximate readback.
Anything at or beyond BASE must come in as text, e.g. BigInteger('12345678901234567890').
"""

import math

from .digit import BASE
from .digit import DIGIT_BITS


class PrecisionLossError(ValueError):
    """e.g. BigInteger(2.5) or BigInteger(2**40) or float(BigInteger('1' + '0' * 400))"""


def from_native(n):
    """
    Convert a small int or integral float.  Return (negative, magnitude).

    The magnitude of n must be strictly less than BASE.
    """
    if isinstance(n, bool) or not isinstance(n, (int, float)):
        raise TypeError("Expecting an int or float, not a {}".format(type(n).__name__))
    if isinstance(n, float):
        if math.isnan(n) or math.isinf(n):
            raise PrecisionLossError("{} has no integer value.".format(repr(n)))
        if not n.is_integer():
            raise PrecisionLossError("{} would lose its fractional part.".format(repr(n)))
        n = int(n)
    if not -BASE < n < BASE:
        raise PrecisionLossError(
            "{} is too big to store accurately.  Pass it as a string instead.".format(repr(n))
        )
    return n < 0, [abs(n)] if n != 0 else []
assert (True, [42]) == from_native(-42.0)
assert (False, []) == from_native(0)


def exact_int(negative, magnitude):
    """Convert to a native int, exactly.  Python ints have no size limit."""
    value = 0
    for digit in reversed(magnitude):
        value = (value << DIGIT_BITS) | digit
    return -value if negative else value
assert -(BASE + 3) == exact_int(True, [3, 1])


def to_native(negative, magnitude):
    """
    Convert to a float, approximately.

    Up to 53 significant bits this is exact.  Beyond that it rounds to nearest,
    ties to even, the same way float() rounds a Python int.
    """
    try:
        return float(exact_int(negative, magnitude))
    except OverflowError:
        raise PrecisionLossError("A {}-digit magnitude is beyond the range of a float.".format(
            len(magnitude),
        ))
