"""
A BigInteger is a signed integer of any size.

Features:
 - arbitrary precision
 - immutable values
 - text in and out, in any radix from 2 to 36
"""

import logging
import numbers

from . import magnitude
from . import native
from . import text
from .digit import DIGIT_BITS
from .digit import InternalInvariantError


logger = logging.getLogger(__name__)


class UnsupportedExponentError(ValueError):
    """e.g. BigInteger(2) ** -1 or BigInteger(2) ** BigInteger('9007199254740992')"""


class BigInteger(numbers.Number):
    """
    Signed arbitrary precision integer.

        assert BigInteger(26) == BigInteger('0x1A') == BigInteger('26')
        assert 'ff' == BigInteger('255').to_text(16)

    Internally a BigInteger is a sign and a magnitude.
    The magnitude is a tuple of digits in base 2**32, least significant first.
    The most significant digit is never zero.
    So zero is the empty tuple, and zero is never negative.

        assert (0, 1) == BigInteger('4294967296').magnitude

    Division truncates toward zero, the way C does:

        assert BigInteger(-2) == BigInteger(-7) / 3

    But modulo follows the sign of the divisor, the way Python does:

        assert BigInteger(2) == BigInteger(-7) % 3
        assert BigInteger(-2) == BigInteger(7) % -3

    Floor division, // and divmod(), goes along with modulo,
    so a == (a // b) * b + a % b as with Python ints.

    Operands may be a BigInteger, a small int or float, or a string.
    They are converted by the BigInteger constructor.

        assert BigInteger(43) == 1 + BigInteger('42')
    """

    __slots__ = ('_negative', '_magnitude')

    MAX_EXACT_EXPONENT = 2**53 - 1   # biggest exponent a float could represent exactly

    class ConstructorTypeError(TypeError):
        """e.g. BigInteger(object) or BigInteger([])"""

    InvalidLiteral = text.InvalidLiteralError
    InvalidRadix = text.InvalidRadixError
    DivisionByZero = magnitude.DivisionByZeroError
    PrecisionLoss = native.PrecisionLossError
    UnsupportedExponent = UnsupportedExponentError
    InternalInvariant = InternalInvariantError

    def __init__(self, content=None):
        """
        BigInteger constructor.

        content - the type can be:
            numeric string      '42'  '-0x2A'  '0o52'  '0b101010'
            int                 42   (magnitude less than 2**32)
            float               42.0 (whole, magnitude less than 2**32)
            another BigInteger  BigInteger(42)
            None                zero
        """
        if isinstance(content, BigInteger):
            negative, digits = content._negative, content._magnitude
        elif isinstance(content, str):
            negative, digits = text.parse(content)
        elif isinstance(content, bool):
            raise self.ConstructorTypeError("BigInteger(bool) is not supported, use BigInteger(int(flag))")
        elif isinstance(content, (int, float)):
            negative, digits = native.from_native(content)
        elif content is None:
            negative, digits = False, ()
        else:
            raise self.ConstructorTypeError("BigInteger({}) is not supported".format(type(content).__name__))
        self._set(negative, digits)

    def _set(self, negative, digits):
        """Fill in the sign and magnitude.  Only constructors should call this."""
        # noinspection PyAttributeOutsideInit
        self._magnitude = tuple(digits)
        # noinspection PyAttributeOutsideInit
        self._negative = bool(negative) and len(self._magnitude) > 0

    @classmethod
    def _from_parts(cls, negative, digits):
        """Construct from a sign and a trimmed magnitude, skipping the constructor's type dispatch."""
        instance = cls.__new__(cls)
        instance._set(negative, digits)
        return instance

    @classmethod
    def from_text(cls, s, radix=None):
        """
        Construct a BigInteger from a string of digits.

        assert BigInteger(26) == BigInteger.from_text('0x1A')
        assert BigInteger(26) == BigInteger.from_text('1a', 16)

        With no radix, a 0x 0o or 0b prefix picks the radix, otherwise it's decimal.
        """
        return cls._from_parts(*text.parse(s, radix))

    @classmethod
    def from_native(cls, n):
        """Construct a BigInteger from an int or whole float less than 2**32 in magnitude."""
        return cls._from_parts(*native.from_native(n))

    @classmethod
    def _coerce(cls, x):
        """Get an operand ready for arithmetic."""
        if isinstance(x, BigInteger):
            return x
        if x is None:
            raise cls.ConstructorTypeError("None is not an operand.")
        return cls(x)

    # Inspection
    # ----------
    @property
    def magnitude(self):
        """Digits in base 2**32, least significant first."""
        return self._magnitude

    @property
    def length(self):
        """Number of significant digits in the magnitude.  Zero has none."""
        return len(self._magnitude)

    def is_negative(self):
        return self._negative

    def is_zero(self):
        return len(self._magnitude) == 0

    def is_positive(self):
        return not self._negative and len(self._magnitude) > 0

    # Conversion
    # ----------
    def to_text(self, radix=10):
        """
        Output digits in any radix 2 to 36.  Lowercase letters for digits past 9.

        assert 'ff' == BigInteger(255).to_text(16)
        assert '-11' == BigInteger(-3).to_text(2)
        """
        return text.render(self._negative, self._magnitude, radix)

    def to_native(self):
        """
        Approximate float value.

        Exact up to 2**53.  Beyond that, rounded to the nearest float, ties to even.
        """
        return native.to_native(self._negative, self._magnitude)

    def to_json(self):
        """Exact int, so json_encode() never rounds a big value through float."""
        return int(self)

    def __str__(self):
        return self.to_text()

    def __repr__(self):
        return "BigInteger('{}')".format(self.to_text())

    def __int__(self):
        return native.exact_int(self._negative, self._magnitude)

    def __float__(self):
        return self.to_native()

    def __bool__(self):
        return len(self._magnitude) > 0

    def __hash__(self):
        return hash(int(self))

    def __getstate__(self):
        """For the 'pickle' package, object serialization."""
        return self._negative, self._magnitude

    def __setstate__(self, state):
        """For the 'pickle' package, object serialization."""
        self._set(*state)

    # Comparison
    # ----------
    def compare(self, other):
        """Three-way comparison.  Return -1, 0, or +1."""
        other = self._coerce(other)
        if self._negative != other._negative:
            return -1 if self._negative else 1
        result = magnitude.compare(self._magnitude, other._magnitude)
        return -result if self._negative else result

    def _compare_or_not(self, other):
        """Three-way comparison, or NotImplemented if other cannot be a BigInteger."""
        try:
            return self.compare(other)
        except (self.ConstructorTypeError, text.InvalidLiteralError, native.PrecisionLossError):
            return NotImplemented

    def __eq__(self, other):
        c = self._compare_or_not(other)
        return c if c is NotImplemented else c == 0

    def __ne__(self, other):
        c = self._compare_or_not(other)
        return c if c is NotImplemented else c != 0

    def __lt__(self, other):  c = self._compare_or_not(other); return c if c is NotImplemented else c <  0
    def __le__(self, other):  c = self._compare_or_not(other); return c if c is NotImplemented else c <= 0
    def __gt__(self, other):  c = self._compare_or_not(other); return c if c is NotImplemented else c >  0
    def __ge__(self, other):  c = self._compare_or_not(other); return c if c is NotImplemented else c >= 0

    def less_than(self, other):
        return self.compare(other) < 0

    def less_or_equal(self, other):
        return self.compare(other) <= 0

    def equals(self, other):
        return self.compare(other) == 0

    # Math
    # ----
    def negate(self):
        """Flip the sign.  Zero stays zero."""
        return self._from_parts(not self._negative, self._magnitude)

    def add(self, other):
        other = self._coerce(other)
        return self._add_signed(other, other._negative)

    def subtract(self, other):
        other = self._coerce(other)
        return self._add_signed(other, not other._negative)

    def _add_signed(self, other, other_negative):
        """Add other, with its sign overridden.  Subtraction is adding with a flipped sign."""
        if self._negative == other_negative:
            return self._from_parts(self._negative, magnitude.add(self._magnitude, other._magnitude))
        comparison = magnitude.compare(self._magnitude, other._magnitude)
        if comparison == 0:
            return self._from_parts(False, ())
        elif comparison > 0:
            return self._from_parts(self._negative, magnitude.subtract(self._magnitude, other._magnitude))
        else:
            return self._from_parts(other_negative, magnitude.subtract(other._magnitude, self._magnitude))

    def multiply(self, other):
        other = self._coerce(other)
        return self._from_parts(
            self._negative != other._negative,
            magnitude.multiply(self._magnitude, other._magnitude),
        )

    def _divide_truncating(self, other):
        """Truncating division.  Return (quotient, remainder), remainder has the sign of self."""
        other = self._coerce(other)
        quotient_digits, remainder_digits = magnitude.divide(self._magnitude, other._magnitude)
        quotient = self._from_parts(self._negative != other._negative, quotient_digits)
        remainder = self._from_parts(self._negative, remainder_digits)
        return quotient, remainder

    def divide(self, other):
        """Quotient, truncated toward zero."""
        return self._divide_truncating(other)[0]

    def remainder(self, other):
        """Remainder of truncating division.  Same sign as self, or zero."""
        return self._divide_truncating(other)[1]

    def modulo(self, other):
        """
        Remainder with the sign of the divisor, or zero.

        assert BigInteger(2) == BigInteger(-7).modulo(3)
        assert BigInteger(-2) == BigInteger(7).modulo(-3)
        """
        other = self._coerce(other)
        truncated = self.remainder(other)
        if not self._negative and not other._negative:
            return truncated
        return truncated.add(other).remainder(other)

    def divide_floor(self, other):
        """Quotient and modulo, rounding the quotient toward negative infinity.  Return (quotient, modulo)."""
        other = self._coerce(other)
        quotient, remainder = self._divide_truncating(other)
        if remainder and self._negative != other._negative:
            quotient = quotient.subtract(1)
            remainder = remainder.add(other)
        return quotient, remainder

    def power(self, exponent):
        """
        Raise to a nonnegative whole power.

        Exponents beyond 2**53-1 only work for a base of -1, 0, or 1.
        A base of 2, 4, 8, ... 2**31 builds the result directly, no multiplying.
        """
        if isinstance(exponent, int) and not isinstance(exponent, bool):
            n = exponent   # exact, even past 2**32
        else:
            n = int(self._coerce(exponent))
        if n < 0:
            raise UnsupportedExponentError("Negative exponent {} would not be an integer result.".format(n))
        if n > self.MAX_EXACT_EXPONENT:
            if len(self._magnitude) == 0:
                return self._from_parts(False, ())
            if self._magnitude == (1,):
                return self._from_parts(self._negative and n & 1, (1,))
            raise UnsupportedExponentError("Exponent {} is too big for base {}".format(exponent, self))
        if n == 0:
            return self._from_parts(False, (1,))

        if len(self._magnitude) == 1 and self._magnitude[0] & (self._magnitude[0] - 1) == 0:
            bit_position = (self._magnitude[0].bit_length() - 1) * n
            whole_digits, leftover_bits = divmod(bit_position, DIGIT_BITS)
            logger.debug("Power of two shortcut, 2**%d", bit_position)
            return self._from_parts(
                self._negative and n & 1,
                [0] * whole_digits + [1 << leftover_bits],
            )

        return self._from_parts(self._negative and n & 1, magnitude.power(self._magnitude, n))

    def __pos__(self): return self._from_parts(self._negative, self._magnitude)
    def __neg__(self): return self.negate()
    def __abs__(self): return self._from_parts(False, self._magnitude)

    def __add__(self, other): return self.add(other)
    def __radd__(self, other): return self._coerce(other).add(self)
    def __sub__(self, other): return self.subtract(other)
    def __rsub__(self, other): return self._coerce(other).subtract(self)
    def __mul__(self, other): return self.multiply(other)
    def __rmul__(self, other): return self._coerce(other).multiply(self)
    def __truediv__(self, other): return self.divide(other)
    def __rtruediv__(self, other): return self._coerce(other).divide(self)
    def __floordiv__(self, other): return self.divide_floor(other)[0]
    def __rfloordiv__(self, other): return self._coerce(other).divide_floor(self)[0]
    def __mod__(self, other): return self.modulo(other)
    def __rmod__(self, other): return self._coerce(other).modulo(self)
    def __divmod__(self, other): return self.divide_floor(other)
    def __rdivmod__(self, other): return self._coerce(other).divide_floor(self)
    def __rpow__(self, other): return self._coerce(other).power(self)

    def __pow__(self, other, modulo=None):
        """Handle BigInteger(x) ** y.  Three-argument pow() is not supported."""
        if modulo is not None:
            return NotImplemented
        return self.power(other)
