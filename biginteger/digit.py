"""
Digit kernel - exact one- and two-digit arithmetic in the internal base.

A BigInteger magnitude is a list of digits, least significant first.
Each digit is an int in range(BASE).

BASE is 2**32 so that a digit times a digit, plus two more digits of carry,
fits in 64 bits:

    (BASE-1) * (BASE-1) + 2*(BASE-1) == BASE**2 - 1

Python ints never overflow, but keeping every intermediate under BASE**2
means the kernel behaves exactly like a widening machine multiply, and the
higher layers never depend on arbitrary precision to be correct.
"""

DIGIT_BITS = 32
BASE = 1 << DIGIT_BITS
DIGIT_MASK = BASE - 1
HALF_BASE = BASE >> 1


class InternalInvariantError(AssertionError):
    """A defensive check failed.  This is a bug in biginteger, not in the caller."""


def mul_carry(carry, a, b):
    """
    Multiply two digits and add a carry.  Return (digit, carry_out).

        digit + carry_out * BASE == a * b + carry

    carry may be as big as 2*BASE-2, e.g. an existing result digit plus the
    previous carry, and carry_out will still be a single digit.
    """
    product = a * b + carry
    return product & DIGIT_MASK, product >> DIGIT_BITS
assert (0, 1) == mul_carry(0, HALF_BASE, 2)
assert (DIGIT_MASK, DIGIT_MASK) == mul_carry(2 * DIGIT_MASK, DIGIT_MASK, DIGIT_MASK)


def div_carry(hi, lo, divisor):
    """
    Divide the two-digit number hi:lo by a one-digit divisor.  Return (quotient, remainder).

        hi * BASE + lo == quotient * divisor + remainder

    hi must be less than divisor, so the quotient fits in one digit.
    """
    if hi >= divisor:
        raise InternalInvariantError("div_carry({}, {}, {}) quotient would overflow a digit".format(
            hi, lo, divisor,
        ))
    return divmod((hi << DIGIT_BITS) | lo, divisor)
assert (HALF_BASE, 1) == div_carry(1, 1, 2)
assert (DIGIT_MASK, 0) == div_carry(DIGIT_MASK - 1, 1, DIGIT_MASK)
