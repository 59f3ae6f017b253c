"""
Magnitude engine - unsigned arithmetic on digit lists.

A magnitude is a list of digits in the internal BASE, least significant first.
The empty list is zero.  A trimmed magnitude never ends in a 0 digit.

Every function here takes trimmed magnitudes and returns a new trimmed list.
Inputs are never modified, so callers may pass the tuple stored inside a BigInteger.
"""

from .digit import BASE
from .digit import DIGIT_BITS
from .digit import DIGIT_MASK
from .digit import HALF_BASE
from .digit import InternalInvariantError
from .digit import div_carry
from .digit import mul_carry


class DivisionByZeroError(ZeroDivisionError):
    """e.g. BigInteger(1) / BigInteger(0)"""


def trim(digits):
    """Remove most significant zero digits, in place.  Return the same list."""
    while digits and digits[-1] == 0:
        digits.pop()
    return digits
assert [1, 2] == trim([1, 2, 0, 0])
assert [] == trim([0])


def compare(a, b):
    """Compare magnitudes.  Return -1, 0, or +1, like the old cmp()."""
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1
    for i in range(len(a) - 1, -1, -1):
        if a[i] != b[i]:
            return -1 if a[i] < b[i] else 1
    return 0


def add(a, b):
    """Sum of two magnitudes."""
    if len(a) < len(b):
        a, b = b, a
    result = []
    carry = 0
    for i in range(len(a)):
        total = a[i] + carry
        if i < len(b):
            total += b[i]
        result.append(total & DIGIT_MASK)
        carry = total >> DIGIT_BITS
    if carry:
        result.append(carry)
    return result
assert [0, 1] == add([DIGIT_MASK], [1])


def subtract(a, b):
    """
    Difference of two magnitudes, a - b.

    The caller guarantees a >= b.  There is no such thing as a negative magnitude.
    """
    result = []
    borrow = 0
    for i in range(len(a)):
        difference = a[i] - borrow
        if i < len(b):
            difference -= b[i]
        if difference < 0:
            difference += BASE
            borrow = 1
        else:
            borrow = 0
        result.append(difference)
    if borrow or len(b) > len(a):
        raise InternalInvariantError("Subtracting a larger magnitude from a smaller one.")
    return trim(result)
assert [DIGIT_MASK] == subtract([0, 1], [1])
assert [] == subtract([5, 7], [5, 7])


def multiply(a, b):
    """
    Product of two magnitudes, schoolbook style, O(len(a) * len(b)).

    Multiplying by one is just a copy.
    Low zero digits of a are skipped, e.g. in powers of the BASE.
    """
    if not a or not b:
        return []
    if len(a) == 1 and a[0] == 1:
        return list(b)
    if len(b) == 1 and b[0] == 1:
        return list(a)
    start = 0
    while a[start] == 0:
        start += 1
    result = [0] * (len(a) + len(b))
    for i, b_digit in enumerate(b):
        if b_digit == 0:
            continue
        carry = 0
        for j in range(start, len(a)):
            result[i + j], carry = mul_carry(result[i + j] + carry, a[j], b_digit)
        result[i + len(a)] = carry
    return trim(result)
assert [1, DIGIT_MASK - 1] == multiply([DIGIT_MASK], [DIGIT_MASK])


def multiply_digit(a, digit, carry=0):
    """a * digit + carry, where digit and carry are each less than BASE."""
    result = []
    for a_digit in a:
        low, carry = mul_carry(carry, a_digit, digit)
        result.append(low)
    if carry:
        result.append(carry)
    return trim(result)
assert [7] == multiply_digit([], 10, 7)
assert [0, 5] == multiply_digit([HALF_BASE], 10)


def divide_digit(a, digit):
    """Short division by a single digit.  Return (quotient magnitude, remainder int)."""
    if digit == 0:
        raise DivisionByZeroError("Division by zero.")
    quotient = [0] * len(a)
    remainder = 0
    for i in range(len(a) - 1, -1, -1):
        quotient[i], remainder = div_carry(remainder, a[i], digit)
    return trim(quotient), remainder
assert ([HALF_BASE], 0) == divide_digit([0, 5], 10)


def divide(a, b):
    """
    Long division of magnitudes.  Return (quotient, remainder).

    This is Algorithm D from Knuth TAOCP volume 2, section 4.3.1.
    SEE:  Handbook of Applied Cryptography 14.20, http://cacr.uwaterloo.ca/hac/about/chap14.pdf

    The divisor is normalized (scaled) so its top digit is at least BASE/2.
    Then the trial quotient digit from the top two remainder digits
    is never more than 2 too big, and each excess costs one add-back.
    """
    if not b:
        raise DivisionByZeroError("Division by zero.")
    if not a:
        return [], []
    if len(b) == 1:
        if b[0] == 1:
            return list(a), []
        quotient, remainder = divide_digit(a, b[0])
        return quotient, [remainder] if remainder else []
    if compare(a, b) < 0:
        return [], list(a)

    n = len(b)
    m = len(a) - n

    scale = BASE // (b[-1] + 1)
    if scale > 1:
        u = multiply_digit(a, scale)
        v = multiply_digit(b, scale)
    else:
        u = list(a)
        v = list(b)
    u.extend([0] * (len(a) + 1 - len(u)))
    top = v[-1]
    if len(v) != n or top < HALF_BASE:
        raise InternalInvariantError("Normalizing the divisor failed, top digit {}".format(top))

    quotient = [0] * (m + 1)
    for i in range(m, -1, -1):
        if u[i + n] == top:
            trial = DIGIT_MASK
        else:
            trial, _ = div_carry(u[i + n], u[i + n - 1], top)

        # u[i:i+n+1] -= trial * v
        carry = 0
        borrow = 0
        for j in range(n):
            low, carry = mul_carry(carry, trial, v[j])
            difference = u[i + j] - low - borrow
            if difference < 0:
                difference += BASE
                borrow = 1
            else:
                borrow = 0
            u[i + j] = difference
        difference = u[i + n] - carry - borrow
        underflow = difference < 0
        u[i + n] = difference + BASE if underflow else difference

        while underflow:
            trial -= 1
            carry = 0
            for j in range(n):
                total = u[i + j] + v[j] + carry
                u[i + j] = total & DIGIT_MASK
                carry = total >> DIGIT_BITS
            total = u[i + n] + carry
            u[i + n] = total & DIGIT_MASK
            if total >> DIGIT_BITS:
                underflow = False

        quotient[i] = trial

    remainder = trim(u)
    if scale > 1:
        remainder, leftover = divide_digit(remainder, scale)
        if leftover != 0:
            raise InternalInvariantError("Denormalizing the remainder left {} over.".format(leftover))
    return trim(quotient), remainder


def power(a, exponent):
    """
    Magnitude a raised to a nonnegative int exponent, by repeated squaring.

    Each halving of the exponent squares the base.
    Each odd step multiplies the base into the accumulator.
    """
    result = [1]
    base = list(a)
    while exponent > 0:
        if exponent & 1:
            result = multiply(result, base)
        exponent >>= 1
        if exponent > 0:
            base = multiply(base, base)
    return result
assert [1] == power([], 0)
assert [1024] == power([2], 10)
