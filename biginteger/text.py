"""
Text codec - parse and render integers in radix 2 through 36.

Parsing folds groups of radix digits into the magnitude, one group per kernel multiply.
Rendering peels groups off the magnitude by short division, or for big magnitudes,
splits the work in half by a power of the radix and recurses.
"""

import logging
import math

from .digit import BASE
from .magnitude import divide
from .magnitude import divide_digit
from .magnitude import multiply_digit
from .magnitude import power


logger = logging.getLogger(__name__)

DIGIT_ALPHABET = '0123456789abcdefghijklmnopqrstuvwxyz'
RADIX_MIN = 2
RADIX_MAX = len(DIGIT_ALPHABET)
DIVIDE_AND_CONQUER_DIGITS = 8   # longer magnitudes render by recursive halving

PREFIX_RADIX = {
    'b': 2,
    'o': 8,
    'x': 16,
}
NATIVE_FORMAT_CODES = {
    8: 'o',
    10: 'd',
    16: 'x',
}


class InvalidLiteralError(ValueError):
    """e.g. BigInteger('') or BigInteger('12z') or BigInteger('0x')"""


class InvalidRadixError(ValueError):
    """e.g. BigInteger(1).to_text(37) or BigInteger(1).to_text(2.5)"""


def check_radix(radix):
    """Make sure radix is a whole number from 2 to 36.  Return it as an int."""
    if isinstance(radix, float) and radix.is_integer():
        radix = int(radix)
    if isinstance(radix, bool) or not isinstance(radix, int) or not RADIX_MIN <= radix <= RADIX_MAX:
        raise InvalidRadixError("Radix must be an integer from {} to {}, not {}".format(
            RADIX_MIN,
            RADIX_MAX,
            repr(radix),
        ))
    return radix
assert 16 == check_radix(16.0)


def group_width(radix):
    """
    How many radix digits fit in one internal digit.  Return (width, radix**width).

    The group radix is the biggest power of the radix that is still less than BASE,
    so any group of that many radix digits is a valid digit.
    """
    width = 0
    group_radix = 1
    while group_radix * radix < BASE:
        width += 1
        group_radix *= radix
    return width, group_radix
assert (9, 1000000000) == group_width(10)
assert (31, 2**31) == group_width(2)
assert (7, 16**7) == group_width(16)


def parse(s, radix=None):
    """
    Parse an integer literal.  Return (negative, magnitude).

    The literal is an optional sign followed by digits:
        '42'  '-42'  '+42'
    With no radix, a prefix may follow the sign:
        '0x2A'  '0o52'  '0b101010'  '-0x2A'
    With a radix, there is no prefix:
        parse('2a', 16)
    """
    if not isinstance(s, str):
        raise InvalidLiteralError("Expecting a string, not a {}".format(type(s).__name__))
    if len(s) == 0:
        raise InvalidLiteralError("Blank string is not an integer.")

    start = 0
    negative = False
    if s[0] in '+-':
        negative = s[0] == '-'
        start = 1

    if radix is None:
        radix = 10
        if s[start:start+1] == '0' and len(s) > start + 1:
            prefix_radix = PREFIX_RADIX.get(s[start+1].lower())
            if prefix_radix is not None:
                radix = prefix_radix
                start += 2
    else:
        radix = check_radix(radix)

    body = s[start:]
    if len(body) == 0:
        raise InvalidLiteralError("No digits in {}".format(repr(s)))
    valid_digits = DIGIT_ALPHABET[:radix] + DIGIT_ALPHABET[10:radix].upper()
    for c in body:
        if c not in valid_digits:
            raise InvalidLiteralError("Not a base {} integer: {}".format(radix, repr(s)))

    width, group_radix = group_width(radix)
    first_width = len(body) % width or width
    magnitude = multiply_digit([], group_radix, int(body[:first_width], radix))
    for group_start in range(first_width, len(body), width):
        group_value = int(body[group_start:group_start+width], radix)
        magnitude = multiply_digit(magnitude, group_radix, group_value)
    return negative and len(magnitude) > 0, magnitude
assert (False, [255]) == parse('0xFF')
assert (False, []) == parse('-000')


def format_digit(value, radix):
    """Render a native int, at most one digit, in any radix."""
    code = NATIVE_FORMAT_CODES.get(radix)
    if code is not None:
        return format(value, code)
    characters = []
    while True:
        value, d = divmod(value, radix)
        characters.append(DIGIT_ALPHABET[d])
        if value == 0:
            break
    return ''.join(reversed(characters))
assert 'ff' == format_digit(255, 16)
assert '101' == format_digit(5, 2)
assert 'z' == format_digit(35, 36)


def format_magnitude(magnitude, radix=10):
    """Render a magnitude as digits in the radix.  No sign."""
    return _format(magnitude, check_radix(radix))


def render(negative, magnitude, radix=10):
    """Render a signed integer, with a leading '-' if negative."""
    digits = format_magnitude(magnitude, radix)
    return '-' + digits if negative else digits


def _format(magnitude, radix):
    if len(magnitude) == 0:
        return '0'
    if len(magnitude) == 1:
        return format_digit(magnitude[0], radix)
    if len(magnitude) <= DIVIDE_AND_CONQUER_DIGITS:
        return _format_by_groups(magnitude, radix)
    return _format_by_halves(magnitude, radix)


def _format_by_groups(magnitude, radix):
    """Peel off one group of radix digits at a time, least significant first."""
    width, group_radix = group_width(radix)
    groups = []
    while magnitude:
        magnitude, group_value = divide_digit(magnitude, group_radix)
        groups.append(group_value)
    groups.reverse()
    return format_digit(groups[0], radix) + ''.join(
        format_digit(group_value, radix).rjust(width, '0') for group_value in groups[1:]
    )


def _format_by_halves(magnitude, radix):
    """
    Divide by radix**e, where e is about half the number of radix digits, then render each half.

    The low half is zero padded to exactly e radix digits.
    """
    e = int(math.floor(len(magnitude) * math.log(BASE) / math.log(radix) / 2 + 0.5 - 1))
    logger.debug("Rendering a %d-digit magnitude in radix %d, split at radix**%d", len(magnitude), radix, e)
    split = power([radix], e)
    quotient, remainder = divide(magnitude, split)
    high = _format(quotient, radix)
    low = _format(remainder, radix)
    return high + '0' * (e - len(low)) + low
