"""
biginteger - Signed integers of any size.

Usage example:

    import biginteger

    googol = biginteger.BigInteger('1' + '0' * 100)
    assert googol == biginteger.BigInteger(10) ** 100
    assert googol.to_text(16).startswith('1249ad2594c37ceb')

Usage example:

    from biginteger import BigInteger

    assert BigInteger(-7) / 3 == -2   # truncating division
    assert BigInteger(-7) % 3 == 2    # modulo has the sign of the divisor
    assert BigInteger('0b101') == 5
"""

from .integer import BigInteger
from .integer import UnsupportedExponentError
from .digit import InternalInvariantError
from .json_encode import json_decode
from .json_encode import json_encode
from .magnitude import DivisionByZeroError
from .native import PrecisionLossError
from .text import InvalidLiteralError
from .text import InvalidRadixError

__all__ = [
    'BigInteger',
    'DivisionByZeroError',
    'InternalInvariantError',
    'InvalidLiteralError',
    'InvalidRadixError',
    'PrecisionLossError',
    'UnsupportedExponentError',
    'json_decode',
    'json_encode',
]

from . import version
__version__ = version.__doc__
