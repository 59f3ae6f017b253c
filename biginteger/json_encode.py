"""
JSON interop - BigInteger values as JSON integers, every digit intact.

Encoding goes through BigInteger.to_json(), which gives an exact int.
Decoding can bring JSON integers back as BigInteger, however long they are.

    assert '{"n":12345678901234567890}' == json_encode({'n': BigInteger('12345678901234567890')})
    assert BigInteger('12345678901234567890') == json_decode('[12345678901234567890]')[0]
"""

import json

from .integer import BigInteger


JSON_SEPARATORS_NO_SPACES = (',', ':')


class BigIntegerEncoder(json.JSONEncoder):
    """Encode BigInteger values, and anything else with a to_json() method that gives an int."""

    class InexactError(TypeError):
        """e.g. a to_json() method that returns a float"""

    def default(self, x):
        if isinstance(x, BigInteger):
            return x.to_json()
        to_json = getattr(x, 'to_json', None)
        if callable(to_json):
            value = to_json()
            if isinstance(value, float):
                raise self.InexactError("{}.to_json() gave a float, {}".format(type(x).__name__, repr(value)))
            return value
        return super(BigIntegerEncoder, self).default(x)
        # NOTE:  Raises a TypeError for anything else it doesn't know.


def json_encode(x, **kwargs):
    """
    JSON encode structures that may contain BigInteger values.

    Compact separators.  No NaN or Infinity, they aren't JSON.
    """
    return json.dumps(
        x,
        cls=BigIntegerEncoder,
        separators=JSON_SEPARATORS_NO_SPACES,
        allow_nan=False,
        **kwargs
    )


def json_decode(s, **kwargs):
    """
    JSON decode, with every JSON integer becoming a BigInteger.

    Decimals and exponents, e.g. 1.5 or 1e3, are left as float.
    """
    return json.loads(s, parse_int=BigInteger.from_text, **kwargs)
