"""
Unit tests for json_encode() and json_decode()
"""

import json
import unittest

from biginteger import BigInteger
from biginteger import json_decode
from biginteger import json_encode
from biginteger.json_encode import BigIntegerEncoder


class JsonEncodeTests(unittest.TestCase):

    def test_native(self):
        self.assertEqual('{"a":[1,2.5,"x"]}', json_encode({'a': [1, 2.5, 'x']}))

    def test_big_integer_exact(self):
        twenty_digits = BigInteger('12345678901234567890')
        self.assertEqual('[12345678901234567890]', json_encode([twenty_digits]))
        self.assertEqual(12345678901234567890, json.loads(json_encode(twenty_digits)))

    def test_big_integer_negative(self):
        self.assertEqual('{"n":-42}', json_encode({'n': BigInteger(-42)}))
        self.assertEqual('0', json_encode(BigInteger('-0')))

    def test_googol_not_float(self):
        googol = BigInteger(10) ** 100
        self.assertEqual('1' + '0' * 100, json_encode(googol))

    def test_less_than_sign_left_alone(self):
        self.assertEqual('"a<b"', json_encode('a<b'))

    def test_other_to_json_int(self):
        class Counter(object):
            def to_json(self):
                return 7
        self.assertEqual('{"c":7}', json_encode({'c': Counter()}))

    def test_other_to_json_float(self):
        class Approximate(object):
            def to_json(self):
                return 7.0
        with self.assertRaises(BigIntegerEncoder.InexactError):
            json_encode([Approximate()])
        with self.assertRaises(TypeError):
            json_encode([Approximate()])

    def test_not_encodable(self):
        with self.assertRaises(TypeError):
            json_encode(object())

    def test_no_nan(self):
        with self.assertRaises(ValueError):
            json_encode(float('nan'))

    def test_kwargs(self):
        self.assertEqual('{"a":1,"b":2}', json_encode({'b': 2, 'a': BigInteger(1)}, sort_keys=True))


class JsonDecodeTests(unittest.TestCase):

    def test_integers_become_big(self):
        decoded = json_decode('{"n":12345678901234567890,"m":-7}')
        self.assertIsInstance(decoded['n'], BigInteger)
        self.assertEqual(BigInteger('12345678901234567890'), decoded['n'])
        self.assertEqual(BigInteger(-7), decoded['m'])

    def test_floats_stay_float(self):
        decoded = json_decode('[1.5,1e3,"9"]')
        self.assertEqual([1.5, 1000.0, '9'], decoded)
        self.assertIsInstance(decoded[1], float)

    def test_both_ways(self):
        values = [BigInteger(0), BigInteger(-1), BigInteger(2) ** 200, -(BigInteger(3) ** 150)]
        self.assertEqual(values, json_decode(json_encode(values)))

    def test_bad_json(self):
        with self.assertRaises(ValueError):
            json_decode('[1,')


if __name__ == '__main__':
    unittest.main()
