"""
Unit tests for the digit kernel.
"""

import random
import unittest

from biginteger.digit import BASE
from biginteger.digit import DIGIT_BITS
from biginteger.digit import DIGIT_MASK
from biginteger.digit import HALF_BASE
from biginteger.digit import InternalInvariantError
from biginteger.digit import div_carry
from biginteger.digit import mul_carry


class DigitTests(unittest.TestCase):

    def test_base(self):
        self.assertEqual(2**32, BASE)
        self.assertEqual(32, DIGIT_BITS)
        self.assertEqual(0xFFFFFFFF, DIGIT_MASK)
        self.assertEqual(0x80000000, HALF_BASE)

    def test_mul_carry_small(self):
        self.assertEqual((42, 0), mul_carry(0, 6, 7))
        self.assertEqual((43, 0), mul_carry(1, 6, 7))
        self.assertEqual(( 0, 0), mul_carry(0, 0, DIGIT_MASK))

    def test_mul_carry_wide(self):
        self.assertEqual((1, DIGIT_MASK - 1), mul_carry(0, DIGIT_MASK, DIGIT_MASK))
        self.assertEqual((0, DIGIT_MASK),     mul_carry(DIGIT_MASK, DIGIT_MASK, DIGIT_MASK))
        self.assertEqual((0, 1),              mul_carry(0, HALF_BASE, 2))

    def test_mul_carry_biggest_carry_in(self):
        digit, carry = mul_carry(2 * DIGIT_MASK, DIGIT_MASK, DIGIT_MASK)
        self.assertEqual(BASE * BASE - 1, digit + carry * BASE)
        self.assertLess(carry, BASE)

    def test_mul_carry_random(self):
        r = random.Random(32)
        for _ in range(1000):
            carry_in = r.randrange(2 * BASE - 1)
            a = r.randrange(BASE)
            b = r.randrange(BASE)
            digit, carry_out = mul_carry(carry_in, a, b)
            self.assertEqual(a * b + carry_in, digit + carry_out * BASE)
            self.assertTrue(0 <= digit < BASE)
            self.assertTrue(0 <= carry_out < BASE)

    def test_div_carry(self):
        self.assertEqual((6, 0), div_carry(0, 42, 7))
        self.assertEqual((6, 1), div_carry(0, 43, 7))
        self.assertEqual((HALF_BASE, 1), div_carry(1, 1, 2))
        self.assertEqual((DIGIT_MASK, 0), div_carry(DIGIT_MASK - 1, 1, DIGIT_MASK))

    def test_div_carry_random(self):
        r = random.Random(33)
        for _ in range(1000):
            divisor = r.randrange(1, BASE)
            hi = r.randrange(divisor)
            lo = r.randrange(BASE)
            quotient, remainder = div_carry(hi, lo, divisor)
            self.assertEqual(hi * BASE + lo, quotient * divisor + remainder)
            self.assertTrue(0 <= quotient < BASE)
            self.assertTrue(0 <= remainder < divisor)

    def test_div_carry_overflow(self):
        with self.assertRaises(InternalInvariantError):
            div_carry(7, 0, 7)
        with self.assertRaises(InternalInvariantError):
            div_carry(8, 0, 7)

    def test_internal_invariant_is_an_assertion(self):
        self.assertTrue(issubclass(InternalInvariantError, AssertionError))


if __name__ == '__main__':
    unittest.main()
