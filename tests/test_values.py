import math
import unittest

from pcalc.values import Number, Boolean, TRUE, FALSE, ZERO, flag
from pcalc.errors import TypeMismatchError

class ValueTests(unittest.TestCase):
	
	def test_kinds_do_not_mix(self):
		self.assertNotEqual(Number(1), TRUE)
		self.assertNotEqual(Number(0), FALSE)
		self.assertEqual(Number(3), Number(3.0))
		self.assertEqual(TRUE, Boolean(True))
	
	def test_immutable(self):
		with self.assertRaises(AttributeError):
			ZERO.payload = 1.0
	
	def test_hashable(self):
		self.assertEqual(2, len({Number(1), Number(1.0), TRUE}))
	
	def test_flag(self):
		self.assertIs(TRUE, flag(True))
		self.assertIs(FALSE, flag(False))
	
	def test_display(self):
		for value, text in [
			(Number(10), "10"),
			(Number(-3), "-3"),
			(Number(2.5), "2.5"),
			(Number(-0.0), "-0"),
			(Number(1e23), "100000000000000000000000"),
			(Number(2.0**53 + 2), "9007199254740994"),
			(Number(-1.5e20), "-150000000000000000000"),
			(Number(1e-7), "0.0000001"),
			(Number(12.222222222222221), "12.222222222222221"),
			(Number(math.inf), "inf"),
			(Number(-math.inf), "-inf"),
			(Number(math.nan), "NaN"),
			(TRUE, "true"),
			(FALSE, "false"),
		]:
			with self.subTest(text):
				self.assertEqual(text, str(value))
	
	def test_conversions(self):
		self.assertEqual(4.0, Number(4).as_number())
		self.assertTrue(TRUE.as_flag())
		self.assertRaises(TypeMismatchError, TRUE.as_number)
		self.assertRaises(TypeMismatchError, Number(1).as_flag)

if __name__ == '__main__':
	unittest.main()
