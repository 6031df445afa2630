import math
import unittest

from vec2kit.math import SQRT1_2, SQRT2


class ConstantsTests(unittest.TestCase):
    def test_values(self) -> None:
        self.assertAlmostEqual(SQRT2 * SQRT2, 2.0)
        self.assertAlmostEqual(SQRT1_2 * SQRT1_2, 0.5)
        self.assertEqual(SQRT2, math.sqrt(2.0))

    def test_reciprocal(self) -> None:
        self.assertAlmostEqual(SQRT2 * SQRT1_2, 1.0)
        self.assertAlmostEqual(SQRT1_2, 1.0 / SQRT2)


if __name__ == "__main__":
    unittest.main()
