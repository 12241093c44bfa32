from unittest import TestCase

import math

from rigidmath import scalars


class TestScalars(TestCase):

    def test_clamp_value(self):

        self.assertEqual(scalars.clamp_value(5, 0, 3), 3)
        self.assertEqual(scalars.clamp_value(-1, 0, 3), 0)
        self.assertEqual(scalars.clamp_value(2.5, 0, 3), 2.5)
        self.assertEqual(scalars.clamp_value(3, 0, 3), 3)

    def test_radians_to_degrees(self):

        self.assertEqual(scalars.radians_to_degrees(3.5), 200.53522829578813)
        self.assertAlmostEqual(scalars.radians_to_degrees(math.pi), 180)
        self.assertEqual(scalars.radians_to_degrees(0), 0)

    def test_degrees_to_radians(self):

        self.assertEqual(scalars.degrees_to_radians(200.53522829578813), 3.4999999999999996)
        self.assertEqual(scalars.degrees_to_radians(180), math.pi)
        self.assertEqual(scalars.degrees_to_radians(0), 0)

    def test_round_value_to_increment(self):

        self.assertEqual(scalars.round_value_to_increment(3.4, 0.5), 3.5)
        self.assertEqual(scalars.round_value_to_increment(3.4, 0.3), 3.3)
        self.assertEqual(scalars.round_value_to_increment(3.4546456, 0.001), 3.455)
        self.assertEqual(scalars.round_value_to_increment(3.4, 1), 3)
        self.assertEqual(scalars.round_value_to_increment(3.5, 1), 4)
        self.assertEqual(scalars.round_value_to_increment(-3.5, 1), -3)
        self.assertEqual(scalars.round_value_to_increment(1.234567, 1e-5), 1.23457)
        self.assertEqual(scalars.round_value_to_increment(17, 5), 15)

    def test_round_value_to_zero_increment(self):

        self.assertEqual(scalars.round_value_to_increment(3.4546456, 0), 3.4546456)

    def test_round_value_to_negative_increment(self):

        with self.assertRaises(ValueError) as context:

            scalars.round_value_to_increment(3.4, -0.5)

        self.assertEqual(str(context.exception), 'Invalid coarse step: -0.5.')
