from unittest import TestCase

from types import SimpleNamespace

import math
import warnings

import numpy as np

from rigidmath import Quaternion, Vector3, Matrix4, DegenerateInputWarning, tolerance
from rigidmath._typing import QuaternionLike


class TestQuaternion(TestCase):

    def tearDown(self):

        tolerance.reset_tolerance()

    def check_quaternion(self, quaternion, expected, decimal=12):

        self.assertIsInstance(quaternion, Quaternion)
        np.testing.assert_array_almost_equal([quaternion.x, quaternion.y, quaternion.z, quaternion.w], expected,
                                             decimal=decimal)

    def test_init(self):

        self.check_quaternion(Quaternion(), [0, 0, 0, 1])
        self.check_quaternion(Quaternion(1, 2, 3, 4), [1, 2, 3, 4])

    def test_read_only_components(self):

        quaternion = Quaternion()

        for component in 'xyzw':

            with self.subTest(component=component):

                with self.assertRaises(AttributeError) as context:

                    setattr(quaternion, component, 5)

                self.assertEqual(str(context.exception), 'No {} setter on Quaternion.'.format(component))

        self.check_quaternion(quaternion, [0, 0, 0, 1])

    def test_set(self):

        quaternion = Quaternion()

        self.assertIs(quaternion.set(1, 2, 3, 4), quaternion)
        self.check_quaternion(quaternion, [1, 2, 3, 4])

        self.assertIs(quaternion.set_from_array(np.array([0.5, 0.5, 0.5, 0.5])), quaternion)
        self.check_quaternion(quaternion, [0.5, 0.5, 0.5, 0.5])

        self.assertIs(quaternion.set_identity(), quaternion)
        self.check_quaternion(quaternion, [0, 0, 0, 1])

        with self.assertRaises(ValueError):

            quaternion.set_from_array([1, 2, 3])

    def test_set_from_unit_vectors(self):

        quaternion = Quaternion()

        result = quaternion.set_from_unit_vectors(Vector3(2, 4.5, 3.4).normalize(), Vector3(-2.3, 0, 4.5).normalize())

        self.assertIs(result, quaternion)
        self.check_quaternion(quaternion,
                              [0.4069287969267423, -0.338002092064583, 0.20798582954033493, 0.8227426296856983])
        self.assertAlmostEqual(quaternion.length(), 1, places=9)

        vector = Vector3(1, 2, 3).normalize()

        self.check_quaternion(Quaternion().set_from_unit_vectors(vector, vector.clone()), [0, 0, 0, 1])

        foreign_from = SimpleNamespace(x=1, y=0, z=0)
        foreign_to = SimpleNamespace(x=0, y=1, z=0)

        self.check_quaternion(Quaternion().set_from_unit_vectors(foreign_from, foreign_to),
                              [0, 0, math.sqrt(0.5), math.sqrt(0.5)])

    def test_set_from_unit_vectors_antiparallel(self):

        cases = [(Vector3(2, 4.5, 3.4).normalize().invert(), [0, 0.6028330891856919, -0.7978673239222392, 0]),
                 (Vector3(-2.5, 0.8, -3.4).normalize(), [0, 0.973417168333576, 0.22903933372554733, 0]),
                 (Vector3(-2.5, 0.8, -0.4).normalize(), [-0.3047757271037838, -0.9524241471993242, 0, 0])]

        for v_from, expected in cases:

            with self.subTest(v_from=v_from):

                with warnings.catch_warnings():

                    warnings.simplefilter('error', DegenerateInputWarning)

                    quaternion = Quaternion().set_from_unit_vectors(v_from, v_from.clone().invert())

                self.check_quaternion(quaternion, expected)

                self.assertEqual(quaternion.w, 0)
                self.assertAlmostEqual(quaternion.length(), 1)
                self.assertAlmostEqual(Vector3(quaternion.x, quaternion.y, quaternion.z).dot(v_from), 0)

    def test_antiparallel_is_logged(self):

        vector = Vector3(0, 0, 1)

        with self.assertLogs('rigidmath.rotations.quaternion', level='DEBUG'):

            Quaternion().set_from_unit_vectors(vector, vector.clone().invert())

    def test_length(self):

        self.assertEqual(Quaternion(3, 4, 2, 4.3).length_sq(), 47.489999999999995)
        self.assertEqual(Quaternion(3, 4, 2, 5.4).length(), 7.626270385975047)

    def test_normalize(self):

        quaternion = Quaternion(3, -4, 2, 2.3)

        self.assertIs(quaternion.normalize(), quaternion)
        self.check_quaternion(quaternion, [0.51231551957856, -0.68308735943808, 0.34154367971904, 0.39277523167689593])

    def test_normalize_zero(self):

        quaternion = Quaternion(0, 0, 0, 0)

        with self.assertWarns(DegenerateInputWarning) as context:

            quaternion.normalize()

        self.assertIn('Attempting to normalize zero length Quaternion', str(context.warning))
        self.check_quaternion(quaternion, [0, 0, 0, 1])

    def test_multiply(self):

        quaternion_1 = Quaternion(-43, 56, 24, 2.3).normalize()
        quaternion_2 = Quaternion(3, 4, 2, -3).normalize()

        result = quaternion_1.clone().multiply(quaternion_2)

        self.check_quaternion(result, [0.3302805970751364, -0.0017394633157347683, -0.8858216935379235,
                                       -0.3259319387857995])

        result = quaternion_1.clone().premultiply(quaternion_2)

        self.check_quaternion(result, [0.2607020644457463, -0.6888274730309625, 0.5927221248366173,
                                       -0.3259319387857995])

        quaternion = quaternion_1.clone()

        self.assertIs(quaternion.multiply(quaternion_2), quaternion)
        self.assertIs(quaternion.premultiply(quaternion_2), quaternion)

    def test_multiply_order(self):

        x_axis, y_axis, z_axis = Vector3(1, 0, 0), Vector3(0, 1, 0), Vector3(0, 0, 1)

        x_to_y = Quaternion().set_from_unit_vectors(x_axis, y_axis)
        y_to_z = Quaternion().set_from_unit_vectors(y_axis, z_axis)

        # multiply applies the argument first
        combined = Quaternion().copy(y_to_z).multiply(x_to_y)

        self.assertTrue(x_axis.clone().apply_quaternion(combined).equals(z_axis, 1e-12))

        # premultiply applies the argument last
        combined = Quaternion().copy(x_to_y).premultiply(y_to_z)

        self.assertTrue(x_axis.clone().apply_quaternion(combined).equals(z_axis, 1e-12))

    def test_matrix_equivalence(self):

        v_from = Vector3(2, 4.5, 3.4).normalize()
        v_to = Vector3(-2.3, 0, 4.5).normalize()

        quaternion = Quaternion().set_from_unit_vectors(v_from, v_to)
        matrix = Matrix4().set_rotation_from_vector_to_vector(v_from, v_to)

        by_quaternion = v_from.clone().apply_quaternion(quaternion)
        by_matrix = v_from.clone().apply_matrix4(matrix)

        self.assertTrue(by_quaternion.equals(v_to, 1e-9))
        self.assertTrue(by_matrix.equals(v_to, 1e-9))

        other = Vector3(-1, 0.5, 7)

        self.assertTrue(other.clone().apply_quaternion(quaternion).equals(other.clone().apply_matrix4(matrix), 1e-9))

    def test_invert(self):

        quaternion = Quaternion().set_from_unit_vectors(Vector3(1, 0, 0), Vector3(0, 1, 0))

        inverse = quaternion.clone()

        self.assertIs(inverse.invert(), inverse)

        self.check_quaternion(inverse.clone().multiply(quaternion), [0, 0, 0, 1])
        self.assertTrue(Vector3(0, 1, 0).apply_quaternion(inverse).equals(Vector3(1, 0, 0), 1e-12))

    def test_copy_clone(self):

        quaternion = Quaternion(0.5, 0.5, 0.5, 0.5)

        clone = quaternion.clone()

        self.assertIsNot(clone, quaternion)
        self.check_quaternion(clone, [0.5, 0.5, 0.5, 0.5])

        self.check_quaternion(Quaternion().copy(SimpleNamespace(x=0, y=1, z=0, w=0)), [0, 1, 0, 0])

    def test_equals(self):

        self.assertTrue(Quaternion().equals(Quaternion(0, 0, 0, 1)))
        self.assertFalse(Quaternion().equals(Quaternion(0, 0, 1e-10, 1)))
        self.assertTrue(Quaternion().equals(Quaternion(0, 0, 1e-10, 1), 1e-9))

        # q and -q are the same rotation but are not equal
        self.assertFalse(Quaternion() == Quaternion(0, 0, 0, -1))
        self.assertTrue(Quaternion() == Quaternion())

    def test_interop(self):

        quaternion = Quaternion(0, 0, 0.6, 0.8)

        np.testing.assert_array_equal(quaternion.to_array(), [0, 0, 0.6, 0.8])
        self.assertEqual(repr(quaternion), 'Quaternion(0.0, 0.0, 0.6, 0.8)')

    def test_structural_typing(self):

        self.assertIsInstance(Quaternion(), QuaternionLike)
        self.assertNotIsInstance(Vector3(), QuaternionLike)
