from unittest import TestCase

from types import SimpleNamespace

import math

import numpy as np

from rigidmath import core, tolerance
from rigidmath._diagnostics import stack_trace_as_string


class TestElementals(TestCase):

    def tearDown(self):

        tolerance.reset_tolerance()

    def test_within_tolerance(self):

        self.assertTrue(core.within_tolerance(0, 1e-15, -1e-15))
        self.assertFalse(core.within_tolerance(0, 2e-15))
        self.assertTrue(core.within_tolerance())

    def test_elements_are_identity(self):

        self.assertTrue(core.elements_are_identity(core.IDENTITY_MATRIX3_ELEMENTS))
        self.assertTrue(core.elements_are_identity(core.IDENTITY_MATRIX4_ELEMENTS))
        self.assertFalse(core.elements_are_identity([1, 0, 0, 0, 1, 1e-10]))

        tolerance.set_tolerance(1e-9)

        self.assertTrue(core.elements_are_identity([1, 0, 0, 0, 1, 1e-10]))

    def test_axis_angle_block(self):

        block = core.axis_angle_block(SimpleNamespace(x=0, y=0, z=1), math.cos(math.pi / 2), math.sin(math.pi / 2))

        np.testing.assert_array_almost_equal(block, [0, -1, 0, 1, 0, 0, 0, 0, 1])

    def test_reflection_block(self):

        block = core.reflection_block(SimpleNamespace(x=1, y=0, z=0))

        np.testing.assert_array_equal(block, [-1, 0, 0, 0, 1, 0, 0, 0, 1])

    def test_pivot_translation(self):

        block = core.reflection_block(SimpleNamespace(x=1, y=0, z=0))

        # mirroring across the plane x = 2 moves the origin to x = 4
        np.testing.assert_array_equal(core.pivot_translation(block, SimpleNamespace(x=2, y=5, z=-1)), [4, 0, 0])

    def test_orthogonal_axis(self):

        axis = core.orthogonal_axis(SimpleNamespace(x=3, y=4, z=1))

        np.testing.assert_array_almost_equal(axis, [0.8, -0.6, 0])

        axis = core.orthogonal_axis(SimpleNamespace(x=0, y=0, z=2))

        np.testing.assert_array_equal(axis, [-1, 0, 0])

    def test_compose_and_invert(self):

        shift = [1, 0, 0, 1,
                 0, 1, 0, 2,
                 0, 0, 1, 3]

        np.testing.assert_array_equal(core.compose_rigid(shift, shift), [1, 0, 0, 2, 0, 1, 0, 4, 0, 0, 1, 6])
        np.testing.assert_array_equal(core.invert_rigid(shift), [1, 0, 0, -1, 0, 1, 0, -2, 0, 0, 1, -3])
        np.testing.assert_array_equal(core.invert_rigid_2d([0, -1, 1, 1, 0, 0]), [0, 1, 0, -1, 0, 1])

    def test_stack_trace(self):

        self.assertIn('test_stack_trace', stack_trace_as_string())
