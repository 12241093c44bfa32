"""
This package contains the closed form geometric primitives shared by the vector, quaternion and matrix classes.
It has no dependencies on those classes to avoid circular imports.  All functions here are pure scalar computations
that read the global numerical tolerance at call time.
"""

import rigidmath.core.elementals

from rigidmath.core.elementals import (IDENTITY_MATRIX3_ELEMENTS, IDENTITY_MATRIX4_ELEMENTS,
                                       within_tolerance, elements_equal, elements_are_identity,
                                       axis_angle_block, reflection_block, pivot_translation, orthogonal_axis, unit_axis,
                                       compose_rigid, invert_rigid, invert_rigid_2d)

__all__ = ['IDENTITY_MATRIX3_ELEMENTS', 'IDENTITY_MATRIX4_ELEMENTS',
           'within_tolerance', 'elements_equal', 'elements_are_identity',
           'axis_angle_block', 'reflection_block', 'pivot_translation', 'orthogonal_axis', 'unit_axis',
           'compose_rigid', 'invert_rigid', 'invert_rigid_2d']
