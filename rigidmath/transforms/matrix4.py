# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.


import logging
import math

from typing import Self

import numpy as np

from rigidmath._typing import ARRAY_LIKE, DOUBLE_ARRAY, Matrix4Like, Vector3Like
from rigidmath.core import (IDENTITY_MATRIX4_ELEMENTS, within_tolerance, elements_equal, elements_are_identity,
                            axis_angle_block, reflection_block, pivot_translation, orthogonal_axis, unit_axis,
                            compose_rigid, invert_rigid)
from rigidmath.core._helpers import _check_matrix4_array_and_shape
from rigidmath.core.elementals import BLOCK
from rigidmath.tolerance import get_tolerance


__all__ = ['Matrix4']


_LOGGER: logging.Logger = logging.getLogger(__name__)
"""
This is the logging interface for reporting degenerate rotation constructions.
"""


class _Axis:
    """
    Minimal x/y/z holder used to pass computed axes to the closed form helpers.
    """

    __slots__ = ('x', 'y', 'z')

    def __init__(self, x: float, y: float, z: float):
        self.x, self.y, self.z = x, y, z


class Matrix4:
    r"""
    A 3D rigid transform (rotation or reflection plus translation) in homogeneous coordinates.

    Only the top three rows of the :math:`4\times 4` homogeneous matrix are stored

    .. math::
        \left[\begin{array}{cccc} r_{11} & r_{12} & r_{13} & t_x \\ r_{21} & r_{22} & r_{23} & t_y \\
        r_{31} & r_{32} & r_{33} & t_z \\ 0 & 0 & 0 & 1\end{array}\right]

    as the 12 :attr:`elements`, since the last row never changes for a rigid transform.

    The transform can only be built through the ``set_*`` methods (or explicit elements) so that the rotation block
    stays orthonormal.  This is what allows :meth:`invert_transform` to use a transpose instead of a general inverse.

    Whether the transform is the identity is cached in :attr:`is_identity`.  Composition with an identity operand
    reduces to a copy and :meth:`.Vector3.apply_matrix4` skips identity transforms entirely::

        >>> from rigidmath import Matrix4, Vector3
        >>> from math import pi
        >>> shift = Matrix4().set_translation(Vector3(1, 2, 3))
        >>> shift.clone().multiply_matrix4(shift.clone().invert_transform()).is_identity
        True
        >>> Vector3(1, 0, 0).apply_matrix4(Matrix4().set_rotation_axis_angle_at_offset(Vector3(0, 0, 1), pi))
        Vector3(-1.0, 1.2246467991473532e-16, 0.0)

    Both :attr:`elements` and :attr:`is_identity` are read only.
    """

    def __init__(self, *elements: float, is_identity: bool | None = None):
        """
        :param elements: Either nothing (the identity) or the 12 stored elements in row-major order
        :param is_identity: Overrides the identity flag that would otherwise be computed from the elements.  Only
                            used when elements are given.
        :raises ValueError: If a number of elements other than 0 or 12 is given
        """

        if elements:
            self._elements: DOUBLE_ARRAY = _check_matrix4_array_and_shape(elements, return_copy=True)
            self._is_identity: bool = (elements_are_identity(self._elements) if is_identity is None
                                       else bool(is_identity))
        else:
            self._elements = IDENTITY_MATRIX4_ELEMENTS.copy()
            self._is_identity = True

    @property
    def elements(self) -> DOUBLE_ARRAY:
        """
        A read only copy of the 12 stored elements ``[r11, r12, r13, tx, r21, r22, r23, ty, r31, r32, r33, tz]``.

        This property cannot be set.
        """

        elements = self._elements.copy()
        elements.setflags(write=False)
        return elements

    @elements.setter
    def elements(self, _):
        raise AttributeError('No elements setter on Matrix4.')

    @property
    def is_identity(self) -> bool:
        """
        Whether this transform is the identity, within the numerical tolerance at the time it was last changed.

        This property cannot be set.
        """

        return self._is_identity

    @is_identity.setter
    def is_identity(self, _):
        raise AttributeError('No is_identity setter on Matrix4.')

    def _set(self, *elements: float) -> Self:
        self._elements[:] = elements
        return self

    def set_identity(self) -> Self:
        """
        Resets this transform to the identity.

        :return: self
        """

        self._elements[:] = IDENTITY_MATRIX4_ELEMENTS
        self._is_identity = True
        return self

    def set_from_array(self, array: ARRAY_LIKE) -> Self:
        """
        Sets the 12 stored elements from an array, recomputing the identity flag.

        The array may be given flat or as 3 rows of 4.  No check is made that the rotation block is orthonormal.

        :raises ValueError: If the array does not contain exactly 12 elements
        :return: self
        """

        self._elements[:] = _check_matrix4_array_and_shape(array)
        self._is_identity = elements_are_identity(self._elements)
        return self

    def multiply_matrix4(self, matrix: Matrix4Like) -> Self:
        """
        Sets this transform to ``self * matrix``, that is ``matrix`` is applied first.

        :param matrix: the right hand transform
        :return: self
        """

        return self._set_product(self, matrix)

    def premultiply_matrix4(self, matrix: Matrix4Like) -> Self:
        """
        Sets this transform to ``matrix * self``, that is ``matrix`` is applied last.

        :param matrix: the left hand transform
        :return: self
        """

        return self._set_product(matrix, self)

    def _set_product(self, matrix_a: Matrix4Like, matrix_b: Matrix4Like) -> Self:

        if matrix_a.is_identity:
            return self.copy(matrix_b)

        if matrix_b.is_identity:
            return self.copy(matrix_a)

        self._set(*compose_rigid(np.asarray(matrix_a.elements).tolist(), np.asarray(matrix_b.elements).tolist()))

        # composing two non-identity transforms can still give the identity (A times its inverse)
        self._is_identity = elements_are_identity(self._elements)
        return self

    def set_translation(self, translation: Vector3Like) -> Self:
        """
        Sets this transform to a pure translation.

        :param translation: the translation
        :return: self
        """

        if within_tolerance(translation.x, translation.y, translation.z):
            return self.set_identity()

        self._set(1, 0, 0, translation.x,
                  0, 1, 0, translation.y,
                  0, 0, 1, translation.z)
        self._is_identity = False
        return self

    def set_rotation_axis_angle_at_offset(self, axis: Vector3Like, angle: float,
                                          offset: Vector3Like | None = None) -> Self:
        """
        Sets this transform to a right handed rotation by ``angle`` about the line through ``offset`` along ``axis``.

        The rotation block comes from Rodrigues' rotation formula.  When ``offset`` is given the translation column
        rotates about the pivot instead of the origin, so the pivot point itself is fixed by the transform.

        :param axis: the unit rotation axis.  This is not normalized for you.
        :param angle: the rotation angle in radians
        :param offset: the pivot point.  ``None`` rotates about the origin.
        :return: self
        """

        if within_tolerance(angle):
            return self.set_identity()

        return self._set_rotation_block(axis_angle_block(axis, math.cos(angle), math.sin(angle)), offset)

    def set_rotation_from_vector_to_vector(self, from_vector: Vector3Like, to_vector: Vector3Like,
                                           offset: Vector3Like | None = None) -> Self:
        """
        Sets this transform to the shortest rotation taking the unit vector ``from_vector`` onto ``to_vector``.

        The axis is the normalized cross product of the two vectors.  If they are antiparallel the cross product gives
        no axis and a half turn about an arbitrary axis orthogonal to ``from_vector`` is used instead.

        :param from_vector: the unit vector to rotate from
        :param to_vector: the unit vector to rotate to
        :param offset: the pivot point.  ``None`` rotates about the origin.
        :return: self
        """

        tolerance = get_tolerance()

        if (abs(from_vector.x - to_vector.x) <= tolerance and
                abs(from_vector.y - to_vector.y) <= tolerance and
                abs(from_vector.z - to_vector.z) <= tolerance):
            return self.set_identity()

        cross = (from_vector.y * to_vector.z - from_vector.z * to_vector.y,
                 from_vector.z * to_vector.x - from_vector.x * to_vector.z,
                 from_vector.x * to_vector.y - from_vector.y * to_vector.x)

        sin_angle = math.sqrt(cross[0] * cross[0] + cross[1] * cross[1] + cross[2] * cross[2])

        if sin_angle <= tolerance:
            _LOGGER.debug('Antiparallel vectors given to Matrix4.set_rotation_from_vector_to_vector, '
                          'using a half turn')

            sin_angle = 0.
            axis = orthogonal_axis(from_vector)

        else:
            axis = unit_axis(cross, sin_angle)

        cos_angle = from_vector.x * to_vector.x + from_vector.y * to_vector.y + from_vector.z * to_vector.z

        return self._set_rotation_block(axis_angle_block(_Axis(*axis), cos_angle, sin_angle), offset)

    def set_reflection_normal_at_offset(self, normal: Vector3Like, offset: Vector3Like | None = None) -> Self:
        """
        Sets this transform to the mirror reflection across the plane through ``offset`` with unit normal ``normal``.

        :param normal: the unit normal of the mirror plane.  This is not normalized for you.
        :param offset: a point on the mirror plane.  ``None`` uses the plane through the origin.
        :return: self
        """

        return self._set_rotation_block(reflection_block(normal), offset)

    def _set_rotation_block(self, block: BLOCK, offset: Vector3Like | None) -> Self:

        r11, r12, r13, r21, r22, r23, r31, r32, r33 = block

        if offset is not None:
            tx, ty, tz = pivot_translation(block, offset)
        else:
            tx = ty = tz = 0.

        self._set(r11, r12, r13, tx,
                  r21, r22, r23, ty,
                  r31, r32, r33, tz)
        self._is_identity = False
        return self

    def invert_transform(self) -> Self:
        """
        Inverts this transform in place.

        The rotation block is orthonormal, so the inverse is formed from its transpose instead of a general inverse.
        This is only valid for transforms built through this class (rotations, reflections and translations).

        :return: self
        """

        if self._is_identity:
            return self

        return self._set(*invert_rigid(self._elements.tolist()))

    def equals(self, matrix: Matrix4Like) -> bool:
        """
        Checks that each of the 12 stored elements is within the numerical tolerance of those of ``matrix``.
        """

        return elements_equal(self._elements, matrix.elements)

    def copy(self, matrix: Matrix4Like) -> Self:
        """
        Copies the elements and the identity flag of ``matrix`` into this transform.

        :return: self
        """

        self._elements[:] = matrix.elements
        self._is_identity = matrix.is_identity
        return self

    def clone(self) -> 'Matrix4':
        return Matrix4(*self._elements.tolist(), is_identity=self._is_identity)

    def to_array(self) -> DOUBLE_ARRAY:
        """
        Returns the full :math:`4\\times 4` homogeneous matrix as a new numpy array.
        """

        return np.vstack([self._elements.reshape(3, 4), [0., 0., 0., 1.]])

    def __eq__(self, other) -> bool:

        if isinstance(other, Matrix4):
            return self.equals(other)

        return NotImplemented

    def __repr__(self) -> str:
        return 'Matrix4({0}, is_identity={1!r})'.format(', '.join(map(repr, self._elements.tolist())),
                                                        self._is_identity)
