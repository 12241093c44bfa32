# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.


import math

from typing import Self

import numpy as np

from rigidmath._typing import ARRAY_LIKE, DOUBLE_ARRAY, Matrix3Like, Vector2Like
from rigidmath.core import (IDENTITY_MATRIX3_ELEMENTS, within_tolerance, elements_equal, elements_are_identity,
                            invert_rigid_2d)
from rigidmath.core._helpers import _check_matrix3_array_and_shape


__all__ = ['Matrix3']


class Matrix3:
    r"""
    A 2D rigid transform (rotation plus translation) in homogeneous coordinates.

    Only the top two rows of the :math:`3\times 3` homogeneous matrix are stored

    .. math::
        \left[\begin{array}{ccc} r_{11} & r_{12} & t_x \\ r_{21} & r_{22} & t_y \\ 0 & 0 & 1\end{array}\right]

    as the 6 :attr:`elements` ``[r11, r12, tx, r21, r22, ty]``, since the last row never changes for a rigid transform.

    Whether the transform is the identity is tracked in the :attr:`is_identity` flag which every mutating method keeps
    current.  Consumers such as :meth:`.Vector2.apply_matrix3` use it to skip the arithmetic entirely.

    Both :attr:`elements` and :attr:`is_identity` are read only; use the ``set_*`` methods to change the transform.
    """

    def __init__(self, *elements: float, is_identity: bool | None = None):
        """
        :param elements: Either nothing (the identity) or the 6 stored elements in row-major order
        :param is_identity: Overrides the identity flag that would otherwise be computed from the elements.  Only
                            used when elements are given.
        :raises ValueError: If a number of elements other than 0 or 6 is given
        """

        if elements:
            self._elements: DOUBLE_ARRAY = _check_matrix3_array_and_shape(elements, return_copy=True)
            self._is_identity: bool = (elements_are_identity(self._elements) if is_identity is None
                                       else bool(is_identity))
        else:
            self._elements = IDENTITY_MATRIX3_ELEMENTS.copy()
            self._is_identity = True

    @property
    def elements(self) -> DOUBLE_ARRAY:
        """
        A read only copy of the 6 stored elements ``[r11, r12, tx, r21, r22, ty]``.

        This property cannot be set.
        """

        elements = self._elements.copy()
        elements.setflags(write=False)
        return elements

    @elements.setter
    def elements(self, _):
        raise AttributeError('No elements setter on Matrix3.')

    @property
    def is_identity(self) -> bool:
        """
        Whether this transform is the identity, within the numerical tolerance at the time it was last changed.

        This property cannot be set.
        """

        return self._is_identity

    @is_identity.setter
    def is_identity(self, _):
        raise AttributeError('No is_identity setter on Matrix3.')

    def _set(self, n11: float, n12: float, n13: float, n21: float, n22: float, n23: float) -> Self:
        self._elements[:] = (n11, n12, n13, n21, n22, n23)
        return self

    def set_identity(self) -> Self:
        """
        Resets this transform to the identity.

        :return: self
        """

        self._elements[:] = IDENTITY_MATRIX3_ELEMENTS
        self._is_identity = True
        return self

    def set_from_array(self, array: ARRAY_LIKE) -> Self:
        """
        Sets the 6 stored elements from an array, recomputing the identity flag.

        The array may be given flat or as 2 rows of 3.

        :raises ValueError: If the array does not contain exactly 6 elements
        :return: self
        """

        self._elements[:] = _check_matrix3_array_and_shape(array)
        self._is_identity = elements_are_identity(self._elements)
        return self

    def set_rotation(self, angle: float) -> Self:
        """
        Sets this transform to a pure rotation by ``angle`` radians (counter clockwise).

        :param angle: the rotation angle in radians
        :return: self
        """

        if within_tolerance(angle):
            return self.set_identity()

        cos_angle, sin_angle = math.cos(angle), math.sin(angle)

        self._set(cos_angle, -sin_angle, 0,
                  sin_angle, cos_angle, 0)
        self._is_identity = False
        return self

    def set_translation(self, translation: Vector2Like) -> Self:
        """
        Sets this transform to a pure translation.

        :param translation: the translation
        :return: self
        """

        if within_tolerance(translation.x, translation.y):
            return self.set_identity()

        self._set(1, 0, translation.x,
                  0, 1, translation.y)
        self._is_identity = False
        return self

    def set_from_rotation_translation(self, angle: float, translation: Vector2Like) -> Self:
        r"""
        Sets this transform to :math:`\mathbf{R}(\theta)\mathbf{T}(\mathbf{t})`, a translation by ``translation``
        followed by a rotation by ``angle``.

        The translation column is therefore the rotated translation,
        :math:`[t_x\text{cos}(\theta)-t_y\text{sin}(\theta), t_x\text{sin}(\theta)+t_y\text{cos}(\theta)]`.

        :param angle: the rotation angle in radians
        :param translation: the translation applied before the rotation
        :return: self
        """

        if within_tolerance(angle, translation.x, translation.y):
            return self.set_identity()

        r11 = math.cos(angle)
        r12 = -math.sin(angle)
        r21 = -r12
        r22 = r11

        tx = translation.x * r11 + translation.y * r12
        ty = translation.x * r21 + translation.y * r22

        self._set(r11, r12, tx,
                  r21, r22, ty)
        self._is_identity = False
        return self

    def invert_transform(self) -> Self:
        """
        Inverts this transform in place.

        The rotation block is orthonormal, so the inverse is formed from its transpose instead of a general inverse.

        :return: self
        """

        if self._is_identity:
            return self

        return self._set(*invert_rigid_2d(self._elements.tolist()))

    def equals(self, matrix: Matrix3Like) -> bool:
        """
        Checks that each of the 6 stored elements is within the numerical tolerance of those of ``matrix``.
        """

        return elements_equal(self._elements, matrix.elements)

    def copy(self, matrix: Matrix3Like) -> Self:
        """
        Copies the elements and the identity flag of ``matrix`` into this transform.

        :return: self
        """

        self._elements[:] = matrix.elements
        self._is_identity = matrix.is_identity
        return self

    def clone(self) -> 'Matrix3':
        return Matrix3(*self._elements.tolist(), is_identity=self._is_identity)

    def to_array(self) -> DOUBLE_ARRAY:
        """
        Returns the full :math:`3\\times 3` homogeneous matrix as a new numpy array.
        """

        return np.vstack([self._elements.reshape(2, 3), [0., 0., 1.]])

    def __eq__(self, other) -> bool:

        if isinstance(other, Matrix3):
            return self.equals(other)

        return NotImplemented

    def __repr__(self) -> str:
        return 'Matrix3({0}, is_identity={1!r})'.format(', '.join(map(repr, self._elements.tolist())),
                                                        self._is_identity)
