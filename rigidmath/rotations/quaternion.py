# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.


import logging
import math
import sys

from typing import Self

import numpy as np

from rigidmath._diagnostics import warn_degenerate
from rigidmath._typing import ARRAY_LIKE, DOUBLE_ARRAY, NONENUM, QuaternionLike, Vector3Like
from rigidmath.core._helpers import _check_quaternion_array_and_shape
from rigidmath.tolerance import get_tolerance


__all__ = ['Quaternion']


_LOGGER: logging.Logger = logging.getLogger(__name__)
"""
This is the logging interface for reporting degenerate rotation constructions.
"""


class Quaternion:
    r"""
    A rotation quaternion of the form
    :math:`\mathbf{q}=[q_x, q_y, q_z, q_w]^T=[\text{sin}(\frac{\theta}{2})\hat{\mathbf{x}}, \text{cos}(\frac{\theta}{2})]^T`.

    The components are exposed through the read only properties :attr:`x`, :attr:`y`, :attr:`z` and :attr:`w`.
    Attempting to assign one of them directly raises an :exc:`AttributeError`; use :meth:`set` or one of the other
    mutating methods instead so that the quaternion stays a rotation.  The quaternion is expected to be of unit length
    and :meth:`normalize` restores that after any change that could break it.

    Composition follows the Hamilton convention.  ``a.multiply(b)`` stores :math:`\mathbf{a}\otimes\mathbf{b}` in
    ``a``, which rotates a vector by ``b`` first and then by ``a``::

        >>> from rigidmath import Quaternion, Vector3
        >>> x_to_y = Quaternion().set_from_unit_vectors(Vector3(1, 0, 0), Vector3(0, 1, 0))
        >>> y_to_z = Quaternion().set_from_unit_vectors(Vector3(0, 1, 0), Vector3(0, 0, 1))
        >>> Vector3(1, 0, 0).apply_quaternion(y_to_z.clone().multiply(x_to_y)).equals(Vector3(0, 0, 1), 1e-12)
        True
    """

    def __init__(self, x: float = 0, y: float = 0, z: float = 0, w: float = 1):
        """
        :param x: the x component of the vector part
        :param y: the y component of the vector part
        :param z: the z component of the vector part
        :param w: the scalar part
        """

        self._x: float = float(x)
        self._y: float = float(y)
        self._z: float = float(z)
        self._w: float = float(w)

    @property
    def x(self) -> float:
        """
        The x component of the vector part of the quaternion.

        This property is read only.
        """

        return self._x

    @x.setter
    def x(self, _):
        raise AttributeError('No x setter on Quaternion.')

    @property
    def y(self) -> float:
        """
        The y component of the vector part of the quaternion.

        This property is read only.
        """

        return self._y

    @y.setter
    def y(self, _):
        raise AttributeError('No y setter on Quaternion.')

    @property
    def z(self) -> float:
        """
        The z component of the vector part of the quaternion.

        This property is read only.
        """

        return self._z

    @z.setter
    def z(self, _):
        raise AttributeError('No z setter on Quaternion.')

    @property
    def w(self) -> float:
        """
        The scalar part of the quaternion.

        This property is read only.
        """

        return self._w

    @w.setter
    def w(self, _):
        raise AttributeError('No w setter on Quaternion.')

    def set(self, x: float, y: float, z: float, w: float) -> Self:
        """
        Sets all 4 components.  The result is not normalized.

        :return: self
        """

        self._x, self._y, self._z, self._w = float(x), float(y), float(z), float(w)
        return self

    def set_from_array(self, array: ARRAY_LIKE) -> Self:
        """
        Sets the components from a length 4 array ordered ``[x, y, z, w]`` (scalar last).

        :raises ValueError: If the array is not of length 4
        :return: self
        """

        array = _check_quaternion_array_and_shape(array)

        return self.set(*array)

    def set_identity(self) -> Self:
        """
        Resets this quaternion to the identity rotation ``(0, 0, 0, 1)``.

        :return: self
        """

        return self.set(0, 0, 0, 1)

    def set_from_unit_vectors(self, v_from: Vector3Like, v_to: Vector3Like) -> Self:
        r"""
        Sets this quaternion to the shortest rotation taking the unit vector ``v_from`` onto the unit vector ``v_to``.

        With :math:`r = \hat{\mathbf{f}}\cdot\hat{\mathbf{t}} + 1` the unnormalized quaternion is
        :math:`[\hat{\mathbf{f}}\times\hat{\mathbf{t}}, r]` which is then normalized.  When the vectors are
        antiparallel (:math:`r` at most machine epsilon) the cross product vanishes and a half turn about an axis
        perpendicular to ``v_from`` is used instead.

        Neither vector is normalized here; passing non-unit vectors gives a meaningless result.

        :param v_from: the unit vector to rotate from
        :param v_to: the unit vector to rotate to
        :return: self
        """

        r = v_from.x * v_to.x + v_from.y * v_to.y + v_from.z * v_to.z + 1

        if r <= sys.float_info.epsilon:
            _LOGGER.debug('Antiparallel vectors given to Quaternion.set_from_unit_vectors, using a half turn')

            r = 0

            if abs(v_from.x) > abs(v_from.z):
                self._x, self._y, self._z = -v_from.y, v_from.x, 0.
            else:
                self._x, self._y, self._z = 0., -v_from.z, v_from.y

        else:
            self._x = v_from.y * v_to.z - v_from.z * v_to.y
            self._y = v_from.z * v_to.x - v_from.x * v_to.z
            self._z = v_from.x * v_to.y - v_from.y * v_to.x

        self._w = float(r)

        return self.normalize()

    def length_sq(self) -> float:
        return self._x * self._x + self._y * self._y + self._z * self._z + self._w * self._w

    def length(self) -> float:
        return math.sqrt(self.length_sq())

    def normalize(self) -> Self:
        """
        Scales this quaternion to unit length.

        If the length is within the numerical tolerance of zero a :class:`.DegenerateInputWarning` is issued and the
        quaternion is reset to the identity.

        :return: self
        """

        length = self.length()

        if length <= get_tolerance():
            warn_degenerate('Attempting to normalize zero length Quaternion')
            return self.set_identity()

        inverse = 1 / length

        self._x *= inverse
        self._y *= inverse
        self._z *= inverse
        self._w *= inverse
        return self

    def invert(self) -> Self:
        """
        Conjugates this quaternion, which is the inverse rotation for a unit quaternion.

        :return: self
        """

        self._x, self._y, self._z = -self._x, -self._y, -self._z
        return self

    def multiply(self, quaternion: QuaternionLike) -> Self:
        r"""
        Sets this quaternion to :math:`\mathbf{self}\otimes\mathbf{q}`.

        :param quaternion: the right hand factor
        :return: self
        """

        return self._set_product(self, quaternion)

    def premultiply(self, quaternion: QuaternionLike) -> Self:
        r"""
        Sets this quaternion to :math:`\mathbf{q}\otimes\mathbf{self}`.

        :param quaternion: the left hand factor
        :return: self
        """

        return self._set_product(quaternion, self)

    def _set_product(self, a: QuaternionLike, b: QuaternionLike) -> Self:
        ax, ay, az, aw = a.x, a.y, a.z, a.w
        bx, by, bz, bw = b.x, b.y, b.z, b.w

        self._x = ax * bw + aw * bx + ay * bz - az * by
        self._y = ay * bw + aw * by + az * bx - ax * bz
        self._z = az * bw + aw * bz + ax * by - ay * bx
        self._w = aw * bw - ax * bx - ay * by - az * bz
        return self

    def copy(self, quaternion: QuaternionLike) -> Self:
        """
        Copies the components of ``quaternion`` into this quaternion.

        :return: self
        """

        return self.set(quaternion.x, quaternion.y, quaternion.z, quaternion.w)

    def clone(self) -> 'Quaternion':
        return Quaternion(self._x, self._y, self._z, self._w)

    def equals(self, quaternion: QuaternionLike, tolerance: NONENUM = None) -> bool:
        """
        Checks whether every component differs from ``quaternion`` by at most ``tolerance``.

        Note that ``q`` and ``-q`` represent the same rotation but do not compare equal here.

        :param quaternion: the quaternion to compare to
        :param tolerance: the tolerance to use.  ``None`` uses the current global numerical tolerance.
        """

        if tolerance is None:
            tolerance = get_tolerance()

        return (abs(self._x - quaternion.x) <= tolerance and
                abs(self._y - quaternion.y) <= tolerance and
                abs(self._z - quaternion.z) <= tolerance and
                abs(self._w - quaternion.w) <= tolerance)

    def to_array(self) -> DOUBLE_ARRAY:
        """
        Returns the components as a new numpy array ordered ``[x, y, z, w]``.
        """

        return np.array([self._x, self._y, self._z, self._w])

    def __eq__(self, other) -> bool:

        if isinstance(other, Quaternion):
            return self.equals(other)

        return NotImplemented

    def __repr__(self) -> str:
        return 'Quaternion({0!r}, {1!r}, {2!r}, {3!r})'.format(self._x, self._y, self._z, self._w)
