# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.


import math

from typing import Iterator, Self

import numpy as np

from rigidmath._diagnostics import warn_degenerate
from rigidmath._typing import ARRAY_LIKE, DOUBLE_ARRAY, NONENUM, Vector3Like, QuaternionLike, Matrix4Like
from rigidmath.core._helpers import _check_vector3_array_and_shape
from rigidmath.tolerance import get_tolerance


__all__ = ['Vector3']


class Vector3:
    """
    A mutable 3 element vector.

    The :class:`Vector3` class is the position/direction type consumed by :class:`.Matrix4` and :class:`.Quaternion`.
    Like :class:`.Vector2`, most methods update the vector in place and return it so that calls can be chained::

        >>> from rigidmath import Vector3, Matrix4
        >>> from math import pi
        >>> rotation = Matrix4().set_rotation_axis_angle_at_offset(Vector3(0, 0, 1), pi / 2)
        >>> Vector3(1, 0, 0).apply_matrix4(rotation).equals(Vector3(0, 1, 0), 1e-12)
        True

    Every argument documented as a vector only needs readable ``x``, ``y`` and ``z`` attributes.  The methods which
    do not mutate the vector (:meth:`dot`, :meth:`length_sq`, :meth:`equals`, ...) only read those attributes, so they
    can also be called in their unbound form on foreign vectors, e.g. ``Vector3.dot(a, b)``.
    """

    def __init__(self, x: float = 0, y: float = 0, z: float = 0):
        """
        :param x: the x component
        :param y: the y component
        :param z: the z component
        """

        self.x: float = float(x)
        self.y: float = float(y)
        self.z: float = float(z)

    def set(self, x: float, y: float, z: float) -> Self:
        """
        Sets the components of this vector.

        :return: self
        """

        self.x = float(x)
        self.y = float(y)
        self.z = float(z)
        return self

    def set_from_array(self, array: ARRAY_LIKE) -> Self:
        """
        Sets the components of this vector from a length 3 array.

        :raises ValueError: If the array is not of length 3
        :return: self
        """

        array = _check_vector3_array_and_shape(array)

        self.x, self.y, self.z = float(array[0]), float(array[1]), float(array[2])
        return self

    def fill(self, value: float) -> Self:
        self.x = self.y = self.z = float(value)
        return self

    def add(self, vec: Vector3Like) -> Self:
        self.x += vec.x
        self.y += vec.y
        self.z += vec.z
        return self

    def sub(self, vec: Vector3Like) -> Self:
        self.x -= vec.x
        self.y -= vec.y
        self.z -= vec.z
        return self

    def multiply_scalar(self, scalar: float) -> Self:
        self.x = float(self.x * scalar)
        self.y = float(self.y * scalar)
        self.z = float(self.z * scalar)
        return self

    def divide_scalar(self, scalar: float) -> Self:
        """
        Divides this vector by a scalar.

        If the magnitude of ``scalar`` is within the numerical tolerance of zero a
        :class:`.DegenerateInputWarning` is issued.  The division is still performed with IEEE semantics, so an exact
        zero gives infinite (or nan) components rather than raising.

        :param scalar: the value to divide by
        :return: self
        """

        if abs(scalar) <= get_tolerance():
            warn_degenerate('Dividing by zero in Vector3.divide_scalar()')

        with np.errstate(divide='ignore', invalid='ignore'):
            return self.multiply_scalar(np.float64(1) / np.float64(scalar))

    def dot(self, vec: Vector3Like) -> float:
        """
        Returns the dot product of this vector with ``vec``.
        """

        return self.x * vec.x + self.y * vec.y + self.z * vec.z

    def cross(self, vec: Vector3Like) -> Self:
        """
        Sets this vector to the right handed cross product ``self x vec``.

        :param vec: the vector to cross with
        :return: self
        """

        ax, ay, az = self.x, self.y, self.z
        bx, by, bz = vec.x, vec.y, vec.z

        self.x = ay * bz - az * by
        self.y = az * bx - ax * bz
        self.z = ax * by - ay * bx
        return self

    def length_sq(self) -> float:
        """
        Returns the squared length.  Prefer this over :meth:`length` when only comparing magnitudes.
        """

        return self.x * self.x + self.y * self.y + self.z * self.z

    def length(self) -> float:
        return math.sqrt(Vector3.length_sq(self))

    def distance_to_squared(self, vec: Vector3Like) -> float:
        dx = self.x - vec.x
        dy = self.y - vec.y
        dz = self.z - vec.z
        return dx * dx + dy * dy + dz * dz

    def distance_to(self, vec: Vector3Like) -> float:
        return math.sqrt(self.distance_to_squared(vec))

    def normalize(self) -> Self:
        """
        Scales this vector to unit length.

        If the length is within the numerical tolerance of zero a :class:`.DegenerateInputWarning` is issued and the
        vector is left unchanged.

        :return: self
        """

        length = self.length()

        if length <= get_tolerance():
            warn_degenerate('Attempting to normalize zero length Vector3')
            return self

        return self.divide_scalar(length)

    def apply_matrix4(self, matrix: Matrix4Like) -> Self:
        """
        Transforms this vector (as a point) by a 3D rigid transform.

        Identity transforms are skipped without any arithmetic.

        :param matrix: the transform to apply
        :return: self
        """

        if matrix.is_identity:
            return self

        n11, n12, n13, n14, n21, n22, n23, n24, n31, n32, n33, n34 = (float(element) for element in matrix.elements)
        x, y, z = self.x, self.y, self.z

        self.x = n11 * x + n12 * y + n13 * z + n14
        self.y = n21 * x + n22 * y + n23 * z + n24
        self.z = n31 * x + n32 * y + n33 * z + n34
        return self

    def apply_matrix4_rotation_component(self, matrix: Matrix4Like) -> Self:
        """
        Transforms this vector (as a direction) by the rotation block of a 3D rigid transform, ignoring translation.

        :param matrix: the transform whose rotation block is applied
        :return: self
        """

        if matrix.is_identity:
            return self

        n11, n12, n13, _, n21, n22, n23, _, n31, n32, n33, _ = (float(element) for element in matrix.elements)
        x, y, z = self.x, self.y, self.z

        self.x = n11 * x + n12 * y + n13 * z
        self.y = n21 * x + n22 * y + n23 * z
        self.z = n31 * x + n32 * y + n33 * z
        return self

    def apply_quaternion(self, quaternion: QuaternionLike) -> Self:
        r"""
        Rotates this vector by a unit quaternion, :math:`\mathbf{q}\otimes\mathbf{v}\otimes\mathbf{q}^{-1}`.

        :param quaternion: the (unit) rotation quaternion
        :return: self
        """

        x, y, z = self.x, self.y, self.z
        qx, qy, qz, qw = quaternion.x, quaternion.y, quaternion.z, quaternion.w

        # q * v
        ix = qw * x + qy * z - qz * y
        iy = qw * y + qz * x - qx * z
        iz = qw * z + qx * y - qy * x
        iw = -qx * x - qy * y - qz * z

        # (q * v) * q^-1
        self.x = ix * qw + iw * -qx + iy * -qz - iz * -qy
        self.y = iy * qw + iw * -qy + iz * -qx - ix * -qz
        self.z = iz * qw + iw * -qz + ix * -qy - iy * -qx
        return self

    def lerp(self, vector: Vector3Like, t: float) -> Self:
        """
        Linearly interpolates towards ``vector`` by the fraction ``t``.
        """

        self.x += (vector.x - self.x) * t
        self.y += (vector.y - self.y) * t
        self.z += (vector.z - self.z) * t
        return self

    def average(self, vector: Vector3Like) -> Self:
        self.x = (self.x + vector.x) / 2
        self.y = (self.y + vector.y) / 2
        self.z = (self.z + vector.z) / 2
        return self

    def min(self, vector: Vector3Like) -> Self:
        self.x = min(self.x, vector.x)
        self.y = min(self.y, vector.y)
        self.z = min(self.z, vector.z)
        return self

    def max(self, vector: Vector3Like) -> Self:
        self.x = max(self.x, vector.x)
        self.y = max(self.y, vector.y)
        self.z = max(self.z, vector.z)
        return self

    def invert(self) -> Self:
        self.x = -self.x
        self.y = -self.y
        self.z = -self.z
        return self

    def angle_to(self, vector: Vector3Like) -> float:
        """
        Returns the unsigned angle between this vector and ``vector`` in radians.
        """

        theta = Vector3.dot(self, vector) / math.sqrt(Vector3.length_sq(self) * Vector3.length_sq(vector))

        return math.acos(min(max(theta, -1), 1))

    def angle_to_normalized(self, vector: Vector3Like) -> float:
        """
        Returns the unsigned angle between this vector and ``vector``, both assumed to be of unit length.
        """

        return math.acos(min(max(Vector3.dot(self, vector), -1), 1))

    def copy(self, vec: Vector3Like) -> Self:
        """
        Copies the components of ``vec`` into this vector.

        :return: self
        """

        self.x = vec.x
        self.y = vec.y
        self.z = vec.z
        return self

    def equals(self, vec: Vector3Like, tolerance: NONENUM = None) -> bool:
        """
        Checks whether every component differs from ``vec`` by at most ``tolerance``.

        :param vec: the vector to compare to
        :param tolerance: the tolerance to use.  ``None`` uses the current global numerical tolerance.
        """

        if tolerance is None:
            tolerance = get_tolerance()

        return (abs(self.x - vec.x) <= tolerance and
                abs(self.y - vec.y) <= tolerance and
                abs(self.z - vec.z) <= tolerance)

    def is_zero(self, tolerance: NONENUM = None) -> bool:
        """
        Checks whether the length of this vector is at most ``tolerance``.

        :param tolerance: the tolerance to use.  ``None`` uses the current global numerical tolerance.
        """

        if tolerance is None:
            tolerance = get_tolerance()

        return Vector3.length_sq(self) <= tolerance * tolerance

    def clone(self) -> 'Vector3':
        return Vector3(self.x, self.y, self.z)

    def to_array(self) -> DOUBLE_ARRAY:
        """
        Returns the components as a new numpy array.
        """

        return np.array([self.x, self.y, self.z])

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __eq__(self, other) -> bool:

        if isinstance(other, Vector3):
            return self.equals(other)

        return NotImplemented

    def __repr__(self) -> str:
        return 'Vector3({0!r}, {1!r}, {2!r})'.format(self.x, self.y, self.z)
