# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.


import math

from typing import Iterator, Self

import numpy as np

from rigidmath._diagnostics import warn_degenerate
from rigidmath._typing import ARRAY_LIKE, DOUBLE_ARRAY, NONENUM, Vector2Like, Matrix3Like
from rigidmath.core._helpers import _check_vector2_array_and_shape
from rigidmath.tolerance import get_tolerance


__all__ = ['Vector2']


class Vector2:
    """
    A mutable 2 element vector.

    Most methods update the vector in place and return it so that calls can be chained::

        >>> from rigidmath import Vector2
        >>> Vector2(3, 4).normalize().multiply_scalar(2)
        Vector2(1.2000000000000002, 1.6)

    Any argument documented as a vector only needs readable ``x`` and ``y`` attributes, so vectors from other
    geometry libraries can be passed directly.  For the same reason the "static" forms work as well, for instance
    ``Vector2.dot(a, b)`` for two foreign vectors.
    """

    def __init__(self, x: float = 0, y: float = 0):
        """
        :param x: the x component
        :param y: the y component
        """

        self.x: float = float(x)
        self.y: float = float(y)

    def set(self, x: float, y: float) -> Self:
        """
        Sets the components of this vector.

        :return: self
        """

        self.x = float(x)
        self.y = float(y)
        return self

    def set_from_array(self, array: ARRAY_LIKE) -> Self:
        """
        Sets the components of this vector from a length 2 array.

        :raises ValueError: If the array is not of length 2
        :return: self
        """

        array = _check_vector2_array_and_shape(array)

        self.x, self.y = float(array[0]), float(array[1])
        return self

    def fill(self, value: float) -> Self:
        """
        Sets every component to ``value``.

        :return: self
        """

        self.x = self.y = float(value)
        return self

    def add(self, vec: Vector2Like) -> Self:
        self.x += vec.x
        self.y += vec.y
        return self

    def sub(self, vec: Vector2Like) -> Self:
        self.x -= vec.x
        self.y -= vec.y
        return self

    def multiply_scalar(self, scalar: float) -> Self:
        self.x = float(self.x * scalar)
        self.y = float(self.y * scalar)
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
            warn_degenerate('Dividing by zero in Vector2.divide_scalar()')

        with np.errstate(divide='ignore', invalid='ignore'):
            return self.multiply_scalar(np.float64(1) / np.float64(scalar))

    def dot(self, vec: Vector2Like) -> float:
        """
        Returns the dot product of this vector with ``vec``.
        """

        return self.x * vec.x + self.y * vec.y

    def cross(self, vec: Vector2Like) -> float:
        """
        Returns the 2D cross (wedge) product ``self.x * vec.y - self.y * vec.x``.

        Unlike :meth:`.Vector3.cross` this does not modify the vector.
        """

        return self.x * vec.y - self.y * vec.x

    def angle(self) -> float:
        """
        Returns the angle of this vector from the positive x axis in radians, in the range [0, 2pi).
        """

        return math.atan2(-self.y, -self.x) + math.pi

    def length_sq(self) -> float:
        return self.x * self.x + self.y * self.y

    def length(self) -> float:
        return math.sqrt(self.length_sq())

    def distance_to_squared(self, vec: Vector2Like) -> float:
        dx = self.x - vec.x
        dy = self.y - vec.y
        return dx * dx + dy * dy

    def distance_to(self, vec: Vector2Like) -> float:
        return math.sqrt(self.distance_to_squared(vec))

    def normalize(self) -> Self:
        """
        Scales this vector to unit length.

        If the length is within the numerical tolerance of zero a :class:`.DegenerateInputWarning` is issued and a
        length of 1 is used instead, so a zero vector stays zero.

        :return: self
        """

        length = self.length()

        if length <= get_tolerance():
            warn_degenerate('Attempting to normalize zero length Vector2')
            length = 1

        return self.divide_scalar(length)

    def apply_matrix3(self, matrix: Matrix3Like) -> Self:
        """
        Transforms this vector (as a point) by a 2D rigid transform.

        Identity transforms are skipped without any arithmetic.

        :param matrix: the transform to apply
        :return: self
        """

        if matrix.is_identity:
            return self

        n11, n12, n13, n21, n22, n23 = (float(element) for element in matrix.elements)
        x, y = self.x, self.y

        self.x = n11 * x + n12 * y + n13
        self.y = n21 * x + n22 * y + n23
        return self

    def lerp(self, vector: Vector2Like, t: float) -> Self:
        """
        Linearly interpolates towards ``vector`` by the fraction ``t``.
        """

        self.x += (vector.x - self.x) * t
        self.y += (vector.y - self.y) * t
        return self

    def average(self, vector: Vector2Like) -> Self:
        self.x = (self.x + vector.x) / 2
        self.y = (self.y + vector.y) / 2
        return self

    def min(self, vector: Vector2Like) -> Self:
        """
        Component-wise minimum with ``vector``.
        """

        self.x = min(self.x, vector.x)
        self.y = min(self.y, vector.y)
        return self

    def max(self, vector: Vector2Like) -> Self:
        """
        Component-wise maximum with ``vector``.
        """

        self.x = max(self.x, vector.x)
        self.y = max(self.y, vector.y)
        return self

    def invert(self) -> Self:
        self.x = -self.x
        self.y = -self.y
        return self

    def angle_to(self, vector: Vector2Like) -> float:
        """
        Returns the unsigned angle between this vector and ``vector`` in radians.
        """

        theta = Vector2.dot(self, vector) / math.sqrt(Vector2.length_sq(self) * Vector2.length_sq(vector))

        return math.acos(min(max(theta, -1), 1))

    def angle_to_normalized(self, vector: Vector2Like) -> float:
        """
        Returns the unsigned angle between this vector and ``vector``, both assumed to be of unit length.
        """

        return math.acos(min(max(Vector2.dot(self, vector), -1), 1))

    def copy(self, vec: Vector2Like) -> Self:
        """
        Copies the components of ``vec`` into this vector.

        :return: self
        """

        self.x = vec.x
        self.y = vec.y
        return self

    def equals(self, vec: Vector2Like, tolerance: NONENUM = None) -> bool:
        """
        Checks whether every component differs from ``vec`` by at most ``tolerance``.

        :param vec: the vector to compare to
        :param tolerance: the tolerance to use.  ``None`` uses the current global numerical tolerance.
        """

        if tolerance is None:
            tolerance = get_tolerance()

        return abs(self.x - vec.x) <= tolerance and abs(self.y - vec.y) <= tolerance

    def is_zero(self, tolerance: NONENUM = None) -> bool:
        """
        Checks whether both components are within ``tolerance`` of zero.

        :param tolerance: the tolerance to use.  ``None`` uses the current global numerical tolerance.
        """

        if tolerance is None:
            tolerance = get_tolerance()

        return abs(self.x) <= tolerance and abs(self.y) <= tolerance

    def clone(self) -> 'Vector2':
        return Vector2(self.x, self.y)

    def to_array(self) -> DOUBLE_ARRAY:
        """
        Returns the components as a new numpy array.
        """

        return np.array([self.x, self.y])

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __eq__(self, other) -> bool:

        if isinstance(other, Vector2):
            return self.equals(other)

        return NotImplemented

    def __repr__(self) -> str:
        return 'Vector2({0!r}, {1!r})'.format(self.x, self.y)
