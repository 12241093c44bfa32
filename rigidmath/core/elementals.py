# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.


r"""
Closed form building blocks shared by the rigid transform classes.

Rotation blocks are returned as 9-tuples in row-major order
:math:`(r_{11}, r_{12}, r_{13}, r_{21}, \dots, r_{33})` and rigid transforms as the 12 (3D) or 6 (2D) stored elements
of the reduced homogeneous form, i.e. the matrix rows without the trivial last row.  Everything here works on plain
scalars so that the arithmetic order (and therefore the rounding) is fixed and independent of any BLAS backend.
"""

import math

import numpy as np

from rigidmath._typing import DOUBLE_ARRAY, F_ARRAY_LIKE, Vector3Like
from rigidmath.tolerance import get_tolerance


__all__ = ['IDENTITY_MATRIX3_ELEMENTS', 'IDENTITY_MATRIX4_ELEMENTS',
           'within_tolerance', 'elements_equal', 'elements_are_identity',
           'axis_angle_block', 'reflection_block', 'pivot_translation', 'orthogonal_axis', 'unit_axis',
           'compose_rigid', 'invert_rigid', 'invert_rigid_2d']


IDENTITY_MATRIX3_ELEMENTS: DOUBLE_ARRAY = np.array([1., 0., 0.,
                                                     0., 1., 0.])
"""
The 6 stored elements of the 2D identity transform.
"""

IDENTITY_MATRIX4_ELEMENTS: DOUBLE_ARRAY = np.array([1., 0., 0., 0.,
                                                     0., 1., 0., 0.,
                                                     0., 0., 1., 0.])
"""
The 12 stored elements of the 3D identity transform.
"""

BLOCK = tuple[float, float, float, float, float, float, float, float, float]


def within_tolerance(*values: float) -> bool:
    """
    Returns ``True`` if the magnitude of every value is at most the current numerical tolerance.
    """

    tolerance = get_tolerance()

    return all(abs(value) <= tolerance for value in values)


def elements_equal(elements_a: F_ARRAY_LIKE, elements_b: F_ARRAY_LIKE) -> bool:
    """
    Element-wise comparison of two element arrays within the current numerical tolerance.
    """

    return bool((np.abs(np.asarray(elements_a) - np.asarray(elements_b)) <= get_tolerance()).all())


def elements_are_identity(elements: F_ARRAY_LIKE) -> bool:
    """
    Checks stored matrix elements against the identity within the current numerical tolerance.

    The identity is chosen from the number of elements (6 for a 2D transform, 12 for a 3D transform).

    :param elements: the stored elements of a reduced homogeneous transform
    :return: ``True`` if every element is within tolerance of the identity
    """

    elements = np.asarray(elements)

    identity = IDENTITY_MATRIX3_ELEMENTS if elements.size == 6 else IDENTITY_MATRIX4_ELEMENTS

    return elements_equal(elements, identity)


def axis_angle_block(axis: Vector3Like, cos_angle: float, sin_angle: float) -> BLOCK:
    r"""
    Forms the rotation block for a right handed rotation about a unit axis using Rodrigues' rotation formula.

    With :math:`c=\text{cos}(\theta)`, :math:`s=\text{sin}(\theta)`, :math:`t=1-c` and unit axis
    :math:`\hat{\mathbf{x}}=[x, y, z]^T`:

    .. math::
        \mathbf{R}=\left[\begin{array}{ccc} tx^2+c & txy-sz & txz+sy \\
        txy+sz & ty^2+c & tyz-sx \\
        txz-sy & tyz+sx & tz^2+c \end{array}\right]

    The cosine and sine are taken directly so that callers who already know them (for instance from a dot and cross
    product) do not need to go through an angle.

    :param axis: The unit rotation axis (not normalized here)
    :param cos_angle: the cosine of the rotation angle
    :param sin_angle: the sine of the rotation angle
    :return: the rotation block in row-major order
    """

    t = 1 - cos_angle
    x, y, z = axis.x, axis.y, axis.z
    t_x, t_y = t * x, t * y

    return (t_x * x + cos_angle, t_x * y - sin_angle * z, t_x * z + sin_angle * y,
            t_x * y + sin_angle * z, t_y * y + cos_angle, t_y * z - sin_angle * x,
            t_x * z - sin_angle * y, t_y * z + sin_angle * x, t * z * z + cos_angle)


def reflection_block(normal: Vector3Like) -> BLOCK:
    r"""
    Forms the Householder reflection :math:`\mathbf{I}-2\hat{\mathbf{n}}\hat{\mathbf{n}}^T` across the plane through
    the origin with unit normal :math:`\hat{\mathbf{n}}`.

    :param normal: the unit normal of the mirror plane (not normalized here)
    :return: the reflection block in row-major order
    """

    nx, ny, nz = normal.x, normal.y, normal.z

    r11, r12, r13 = 1 - 2 * nx * nx, -2 * nx * ny, -2 * nx * nz
    r22, r23 = 1 - 2 * ny * ny, -2 * ny * nz
    r33 = 1 - 2 * nz * nz

    return (r11, r12, r13,
            r12, r22, r23,
            r13, r23, r33)


def pivot_translation(block: BLOCK, offset: Vector3Like) -> tuple[float, float, float]:
    r"""
    Computes the translation column of :math:`\mathbf{T}(\mathbf{o})\mathbf{R}\mathbf{T}(-\mathbf{o})`, that is of
    the transform applying ``block`` about the pivot point :math:`\mathbf{o}` instead of the origin.

    The product is folded into :math:`\mathbf{t}=-(\mathbf{R}-\mathbf{I})\mathbf{o}` so no intermediate matrices are
    formed.

    :param block: the rotation or reflection block in row-major order
    :param offset: the pivot point
    :return: the translation column
    """

    r11, r12, r13, r21, r22, r23, r31, r32, r33 = block
    ox, oy, oz = offset.x, offset.y, offset.z

    return (-ox * (r11 - 1) - oy * r12 - oz * r13,
            -ox * r21 - oy * (r22 - 1) - oz * r23,
            -ox * r31 - oy * r32 - oz * (r33 - 1))


def orthogonal_axis(vector: Vector3Like) -> tuple[float, float, float]:
    """
    Returns a unit axis orthogonal to ``vector``.

    The axis is taken as ``(y, -x, 0)`` unless that is degenerate (``vector`` along z), in which case
    ``(-z, 0, x)`` is used.

    :param vector: the (non-zero) vector to find an orthogonal axis for
    :return: the unit orthogonal axis
    """

    tolerance = get_tolerance()

    axis = (vector.y, -vector.x, 0.)
    axis_length = math.sqrt(axis[0] * axis[0] + axis[1] * axis[1])

    if axis_length <= tolerance:
        axis = (-vector.z, 0., vector.x)
        axis_length = math.sqrt(axis[0] * axis[0] + axis[2] * axis[2])

    return unit_axis(axis, axis_length)


def unit_axis(axis: tuple[float, float, float], axis_length: float) -> tuple[float, float, float]:
    """
    Scales ``axis`` by the reciprocal of its (precomputed, non-zero) length.
    """

    inverse = 1 / axis_length

    return axis[0] * inverse, axis[1] * inverse, axis[2] * inverse


def compose_rigid(elements_a: F_ARRAY_LIKE, elements_b: F_ARRAY_LIKE) -> tuple[float, ...]:
    r"""
    Composes two 3D rigid transforms given by their 12 stored elements as affine maps.

    .. math::
        (\mathbf{R}_A, \mathbf{t}_A)(\mathbf{R}_B, \mathbf{t}_B) =
        (\mathbf{R}_A\mathbf{R}_B, \mathbf{R}_A\mathbf{t}_B+\mathbf{t}_A)

    :param elements_a: the left hand transform
    :param elements_b: the right hand transform
    :return: the 12 elements of the product
    """

    a11, a12, a13, a14, a21, a22, a23, a24, a31, a32, a33, a34 = elements_a
    b11, b12, b13, b14, b21, b22, b23, b24, b31, b32, b33, b34 = elements_b

    return (a11 * b11 + a12 * b21 + a13 * b31,
            a11 * b12 + a12 * b22 + a13 * b32,
            a11 * b13 + a12 * b23 + a13 * b33,
            a11 * b14 + a12 * b24 + a13 * b34 + a14,
            a21 * b11 + a22 * b21 + a23 * b31,
            a21 * b12 + a22 * b22 + a23 * b32,
            a21 * b13 + a22 * b23 + a23 * b33,
            a21 * b14 + a22 * b24 + a23 * b34 + a24,
            a31 * b11 + a32 * b21 + a33 * b31,
            a31 * b12 + a32 * b22 + a33 * b32,
            a31 * b13 + a32 * b23 + a33 * b33,
            a31 * b14 + a32 * b24 + a33 * b34 + a34)


def invert_rigid(elements: F_ARRAY_LIKE) -> tuple[float, ...]:
    r"""
    Inverts a 3D rigid transform given by its 12 stored elements.

    Because the rotation block is orthonormal its inverse is its transpose, so

    .. math::
        (\mathbf{R}, \mathbf{t})^{-1} = (\mathbf{R}^T, -\mathbf{R}^T\mathbf{t})

    The result is only meaningful if the block really is orthonormal (rotations and reflections).

    :param elements: the transform to invert
    :return: the 12 elements of the inverse
    """

    r11, r12, r13, t1, r21, r22, r23, t2, r31, r32, r33, t3 = elements

    return (r11, r21, r31, -r11 * t1 - r21 * t2 - r31 * t3,
            r12, r22, r32, -r12 * t1 - r22 * t2 - r32 * t3,
            r13, r23, r33, -r13 * t1 - r23 * t2 - r33 * t3)


def invert_rigid_2d(elements: F_ARRAY_LIKE) -> tuple[float, ...]:
    """
    Inverts a 2D rigid transform given by its 6 stored elements (see :func:`invert_rigid`).
    """

    r11, r12, t1, r21, r22, t2 = elements

    return (r11, r21, -r11 * t1 - r21 * t2,
            r12, r22, -r12 * t1 - r22 * t2)
