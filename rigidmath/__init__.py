# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.


"""
rigidmath is a small toolkit for 2D and 3D rigid-body geometry.

It provides mutable vectors (:class:`.Vector2`, :class:`.Vector3`), unit rotation quaternions (:class:`.Quaternion`),
rigid transforms stored in reduced homogeneous form (:class:`.Matrix3`, :class:`.Matrix4`) and a handful of scalar
helpers (:mod:`rigidmath.scalars`).

Every fuzzy comparison in the package (equality, zero and identity checks, degeneracy thresholds) uses a single
process wide numerical tolerance managed by :mod:`rigidmath.tolerance`.  Degenerate input is never fatal; it is
reported with a :class:`.DegenerateInputWarning` and a documented fallback result is returned.
"""

from rigidmath._diagnostics import DegenerateInputWarning
from rigidmath.tolerance import (DEFAULT_NUMERICAL_TOLERANCE, get_tolerance, set_tolerance, reset_tolerance,
                                 tolerance_override)
from rigidmath.scalars import clamp_value, radians_to_degrees, degrees_to_radians, round_value_to_increment
from rigidmath.vectors import Vector2, Vector3
from rigidmath.rotations import Quaternion
from rigidmath.transforms import Matrix3, Matrix4

__all__ = ['DegenerateInputWarning',
           'DEFAULT_NUMERICAL_TOLERANCE', 'get_tolerance', 'set_tolerance', 'reset_tolerance', 'tolerance_override',
           'clamp_value', 'radians_to_degrees', 'degrees_to_radians', 'round_value_to_increment',
           'Vector2', 'Vector3', 'Quaternion', 'Matrix3', 'Matrix4']
