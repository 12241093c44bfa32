r"""
This package provides the rigid transform classes :class:`.Matrix3` (2D) and :class:`.Matrix4` (3D).

Both store only the rows of the homogeneous matrix that can vary for a rigid transform and cache whether they are the
identity so that composing with or applying an identity transform costs nothing.  Vectors are transformed through
:meth:`.Vector2.apply_matrix3`, :meth:`.Vector3.apply_matrix4` and :meth:`.Vector3.apply_matrix4_rotation_component`.
"""

import rigidmath.transforms.matrix3
import rigidmath.transforms.matrix4

from rigidmath.transforms.matrix3 import Matrix3
from rigidmath.transforms.matrix4 import Matrix4

__all__ = ['Matrix3', 'Matrix4']
