"""
This package provides the mutable :class:`.Vector2` and :class:`.Vector3` classes.

Vectors are the positions and directions that the transforms in :mod:`rigidmath.transforms` and the rotations in
:mod:`rigidmath.rotations` act on.  Both classes update themselves in place and return ``self`` from most methods.
"""

import rigidmath.vectors.vector2
import rigidmath.vectors.vector3

from rigidmath.vectors.vector2 import Vector2
from rigidmath.vectors.vector3 import Vector3

__all__ = ['Vector2', 'Vector3']
