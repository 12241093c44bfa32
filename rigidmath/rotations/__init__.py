r"""
This package provides the :class:`.Quaternion` class, the unit quaternion used to express pure rotations in rigidmath.

Quaternions are stored scalar last, :math:`[q_x, q_y, q_z, q_w]`, and are composed with the Hamilton product.  They
are applied to vectors through :meth:`.Vector3.apply_quaternion`.
"""

import rigidmath.rotations.quaternion

from rigidmath.rotations.quaternion import Quaternion

__all__ = ['Quaternion']
