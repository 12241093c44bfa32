# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.


from typing import Union, Protocol, runtime_checkable, Sequence

import numpy as np
import numpy.typing as npt

DOUBLE_ARRAY = npt.NDArray[np.float64]
ARRAY_LIKE = npt.ArrayLike

NONENUM = Union[float, None]

F_ARRAY_LIKE = Sequence[float] | DOUBLE_ARRAY


@runtime_checkable
class Vector2Like(Protocol):
    """
    Anything exposing readable ``x`` and ``y`` components, for instance a THREE.js style vector.
    """

    @property
    def x(self) -> float: ...

    @property
    def y(self) -> float: ...


@runtime_checkable
class Vector3Like(Protocol):
    """
    Anything exposing readable ``x``, ``y`` and ``z`` components.
    """

    @property
    def x(self) -> float: ...

    @property
    def y(self) -> float: ...

    @property
    def z(self) -> float: ...


@runtime_checkable
class QuaternionLike(Protocol):
    """
    Anything exposing readable ``x``, ``y``, ``z`` (vector part) and ``w`` (scalar part) components.
    """

    @property
    def x(self) -> float: ...

    @property
    def y(self) -> float: ...

    @property
    def z(self) -> float: ...

    @property
    def w(self) -> float: ...


class Matrix3Like(Protocol):

    @property
    def elements(self) -> F_ARRAY_LIKE: ...

    @property
    def is_identity(self) -> bool: ...


class Matrix4Like(Protocol):

    @property
    def elements(self) -> F_ARRAY_LIKE: ...

    @property
    def is_identity(self) -> bool: ...
