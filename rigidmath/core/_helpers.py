
import copy

import numpy as np

from rigidmath._typing import ARRAY_LIKE, DOUBLE_ARRAY


def _check_array_and_shape(input: ARRAY_LIKE,
                           return_copy: bool = False,
                           size: int | None = None,
                           name: str = 'input') -> DOUBLE_ARRAY:
    in_shape = np.shape(input)

    if not in_shape:
        raise ValueError(f'The {name} must be shaped')

    if len(in_shape) != 1:
        raise ValueError(f'The {name} must be one dimensional')

    if size is not None and in_shape[0] != size:
        raise ValueError(f'The {name} must have length {size}')

    if return_copy:
        input = copy.deepcopy(input)

    # ensure the value is an array and break mutability
    return np.asanyarray(input, dtype=np.float64)


def _check_vector2_array_and_shape(vector: ARRAY_LIKE, return_copy: bool = False) -> DOUBLE_ARRAY:
    return _check_array_and_shape(vector, return_copy, size=2, name='Vector2 array')


def _check_vector3_array_and_shape(vector: ARRAY_LIKE, return_copy: bool = False) -> DOUBLE_ARRAY:
    return _check_array_and_shape(vector, return_copy, size=3, name='Vector3 array')


def _check_quaternion_array_and_shape(quaternion: ARRAY_LIKE, return_copy: bool = False) -> DOUBLE_ARRAY:
    return _check_array_and_shape(quaternion, return_copy, size=4, name='Quaternion array')


def _check_matrix3_array_and_shape(matrix: ARRAY_LIKE, return_copy: bool = False) -> DOUBLE_ARRAY:
    return _check_array_and_shape(np.ravel(matrix), return_copy, size=6, name='Matrix3 elements')


def _check_matrix4_array_and_shape(matrix: ARRAY_LIKE, return_copy: bool = False) -> DOUBLE_ARRAY:
    return _check_array_and_shape(np.ravel(matrix), return_copy, size=12, name='Matrix4 elements')
