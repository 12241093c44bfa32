# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.


"""
Scalar helpers: clamping, angle unit conversion, and rounding to an increment.
"""

import math

import numpy as np


__all__ = ['clamp_value', 'radians_to_degrees', 'degrees_to_radians', 'round_value_to_increment']


def clamp_value(value: float, min_value: float, max_value: float) -> float:
    """
    Clamps a value to the range [min_value, max_value].

    :param value: The value to clamp
    :param min_value: The minimum value
    :param max_value: The maximum value
    :return: The clamped value
    """

    return max(min(value, max_value), min_value)


def radians_to_degrees(value: float) -> float:
    """
    Converts a value in radians to degrees.
    """

    return value * 180 / math.pi


def degrees_to_radians(value: float) -> float:
    """
    Converts a value in degrees to radians.
    """

    return value / 180 * math.pi


def round_value_to_increment(value: float, coarse_step: float) -> float:
    """
    Rounds a value to the nearest multiple of ``coarse_step``.

    Halves are rounded up (towards positive infinity).  The result is trimmed to the number of decimals used to write
    ``coarse_step`` so that, for instance, rounding 3.4 to a step of 0.3 gives 3.3 rather than 3.3000000000000003.

    If ``coarse_step`` is 0 then ``value`` is returned unchanged.

    :param value: The value to round
    :param coarse_step: The increment to round to
    :return: The rounded value
    :raises ValueError: If ``coarse_step`` is negative
    """

    if coarse_step == 0:
        return value

    if coarse_step < 0:
        raise ValueError(f'Invalid coarse step: {coarse_step}.')

    rounded = math.floor(value / coarse_step + 0.5) * coarse_step

    # the positional form avoids exponent notation for small steps (1e-05 -> 0.00001)
    fraction = np.format_float_positional(np.float64(coarse_step), trim='-').partition('.')[2]

    return round(rounded, len(fraction))
