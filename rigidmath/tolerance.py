# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.


"""
This module holds the process wide numerical tolerance used by every fuzzy comparison in rigidmath.

Every equality check, zero check, identity check and degeneracy threshold in the package reads the tolerance through
:func:`get_tolerance` at the moment the check is performed, so changing the tolerance affects all existing objects
immediately.  The default is :data:`DEFAULT_NUMERICAL_TOLERANCE` (``1e-15``).

A difference is considered negligible when ``abs(difference) <= tolerance``.  No validation is performed on the value
given to :func:`set_tolerance`; a negative tolerance is accepted but makes every fuzzy comparison fail.

For temporary changes (for instance while comparing noisy data) use the :func:`tolerance_override` context manager::

    >>> from rigidmath import Vector3, tolerance_override
    >>> with tolerance_override(0.2):
    ...     Vector3(0, 2, 3).equals(Vector3(0, 2.1, 3))
    True
"""

import logging
import threading

from contextlib import contextmanager
from typing import Iterator


__all__ = ['DEFAULT_NUMERICAL_TOLERANCE', 'get_tolerance', 'set_tolerance', 'reset_tolerance', 'tolerance_override']


_LOGGER: logging.Logger = logging.getLogger(__name__)
"""
This is the logging interface for reporting changes to the numerical tolerance.
"""

DEFAULT_NUMERICAL_TOLERANCE: float = 1e-15
"""
The default numerical tolerance for all mathematical operations and equality checks.
"""

_numerical_tolerance: float = DEFAULT_NUMERICAL_TOLERANCE

_tolerance_lock = threading.Lock()


def get_tolerance() -> float:
    """
    Returns the current global numerical tolerance.

    :return: the tolerance used for all equality, zero, and identity checks
    """

    return _numerical_tolerance


def set_tolerance(value: float) -> None:
    """
    Sets the global numerical tolerance for all mathematical operations and equality checks.

    :param value: The new tolerance.
    """

    global _numerical_tolerance

    with _tolerance_lock:
        _LOGGER.debug(f'Changing numerical tolerance from {_numerical_tolerance} to {value}')
        _numerical_tolerance = float(value)


def reset_tolerance() -> None:
    """
    Restores the global numerical tolerance to :data:`DEFAULT_NUMERICAL_TOLERANCE`.
    """

    set_tolerance(DEFAULT_NUMERICAL_TOLERANCE)


@contextmanager
def tolerance_override(value: float) -> Iterator[float]:
    """
    Temporarily sets the global numerical tolerance, restoring the previous value when the block exits.

    :param value: The tolerance to use inside the block
    :return: a context manager yielding the tolerance in effect inside the block
    """

    previous = get_tolerance()

    set_tolerance(value)

    try:
        yield get_tolerance()
    finally:
        set_tolerance(previous)
