# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.


"""
Degenerate input reporting.

Degenerate inputs (normalizing a zero length vector, dividing by a (near) zero scalar, ...) are never fatal in
rigidmath.  Instead a :class:`DegenerateInputWarning` is issued with the captured call stack appended to the message
and the operation falls back to a documented safe result.  Use the standard :mod:`warnings` filters to silence or
escalate them.
"""

import traceback
import warnings


__all__ = ['DegenerateInputWarning', 'stack_trace_as_string', 'warn_degenerate']


class DegenerateInputWarning(UserWarning):
    """
    Issued when an operation receives input it cannot handle in a geometrically meaningful way.
    """


def stack_trace_as_string(skip: int = 1) -> str:
    """
    Returns the current call stack as a newline separated string, most recent call last.

    :param skip: the number of innermost frames to drop (1 drops this function itself)
    :return: the formatted call stack
    """

    stack = traceback.format_stack()

    if skip > 0:
        stack = stack[:-skip]

    return '\n'.join(frame.strip() for frame in stack)


def warn_degenerate(message: str, stacklevel: int = 3):
    """
    Issues a :class:`DegenerateInputWarning` with the call stack appended to ``message``.

    :param message: The description of the degenerate condition
    :param stacklevel: The stack level passed to :func:`warnings.warn`.  The default attributes the warning to the
                       caller of the method that detected the condition.
    """

    warnings.warn(f'{message}, stack trace:\n{stack_trace_as_string(skip=2)}.', DegenerateInputWarning,
                  stacklevel=stacklevel)
