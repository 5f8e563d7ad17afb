# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Custom exception classes for the SciDist package.

This module defines the small hierarchy of exceptions raised by SciDist. All
custom exceptions inherit from the base SciDistError class so that callers can
handle every package-specific failure with a single except clause. Each concrete
exception also derives from the closest built-in exception so that generic
handlers (``except ValueError``) keep working.

Note that IEEE-754 special values are not errors in SciDist: undefined statistics
of degenerate distributions are reported as ``nan`` or ``inf`` rather than raised.
"""


class SciDistError(Exception):
    """Base class for all exceptions in the SciDist package.

    :param message: Error message describing the exception
    :type message: str

    Example:
        >>> try:
        ...     Gamma(-1.0, 1.0)
        ... except SciDistError as e:
        ...     print(f"SciDist error occurred: {e}")
    """


class InvalidParameterError(SciDistError, ValueError):
    """Raised when distribution parameters violate the domain of the family.

    Only raised while parameter checking is enabled. The distribution is left
    untouched when this is raised: the previously valid parameter pair is kept.

    :param message: Error message naming the distribution and offending values
    :type message: str
    """


class NotSupportedError(SciDistError, NotImplementedError):
    """Raised when a statistic has no closed form implemented for a family.

    This is a permanent capability gap (e.g., the median of the Gamma and Beta
    distributions), not a transient condition, and should not be retried.

    :param message: Error message naming the unsupported statistic
    :type message: str
    """
