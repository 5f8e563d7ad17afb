# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.


"""Utility functions and classes for the SciDist package.

This module provides the small amount of infrastructure shared by the
distribution implementations, including:

    - A decorator that evaluates scalar arithmetic under IEEE-754 semantics
    - A descriptor giving one method name distinct class-level and instance-level
      behavior

Users will not typically need to interact with this module directly--it is designed
to be used internally by SciDist.
"""

from __future__ import annotations

import functools

from typing import Callable, Optional

import numpy as np


def ieee754(function: Callable) -> Callable:
    """Evaluate a scalar-valued function with IEEE-754 floating point semantics.

    :param function: Function returning a real scalar
    :type function: Callable

    :returns: Wrapped function returning a Python float
    :rtype: Callable

    Python raises on ``1.0 / 0.0`` while NumPy scalars produce ``inf``. Degenerate
    distributions rely on the latter: ``0/0`` must become ``nan`` and ``log(0)``
    must become ``-inf`` without raising or emitting ``RuntimeWarning``. The wrapped
    function therefore runs with all NumPy floating point errors ignored, and its
    result is converted to a built-in float.

    Example:
        >>> @ieee754
        ... def ratio(a, b):
        ...     return np.float64(a) / b
        >>> ratio(1.0, 0.0)
        inf
    """

    @functools.wraps(function)
    def inner(*args, **kwargs):
        with np.errstate(all="ignore"):
            return float(function(*args, **kwargs))

    return inner


def as_float64(*values) -> tuple[np.float64, ...]:
    """Convert scalars to NumPy doubles.

    :param values: Real scalars to convert
    :returns: The values as ``np.float64``
    :rtype: tuple[np.float64, ...]

    Arithmetic on ``np.float64`` follows IEEE-754 (division by zero yields an
    infinity or ``nan``) even when mixed with built-in floats.
    """
    return tuple(np.float64(value) for value in values)


class ClassOrInstanceMethod:
    """Descriptor used as a decorator to enable dual class/instance method behavior.

    This descriptor allows a single method name to behave differently when
    accessed from the class versus from an instance. It is used for the
    ``sample`` and ``samples`` functions of the distributions: accessed from the
    class they take a random source and explicit parameters (and validate them);
    accessed from an instance they take no arguments and use the instance's
    bound random source and already-validated parameters.

    :param func: Function used when accessed from the class. Receives the owning
        class as its first argument.
    :type func: Callable

    The instance-level behavior is registered with :py:meth:`instancemethod`, in
    the same way a property setter is registered:

    Example:
        >>> class Example:
        ...     @ClassOrInstanceMethod
        ...     def describe(cls, value):
        ...         return f"class {value}"
        ...
        ...     @describe.instancemethod
        ...     def describe(self):
        ...         return "instance"
        >>> Example.describe(1)
        'class 1'
        >>> Example().describe()
        'instance'
    """

    def __init__(self, func: Callable, instance_func: Optional[Callable] = None):
        self.func = func
        self.instance_func = instance_func
        functools.update_wrapper(self, func)

    def instancemethod(self, instance_func: Callable) -> "ClassOrInstanceMethod":
        """Register the function used when accessed from an instance.

        :param instance_func: Function receiving the instance as its only argument
        :type instance_func: Callable

        :returns: A new descriptor carrying both behaviors
        :rtype: ClassOrInstanceMethod
        """
        return type(self)(self.func, instance_func)

    def __get__(self, instance, owner):
        """Return the appropriate bound callable based on access context.

        :param instance: Instance object if accessed through an instance, None
            if accessed through the class
        :param owner: Class that owns the descriptor

        :returns: Callable bound to either the class or the instance
        :rtype: Callable

        :raises NotImplementedError: If accessed from an instance and no instance
            behavior was registered
        """
        # Accessed from the class
        if instance is None:
            return functools.partial(self.func, owner)

        # Accessed from an instance
        if self.instance_func is None:
            raise NotImplementedError(
                f"{self.func.__name__} has no instance-level implementation."
            )
        return functools.partial(self.instance_func, instance)
