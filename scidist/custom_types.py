# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.


"""Custom type definitions for SciDist.

This module provides type aliases used throughout the SciDist package for type
checking and documentation purposes.

All imports are conditional on TYPE_CHECKING to avoid circular imports while
maintaining proper type hints for development and documentation tools.
"""

from typing import TYPE_CHECKING, Union

# Everything in this file is only imported if TYPE_CHECKING is True.
if TYPE_CHECKING:

    import random

    import numpy as np
    import numpy.typing as npt

    from scidist import random_sources

# Scalar types
Integer = Union[int, "np.integer"]
"""Type alias for integer values.

Accepts both Python's built-in int and NumPy integer types.

:type: Union[int, np.integer]
"""

Float = Union[float, int, "np.floating", "np.integer"]
"""Type alias for real-valued distribution parameters and evaluation points.

Accepts Python and NumPy scalars. Integers are accepted and promoted to double
precision.

:type: Union[float, int, np.floating, np.integer]
"""

# Random sources
RandomSourceType = Union[
    "random_sources.RandomSource", "np.random.Generator", "random.Random"
]
"""Type alias for objects usable as a source of uniform random numbers.

Any object exposing ``random() -> float`` with values in ``[0, 1)`` qualifies.

:type: Union[random_sources.RandomSource, np.random.Generator, random.Random]
"""

# Sample containers
SampleCollection = Union["npt.ArrayLike", "list[float]", "tuple[float, ...]"]
"""Type alias for collections of observed samples passed to estimators.

:type: Union[npt.ArrayLike, list[float], tuple[float, ...]]
"""
