# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.


"""Default configuration values for SciDist package components.

This module centralizes default values used across the SciDist package. They
are threaded explicitly into distribution constructors and sampling calls as
keyword defaults rather than read from mutable global state, so the behavior of
any single call can always be determined from its arguments.

Default values cannot be programmatically altered. This documentation serves as a
reference for users and developers to understand the standard configuration used
by SciDist.
"""

import torch

# Parameter validation defaults
DEFAULT_CHECK_PARAMETERS: bool = True
"""Default setting for distribution parameter validation.

When True, constructors, parameter setters, and the class-level ``sample`` and
``samples`` functions raise
:py:class:`~scidist.exceptions.InvalidParameterError` for parameters outside
the domain of the distribution. When False, invalid parameters are stored as
given and propagate into ``nan``/``inf`` results.

:type: bool
"""

# Random source defaults
DEFAULT_TORCH_DTYPE: torch.dtype = torch.float64
"""Floating point type of uniform draws taken from PyTorch generators.

Double precision keeps PyTorch-backed draws on the same grid as NumPy's
``Generator.random``.

:type: torch.dtype
"""
