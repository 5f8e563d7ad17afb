# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.


"""Sources of uniform random numbers consumed by SciDist samplers.

Every sampler in SciDist draws its entropy exclusively through the
:py:class:`RandomSource` capability: an object with a ``random()`` method that
returns a uniform double in ``[0, 1)``. NumPy's ``Generator`` and the standard
library's ``random.Random`` both satisfy it as-is; :py:class:`TorchRandomSource`
adapts a PyTorch generator.

Distributions reference their random source without owning it, except for the
default source created by :py:func:`default_random_source` when none is given.

.. warning::
    Random sources are shared mutable state and are not locked. Drawing from one
    source concurrently in several threads (including through several
    distributions bound to the same source) is undefined unless the caller
    synchronizes access to it.
"""

from __future__ import annotations

import warnings

from typing import Optional, Protocol, runtime_checkable, TYPE_CHECKING

import numpy as np
import torch

import scidist

from scidist.defaults import DEFAULT_TORCH_DTYPE

if TYPE_CHECKING:
    from scidist import custom_types


@runtime_checkable
class RandomSource(Protocol):
    """Capability interface for uniform random number generation.

    Any object providing this method can be bound to a distribution or passed
    to the class-level ``sample``/``samples`` functions.
    """

    def random(self) -> float:
        """Return the next uniform double in ``[0, 1)``."""


def default_random_source() -> np.random.Generator:
    """Create a fresh, independent NumPy generator.

    :returns: Generator spawned from the global :py:data:`scidist.RNG`
    :rtype: np.random.Generator

    Spawned generators draw from statistically independent streams, and the
    sequence of spawned generators is reproducible after
    :py:func:`scidist.manual_seed`.
    """
    return scidist.RNG.spawn(1)[0]


def resolve_random_source(
    random_source: Optional["custom_types.RandomSourceType"],
) -> "custom_types.RandomSourceType":
    """Return a usable random source, creating a default one if needed.

    :param random_source: Candidate random source or None
    :type random_source: Optional[custom_types.RandomSourceType]

    :returns: The given random source, or a new default source if None was given
    :rtype: custom_types.RandomSourceType

    :raises TypeError: If the candidate does not provide a ``random()`` method
    """
    if random_source is None:
        return default_random_source()

    if not isinstance(random_source, RandomSource):
        raise TypeError(
            "Random sources must provide a `random()` method returning a uniform "
            f"double in [0, 1); got {type(random_source).__name__}."
        )

    return random_source


class TorchRandomSource:
    """Random source drawing uniform doubles from a PyTorch generator.

    :param seed: Seed for a newly created generator. Ignored if ``generator`` is
        given. If None, the new generator is seeded from system entropy.
    :type seed: Optional[custom_types.Integer]
    :param generator: Existing PyTorch generator to draw from. Defaults to None,
        in which case a new CPU generator is created.
    :type generator: Optional[torch.Generator]

    Example:
        >>> source = TorchRandomSource(seed=1024)
        >>> gamma = Gamma(2.0, 1.0, random_source=source)
        >>> gamma.sample()  # doctest: +SKIP
        0.8261...

    Note:
        Draws are taken one scalar at a time. With a CUDA generator every draw
        synchronizes the device, so a warning is issued on construction.
    """

    def __init__(
        self,
        seed: Optional["custom_types.Integer"] = None,
        generator: Optional[torch.Generator] = None,
    ):
        # Build the generator if one was not provided
        if generator is None:
            generator = torch.Generator()
            if seed is None:
                generator.seed()
            else:
                generator.manual_seed(int(seed))

        # Scalar draws from accelerator generators are slow
        if generator.device.type != "cpu":
            warnings.warn(
                f"TorchRandomSource bound to a '{generator.device.type}' generator; "
                "every draw will synchronize the device."
            )

        self.generator = generator

    def random(self) -> float:
        """Return the next uniform double in ``[0, 1)``.

        :returns: Uniform random number
        :rtype: float
        """
        return torch.rand(
            (),
            generator=self.generator,
            dtype=DEFAULT_TORCH_DTYPE,
            device=self.generator.device,
        ).item()

    def __repr__(self) -> str:
        return f"TorchRandomSource(device={self.generator.device.type!r})"
