# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Variate generation for the SciDist distribution families.

This module holds the sampling algorithms shared by the distribution classes.
Every function here is *unchecked*: parameters are assumed to have been
validated once at the public boundary, and no per-draw validation is performed.
All entropy is pulled one uniform double at a time from a random source (see
:py:mod:`scidist.random_sources`), so for a given source state and parameters
the produced values are fully determined.

Algorithms:
    - **Normal**: Box-Muller transform, two uniforms per variate.
    - **Gamma**: "A Simple Method for Generating Gamma Variables", Marsaglia &
      Tsang, ACM Transactions on Mathematical Software 26(3), 2000, pp. 363-372,
      with the ``U^(1/shape)`` boost for shapes below one.
    - **Beta**: ``X / (X + Y)`` for independent ``X ~ Gamma(a, 1)`` and
      ``Y ~ Gamma(b, 1)``, evaluated from ``log X`` and ``log Y``.
    - **LogNormal**: ``exp(Z)`` for ``Z ~ Normal(mu, sigma)``.

The Gamma rejection loop has no iteration bound. Its acceptance probability
exceeds 0.95 for every shape, so the expected number of iterations is small and
independent of the shape, but termination is only guaranteed with probability
one. Callers needing a deadline must enforce it externally.
"""

from __future__ import annotations

import math

from typing import Iterator, TYPE_CHECKING

import numpy as np

from scidist import utils
from scidist.distributions import degeneracy

if TYPE_CHECKING:
    from scidist import custom_types

SQUEEZE_COEFFICIENT: float = 0.0331
"""Coefficient of the ``1 - c x^4`` squeeze test in the Marsaglia-Tsang sampler.

The squeeze accepts most candidates without evaluating any logarithm.

:type: float
"""


def standard_normal_unchecked(random_source: "custom_types.RandomSourceType") -> float:
    """Draw a standard normal variate with the Box-Muller transform.

    :param random_source: Source of uniform random numbers
    :type random_source: custom_types.RandomSourceType

    :returns: A draw from Normal(0, 1)
    :rtype: float

    Consumes exactly two uniforms. The first is reflected to ``(0, 1]`` so that
    its logarithm is always finite.
    """
    radius = math.sqrt(-2.0 * math.log(1.0 - random_source.random()))
    return radius * math.cos(2.0 * math.pi * random_source.random())


def normal_sample_unchecked(
    random_source: "custom_types.RandomSourceType",
    mu: "custom_types.Float",
    sigma: "custom_types.Float",
) -> float:
    """Draw a Normal(mu, sigma) variate.

    :param random_source: Source of uniform random numbers
    :type random_source: custom_types.RandomSourceType
    :param mu: Location
    :type mu: custom_types.Float
    :param sigma: Scale
    :type sigma: custom_types.Float

    :returns: A normal variate
    :rtype: float
    """
    return float(mu + sigma * standard_normal_unchecked(random_source))


def normal_samples_unchecked(
    random_source: "custom_types.RandomSourceType",
    mu: "custom_types.Float",
    sigma: "custom_types.Float",
) -> Iterator[float]:
    """Lazily generate an infinite sequence of Normal(mu, sigma) variates."""
    while True:
        yield normal_sample_unchecked(random_source, mu, sigma)


@utils.ieee754
def gamma_sample_unchecked(
    random_source: "custom_types.RandomSourceType",
    shape: "custom_types.Float",
    rate: "custom_types.Float",
) -> float:
    """Draw a Gamma(shape, rate) variate with the Marsaglia-Tsang method.

    :param random_source: Source of uniform random numbers
    :type random_source: custom_types.RandomSourceType
    :param shape: Shape of the Gamma distribution. Must be non-negative.
    :type shape: custom_types.Float
    :param rate: Rate of the Gamma distribution. Must be non-negative.
    :type rate: custom_types.Float

    :returns: A Gamma variate
    :rtype: float

    An infinite rate is a point mass at ``shape`` and returns immediately without
    consuming any randomness. Otherwise, shapes below one are sampled as
    ``Gamma(shape + 1) * U^(1/shape)``, which takes one extra uniform up front.
    Each rejection-loop iteration consumes one normal variate (redrawn while the
    cubed term would be non-positive) and one uniform.

    Arithmetic is IEEE-754: a zero shape yields ``0`` (the boost factor
    ``U^inf`` vanishes) and zero shape with zero rate yields ``nan``.
    """
    if np.isposinf(rate):
        return shape

    shape, rate = utils.as_float64(shape, rate)

    # Boost shapes below one
    a = shape
    alphafix = 1.0
    if shape < 1.0:
        a = shape + 1.0
        alphafix = np.power(random_source.random(), 1.0 / shape)

    d = a - 1.0 / 3.0
    c = 1.0 / np.sqrt(9.0 * d)
    while True:
        # Candidate from the normal envelope; v must be positive to be cubed
        x = standard_normal_unchecked(random_source)
        v = 1.0 + c * x
        while v <= 0.0:
            x = standard_normal_unchecked(random_source)
            v = 1.0 + c * x

        v = v * v * v
        u = random_source.random()
        x2 = x * x

        # Squeeze, then the exact log-domain test
        if u < 1.0 - SQUEEZE_COEFFICIENT * x2 * x2:
            return alphafix * d * v / rate
        if np.log(u) < 0.5 * x2 + d * (1.0 - v + np.log(v)):
            return alphafix * d * v / rate


def gamma_samples_unchecked(
    random_source: "custom_types.RandomSourceType",
    shape: "custom_types.Float",
    rate: "custom_types.Float",
) -> Iterator[float]:
    """Lazily generate an infinite sequence of Gamma(shape, rate) variates."""
    while True:
        yield gamma_sample_unchecked(random_source, shape, rate)


@utils.ieee754
def log_gamma_sample_unchecked(
    random_source: "custom_types.RandomSourceType",
    shape: "custom_types.Float",
) -> float:
    """Draw the logarithm of a Gamma(shape, 1) variate.

    :param random_source: Source of uniform random numbers
    :type random_source: custom_types.RandomSourceType
    :param shape: Shape of the Gamma distribution. Must be positive.
    :type shape: custom_types.Float

    :returns: The logarithm of a Gamma variate
    :rtype: float

    Consumes the same uniforms in the same order as
    :py:func:`gamma_sample_unchecked` with a unit rate. For shapes below one the
    ``U^(1/shape)`` boost is applied as ``log(U) / shape``, which stays finite
    long after the boost itself has underflowed to zero.
    """
    shape = np.float64(shape)
    if shape < 1.0:
        log_boost = np.log(random_source.random()) / shape
        return log_boost + np.log(
            gamma_sample_unchecked(random_source, shape + 1.0, 1.0)
        )
    return np.log(gamma_sample_unchecked(random_source, shape, 1.0))


@utils.ieee754
def beta_sample_unchecked(
    random_source: "custom_types.RandomSourceType",
    a: "custom_types.Float",
    b: "custom_types.Float",
) -> float:
    """Draw a Beta(a, b) variate.

    :param random_source: Source of uniform random numbers
    :type random_source: custom_types.RandomSourceType
    :param a: First shape parameter. Must be non-negative.
    :type a: custom_types.Float
    :param b: Second shape parameter. Must be non-negative.
    :type b: custom_types.Float

    :returns: A Beta variate in ``[0, 1]``
    :rtype: float

    Degenerate parameters are resolved through
    :py:func:`~scidist.distributions.degeneracy.classify_beta`: point masses
    return their atom without consuming randomness and the ``(0, 0)`` Bernoulli
    case consumes one uniform. Regular parameters take two independent Gamma
    draws, the first for ``a`` and then one for ``b``, and combine them as
    ``1 / (1 + exp(log y - log x))``. Working with logarithms keeps small shapes
    from turning ``x / (x + y)`` into ``0 / 0``. If both logarithms still
    overflow to ``-inf`` (shapes near the smallest double), one more uniform
    picks 1 with probability ``a / (a + b)`` and 0 otherwise.
    """
    case = degeneracy.classify_beta(a, b)
    if not case.is_regular:
        return case.sample(random_source)

    log_x = log_gamma_sample_unchecked(random_source, a)
    log_y = log_gamma_sample_unchecked(random_source, b)
    if np.isneginf(log_x) and np.isneginf(log_y):
        a, b = utils.as_float64(a, b)
        return 1.0 if random_source.random() < a / (a + b) else 0.0

    return 1.0 / (1.0 + np.exp(np.float64(log_y) - log_x))


def beta_samples_unchecked(
    random_source: "custom_types.RandomSourceType",
    a: "custom_types.Float",
    b: "custom_types.Float",
) -> Iterator[float]:
    """Lazily generate an infinite sequence of Beta(a, b) variates."""
    while True:
        yield beta_sample_unchecked(random_source, a, b)


@utils.ieee754
def exponentiate(value: "custom_types.Float") -> float:
    return np.exp(value)


def lognormal_sample_unchecked(
    random_source: "custom_types.RandomSourceType",
    mu: "custom_types.Float",
    sigma: "custom_types.Float",
) -> float:
    """Draw a LogNormal(mu, sigma) variate as the exponential of a normal variate.

    :param random_source: Source of uniform random numbers
    :type random_source: custom_types.RandomSourceType
    :param mu: Mean of the logarithm of the variable
    :type mu: custom_types.Float
    :param sigma: Standard deviation of the logarithm of the variable
    :type sigma: custom_types.Float

    :returns: A positive LogNormal variate
    :rtype: float
    """
    return exponentiate(normal_sample_unchecked(random_source, mu, sigma))


def lognormal_samples_unchecked(
    random_source: "custom_types.RandomSourceType",
    mu: "custom_types.Float",
    sigma: "custom_types.Float",
) -> Iterator[float]:
    """Lazily generate LogNormal(mu, sigma) variates.

    The normal sequence is produced lazily and transformed element-wise.
    """
    return map(exponentiate, normal_samples_unchecked(random_source, mu, sigma))
