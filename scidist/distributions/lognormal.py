# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""The LogNormal distribution and its moment-based constructors."""

from __future__ import annotations

import itertools
import math

from typing import Iterator, Optional, TYPE_CHECKING

import numpy as np

from scipy import special

from scidist import defaults, utils
from scidist.distributions import degeneracy, sampling
from scidist.distributions.abstract_distribution import ContinuousDistribution
from scidist.exceptions import InvalidParameterError

if TYPE_CHECKING:
    from scidist import custom_types

LOG_SQRT_2PI: float = 0.5 * math.log(2.0 * math.pi)
SQRT_2PI: float = math.sqrt(2.0 * math.pi)


class LogNormal(ContinuousDistribution):
    r"""LogNormal distribution: the law of ``exp(Z)`` for ``Z ~ Normal(mu, sigma)``.

    :param mu: Mean of the logarithm of the variable. Must be finite.
    :type mu: custom_types.Float
    :param sigma: Standard deviation of the logarithm of the variable. Must be
        finite and non-negative.
    :type sigma: custom_types.Float
    :param random_source: Source of uniform random numbers. Defaults to None, in
        which case a default source is created.
    :type random_source: Optional[custom_types.RandomSourceType]
    :param check_parameters: Whether to validate parameters. Defaults to
        :py:data:`~scidist.defaults.DEFAULT_CHECK_PARAMETERS`.
    :type check_parameters: bool

    Mathematical Definition:
        .. math::
            \begin{align*}
            P(x | \mu, \sigma) &= \frac{1}{x\sigma\sqrt{2\pi}}
            e^{-\frac{(\ln x - \mu)^2}{2\sigma^2}} \text{ for } x > 0
            \end{align*}

    Properties:

        .. list-table::

            * - Support
              - :math:`[0, \infty)`
            * - Mean
              - :math:`e^{\mu + \sigma^2 / 2}`
            * - Median
              - :math:`e^{\mu}`
            * - Mode
              - :math:`e^{\mu - \sigma^2}`
            * - Variance
              - :math:`(e^{\sigma^2} - 1) e^{2\mu + \sigma^2}`

    Degenerate Parameters:
        A zero ``sigma`` is a point mass at ``exp(mu)``.

    Example:
        >>> dist = LogNormal.with_mean_variance(2.0, 0.5)
        >>> round(dist.mean, 12), round(dist.variance, 12)
        (2.0, 0.5)
    """

    PARAMETER_NAMES = ("mu", "sigma")

    def __init__(
        self,
        mu: "custom_types.Float",
        sigma: "custom_types.Float",
        random_source: Optional["custom_types.RandomSourceType"] = None,
        check_parameters: bool = defaults.DEFAULT_CHECK_PARAMETERS,
    ):
        super().__init__(
            mu, sigma, random_source=random_source, check_parameters=check_parameters
        )

    @classmethod
    def with_mean_variance(
        cls,
        mean: "custom_types.Float",
        variance: "custom_types.Float",
        random_source: Optional["custom_types.RandomSourceType"] = None,
        check_parameters: bool = defaults.DEFAULT_CHECK_PARAMETERS,
    ) -> "LogNormal":
        """Build the LogNormal distribution with the given mean and variance.

        :param mean: Mean of the distribution. Must be positive.
        :type mean: custom_types.Float
        :param variance: Variance of the distribution. Must be non-negative.
        :type variance: custom_types.Float

        :returns: Distribution with ``sigma^2 = ln(1 + variance / mean^2)`` and
            ``mu = ln(mean) - sigma^2 / 2``
        :rtype: LogNormal
        """
        with np.errstate(all="ignore"):
            mean, variance = utils.as_float64(mean, variance)
            sigma2 = np.log(variance / (mean * mean) + 1.0)
            mu = np.log(mean) - sigma2 / 2.0
            sigma = np.sqrt(sigma2)

        return cls(mu, sigma, random_source=random_source, check_parameters=check_parameters)

    @classmethod
    def estimate(
        cls,
        samples: "custom_types.SampleCollection",
        random_source: Optional["custom_types.RandomSourceType"] = None,
        check_parameters: bool = defaults.DEFAULT_CHECK_PARAMETERS,
    ) -> "LogNormal":
        """Estimate a LogNormal distribution from samples by the method of moments.

        :param samples: Observed, strictly positive samples. At least two are
            required.
        :type samples: custom_types.SampleCollection

        :returns: Distribution whose ``mu`` and ``sigma`` are the mean and the
            unbiased standard deviation of the logarithms of the samples
        :rtype: LogNormal

        :raises ValueError: If fewer than two samples are given
        :raises InvalidParameterError: If any sample is not strictly positive
        """
        samples = np.asarray(samples, dtype=float).ravel()
        if samples.size < 2:
            raise ValueError(
                f"At least two samples are needed to estimate sigma, got {samples.size}."
            )
        if not np.all(samples > 0.0):
            raise InvalidParameterError(
                "LogNormal estimation requires strictly positive samples."
            )

        log_samples = np.log(samples)
        return cls(
            log_samples.mean(),
            log_samples.std(ddof=1),
            random_source=random_source,
            check_parameters=check_parameters,
        )

    @staticmethod
    def is_valid_parameter_set(
        mu: "custom_types.Float", sigma: "custom_types.Float"
    ) -> bool:
        """``mu`` must be finite and ``sigma`` finite and non-negative."""
        return bool(np.isfinite(mu) and np.isfinite(sigma) and sigma >= 0.0)

    @property
    def mu(self) -> float:
        """Mean of the logarithm of the variable."""
        return float(self._parameters[0])

    @mu.setter
    def mu(self, value: "custom_types.Float"):
        self._replace_parameter("mu", value)

    @property
    def sigma(self) -> float:
        """Standard deviation of the logarithm of the variable."""
        return float(self._parameters[1])

    @sigma.setter
    def sigma(self, value: "custom_types.Float"):
        self._replace_parameter("sigma", value)

    @property
    def case(self) -> degeneracy.ParameterCase:
        with np.errstate(over="ignore"):
            return degeneracy.classify_lognormal(*self._parameters)

    @property
    @utils.ieee754
    def mean(self) -> float:
        mu, sigma = self._parameters
        return np.exp(mu + sigma * sigma / 2.0)

    @property
    @utils.ieee754
    def variance(self) -> float:
        mu, sigma = self._parameters
        sigma2 = sigma * sigma
        return np.expm1(sigma2) * np.exp(mu + mu + sigma2)

    @property
    @utils.ieee754
    def entropy(self) -> float:
        mu, sigma = self._parameters
        return 0.5 + np.log(sigma) + mu + LOG_SQRT_2PI

    @property
    @utils.ieee754
    def skewness(self) -> float:
        _, sigma = self._parameters
        expsigma2 = np.exp(sigma * sigma)
        return (expsigma2 + 2.0) * np.sqrt(expsigma2 - 1.0)

    @property
    @utils.ieee754
    def mode(self) -> float:
        mu, sigma = self._parameters
        return np.exp(mu - sigma * sigma)

    @property
    @utils.ieee754
    def median(self) -> float:
        return np.exp(self._parameters[0])

    def _density(self, x: np.float64) -> float:
        mu, sigma = self._parameters
        if x == 0.0:
            return 0.0
        z = (np.log(x) - mu) / sigma
        return np.exp(-0.5 * z * z) / (x * sigma * SQRT_2PI)

    def _log_density(self, x: np.float64) -> float:
        mu, sigma = self._parameters
        if x == 0.0:
            return -math.inf
        z = (np.log(x) - mu) / sigma
        return -0.5 * z * z - np.log(x * sigma) - LOG_SQRT_2PI

    def _cumulative_distribution(self, x: np.float64) -> float:
        mu, sigma = self._parameters
        if x == 0.0:
            return 0.0
        return 0.5 * (1.0 + special.erf((np.log(x) - mu) / (sigma * math.sqrt(2.0))))

    _sample_unchecked = staticmethod(sampling.lognormal_sample_unchecked)
    _samples_unchecked = staticmethod(sampling.lognormal_samples_unchecked)

    def _iter_samples(self) -> Iterator[float]:
        # Exponentiate a lazy normal sequence that tracks the current state
        normals = (
            sampling.normal_sample_unchecked(self._random_source, *self._parameters)
            for _ in itertools.count()
        )
        return map(sampling.exponentiate, normals)
