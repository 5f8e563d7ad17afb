# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""The Gamma distribution."""

from __future__ import annotations

import math

from typing import Optional, TYPE_CHECKING

import numpy as np

from scipy import special

from scidist import defaults, utils
from scidist.distributions import degeneracy, sampling
from scidist.distributions.abstract_distribution import ContinuousDistribution

if TYPE_CHECKING:
    from scidist import custom_types


class Gamma(ContinuousDistribution):
    r"""Gamma distribution with shape and rate (inverse scale) parameters.

    :param shape: Shape parameter (:math:`k`, :math:`\alpha`). Must be non-negative.
    :type shape: custom_types.Float
    :param rate: Rate parameter (:math:`\beta`). Must be non-negative.
    :type rate: custom_types.Float
    :param random_source: Source of uniform random numbers. Defaults to None, in
        which case a default source is created.
    :type random_source: Optional[custom_types.RandomSourceType]
    :param check_parameters: Whether to validate parameters. Defaults to
        :py:data:`~scidist.defaults.DEFAULT_CHECK_PARAMETERS`.
    :type check_parameters: bool

    Mathematical Definition:
        .. math::
            \begin{align*}
            P(x | \alpha, \beta) &= \frac{\beta^\alpha}{\Gamma(\alpha)} *
            x^{\alpha - 1} e^{-\beta x} \text{ for } x \geq 0 \\
            \text{where } \Gamma(z) &= \int_0^\infty t^{z-1} e^{-t} dt
            \end{align*}

    Properties:

        .. list-table::

            * - Support
              - :math:`[0, \infty)`
            * - Mean
              - :math:`\frac{\alpha}{\beta}`
            * - Mode
              - :math:`\frac{\alpha - 1}{\beta}`
            * - Variance
              - :math:`\frac{\alpha}{\beta^2}`

    Degenerate Parameters:
        An infinite rate is a point mass at ``shape``. Zero shape with zero rate
        is undefined: its statistics are ``nan`` and its density is zero
        everywhere. A zero shape with a positive rate keeps the closed-form
        statistics (infinite skewness, mode ``-1 / rate``, ``nan`` entropy) but
        its density, cumulative distribution and samples are those of a spike at
        zero. A zero rate with a positive shape has no mass left at any finite
        point: density zero, log-density ``-inf`` and cumulative distribution
        zero.

    Sampling uses the Marsaglia-Tsang method (see
    :py:func:`~scidist.distributions.sampling.gamma_sample_unchecked`).

    Example:
        >>> gamma = Gamma.with_shape_scale(2.0, 0.5)
        >>> gamma.rate
        2.0
        >>> Gamma.sample(np.random.default_rng(0), 2.0, 1.0)  # doctest: +SKIP
        1.0391...
    """

    PARAMETER_NAMES = ("shape", "rate")

    def __init__(
        self,
        shape: "custom_types.Float",
        rate: "custom_types.Float",
        random_source: Optional["custom_types.RandomSourceType"] = None,
        check_parameters: bool = defaults.DEFAULT_CHECK_PARAMETERS,
    ):
        super().__init__(
            shape,
            rate,
            random_source=random_source,
            check_parameters=check_parameters,
        )

    @classmethod
    def with_shape_scale(
        cls,
        shape: "custom_types.Float",
        scale: "custom_types.Float",
        random_source: Optional["custom_types.RandomSourceType"] = None,
        check_parameters: bool = defaults.DEFAULT_CHECK_PARAMETERS,
    ) -> "Gamma":
        """Build a Gamma distribution from a shape and a scale (``1 / rate``).

        A zero scale gives an infinite rate, i.e., a point mass at ``shape``.
        """
        return cls(
            shape,
            _scale_to_rate(scale),
            random_source=random_source,
            check_parameters=check_parameters,
        )

    @classmethod
    def with_shape_rate(
        cls,
        shape: "custom_types.Float",
        rate: "custom_types.Float",
        random_source: Optional["custom_types.RandomSourceType"] = None,
        check_parameters: bool = defaults.DEFAULT_CHECK_PARAMETERS,
    ) -> "Gamma":
        """Build a Gamma distribution from a shape and a rate."""
        return cls(
            shape, rate, random_source=random_source, check_parameters=check_parameters
        )

    @staticmethod
    def is_valid_parameter_set(
        shape: "custom_types.Float", rate: "custom_types.Float"
    ) -> bool:
        """Shape and rate must both be non-negative (and not ``nan``)."""
        return bool(shape >= 0.0 and rate >= 0.0)

    @property
    def shape(self) -> float:
        """Shape parameter (:math:`k`, :math:`\\alpha`)."""
        return float(self._parameters[0])

    @shape.setter
    def shape(self, value: "custom_types.Float"):
        self._replace_parameter("shape", value)

    @property
    def rate(self) -> float:
        """Rate or inverse scale parameter (:math:`\\beta`)."""
        return float(self._parameters[1])

    @rate.setter
    def rate(self, value: "custom_types.Float"):
        self._replace_parameter("rate", value)

    @property
    @utils.ieee754
    def scale(self) -> float:
        """Scale parameter (:math:`\\theta = 1 / \\beta`)."""
        return 1.0 / self._parameters[1]

    @scale.setter
    def scale(self, value: "custom_types.Float"):
        self._replace_parameter("rate", _scale_to_rate(value))

    @property
    def case(self) -> degeneracy.ParameterCase:
        return degeneracy.classify_gamma(*self._parameters)

    @property
    @utils.ieee754
    def mean(self) -> float:
        shape, rate = self._parameters
        if (case := self.case).kind is degeneracy.CaseKind.POINT_MASS:
            return case.atom
        if case.kind is degeneracy.CaseKind.UNDEFINED:
            return math.nan
        return shape / rate

    @property
    @utils.ieee754
    def variance(self) -> float:
        shape, rate = self._parameters
        if (case := self.case).kind is degeneracy.CaseKind.POINT_MASS:
            return 0.0
        if case.kind is degeneracy.CaseKind.UNDEFINED:
            return math.nan
        return shape / (rate * rate)

    @property
    @utils.ieee754
    def entropy(self) -> float:
        shape, rate = self._parameters
        if (case := self.case).kind is degeneracy.CaseKind.POINT_MASS:
            return 0.0
        if case.kind is degeneracy.CaseKind.UNDEFINED:
            return math.nan
        return (
            shape
            - np.log(rate)
            + special.gammaln(shape)
            + (1.0 - shape) * special.psi(shape)
        )

    @property
    @utils.ieee754
    def skewness(self) -> float:
        shape, _ = self._parameters
        if (case := self.case).kind is degeneracy.CaseKind.POINT_MASS:
            return 0.0
        if case.kind is degeneracy.CaseKind.UNDEFINED:
            return math.nan
        return 2.0 / np.sqrt(shape)

    @property
    @utils.ieee754
    def mode(self) -> float:
        shape, rate = self._parameters
        if (case := self.case).kind is degeneracy.CaseKind.POINT_MASS:
            return case.atom
        if case.kind is degeneracy.CaseKind.UNDEFINED:
            return math.nan
        return (shape - 1.0) / rate

    def _density(self, x: np.float64) -> float:
        shape, rate = self._parameters
        if rate == 0.0 or np.isposinf(x):
            return 0.0
        if shape == 0.0:
            return math.inf if x == 0.0 else 0.0
        if shape == 1.0:
            return rate * np.exp(-rate * x)
        return (
            np.power(rate, shape)
            * np.power(x, shape - 1.0)
            * np.exp(-rate * x)
            / special.gamma(shape)
        )

    def _log_density(self, x: np.float64) -> float:
        shape, rate = self._parameters
        if rate == 0.0 or np.isposinf(x):
            return -math.inf
        if shape == 0.0:
            return math.inf if x == 0.0 else -math.inf
        if shape == 1.0:
            return np.log(rate) - rate * x

        # (shape - 1) * log(0) resolved by the sign of shape - 1
        if x == 0.0:
            return -math.inf if shape > 1.0 else math.inf

        return (
            shape * np.log(rate)
            + (shape - 1.0) * np.log(x)
            - rate * x
            - special.gammaln(shape)
        )

    def _cumulative_distribution(self, x: np.float64) -> float:
        shape, rate = self._parameters
        if shape == 0.0:
            return 1.0
        return special.gammainc(shape, x * rate)

    _sample_unchecked = staticmethod(sampling.gamma_sample_unchecked)
    _samples_unchecked = staticmethod(sampling.gamma_samples_unchecked)


@utils.ieee754
def _scale_to_rate(scale: "custom_types.Float") -> float:
    """Invert a scale into a rate, mapping a negative zero scale to ``+inf``."""
    rate = 1.0 / np.float64(scale)
    if np.isneginf(rate):
        rate = -rate
    return rate
