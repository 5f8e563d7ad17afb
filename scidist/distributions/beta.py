# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""The Beta distribution on the unit interval."""

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


class Beta(ContinuousDistribution):
    r"""Beta distribution with two shape parameters.

    :param a: First shape parameter (:math:`\alpha`). Must be non-negative.
    :type a: custom_types.Float
    :param b: Second shape parameter (:math:`\beta`). Must be non-negative.
    :type b: custom_types.Float
    :param random_source: Source of uniform random numbers. Defaults to None, in
        which case a default source is created.
    :type random_source: Optional[custom_types.RandomSourceType]
    :param check_parameters: Whether to validate parameters. Defaults to
        :py:data:`~scidist.defaults.DEFAULT_CHECK_PARAMETERS`.
    :type check_parameters: bool

    Mathematical Definition:
        .. math::
            \begin{align*}
            P(x | \alpha, \beta) &= \frac{\Gamma(\alpha + \beta)}{\Gamma(\alpha)
            \Gamma(\beta)} x^{\alpha - 1} (1 - x)^{\beta - 1} \text{ for } 0 \leq x \leq 1
            \end{align*}

    Properties:

        .. list-table::

            * - Support
              - :math:`[0, 1]`
            * - Mean
              - :math:`\frac{\alpha}{\alpha + \beta}`
            * - Mode
              - :math:`\frac{\alpha - 1}{\alpha + \beta - 2}`
            * - Variance
              - :math:`\frac{\alpha\beta}{(\alpha + \beta)^2(\alpha + \beta + 1)}`

    Degenerate Parameters:
        ``Beta(0, 0)`` puts mass 0.5 on each of 0 and 1. A zero ``a`` or an
        infinite ``b`` is a point mass at 0, a zero ``b`` or an infinite ``a`` is
        a point mass at 1, and ``Beta(inf, inf)`` is a point mass at 0.5. The
        variance keeps its closed form for these, which evaluates to ``nan`` where
        it is indeterminate.
    """

    PARAMETER_NAMES = ("a", "b")
    UPPER_BOUND = 1.0

    def __init__(
        self,
        a: "custom_types.Float",
        b: "custom_types.Float",
        random_source: Optional["custom_types.RandomSourceType"] = None,
        check_parameters: bool = defaults.DEFAULT_CHECK_PARAMETERS,
    ):
        super().__init__(
            a, b, random_source=random_source, check_parameters=check_parameters
        )

    @staticmethod
    def is_valid_parameter_set(
        a: "custom_types.Float", b: "custom_types.Float"
    ) -> bool:
        """Both shapes must be non-negative (and not ``nan``)."""
        return bool(a >= 0.0 and b >= 0.0)

    @property
    def a(self) -> float:
        """First shape parameter (:math:`\\alpha`)."""
        return float(self._parameters[0])

    @a.setter
    def a(self, value: "custom_types.Float"):
        self._replace_parameter("a", value)

    @property
    def b(self) -> float:
        """Second shape parameter (:math:`\\beta`)."""
        return float(self._parameters[1])

    @b.setter
    def b(self, value: "custom_types.Float"):
        self._replace_parameter("b", value)

    @property
    def case(self) -> degeneracy.ParameterCase:
        return degeneracy.classify_beta(*self._parameters)

    @property
    def _is_uniform(self) -> bool:
        return self._parameters == (1.0, 1.0)

    @property
    @utils.ieee754
    def mean(self) -> float:
        a, b = self._parameters
        if (case := self.case).kind is degeneracy.CaseKind.BERNOULLI_HALF:
            return 0.5
        if case.kind is degeneracy.CaseKind.POINT_MASS:
            return case.atom
        return a / (a + b)

    @property
    @utils.ieee754
    def variance(self) -> float:
        a, b = self._parameters
        return (a * b) / ((a + b) * (a + b) * (a + b + 1.0))

    @property
    @utils.ieee754
    def entropy(self) -> float:
        a, b = self._parameters
        if (case := self.case).kind is degeneracy.CaseKind.BERNOULLI_HALF:
            return -np.log(0.5)
        if case.kind is degeneracy.CaseKind.POINT_MASS:
            return 0.0
        return (
            special.betaln(a, b)
            - (a - 1.0) * special.psi(a)
            - (b - 1.0) * special.psi(b)
            + (a + b - 2.0) * special.psi(a + b)
        )

    @property
    @utils.ieee754
    def skewness(self) -> float:
        a, b = self._parameters
        if (case := self.case).kind is degeneracy.CaseKind.BERNOULLI_HALF:
            return 0.0
        if case.kind is degeneracy.CaseKind.POINT_MASS:
            # Mass piled against the lower bound skews right, the upper bound left
            return {0.0: 2.0, 1.0: -2.0}.get(case.atom, 0.0)
        return (
            2.0
            * (b - a)
            * np.sqrt(a + b + 1.0)
            / ((a + b + 2.0) * np.sqrt(a * b))
        )

    @property
    @utils.ieee754
    def mode(self) -> float:
        a, b = self._parameters
        if (case := self.case).kind is degeneracy.CaseKind.BERNOULLI_HALF:
            return 0.5
        if case.kind is degeneracy.CaseKind.POINT_MASS:
            return case.atom
        if self._is_uniform:
            return 0.5
        return (a - 1.0) / (a + b - 2.0)

    def _density(self, x: np.float64) -> float:
        a, b = self._parameters
        if self._is_uniform:
            return 1.0
        return np.power(x, a - 1.0) * np.power(1.0 - x, b - 1.0) / special.beta(a, b)

    def _log_density(self, x: np.float64) -> float:
        a, b = self._parameters
        if self._is_uniform:
            return 0.0

        # (shape - 1) * log(0) resolved by the sign of shape - 1
        if x == 0.0:
            lower_term = _log_zero_power(a)
        else:
            lower_term = (a - 1.0) * np.log(x)
        if x == 1.0:
            upper_term = _log_zero_power(b)
        else:
            upper_term = (b - 1.0) * np.log1p(-x)

        return lower_term + upper_term - special.betaln(a, b)

    def _cumulative_distribution(self, x: np.float64) -> float:
        a, b = self._parameters
        if self._is_uniform:
            return x
        return special.betainc(a, b, x)

    _sample_unchecked = staticmethod(sampling.beta_sample_unchecked)
    _samples_unchecked = staticmethod(sampling.beta_samples_unchecked)


def _log_zero_power(shape: np.float64) -> float:
    """Logarithm of ``0 ** (shape - 1)``."""
    if shape == 1.0:
        return 0.0
    return -math.inf if shape > 1.0 else math.inf
