# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Classification of degenerate distribution parameters.

Parameters at zero or infinity turn each family into a limiting distribution: a
point mass, an equal-weight Bernoulli between the ends of the support, or an
undefined distribution. Rather than re-deriving these limits inside every
statistic, each family classifies its parameter pair once per call into a
:py:class:`ParameterCase` and then dispatches on it. The classification is the
single place where the ordering of overlapping conditions is decided, so
density, cumulative distribution, moments, and sampling can never disagree
about which limit applies.

The classification tables are:

.. list-table::
    :header-rows: 1

    * - Family
      - Condition (first match wins)
      - Case
    * - Gamma
      - ``rate == inf``
      - point mass at ``shape``
    * -
      - ``shape == 0 and rate == 0``
      - undefined
    * - Beta
      - ``a == 0 and b == 0``
      - Bernoulli(0.5) on {0, 1}
    * -
      - ``a == inf and b == inf``
      - point mass at 0.5
    * -
      - ``a == 0 or b == inf``
      - point mass at 0
    * -
      - ``b == 0 or a == inf``
      - point mass at 1
    * - LogNormal
      - ``sigma == 0``
      - point mass at ``exp(mu)``

Any other parameter pair is regular.
"""

from __future__ import annotations

import dataclasses
import enum
import math

from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from scidist import custom_types


class CaseKind(enum.Enum):
    """Kinds of parameter cases."""

    REGULAR = "regular"
    POINT_MASS = "point_mass"
    BERNOULLI_HALF = "bernoulli_half"
    UNDEFINED = "undefined"


@dataclasses.dataclass(frozen=True)
class ParameterCase:
    """The limiting distribution selected by a parameter pair.

    :param kind: Kind of case
    :type kind: CaseKind
    :param atoms: Locations of the equally weighted atoms of a degenerate case.
        Empty for regular and undefined cases.
    :type atoms: tuple[float, ...]

    Degenerate cases evaluate their own density (``inf`` at an atom, ``0``
    elsewhere), log-density, step cumulative distribution, and samples. These
    methods must not be used for regular cases, whose behavior depends on the
    family's formulas.
    """

    kind: CaseKind
    atoms: tuple[float, ...] = ()

    @classmethod
    def regular(cls) -> "ParameterCase":
        return cls(CaseKind.REGULAR)

    @classmethod
    def point_mass(cls, atom: "custom_types.Float") -> "ParameterCase":
        return cls(CaseKind.POINT_MASS, (float(atom),))

    @classmethod
    def bernoulli_half(
        cls, low: "custom_types.Float", high: "custom_types.Float"
    ) -> "ParameterCase":
        return cls(CaseKind.BERNOULLI_HALF, (float(low), float(high)))

    @classmethod
    def undefined(cls) -> "ParameterCase":
        return cls(CaseKind.UNDEFINED)

    @property
    def is_regular(self) -> bool:
        """Whether the family's closed-form formulas apply."""
        return self.kind is CaseKind.REGULAR

    @property
    def atom(self) -> float:
        """Location of a point mass.

        :raises ValueError: If the case is not a point mass
        """
        if self.kind is not CaseKind.POINT_MASS:
            raise ValueError(f"A {self.kind.value} case has no single atom.")
        return self.atoms[0]

    def _check_degenerate(self):
        if self.is_regular:
            raise ValueError(
                "Regular cases must be evaluated with the distribution's formulas."
            )

    def density(self, x: "custom_types.Float") -> float:
        """Density of a degenerate case: infinite at an atom, zero elsewhere."""
        self._check_degenerate()
        return math.inf if x in self.atoms else 0.0

    def log_density(self, x: "custom_types.Float") -> float:
        """Log-density of a degenerate case: ``inf`` at an atom, ``-inf`` elsewhere."""
        self._check_degenerate()
        return math.inf if x in self.atoms else -math.inf

    def cumulative_distribution(self, x: "custom_types.Float") -> float:
        """Step function giving the fraction of atoms at or below ``x``.

        Undefined cases have no atoms and report zero everywhere.
        """
        self._check_degenerate()
        if not self.atoms:
            return 0.0
        return sum(x >= atom for atom in self.atoms) / len(self.atoms)

    def sample(self, random_source: "custom_types.RandomSourceType") -> float:
        """Draw from a degenerate case.

        :param random_source: Source of uniform random numbers
        :type random_source: custom_types.RandomSourceType

        :returns: An atom, or ``nan`` for an undefined case
        :rtype: float

        A single atom is returned without consuming any randomness. With several
        atoms, one uniform draw selects among them with equal probability.
        """
        self._check_degenerate()
        if not self.atoms:
            return math.nan
        if len(self.atoms) == 1:
            return self.atoms[0]
        return self.atoms[int(random_source.random() * len(self.atoms))]


def classify_gamma(
    shape: "custom_types.Float", rate: "custom_types.Float"
) -> ParameterCase:
    """Classify Gamma parameters.

    :param shape: Shape of the Gamma distribution
    :type shape: custom_types.Float
    :param rate: Rate (inverse scale) of the Gamma distribution
    :type rate: custom_types.Float

    :returns: The case selected by the parameters
    :rtype: ParameterCase

    A zero shape with a positive rate is regular: its moments follow the closed
    forms (an infinite skewness, for instance), and only the density evaluation in
    :py:class:`~scidist.distributions.gamma.Gamma` treats it as a spike at zero.
    """
    if np.isposinf(rate):
        return ParameterCase.point_mass(shape)
    if shape == 0.0 and rate == 0.0:
        return ParameterCase.undefined()
    return ParameterCase.regular()


def classify_beta(a: "custom_types.Float", b: "custom_types.Float") -> ParameterCase:
    """Classify Beta parameters.

    :param a: First shape parameter (alpha)
    :type a: custom_types.Float
    :param b: Second shape parameter (beta)
    :type b: custom_types.Float

    :returns: The case selected by the parameters
    :rtype: ParameterCase

    The mixed combinations ``(0, inf)`` and ``(inf, 0)`` put all their mass at the
    same end of the support whichever condition is tested first.
    """
    if a == 0.0 and b == 0.0:
        return ParameterCase.bernoulli_half(0.0, 1.0)
    if np.isposinf(a) and np.isposinf(b):
        return ParameterCase.point_mass(0.5)
    if a == 0.0 or np.isposinf(b):
        return ParameterCase.point_mass(0.0)
    if b == 0.0 or np.isposinf(a):
        return ParameterCase.point_mass(1.0)
    return ParameterCase.regular()


def classify_lognormal(
    mu: "custom_types.Float", sigma: "custom_types.Float"
) -> ParameterCase:
    """Classify LogNormal parameters.

    :param mu: Mean of the logarithm of the variable
    :type mu: custom_types.Float
    :param sigma: Standard deviation of the logarithm of the variable
    :type sigma: custom_types.Float

    :returns: The case selected by the parameters
    :rtype: ParameterCase
    """
    if sigma == 0.0:
        return ParameterCase.point_mass(np.exp(mu))
    return ParameterCase.regular()
