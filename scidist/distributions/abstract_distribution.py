# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Base class shared by the SciDist continuous distributions.

:py:class:`ContinuousDistribution` composes parameter validation, parameter
storage, the random source binding, support handling for density and cumulative
distribution evaluation, and the public sampling surface. Subclasses supply the
family-specific pieces: the validity predicate, the degenerate-case
classification, the statistics, the in-support density formulas, and the unchecked
sampler.

Parameters are always replaced as a pair. A failed validation leaves the
previous pair in place, and a successful one swaps both values in a single
assignment, so no caller can observe one new parameter alongside one old one.

.. warning::
    Distributions are not thread-safe. Sampling from one instance in several
    threads races on the bound random source, and the lazy sequences returned by
    ``samples()`` must not be shared across threads. Callers that need
    concurrency should give each thread its own distribution and random source.
"""

from __future__ import annotations

import math

from abc import ABC, abstractmethod
from typing import Iterator, Optional, TYPE_CHECKING

import numpy as np

from scidist import defaults, utils
from scidist.distributions import degeneracy
from scidist.exceptions import InvalidParameterError, NotSupportedError
from scidist.random_sources import resolve_random_source

if TYPE_CHECKING:
    from scidist import custom_types


class ContinuousDistribution(ABC):
    """Base class for parameterized continuous univariate distributions.

    :param random_source: Source of uniform random numbers used by the instance
        ``sample`` and ``samples`` methods. Defaults to None, in which case the
        distribution creates and owns a fresh default source.
    :type random_source: Optional[custom_types.RandomSourceType]
    :param check_parameters: Whether parameters are validated on construction
        and on every later change. Defaults to
        :py:data:`~scidist.defaults.DEFAULT_CHECK_PARAMETERS`.
    :type check_parameters: bool

    :cvar PARAMETER_NAMES: Names of the two parameters, in positional order
    :type PARAMETER_NAMES: tuple[str, str]
    :cvar LOWER_BOUND: Lower end of the support
    :type LOWER_BOUND: float
    :cvar UPPER_BOUND: Upper end of the support
    :type UPPER_BOUND: float
    """

    PARAMETER_NAMES: tuple[str, str]
    LOWER_BOUND: float = 0.0
    UPPER_BOUND: float = math.inf

    def __init__(
        self,
        *parameters: "custom_types.Float",
        random_source: Optional["custom_types.RandomSourceType"] = None,
        check_parameters: bool = defaults.DEFAULT_CHECK_PARAMETERS,
    ):
        # Confirm that class attributes are set correctly
        if not hasattr(self, "PARAMETER_NAMES"):
            raise NotImplementedError("The PARAMETER_NAMES must be defined.")

        self._check_parameters = check_parameters
        self._random_source = resolve_random_source(random_source)
        self._parameters: tuple[np.float64, ...] = ()
        self.set_parameters(*parameters)

    # Parameter validation
    @classmethod
    @abstractmethod
    def is_valid_parameter_set(cls, *parameters: "custom_types.Float") -> bool:
        """Whether the parameters lie in the domain of the distribution.

        Degenerate combinations (zeros and infinities) are valid; they select a
        limiting distribution rather than an error.
        """

    @classmethod
    def validate_parameters(
        cls,
        *parameters: "custom_types.Float",
        check_parameters: bool = defaults.DEFAULT_CHECK_PARAMETERS,
    ) -> tuple[np.float64, ...]:
        """Validate parameters and convert them to double precision.

        :param parameters: Parameter values in the order of ``PARAMETER_NAMES``
        :type parameters: custom_types.Float
        :param check_parameters: Whether to run the validity check. Defaults to
            :py:data:`~scidist.defaults.DEFAULT_CHECK_PARAMETERS`.
        :type check_parameters: bool

        :returns: The parameters as ``np.float64``
        :rtype: tuple[np.float64, ...]

        :raises TypeError: If the wrong number of parameters is given
        :raises InvalidParameterError: If checking is enabled and the parameters
            are outside the domain of the distribution
        """
        if len(parameters) != len(cls.PARAMETER_NAMES):
            raise TypeError(
                f"{cls.__name__} expects {len(cls.PARAMETER_NAMES)} parameters "
                f"{cls.PARAMETER_NAMES}, but got {len(parameters)}."
            )

        parameters = utils.as_float64(*parameters)
        if check_parameters and not cls.is_valid_parameter_set(*parameters):
            formatted = ", ".join(
                f"{name}={value}" for name, value in zip(cls.PARAMETER_NAMES, parameters)
            )
            raise InvalidParameterError(
                f"Invalid parameters for the {cls.__name__} distribution: {formatted}."
            )

        return parameters

    def set_parameters(self, *parameters: "custom_types.Float"):
        """Replace all parameters of the distribution at once.

        :param parameters: New parameter values in the order of ``PARAMETER_NAMES``
        :type parameters: custom_types.Float

        :raises InvalidParameterError: If parameter checking is enabled for this
            distribution and the new parameters are invalid. The current
            parameters are left unchanged.
        """
        self._parameters = self.validate_parameters(
            *parameters, check_parameters=self._check_parameters
        )

    def _replace_parameter(self, name: str, value: "custom_types.Float"):
        """Set one parameter by name, revalidating the whole pair."""
        self.set_parameters(
            *(
                value if param_name == name else current
                for param_name, current in zip(self.PARAMETER_NAMES, self._parameters)
            )
        )

    @property
    def parameters(self) -> tuple[float, ...]:
        """Current parameter values in the order of ``PARAMETER_NAMES``."""
        return tuple(float(param) for param in self._parameters)

    @property
    def check_parameters(self) -> bool:
        """Whether this distribution validates parameter changes."""
        return self._check_parameters

    @property
    def random_source(self) -> "custom_types.RandomSourceType":
        """Source of uniform random numbers used by instance sampling.

        Setting None installs a fresh default source owned by the distribution.
        """
        return self._random_source

    @random_source.setter
    def random_source(self, random_source: Optional["custom_types.RandomSourceType"]):
        self._random_source = resolve_random_source(random_source)

    @property
    @abstractmethod
    def case(self) -> degeneracy.ParameterCase:
        """Degenerate-case classification of the current parameters."""

    # Statistics
    @property
    @abstractmethod
    def mean(self) -> float:
        """Mean of the distribution."""

    @property
    @abstractmethod
    def variance(self) -> float:
        """Variance of the distribution."""

    @property
    @utils.ieee754
    def std_dev(self) -> float:
        """Standard deviation of the distribution."""
        return np.sqrt(np.float64(self.variance))

    @property
    @abstractmethod
    def entropy(self) -> float:
        """Differential entropy of the distribution, in nats."""

    @property
    @abstractmethod
    def skewness(self) -> float:
        """Skewness of the distribution."""

    @property
    @abstractmethod
    def mode(self) -> float:
        """Mode of the distribution."""

    @property
    def median(self) -> float:
        """Median of the distribution.

        :raises NotSupportedError: If no closed form is implemented for the family
        """
        raise NotSupportedError(
            f"The median of the {type(self).__name__} distribution is not supported."
        )

    @property
    def minimum(self) -> float:
        """Lower end of the support."""
        return self.LOWER_BOUND

    @property
    def maximum(self) -> float:
        """Upper end of the support."""
        return self.UPPER_BOUND

    # Density and cumulative distribution
    @utils.ieee754
    def density(self, x: "custom_types.Float") -> float:
        """Probability density function evaluated at ``x``.

        :param x: Point at which to evaluate the density
        :type x: custom_types.Float

        :returns: The density; zero outside the support and ``inf`` at the atoms
            of degenerate distributions
        :rtype: float
        """
        if x < self.LOWER_BOUND or x > self.UPPER_BOUND:
            return 0.0

        if not (case := self.case).is_regular:
            return case.density(x)

        return self._density(np.float64(x))

    @utils.ieee754
    def log_density(self, x: "custom_types.Float") -> float:
        """Natural logarithm of the probability density function at ``x``.

        :param x: Point at which to evaluate the log-density
        :type x: custom_types.Float

        :returns: The log-density; ``-inf`` outside the support
        :rtype: float

        Evaluated directly in the log domain rather than as ``log(density(x))``,
        so it stays finite where the density itself under- or overflows.
        """
        if x < self.LOWER_BOUND or x > self.UPPER_BOUND:
            return -math.inf

        if not (case := self.case).is_regular:
            return case.log_density(x)

        return self._log_density(np.float64(x))

    @utils.ieee754
    def cumulative_distribution(self, x: "custom_types.Float") -> float:
        """Cumulative distribution function, ``P(X <= x)``.

        :param x: Point at which to evaluate the cumulative distribution
        :type x: custom_types.Float

        :returns: Zero below the support, one at or above its upper end
        :rtype: float
        """
        if x < self.LOWER_BOUND:
            return 0.0
        if x >= self.UPPER_BOUND:
            return 1.0

        if not (case := self.case).is_regular:
            return case.cumulative_distribution(x)

        return self._cumulative_distribution(np.float64(x))

    @abstractmethod
    def _density(self, x: np.float64) -> float:
        """Density of a regular distribution at a point inside the support."""

    @abstractmethod
    def _log_density(self, x: np.float64) -> float:
        """Log-density of a regular distribution at a point inside the support."""

    @abstractmethod
    def _cumulative_distribution(self, x: np.float64) -> float:
        """Cumulative distribution of a regular distribution inside the support."""

    # Sampling
    @staticmethod
    @abstractmethod
    def _sample_unchecked(
        random_source: "custom_types.RandomSourceType",
        *parameters: "custom_types.Float",
    ) -> float:
        """Draw one variate without validating the parameters."""

    @staticmethod
    @abstractmethod
    def _samples_unchecked(
        random_source: "custom_types.RandomSourceType",
        *parameters: "custom_types.Float",
    ) -> Iterator[float]:
        """Lazily draw variates without validating the parameters."""

    @utils.ClassOrInstanceMethod
    def sample(
        cls,
        random_source: Optional["custom_types.RandomSourceType"],
        *parameters: "custom_types.Float",
        check_parameters: bool = defaults.DEFAULT_CHECK_PARAMETERS,
    ) -> float:
        """Draw a single variate.

        Accessed from the class, e.g. ``Gamma.sample(random_source, shape, rate)``,
        the parameters are validated before anything is drawn.

        :param random_source: Source of uniform random numbers. If None, a fresh
            default source is used for this draw.
        :type random_source: Optional[custom_types.RandomSourceType]
        :param parameters: Parameter values in the order of ``PARAMETER_NAMES``
        :type parameters: custom_types.Float
        :param check_parameters: Whether to validate the parameters. Defaults to
            :py:data:`~scidist.defaults.DEFAULT_CHECK_PARAMETERS`.
        :type check_parameters: bool

        :returns: A variate
        :rtype: float

        :raises InvalidParameterError: If checking is enabled and the parameters
            are invalid

        Accessed from an instance, ``dist.sample()`` takes no arguments and draws
        with the instance's random source and parameters, which were validated
        when they were set.
        """
        parameters = cls.validate_parameters(
            *parameters, check_parameters=check_parameters
        )
        return cls._sample_unchecked(resolve_random_source(random_source), *parameters)

    @sample.instancemethod
    def sample(self) -> float:
        return self._sample_unchecked(self._random_source, *self._parameters)

    @utils.ClassOrInstanceMethod
    def samples(
        cls,
        random_source: Optional["custom_types.RandomSourceType"],
        *parameters: "custom_types.Float",
        check_parameters: bool = defaults.DEFAULT_CHECK_PARAMETERS,
    ) -> Iterator[float]:
        """Create an infinite lazy sequence of variates.

        Accessed from the class, e.g. ``Gamma.samples(random_source, shape, rate)``,
        the parameters are validated eagerly, before the sequence is returned.
        The sequence is bound to the given random source and parameters.

        :param random_source: Source of uniform random numbers. If None, a fresh
            default source is used for this sequence.
        :type random_source: Optional[custom_types.RandomSourceType]
        :param parameters: Parameter values in the order of ``PARAMETER_NAMES``
        :type parameters: custom_types.Float
        :param check_parameters: Whether to validate the parameters. Defaults to
            :py:data:`~scidist.defaults.DEFAULT_CHECK_PARAMETERS`.
        :type check_parameters: bool

        :returns: Single-pass iterator of variates that never ends by itself
        :rtype: Iterator[float]

        :raises InvalidParameterError: If checking is enabled and the parameters
            are invalid

        Accessed from an instance, ``dist.samples()`` takes no arguments and looks
        up the instance's current random source and parameters at every draw.

        Example:
            >>> import itertools
            >>> draws = list(itertools.islice(Gamma(2.0, 1.0).samples(), 100))
        """
        parameters = cls.validate_parameters(
            *parameters, check_parameters=check_parameters
        )
        return cls._samples_unchecked(resolve_random_source(random_source), *parameters)

    @samples.instancemethod
    def samples(self) -> Iterator[float]:
        return self._iter_samples()

    def _iter_samples(self) -> Iterator[float]:
        """Lazily draw variates using the current random source and parameters."""
        while True:
            yield self._sample_unchecked(self._random_source, *self._parameters)

    def __repr__(self) -> str:
        formatted = ", ".join(
            f"{name}={value}" for name, value in zip(self.PARAMETER_NAMES, self.parameters)
        )
        return f"{type(self).__name__}({formatted})"
