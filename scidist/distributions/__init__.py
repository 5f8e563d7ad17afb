# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Continuous distributions with density, cumulative distribution, and sampling.

The following distributions are currently supported in SciDist:

- :py:class:`~scidist.distributions.gamma.Gamma`
- :py:class:`~scidist.distributions.beta.Beta`
- :py:class:`~scidist.distributions.lognormal.LogNormal`

All three share the interface of
:py:class:`~scidist.distributions.abstract_distribution.ContinuousDistribution`.
"""

from scidist.distributions.abstract_distribution import ContinuousDistribution
from scidist.distributions.beta import Beta
from scidist.distributions.gamma import Gamma
from scidist.distributions.lognormal import LogNormal

__all__ = ["Beta", "ContinuousDistribution", "Gamma", "LogNormal"]
