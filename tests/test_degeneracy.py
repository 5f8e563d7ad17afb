"""Tests for the classification of degenerate parameter pairs."""

from __future__ import annotations

import math

import pytest

from scidist.distributions import degeneracy
from scidist.distributions.degeneracy import CaseKind, ParameterCase

from conftest import CountingRandomSource, ScriptedRandomSource

INF = math.inf


# =============================================================================
# Classification tables
# =============================================================================


@pytest.mark.parametrize(
    "shape, rate, kind, atoms",
    [
        (2.0, INF, CaseKind.POINT_MASS, (2.0,)),
        (0.0, INF, CaseKind.POINT_MASS, (0.0,)),
        (INF, INF, CaseKind.POINT_MASS, (INF,)),
        (0.0, 0.0, CaseKind.UNDEFINED, ()),
        (0.0, 3.0, CaseKind.REGULAR, ()),
        (2.0, 1.0, CaseKind.REGULAR, ()),
        (2.0, 0.0, CaseKind.REGULAR, ()),
        (0.5, 4.0, CaseKind.REGULAR, ()),
    ],
)
def test_classify_gamma(shape, rate, kind, atoms):
    case = degeneracy.classify_gamma(shape, rate)
    assert case.kind is kind
    assert case.atoms == atoms


@pytest.mark.parametrize(
    "a, b, kind, atoms",
    [
        (0.0, 0.0, CaseKind.BERNOULLI_HALF, (0.0, 1.0)),
        (INF, INF, CaseKind.POINT_MASS, (0.5,)),
        (0.0, 2.0, CaseKind.POINT_MASS, (0.0,)),
        (2.0, INF, CaseKind.POINT_MASS, (0.0,)),
        (0.0, INF, CaseKind.POINT_MASS, (0.0,)),
        (2.0, 0.0, CaseKind.POINT_MASS, (1.0,)),
        (INF, 2.0, CaseKind.POINT_MASS, (1.0,)),
        (INF, 0.0, CaseKind.POINT_MASS, (1.0,)),
        (1.0, 1.0, CaseKind.REGULAR, ()),
        (2.0, 5.0, CaseKind.REGULAR, ()),
    ],
)
def test_classify_beta(a, b, kind, atoms):
    case = degeneracy.classify_beta(a, b)
    assert case.kind is kind
    assert case.atoms == atoms


def test_classify_lognormal():
    assert degeneracy.classify_lognormal(0.0, 0.0) == ParameterCase.point_mass(1.0)
    assert degeneracy.classify_lognormal(0.0, 1.0).is_regular


# =============================================================================
# Degenerate evaluation
# =============================================================================


class TestPointMass:
    """A point mass is infinitely dense at its atom and a unit step in the CDF."""

    case = ParameterCase.point_mass(0.25)

    def test_density(self):
        assert self.case.density(0.25) == INF
        assert self.case.density(0.3) == 0.0

    def test_log_density(self):
        assert self.case.log_density(0.25) == INF
        assert self.case.log_density(0.3) == -INF

    def test_cumulative_distribution(self):
        assert self.case.cumulative_distribution(0.2) == 0.0
        assert self.case.cumulative_distribution(0.25) == 1.0
        assert self.case.cumulative_distribution(0.9) == 1.0

    def test_sample_consumes_no_randomness(self):
        source = CountingRandomSource()
        assert self.case.sample(source) == 0.25
        assert source.calls == 0

    def test_atom(self):
        assert self.case.atom == 0.25


class TestBernoulliHalf:
    """Equal mass at both ends of the unit interval."""

    case = ParameterCase.bernoulli_half(0.0, 1.0)

    def test_cumulative_distribution(self):
        assert self.case.cumulative_distribution(0.0) == 0.5
        assert self.case.cumulative_distribution(0.7) == 0.5
        assert self.case.cumulative_distribution(1.0) == 1.0

    def test_density(self):
        assert self.case.density(0.0) == INF
        assert self.case.density(1.0) == INF
        assert self.case.density(0.5) == 0.0

    @pytest.mark.parametrize("uniform, expected", [(0.1, 0.0), (0.49, 0.0), (0.5, 1.0), (0.99, 1.0)])
    def test_sample_uses_one_uniform(self, uniform, expected):
        source = ScriptedRandomSource([uniform])
        assert self.case.sample(source) == expected
        assert source.exhausted

    def test_has_no_single_atom(self):
        with pytest.raises(ValueError):
            _ = self.case.atom


def test_undefined_case():
    case = ParameterCase.undefined()
    assert case.density(1.0) == 0.0
    assert case.log_density(1.0) == -INF
    assert case.cumulative_distribution(1.0) == 0.0
    assert math.isnan(case.sample(CountingRandomSource()))


@pytest.mark.parametrize("method", ["density", "log_density", "cumulative_distribution"])
def test_regular_case_refuses_degenerate_evaluation(method):
    with pytest.raises(ValueError):
        getattr(ParameterCase.regular(), method)(0.5)
