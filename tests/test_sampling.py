"""Tests for the unchecked variate generators."""

from __future__ import annotations

import itertools
import math

import numpy as np
import pytest

from scidist.distributions import sampling

from conftest import TWO_NORMAL, ZERO_NORMAL, CountingRandomSource, ScriptedRandomSource

INF = math.inf


# =============================================================================
# Normal
# =============================================================================


def test_box_muller_consumes_two_uniforms():
    source = ScriptedRandomSource(ZERO_NORMAL)
    assert sampling.standard_normal_unchecked(source) == pytest.approx(0.0, abs=1e-12)
    assert source.exhausted


def test_box_muller_reflects_first_uniform():
    # A first uniform of exactly zero maps to a zero radius instead of log(0)
    source = ScriptedRandomSource([0.0, 0.3])
    assert sampling.standard_normal_unchecked(source) == 0.0


def test_normal_location_scale():
    source = ScriptedRandomSource(TWO_NORMAL)
    assert sampling.normal_sample_unchecked(source, 1.0, 3.0) == pytest.approx(7.0)


def test_standard_normal_moments():
    source = np.random.default_rng(0)
    draws = np.array(
        list(itertools.islice(sampling.normal_samples_unchecked(source, 0.0, 1.0), 50_000))
    )
    assert draws.mean() == pytest.approx(0.0, abs=0.03)
    assert draws.std() == pytest.approx(1.0, abs=0.03)


# =============================================================================
# Gamma
# =============================================================================


class TestGammaRejectionLoop:
    """Scripted uniforms walk the Marsaglia-Tsang loop through each branch."""

    # d = 2 - 1/3 for shape 2
    D = 5.0 / 3.0

    def test_squeeze_accepts_first_candidate(self):
        source = ScriptedRandomSource([*ZERO_NORMAL, 0.5])
        assert sampling.gamma_sample_unchecked(source, 2.0, 1.0) == pytest.approx(self.D)
        assert source.exhausted

    def test_rate_divides_result(self):
        source = ScriptedRandomSource([*ZERO_NORMAL, 0.5])
        assert sampling.gamma_sample_unchecked(source, 2.0, 2.0) == pytest.approx(
            self.D / 2.0
        )

    def test_non_positive_candidate_is_redrawn(self):
        # A normal near -5.4 makes 1 + c * x negative and must be redrawn
        source = ScriptedRandomSource([1.0 - 5e-7, 0.5, *ZERO_NORMAL, 0.5])
        assert sampling.gamma_sample_unchecked(source, 2.0, 1.0) == pytest.approx(self.D)
        assert source.exhausted

    def test_rejected_candidate_restarts_loop(self):
        # x = 2 with u = 0.99 fails both the squeeze and the log test
        source = ScriptedRandomSource([*TWO_NORMAL, 0.99, *ZERO_NORMAL, 0.5])
        assert sampling.gamma_sample_unchecked(source, 2.0, 1.0) == pytest.approx(self.D)
        assert source.exhausted

    def test_log_test_can_accept(self):
        # x = 2 with u = 0.6 fails the squeeze but passes the log test
        source = ScriptedRandomSource([*TWO_NORMAL, 0.6])
        v = (1.0 + 2.0 / math.sqrt(15.0)) ** 3
        assert sampling.gamma_sample_unchecked(source, 2.0, 1.0) == pytest.approx(
            self.D * v
        )
        assert source.exhausted

    def test_small_shape_boost_draws_one_extra_uniform(self):
        # Shape 0.5 samples Gamma(1.5) scaled by U^(1/0.5)
        source = ScriptedRandomSource([0.25, *ZERO_NORMAL, 0.5])
        expected = 0.25**2 * (1.5 - 1.0 / 3.0)
        assert sampling.gamma_sample_unchecked(source, 0.5, 1.0) == pytest.approx(expected)
        assert source.exhausted


def test_gamma_infinite_rate_consumes_no_randomness():
    source = CountingRandomSource()
    assert sampling.gamma_sample_unchecked(source, 3.5, INF) == 3.5
    assert source.calls == 0


def test_gamma_zero_shape():
    assert sampling.gamma_sample_unchecked(CountingRandomSource(), 0.0, 2.0) == 0.0
    assert math.isnan(sampling.gamma_sample_unchecked(CountingRandomSource(), 0.0, 0.0))


@pytest.mark.parametrize(
    "shape, rate", [(2.0, 1.0), (0.5, 2.0), (7.5, 0.5), (1.0, 3.0)]
)
def test_gamma_sample_moments(shape, rate):
    source = np.random.default_rng(1)
    draws = np.array(
        list(itertools.islice(sampling.gamma_samples_unchecked(source, shape, rate), 40_000))
    )
    assert np.all(draws >= 0.0)
    assert draws.mean() == pytest.approx(shape / rate, rel=0.03)
    assert draws.var() == pytest.approx(shape / rate**2, rel=0.08)


# =============================================================================
# Beta
# =============================================================================


def test_beta_draws_a_then_b():
    # Two identical Gamma(2, 1) draws give exactly one half
    source = ScriptedRandomSource([*ZERO_NORMAL, 0.5, *ZERO_NORMAL, 0.5])
    assert sampling.beta_sample_unchecked(source, 2.0, 2.0) == pytest.approx(0.5)
    assert source.exhausted


def test_beta_small_shape_uses_log_boost():
    # Gamma(0.5) from U = 0.25 and an accepted Gamma(1.5) candidate, then Gamma(2)
    source = ScriptedRandomSource([0.25, *ZERO_NORMAL, 0.5, *ZERO_NORMAL, 0.5])
    x = 0.25**2 * (1.5 - 1.0 / 3.0)
    y = 5.0 / 3.0
    assert sampling.beta_sample_unchecked(source, 0.5, 2.0) == pytest.approx(
        x / (x + y), rel=1e-12
    )
    assert source.exhausted


def test_log_gamma_sample_survives_underflow():
    # U^(1/shape) is exactly zero here, its logarithm is not
    source = ScriptedRandomSource([0.5, *ZERO_NORMAL, 0.5])
    expected = math.log(0.5) / 1e-4 + math.log(1.0 + 1e-4 - 1.0 / 3.0)
    assert sampling.log_gamma_sample_unchecked(source, 1e-4) == pytest.approx(expected)
    assert source.exhausted


@pytest.mark.parametrize(
    "a, b", [(1e-3, 1e-3), (1e-300, 1e-300), (1e-3, 2.0), (0.05, 0.05), (2.0, 1e-4)]
)
def test_beta_small_shapes_stay_in_unit_interval(a, b):
    source = np.random.default_rng(6)
    draws = np.array(
        list(itertools.islice(sampling.beta_samples_unchecked(source, a, b), 2_000))
    )
    assert not np.any(np.isnan(draws))
    assert np.all((draws >= 0.0) & (draws <= 1.0))
    assert draws.mean() == pytest.approx(a / (a + b), abs=0.05)


@pytest.mark.parametrize("coin, expected", [(0.3, 1.0), (0.7, 0.0)])
def test_beta_falls_back_to_weighted_coin(coin, expected):
    # Shapes this small overflow log(U) / shape to -inf on both sides
    tiny = 5e-324
    source = ScriptedRandomSource(
        [0.5, *ZERO_NORMAL, 0.5, 0.5, *ZERO_NORMAL, 0.5, coin]
    )
    assert sampling.beta_sample_unchecked(source, tiny, tiny) == expected
    assert source.exhausted


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (0.0, 3.0, 0.0),
        (3.0, INF, 0.0),
        (3.0, 0.0, 1.0),
        (INF, 3.0, 1.0),
        (INF, INF, 0.5),
    ],
)
def test_beta_point_masses_consume_no_randomness(a, b, expected):
    source = CountingRandomSource()
    assert sampling.beta_sample_unchecked(source, a, b) == expected
    assert source.calls == 0


def test_beta_bernoulli_case_stays_in_unit_interval():
    source = CountingRandomSource()
    draws = [sampling.beta_sample_unchecked(source, 0.0, 0.0) for _ in range(2_000)]
    assert source.calls == 2_000
    assert set(draws) == {0.0, 1.0}
    assert np.mean(draws) == pytest.approx(0.5, abs=0.05)


def test_beta_sample_moments():
    source = np.random.default_rng(2)
    draws = np.array(
        list(itertools.islice(sampling.beta_samples_unchecked(source, 2.0, 5.0), 20_000))
    )
    assert np.all((draws >= 0.0) & (draws <= 1.0))
    assert draws.mean() == pytest.approx(2.0 / 7.0, abs=0.01)


# =============================================================================
# LogNormal
# =============================================================================


def test_lognormal_exponentiates_normal():
    source = ScriptedRandomSource(TWO_NORMAL)
    assert sampling.lognormal_sample_unchecked(source, 0.5, 0.25) == pytest.approx(
        math.exp(1.0)
    )


def test_lognormal_sequence_is_lazy():
    source = CountingRandomSource()
    draws = sampling.lognormal_samples_unchecked(source, 0.0, 1.0)
    assert source.calls == 0
    first_three = list(itertools.islice(draws, 3))
    assert source.calls == 6
    assert all(draw > 0.0 for draw in first_three)


def test_lognormal_sample_mean():
    source = np.random.default_rng(3)
    draws = np.array(
        list(itertools.islice(sampling.lognormal_samples_unchecked(source, 0.0, 0.5), 20_000))
    )
    assert np.all(draws > 0.0)
    assert draws.mean() == pytest.approx(math.exp(0.125), abs=0.03)
