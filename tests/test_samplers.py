"""
test_samplers.py - Tests for the Sampling Algorithms and Validity Predicates

Tests cover:
- Parameter predicates at their boundaries
- Range invariants of the raw samplers
- Edge behaviour (infinite shapes, degenerate intervals)
- Categorical weight helpers
- The default strategy table
"""

import math

import numpy as np
import pytest

from variate_lab import SamplingStrategy, XorShift128Generator
from variate_lab.samplers import (
    STRATEGIES,
    equal_weights,
    is_valid_beta,
    is_valid_binomial,
    is_valid_categorical,
    is_valid_continuous_uniform,
    is_valid_discrete_uniform,
    is_valid_gamma,
    is_valid_geometric,
    is_valid_lognormal,
    is_valid_normal,
    is_valid_poisson,
    is_valid_students_t,
    is_valid_triangular,
    normalize_weights,
    sample_beta,
    sample_beta_prime,
    sample_categorical,
    sample_continuous_uniform,
    sample_erlang,
    sample_gamma,
    sample_laplace,
    sample_poisson,
    sample_triangular,
)


class CountingGenerator(XorShift128Generator):
    """XorShift128 that counts the 64-bit words it produces."""

    def __init__(self, seed):
        self.words = 0
        super().__init__(seed)

    def _next_ulong(self):
        self.words += 1
        return super()._next_ulong()


def draws(sampler, n, *args, seed=42):
    gen = XorShift128Generator(seed)
    return np.array([sampler(gen, *args) for _ in range(n)])


class TestPredicates:
    """Boundary cases of the validity predicates."""

    @pytest.mark.parametrize("alpha, theta, expected", [
        (1.0, 1.0, True),
        (0.0, 1.0, False),
        (1.0, 0.0, False),
        (-1.0, 1.0, False),
        (1e-12, 1e12, True),
        (math.nan, 1.0, False),
        (math.inf, 1.0, True),
    ])
    def test_gamma(self, alpha, theta, expected):
        """Gamma needs strictly positive shape and scale."""
        assert is_valid_gamma(alpha, theta) is expected

    @pytest.mark.parametrize("alpha, beta, expected", [
        (0.0, 1.0, True),
        (2.0, 2.0, True),
        (2.0, 1.0, False),
        (-math.inf, 0.0, True),
        (math.nan, 1.0, False),
    ])
    def test_continuous_uniform(self, alpha, beta, expected):
        """Uniform bounds must be ordered; equal bounds are allowed."""
        assert is_valid_continuous_uniform(alpha, beta) is expected

    @pytest.mark.parametrize("nu, expected", [
        (1, True),
        (30, True),
        (0, False),
        (-3, False),
        (2.5, False),
        (True, False),
    ])
    def test_students_t(self, nu, expected):
        """Degrees of freedom are positive integers (booleans excluded)."""
        assert is_valid_students_t(nu) is expected

    def test_normal_requires_positive_sigma(self):
        assert is_valid_normal(0.0, 1.0)
        assert not is_valid_normal(0.0, 0.0)
        assert not is_valid_normal(math.nan, 1.0)

    def test_lognormal_allows_zero_sigma(self):
        assert is_valid_lognormal(0.0, 0.0)
        assert not is_valid_lognormal(0.0, -0.1)

    def test_beta_and_triangular(self):
        assert is_valid_beta(0.5, 0.5)
        assert not is_valid_beta(0.0, 1.0)
        assert is_valid_triangular(0.0, 1.0, 0.0)
        assert is_valid_triangular(0.0, 1.0, 1.0)
        assert not is_valid_triangular(1.0, 1.0, 1.0)
        assert not is_valid_triangular(0.0, 1.0, 1.5)

    def test_discrete_predicates(self):
        """Probabilities in [0, 1], counts as integers."""
        assert is_valid_binomial(0.0, 0)
        assert is_valid_binomial(1.0, 10)
        assert not is_valid_binomial(1.1, 10)
        assert not is_valid_binomial(0.5, 2.0)
        assert is_valid_geometric(1.0)
        assert not is_valid_geometric(0.0)
        assert is_valid_discrete_uniform(-3, -3)
        assert not is_valid_discrete_uniform(0, 2**31 - 1)
        assert is_valid_poisson(1e6)
        assert not is_valid_poisson(math.inf)
        assert not is_valid_poisson(0.0)

    @pytest.mark.parametrize("weights, expected", [
        ([1.0], True),
        ([0.0, 2.0], True),
        ([], False),
        ([0.0, 0.0], False),
        ([1.0, -1.0, 2.0], False),
        ([1.0, math.inf], False),
        ([1.0, math.nan], False),
        (["a", 1.0], False),
        (None, False),
    ])
    def test_categorical(self, weights, expected):
        """Weights are finite, non-negative and sum to something positive."""
        assert is_valid_categorical(weights) is expected


class TestSamplerRanges:
    """Raw samplers stay inside their support."""

    def test_uniform_degenerate_interval(self):
        """Equal bounds always return the bound."""
        assert np.all(draws(sample_continuous_uniform, 100, 2.0, 2.0) == 2.0)

    def test_gamma_fractional_shape(self):
        """Shape 0.5 exercises the rejection step; draws stay finite and non-negative."""
        values = draws(sample_gamma, 10_000, 0.5, 1.0)
        assert np.all(np.isfinite(values))
        assert np.all(values >= 0.0)
        assert np.isclose(values.mean(), 0.5, rtol=0.1)

    def test_gamma_rejection_loop_is_short(self):
        """Each fractional-shape draw finishes well under a fixed number of uniforms."""
        gen = CountingGenerator(42)
        used = []
        for _ in range(10_000):
            before = gen.words
            sample_gamma(gen, 0.5, 1.0)
            used.append(gen.words - before)
        assert min(used) >= 2
        assert max(used) <= 100
        assert np.mean(used) < 4.0

    def test_gamma_integral_shape(self):
        """Integer shapes skip the rejection step and keep the right mean."""
        values = draws(sample_gamma, 10_000, 3.0, 2.0)
        assert np.isclose(values.mean(), 6.0, rtol=0.05)

    def test_gamma_infinite_shape(self):
        gen = XorShift128Generator(1)
        assert sample_gamma(gen, math.inf, 1.0) == math.inf

    def test_beta_zero_denominator(self):
        """Both Gamma draws underflow to 0 for vanishing shapes; Beta returns 1."""
        values = draws(sample_beta, 500, 1e-300, 1e-300)
        assert np.all(values == 1.0)

    def test_beta_prime_at_one(self, monkeypatch):
        """A Beta draw of exactly 1 maps to +inf instead of dividing by zero."""
        monkeypatch.setattr("variate_lab.samplers.sample_beta", lambda gen, alpha, beta: 1.0)
        assert sample_beta_prime(XorShift128Generator(1), 2.0, 3.0) == math.inf

    def test_erlang_infinite_rate(self):
        """An infinite rate returns the shape without consuming draws."""
        gen = XorShift128Generator(1)
        assert sample_erlang(gen, 3, math.inf) == 3.0
        assert gen.next_double() == XorShift128Generator(1).next_double()

    def test_erlang_mean(self):
        values = draws(sample_erlang, 10_000, 4, 2.0)
        assert np.isclose(values.mean(), 2.0, rtol=0.05)

    def test_triangular_within_bounds(self):
        values = draws(sample_triangular, 10_000, -1.0, 3.0, 2.5)
        assert values.min() >= -1.0
        assert values.max() <= 3.0

    def test_laplace_symmetric(self):
        values = draws(sample_laplace, 20_000, 1.0, 5.0)
        assert np.isclose(np.median(values), 5.0, atol=0.1)

    def test_poisson_large_rate(self):
        """Rates far above the rescaling step do not underflow."""
        values = draws(sample_poisson, 200, 2000.0)
        assert np.isclose(values.mean(), 2000.0, rtol=0.02)

    def test_categorical_respects_zero_weights(self):
        """Categories with zero weight are never drawn."""
        values = draws(sample_categorical, 5_000, [0.0, 1.0, 0.0, 3.0])
        assert set(values.tolist()) == {1, 3}
        assert np.isclose(np.mean(values == 3), 0.75, atol=0.03)


class TestWeightHelpers:
    """Tests for equal_weights and normalize_weights."""

    def test_equal_weights(self):
        assert equal_weights(4) == [0.25] * 4

    @pytest.mark.parametrize("count", [0, -1, 2.0])
    def test_equal_weights_rejects_bad_count(self, count):
        with pytest.raises(ValueError, match="positive integer"):
            equal_weights(count)

    def test_normalize_weights(self):
        assert normalize_weights([1, 1, 2]) == [0.25, 0.25, 0.5]


class TestStrategyTable:
    """Tests for STRATEGIES."""

    def test_every_kind_has_a_strategy(self):
        """All 27 built-in kinds map to a named strategy."""
        assert len(STRATEGIES) == 27
        for name, strategy in STRATEGIES.items():
            assert isinstance(strategy, SamplingStrategy)
            assert strategy.name == name

    def test_with_sample_keeps_predicate(self):
        """Replacing the algorithm keeps the validity predicate."""
        constant = STRATEGIES["normal"].with_sample(lambda gen, mu, sigma: mu, name="constant")
        assert constant.name == "constant"
        assert constant.is_valid is STRATEGIES["normal"].is_valid
        assert constant.sample(XorShift128Generator(1), 3.0, 1.0) == 3.0
