"""
test_variates.py - Tests for the Variates Facade and Iteration Helpers

Tests cover:
- One-off draws with defaults and explicit parameters
- Eager validation of draws and streams
- Generator passthroughs
- Module-level iterators, choice and choices
"""

from itertools import islice

import numpy as np
import pytest

from variate_lab import (
    Categorical,
    InvalidGeneratorError,
    InvalidParameterError,
    LabConfig,
    Normal,
    Poisson,
    Variates,
    XorShift128Generator,
    booleans,
    choice,
    choices,
    distributed_doubles,
    distributed_integers,
    doubles,
    integers,
    unsigned_integers,
)

CONTINUOUS_METHODS = [
    "beta", "beta_prime", "cauchy", "chi", "chi_square", "continuous_uniform",
    "erlang", "exponential", "fisher_snedecor", "fisher_tippett", "gamma",
    "laplace", "logistic", "lognormal", "normal", "pareto", "power",
    "rayleigh", "students_t", "triangular", "weibull",
]
DISCRETE_METHODS = ["bernoulli", "binomial", "categorical", "discrete_uniform", "geometric", "poisson"]


@pytest.fixture
def variates():
    return Variates(seed=42)


class TestVariates:
    """Per-call draws through the facade."""

    @pytest.mark.parametrize("method", CONTINUOUS_METHODS)
    def test_continuous_defaults(self, variates, method):
        assert isinstance(getattr(variates, method)(), float)

    @pytest.mark.parametrize("method", DISCRETE_METHODS)
    def test_discrete_defaults(self, variates, method):
        assert isinstance(getattr(variates, method)(), int)

    def test_matches_distribution_object(self):
        """A facade draw equals the first draw of the matching object."""
        assert Variates(seed=5).normal(2.0, 3.0) == Normal(mu=2.0, sigma=3.0, seed=5).next_double()
        assert Variates(seed=5).poisson(4.0) == Poisson(lambda_=4.0, seed=5).next()

    def test_invalid_parameters(self, variates):
        with pytest.raises(InvalidParameterError) as excinfo:
            variates.gamma(-1.0, 1.0)
        assert excinfo.value.parameters == {"alpha": -1.0, "theta": 1.0}

    def test_stream_validates_eagerly(self, variates):
        """Bad parameters fail when the stream is requested, not on first use."""
        with pytest.raises(InvalidParameterError):
            variates.exponential_samples(0.0)

    def test_stream_values(self, variates):
        values = list(islice(variates.continuous_uniform_samples(3.0, 4.0), 100))
        assert len(values) == 100
        assert all(3.0 <= v < 4.0 for v in values)

    def test_categorical_forms(self, variates):
        assert variates.categorical([0.0, 0.0, 1.0]) == 2
        assert 0 <= variates.categorical(value_count=4) < 4
        with pytest.raises(TypeError):
            variates.categorical([1.0], value_count=1)
        stream = variates.categorical_samples([1.0, 0.0])
        assert set(islice(stream, 50)) == {0}

    def test_categorical_matches_object(self):
        weights = [0.2, 0.5, 0.3]
        facade = [Variates(seed=8).categorical(weights) for _ in range(1)]
        assert facade == [Categorical(weights=weights, seed=8).next()]

    def test_none_generator_rejected(self):
        with pytest.raises(InvalidGeneratorError):
            Variates(None)

    def test_from_config(self):
        variates = Variates.from_config(LabConfig(generator="nr3", seed=11))
        assert variates.generator.name == "nr3"
        assert variates.seed == 11


class TestPassthroughs:
    """Uniform helpers forwarded to the generator."""

    def test_reset_replays(self, variates):
        assert variates.can_reset
        first = [variates.normal() for _ in range(10)]
        assert variates.reset()
        assert [variates.normal() for _ in range(10)] == first

    def test_reset_with_seed(self, variates):
        variates.reset(3)
        assert variates.seed == 3

    def test_uniform_helpers(self, variates):
        assert 0 <= variates.next(10) < 10
        assert 0 <= variates.next_inclusive_max_value() <= 2**31 - 1
        assert 0.0 <= variates.next_double() < 1.0
        assert 5 <= variates.next_uint(5, 9) < 9
        assert 0 <= variates.next_uint_inclusive_max_value() <= 2**32 - 1
        assert isinstance(variates.next_boolean(), bool)
        buffer = bytearray(8)
        variates.next_bytes(buffer)
        assert len(buffer) == 8


class TestIterationHelpers:
    """Module-level generator functions."""

    def test_doubles(self, gen):
        values = list(islice(doubles(gen, 2.0, 3.0), 200))
        assert all(2.0 <= v < 3.0 for v in values)

    def test_doubles_validate_bounds(self, gen):
        with pytest.raises(ValueError):
            next(doubles(gen, 3.0, 2.0))

    def test_integers(self, gen):
        values = list(islice(integers(gen, 1, 7), 1_000))
        assert set(values) == {1, 2, 3, 4, 5, 6}

    def test_unsigned_integers(self, gen):
        values = list(islice(unsigned_integers(gen, 10), 500))
        assert min(values) >= 0
        assert max(values) < 10

    def test_booleans(self, gen):
        values = list(islice(booleans(gen), 1_000))
        assert set(values) == {True, False}

    def test_distributed_doubles(self, gen):
        values = list(islice(distributed_doubles(Poisson(gen, lambda_=3.0)), 20))
        assert all(isinstance(v, float) for v in values)

    def test_distributed_integers(self, gen):
        values = list(islice(distributed_integers(Poisson(gen, lambda_=3.0)), 20))
        assert all(isinstance(v, int) for v in values)

    def test_distributed_integers_requires_discrete(self, gen):
        with pytest.raises(TypeError):
            distributed_integers(Normal(gen))


class TestChoice:
    """choice and choices."""

    def test_choice_returns_member(self, gen):
        items = ["a", "b", "c"]
        assert all(choice(gen, items) in items for _ in range(50))

    def test_choice_empty(self, gen):
        with pytest.raises(ValueError, match="empty"):
            choice(gen, [])

    def test_choices_cover_items(self, gen):
        picked = list(islice(choices(gen, "xyz"), 300))
        assert set(picked) == {"x", "y", "z"}

    def test_choices_empty_fails_eagerly(self, gen):
        with pytest.raises(ValueError):
            choices(gen, ())

    def test_choice_is_uniform(self, gen):
        counts = np.bincount([choice(gen, range(4)) for _ in range(8_000)], minlength=4)
        assert np.allclose(counts / 8_000, 0.25, atol=0.02)
