"""
test_registry.py - Tests for the Distribution Registry and Factory

Tests cover:
- DistributionRegistry listing, lookup and registration
- DistributionFactory creation, parameter checks and samplers
- Generator sharing across factory products
"""

import numpy as np
import pytest

from variate_lab import (
    ContinuousDistribution,
    DistributionFactory,
    DistributionInfo,
    DistributionKind,
    DistributionRegistry,
    Gamma,
    InvalidParameterError,
    Normal,
    SamplingStrategy,
    XorShift128Generator,
)


class Constant(ContinuousDistribution):
    """Point mass at ``alpha``.

    Used to check custom registration.
    """

    name = "constant"
    parameters = ("alpha",)
    defaults = {"alpha": 0.0}
    default_strategy = SamplingStrategy(
        sample=lambda gen, alpha: alpha,
        is_valid=lambda alpha: alpha == alpha,
        name="constant",
    )

    minimum = property(lambda self: self.alpha)
    maximum = property(lambda self: self.alpha)
    mean = property(lambda self: self.alpha)
    median = property(lambda self: self.alpha)
    variance = property(lambda self: 0.0)
    mode = property(lambda self: (self.alpha,))


class TestDistributionRegistry:
    """Tests for DistributionRegistry."""

    def test_list_distributions(self, registry):
        """All 27 built-ins are listed, sorted."""
        names = registry.list_distributions()
        assert len(names) == 27
        assert names == sorted(names)
        assert "normal" in names
        assert "categorical" in names

    def test_list_by_kind(self, registry):
        discrete = registry.list_distributions(DistributionKind.DISCRETE)
        assert discrete == ["bernoulli", "binomial", "categorical", "discrete_uniform", "geometric", "poisson"]
        assert len(registry.list_distributions(DistributionKind.CONTINUOUS)) == 21

    def test_get_distribution(self, registry):
        info = registry.get("gamma")
        assert isinstance(info, DistributionInfo)
        assert info.cls is Gamma
        assert info.parameters == ("alpha", "theta")
        assert info.kind == DistributionKind.CONTINUOUS
        assert info.strategy is Gamma.default_strategy

    def test_get_case_insensitive(self, registry):
        assert registry.get("NORMAL").name == registry.get("Normal").name == "normal"

    def test_get_unknown_raises(self, registry):
        with pytest.raises(KeyError, match="Unknown distribution"):
            registry.get("nonexistent")

    def test_contains(self, registry):
        assert "Poisson" in registry
        assert "zipf" not in registry

    def test_register_custom(self, registry):
        """A registered subclass is listed with its docstring summary."""
        registry.register(Constant)
        assert "constant" in registry
        info = registry.get("constant")
        assert info.description == "Point mass at ``alpha``."
        assert info.defaults == {"alpha": 0.0}

    def test_register_with_alias(self, registry):
        registry.register(Constant, name="Point", description="Degenerate")
        assert registry.get("point").description == "Degenerate"

    def test_register_rejects_non_distribution(self, registry):
        with pytest.raises(TypeError, match="AbstractDistribution subclass"):
            registry.register(dict)

    def test_get_info(self, registry):
        info = registry.get_info("poisson")
        assert info["class"] == "Poisson"
        assert info["kind"] == "discrete"
        assert info["parameters"] == ("lambda_",)
        assert info["defaults"] == {"lambda_": 1.0}
        assert info["description"]


class TestDistributionFactory:
    """Tests for DistributionFactory."""

    def test_create_with_defaults(self, factory):
        dist = factory.create("beta")
        assert dist.parameter_values == {"alpha": 1.0, "beta": 1.0}

    def test_create_with_params(self, factory):
        dist = factory.create("gamma", alpha=2.0, theta=0.5)
        assert isinstance(dist, Gamma)
        assert dist.mean == 1.0

    def test_create_accepts_reserved_word(self, factory):
        """'lambda' is accepted in place of 'lambda_'."""
        dist = factory.create("poisson", **{"lambda": 6.0})
        assert dist.lambda_ == 6.0

    def test_products_share_generator(self, factory, gen):
        a = factory.create("normal")
        b = factory.create("exponential")
        assert a.generator is gen
        assert b.generator is gen

    def test_unknown_parameter(self, factory):
        with pytest.raises(ValueError, match="accepts parameters"):
            factory.create("normal", mean=0.0)

    def test_invalid_value(self, factory):
        with pytest.raises(InvalidParameterError):
            factory.create("normal", sigma=-1.0)

    def test_unknown_distribution(self, factory):
        with pytest.raises(KeyError):
            factory.create("zipf")

    def test_sampler(self, factory):
        sampler = factory.sampler("normal", mu=5.0, sigma=0.1)
        values = sampler(1_000)
        assert values.shape == (1_000,)
        assert np.isclose(values.mean(), 5.0, atol=0.02)
        assert sampler((2, 3)).shape == (2, 3)

    def test_sampler_reproducible(self):
        """Factories with equally seeded generators give equal samplers."""
        first = DistributionFactory(XorShift128Generator(9)).sampler("laplace")(200)
        second = DistributionFactory(XorShift128Generator(9)).sampler("laplace")(200)
        np.testing.assert_array_equal(first, second)

    def test_custom_registry(self):
        registry = DistributionRegistry()
        registry.register(Constant)
        factory = DistributionFactory(XorShift128Generator(1), registry=registry)
        assert factory.registry is registry
        assert factory.create("constant", alpha=3.0).next_double() == 3.0
        assert "constant" in factory.list_distributions(DistributionKind.CONTINUOUS)

    def test_default_generator(self):
        factory = DistributionFactory()
        assert isinstance(factory.generator, XorShift128Generator)
        assert isinstance(factory.create("normal"), Normal)
