"""
test_types.py - Tests for Core Data Types and Errors

Tests cover:
- SamplingStrategy copies and DistributionKind values
- DistributionSummary (std, as_dict, immutability)
- MomentValidationResult and GoodnessOfFitResult verdicts
- Capability protocols
- Exception hierarchy and messages
"""

import math

import pytest

from variate_lab import (
    Categorical,
    DistributionKind,
    DistributionSummary,
    Exponential,
    GoodnessOfFitResult,
    HasAlpha,
    HasLambda,
    HasMu,
    HasSigma,
    HasWeights,
    InvalidGeneratorError,
    InvalidParameterError,
    MomentValidationResult,
    Normal,
    SamplingStrategy,
    UndefinedStatisticError,
    VariateLabError,
    XorShift128Generator,
)
from variate_lab.types import Generator


class TestSamplingStrategy:
    """Tests for SamplingStrategy and DistributionKind."""

    def test_kind_values(self):
        assert DistributionKind.CONTINUOUS == "continuous"
        assert DistributionKind("discrete") is DistributionKind.DISCRETE

    def test_with_sample_keeps_predicate(self):
        base = SamplingStrategy(sample=lambda gen: 0.0, is_valid=lambda: False, name="base")
        swapped = base.with_sample(lambda gen: 1.0)
        assert swapped.is_valid is base.is_valid
        assert swapped.sample(None) == 1.0
        assert swapped.name == "base"

    def test_with_is_valid_renames(self):
        base = SamplingStrategy(sample=lambda gen: 0.0, is_valid=lambda: False)
        relaxed = base.with_is_valid(lambda: True, name="relaxed")
        assert relaxed.sample is base.sample
        assert relaxed.is_valid()
        assert relaxed.name == "relaxed"
        assert base.name == "default"

    def test_frozen(self):
        base = SamplingStrategy(sample=lambda gen: 0.0, is_valid=lambda: True)
        with pytest.raises(AttributeError):
            base.name = "other"


class TestDistributionSummary:
    """Tests for DistributionSummary."""

    def test_std(self):
        summary = DistributionSummary(name="x", parameters={}, minimum=0.0, maximum=1.0, variance=4.0)
        assert summary.std == 2.0

    def test_std_undefined(self):
        assert DistributionSummary(name="x", parameters={}, minimum=0.0, maximum=1.0).std is None
        infinite = DistributionSummary(name="x", parameters={}, minimum=0.0, maximum=1.0, variance=math.inf)
        assert infinite.std is None

    def test_as_dict(self):
        summary = Normal(mu=1.0, sigma=2.0).summary()
        data = summary.as_dict()
        assert data["parameters"] == {"mu": 1.0, "sigma": 2.0}
        assert data["mode"] == [1.0]
        assert data["variance"] == 4.0

    def test_frozen(self):
        summary = Normal().summary()
        with pytest.raises(AttributeError):
            summary.mean = 3.0


class TestResults:
    """Verdict properties of the diagnostic results."""

    def test_moment_result_passed(self):
        result = MomentValidationResult(
            name="normal",
            n_samples=100,
            expected={"mean": 0.0, "variance": 1.0},
            observed={"mean": 0.05, "variance": 1.5},
            relative_errors={"mean": 0.05, "variance": 0.5},
            tolerance=0.1,
        )
        assert not result.passed
        assert result.failures == {"variance": 0.5}
        assert tuple(result.skipped) == ()

    def test_moment_result_empty_passes(self):
        """Nothing to compare counts as a pass."""
        result = MomentValidationResult("cauchy", 10, {}, {}, {}, 0.1, ("mean", "variance"))
        assert result.passed

    def test_goodness_of_fit_passed(self):
        assert GoodnessOfFitResult("normal", 100, 0.05, 0.2).passed
        assert not GoodnessOfFitResult("normal", 100, 0.3, 0.001).passed
        assert GoodnessOfFitResult("normal", 100, 0.3, 0.001, alpha=0.0001).passed


class TestProtocols:
    """Structural capability checks."""

    def test_parameter_protocols(self):
        assert isinstance(Normal(), HasMu)
        assert isinstance(Normal(), HasSigma)
        assert not isinstance(Normal(), HasAlpha)
        assert isinstance(Exponential(), HasLambda)
        assert isinstance(Categorical(), HasWeights)

    def test_generator_protocol(self):
        assert isinstance(XorShift128Generator(1), Generator)
        assert not isinstance(object(), Generator)


class TestErrors:
    """Exception hierarchy and messages."""

    def test_hierarchy(self):
        assert issubclass(InvalidGeneratorError, VariateLabError)
        assert issubclass(InvalidGeneratorError, TypeError)
        assert issubclass(InvalidParameterError, ValueError)
        assert issubclass(UndefinedStatisticError, ArithmeticError)

    def test_invalid_parameter_message(self):
        error = InvalidParameterError("gamma", {"alpha": -1.0})
        assert str(error) == "Given parameter (or parameters) are not valid. (gamma: alpha=-1.0)"

    def test_invalid_parameter_bare(self):
        assert str(InvalidParameterError()) == "Given parameter (or parameters) are not valid."

    def test_undefined_statistic_messages(self):
        assert str(UndefinedStatisticError("mode", "chi_square", for_params=True)) == (
            "Mode is undefined under given parameters."
        )
        assert str(UndefinedStatisticError("mean", "cauchy")) == "Mean is undefined for given distribution."
