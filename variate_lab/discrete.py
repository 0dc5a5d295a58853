"""
discrete.py - Discrete Distributions

Integer-valued counterparts of ``continuous``: every class samples with
``next()`` (an int) and also supports ``next_double()`` and ``sample()``,
which return the same draws as floats and as an int64 array.

Example Usage:
-------------
    >>> from variate_lab.discrete import Categorical, Poisson
    >>> die = Categorical(weights=[1, 1, 1, 1, 1, 1], seed=5)
    >>> 0 <= die.next() <= 5
    True
    >>> Poisson(lambda_=3.0, seed=5).mode
    (2.0, 3.0)
"""

from __future__ import annotations

import bisect
import itertools
import math
import numbers
from collections.abc import Iterable
from typing import Any, Optional, Sequence, Tuple

from .distributions import AUTO, DiscreteDistribution, parameter
from .errors import InvalidParameterError
from .samplers import STRATEGIES, equal_weights, normalize_weights
from .types import SamplingStrategy


class Bernoulli(DiscreteDistribution):
    """Single trial succeeding (1) with probability ``alpha``."""

    name = "bernoulli"
    parameters = ("alpha",)
    defaults = {"alpha": 0.5}
    default_strategy = STRATEGIES[name]

    alpha = parameter("alpha", "Success probability, in [0, 1].")

    def __init__(self, generator: Any = AUTO, alpha: float = 0.5, *,
                 seed: Optional[int] = None, strategy: Optional[SamplingStrategy] = None):
        super().__init__(generator, seed=seed, strategy=strategy, alpha=alpha)

    minimum = property(lambda self: 0.0)
    maximum = property(lambda self: 1.0)

    @property
    def mean(self) -> float:
        return self.alpha

    @property
    def median(self) -> float:
        self._undefined("median", for_params=False)

    @property
    def variance(self) -> float:
        return self.alpha * (1.0 - self.alpha)

    @property
    def mode(self) -> Tuple[float, ...]:
        if self.alpha > 0.5:
            return (1.0,)
        if self.alpha < 0.5:
            return (0.0,)
        return (0.0, 1.0)


class Binomial(DiscreteDistribution):
    """Number of successes in ``beta`` trials with success probability ``alpha``."""

    name = "binomial"
    parameters = ("alpha", "beta")
    integer_parameters = frozenset({"beta"})
    defaults = {"alpha": 0.5, "beta": 1}
    default_strategy = STRATEGIES[name]

    alpha = parameter("alpha", "Success probability, in [0, 1].")
    beta = parameter("beta", "Number of trials, integer >= 0.")

    def __init__(self, generator: Any = AUTO, alpha: float = 0.5, beta: int = 1, *,
                 seed: Optional[int] = None, strategy: Optional[SamplingStrategy] = None):
        super().__init__(generator, seed=seed, strategy=strategy, alpha=alpha, beta=beta)

    minimum = property(lambda self: 0.0)

    @property
    def maximum(self) -> float:
        return float(self.beta)

    @property
    def mean(self) -> float:
        return self.alpha * self.beta

    @property
    def median(self) -> float:
        self._undefined("median", for_params=False)

    @property
    def variance(self) -> float:
        return self.alpha * (1.0 - self.alpha) * self.beta

    @property
    def mode(self) -> Tuple[float, ...]:
        # alpha == 1 would otherwise give beta + 1.
        return (float(min(math.floor(self.alpha * (self.beta + 1.0)), self.beta)),)


class Categorical(DiscreteDistribution):
    """
    Draws a zero-based category index with probability proportional to its
    weight.

    Parameters
    ----------
    generator : Generator, optional
        Uniform source.
    weights : sequence of float, optional
        Non-negative finite weights with a positive sum. They need not sum
        to one; ``probabilities`` holds the normalised values.
    value_count : int, optional
        Shortcut for ``value_count`` equally likely categories. Used only
        when ``weights`` is omitted; the default is three categories.
    """

    name = "categorical"
    parameters = ("weights",)
    DEFAULT_VALUE_COUNT = 3
    defaults = {"weights": tuple(equal_weights(DEFAULT_VALUE_COUNT))}
    default_strategy = STRATEGIES[name]

    weights = parameter("weights", "Category weights.")

    def __init__(self, generator: Any = AUTO, weights: Optional[Sequence[float]] = None, *,
                 value_count: Optional[int] = None, seed: Optional[int] = None,
                 strategy: Optional[SamplingStrategy] = None):
        if weights is None:
            weights = equal_weights(self.DEFAULT_VALUE_COUNT if value_count is None else value_count)
        elif value_count is not None:
            raise TypeError("Pass either weights or value_count, not both.")
        super().__init__(generator, seed=seed, strategy=strategy, weights=weights)

    def _coerce(self, name: str, value: Any) -> Any:
        if name != "weights":
            return super()._coerce(name, value)
        if isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
            raise InvalidParameterError(self.name, {name: value}, "Weights must be a sequence of numbers.")
        values = tuple(value)
        if any(isinstance(w, bool) or not isinstance(w, numbers.Real) for w in values):
            raise InvalidParameterError(self.name, {name: value}, "Weights must be a sequence of numbers.")
        return tuple(float(w) for w in values)

    @property
    def value_count(self) -> int:
        return len(self.weights)

    @property
    def probabilities(self) -> Tuple[float, ...]:
        """Weights scaled to sum to one."""
        return tuple(normalize_weights(self.weights))

    minimum = property(lambda self: 0.0)

    @property
    def maximum(self) -> float:
        return float(self.value_count - 1)

    @property
    def mean(self) -> float:
        return math.fsum(i * p for i, p in enumerate(self.probabilities))

    @property
    def median(self) -> float:
        cdf = list(itertools.accumulate(self.probabilities))
        return float(min(bisect.bisect_left(cdf, 0.5), self.value_count - 1))

    @property
    def variance(self) -> float:
        mean = self.mean
        return math.fsum(p * (i - mean) * (i - mean) for i, p in enumerate(self.probabilities))

    @property
    def mode(self) -> Tuple[float, ...]:
        weights = self.weights
        return (float(weights.index(max(weights))),)


class DiscreteUniform(DiscreteDistribution):
    """Integers in [alpha, beta], each equally likely."""

    name = "discrete_uniform"
    parameters = ("alpha", "beta")
    integer_parameters = frozenset({"alpha", "beta"})
    defaults = {"alpha": 0, "beta": 1}
    default_strategy = STRATEGIES[name]

    alpha = parameter("alpha", "Lowest value.")
    beta = parameter("beta", "Highest value, below 2**31 - 1.")

    def __init__(self, generator: Any = AUTO, alpha: int = 0, beta: int = 1, *,
                 seed: Optional[int] = None, strategy: Optional[SamplingStrategy] = None):
        super().__init__(generator, seed=seed, strategy=strategy, alpha=alpha, beta=beta)

    @property
    def minimum(self) -> float:
        return float(self.alpha)

    @property
    def maximum(self) -> float:
        return float(self.beta)

    @property
    def mean(self) -> float:
        return self.alpha / 2.0 + self.beta / 2.0

    @property
    def median(self) -> float:
        return self.alpha / 2.0 + self.beta / 2.0

    @property
    def variance(self) -> float:
        width = self.beta - self.alpha + 1.0
        return (width * width - 1.0) / 12.0

    @property
    def mode(self) -> Tuple[float, ...]:
        self._undefined("mode", for_params=False)


class Geometric(DiscreteDistribution):
    """Number of trials up to and including the first success."""

    name = "geometric"
    parameters = ("alpha",)
    defaults = {"alpha": 0.5}
    default_strategy = STRATEGIES[name]

    alpha = parameter("alpha", "Success probability, in (0, 1].")

    def __init__(self, generator: Any = AUTO, alpha: float = 0.5, *,
                 seed: Optional[int] = None, strategy: Optional[SamplingStrategy] = None):
        super().__init__(generator, seed=seed, strategy=strategy, alpha=alpha)

    minimum = property(lambda self: 1.0)
    maximum = property(lambda self: math.inf)

    @property
    def mean(self) -> float:
        return 1.0 / self.alpha

    @property
    def median(self) -> float:
        self._undefined("median", for_params=False)

    @property
    def variance(self) -> float:
        return (1.0 - self.alpha) / (self.alpha * self.alpha)

    @property
    def mode(self) -> Tuple[float, ...]:
        return (1.0,)


class Poisson(DiscreteDistribution):
    """Number of events in a unit interval at rate ``lambda_``."""

    name = "poisson"
    parameters = ("lambda_",)
    defaults = {"lambda_": 1.0}
    default_strategy = STRATEGIES[name]

    lambda_ = parameter("lambda_", "Rate, > 0.")

    def __init__(self, generator: Any = AUTO, lambda_: float = 1.0, *,
                 seed: Optional[int] = None, strategy: Optional[SamplingStrategy] = None):
        super().__init__(generator, seed=seed, strategy=strategy, lambda_=lambda_)

    minimum = property(lambda self: 0.0)
    maximum = property(lambda self: math.inf)

    @property
    def mean(self) -> float:
        return self.lambda_

    @property
    def median(self) -> float:
        self._undefined("median", for_params=False)

    @property
    def variance(self) -> float:
        return self.lambda_

    @property
    def mode(self) -> Tuple[float, ...]:
        lam = self.lambda_
        if lam == math.floor(lam):
            return (lam - 1.0, lam)
        return (float(math.floor(lam)),)


DISCRETE_DISTRIBUTIONS = (
    Bernoulli,
    Binomial,
    Categorical,
    DiscreteUniform,
    Geometric,
    Poisson,
)
