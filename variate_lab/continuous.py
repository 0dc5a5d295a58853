"""
continuous.py - Continuous Distributions

Each class binds a generator to one continuous sampler of ``samplers`` and
exposes the closed-form statistics of the distribution. Statistics without
a value under the current parameters raise UndefinedStatisticError.

Example Usage:
-------------
    >>> from variate_lab.continuous import Gamma, ChiSquare
    >>> gamma = Gamma(alpha=0.5, theta=1.0, seed=11)
    >>> draws = gamma.sample(10_000)
    >>> bool((draws >= 0).all())
    True
    >>> ChiSquare(alpha=1, seed=11).mode
    Traceback (most recent call last):
    ...
    variate_lab.errors.UndefinedStatisticError: Mode is undefined under given parameters.
"""

from __future__ import annotations

import math
from typing import Any, Optional, Tuple

from .computation import exp_or_inf, lanczos_gamma, lanczos_log_gamma, pow_or_inf, square
from .distributions import AUTO, ContinuousDistribution, parameter
from .samplers import STRATEGIES
from .types import SamplingStrategy

# Euler-Mascheroni constant.
EULER_GAMMA = 0.5772156649015329


class ContinuousUniform(ContinuousDistribution):
    """Uniform distribution on [alpha, beta)."""

    name = "continuous_uniform"
    parameters = ("alpha", "beta")
    defaults = {"alpha": 0.0, "beta": 1.0}
    default_strategy = STRATEGIES[name]

    alpha = parameter("alpha", "Lower bound.")
    beta = parameter("beta", "Upper bound.")

    def __init__(self, generator: Any = AUTO, alpha: float = 0.0, beta: float = 1.0, *,
                 seed: Optional[int] = None, strategy: Optional[SamplingStrategy] = None):
        super().__init__(generator, seed=seed, strategy=strategy, alpha=alpha, beta=beta)

    @property
    def minimum(self) -> float:
        return self.alpha

    @property
    def maximum(self) -> float:
        return self.beta

    @property
    def mean(self) -> float:
        return self.alpha / 2.0 + self.beta / 2.0

    @property
    def median(self) -> float:
        return self.alpha / 2.0 + self.beta / 2.0

    @property
    def variance(self) -> float:
        return square(self.beta - self.alpha) / 12.0

    @property
    def mode(self) -> Tuple[float, ...]:
        self._undefined("mode", for_params=False)


class Normal(ContinuousDistribution):
    """
    Normal (Gaussian) distribution with location ``mu`` and scale ``sigma``.

    Sampled with the Marsaglia polar method.
    """

    name = "normal"
    parameters = ("mu", "sigma")
    defaults = {"mu": 0.0, "sigma": 1.0}
    default_strategy = STRATEGIES[name]

    mu = parameter("mu", "Mean of the distribution.")
    sigma = parameter("sigma", "Standard deviation, > 0.")

    def __init__(self, generator: Any = AUTO, mu: float = 0.0, sigma: float = 1.0, *,
                 seed: Optional[int] = None, strategy: Optional[SamplingStrategy] = None):
        super().__init__(generator, seed=seed, strategy=strategy, mu=mu, sigma=sigma)

    minimum = property(lambda self: -math.inf)
    maximum = property(lambda self: math.inf)

    @property
    def mean(self) -> float:
        return self.mu

    @property
    def median(self) -> float:
        return self.mu

    @property
    def variance(self) -> float:
        return self.sigma * self.sigma

    @property
    def mode(self) -> Tuple[float, ...]:
        return (self.mu,)


class Exponential(ContinuousDistribution):
    """Exponential distribution with rate ``lambda_``."""

    name = "exponential"
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
        return 1.0 / self.lambda_

    @property
    def median(self) -> float:
        return math.log(2.0) / self.lambda_

    @property
    def variance(self) -> float:
        return 1.0 / (self.lambda_ * self.lambda_)

    @property
    def mode(self) -> Tuple[float, ...]:
        return (0.0,)


class Gamma(ContinuousDistribution):
    """Gamma distribution with shape ``alpha`` and scale ``theta``."""

    name = "gamma"
    parameters = ("alpha", "theta")
    defaults = {"alpha": 1.0, "theta": 1.0}
    default_strategy = STRATEGIES[name]

    alpha = parameter("alpha", "Shape, > 0.")
    theta = parameter("theta", "Scale, > 0.")

    def __init__(self, generator: Any = AUTO, alpha: float = 1.0, theta: float = 1.0, *,
                 seed: Optional[int] = None, strategy: Optional[SamplingStrategy] = None):
        super().__init__(generator, seed=seed, strategy=strategy, alpha=alpha, theta=theta)

    minimum = property(lambda self: 0.0)
    maximum = property(lambda self: math.inf)

    @property
    def mean(self) -> float:
        return self.alpha * self.theta

    @property
    def median(self) -> float:
        self._undefined("median", for_params=False)

    @property
    def variance(self) -> float:
        return self.alpha * self.theta * self.theta

    @property
    def mode(self) -> Tuple[float, ...]:
        if self.alpha >= 1.0:
            return ((self.alpha - 1.0) * self.theta,)
        self._undefined("mode")


class Beta(ContinuousDistribution):
    """Beta distribution on [0, 1], sampled as a ratio of two gamma draws."""

    name = "beta"
    parameters = ("alpha", "beta")
    defaults = {"alpha": 1.0, "beta": 1.0}
    default_strategy = STRATEGIES[name]

    alpha = parameter("alpha", "First shape, > 0.")
    beta = parameter("beta", "Second shape, > 0.")

    def __init__(self, generator: Any = AUTO, alpha: float = 1.0, beta: float = 1.0, *,
                 seed: Optional[int] = None, strategy: Optional[SamplingStrategy] = None):
        super().__init__(generator, seed=seed, strategy=strategy, alpha=alpha, beta=beta)

    minimum = property(lambda self: 0.0)
    maximum = property(lambda self: 1.0)

    @property
    def mean(self) -> float:
        return self.alpha / (self.alpha + self.beta)

    @property
    def median(self) -> float:
        self._undefined("median", for_params=False)

    @property
    def variance(self) -> float:
        a, b = self.alpha, self.beta
        return a * b / ((a + b) * (a + b) * (a + b + 1.0))

    @property
    def mode(self) -> Tuple[float, ...]:
        a, b = self.alpha, self.beta
        if a > 1.0 and b > 1.0:
            return ((a - 1.0) / (a + b - 2.0),)
        if a < 1.0 and b < 1.0:
            return (0.0, 1.0)
        if (a < 1.0 and b >= 1.0) or (a == 1.0 and b > 1.0):
            return (0.0,)
        if (a >= 1.0 and b < 1.0) or (a > 1.0 and b == 1.0):
            return (1.0,)
        self._undefined("mode")


class BetaPrime(ContinuousDistribution):
    """Beta prime distribution: ``B / (1 - B)`` for B ~ Beta(alpha, beta)."""

    name = "beta_prime"
    parameters = ("alpha", "beta")
    defaults = {"alpha": 2.0, "beta": 2.0}
    default_strategy = STRATEGIES[name]

    alpha = parameter("alpha", "First shape, > 1.")
    beta = parameter("beta", "Second shape, > 1.")

    def __init__(self, generator: Any = AUTO, alpha: float = 2.0, beta: float = 2.0, *,
                 seed: Optional[int] = None, strategy: Optional[SamplingStrategy] = None):
        super().__init__(generator, seed=seed, strategy=strategy, alpha=alpha, beta=beta)

    minimum = property(lambda self: 0.0)
    maximum = property(lambda self: math.inf)

    @property
    def mean(self) -> float:
        return self.alpha / (self.beta - 1.0)

    @property
    def median(self) -> float:
        self._undefined("median", for_params=False)

    @property
    def variance(self) -> float:
        a, b = self.alpha, self.beta
        if b > 2.0:
            return a * (a + b - 1.0) / ((b - 1.0) * (b - 1.0) * (b - 2.0))
        self._undefined("variance")

    @property
    def mode(self) -> Tuple[float, ...]:
        return ((self.alpha - 1.0) / (self.beta + 1.0),)


class Cauchy(ContinuousDistribution):
    """Cauchy distribution with location ``alpha`` and scale ``gamma``."""

    name = "cauchy"
    parameters = ("alpha", "gamma")
    defaults = {"alpha": 1.0, "gamma": 1.0}
    default_strategy = STRATEGIES[name]

    alpha = parameter("alpha", "Location.")
    gamma = parameter("gamma", "Scale, > 0.")

    def __init__(self, generator: Any = AUTO, alpha: float = 1.0, gamma: float = 1.0, *,
                 seed: Optional[int] = None, strategy: Optional[SamplingStrategy] = None):
        super().__init__(generator, seed=seed, strategy=strategy, alpha=alpha, gamma=gamma)

    minimum = property(lambda self: -math.inf)
    maximum = property(lambda self: math.inf)

    @property
    def mean(self) -> float:
        self._undefined("mean", for_params=False)

    @property
    def median(self) -> float:
        return self.alpha

    @property
    def variance(self) -> float:
        self._undefined("variance", for_params=False)

    @property
    def mode(self) -> Tuple[float, ...]:
        return (self.alpha,)


class Chi(ContinuousDistribution):
    """Chi distribution with ``alpha`` degrees of freedom."""

    name = "chi"
    parameters = ("alpha",)
    integer_parameters = frozenset({"alpha"})
    defaults = {"alpha": 1}
    default_strategy = STRATEGIES[name]

    alpha = parameter("alpha", "Degrees of freedom, integer > 0.")

    def __init__(self, generator: Any = AUTO, alpha: int = 1, *,
                 seed: Optional[int] = None, strategy: Optional[SamplingStrategy] = None):
        super().__init__(generator, seed=seed, strategy=strategy, alpha=alpha)

    minimum = property(lambda self: 0.0)
    maximum = property(lambda self: math.inf)

    @property
    def mean(self) -> float:
        # Ratio of gammas through their logarithms; the gammas themselves
        # overflow well before the ratio does.
        k = self.alpha
        return math.sqrt(2.0) * math.exp(lanczos_log_gamma((k + 1.0) / 2.0) - lanczos_log_gamma(k / 2.0))

    @property
    def median(self) -> float:
        self._undefined("median", for_params=False)

    @property
    def variance(self) -> float:
        return self.alpha - square(self.mean)

    @property
    def mode(self) -> Tuple[float, ...]:
        return (math.sqrt(self.alpha - 1.0),)


class ChiSquare(ContinuousDistribution):
    """Chi-square distribution with ``alpha`` degrees of freedom."""

    name = "chi_square"
    parameters = ("alpha",)
    integer_parameters = frozenset({"alpha"})
    defaults = {"alpha": 1}
    default_strategy = STRATEGIES[name]

    alpha = parameter("alpha", "Degrees of freedom, integer > 0.")

    def __init__(self, generator: Any = AUTO, alpha: int = 1, *,
                 seed: Optional[int] = None, strategy: Optional[SamplingStrategy] = None):
        super().__init__(generator, seed=seed, strategy=strategy, alpha=alpha)

    minimum = property(lambda self: 0.0)
    maximum = property(lambda self: math.inf)

    @property
    def mean(self) -> float:
        return float(self.alpha)

    @property
    def median(self) -> float:
        # Wilson-Hilferty approximation.
        k = self.alpha
        return k * (1.0 - 2.0 / (9.0 * k)) ** 3

    @property
    def variance(self) -> float:
        return 2.0 * self.alpha

    @property
    def mode(self) -> Tuple[float, ...]:
        if self.alpha >= 2:
            return (self.alpha - 2.0,)
        self._undefined("mode")


class Erlang(ContinuousDistribution):
    """Erlang distribution: sum of ``alpha`` exponentials with rate ``lambda_``."""

    name = "erlang"
    parameters = ("alpha", "lambda_")
    integer_parameters = frozenset({"alpha"})
    defaults = {"alpha": 1, "lambda_": 1.0}
    default_strategy = STRATEGIES[name]

    alpha = parameter("alpha", "Shape, integer > 0.")
    lambda_ = parameter("lambda_", "Rate, > 0.")

    def __init__(self, generator: Any = AUTO, alpha: int = 1, lambda_: float = 1.0, *,
                 seed: Optional[int] = None, strategy: Optional[SamplingStrategy] = None):
        super().__init__(generator, seed=seed, strategy=strategy, alpha=alpha, lambda_=lambda_)

    minimum = property(lambda self: 0.0)
    maximum = property(lambda self: math.inf)

    @property
    def mean(self) -> float:
        return self.alpha / self.lambda_

    @property
    def median(self) -> float:
        self._undefined("median", for_params=False)

    @property
    def variance(self) -> float:
        return self.alpha / (self.lambda_ * self.lambda_)

    @property
    def mode(self) -> Tuple[float, ...]:
        return ((self.alpha - 1.0) / self.lambda_,)


class FisherSnedecor(ContinuousDistribution):
    """F distribution with ``alpha`` and ``beta`` degrees of freedom."""

    name = "fisher_snedecor"
    parameters = ("alpha", "beta")
    integer_parameters = frozenset({"alpha", "beta"})
    defaults = {"alpha": 1, "beta": 1}
    default_strategy = STRATEGIES[name]

    alpha = parameter("alpha", "Numerator degrees of freedom, integer > 0.")
    beta = parameter("beta", "Denominator degrees of freedom, integer > 0.")

    def __init__(self, generator: Any = AUTO, alpha: int = 1, beta: int = 1, *,
                 seed: Optional[int] = None, strategy: Optional[SamplingStrategy] = None):
        super().__init__(generator, seed=seed, strategy=strategy, alpha=alpha, beta=beta)

    minimum = property(lambda self: 0.0)
    maximum = property(lambda self: math.inf)

    @property
    def mean(self) -> float:
        b = self.beta
        if b > 2:
            return b / (b - 2.0)
        self._undefined("mean")

    @property
    def median(self) -> float:
        self._undefined("median", for_params=False)

    @property
    def variance(self) -> float:
        a, b = float(self.alpha), float(self.beta)
        if b > 4.0:
            return 2.0 * b * b * (a + b - 2.0) / a / ((b - 2.0) * (b - 2.0)) / (b - 4.0)
        self._undefined("variance")

    @property
    def mode(self) -> Tuple[float, ...]:
        a, b = float(self.alpha), float(self.beta)
        if a > 2.0:
            return ((a - 2.0) / a * b / (b + 2.0),)
        self._undefined("mode")


class FisherTippett(ContinuousDistribution):
    """Fisher-Tippett (Gumbel) distribution with scale ``alpha`` and location ``mu``."""

    name = "fisher_tippett"
    parameters = ("alpha", "mu")
    defaults = {"alpha": 1.0, "mu": 0.0}
    default_strategy = STRATEGIES[name]

    alpha = parameter("alpha", "Scale, > 0.")
    mu = parameter("mu", "Location.")

    def __init__(self, generator: Any = AUTO, alpha: float = 1.0, mu: float = 0.0, *,
                 seed: Optional[int] = None, strategy: Optional[SamplingStrategy] = None):
        super().__init__(generator, seed=seed, strategy=strategy, alpha=alpha, mu=mu)

    minimum = property(lambda self: -math.inf)
    maximum = property(lambda self: math.inf)

    @property
    def mean(self) -> float:
        return self.mu + self.alpha * EULER_GAMMA

    @property
    def median(self) -> float:
        return self.mu - self.alpha * math.log(math.log(2.0))

    @property
    def variance(self) -> float:
        return math.pi * math.pi / 6.0 * self.alpha * self.alpha

    @property
    def mode(self) -> Tuple[float, ...]:
        return (self.mu,)


class Laplace(ContinuousDistribution):
    """Laplace (double exponential) distribution with scale ``alpha`` and location ``mu``."""

    name = "laplace"
    parameters = ("alpha", "mu")
    defaults = {"alpha": 1.0, "mu": 0.0}
    default_strategy = STRATEGIES[name]

    alpha = parameter("alpha", "Scale, > 0.")
    mu = parameter("mu", "Location.")

    def __init__(self, generator: Any = AUTO, alpha: float = 1.0, mu: float = 0.0, *,
                 seed: Optional[int] = None, strategy: Optional[SamplingStrategy] = None):
        super().__init__(generator, seed=seed, strategy=strategy, alpha=alpha, mu=mu)

    minimum = property(lambda self: -math.inf)
    maximum = property(lambda self: math.inf)

    @property
    def mean(self) -> float:
        return self.mu

    @property
    def median(self) -> float:
        return self.mu

    @property
    def variance(self) -> float:
        return 2.0 * self.alpha * self.alpha

    @property
    def mode(self) -> Tuple[float, ...]:
        return (self.mu,)


class Logistic(ContinuousDistribution):
    """Logistic distribution with location ``mu`` and scale ``sigma``."""

    name = "logistic"
    parameters = ("mu", "sigma")
    defaults = {"mu": 0.0, "sigma": 1.0}
    default_strategy = STRATEGIES[name]

    mu = parameter("mu", "Location.")
    sigma = parameter("sigma", "Scale, > 0.")

    def __init__(self, generator: Any = AUTO, mu: float = 0.0, sigma: float = 1.0, *,
                 seed: Optional[int] = None, strategy: Optional[SamplingStrategy] = None):
        super().__init__(generator, seed=seed, strategy=strategy, mu=mu, sigma=sigma)

    minimum = property(lambda self: -math.inf)
    maximum = property(lambda self: math.inf)

    @property
    def mean(self) -> float:
        return self.mu

    @property
    def median(self) -> float:
        return self.mu

    @property
    def variance(self) -> float:
        return self.sigma * self.sigma * math.pi * math.pi / 3.0

    @property
    def mode(self) -> Tuple[float, ...]:
        return (self.mu,)


class Lognormal(ContinuousDistribution):
    """Distribution of ``exp(X)`` for X ~ Normal(mu, sigma)."""

    name = "lognormal"
    parameters = ("mu", "sigma")
    defaults = {"mu": 0.0, "sigma": 1.0}
    default_strategy = STRATEGIES[name]

    mu = parameter("mu", "Mean of the underlying normal.")
    sigma = parameter("sigma", "Standard deviation of the underlying normal, >= 0.")

    def __init__(self, generator: Any = AUTO, mu: float = 0.0, sigma: float = 1.0, *,
                 seed: Optional[int] = None, strategy: Optional[SamplingStrategy] = None):
        super().__init__(generator, seed=seed, strategy=strategy, mu=mu, sigma=sigma)

    minimum = property(lambda self: 0.0)
    maximum = property(lambda self: math.inf)

    @property
    def mean(self) -> float:
        return exp_or_inf(self.mu + 0.5 * square(self.sigma))

    @property
    def median(self) -> float:
        return exp_or_inf(self.mu)

    @property
    def variance(self) -> float:
        s2 = square(self.sigma)
        return (exp_or_inf(s2) - 1.0) * exp_or_inf(2.0 * self.mu + s2)

    @property
    def mode(self) -> Tuple[float, ...]:
        return (exp_or_inf(self.mu - square(self.sigma)),)


class Pareto(ContinuousDistribution):
    """Pareto distribution with scale ``alpha`` and shape ``beta``."""

    name = "pareto"
    parameters = ("alpha", "beta")
    defaults = {"alpha": 1.0, "beta": 1.0}
    default_strategy = STRATEGIES[name]

    alpha = parameter("alpha", "Scale (minimum value), > 0.")
    beta = parameter("beta", "Shape, > 0.")

    def __init__(self, generator: Any = AUTO, alpha: float = 1.0, beta: float = 1.0, *,
                 seed: Optional[int] = None, strategy: Optional[SamplingStrategy] = None):
        super().__init__(generator, seed=seed, strategy=strategy, alpha=alpha, beta=beta)

    @property
    def minimum(self) -> float:
        return self.alpha

    maximum = property(lambda self: math.inf)

    @property
    def mean(self) -> float:
        if self.beta > 1.0:
            return self.alpha * self.beta / (self.beta - 1.0)
        self._undefined("mean")

    @property
    def median(self) -> float:
        return self.alpha * pow_or_inf(2.0, 1.0 / self.beta)

    @property
    def variance(self) -> float:
        a, b = self.alpha, self.beta
        if b > 2.0:
            return b * a * a / ((b - 1.0) * (b - 1.0)) / (b - 2.0)
        self._undefined("variance")

    @property
    def mode(self) -> Tuple[float, ...]:
        return (self.alpha,)


class Power(ContinuousDistribution):
    """Power distribution on [0, 1/beta] with shape ``alpha``."""

    name = "power"
    parameters = ("alpha", "beta")
    defaults = {"alpha": 1.0, "beta": 1.0}
    default_strategy = STRATEGIES[name]

    alpha = parameter("alpha", "Shape, > 0.")
    beta = parameter("beta", "Inverse of the upper bound, > 0.")

    def __init__(self, generator: Any = AUTO, alpha: float = 1.0, beta: float = 1.0, *,
                 seed: Optional[int] = None, strategy: Optional[SamplingStrategy] = None):
        super().__init__(generator, seed=seed, strategy=strategy, alpha=alpha, beta=beta)

    minimum = property(lambda self: 0.0)

    @property
    def maximum(self) -> float:
        return 1.0 / self.beta

    @property
    def mean(self) -> float:
        return self.alpha / self.beta / (self.alpha + 1.0)

    @property
    def median(self) -> float:
        self._undefined("median", for_params=False)

    @property
    def variance(self) -> float:
        a, b = self.alpha, self.beta
        return a / (b * b) / ((a + 1.0) * (a + 1.0)) / (a + 2.0)

    @property
    def mode(self) -> Tuple[float, ...]:
        if self.alpha > 1.0:
            return (1.0 / self.beta,)
        if self.alpha < 1.0:
            return (0.0,)
        self._undefined("mode")


class Rayleigh(ContinuousDistribution):
    """Rayleigh distribution: length of a 2-D normal vector with scale ``sigma``."""

    name = "rayleigh"
    parameters = ("sigma",)
    defaults = {"sigma": 1.0}
    default_strategy = STRATEGIES[name]

    sigma = parameter("sigma", "Scale, > 0.")

    def __init__(self, generator: Any = AUTO, sigma: float = 1.0, *,
                 seed: Optional[int] = None, strategy: Optional[SamplingStrategy] = None):
        super().__init__(generator, seed=seed, strategy=strategy, sigma=sigma)

    minimum = property(lambda self: 0.0)
    maximum = property(lambda self: math.inf)

    @property
    def mean(self) -> float:
        return self.sigma * math.sqrt(math.pi / 2.0)

    @property
    def median(self) -> float:
        return self.sigma * math.sqrt(math.log(4.0))

    @property
    def variance(self) -> float:
        return self.sigma * self.sigma * (4.0 - math.pi) / 2.0

    @property
    def mode(self) -> Tuple[float, ...]:
        return (self.sigma,)


class StudentsT(ContinuousDistribution):
    """Student's t distribution with ``nu`` degrees of freedom."""

    name = "students_t"
    parameters = ("nu",)
    integer_parameters = frozenset({"nu"})
    defaults = {"nu": 1}
    default_strategy = STRATEGIES[name]

    nu = parameter("nu", "Degrees of freedom, integer > 0.")

    def __init__(self, generator: Any = AUTO, nu: int = 1, *,
                 seed: Optional[int] = None, strategy: Optional[SamplingStrategy] = None):
        super().__init__(generator, seed=seed, strategy=strategy, nu=nu)

    minimum = property(lambda self: -math.inf)
    maximum = property(lambda self: math.inf)

    @property
    def mean(self) -> float:
        if self.nu > 1:
            return 0.0
        self._undefined("mean")

    @property
    def median(self) -> float:
        return 0.0

    @property
    def variance(self) -> float:
        if self.nu > 2:
            return self.nu / (self.nu - 2.0)
        self._undefined("variance")

    @property
    def mode(self) -> Tuple[float, ...]:
        return (0.0,)


class Triangular(ContinuousDistribution):
    """Triangular distribution on [alpha, beta] with mode ``gamma``."""

    name = "triangular"
    parameters = ("alpha", "beta", "gamma")
    defaults = {"alpha": 0.0, "beta": 1.0, "gamma": 0.5}
    default_strategy = STRATEGIES[name]

    alpha = parameter("alpha", "Lower bound.")
    beta = parameter("beta", "Upper bound, > alpha.")
    gamma = parameter("gamma", "Mode, within [alpha, beta].")

    def __init__(self, generator: Any = AUTO, alpha: float = 0.0, beta: float = 1.0, gamma: float = 0.5, *,
                 seed: Optional[int] = None, strategy: Optional[SamplingStrategy] = None):
        super().__init__(generator, seed=seed, strategy=strategy, alpha=alpha, beta=beta, gamma=gamma)

    @property
    def minimum(self) -> float:
        return self.alpha

    @property
    def maximum(self) -> float:
        return self.beta

    @property
    def mean(self) -> float:
        return self.alpha / 3.0 + self.beta / 3.0 + self.gamma / 3.0

    @property
    def median(self) -> float:
        a, b, c = self.alpha, self.beta, self.gamma
        if c >= (a + b) / 2.0:
            return a + math.sqrt((b - a) * (c - a) / 2.0)
        return b - math.sqrt((b - a) * (b - c) / 2.0)

    @property
    def variance(self) -> float:
        a, b, c = self.alpha, self.beta, self.gamma
        return (a * a + b * b + c * c - a * b - a * c - b * c) / 18.0

    @property
    def mode(self) -> Tuple[float, ...]:
        return (self.gamma,)


class Weibull(ContinuousDistribution):
    """Weibull distribution with shape ``alpha`` and scale ``lambda_``."""

    name = "weibull"
    parameters = ("alpha", "lambda_")
    defaults = {"alpha": 1.0, "lambda_": 1.0}
    default_strategy = STRATEGIES[name]

    alpha = parameter("alpha", "Shape, > 0.")
    lambda_ = parameter("lambda_", "Scale, > 0.")

    def __init__(self, generator: Any = AUTO, alpha: float = 1.0, lambda_: float = 1.0, *,
                 seed: Optional[int] = None, strategy: Optional[SamplingStrategy] = None):
        super().__init__(generator, seed=seed, strategy=strategy, alpha=alpha, lambda_=lambda_)

    minimum = property(lambda self: 0.0)
    maximum = property(lambda self: math.inf)

    @property
    def mean(self) -> float:
        return self.lambda_ * lanczos_gamma(1.0 + 1.0 / self.alpha)

    @property
    def median(self) -> float:
        return self.lambda_ * math.log(2.0) ** (1.0 / self.alpha)

    @property
    def variance(self) -> float:
        second = lanczos_gamma(1.0 + 2.0 / self.alpha)
        if math.isinf(second):
            return math.inf
        return self.lambda_ * self.lambda_ * second - square(self.mean)

    @property
    def mode(self) -> Tuple[float, ...]:
        if self.alpha >= 1.0:
            return (self.lambda_ * (1.0 - 1.0 / self.alpha) ** (1.0 / self.alpha),)
        self._undefined("mode")


CONTINUOUS_DISTRIBUTIONS = (
    ContinuousUniform,
    Normal,
    Exponential,
    Gamma,
    Beta,
    BetaPrime,
    Cauchy,
    Chi,
    ChiSquare,
    Erlang,
    FisherSnedecor,
    FisherTippett,
    Laplace,
    Logistic,
    Lognormal,
    Pareto,
    Power,
    Rayleigh,
    StudentsT,
    Triangular,
    Weibull,
)
