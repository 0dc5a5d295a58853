"""
variates.py - One-Stop Sampling Facade

``Variates`` wraps a single generator and exposes one method per
distribution kind. Every call validates its parameters and draws one value,
so there is no distribution object to keep around; the ``*_samples``
variants validate once and return an endless iterator.

The module-level helpers turn generators and distribution objects into
iterators (``doubles``, ``integers``, ``booleans``, ``distributed_doubles``,
...) and pick items from sequences (``choice``, ``choices``).

Example Usage:
-------------
    >>> from variate_lab.variates import Variates, choice
    >>> v = Variates(seed=7)
    >>> x = v.normal(mu=10.0, sigma=2.0)
    >>> k = v.poisson(lambda_=3.0)
    >>> from itertools import islice
    >>> draws = list(islice(v.gamma_samples(2.0, 1.0), 5))
    >>> choice(v.generator, ["a", "b", "c"]) in {"a", "b", "c"}
    True
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Iterator, Optional, Sequence, Type, TypeVar

from loguru import logger

from .continuous import CONTINUOUS_DISTRIBUTIONS
from .discrete import DISCRETE_DISTRIBUTIONS
from .distributions import AUTO, AbstractDistribution, DiscreteDistribution, resolve_generator
from .errors import InvalidParameterError
from .samplers import STRATEGIES, equal_weights
from .types import Generator

if TYPE_CHECKING:
    from .config import LabConfig

T = TypeVar("T")

_CLASSES: Dict[str, Type[AbstractDistribution]] = {
    cls.name: cls for cls in CONTINUOUS_DISTRIBUTIONS + DISCRETE_DISTRIBUTIONS
}


class Variates:
    """
    Per-call sampling from every supported distribution.

    Parameters
    ----------
    generator : Generator, optional
        Uniform source. Omit it to get an XorShift128Generator.
    seed : int, optional
        Seed for the default generator. Cannot be combined with ``generator``.

    Raises
    ------
    InvalidGeneratorError
        If ``generator`` is None or not a generator.
    """

    def __init__(self, generator: Any = AUTO, *, seed: Optional[int] = None):
        self._generator = resolve_generator(generator, seed)

    @classmethod
    def from_config(cls, config: Optional["LabConfig"] = None) -> "Variates":
        """Build a facade over the generator described by ``config`` (or the environment)."""
        from .config import LabConfig

        config = config if config is not None else LabConfig.from_env()
        return cls(config.make_generator())

    def __repr__(self) -> str:
        return f"Variates(generator={self._generator!r})"

    @property
    def generator(self) -> Generator:
        return self._generator

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _checked(self, name: str, args: tuple) -> None:
        strategy = STRATEGIES[name]
        if not strategy.is_valid(*args):
            values = dict(zip(_CLASSES[name].parameters, args))
            logger.error(f"Rejected parameters for {name}: {values}")
            raise InvalidParameterError(name, values)

    def _draw(self, name: str, *args: Any) -> Any:
        self._checked(name, args)
        return STRATEGIES[name].sample(self._generator, *args)

    def _stream(self, name: str, *args: Any) -> Iterator[Any]:
        self._checked(name, args)
        sample = STRATEGIES[name].sample
        generator = self._generator

        def stream() -> Iterator[Any]:
            while True:
                yield sample(generator, *args)

        return stream()

    @staticmethod
    def _weights(weights: Optional[Sequence[float]], value_count: Optional[int]) -> list:
        if weights is None:
            return equal_weights(3 if value_count is None else value_count)
        if value_count is not None:
            raise TypeError("Pass either weights or value_count, not both.")
        return list(weights)

    # -------------------------------------------------------------------------
    # Discrete distributions
    # -------------------------------------------------------------------------

    def bernoulli(self, alpha: float = 0.5) -> int:
        """1 with probability ``alpha``, else 0."""
        return self._draw("bernoulli", alpha)

    def bernoulli_samples(self, alpha: float = 0.5) -> Iterator[int]:
        return self._stream("bernoulli", alpha)

    def binomial(self, alpha: float = 0.5, beta: int = 1) -> int:
        """Successes in ``beta`` trials of probability ``alpha``."""
        return self._draw("binomial", alpha, beta)

    def binomial_samples(self, alpha: float = 0.5, beta: int = 1) -> Iterator[int]:
        return self._stream("binomial", alpha, beta)

    def categorical(self, weights: Optional[Sequence[float]] = None, *,
                    value_count: Optional[int] = None) -> int:
        """Zero-based index drawn proportionally to ``weights`` (or uniformly over ``value_count``)."""
        return self._draw("categorical", self._weights(weights, value_count))

    def categorical_samples(self, weights: Optional[Sequence[float]] = None, *,
                            value_count: Optional[int] = None) -> Iterator[int]:
        return self._stream("categorical", self._weights(weights, value_count))

    def discrete_uniform(self, alpha: int = 0, beta: int = 1) -> int:
        """Integer in [alpha, beta]."""
        return self._draw("discrete_uniform", alpha, beta)

    def discrete_uniform_samples(self, alpha: int = 0, beta: int = 1) -> Iterator[int]:
        return self._stream("discrete_uniform", alpha, beta)

    def geometric(self, alpha: float = 0.5) -> int:
        return self._draw("geometric", alpha)

    def geometric_samples(self, alpha: float = 0.5) -> Iterator[int]:
        return self._stream("geometric", alpha)

    def poisson(self, lambda_: float = 1.0) -> int:
        return self._draw("poisson", lambda_)

    def poisson_samples(self, lambda_: float = 1.0) -> Iterator[int]:
        return self._stream("poisson", lambda_)

    # -------------------------------------------------------------------------
    # Continuous distributions
    # -------------------------------------------------------------------------

    def beta(self, alpha: float = 1.0, beta: float = 1.0) -> float:
        return self._draw("beta", alpha, beta)

    def beta_samples(self, alpha: float = 1.0, beta: float = 1.0) -> Iterator[float]:
        return self._stream("beta", alpha, beta)

    def beta_prime(self, alpha: float = 2.0, beta: float = 2.0) -> float:
        return self._draw("beta_prime", alpha, beta)

    def beta_prime_samples(self, alpha: float = 2.0, beta: float = 2.0) -> Iterator[float]:
        return self._stream("beta_prime", alpha, beta)

    def cauchy(self, alpha: float = 1.0, gamma: float = 1.0) -> float:
        return self._draw("cauchy", alpha, gamma)

    def cauchy_samples(self, alpha: float = 1.0, gamma: float = 1.0) -> Iterator[float]:
        return self._stream("cauchy", alpha, gamma)

    def chi(self, alpha: int = 1) -> float:
        return self._draw("chi", alpha)

    def chi_samples(self, alpha: int = 1) -> Iterator[float]:
        return self._stream("chi", alpha)

    def chi_square(self, alpha: int = 1) -> float:
        return self._draw("chi_square", alpha)

    def chi_square_samples(self, alpha: int = 1) -> Iterator[float]:
        return self._stream("chi_square", alpha)

    def continuous_uniform(self, alpha: float = 0.0, beta: float = 1.0) -> float:
        """Float in [alpha, beta)."""
        return self._draw("continuous_uniform", alpha, beta)

    def continuous_uniform_samples(self, alpha: float = 0.0, beta: float = 1.0) -> Iterator[float]:
        return self._stream("continuous_uniform", alpha, beta)

    def erlang(self, alpha: int = 1, lambda_: float = 1.0) -> float:
        return self._draw("erlang", alpha, lambda_)

    def erlang_samples(self, alpha: int = 1, lambda_: float = 1.0) -> Iterator[float]:
        return self._stream("erlang", alpha, lambda_)

    def exponential(self, lambda_: float = 1.0) -> float:
        return self._draw("exponential", lambda_)

    def exponential_samples(self, lambda_: float = 1.0) -> Iterator[float]:
        return self._stream("exponential", lambda_)

    def fisher_snedecor(self, alpha: int = 1, beta: int = 1) -> float:
        return self._draw("fisher_snedecor", alpha, beta)

    def fisher_snedecor_samples(self, alpha: int = 1, beta: int = 1) -> Iterator[float]:
        return self._stream("fisher_snedecor", alpha, beta)

    def fisher_tippett(self, alpha: float = 1.0, mu: float = 0.0) -> float:
        return self._draw("fisher_tippett", alpha, mu)

    def fisher_tippett_samples(self, alpha: float = 1.0, mu: float = 0.0) -> Iterator[float]:
        return self._stream("fisher_tippett", alpha, mu)

    def gamma(self, alpha: float = 1.0, theta: float = 1.0) -> float:
        """Gamma with shape ``alpha`` and scale ``theta``."""
        return self._draw("gamma", alpha, theta)

    def gamma_samples(self, alpha: float = 1.0, theta: float = 1.0) -> Iterator[float]:
        return self._stream("gamma", alpha, theta)

    def laplace(self, alpha: float = 1.0, mu: float = 0.0) -> float:
        return self._draw("laplace", alpha, mu)

    def laplace_samples(self, alpha: float = 1.0, mu: float = 0.0) -> Iterator[float]:
        return self._stream("laplace", alpha, mu)

    def logistic(self, mu: float = 0.0, sigma: float = 1.0) -> float:
        return self._draw("logistic", mu, sigma)

    def logistic_samples(self, mu: float = 0.0, sigma: float = 1.0) -> Iterator[float]:
        return self._stream("logistic", mu, sigma)

    def lognormal(self, mu: float = 0.0, sigma: float = 1.0) -> float:
        return self._draw("lognormal", mu, sigma)

    def lognormal_samples(self, mu: float = 0.0, sigma: float = 1.0) -> Iterator[float]:
        return self._stream("lognormal", mu, sigma)

    def normal(self, mu: float = 0.0, sigma: float = 1.0) -> float:
        return self._draw("normal", mu, sigma)

    def normal_samples(self, mu: float = 0.0, sigma: float = 1.0) -> Iterator[float]:
        return self._stream("normal", mu, sigma)

    def pareto(self, alpha: float = 1.0, beta: float = 1.0) -> float:
        return self._draw("pareto", alpha, beta)

    def pareto_samples(self, alpha: float = 1.0, beta: float = 1.0) -> Iterator[float]:
        return self._stream("pareto", alpha, beta)

    def power(self, alpha: float = 1.0, beta: float = 1.0) -> float:
        return self._draw("power", alpha, beta)

    def power_samples(self, alpha: float = 1.0, beta: float = 1.0) -> Iterator[float]:
        return self._stream("power", alpha, beta)

    def rayleigh(self, sigma: float = 1.0) -> float:
        return self._draw("rayleigh", sigma)

    def rayleigh_samples(self, sigma: float = 1.0) -> Iterator[float]:
        return self._stream("rayleigh", sigma)

    def students_t(self, nu: int = 1) -> float:
        return self._draw("students_t", nu)

    def students_t_samples(self, nu: int = 1) -> Iterator[float]:
        return self._stream("students_t", nu)

    def triangular(self, alpha: float = 0.0, beta: float = 1.0, gamma: float = 0.5) -> float:
        """Triangular on [alpha, beta] with mode ``gamma``."""
        return self._draw("triangular", alpha, beta, gamma)

    def triangular_samples(self, alpha: float = 0.0, beta: float = 1.0,
                           gamma: float = 0.5) -> Iterator[float]:
        return self._stream("triangular", alpha, beta, gamma)

    def weibull(self, alpha: float = 1.0, lambda_: float = 1.0) -> float:
        return self._draw("weibull", alpha, lambda_)

    def weibull_samples(self, alpha: float = 1.0, lambda_: float = 1.0) -> Iterator[float]:
        return self._stream("weibull", alpha, lambda_)

    # -------------------------------------------------------------------------
    # Generator passthrough
    # -------------------------------------------------------------------------

    @property
    def seed(self) -> int:
        return self._generator.seed

    @property
    def can_reset(self) -> bool:
        return self._generator.can_reset

    def reset(self, seed: Optional[int] = None) -> bool:
        """Reset the generator, to its stored seed or to ``seed``."""
        return self._generator.reset(seed)

    def next(self, start: Optional[int] = None, stop: Optional[int] = None) -> int:
        return self._generator.next(start, stop)

    def next_inclusive_max_value(self) -> int:
        return self._generator.next_inclusive_max_value()

    def next_double(self, start: Optional[float] = None, stop: Optional[float] = None) -> float:
        return self._generator.next_double(start, stop)

    def next_uint(self, start: Optional[int] = None, stop: Optional[int] = None) -> int:
        return self._generator.next_uint(start, stop)

    def next_uint_inclusive_max_value(self) -> int:
        return self._generator.next_uint_inclusive_max_value()

    def next_boolean(self) -> bool:
        return self._generator.next_boolean()

    def next_bytes(self, buffer: Any) -> None:
        self._generator.next_bytes(buffer)


# =============================================================================
# ITERATION HELPERS
# =============================================================================

def distributed_doubles(distribution: AbstractDistribution) -> Iterator[float]:
    """Endless ``next_double()`` draws from a distribution."""
    while True:
        yield distribution.next_double()


def distributed_integers(distribution: DiscreteDistribution) -> Iterator[int]:
    """Endless ``next()`` draws from a discrete distribution."""
    if not isinstance(distribution, DiscreteDistribution):
        raise TypeError(f"Expected a discrete distribution, got {type(distribution).__name__}")
    return distribution.samples()


def doubles(generator: Generator, start: Optional[float] = None,
            stop: Optional[float] = None) -> Iterator[float]:
    """
    Endless floats in [0, 1), [0, stop) or [start, stop).

    Bounds are checked on the first draw, so a bad range raises ValueError
    when the iterator is first advanced.
    """
    while True:
        yield generator.next_double(start, stop)


def integers(generator: Generator, start: Optional[int] = None,
             stop: Optional[int] = None) -> Iterator[int]:
    """Endless ints in [0, 2**31 - 1), [0, stop) or [start, stop)."""
    while True:
        yield generator.next(start, stop)


def unsigned_integers(generator: Generator, start: Optional[int] = None,
                      stop: Optional[int] = None) -> Iterator[int]:
    while True:
        yield generator.next_uint(start, stop)


def booleans(generator: Generator) -> Iterator[bool]:
    while True:
        yield generator.next_boolean()


def choice(generator: Generator, items: Sequence[T]) -> T:
    """
    Pick one item uniformly.

    Raises
    ------
    ValueError
        If ``items`` is empty.
    """
    if len(items) == 0:
        raise ValueError("Cannot choose from an empty sequence")
    return items[generator.next(len(items))]


def choices(generator: Generator, items: Sequence[T]) -> Iterator[T]:
    """Endless uniform picks from ``items`` (with replacement)."""
    if len(items) == 0:
        raise ValueError("Cannot choose from an empty sequence")
    count = len(items)

    def picks() -> Iterator[T]:
        while True:
            yield items[generator.next(count)]

    return picks()
