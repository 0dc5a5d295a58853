"""
samplers.py - Sampling Algorithms and Validity Predicates

This module is the algorithmic core of variate_lab. For every supported
distribution kind it provides two pure functions:
- sample_<kind>(generator, *params): draws one value from ``generator``
- is_valid_<kind>(*params): True if the parameters define the distribution

Foundational samplers (uniform, normal, exponential, gamma) are reused by
the composite ones (chi, chi-square, beta, beta-prime, Student's t,
Fisher-Snedecor, Rayleigh, lognormal), all sharing the caller's generator,
so the draw order is fixed and replays exactly after a generator reset.

Design Principles:
-----------------
1. Dependency Injection: All samplers take the generator explicitly
2. Purity: No module state; samplers never validate (callers do)
3. IEEE edge values: Where Python would raise on log(0), 1/0 or overflow,
   samplers return the limit the formula tends to (0, +inf, -inf, ...)
4. Rejection loops terminate with probability one and never raise

Example Usage:
-------------
    >>> from variate_lab.generators import XorShift128Generator
    >>> from variate_lab import samplers
    >>> gen = XorShift128Generator(seed=42)
    >>> samplers.is_valid_gamma(0.5, 1.0)
    True
    >>> x = samplers.sample_gamma(gen, 0.5, 1.0)
    >>> x >= 0.0
    True
"""

from __future__ import annotations

import bisect
import itertools
import math
import numbers
from typing import Dict, List, Sequence

from .computation import exp_or_inf, pow_or_inf, square
from .generators import INT_MAX
from .types import Generator, SamplingStrategy


# Rate consumed per rescaling step of the Poisson multiplication method.
POISSON_STEP = 500.0


def _is_real(x) -> bool:
    return isinstance(x, numbers.Real) and not isinstance(x, bool)


def _is_int(x) -> bool:
    return isinstance(x, numbers.Integral) and not isinstance(x, bool)


def _reals(*values) -> bool:
    return all(_is_real(v) for v in values)


# =============================================================================
# FOUNDATIONAL SAMPLERS
# =============================================================================

def is_valid_continuous_uniform(alpha: float, beta: float) -> bool:
    return _reals(alpha, beta) and alpha <= beta


def sample_continuous_uniform(generator: Generator, alpha: float, beta: float) -> float:
    return alpha + generator.next_double() * (beta - alpha)


def is_valid_normal(mu: float, sigma: float) -> bool:
    return _reals(mu, sigma) and not math.isnan(mu) and sigma > 0.0


def sample_normal(generator: Generator, mu: float, sigma: float) -> float:
    """
    Marsaglia polar method.

    Each accepted pair yields two independent deviates; one is returned,
    chosen by a fair coin from the generator, and the other is discarded.
    """
    while True:
        v1 = 2.0 * generator.next_double() - 1.0
        v2 = 2.0 * generator.next_double() - 1.0
        w = v1 * v1 + v2 * v2
        if w > 1.0 or w == 0.0:
            continue
        y = math.sqrt(-2.0 * math.log(w) / w) * sigma
        return v1 * y + mu if generator.next_boolean() else v2 * y + mu


def is_valid_exponential(lambda_: float) -> bool:
    return _is_real(lambda_) and lambda_ > 0.0


def sample_exponential(generator: Generator, lambda_: float) -> float:
    # 1 - u lies in (0, 1], so the logarithm is always finite.
    return -math.log(1.0 - generator.next_double()) / lambda_


def is_valid_gamma(alpha: float, theta: float) -> bool:
    return _reals(alpha, theta) and alpha > 0.0 and theta > 0.0


def sample_gamma(generator: Generator, alpha: float, theta: float) -> float:
    """
    Ahrens-Dieter GS rejection for the fractional part of alpha, plus one
    exponential waiting time per unit of its integer part, scaled by theta.

    The acceptance tests are written in their simplified form
    (``gen2 <= exp(-xi)`` and ``gen2 <= xi ** (delta - 1)``), which never
    raises to a power that overflows.
    """
    if math.isinf(alpha):
        return math.inf

    fraction = alpha - math.floor(alpha)
    xi = 0.0
    if fraction > 0.0:
        bound = math.e / (math.e + fraction)
        while True:
            gen1 = 1.0 - generator.next_double()
            gen2 = 1.0 - generator.next_double()
            if gen1 <= bound:
                xi = (gen1 / bound) ** (1.0 / fraction)
                if gen2 <= math.exp(-xi):
                    break
            else:
                xi = 1.0 - math.log((gen1 - bound) / (1.0 - bound))
                if gen2 <= xi ** (fraction - 1.0):
                    break

    for _ in range(int(alpha)):
        xi -= math.log(1.0 - generator.next_double())

    return xi * theta


# =============================================================================
# COMPOSITE SAMPLERS
# =============================================================================

def is_valid_beta(alpha: float, beta: float) -> bool:
    return _reals(alpha, beta) and alpha > 0.0 and beta > 0.0


def sample_beta(generator: Generator, alpha: float, beta: float) -> float:
    x = sample_gamma(generator, alpha, 1.0)
    total = x + sample_gamma(generator, beta, 1.0)
    if total == 0.0:
        return 1.0
    t = 1.0 / total
    return 1.0 if t == 0.0 else x * t


def is_valid_beta_prime(alpha: float, beta: float) -> bool:
    return _reals(alpha, beta) and alpha > 1.0 and beta > 1.0


def sample_beta_prime(generator: Generator, alpha: float, beta: float) -> float:
    b = sample_beta(generator, alpha, beta)
    tmp = 1.0 - b
    return math.inf if tmp == 0.0 else b / tmp


def is_valid_chi(alpha: int) -> bool:
    return _is_int(alpha) and alpha > 0


def sample_chi(generator: Generator, alpha: int) -> float:
    total = 0.0
    for _ in range(alpha):
        total += square(sample_normal(generator, 0.0, 1.0))
    return math.sqrt(total)


def is_valid_chi_square(alpha: int) -> bool:
    return _is_int(alpha) and alpha > 0


def sample_chi_square(generator: Generator, alpha: int) -> float:
    total = 0.0
    for _ in range(alpha):
        n = sample_normal(generator, 0.0, 1.0)
        total += n * n
    return total


def is_valid_erlang(alpha: int, lambda_: float) -> bool:
    return _is_int(alpha) and _is_real(lambda_) and alpha > 0 and lambda_ > 0.0


def sample_erlang(generator: Generator, alpha: int, lambda_: float) -> float:
    """
    Marsaglia-Tsang squeeze rejection on normal deviates.

    An infinite rate short-circuits to ``alpha`` without drawing.
    """
    if math.isinf(lambda_):
        return float(alpha)

    d = alpha - 1.0 / 3.0
    c = 1.0 / math.sqrt(9.0 * d)
    while True:
        x = sample_normal(generator, 0.0, 1.0)
        v = 1.0 + c * x
        while v <= 0.0:
            x = sample_normal(generator, 0.0, 1.0)
            v = 1.0 + c * x

        v = v * v * v
        u = generator.next_double()
        x = x * x
        if u < 1.0 - 0.0331 * x * x:
            return d * v / lambda_
        if u == 0.0 or math.log(u) < 0.5 * x + d * (1.0 - v + math.log(v)):
            return d * v / lambda_


def is_valid_students_t(nu: int) -> bool:
    return _is_int(nu) and nu > 0


def sample_students_t(generator: Generator, nu: int) -> float:
    n = sample_normal(generator, 0.0, 1.0)
    c = sample_chi_square(generator, nu)
    denominator = math.sqrt(c / nu)
    if denominator == 0.0:
        return math.copysign(math.inf, n)
    return n / denominator


def is_valid_fisher_snedecor(alpha: int, beta: int) -> bool:
    return _is_int(alpha) and _is_int(beta) and alpha > 0 and beta > 0


def sample_fisher_snedecor(generator: Generator, alpha: int, beta: int) -> float:
    csa = sample_chi_square(generator, alpha)
    csb = sample_chi_square(generator, beta)
    if csb == 0.0:
        return math.inf
    return csa / csb * (beta / alpha)


def is_valid_rayleigh(sigma: float) -> bool:
    return _is_real(sigma) and sigma > 0.0


def sample_rayleigh(generator: Generator, sigma: float) -> float:
    n1 = sample_normal(generator, 0.0, sigma)
    n2 = sample_normal(generator, 0.0, sigma)
    return math.sqrt(n1 * n1 + n2 * n2)


def is_valid_lognormal(mu: float, sigma: float) -> bool:
    return _reals(mu, sigma) and not math.isnan(mu) and sigma >= 0.0


def sample_lognormal(generator: Generator, mu: float, sigma: float) -> float:
    return exp_or_inf(sample_normal(generator, 0.0, 1.0) * sigma + mu)


# =============================================================================
# CLOSED-FORM TRANSFORMS
# =============================================================================

def is_valid_cauchy(alpha: float, gamma: float) -> bool:
    return _reals(alpha, gamma) and not math.isnan(alpha) and gamma > 0.0


def sample_cauchy(generator: Generator, alpha: float, gamma: float) -> float:
    return alpha + gamma * math.tan(math.pi * (generator.next_double() - 0.5))


def is_valid_fisher_tippett(alpha: float, mu: float) -> bool:
    return _reals(alpha, mu) and alpha > 0.0 and not math.isnan(mu)


def sample_fisher_tippett(generator: Generator, alpha: float, mu: float) -> float:
    inner = -math.log(1.0 - generator.next_double())
    if inner == 0.0:
        return math.inf
    return mu - alpha * math.log(inner)


def is_valid_laplace(alpha: float, mu: float) -> bool:
    return _reals(alpha, mu) and alpha > 0.0 and not math.isnan(mu)


def sample_laplace(generator: Generator, alpha: float, mu: float) -> float:
    rand = 0.5 - generator.next_double()
    if rand == 0.0:
        return mu
    return mu - alpha * math.copysign(1.0, rand) * math.log(2.0 * abs(rand))


def is_valid_logistic(mu: float, sigma: float) -> bool:
    return _reals(mu, sigma) and not math.isnan(mu) and sigma > 0.0


def sample_logistic(generator: Generator, mu: float, sigma: float) -> float:
    u = generator.next_double()
    if u == 0.0:
        return -math.inf
    return mu + sigma * math.log(u / (1.0 - u))


def is_valid_pareto(alpha: float, beta: float) -> bool:
    return _reals(alpha, beta) and alpha > 0.0 and beta > 0.0


def sample_pareto(generator: Generator, alpha: float, beta: float) -> float:
    denominator = (1.0 - generator.next_double()) ** (1.0 / beta)
    if denominator == 0.0:
        return math.inf
    return alpha / denominator


def is_valid_power(alpha: float, beta: float) -> bool:
    return _reals(alpha, beta) and alpha > 0.0 and beta > 0.0


def sample_power(generator: Generator, alpha: float, beta: float) -> float:
    return generator.next_double() ** (1.0 / alpha) / beta


def is_valid_triangular(alpha: float, beta: float, gamma: float) -> bool:
    return _reals(alpha, beta, gamma) and alpha < beta and alpha <= gamma <= beta


def sample_triangular(generator: Generator, alpha: float, beta: float, gamma: float) -> float:
    span = beta - alpha
    left = gamma - alpha
    u = generator.next_double()
    if u <= left / span:
        return alpha + math.sqrt(u * left * span)
    # Rounding can push the radicand a hair below zero near the mode.
    return beta - math.sqrt(max(0.0, (1.0 - u) * span * (beta - gamma)))


def is_valid_weibull(alpha: float, lambda_: float) -> bool:
    return _reals(alpha, lambda_) and alpha > 0.0 and lambda_ > 0.0


def sample_weibull(generator: Generator, alpha: float, lambda_: float) -> float:
    waiting = 0.0 - math.log(1.0 - generator.next_double())
    return lambda_ * pow_or_inf(waiting, 1.0 / alpha)


# =============================================================================
# DISCRETE SAMPLERS
# =============================================================================

def is_valid_bernoulli(alpha: float) -> bool:
    return _is_real(alpha) and 0.0 <= alpha <= 1.0


def sample_bernoulli(generator: Generator, alpha: float) -> int:
    return 1 if generator.next_double() < alpha else 0


def is_valid_binomial(alpha: float, beta: int) -> bool:
    return _is_real(alpha) and _is_int(beta) and 0.0 <= alpha <= 1.0 and beta >= 0


def sample_binomial(generator: Generator, alpha: float, beta: int) -> int:
    successes = 0
    for _ in range(beta):
        if generator.next_double() < alpha:
            successes += 1
    return successes


def is_valid_categorical(weights: Sequence[float]) -> bool:
    """Weights must be a non-empty sequence of finite, non-negative reals with a positive sum."""
    try:
        values = list(weights)
    except TypeError:
        return False
    if not values:
        return False
    total = 0.0
    for w in values:
        if not _is_real(w) or not math.isfinite(w) or w < 0.0:
            return False
        total += w
    return math.isfinite(total) and total > 0.0


def sample_categorical(generator: Generator, weights: Sequence[float]) -> int:
    cdf = list(itertools.accumulate(weights))
    u = generator.next_double() * cdf[-1]
    return min(bisect.bisect_right(cdf, u), len(cdf) - 1)


def equal_weights(value_count: int) -> List[float]:
    """Uniform weights over ``value_count`` categories."""
    if not _is_int(value_count) or value_count <= 0:
        raise ValueError(f"value_count must be a positive integer, got {value_count!r}")
    return [1.0 / value_count] * value_count


def normalize_weights(weights: Sequence[float]) -> List[float]:
    """Scale weights so that they sum to one."""
    values = [float(w) for w in weights]
    total = math.fsum(values)
    return [w / total for w in values]


def is_valid_discrete_uniform(alpha: int, beta: int) -> bool:
    return _is_int(alpha) and _is_int(beta) and alpha <= beta < INT_MAX


def sample_discrete_uniform(generator: Generator, alpha: int, beta: int) -> int:
    return generator.next(alpha, beta + 1)


def is_valid_geometric(alpha: float) -> bool:
    return _is_real(alpha) and 0.0 < alpha <= 1.0


def sample_geometric(generator: Generator, alpha: float) -> int:
    trials = 1
    while generator.next_double() >= alpha:
        trials += 1
    return trials


def is_valid_poisson(lambda_: float) -> bool:
    # An infinite rate has no integer draw and no mode.
    return _is_real(lambda_) and 0.0 < lambda_ < math.inf


def sample_poisson(generator: Generator, lambda_: float) -> int:
    """
    Knuth's multiplication method with the rate consumed in steps of
    POISSON_STEP, so ``exp(-lambda)`` never underflows for large rates.
    """
    remaining = float(lambda_)
    k = 0
    p = 1.0
    while True:
        k += 1
        r = generator.next_double()
        while r == 0.0:
            r = generator.next_double()
        p *= r
        while p < 1.0 and remaining > 0.0:
            step = min(remaining, POISSON_STEP)
            p *= math.exp(step)
            remaining -= step
        if p <= 1.0:
            return k - 1


# =============================================================================
# DEFAULT STRATEGIES
# =============================================================================

STRATEGIES: Dict[str, SamplingStrategy] = {
    name: SamplingStrategy(
        sample=globals()[f"sample_{name}"],
        is_valid=globals()[f"is_valid_{name}"],
        name=name,
    )
    for name in (
        "continuous_uniform",
        "normal",
        "exponential",
        "gamma",
        "beta",
        "beta_prime",
        "cauchy",
        "chi",
        "chi_square",
        "erlang",
        "fisher_snedecor",
        "fisher_tippett",
        "laplace",
        "logistic",
        "lognormal",
        "pareto",
        "power",
        "rayleigh",
        "students_t",
        "triangular",
        "weibull",
        "bernoulli",
        "binomial",
        "categorical",
        "discrete_uniform",
        "geometric",
        "poisson",
    )
}
