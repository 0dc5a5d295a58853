# computation.py: Numeric helpers shared by samplers and statistics.

import math

from loguru import logger

import numpy as np

# Values closer than this are considered equal.
TOLERANCE = 1e-6

# Lanczos approximation, g = 5, n = 7 (Numerical Recipes gammln).
LANCZOS_COEFFICIENTS = (
    1.000000000190015,
    76.18009172947146,
    -86.50532032941677,
    24.01409824083091,
    -1.231739572450155,
    1.208650973866179e-3,
    -5.395239384953e-6,
)
LANCZOS_SHIFT = 5.5

_SQRT_2PI = math.sqrt(2.0 * math.pi)


def is_zero(x: float) -> bool:
    """True when |x| is below TOLERANCE."""
    return abs(x) < TOLERANCE


def are_equal(a: float, b: float) -> bool:
    """Tolerance-based equality; infinities of the same sign compare equal."""
    if a == b:
        return True
    return abs(a - b) < TOLERANCE


def square(x: float) -> float:
    """x * x, flushing values that are already negligible to exactly zero."""
    if is_zero(x):
        return 0.0
    return x * x


def exp_or_inf(x: float) -> float:
    """math.exp that returns +inf on overflow instead of raising."""
    try:
        return math.exp(x)
    except OverflowError:
        return math.inf


def pow_or_inf(base: float, exponent: float) -> float:
    """
    math.pow with IEEE results where Python raises.

    Overflow gives +inf and a zero base with a negative exponent gives +inf,
    which is what the sampling formulas expect at the edge of their domain.
    """
    if base == 0.0 and exponent < 0.0:
        return math.inf
    try:
        return math.pow(base, exponent)
    except OverflowError:
        return math.inf


def lanczos_log_gamma(x: float) -> float:
    """
    Natural logarithm of the Gamma function for x > 0.

    Uses the 7-term Lanczos series; relative error is below 2e-10 over the
    positive reals.
    """
    if x <= 0.0:
        logger.error(f"Lanczos log-gamma requires x > 0, got {x}")
        raise ValueError(f"x must be positive, got {x}")

    series = LANCZOS_COEFFICIENTS[0]
    for i, c in enumerate(LANCZOS_COEFFICIENTS[1:], start=1):
        series += c / (x + i)

    t = x + LANCZOS_SHIFT
    return (x + 0.5) * math.log(t) - t + math.log(_SQRT_2PI * series / x)


def lanczos_gamma(x: float) -> float:
    """Gamma function for x > 0, +inf when the result overflows."""
    return exp_or_inf(lanczos_log_gamma(x))


def make_seed() -> int:
    """Draw an unsigned 32-bit seed from operating-system entropy."""
    return int(np.random.SeedSequence().entropy) & 0xFFFFFFFF
