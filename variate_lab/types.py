"""
types.py - Core Data Structures and Type Definitions for Variate Lab

This module defines the value objects and structural interfaces shared
throughout variate_lab:
- SamplingStrategy: Injectable (sampler, validity predicate) pair per kind
- DistributionSummary: Snapshot of a distribution's descriptive statistics
- MomentValidationResult / GoodnessOfFitResult: Simulation diagnostics
- Generator: Structural contract every uniform engine satisfies
- HasAlpha, HasBeta, ...: Capability protocols for parameter discovery

Design Principles:
-----------------
1. Immutability where practical (frozen dataclasses for value objects)
2. Structural typing for capabilities (Protocols instead of deep hierarchies)
3. Optional fields only where "undefined" is a genuine outcome
4. Numpy-style docstrings throughout

Example Usage:
-------------
    >>> from variate_lab import Gamma, HasAlpha, HasTheta
    >>> dist = Gamma(alpha=2.0, theta=0.5, seed=7)
    >>> isinstance(dist, HasAlpha) and isinstance(dist, HasTheta)
    True
    >>> dist.summary().mean
    1.0
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Optional, Protocol, Sequence, Tuple, Union, runtime_checkable

import numpy as np


# =============================================================================
# TYPE ALIASES
# =============================================================================

# Sample sizes follow numpy: an int or a shape tuple.
SampleSize = Union[int, Tuple[int, ...]]

# A sampler is a callable that takes a size (int or tuple) and returns samples.
# Named 'Sampler' rather than 'Generator' to avoid confusion with uniform engines.
SamplerCallable = Callable[[SampleSize], np.ndarray]


class DistributionKind(str, Enum):
    """Whether a distribution produces floats or integers."""
    CONTINUOUS = "continuous"
    DISCRETE = "discrete"


# =============================================================================
# GENERATOR CONTRACT
# =============================================================================

@runtime_checkable
class Generator(Protocol):
    """
    Structural contract of a uniform random source.

    Every sampler in variate_lab is written against these members only, so
    any object providing them (not just subclasses of AbstractGenerator)
    can drive a distribution.
    """

    @property
    def seed(self) -> int: ...

    @property
    def can_reset(self) -> bool: ...

    def reset(self, seed: Optional[int] = None) -> bool: ...

    def next(self, start: Optional[int] = None, stop: Optional[int] = None) -> int: ...

    def next_double(self, start: Optional[float] = None, stop: Optional[float] = None) -> float: ...

    def next_boolean(self) -> bool: ...


# =============================================================================
# SAMPLING STRATEGY
# =============================================================================

@dataclass(frozen=True)
class SamplingStrategy:
    """
    The sampling algorithm and validity predicate of one distribution kind.

    Distributions resolve their strategy when they are constructed, so a
    custom strategy affects only the instances it is passed to.

    Parameters
    ----------
    sample : Callable
        ``sample(generator, *params) -> number``. Parameters are passed
        positionally in the order the distribution declares them.
    is_valid : Callable
        ``is_valid(*params) -> bool``.
    name : str
        Short label used in reprs and logs.

    Examples
    --------
    >>> import math
    >>> from variate_lab import Exponential, SamplingStrategy
    >>> from variate_lab import samplers
    >>> inverse_u = SamplingStrategy(
    ...     sample=lambda gen, lam: -math.log(1.0 - gen.next_double()) / lam,
    ...     is_valid=samplers.is_valid_exponential,
    ...     name="inverse-u",
    ... )
    >>> dist = Exponential(lambda_=2.0, seed=3, strategy=inverse_u)
    """
    sample: Callable[..., Any]
    is_valid: Callable[..., bool]
    name: str = "default"

    def with_sample(self, sample: Callable[..., Any], name: Optional[str] = None) -> "SamplingStrategy":
        """Return a copy that keeps the predicate but swaps the sampler."""
        return SamplingStrategy(sample=sample, is_valid=self.is_valid, name=name or self.name)

    def with_is_valid(self, is_valid: Callable[..., bool], name: Optional[str] = None) -> "SamplingStrategy":
        """Return a copy that keeps the sampler but swaps the predicate."""
        return SamplingStrategy(sample=self.sample, is_valid=is_valid, name=name or self.name)


# =============================================================================
# SUMMARIES AND DIAGNOSTICS
# =============================================================================

@dataclass(frozen=True)
class DistributionSummary:
    """
    Descriptive statistics of a distribution under its current parameters.

    Statistics that are undefined for the parameters are stored as None.
    """
    name: str
    parameters: Dict[str, Any]
    minimum: float
    maximum: float
    mean: Optional[float] = None
    median: Optional[float] = None
    variance: Optional[float] = None
    mode: Optional[Tuple[float, ...]] = None

    @property
    def std(self) -> Optional[float]:
        """Standard deviation, when the variance is defined and finite."""
        if self.variance is None or not math.isfinite(self.variance):
            return None
        return math.sqrt(self.variance)

    def as_dict(self) -> Dict[str, Any]:
        """Flatten into a plain dictionary (handy for tables and JSON)."""
        return {
            "name": self.name,
            "parameters": dict(self.parameters),
            "minimum": self.minimum,
            "maximum": self.maximum,
            "mean": self.mean,
            "median": self.median,
            "variance": self.variance,
            "mode": list(self.mode) if self.mode is not None else None,
        }


@dataclass
class MomentValidationResult:
    """
    Comparison of empirical sample statistics with closed-form ones.

    Attributes
    ----------
    name : str
        Distribution name.
    n_samples : int
        Number of draws the empirical statistics come from.
    expected : Dict[str, float]
        Closed-form statistics that are defined and finite.
    observed : Dict[str, float]
        Matching empirical statistics.
    relative_errors : Dict[str, float]
        ``|observed - expected| / max(|expected|, 1)`` per statistic.
    tolerance : float
        Largest acceptable relative error.
    """
    name: str
    n_samples: int
    expected: Dict[str, float]
    observed: Dict[str, float]
    relative_errors: Dict[str, float]
    tolerance: float
    skipped: Sequence[str] = field(default_factory=tuple)

    @property
    def passed(self) -> bool:
        """True when every compared statistic is within tolerance."""
        return all(err <= self.tolerance for err in self.relative_errors.values())

    @property
    def failures(self) -> Dict[str, float]:
        """Statistics whose relative error exceeds the tolerance."""
        return {k: v for k, v in self.relative_errors.items() if v > self.tolerance}


@dataclass(frozen=True)
class GoodnessOfFitResult:
    """Kolmogorov-Smirnov test of samples against a reference distribution."""
    name: str
    n_samples: int
    statistic: float
    p_value: float
    alpha: float = 0.01

    @property
    def passed(self) -> bool:
        """True when the test does not reject at significance ``alpha``."""
        return self.p_value >= self.alpha


# =============================================================================
# CAPABILITY PROTOCOLS
# =============================================================================

@runtime_checkable
class HasAlpha(Protocol):
    alpha: Any


@runtime_checkable
class HasBeta(Protocol):
    beta: Any


@runtime_checkable
class HasGamma(Protocol):
    gamma: Any


@runtime_checkable
class HasMu(Protocol):
    mu: float


@runtime_checkable
class HasSigma(Protocol):
    sigma: float


@runtime_checkable
class HasLambda(Protocol):
    # 'lambda' is reserved, so the attribute carries a trailing underscore.
    lambda_: float


@runtime_checkable
class HasNu(Protocol):
    nu: int


@runtime_checkable
class HasTheta(Protocol):
    theta: float


@runtime_checkable
class HasWeights(Protocol):
    weights: Tuple[float, ...]
