"""
distributions.py - Distribution Objects

This module provides the stateful wrappers that bind a generator, a set of
validated parameters and a sampling strategy:
- AbstractDistribution: Parameter handling, validation, statistics, reset
- ContinuousDistribution: Float-valued distributions (``next_double``)
- DiscreteDistribution: Integer-valued distributions (``next``)
- parameter: Property factory for validated, mutable parameters

Design Principles:
-----------------
1. Fail-fast: Parameters are validated at construction and on every change
2. Atomic updates: A rejected change leaves the previous parameters intact
3. Scoped overrides: A custom SamplingStrategy applies to one instance only
4. Capabilities via attributes: ``alpha``, ``mu``, ... satisfy the HasX
   protocols of ``types`` without a deep class hierarchy

Example Usage:
-------------
    >>> from variate_lab import Normal, XorShift128Generator
    >>> dist = Normal(XorShift128Generator(seed=42), mu=0.0, sigma=2.0)
    >>> first = [dist.next_double() for _ in range(5)]
    >>> dist.reset()
    True
    >>> first == [dist.next_double() for _ in range(5)]
    True
    >>> dist.sigma = -1.0
    Traceback (most recent call last):
    ...
    variate_lab.errors.InvalidParameterError: Given parameter (or parameters) are not valid. ...
"""

from __future__ import annotations

import abc
import keyword
import numbers
from typing import Any, ClassVar, Dict, FrozenSet, Iterator, Optional, Tuple

import numpy as np
from loguru import logger

from .errors import InvalidGeneratorError, InvalidParameterError, UndefinedStatisticError
from .generators import XorShift128Generator
from .types import DistributionKind, DistributionSummary, Generator, SampleSize, SamplingStrategy


class _Auto:
    """Marker for 'build a default generator'."""

    def __repr__(self) -> str:
        return "AUTO"


AUTO: Any = _Auto()


def canonical_parameter_name(name: str) -> str:
    """Map reserved words to their attribute spelling (``lambda`` -> ``lambda_``)."""
    return f"{name}_" if keyword.iskeyword(name) else name


def resolve_generator(generator: Any = AUTO, seed: Optional[int] = None) -> Generator:
    """
    Turn the ``generator``/``seed`` constructor arguments into a generator.

    Omitting the generator builds an XorShift128Generator from ``seed`` (or
    from OS entropy). An explicit None, or an object lacking the generator
    contract, is rejected.

    Raises
    ------
    InvalidGeneratorError
        If ``generator`` is None or does not implement the contract.
    TypeError
        If both a generator and a seed are given.
    """
    if generator is AUTO:
        return XorShift128Generator(seed)
    if generator is None or not isinstance(generator, Generator):
        logger.error(f"Rejected generator: {generator!r}")
        raise InvalidGeneratorError()
    if seed is not None:
        raise TypeError("Pass either a generator or a seed, not both.")
    return generator


def parameter(name: str, doc: Optional[str] = None) -> property:
    """
    Create a property exposing one distribution parameter.

    Reading returns the committed value; assigning routes through
    ``set_parameter`` and so is validated against the other parameters.
    """
    def fget(self: "AbstractDistribution") -> Any:
        return self._params[name]

    def fset(self: "AbstractDistribution", value: Any) -> None:
        self.set_parameter(name, value)

    return property(fget, fset, doc=doc)


# =============================================================================
# ABSTRACT DISTRIBUTION
# =============================================================================

class AbstractDistribution(abc.ABC):
    """
    Base class of all distribution objects.

    Subclasses declare their parameters as class attributes and implement
    the statistics; this class handles generators, validation, sampling
    and summaries.

    Parameters
    ----------
    generator : Generator, optional
        Uniform source. Omit it to get an XorShift128Generator.
    seed : int, optional
        Seed for the default generator. Cannot be combined with ``generator``.
    strategy : SamplingStrategy, optional
        Replaces the sampler and validity predicate for this instance.
    **params
        Parameter values; missing ones take the class defaults.

    Raises
    ------
    InvalidGeneratorError
        If ``generator`` is None or not a generator.
    InvalidParameterError
        If the parameters fail the validity predicate.
    """

    #: Registry name, lowercase with underscores.
    name: ClassVar[str] = ""
    kind: ClassVar[DistributionKind]
    #: Parameter names in the order the strategy receives them.
    parameters: ClassVar[Tuple[str, ...]] = ()
    integer_parameters: ClassVar[FrozenSet[str]] = frozenset()
    defaults: ClassVar[Dict[str, Any]] = {}
    default_strategy: ClassVar[SamplingStrategy]

    def __init__(
        self,
        generator: Any = AUTO,
        *,
        seed: Optional[int] = None,
        strategy: Optional[SamplingStrategy] = None,
        **params: Any,
    ):
        self._generator = resolve_generator(generator, seed)
        self._strategy = strategy if strategy is not None else type(self).default_strategy
        self._params: Dict[str, Any] = {}

        params = {canonical_parameter_name(k): v for k, v in params.items()}
        unknown = set(params) - set(self.parameters)
        if unknown:
            raise KeyError(self._unknown_parameter_message(sorted(unknown)[0]))

        values = {p: params.get(p, self.defaults.get(p)) for p in self.parameters}
        self._commit(values)
        logger.debug(f"Created {self!r}")

    def __repr__(self) -> str:
        rendered = ", ".join(f"{k}={v!r}" for k, v in self._params.items())
        return f"{type(self).__name__}({rendered}, generator={self._generator!r})"

    # -------------------------------------------------------------------------
    # Parameters
    # -------------------------------------------------------------------------

    def _unknown_parameter_message(self, name: str) -> str:
        available = ", ".join(self.parameters)
        return f"Unknown parameter '{name}' for {self.name}. Available: {available}"

    def _coerce(self, name: str, value: Any) -> Any:
        """Normalise one parameter value to its declared numeric type."""
        if name in self.integer_parameters:
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise InvalidParameterError(
                    self.name, {name: value}, f"Parameter '{name}' must be an integer, got {value!r}."
                )
            return int(value)
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            raise InvalidParameterError(
                self.name, {name: value}, f"Parameter '{name}' must be a real number, got {value!r}."
            )
        return float(value)

    def _commit(self, values: Dict[str, Any]) -> None:
        try:
            candidate = {p: self._coerce(p, values[p]) for p in self.parameters}
        except InvalidParameterError as exc:
            logger.error(f"Rejected parameters for {self.name}: {exc}")
            raise
        if not self._strategy.is_valid(*(candidate[p] for p in self.parameters)):
            logger.error(f"Rejected parameters for {self.name}: {candidate}")
            raise InvalidParameterError(self.name, candidate)
        self._params = candidate
        self._args = tuple(candidate[p] for p in self.parameters)

    def set_parameter(self, name: str, value: Any) -> None:
        """Validate and commit a single parameter."""
        self.set_parameters(**{name: value})

    def set_parameters(self, **values: Any) -> None:
        """
        Validate and commit several parameters at once.

        Joint constraints (e.g. ``alpha <= beta``) are checked against the
        new combination, so bounds can be moved together in one call.

        Raises
        ------
        KeyError
            If a name is not a parameter of this distribution.
        InvalidParameterError
            If the resulting combination is invalid; nothing is changed.
        """
        candidate = dict(self._params)
        for raw_name, value in values.items():
            name = canonical_parameter_name(raw_name)
            if name not in self.parameters:
                raise KeyError(self._unknown_parameter_message(raw_name))
            candidate[name] = value
        self._commit(candidate)

    def is_valid_parameter(self, name: str, value: Any) -> bool:
        """Whether ``set_parameter(name, value)`` would succeed."""
        name = canonical_parameter_name(name)
        if name not in self.parameters:
            return False
        candidate = dict(self._params)
        candidate[name] = value
        try:
            args = [self._coerce(p, candidate[p]) for p in self.parameters]
        except InvalidParameterError:
            return False
        return bool(self._strategy.is_valid(*args))

    @classmethod
    def are_valid_params(cls, *args: Any, **kwargs: Any) -> bool:
        """Evaluate the default validity predicate on the given values."""
        return bool(cls.default_strategy.is_valid(*args, **kwargs))

    @property
    def parameter_values(self) -> Dict[str, Any]:
        """Copy of the current parameters, by name."""
        return dict(self._params)

    @property
    def strategy(self) -> SamplingStrategy:
        return self._strategy

    # -------------------------------------------------------------------------
    # Generator
    # -------------------------------------------------------------------------

    @property
    def generator(self) -> Generator:
        """The generator samples are drawn from."""
        return self._generator

    @property
    def can_reset(self) -> bool:
        return self._generator.can_reset

    def reset(self) -> bool:
        """Reset the generator to its seed; True on success."""
        return self._generator.reset()

    # -------------------------------------------------------------------------
    # Sampling
    # -------------------------------------------------------------------------

    def _draw(self) -> Any:
        return self._strategy.sample(self._generator, *self._args)

    @abc.abstractmethod
    def next_double(self) -> float:
        """Draw one sample as a float."""

    _dtype: ClassVar[type] = float

    def _next_value(self) -> Any:
        return self.next_double()

    def sample(self, size: SampleSize = 1) -> np.ndarray:
        """
        Draw an array of samples.

        Parameters
        ----------
        size : int or tuple
            Number of samples, or the shape of the returned array.

        Returns
        -------
        np.ndarray
            Float array for continuous distributions, int array for
            discrete ones.
        """
        shape = (size,) if isinstance(size, numbers.Integral) else tuple(size)
        if any(dim < 0 for dim in shape):
            raise ValueError(f"size must be non-negative, got {size}")
        count = int(np.prod(shape))
        draws = (self._next_value() for _ in range(count))
        return np.fromiter(draws, dtype=self._dtype, count=count).reshape(shape)

    def samples(self) -> Iterator[Any]:
        """Endless stream of samples."""
        while True:
            yield self._next_value()

    # -------------------------------------------------------------------------
    # Statistics
    # -------------------------------------------------------------------------

    def _undefined(self, statistic: str, for_params: bool = True):
        raise UndefinedStatisticError(statistic, self.name, for_params)

    @property
    @abc.abstractmethod
    def minimum(self) -> float: ...

    @property
    @abc.abstractmethod
    def maximum(self) -> float: ...

    @property
    @abc.abstractmethod
    def mean(self) -> float: ...

    @property
    @abc.abstractmethod
    def median(self) -> float: ...

    @property
    @abc.abstractmethod
    def variance(self) -> float: ...

    @property
    @abc.abstractmethod
    def mode(self) -> Tuple[float, ...]: ...

    def summary(self) -> DistributionSummary:
        """Collect all statistics, with None for the undefined ones."""
        def defined(attr: str) -> Any:
            try:
                return getattr(self, attr)
            except UndefinedStatisticError:
                return None

        return DistributionSummary(
            name=self.name,
            parameters=self.parameter_values,
            minimum=self.minimum,
            maximum=self.maximum,
            mean=defined("mean"),
            median=defined("median"),
            variance=defined("variance"),
            mode=defined("mode"),
        )


class ContinuousDistribution(AbstractDistribution):
    """Distribution producing floating point samples."""

    kind = DistributionKind.CONTINUOUS

    def next_double(self) -> float:
        return float(self._draw())


class DiscreteDistribution(AbstractDistribution):
    """Distribution producing integer samples."""

    kind = DistributionKind.DISCRETE
    _dtype = np.int64

    def next(self) -> int:
        """Draw one sample."""
        return int(self._draw())

    def next_double(self) -> float:
        return float(self.next())

    def _next_value(self) -> int:
        return self.next()
