"""
registry.py - Distribution Registry and Factory

This module provides lookup of distribution kinds by name:
- DistributionInfo: Metadata about a registered distribution class
- DistributionRegistry: Repository of available distributions
- DistributionFactory: Builds distributions (or plain samplers) that share
  one generator

Design Principles:
-----------------
1. Registry Pattern: Distributions are registered and accessed by name
2. Dependency Injection: The factory hands its generator to everything it builds
3. Validation: Parameter names are checked before anything is constructed

Example Usage:
-------------
    >>> from variate_lab.generators import XorShift128Generator
    >>> from variate_lab.registry import DistributionFactory
    >>>
    >>> factory = DistributionFactory(XorShift128Generator(seed=42))
    >>> normal = factory.create("normal", mu=0.0, sigma=1.0)
    >>> draw = factory.sampler("poisson", lambda_=4.0)
    >>> draw(1000).shape
    (1000,)
"""

from __future__ import annotations

import inspect
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple, Type, Union

import numpy as np
from loguru import logger

from .continuous import CONTINUOUS_DISTRIBUTIONS
from .discrete import DISCRETE_DISTRIBUTIONS
from .distributions import AbstractDistribution, canonical_parameter_name
from .generators import XorShift128Generator
from .types import DistributionKind, Generator, SamplerCallable, SamplingStrategy


# =============================================================================
# DISTRIBUTION REGISTRY
# =============================================================================

@dataclass
class DistributionInfo:
    """
    Metadata about a registered distribution.

    Attributes
    ----------
    name : str
        Canonical name of the distribution (lowercase).
    cls : type
        The AbstractDistribution subclass implementing it.
    parameters : Tuple[str, ...]
        Parameter names, in the order the sampler receives them.
    defaults : Dict[str, Any]
        Default value of every parameter.
    kind : DistributionKind
        Continuous or discrete.
    description : str
        Human-readable one-line description.
    """
    name: str
    cls: Type[AbstractDistribution]
    parameters: Tuple[str, ...]
    defaults: Dict[str, Any] = field(default_factory=dict)
    kind: DistributionKind = DistributionKind.CONTINUOUS
    description: str = ""

    @property
    def strategy(self) -> SamplingStrategy:
        return self.cls.default_strategy


class DistributionRegistry:
    """
    Repository of available probability distributions.

    All built-in continuous and discrete kinds are pre-registered; further
    AbstractDistribution subclasses can be added with ``register``.

    Examples
    --------
    >>> registry = DistributionRegistry()
    >>> registry.list_distributions(DistributionKind.DISCRETE)
    ['bernoulli', 'binomial', 'categorical', 'discrete_uniform', 'geometric', 'poisson']
    """

    def __init__(self):
        self._distributions: Dict[str, DistributionInfo] = {}
        self._register_builtins()

    def _register_builtins(self) -> None:
        for cls in CONTINUOUS_DISTRIBUTIONS + DISCRETE_DISTRIBUTIONS:
            self.register(cls)

    def register(self, cls: Type[AbstractDistribution], name: Optional[str] = None,
                 description: Optional[str] = None) -> None:
        """
        Register a distribution class.

        Parameters
        ----------
        cls : type
            AbstractDistribution subclass.
        name : str, optional
            Registry name; defaults to ``cls.name``. Lowercased.
        description : str, optional
            Defaults to the first line of the class docstring.
        """
        if not (isinstance(cls, type) and issubclass(cls, AbstractDistribution)):
            raise TypeError(f"Expected an AbstractDistribution subclass, got {cls!r}")
        name_lower = (name or cls.name).lower()
        if not name_lower:
            raise ValueError(f"{cls.__name__} has no name to register under")

        if description is None:
            doc = inspect.getdoc(cls) or ""
            description = doc.strip().split("\n\n")[0].replace("\n", " ")

        self._distributions[name_lower] = DistributionInfo(
            name=name_lower,
            cls=cls,
            parameters=tuple(cls.parameters),
            defaults=dict(cls.defaults),
            kind=cls.kind,
            description=description,
        )
        logger.debug(f"Registered distribution '{name_lower}' -> {cls.__name__}")

    def get(self, name: str) -> DistributionInfo:
        """
        Retrieve a registered distribution.

        Raises
        ------
        KeyError
            If the distribution is not registered.
        """
        name_lower = name.lower()
        if name_lower not in self._distributions:
            available = ", ".join(sorted(self._distributions.keys()))
            raise KeyError(f"Unknown distribution '{name}'. Available: {available}")
        return self._distributions[name_lower]

    def __contains__(self, name: str) -> bool:
        return name.lower() in self._distributions

    def list_distributions(self, kind: Optional[DistributionKind] = None) -> List[str]:
        """Sorted distribution names, optionally only those of one kind."""
        return sorted(
            name for name, info in self._distributions.items()
            if kind is None or info.kind == kind
        )

    def get_info(self, name: str) -> Dict[str, Any]:
        """
        Get detailed information about a distribution.

        Returns
        -------
        Dict[str, Any]
            Dictionary with keys: name, class, kind, parameters, defaults,
            description.
        """
        info = self.get(name)
        return {
            "name": info.name,
            "class": info.cls.__name__,
            "kind": info.kind.value,
            "parameters": info.parameters,
            "defaults": dict(info.defaults),
            "description": info.description,
        }


# =============================================================================
# DISTRIBUTION FACTORY
# =============================================================================

class DistributionFactory:
    """
    Factory for distributions that all draw from one generator.

    Parameters
    ----------
    generator : Generator, optional
        Uniform source shared by everything the factory builds. If None, a
        new XorShift128Generator seeded from OS entropy is used.
    registry : DistributionRegistry, optional
        Distribution registry. If None, uses default with builtins.

    Notes
    -----
    The factory validates parameter names at creation time, so typos are
    caught before any sampling takes place.
    """

    def __init__(self, generator: Optional[Generator] = None,
                 registry: Optional[DistributionRegistry] = None):
        self._generator = generator if generator is not None else XorShift128Generator()
        self._registry = registry if registry is not None else DistributionRegistry()

    @property
    def generator(self) -> Generator:
        """The generator handed to every distribution this factory builds."""
        return self._generator

    @property
    def registry(self) -> DistributionRegistry:
        return self._registry

    def list_distributions(self, kind: Optional[DistributionKind] = None) -> List[str]:
        return self._registry.list_distributions(kind)

    def create(self, dist_name: str, **params: Any) -> AbstractDistribution:
        """
        Build a distribution object.

        Parameters
        ----------
        dist_name : str
            Name of the distribution (case-insensitive).
        **params
            Distribution parameters; omitted ones take their defaults.

        Raises
        ------
        KeyError
            If the distribution is not registered.
        ValueError
            If a parameter name is not known to the distribution.
        InvalidParameterError
            If the parameter values are invalid.
        """
        info = self._registry.get(dist_name)
        params = {canonical_parameter_name(k): v for k, v in params.items()}
        self._validate_params(info, params)
        logger.info(f"Creating {info.name} with {params or 'default parameters'}")
        return info.cls(self._generator, **params)

    def sampler(self, dist_name: str, **params: Any) -> SamplerCallable:
        """
        Create a sampler function for the specified distribution.

        Returns
        -------
        SamplerCallable
            A callable that takes a sample size (int or shape tuple) and
            returns an array of samples.
        """
        distribution = self.create(dist_name, **params)

        def sampler(n: Union[int, tuple]) -> np.ndarray:
            return distribution.sample(n)

        return sampler

    def _validate_params(self, info: DistributionInfo, params: Dict[str, Any]) -> None:
        """Validate that every given parameter is known."""
        unknown = {canonical_parameter_name(p) for p in params} - set(info.parameters)
        if unknown:
            raise ValueError(
                f"Distribution '{info.name}' accepts parameters: {list(info.parameters)}. "
                f"Got unknown: {sorted(unknown)}"
            )
