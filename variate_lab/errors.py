"""
errors.py - Exception Types for Variate Lab

Every exception raised deliberately by variate_lab derives from
VariateLabError and from the builtin exception family that best describes
it, so callers can catch either the library base class or the builtin:

- InvalidGeneratorError (TypeError): missing or non-conforming generator
- InvalidParameterError (ValueError): parameters fail a validity predicate
- UndefinedStatisticError (ArithmeticError): a statistic has no value
  under the current parameters

Example Usage:
-------------
    >>> from variate_lab import Cauchy, UndefinedStatisticError
    >>> try:
    ...     Cauchy(seed=1).mean
    ... except UndefinedStatisticError as exc:
    ...     print(exc.statistic)
    mean
"""

from __future__ import annotations

from typing import Any, Dict, Optional


# =============================================================================
# MESSAGES
# =============================================================================

INVALID_PARAMETERS = "Given parameter (or parameters) are not valid."
NULL_GENERATOR = "Generator must not be undefined."


class VariateLabError(Exception):
    """Base class for all variate_lab errors."""


class InvalidGeneratorError(VariateLabError, TypeError):
    """Raised when a distribution is built without a usable generator."""

    def __init__(self, message: str = NULL_GENERATOR):
        super().__init__(message)


class InvalidParameterError(VariateLabError, ValueError):
    """
    Raised when a parameter, or a combination of parameters, is rejected.

    Parameters
    ----------
    distribution : str, optional
        Registry name of the distribution that rejected the values.
    parameters : dict, optional
        The rejected parameter values, by name.
    message : str, optional
        Override of the default message.
    """

    def __init__(
        self,
        distribution: Optional[str] = None,
        parameters: Optional[Dict[str, Any]] = None,
        message: Optional[str] = None,
    ):
        self.distribution = distribution
        self.parameters = dict(parameters or {})
        if message is None:
            message = INVALID_PARAMETERS
            if distribution is not None:
                rendered = ", ".join(f"{k}={v!r}" for k, v in self.parameters.items())
                message = f"{message} ({distribution}: {rendered})"
        super().__init__(message)


class UndefinedStatisticError(VariateLabError, ArithmeticError):
    """
    Raised when a descriptive statistic has no defined value.

    ``for_params`` distinguishes statistics undefined for the whole
    distribution family (Cauchy mean) from statistics undefined only under
    the current parameters (Chi-square mode with alpha < 2).
    """

    def __init__(self, statistic: str, distribution: Optional[str] = None, for_params: bool = False):
        self.statistic = statistic
        self.distribution = distribution
        self.for_params = for_params
        suffix = "under given parameters" if for_params else "for given distribution"
        super().__init__(f"{statistic.capitalize()} is undefined {suffix}.")
