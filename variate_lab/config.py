"""
config.py - Runtime Configuration

Library-wide settings that are not tied to one distribution:
- LabConfig: Default generator engine, seed and log level
- configure_logging: Turn on variate_lab's loguru output

Settings can come from the environment:

    VARIATE_LAB_GENERATOR   engine name (see ``generators.GENERATORS``)
    VARIATE_LAB_SEED        unsigned 32-bit seed; unset means OS entropy
    VARIATE_LAB_LOG_LEVEL   loguru level name, e.g. DEBUG or WARNING

Example Usage:
-------------
    >>> from variate_lab.config import LabConfig, configure_logging
    >>> config = LabConfig(generator="mt19937", seed=42)
    >>> gen = config.make_generator()
    >>> configure_logging("DEBUG")
"""

from __future__ import annotations

import contextlib
import os
import sys
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from loguru import logger

from .generators import DEFAULT_GENERATOR, GENERATORS, UINT_MAX, AbstractGenerator, create_generator

ENV_GENERATOR = "VARIATE_LAB_GENERATOR"
ENV_SEED = "VARIATE_LAB_SEED"
ENV_LOG_LEVEL = "VARIATE_LAB_LOG_LEVEL"

LOG_FORMAT = "[{time:HH:mm:ss}] <level>{message}</level>"
LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")

# Handlers installed by configure_logging.
_handler_ids = []


@dataclass(frozen=True)
class LabConfig:
    """
    Library settings.

    Parameters
    ----------
    generator : str
        Engine name used when no generator is given explicitly.
    seed : int, optional
        Seed for that engine. None draws one from OS entropy.
    log_level : str
        Minimum level passed to ``configure_logging``.

    Raises
    ------
    ValueError
        If the engine name, seed or level is not recognised.
    """
    generator: str = DEFAULT_GENERATOR
    seed: Optional[int] = None
    log_level: str = "WARNING"

    def __post_init__(self):
        if self.generator not in GENERATORS:
            available = ", ".join(sorted(GENERATORS))
            raise ValueError(f"Unknown generator '{self.generator}'. Available: {available}")
        if self.seed is not None and not 0 <= self.seed <= UINT_MAX:
            raise ValueError(f"Seed must be in [0, {UINT_MAX}], got {self.seed}")
        if self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(f"Unknown log level '{self.log_level}'. Available: {', '.join(LOG_LEVELS)}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "LabConfig":
        """Read settings from ``environ`` (default ``os.environ``); unset keys keep their defaults."""
        environ = os.environ if environ is None else environ
        kwargs: dict = {}

        generator = environ.get(ENV_GENERATOR, "").strip()
        if generator:
            kwargs["generator"] = generator.lower()

        seed = environ.get(ENV_SEED, "").strip()
        if seed:
            try:
                kwargs["seed"] = int(seed)
            except ValueError:
                raise ValueError(f"{ENV_SEED} must be an integer, got '{seed}'") from None

        level = environ.get(ENV_LOG_LEVEL, "").strip()
        if level:
            kwargs["log_level"] = level.upper()

        return cls(**kwargs)

    def make_generator(self) -> AbstractGenerator:
        """Build the configured engine."""
        return create_generator(self.generator, self.seed)


def configure_logging(level: str = "INFO", sink: Any = None, replace: bool = False) -> int:
    """
    Enable variate_lab log output.

    The package is silent by default. This installs one handler writing to
    ``sink`` (stderr by default) and removes any handler an earlier call
    installed, so repeated calls do not duplicate output. Handlers added by
    the host application are left alone unless ``replace`` is True, in
    which case every loguru handler is removed first.

    Returns
    -------
    int
        The loguru handler id, for ``logger.remove``.
    """
    if replace:
        logger.remove()
    else:
        while _handler_ids:
            # Already gone if the host removed it.
            with contextlib.suppress(ValueError):
                logger.remove(_handler_ids.pop())
    _handler_ids.clear()
    logger.enable("variate_lab")
    handler_id = logger.add(sys.stderr if sink is None else sink, format=LOG_FORMAT, level=level.upper())
    _handler_ids.append(handler_id)
    return handler_id
