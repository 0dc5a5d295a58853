"""
generators.py - Uniform Random Number Generators

This module provides the uniform sources every distribution draws from:
- AbstractGenerator: The shared contract (ranges, booleans, bytes, reset)
- XorShift128Generator: Marsaglia's xorshift128+ style engine (default)
- NR3Generator: Numerical Recipes 3rd edition combined generator
- MT19937Generator: Mersenne Twister, backed by numpy's bit generator
- ALFGenerator: Additive lagged Fibonacci generator seeded from MT19937
- StandardGenerator: numpy's default bit generator (PCG64)

Design Principles:
-----------------
1. Engines implement only raw word production; ranges, booleans and bytes
   are derived once in AbstractGenerator
2. Every engine is resettable and replays its exact sequence after reset
3. Seeds are unsigned 32-bit integers; omitted seeds come from OS entropy
4. Bounds follow ``range``: ``next(stop)`` and ``next(start, stop)``

Example Usage:
-------------
    >>> from variate_lab.generators import XorShift128Generator, create_generator
    >>> gen = XorShift128Generator(seed=42)
    >>> first = [gen.next_double() for _ in range(3)]
    >>> gen.reset()
    True
    >>> first == [gen.next_double() for _ in range(3)]
    True
    >>> create_generator("nr3", seed=42).next(10, 20)  # doctest: +SKIP
    17
"""

from __future__ import annotations

import abc
import math
import operator
import numbers
from typing import Dict, List, Optional, Type

import numpy as np
from loguru import logger

from .computation import make_seed


# =============================================================================
# CONSTANTS
# =============================================================================

INT_MAX = 2**31 - 1
UINT_MAX = 2**32 - 1

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF

INT_TO_DOUBLE = 1.0 / (INT_MAX + 1.0)
UINT_TO_DOUBLE = 1.0 / (UINT_MAX + 1.0)
# 53 random bits fill a double mantissa exactly, keeping results below 1.0.
DOUBLE_UNIT = 2.0**-53

NEGATIVE_MAX_VALUE = "maxValue must be greater than or equal to zero."
MIN_GREATER_THAN_MAX = "maxValue should be greater than minValue."
INFINITE_MAX_VALUE = "maxValue cannot be infinity."
INFINITE_RANGE = "The difference between minValue and maxValue cannot be infinity."


def normalize_seed(seed: Optional[int]) -> int:
    """
    Validate a seed and fold it into the unsigned 32-bit range.

    Negative seeds are mapped to their absolute value. None draws a fresh
    seed from OS entropy.

    Raises
    ------
    TypeError
        If seed is not an integer.
    ValueError
        If |seed| does not fit in 32 bits.
    """
    if seed is None:
        return make_seed()
    if isinstance(seed, bool) or not isinstance(seed, numbers.Integral):
        raise TypeError(f"seed must be an integer, got {type(seed).__name__}")
    seed = abs(int(seed))
    if seed > UINT_MAX:
        logger.error(f"Seed {seed} does not fit in 32 bits")
        raise ValueError(f"seed must be at most {UINT_MAX}, got {seed}")
    return seed


# =============================================================================
# ABSTRACT GENERATOR
# =============================================================================

class AbstractGenerator(abc.ABC):
    """
    Base class for uniform random number generators.

    Subclasses provide the engine state (``_reset_state``) and three raw
    outputs; everything else (bounded integers, doubles, booleans, bytes)
    is derived here so that all engines agree on the public contract.

    Parameters
    ----------
    seed : int, optional
        Unsigned 32-bit seed. Drawn from OS entropy when omitted.

    Notes
    -----
    Instances are sequential state machines and are not thread-safe.
    Sharing one instance between distributions is supported; the caller
    then controls the interleaving of draws.
    """

    #: Short name used by ``create_generator`` and the CLI.
    name: str = ""

    def __init__(self, seed: Optional[int] = None):
        self._seed = normalize_seed(seed)
        self._bit_buffer = 0
        self._bit_count = 0
        self._reset_state(self._seed)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(seed={self._seed})"

    # -------------------------------------------------------------------------
    # Engine hooks
    # -------------------------------------------------------------------------

    @abc.abstractmethod
    def _reset_state(self, seed: int) -> None:
        """Initialise engine state from ``seed``."""

    @abc.abstractmethod
    def next_inclusive_max_value(self) -> int:
        """Return an integer in [0, INT_MAX]."""

    @abc.abstractmethod
    def next_uint_inclusive_max_value(self) -> int:
        """Return an integer in [0, UINT_MAX]."""

    @abc.abstractmethod
    def _next_unit(self) -> float:
        """Return a float in [0, 1)."""

    # -------------------------------------------------------------------------
    # Seed and reset
    # -------------------------------------------------------------------------

    @property
    def seed(self) -> int:
        """The seed the current sequence started from."""
        return self._seed

    @property
    def can_reset(self) -> bool:
        """Whether ``reset`` can replay the sequence."""
        return True

    def reset(self, seed: Optional[int] = None) -> bool:
        """
        Restart the sequence, optionally from a new seed.

        Parameters
        ----------
        seed : int, optional
            New seed. When omitted the stored seed is reused, so the
            generator replays exactly the values produced since the last
            reset.

        Returns
        -------
        bool
            True if the generator was reset, False if it cannot be.
        """
        if not self.can_reset:
            return False
        if seed is not None:
            self._seed = normalize_seed(seed)
        self._bit_buffer = 0
        self._bit_count = 0
        self._reset_state(self._seed)
        logger.debug(f"{type(self).__name__} reset with seed {self._seed}")
        return True

    # -------------------------------------------------------------------------
    # Integers
    # -------------------------------------------------------------------------

    def next(self, start: Optional[int] = None, stop: Optional[int] = None) -> int:
        """
        Return a random integer, using ``range``-style bounds.

        ``next()`` gives [0, INT_MAX), ``next(stop)`` gives [0, stop) and
        ``next(start, stop)`` gives [start, stop). An empty range returns
        its lower bound.

        Raises
        ------
        ValueError
            If ``stop`` is negative (one argument) or ``start > stop``.
        """
        if start is None:
            while True:
                result = self.next_inclusive_max_value()
                if result != INT_MAX:
                    return result

        if stop is None:
            stop = operator.index(start)
            if stop < 0:
                logger.error(f"Invalid upper bound {stop}")
                raise ValueError(NEGATIVE_MAX_VALUE)
            return int(self.next_inclusive_max_value() * INT_TO_DOUBLE * stop)

        start = operator.index(start)
        stop = operator.index(stop)
        if start > stop:
            logger.error(f"Invalid bounds [{start}, {stop})")
            raise ValueError(MIN_GREATER_THAN_MAX)
        return start + int(self._next_unit() * (stop - start))

    def next_uint(self, start: Optional[int] = None, stop: Optional[int] = None) -> int:
        """Return an unsigned integer: [0, UINT_MAX), [0, stop) or [start, stop)."""
        if start is None:
            while True:
                result = self.next_uint_inclusive_max_value()
                if result != UINT_MAX:
                    return result

        if stop is None:
            start, stop = 0, operator.index(start)
            if stop < 0:
                raise ValueError(NEGATIVE_MAX_VALUE)
        else:
            start = operator.index(start)
            stop = operator.index(stop)
            if start < 0:
                raise ValueError("minValue must be greater than or equal to zero.")
            if start > stop:
                raise ValueError(MIN_GREATER_THAN_MAX)
        return start + int(self.next_uint_inclusive_max_value() * UINT_TO_DOUBLE * (stop - start))

    # -------------------------------------------------------------------------
    # Doubles
    # -------------------------------------------------------------------------

    def next_double(self, start: Optional[float] = None, stop: Optional[float] = None) -> float:
        """
        Return a random float: [0, 1), [0, stop) or [start, stop).

        Raises
        ------
        ValueError
            If the upper bound is negative or infinite, if ``start > stop``,
            or if the width of the interval is infinite.
        """
        if start is None:
            return self._next_unit()

        if stop is None:
            stop = float(start)
            if not stop >= 0.0:
                raise ValueError(NEGATIVE_MAX_VALUE)
            if math.isinf(stop):
                raise ValueError(INFINITE_MAX_VALUE)
            return self._next_unit() * stop

        start = float(start)
        stop = float(stop)
        if not start <= stop:
            raise ValueError(MIN_GREATER_THAN_MAX)
        width = stop - start
        if math.isinf(width):
            raise ValueError(INFINITE_RANGE)
        return start + self._next_unit() * width

    # -------------------------------------------------------------------------
    # Booleans and bytes
    # -------------------------------------------------------------------------

    def next_boolean(self) -> bool:
        """
        Return a fair random boolean.

        One 32-bit word is drawn per 32 booleans; the buffer is discarded on
        reset so sequences replay exactly.
        """
        if self._bit_count == 0:
            self._bit_buffer = self.next_uint_inclusive_max_value()
            self._bit_count = 32
        self._bit_count -= 1
        bit = self._bit_buffer & 1
        self._bit_buffer >>= 1
        return bit == 1

    def next_bytes(self, buffer) -> None:
        """
        Fill a writable bytes-like object with random bytes, in place.

        Four bytes are produced per 32-bit word, little-endian.

        Raises
        ------
        TypeError
            If ``buffer`` is None or not writable.
        """
        if buffer is None:
            raise TypeError("buffer must not be None")
        view = memoryview(buffer).cast("B")
        length = len(view)
        full = length - length % 4
        for i in range(0, full, 4):
            view[i:i + 4] = self.next_uint_inclusive_max_value().to_bytes(4, "little")
        if full < length:
            tail = self.next_uint_inclusive_max_value().to_bytes(4, "little")
            view[full:] = tail[:length - full]


class _Word64Generator(AbstractGenerator):
    """Derives the public outputs from an engine yielding 64-bit words."""

    @abc.abstractmethod
    def _next_ulong(self) -> int:
        """Return the next 64-bit word."""

    def next_inclusive_max_value(self) -> int:
        return self._next_ulong() >> 33

    def next_uint_inclusive_max_value(self) -> int:
        return self._next_ulong() & _MASK32

    def _next_unit(self) -> float:
        return (self._next_ulong() >> 11) * DOUBLE_UNIT


class _Word32Generator(AbstractGenerator):
    """Derives the public outputs from an engine yielding 32-bit words."""

    @abc.abstractmethod
    def _next_word(self) -> int:
        """Return the next 32-bit word."""

    def next_inclusive_max_value(self) -> int:
        return self._next_word() >> 1

    def next_uint_inclusive_max_value(self) -> int:
        return self._next_word()

    def _next_unit(self) -> float:
        return (self._next_word() >> 1) * INT_TO_DOUBLE


# =============================================================================
# ENGINES
# =============================================================================

class XorShift128Generator(_Word64Generator):
    """
    XorShift generator with 128 bits of state (x, y).

    The seed perturbs the x word; y starts from a fixed non-zero constant so
    the state is never all zero.
    """

    name = "xorshift128"

    SEED_X = 521288629 << 32
    SEED_Y = 4101842887655102017

    def _reset_state(self, seed: int) -> None:
        self._x = (self.SEED_X + seed) & _MASK64
        self._y = self.SEED_Y

    def _next_ulong(self) -> int:
        tx, ty = self._x, self._y
        self._x = ty
        tx ^= (tx << 23) & _MASK64
        tx ^= tx >> 17
        tx ^= ty ^ (ty >> 26)
        self._y = tx
        return (tx + ty) & _MASK64


class NR3Generator(_Word64Generator):
    """
    Numerical Recipes (3rd ed.) ``Ran``: an LCG, a 64-bit xorshift and a
    multiply-with-carry generator combined.
    """

    name = "nr3"

    SEED_V = 4101842887655102017
    SEED_W = 1
    SEED_U1 = 2862933555777941757
    SEED_U2 = 7046029254386353087
    SEED_U3 = 4294957665

    def _reset_state(self, seed: int) -> None:
        self._v = self.SEED_V
        self._w = self.SEED_W
        self._u = seed ^ self._v
        self._next_ulong()
        self._v = self._u
        self._next_ulong()
        self._w = self._v
        self._next_ulong()

    def _next_ulong(self) -> int:
        u = (self._u * self.SEED_U1 + self.SEED_U2) & _MASK64
        v = self._v
        v ^= v >> 17
        v ^= (v << 31) & _MASK64
        v ^= v >> 8
        w = (self.SEED_U3 * (self._w & _MASK32) + (self._w >> 32)) & _MASK64
        x = u ^ ((u << 21) & _MASK64)
        x ^= x >> 35
        x ^= (x << 4) & _MASK64
        self._u, self._v, self._w = u, v, w
        return ((x + v) & _MASK64) ^ w


class MT19937Generator(_Word32Generator):
    """
    Mersenne Twister MT19937 using numpy's bit generator.

    Raw 32-bit outputs are fetched one state block (624 words) at a time.
    """

    name = "mt19937"

    BLOCK_SIZE = 624

    def _reset_state(self, seed: int) -> None:
        self._bit_generator = np.random.MT19937(seed)
        self._words: List[int] = []
        self._index = 0

    def _next_word(self) -> int:
        if self._index >= len(self._words):
            raw = self._bit_generator.random_raw(self.BLOCK_SIZE)
            self._words = (raw & _MASK32).tolist()
            self._index = 0
        word = self._words[self._index]
        self._index += 1
        return word


class ALFGenerator(_Word32Generator):
    """
    Additive lagged Fibonacci generator ``x[n] = x[n - short] + x[n - long]``.

    Parameters
    ----------
    seed : int, optional
        Seed of the MT19937 generator that fills the initial lag table.
    short_lag : int
        Short lag, 0 < short_lag < long_lag.
    long_lag : int
        Long lag; also the size of the state table.

    Notes
    -----
    Changing either lag resets the generator from its stored seed.
    """

    name = "alf"

    DEFAULT_SHORT_LAG = 418
    DEFAULT_LONG_LAG = 1279

    def __init__(
        self,
        seed: Optional[int] = None,
        short_lag: int = DEFAULT_SHORT_LAG,
        long_lag: int = DEFAULT_LONG_LAG,
    ):
        if not self.are_valid_lags(short_lag, long_lag):
            logger.error(f"Invalid ALF lags: short={short_lag}, long={long_lag}")
            raise ValueError("ALF lags must satisfy 0 < short_lag < long_lag.")
        self._short_lag = short_lag
        self._long_lag = long_lag
        super().__init__(seed)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(seed={self.seed}, "
            f"short_lag={self._short_lag}, long_lag={self._long_lag})"
        )

    @staticmethod
    def are_valid_lags(short_lag: int, long_lag: int) -> bool:
        """True if both lags are integers with 0 < short_lag < long_lag."""
        if not isinstance(short_lag, numbers.Integral) or not isinstance(long_lag, numbers.Integral):
            return False
        return 0 < short_lag < long_lag

    @property
    def short_lag(self) -> int:
        return self._short_lag

    @short_lag.setter
    def short_lag(self, value: int) -> None:
        if not self.are_valid_lags(value, self._long_lag):
            raise ValueError(f"short_lag must be in (0, {self._long_lag}), got {value}")
        self._short_lag = value
        self.reset()

    @property
    def long_lag(self) -> int:
        return self._long_lag

    @long_lag.setter
    def long_lag(self, value: int) -> None:
        if not self.are_valid_lags(self._short_lag, value):
            raise ValueError(f"long_lag must be greater than {self._short_lag}, got {value}")
        self._long_lag = value
        self.reset()

    def _reset_state(self, seed: int) -> None:
        source = MT19937Generator(seed)
        self._table = [source.next_uint_inclusive_max_value() for _ in range(self._long_lag)]
        self._index = self._long_lag

    def _fill(self) -> None:
        table = self._table
        short, long_ = self._short_lag, self._long_lag
        for j in range(short):
            table[j] = (table[j] + table[j + long_ - short]) & _MASK32
        for j in range(short, long_):
            table[j] = (table[j] + table[j - short]) & _MASK32
        self._index = 0

    def _next_word(self) -> int:
        if self._index >= self._long_lag:
            self._fill()
        word = self._table[self._index]
        self._index += 1
        return word


class StandardGenerator(_Word64Generator):
    """numpy's default bit generator (PCG64) behind the common contract."""

    name = "standard"

    BLOCK_SIZE = 256

    def _reset_state(self, seed: int) -> None:
        self._bit_generator = np.random.default_rng(seed).bit_generator
        self._words: List[int] = []
        self._index = 0

    def _next_ulong(self) -> int:
        if self._index >= len(self._words):
            self._words = self._bit_generator.random_raw(self.BLOCK_SIZE).tolist()
            self._index = 0
        word = self._words[self._index]
        self._index += 1
        return word


# =============================================================================
# LOOKUP
# =============================================================================

GENERATORS: Dict[str, Type[AbstractGenerator]] = {
    cls.name: cls
    for cls in (
        XorShift128Generator,
        NR3Generator,
        MT19937Generator,
        ALFGenerator,
        StandardGenerator,
    )
}

DEFAULT_GENERATOR = XorShift128Generator.name


def create_generator(name: str = DEFAULT_GENERATOR, seed: Optional[int] = None) -> AbstractGenerator:
    """
    Build a generator by name.

    Parameters
    ----------
    name : str
        One of ``GENERATORS`` (case-insensitive).
    seed : int, optional
        Seed for the new generator.

    Raises
    ------
    KeyError
        If the name is unknown.
    """
    key = name.lower()
    if key not in GENERATORS:
        available = ", ".join(sorted(GENERATORS))
        raise KeyError(f"Unknown generator '{name}'. Available: {available}")
    return GENERATORS[key](seed)
