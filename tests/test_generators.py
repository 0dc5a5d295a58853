"""
test_generators.py - Tests for the Uniform Pseudo-Random Engines

Tests cover:
- Seed normalisation and reset/replay
- Range contracts of next, next_uint and next_double
- Boolean buffering and byte filling
- ALF lag validation
- Lookup by name
"""

import math

import numpy as np
import pytest

from variate_lab import (
    ALFGenerator,
    GENERATORS,
    XorShift128Generator,
    create_generator,
)
from variate_lab.generators import INT_MAX, UINT_MAX, normalize_seed


class TestSeeding:
    """Tests for seed handling."""

    def test_explicit_seed_is_kept(self):
        """The seed passed in is reported back."""
        assert XorShift128Generator(seed=42).seed == 42

    def test_negative_seed_uses_absolute_value(self):
        """Negative seeds are folded onto their absolute value."""
        assert normalize_seed(-17) == 17
        assert XorShift128Generator(seed=-17).seed == 17

    def test_seed_out_of_range_rejected(self):
        """Seeds wider than 32 bits are rejected."""
        with pytest.raises(ValueError):
            normalize_seed(UINT_MAX + 1)

    def test_non_integer_seed_rejected(self):
        """Seeds must be integers."""
        with pytest.raises(TypeError):
            normalize_seed(1.5)

    def test_missing_seed_drawn_from_entropy(self):
        """Omitting the seed still gives a valid 32-bit seed."""
        seed = XorShift128Generator().seed
        assert 0 <= seed <= UINT_MAX

    def test_same_seed_same_sequence(self, any_gen):
        """Two instances with equal seeds produce equal sequences."""
        twin = type(any_gen)(42)
        first = [any_gen.next_double() for _ in range(50)]
        second = [twin.next_double() for _ in range(50)]
        assert first == second

    def test_different_seeds_differ(self, gen, gen_alternate):
        """Different seeds give different sequences."""
        assert [gen.next() for _ in range(10)] != [gen_alternate.next() for _ in range(10)]


class TestReset:
    """Tests for reset and replay."""

    def test_reset_replays_sequence(self, any_gen):
        """After reset the generator produces the same values again."""
        assert any_gen.can_reset
        first = [any_gen.next_double() for _ in range(100)]
        assert any_gen.reset() is True
        second = [any_gen.next_double() for _ in range(100)]
        assert first == second

    def test_reset_replays_mixed_calls(self, gen):
        """Replay holds across every output method, including booleans."""
        def draw():
            return (
                [gen.next(10) for _ in range(5)],
                [gen.next_boolean() for _ in range(40)],
                [gen.next_uint() for _ in range(5)],
                [gen.next_double(-1.0, 1.0) for _ in range(5)],
            )

        first = draw()
        gen.reset()
        assert draw() == first

    def test_reset_with_new_seed(self, gen):
        """reset(seed) switches to the sequence of that seed."""
        gen.reset(7)
        assert gen.seed == 7
        fresh = XorShift128Generator(7)
        assert [gen.next() for _ in range(10)] == [fresh.next() for _ in range(10)]


class TestIntegerRanges:
    """Tests for next and next_uint."""

    def test_next_below_int_max(self, any_gen):
        """next() never returns INT_MAX."""
        for _ in range(2000):
            assert 0 <= any_gen.next() < INT_MAX

    def test_next_with_stop(self, any_gen):
        """next(stop) lies in [0, stop)."""
        values = [any_gen.next(7) for _ in range(5000)]
        assert min(values) == 0
        assert max(values) == 6

    def test_next_with_start_and_stop(self, any_gen):
        """next(start, stop) lies in [start, stop)."""
        values = [any_gen.next(-5, 5) for _ in range(5000)]
        assert min(values) == -5
        assert max(values) == 4

    def test_empty_range_returns_lower_bound(self, gen):
        """An empty range yields its lower bound."""
        assert gen.next(0) == 0
        assert gen.next(3, 3) == 3

    def test_next_negative_stop_rejected(self, gen):
        """A negative upper bound is rejected."""
        with pytest.raises(ValueError, match="greater than or equal to zero"):
            gen.next(-1)

    def test_next_inverted_bounds_rejected(self, gen):
        """start > stop is rejected."""
        with pytest.raises(ValueError, match="greater than minValue"):
            gen.next(5, 2)

    def test_next_uint_range(self, any_gen):
        """next_uint() stays below UINT_MAX and next_uint(a, b) in [a, b)."""
        for _ in range(1000):
            assert 0 <= any_gen.next_uint() < UINT_MAX
            assert 10 <= any_gen.next_uint(10, 20) < 20

    def test_next_uint_negative_start_rejected(self, gen):
        """Unsigned ranges cannot start below zero."""
        with pytest.raises(ValueError):
            gen.next_uint(-1, 5)

    def test_inclusive_max_values(self, gen):
        """The inclusive variants cover the full signed and unsigned ranges."""
        for _ in range(1000):
            assert 0 <= gen.next_inclusive_max_value() <= INT_MAX
            assert 0 <= gen.next_uint_inclusive_max_value() <= UINT_MAX


class TestDoubles:
    """Tests for next_double."""

    def test_unit_interval(self, any_gen):
        """next_double() lies in [0, 1)."""
        values = np.array([any_gen.next_double() for _ in range(20000)])
        assert values.min() >= 0.0
        assert values.max() < 1.0
        assert np.isclose(values.mean(), 0.5, atol=0.01)

    def test_scaled_interval(self, gen):
        """next_double(stop) and next_double(start, stop) respect their bounds."""
        for _ in range(2000):
            assert 0.0 <= gen.next_double(3.0) < 3.0
            assert -2.0 <= gen.next_double(-2.0, 5.0) < 5.0

    def test_degenerate_interval(self, gen):
        """A zero-width interval returns its bound."""
        assert gen.next_double(2.5, 2.5) == 2.5

    @pytest.mark.parametrize("stop", [-1.0, math.inf, math.nan])
    def test_invalid_upper_bound(self, gen, stop):
        """Negative, infinite or NaN upper bounds are rejected."""
        with pytest.raises(ValueError):
            gen.next_double(stop)

    def test_infinite_width_rejected(self, gen):
        """An interval whose width overflows is rejected."""
        with pytest.raises(ValueError, match="cannot be infinity"):
            gen.next_double(-1e308, 1e308)

    def test_inverted_interval_rejected(self, gen):
        """start > stop is rejected."""
        with pytest.raises(ValueError):
            gen.next_double(2.0, 1.0)


class TestBooleansAndBytes:
    """Tests for next_boolean and next_bytes."""

    def test_booleans_are_fair(self, any_gen):
        """Roughly half of many booleans are True."""
        hits = sum(any_gen.next_boolean() for _ in range(20000))
        assert 9500 < hits < 10500

    def test_bytes_fill_buffer(self, gen):
        """Every position of the buffer is written and odd lengths work."""
        buffer = bytearray(4099)
        gen.next_bytes(buffer)
        assert len(buffer) == 4099
        assert len(set(buffer)) > 200

    def test_bytes_replay(self, gen):
        """Byte output replays after reset."""
        first = bytearray(37)
        gen.next_bytes(first)
        gen.reset()
        second = bytearray(37)
        gen.next_bytes(second)
        assert first == second

    def test_bytes_none_rejected(self, gen):
        """A missing buffer raises TypeError."""
        with pytest.raises(TypeError):
            gen.next_bytes(None)


class TestALFGenerator:
    """Tests specific to the lagged Fibonacci engine."""

    def test_default_lags(self):
        """Defaults are the (418, 1279) pair."""
        alf = ALFGenerator(1)
        assert (alf.short_lag, alf.long_lag) == (418, 1279)

    @pytest.mark.parametrize("short_lag, long_lag", [(0, 10), (10, 10), (12, 10), (-1, 5)])
    def test_invalid_lags_rejected(self, short_lag, long_lag):
        """Lags must satisfy 0 < short < long."""
        assert not ALFGenerator.are_valid_lags(short_lag, long_lag)
        with pytest.raises(ValueError):
            ALFGenerator(1, short_lag=short_lag, long_lag=long_lag)

    def test_changing_lag_resets(self):
        """Setting a lag restarts the sequence from the seed."""
        alf = ALFGenerator(3, short_lag=5, long_lag=17)
        alf.next_double()
        alf.short_lag = 7
        reference = ALFGenerator(3, short_lag=7, long_lag=17)
        assert [alf.next() for _ in range(40)] == [reference.next() for _ in range(40)]

    def test_invalid_lag_setter(self):
        """An invalid lag assignment is rejected and the old lag kept."""
        alf = ALFGenerator(3)
        with pytest.raises(ValueError):
            alf.long_lag = 100
        assert alf.long_lag == 1279


class TestLookup:
    """Tests for create_generator and GENERATORS."""

    def test_all_engines_registered(self):
        """All five engines are available by name."""
        assert set(GENERATORS) == {"xorshift128", "nr3", "mt19937", "alf", "standard"}

    def test_create_by_name(self):
        """create_generator is case-insensitive and passes the seed on."""
        engine = create_generator("NR3", 99)
        assert isinstance(engine, GENERATORS["nr3"])
        assert engine.seed == 99

    def test_unknown_name(self):
        """Unknown engine names raise KeyError."""
        with pytest.raises(KeyError, match="Unknown generator"):
            create_generator("nope")

    def test_engines_are_distinct(self, all_engines):
        """Different engines with the same seed produce different streams."""
        streams = {tuple(engine.next() for _ in range(5)) for engine in all_engines}
        assert len(streams) == len(all_engines)
