"""
conftest.py - Pytest Configuration and Shared Fixtures

This file contains fixtures used across all test modules. Fixtures are
organized by category:
- Uniform generators (seeded, for reproducibility)
- Distribution objects
- Factories and registries
- CLI runner
"""

import pytest

from variate_lab import (
    ALFGenerator,
    DistributionFactory,
    DistributionRegistry,
    Gamma,
    MT19937Generator,
    NR3Generator,
    Normal,
    Poisson,
    StandardGenerator,
    XorShift128Generator,
    create_generator,
)


# =============================================================================
# UNIFORM GENERATORS
# =============================================================================

@pytest.fixture
def gen():
    """
    Provide a seeded XorShift128 generator for reproducible tests.

    All tests that draw numbers should use this fixture (or derive from it)
    so that failures can be replayed.
    """
    return XorShift128Generator(seed=42)


@pytest.fixture
def gen_alternate():
    """Alternate generator with a different seed for comparison tests."""
    return XorShift128Generator(seed=12345)


@pytest.fixture(params=["xorshift128", "nr3", "mt19937", "alf", "standard"])
def any_gen(request):
    """Every built-in engine, seeded with 42."""
    return create_generator(request.param, 42)


@pytest.fixture
def all_engines():
    """One instance of each engine class, seeded with 7."""
    return [
        XorShift128Generator(7),
        NR3Generator(7),
        MT19937Generator(7),
        ALFGenerator(7),
        StandardGenerator(7),
    ]


# =============================================================================
# DISTRIBUTIONS
# =============================================================================

@pytest.fixture
def standard_normal(gen):
    """Normal(0, 1) on the seeded generator."""
    return Normal(gen)


@pytest.fixture
def gamma_dist(gen):
    """Gamma with a fractional shape, exercising the rejection branch."""
    return Gamma(gen, alpha=2.5, theta=1.5)


@pytest.fixture
def poisson_dist(gen):
    """Poisson with a moderate rate."""
    return Poisson(gen, lambda_=4.0)


# =============================================================================
# FACTORIES AND REGISTRIES
# =============================================================================

@pytest.fixture
def registry():
    """A registry holding only the built-in distributions."""
    return DistributionRegistry()


@pytest.fixture
def factory(gen):
    """A DistributionFactory using the seeded generator."""
    return DistributionFactory(gen)


# =============================================================================
# CLI
# =============================================================================

@pytest.fixture
def cli_runner():
    """Typer test runner for invoking commands in-process."""
    from typer.testing import CliRunner

    return CliRunner()
