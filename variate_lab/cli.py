"""
cli.py - Rich Command Line Interface for Variate Lab

Browse the distribution catalog, draw samples and check a distribution's
closed-form statistics from the shell.

Usage:
    variate-lab --help
    variate-lab list --kind discrete
    variate-lab generators
    variate-lab info gamma -p alpha=2 -p theta=0.5
    variate-lab sample normal -n 1000 -p mu=10 -p sigma=2 --seed 42 --output draws.npy
    variate-lab sample categorical -p weights=1,2,3 -n 20
    variate-lab check weibull -n 50000 -p alpha=1.5 --tolerance 0.05
"""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional

import numpy as np
import typer
from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .config import ENV_LOG_LEVEL, LabConfig, configure_logging
from .errors import InvalidParameterError
from .generators import GENERATORS
from .registry import DistributionFactory, DistributionRegistry
from .simulation import MomentValidator, goodness_of_fit
from .types import DistributionKind

# Initialize Typer app and Rich console
app = typer.Typer(
    name="variate-lab",
    help="🎲 Variate Lab: Pseudo-Random Generators & Probability Distributions",
    add_completion=False,
    rich_markup_mode="rich",
)
console = Console()


# =============================================================================
# ENUMS FOR CLI OPTIONS
# =============================================================================

class KindFilter(str, Enum):
    """Distribution families."""
    continuous = "continuous"
    discrete = "discrete"


# =============================================================================
# UTILITY FUNCTIONS
# =============================================================================

def fail(message: str) -> None:
    console.print(f"[red]Error:[/red] {message}")
    raise typer.Exit(1)


def parse_value(text: str) -> Any:
    """Integral text -> int, comma list -> list of floats, anything else -> float."""
    text = text.strip()
    if "," in text:
        return [float(part) for part in text.split(",") if part.strip()]
    try:
        return int(text)
    except ValueError:
        return float(text)


def parse_params(items: Optional[List[str]]) -> Dict[str, Any]:
    """Turn repeated ``-p name=value`` options into keyword arguments."""
    params: Dict[str, Any] = {}
    for item in items or []:
        name, sep, raw = item.partition("=")
        if not sep or not name.strip():
            fail(f"Expected name=value, got '{item}'")
        try:
            params[name.strip()] = parse_value(raw)
        except ValueError:
            fail(f"Parameter '{name.strip()}' is not a number: '{raw}'")
    return params


def load_config(generator: Optional[str], seed: Optional[int]) -> LabConfig:
    try:
        base = LabConfig.from_env()
        return LabConfig(
            generator=(generator or base.generator).lower(),
            seed=seed if seed is not None else base.seed,
            log_level=base.log_level,
        )
    except ValueError as exc:
        fail(str(exc))


def build_distribution(name: str, params: Dict[str, Any], config: Optional[LabConfig] = None):
    """Create a distribution, turning library errors into a CLI error line."""
    config = config if config is not None else LabConfig()
    factory = DistributionFactory(config.make_generator())
    try:
        return factory.create(name, **params)
    except KeyError as exc:
        fail(exc.args[0] if exc.args else str(exc))
    except (InvalidParameterError, ValueError) as exc:
        fail(str(exc))


def format_stat(value: Any) -> str:
    if value is None:
        return "[dim]undefined[/dim]"
    if isinstance(value, tuple):
        return ", ".join(format_stat(v) for v in value)
    return f"{value:.6g}"


def print_summary(dist) -> None:
    """Print a rich table of a distribution's statistics."""
    summary = dist.summary()
    table = Table(title=f"{type(dist).__name__}", box=box.ROUNDED, show_header=False, title_style="bold cyan")
    table.add_column("Property", style="dim")
    table.add_column("Value", style="bold")

    for key, value in summary.parameters.items():
        table.add_row(key, str(list(value)) if isinstance(value, tuple) else f"{value:g}")
    table.add_row("Minimum", format_stat(summary.minimum))
    table.add_row("Maximum", format_stat(summary.maximum))
    table.add_row("Mean", format_stat(summary.mean))
    table.add_row("Median", format_stat(summary.median))
    table.add_row("Variance", format_stat(summary.variance))
    table.add_row("Mode", format_stat(summary.mode))
    console.print(table)


# =============================================================================
# COMMANDS
# =============================================================================

@app.callback()
def configure(
    log_level: Optional[str] = typer.Option(None, "--log-level", "-l", help="Show library logs at this level"),
):
    """Pseudo-random generators and probability distributions."""
    level = log_level or os.environ.get(ENV_LOG_LEVEL)
    if level:
        try:
            configure_logging(level, replace=True)
        except ValueError as exc:
            fail(str(exc))


@app.command("list")
def list_distributions(
    kind: Optional[KindFilter] = typer.Option(None, "--kind", "-k", help="Only show one family"),
):
    """
    List the available distributions.

    Example:
        variate-lab list --kind continuous
    """
    registry = DistributionRegistry()
    selected = DistributionKind(kind.value) if kind is not None else None

    table = Table(title="Distributions", box=box.ROUNDED)
    table.add_column("Name", style="cyan")
    table.add_column("Kind", style="dim")
    table.add_column("Parameters")
    table.add_column("Description")

    for name in registry.list_distributions(selected):
        info = registry.get(name)
        params = ", ".join(f"{p}={info.defaults.get(p)!r}" for p in info.parameters)
        table.add_row(name, info.kind.value, params, info.description)

    console.print(table)


@app.command()
def generators():
    """List the available pseudo-random engines."""
    table = Table(title="Generators", box=box.ROUNDED)
    table.add_column("Name", style="cyan")
    table.add_column("Class")
    table.add_column("Description")
    for name in sorted(GENERATORS):
        cls = GENERATORS[name]
        doc = (cls.__doc__ or "").strip().split("\n")[0]
        table.add_row(name, cls.__name__, doc)
    console.print(table)


@app.command()
def info(
    name: str = typer.Argument(..., help="Distribution name (see `variate-lab list`)"),
    param: Optional[List[str]] = typer.Option(None, "--param", "-p", help="Parameter as name=value; repeatable"),
):
    """
    Show parameters and closed-form statistics of a distribution.

    Example:
        variate-lab info beta -p alpha=2 -p beta=5
    """
    dist = build_distribution(name, parse_params(param))
    console.print(Panel.fit(f"ℹ️  [bold]{dist.name}[/bold] ({dist.kind.value})", border_style="blue"))
    print_summary(dist)


@app.command()
def sample(
    name: str = typer.Argument(..., help="Distribution name"),
    count: int = typer.Option(10, "--count", "-n", min=1, help="Number of draws"),
    param: Optional[List[str]] = typer.Option(None, "--param", "-p", help="Parameter as name=value; repeatable"),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Generator seed for reproducibility"),
    generator: Optional[str] = typer.Option(None, "--generator", "-g", help="Engine name (see `variate-lab generators`)"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Save draws to .npy or .csv"),
):
    """
    Draw samples from a distribution.

    Example:
        variate-lab sample gamma -n 5000 -p alpha=0.5 --seed 42 --output gamma.csv
    """
    if output is not None and output.suffix not in (".npy", ".csv"):
        fail(f"Unknown output format: {output.suffix or output.name} (use .npy or .csv)")

    config = load_config(generator, seed)
    dist = build_distribution(name, parse_params(param), config)
    draws = dist.sample(count)

    console.print(
        f"  Drew [cyan]{count}[/cyan] values from [bold]{dist.name}[/bold] "
        f"using [cyan]{config.generator}[/cyan] (seed {dist.generator.seed})"
    )

    values = draws.astype(float)
    stats_table = Table(title="Sample Statistics", box=box.ROUNDED)
    stats_table.add_column("Statistic", style="dim")
    stats_table.add_column("Value", justify="right")
    stats_table.add_row("Mean", f"{np.mean(values):.6g}")
    stats_table.add_row("Std Dev", f"{np.std(values):.6g}")
    stats_table.add_row("Min", f"{np.min(values):.6g}")
    stats_table.add_row("Max", f"{np.max(values):.6g}")
    console.print(stats_table)

    shown = ", ".join(str(v) for v in draws[:10].tolist())
    console.print(f"  First values: {shown}{' ...' if count > 10 else ''}")

    if output is not None:
        if output.suffix == ".npy":
            np.save(output, draws)
        else:
            fmt = "%d" if dist.kind == DistributionKind.DISCRETE else "%.17g"
            np.savetxt(output, draws, delimiter=",", fmt=fmt, header=dist.name)
        console.print(f"\n  💾 Saved to: [bold]{output}[/bold]")


@app.command()
def check(
    name: str = typer.Argument(..., help="Distribution name"),
    count: int = typer.Option(50_000, "--count", "-n", min=2, help="Number of draws"),
    param: Optional[List[str]] = typer.Option(None, "--param", "-p", help="Parameter as name=value; repeatable"),
    tolerance: float = typer.Option(0.2, "--tolerance", "-t", help="Largest acceptable relative error"),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Generator seed"),
):
    """
    Compare sample statistics with the closed-form ones.

    Exits with code 1 if any statistic is out of tolerance.

    Example:
        variate-lab check poisson -p lambda_=12 -n 100000 --tolerance 0.02
    """
    if tolerance <= 0:
        fail(f"tolerance must be positive, got {tolerance}")
    config = load_config(None, seed)
    dist = build_distribution(name, parse_params(param), config)

    console.print(Panel.fit(f"🔬 [bold]Checking {dist.name}[/bold] with {count} draws", border_style="blue"))
    with console.status("[bold blue]Sampling..."):
        result = MomentValidator(dist, tolerance=tolerance).validate(count)

    table = Table(title="Closed Form vs Sample", box=box.ROUNDED)
    table.add_column("Statistic", style="dim")
    table.add_column("Expected", justify="right")
    table.add_column("Observed", justify="right")
    table.add_column("Rel. Error", justify="right")
    table.add_column("Status")
    for stat, expected in result.expected.items():
        error = result.relative_errors[stat]
        status = "[green]✓[/green]" if error <= tolerance else "[red]✗[/red]"
        table.add_row(stat, f"{expected:.6g}", f"{result.observed[stat]:.6g}", f"{error:.2%}", status)
    for stat in result.skipped:
        table.add_row(stat, "[dim]skipped[/dim]", "", "", "")
    console.print(table)

    if dist.kind == DistributionKind.CONTINUOUS:
        fit = goodness_of_fit(dist, n_samples=min(count, 5_000))
        verdict = "[green]not rejected[/green]" if fit.passed else "[red]rejected[/red]"
        console.print(f"  Kolmogorov-Smirnov: D={fit.statistic:.4f}, p={fit.p_value:.4f} ({verdict})")

    if not result.passed:
        console.print(f"[red]Out of tolerance:[/red] {', '.join(result.failures)}")
        raise typer.Exit(1)
    console.print("  [green]✓[/green] All statistics within tolerance")


@app.command()
def version():
    """Show version information."""
    from variate_lab import __version__

    console.print(Panel(
        f"[bold cyan]Variate Lab[/bold cyan] v{__version__}\n\n"
        "Seedable pseudo-random engines and 27 probability distributions\n"
        "with closed-form statistics.",
        title="Version",
        border_style="cyan",
    ))


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
