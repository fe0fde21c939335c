"""
Command-line interface for the distribution toolkit.

This CLI provides access to:
- The distribution catalog
- Density / mass evaluation
- Plotting windows and sampled plot data
- Normalization diagnostics
"""

import logging
import sys

import click
import pandas as pd

from distviz.catalog.plot_data import sample_plot_data
from distviz.catalog.registry import evaluate, get_distribution, list_distributions, plot_range
from distviz.diagnostics.normalization import (
    check_non_negative,
    check_normalization,
    check_window_coverage,
)
from distviz.utils import log as log_setup
from distviz.utils.constants import DEFAULT_NUM_POINTS


def _parse_params(ctx, param, values):
    """Turn repeated ``-p key=value`` options into a parameter dict."""
    params = {}
    for item in values:
        key, sep, raw = item.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"expected key=value, got {item!r}")
        try:
            params[key.strip()] = float(raw)
        except ValueError:
            raise click.BadParameter(f"value for {key.strip()!r} is not a number: {raw!r}")
    return params


def _fail(error: Exception) -> None:
    click.echo(f"Error: {error}", err=True)
    sys.exit(1)


params_option = click.option(
    "--param",
    "-p",
    "params",
    multiple=True,
    callback=_parse_params,
    metavar="KEY=VALUE",
    help="Distribution parameter (repeatable); omitted parameters use defaults",
)


@click.group()
@click.version_option(version="1.0.0")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose):
    """Distribution Toolkit - densities, mass functions and plotting windows."""
    if verbose:
        log_setup.setup(logging.DEBUG)


@cli.command("list")
@click.option("--kind", type=click.Choice(["continuous", "discrete"]), default=None)
def list_command(kind):
    """List available distributions."""
    rows = [
        {
            "name": spec.name,
            "display name": spec.display_name,
            "kind": spec.kind,
            "parameters": ", ".join(spec.parameter_names),
        }
        for spec in list_distributions(kind)
    ]
    click.echo(pd.DataFrame(rows).to_string(index=False))


@cli.command()
@click.argument("name")
@click.argument("x", type=float)
@params_option
def pdf(name, x, params):
    """Evaluate the density (or mass) of NAME at X."""
    try:
        value = evaluate(name, x, params)
        spec = get_distribution(name)
    except ValueError as e:
        _fail(e)

    label = "PMF" if spec.kind == "discrete" else "PDF"
    click.echo(f"{spec.display_name} {label} at x={x:g}: {value:.10g}")


@cli.command("range")
@click.argument("name")
@params_option
def range_command(name, params):
    """Show the plotting window for NAME."""
    try:
        window = plot_range(name, params)
    except ValueError as e:
        _fail(e)

    click.echo(f"Plot range: [{window.min:.6g}, {window.max:.6g}]")


@cli.command()
@click.argument("name")
@params_option
@click.option("--points", "-n", type=int, default=DEFAULT_NUM_POINTS, show_default=True,
              help="Intervals for continuous distributions")
@click.option("--csv", "as_csv", is_flag=True, help="Write CSV instead of a table")
def sample(name, params, points, as_csv):
    """Sample NAME over its plotting window."""
    try:
        data = sample_plot_data(name, params, num_points=points)
    except ValueError as e:
        _fail(e)

    frame = data.to_frame()
    if as_csv:
        click.echo(frame.to_csv(index=False), nl=False)
    else:
        click.echo(f"\n{data.display_name} ({data.plot_type} plot, {len(frame)} points)")
        click.echo(frame.to_string(index=False))


@cli.command()
@click.argument("name")
@params_option
def check(name, params):
    """Run normalization diagnostics for NAME."""
    try:
        results = {
            "Normalization": check_normalization(name, params),
            "Window coverage": check_window_coverage(name, params),
            "Non-negative": check_non_negative(name, params),
        }
    except ValueError as e:
        _fail(e)

    click.echo(f"\nDiagnostics for {get_distribution(name).display_name}:")
    for label, result in results.items():
        status = "PASS" if result.is_valid else "FAIL"
        click.echo(f"  {label:<16} {status}")
        for violation in result.violations:
            click.echo(f"    - {violation}")

    if not all(result.is_valid for result in results.values()):
        sys.exit(1)


if __name__ == "__main__":
    cli()
