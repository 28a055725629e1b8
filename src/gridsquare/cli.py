"""CLI entrypoint for gridcalc."""

from __future__ import annotations

import logging
from contextlib import contextmanager

import click
from click.core import ParameterSource
from rich.console import Console

from gridsquare import config
from gridsquare.calculator import distance, evaluate
from gridsquare.geo import cardinal_direction, great_circle_distance
from gridsquare.locator import InvalidFormat
from gridsquare.models import DistanceResult
from gridsquare.units import UNIT_ORDER, UNITS, Unit, unit_from_token, unit_label

logger = logging.getLogger(__name__)

console = Console()

EXAMPLES = [
    ("FN42", "JO01", "Boston area to London area"),
    ("FN42hn", "DM13at", "Massachusetts to Arizona"),
    ("CN87", "CN88", "Adjacent grid squares"),
    ("JN25", "QF22", "Europe to Australia"),
]


@contextmanager
def _usage_exit_status():
    try:
        yield
    except click.UsageError as exc:
        exc.exit_code = 1
        raise


class GridCommand(click.Command):
    """Command that exits with status 1 on usage errors (click uses 2)."""

    def parse_args(self, ctx, args):
        with _usage_exit_status():
            return super().parse_args(ctx, args)

    def invoke(self, ctx):
        with _usage_exit_status():
            return super().invoke(ctx)


@click.command(cls=GridCommand, context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("grids", nargs=-1, metavar="GRID1 GRID2")
@click.option(
    "--unit", "-u", default=Unit.KILOMETERS.value, envvar=config.UNIT_ENVVAR,
    type=click.Choice([u.value for u in Unit]), show_default=True,
    help="Distance unit.",
)
@click.option("--verbose", "-v", is_flag=True, help="Show coordinates, all units and bearings.")
@click.option("--json", "as_json", is_flag=True, help="Print the full result as JSON.")
@click.pass_context
def cli(ctx: click.Context, grids: tuple[str, ...], unit: str, verbose: bool, as_json: bool):
    """Calculate distance and bearing between Maidenhead grid squares.

    GRID1 and GRID2 are 2, 4, 6 or 8 character locators (e.g. FN42, FN42hn).
    Run without arguments to see example calculations.

    \b
    Examples:
      gridcalc FN42 JO01
      gridcalc FN42hn DM13at --unit mi
      gridcalc CN87 CN88 --verbose
    """
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    unit_given = ctx.get_parameter_source("unit") is ParameterSource.COMMANDLINE
    if not grids and not (verbose or as_json or unit_given):
        run_examples()
        console.print(f"\nFor command-line usage, run: {ctx.command_path} --help")
        return

    if len(grids) < 2:
        raise click.UsageError("Both GRID1 and GRID2 are required", ctx)
    if len(grids) > 2:
        raise click.UsageError("Too many arguments", ctx)

    grid1, grid2 = grids
    selected = unit_from_token(unit)
    try:
        if verbose or as_json:
            result = evaluate(grid1, grid2, selected)
        else:
            dist = distance(grid1, grid2, selected)
    except InvalidFormat as exc:
        logger.debug("Rejected locator %r: %s", exc.locator, exc.reason)
        raise click.ClickException(str(exc)) from exc

    if as_json:
        click.echo(result.to_json())
    elif verbose:
        _print_verbose(grid1, grid2, result)
    else:
        click.echo(f"{dist:.1f} {unit_label(selected)}")


def _print_verbose(grid1: str, grid2: str, result: DistanceResult) -> None:
    src, dst = result.from_coordinate, result.to_coordinate

    click.echo(f"From: {grid1:<8} ({src.latitude:8.3f}°, {src.longitude:9.3f}°)")
    click.echo(f"To:   {grid2:<8} ({dst.latitude:8.3f}°, {dst.longitude:9.3f}°)")
    click.echo()
    click.echo("Distance:")
    for u in UNIT_ORDER:
        click.echo(f"  {great_circle_distance(src, dst, u):10.1f} {UNITS[u].verbose_label}")
    click.echo()
    click.echo(f"Bearing:      {result.bearing:5.0f}° ({cardinal_direction(result.bearing)})")
    click.echo(
        f"Back Bearing: {result.back_bearing:5.0f}° ({cardinal_direction(result.back_bearing)})"
    )


def run_examples() -> None:
    """Print the canned example calculations."""
    console.rule("Maidenhead Grid Square Distance Calculator")
    console.print("\nExample Calculations:")

    for grid1, grid2, description in EXAMPLES:
        try:
            result = evaluate(grid1, grid2, Unit.KILOMETERS)
        except InvalidFormat as exc:
            console.print(f"\n{description}: [red]Error - {exc}[/]")
            continue

        src, dst = result.from_coordinate, result.to_coordinate
        dist_mi = great_circle_distance(src, dst, Unit.MILES)
        dist_nm = great_circle_distance(src, dst, Unit.NAUTICAL_MILES)

        console.print(f"\n[bold]{description}[/]")
        console.print(f"  From: {grid1:<8} ({src.latitude:7.3f}°, {src.longitude:8.3f}°)")
        console.print(f"  To:   {grid2:<8} ({dst.latitude:7.3f}°, {dst.longitude:8.3f}°)")
        console.print(
            f"  Distance: {result.distance:.1f} km ({dist_mi:.1f} mi, {dist_nm:.1f} nm)"
        )
        console.print(
            f"  Bearing:  {result.bearing:.1f}° ({cardinal_direction(result.bearing)})"
        )

    console.print()
    console.rule()
