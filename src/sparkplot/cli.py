"""CLI entry point — plot whitespace-separated numbers read from stdin."""

from __future__ import annotations

import logging
import sys

import click
from rich.console import Console
from rich.logging import RichHandler

from sparkplot.api import example_gaussian, examples
from sparkplot.core.binning import InvalidConfiguration
from sparkplot.core.glyphs import ASCII, UNICODE
from sparkplot.core.models import RenderConfig
from sparkplot.core.reader import read_series
from sparkplot.renderer import render

console = Console(stderr=True)

# -h/--help is registered below; it exits with status 1
CONTEXT_SETTINGS = {"help_option_names": []}


def _show_help(ctx: click.Context, param: click.Parameter, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    click.echo("Plot stuff like this:\n")
    click.echo(example_gaussian(terminal_width=80))
    click.echo()
    click.echo(ctx.get_help())
    ctx.exit(1)


def _show_examples(ctx: click.Context, param: click.Parameter, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    click.echo(examples(color=not ctx.params.get("no_color", False)))
    ctx.exit(0)


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


@click.command(context_settings=CONTEXT_SETTINGS)
@click.option("-h", "--help", is_flag=True, expose_value=False, is_eager=True,
              callback=_show_help, help="Show this message and exit")
@click.option("--max", "max_value", type=float, default=None, help="Upper plot y-limit")
@click.option("--min", "min_value", type=float, default=None, help="Lower plot y-limit")
@click.option("--height", default=10, show_default=True, help="Plot height in lines")
@click.option("--width", default=0, show_default=True,
              help="Plot width in characters (0: one per value)")
@click.option("--title", default="SimplePlot", show_default=True, help="Plot title")
@click.option("--no-box", is_flag=True, help="Disable enclosing box")
@click.option("--no-color", is_flag=True, is_eager=True, help="Disable color output")
@click.option("--ascii", "ascii_only", is_flag=True, help="Plain ASCII glyphs only")
@click.option("--examples", is_flag=True, expose_value=False, callback=_show_examples,
              help="Show example plots and exit")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
def main(max_value, min_value, height, width, title, no_box, no_color, ascii_only, verbose):
    """Plot values read from STDIN as a sparkline.

    \b
    Usage:
      seq 1 100 | sparkplot
      echo 3 1 4 1 5 9 2 6 | sparkplot --height 3 --no-box
    """
    _setup_logging(verbose)
    data = read_series(sys.stdin)
    config = RenderConfig(rows=height, columns=width, box=not no_box, color=not no_color,
                          title=title, min_value=min_value, max_value=max_value)
    try:
        plot = render(data, config, glyphs=ASCII if ascii_only else UNICODE)
    except InvalidConfiguration as e:
        console.print(f"[red]Error:[/] {e}", highlight=False)
        sys.exit(1)
    click.echo(plot)
