"""Command-line interface for lap chart rendering."""

import sys
from typing import Optional

import click
from loguru import logger

from . import __version__
from .data_processing import (
    assign_colours,
    lapped_counts_from_positions,
    lapped_table_to_counts,
    load_driver_colours,
    load_lapped_counts,
    load_positions,
    positions_to_rows,
    preprocess_positions,
)
from .visualization import LapChart, LayoutMode


def _configure_logging(verbose: bool) -> None:
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "INFO")


@click.group(context_settings={"auto_envvar_prefix": "LAP_CHART"})
@click.version_option(version=__version__)
def main() -> None:
    """Lap chart renderer.

    Draws every driver's race position on every lap as an SVG lap chart.
    """
    pass


@main.command()
@click.argument("positions", type=click.Path(dir_okay=False))
@click.option("--output", "-o", default="-", help="Output SVG file ('-' for stdout)")
@click.option("--drivers", "drivers_path", default=None, help="CSV of driver colours")
@click.option("--lapped", "lapped_path", default=None, help="CSV of lapped drivers per lap")
@click.option("--line-height", default=20.0, show_default=True, help="Height of one position row")
@click.option("--path-width", default=4.0, show_default=True, help="Stroke width of driver lines")
@click.option(
    "--layout",
    type=click.Choice([mode.value for mode in LayoutMode]),
    default=LayoutMode.FIXED_BOX.value,
    show_default=True,
    help="Fixed lap cells or a golden-ratio graph",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def render(
    positions: str,
    output: str,
    drivers_path: Optional[str],
    lapped_path: Optional[str],
    line_height: float,
    path_width: float,
    layout: str,
    verbose: bool,
) -> None:
    """Render a lap chart from a CSV of per-lap positions."""
    _configure_logging(verbose)
    logger.info(f"Rendering lap chart from {positions}")

    try:
        positions_df = preprocess_positions(load_positions(positions))
        colours_df = load_driver_colours(drivers_path) if drivers_path else None
        if lapped_path:
            lapped = lapped_table_to_counts(load_lapped_counts(lapped_path))
        else:
            lapped = lapped_counts_from_positions(positions_df)
    except (FileNotFoundError, ValueError) as e:
        raise click.ClickException(str(e)) from e

    rows = positions_to_rows(positions_df)
    colours = assign_colours([name for name, _ in rows], colours_df)

    chart = LapChart(line_height=line_height, path_width=path_width, layout=layout)
    for name, driver_positions in rows:
        chart.add_driver(name, colours[name], driver_positions)
    chart.set_lapped_counts(lapped)

    svg = chart.generate()
    with click.open_file(output, "w", encoding="utf-8") as fh:
        fh.write(svg)
        if output == "-":
            fh.write("\n")

    if output != "-":
        logger.info(f"Lap chart saved to {output}")
        click.echo(f"Lap chart saved to: {output}", err=True)


if __name__ == "__main__":
    main()
