"""
Command-line interface for mazegen.

Generates a maze and prints it as a Unicode diagram, optionally
animating generation and writing a grayscale TGA image.
"""

import click
from pydantic import ValidationError

from mazegen import __version__
from mazegen.config import MazeConfig
from mazegen.generators import MazeAlgorithm
from mazegen.hooks.visualization import MAX_DELAY_MS
from mazegen.maze import create_maze_from_config
from mazegen.utils.exceptions import MazeError
from mazegen.utils.logging import configure_logging, get_logger
from mazegen.visualization import RasterRenderer, TextRenderer

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="mazegen")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    help="Logging level for diagnostics on stderr",
)
def main(log_level):
    """
    mazegen: perfect maze generator

    Builds mazes with a depth-first backtracker, a Prim's-style growth
    algorithm, or recursive division, and renders them as Unicode line
    drawings or grayscale images.
    """
    configure_logging(level=log_level)


@main.command()
@click.argument("gen")
@click.argument("width", type=click.IntRange(min=0))
@click.argument("height", type=click.IntRange(min=0))
@click.argument("delay", type=click.IntRange(0, MAX_DELAY_MS), required=False, default=0)
@click.option("--seed", type=int, default=None, help="Seed for a reproducible maze")
@click.option("--tga", "tga_path", type=click.Path(dir_okay=False), default=None, help="Also write a TGA image")
@click.option(
    "--origin",
    type=click.Choice(["upper-left", "lower-left"]),
    default="upper-left",
    help="Pixel row order of the TGA image",
)
@click.option("--no-text", is_flag=True, help="Do not print the finished maze")
def generate(gen, width, height, delay, seed, tga_path, origin, no_text):
    """
    Generate a maze.

    GEN selects the algorithm: 0 (growth, Prim's algorithm),
    1 (depth-first backtracker) or 2 (recursive division); names are
    accepted too. DELAY is 0..1000 milliseconds to wait after each frame;
    if omitted or zero only the final maze is shown.

    Examples:
        mazegen generate 0 70 20 50
        mazegen generate division 41 21 --seed 7 --tga maze.tga
    """
    try:
        config = MazeConfig(
            width=width,
            height=height,
            algorithm=gen,
            delay_ms=delay,
            seed=seed,
            tga_path=tga_path,
            tga_origin=origin.replace("-", "_"),
            show_text=not no_text,
        )
    except ValidationError as e:
        raise click.UsageError(str(e)) from e

    try:
        grid = create_maze_from_config(config)

        if config.show_text:
            click.echo(TextRenderer().render(grid), nl=False)

        if config.tga_path is not None:
            RasterRenderer().save(grid, config.tga_path, origin=config.tga_origin)
    except MazeError as e:
        logger.error(f"Maze generation failed: {e}")
        raise click.ClickException(str(e)) from e
    except OSError as e:
        logger.error(f"Could not write {config.tga_path}: {e}")
        raise click.ClickException(f"Could not write image: {e}") from e


@main.command()
def algorithms():
    """List the available algorithms and their numeric codes."""
    for algorithm in MazeAlgorithm:
        click.echo(f"{algorithm.code}  {algorithm.value}")


if __name__ == "__main__":
    main()
