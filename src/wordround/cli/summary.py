"""CLI command for showing a finished game's summary."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Optional

import click

from wordround.game.models import Game, game_from_dict
from wordround.summary.screen import SummaryConfig, SummaryScreen


def setup_logging(verbose: bool = False) -> None:
    """Setup logging configuration.

    Args:
        verbose: Enable verbose (DEBUG) logging
    """
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )


class StaticViewModel:
    """Holds a loaded game. Replays are not available outside the app."""

    def __init__(self, game: Game):
        self.game = game

    def play_again(self) -> None:
        logging.info("Play again is only available in the game")


@click.group()
def cli():
    """wordround summary screen commands."""
    pass


@cli.command()
@click.argument("path", type=click.Path(exists=True, path_type=Path))
@click.option("--breakdown", is_flag=True, help="Also show the round breakdown")
@click.option("--plain", is_flag=True, help="Plain text output")
@click.option("--width", type=int, default=None, help="Override terminal width")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
def show(path: Path, breakdown: bool, plain: bool, width: Optional[int], verbose: bool) -> None:
    """Show the summary of a finished game.

    PATH is the path to a game JSON file.
    """
    setup_logging(verbose)

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        click.echo(f"Error: Invalid JSON file: {e}", err=True)
        sys.exit(1)
    except OSError as e:
        click.echo(f"Error: Could not read file: {e}", err=True)
        sys.exit(1)

    try:
        game = game_from_dict(data)
    except (KeyError, TypeError, ValueError) as e:
        click.echo(f"Error: Invalid game: {e}", err=True)
        sys.exit(1)

    config = SummaryConfig(plain=True if plain else None, terminal_width=width)
    screen = SummaryScreen(StaticViewModel(game), config)

    screens = [screen.render()]
    if breakdown:
        screen.show_breakdown()
        screens.append(screen.render())
    screen.close()

    for rendered in screens:
        if isinstance(rendered, str):
            click.echo(rendered)
        else:
            screen.rich_display.console.print(rendered)


if __name__ == "__main__":
    cli()
