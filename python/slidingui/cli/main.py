"""Command line entry point for the sliding puzzle.

Usage::

    sliding-puzzle                 # 4×4 board
    sliding-puzzle -s 3            # 3×3 board
    sliding-puzzle --seed 7        # reproducible shuffles
"""

from __future__ import annotations

import logging
import os
import random
from enum import StrEnum
from typing import Optional

import typer

MIN_SIZE = 2
MAX_SIZE = 8


class LogLevel(StrEnum):
    debug = "DEBUG"
    info = "INFO"
    warning = "WARNING"
    error = "ERROR"


app = typer.Typer(add_completion=False)


@app.command()
def main(
    size: int = typer.Option(
        4, "-s", "--size",
        min=MIN_SIZE, max=MAX_SIZE,
        help=f"Grid size ({MIN_SIZE}-{MAX_SIZE}).",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed the shuffle for a reproducible sequence of boards.",
    ),
    log_level: LogLevel = typer.Option(
        LogLevel.warning, "--log-level",
        case_sensitive=False,
        help="Logging threshold for messages written to stderr.",
    ),
) -> None:
    """Sliding Puzzle Game."""
    logging.basicConfig(
        level=log_level.value,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if os.name == "nt":
        typer.echo("The terminal shell needs a POSIX terminal (termios).", err=True)
        raise typer.Exit(code=1)

    rng = random.Random(seed) if seed is not None else None

    # Imported late so ``--help`` works without a terminal.
    from slidingui.cli.rich.app import run

    run(size=size, rng=rng)


if __name__ == "__main__":
    app()
