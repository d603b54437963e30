"""Rich terminal frontend — styled grid, live clock, and win panel.

Only draws and reads keys; every rule lives in :mod:`slidingcore`.
"""

from __future__ import annotations

import random
import sys
import time

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from slidingcore.engine.gameplay import GamePlay, MoveEngine, WinDetector
from slidingcore.models.board import Board, Direction
from slidingui.cli.input_handler import get_key, get_key_timeout

console = Console()

_DIRECTIONS = {
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
}


# -- helpers ------------------------------------------------------------------


def format_time(seconds: int) -> str:
    """Format *seconds* as ``MM:SS``; minutes are not capped at 59."""
    m, s = divmod(int(seconds), 60)
    return f"{m:02d}:{s:02d}"


class _Clock:
    """Feeds whole wall-clock seconds into the game session."""

    def __init__(self) -> None:
        self._last = time.monotonic()

    def reset(self) -> None:
        self._last = time.monotonic()

    def advance(self, game: GamePlay) -> bool:
        """Tick *game* once per elapsed second. Returns True if it ticked."""
        now = time.monotonic()
        ticked = False
        while now - self._last >= 1.0:
            game.tick()
            self._last += 1.0
            ticked = True
        return ticked


# -- board rendering ----------------------------------------------------------


def tile_styles(board: Board) -> dict[int, str]:
    """Map each numbered tile to its style: placed, slidable or neither."""
    misplaced = set(WinDetector.misplaced(board))
    movable = set(MoveEngine.movable_values(board))
    styles: dict[int, str] = {}
    for tile in board.tiles:
        if tile.value == 0:
            continue
        if tile.value not in misplaced:
            styles[tile.value] = "bold green"
        elif tile.value in movable:
            styles[tile.value] = "bold cyan"
        else:
            styles[tile.value] = "bold white"
    return styles


def render_board(board: Board) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(board.size * board.size - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.size):
        table.add_column(width=width + 1, justify="center")

    styles = tile_styles(board)
    for row in board.rows():
        cells: list[str] = []
        for val in row:
            if val == 0:
                cells.append("[dim]·[/dim]")
            else:
                style = styles[val]
                cells.append(f"[{style}]{val:>{width}}[/{style}]")
        table.add_row(*cells)

    return table


def _stats(game: GamePlay) -> Text:
    stats = Text()
    stats.append("  Moves: ", style="dim")
    stats.append(str(game.state.moves), style="bold yellow")
    stats.append("    Time: ", style="dim")
    stats.append(format_time(game.state.elapsed), style="bold yellow")
    return stats


# -- game screens -------------------------------------------------------------


def _draw_game(game: GamePlay, entry: str = "", status: str = "") -> None:
    console.clear()

    size = game.size
    board_table = render_board(game.board)

    controls = Text()
    controls.append("  ↑↓←→", style="bold cyan")
    controls.append(" / ", style="dim")
    controls.append("WASD", style="bold cyan")
    controls.append("  slide   ", style="dim")
    controls.append("0-9 ⏎", style="bold cyan")
    controls.append("  tile   ", style="dim")
    controls.append("R", style="bold cyan")
    controls.append("  shuffle   ", style="dim")
    controls.append("T", style="bold cyan")
    controls.append("  reset timer   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  quit", style="dim")

    panel = Panel(
        Align.center(board_table),
        title=f"[bold cyan]Sliding Puzzle  {size}×{size}[/bold cyan]",
        border_style="bright_blue",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    # Save cursor position right before the stats line so _update_time()
    # can later restore to this exact spot and overwrite only this line.
    sys.stdout.write("\033[s")
    sys.stdout.flush()
    console.print(Align.center(_stats(game)))
    if entry:
        console.print(Align.center(Text(f"  Tile: {entry}_", style="bold cyan")))
    if status:
        console.print(Align.center(Text.from_markup(f"  {status}")))
    console.print(Align.center(controls))


def _update_time(game: GamePlay) -> None:
    """Overwrite just the stats line using the saved cursor position."""
    _DIM = "\033[2m"
    _YB = "\033[33;1m"
    _RS = "\033[0m"

    clock = format_time(game.state.elapsed)
    stats_raw = (
        f"{_DIM}Moves: {_RS}{_YB}{game.state.moves}{_RS}"
        f"    {_DIM}Time: {_RS}{_YB}{clock}{_RS}"
    )

    # Centre the visible text to match what Rich would produce.
    visible_len = len(f"Moves: {game.state.moves}    Time: {clock}")
    pad = max(0, (console.width - visible_len) // 2)

    sys.stdout.write(f"\033[u\033[K{' ' * pad}{stats_raw}")
    sys.stdout.flush()


def _draw_win(game: GamePlay) -> None:
    console.clear()

    size = game.size
    board_table = render_board(game.board)

    congrats = Text()
    congrats.append("\n  ★ ", style="bold yellow")
    congrats.append("You Win!", style="bold green")
    congrats.append(" ★\n", style="bold yellow")

    summary = Text(
        f"  Completed in {game.state.moves} moves and "
        f"{format_time(game.state.elapsed)}",
        style="green",
    )

    panel = Panel(
        Group(
            Align.center(board_table),
            Align.center(congrats),
            Align.center(summary),
        ),
        title=f"[bold green]Sliding Puzzle  {size}×{size}[/bold green]",
        border_style="bold green",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    console.print(
        Align.center(Text("\n  Press R to play again, Q to quit.\n", style="dim"))
    )


# -- input handling -----------------------------------------------------------


def _submit_tile(game: GamePlay, entry: str) -> str:
    """Move the tile typed by the player. Returns a status message."""
    value = int(entry)
    if not 1 <= value < game.size * game.size:
        return f"[yellow]There is no tile {value}.[/yellow]"
    if not game.move_tile(value):
        return f"[yellow]Tile {value} is not next to the gap.[/yellow]"
    return ""


def _play_game(game: GamePlay) -> bool:
    """Run one board until it is won. Returns False if the player quit."""
    clock = _Clock()
    entry = ""
    status = ""

    while not game.is_won:
        _draw_game(game, entry, status)
        status = ""

        # Wait for input with a short timeout so the clock keeps ticking.
        while True:
            key = get_key_timeout(0.5)
            if key is not None:
                break
            if clock.advance(game):
                _update_time(game)
        clock.advance(game)

        if key in _DIRECTIONS:
            entry = ""
            game.move(_DIRECTIONS[key])
        elif key.isdigit():
            entry = (entry + key)[-3:]
        elif key == "backspace":
            entry = entry[:-1]
        elif key == "enter" and entry:
            status = _submit_tile(game, entry)
            entry = ""
        elif key == "reshuffle":
            game.reshuffle()
            clock.reset()
            entry = ""
        elif key == "reset_timer":
            game.reset_timer()
            clock.reset()
        elif key == "quit":
            return False

    return True


# -- public entry point -------------------------------------------------------


def run(size: int, rng: random.Random | None = None) -> None:
    """Launch the Rich terminal game on a *size*×*size* board."""
    game = GamePlay(size, rng)

    while _play_game(game):
        _draw_win(game)
        while True:
            key = get_key()
            if key == "reshuffle":
                game.reshuffle()
                break
            if key == "quit":
                console.clear()
                return

    console.clear()
    console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
