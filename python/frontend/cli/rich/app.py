"""Rich terminal frontend — tables, colours, and panels.

A thin shell over :class:`PuzzleBoard`: it turns keypresses into target
cell indices, forwards them to the engine, and redraws ``get_board()``.
"""

from __future__ import annotations

import logging
import random

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.gameplay import PuzzleBoard
from backend.models.board import Board
from frontend.cli.input_handler import LABELS, get_key, target_for, tile_index

logger = logging.getLogger(__name__)

console = Console()


# -- board rendering ----------------------------------------------------------


def _render_board(game: PuzzleBoard) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    side = game.side
    board = Board(side=side, cells=list(game.get_board()), blank_index=game.blank_index)
    width = len(str(board.size - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(side):
        table.add_column(width=width + 1, justify="center")

    for r, row in enumerate(board.rows()):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append("[dim]·[/dim]")
            elif board.is_tile_correct(r * side + c):
                cells.append(f"[bold green]{val:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{val:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


def _render_keys(side: int) -> Table:
    """Key legend: typing a cell's label slides the tile in that cell."""
    table = Table(
        show_header=False,
        box=rich.box.SIMPLE,
        border_style="dim",
        padding=(0, 1),
    )
    for _ in range(side):
        table.add_column(justify="center", style="dim cyan")
    for r in range(side):
        table.add_row(*LABELS[r * side : (r + 1) * side])
    return table


# -- screens ------------------------------------------------------------------


def _draw_game(game: PuzzleBoard, status: str = "") -> None:
    console.clear()

    side = game.side
    layout = Table.grid(padding=(0, 4))
    layout.add_column()
    layout.add_column()
    layout.add_row(_render_board(game), _render_keys(side))

    stats = Text()
    stats.append("  Moves: ", style="dim")
    stats.append(str(game.moves), style="bold yellow")

    controls = Text()
    controls.append("  ↑↓←→", style="bold cyan")
    controls.append(" / ", style="dim")
    controls.append("cell key", style="bold cyan")
    controls.append("  move   ", style="dim")
    controls.append("U", style="bold cyan")
    controls.append("  undo   ", style="dim")
    controls.append("R", style="bold cyan")
    controls.append("  restart   ", style="dim")
    controls.append("N", style="bold cyan")
    controls.append("  new   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  quit", style="dim")

    panel = Panel(
        Align.center(layout),
        title=f"[bold cyan]Sliding Puzzle  {side}×{side}[/bold cyan]",
        border_style="bright_blue",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(stats))
    if status:
        console.print(Align.center(Text.from_markup(f"  {status}")))
    console.print(Align.center(controls))


def _draw_win(game: PuzzleBoard, moves: int) -> None:
    console.clear()

    side = game.side

    congrats = Text()
    congrats.append("\n  ★ ", style="bold yellow")
    congrats.append("CONGRATULATIONS!", style="bold green")
    congrats.append("  You solved it!  ", style="green")
    congrats.append("★\n", style="bold yellow")

    stats = Text()
    stats.append("  Moves: ", style="dim")
    stats.append(str(moves), style="bold yellow")

    group = Group(
        Align.center(_render_board(game)),
        Align.center(congrats),
        Align.center(stats),
    )

    panel = Panel(
        group,
        title=f"[bold green]Sliding Puzzle  {side}×{side}[/bold green]",
        border_style="bold green",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    console.print(
        Align.center(
            Text(
                "\n  U to undo, N for a new puzzle, Q to quit.\n",
                style="dim",
            )
        )
    )


# -- input handling -----------------------------------------------------------


def _handle_key(game: PuzzleBoard, key: str) -> str:
    """Apply *key* to *game* and return a status line for the next redraw."""
    if key == "undo":
        if not game.undo():
            return "[yellow]Nothing to undo.[/yellow]"
        return ""
    if key == "restart":
        game.reset()
        return "[yellow]Back to the starting position.[/yellow]"

    target = target_for(key, game.blank_index, game.side)
    if target is None:
        target = tile_index(key, game.side)
    if target is None:
        return ""
    if not game.move(target):
        return f"[red]Tile {LABELS[target]} is not next to the blank.[/red]"
    return ""


# -- game loop ----------------------------------------------------------------


def _new_game(shuffled: bool, complexity: int, rng: random.Random) -> PuzzleBoard:
    return PuzzleBoard(shuffled=shuffled, complexity=complexity, rng=rng)


def _play(shuffled: bool, complexity: int, rng: random.Random) -> None:
    game = _new_game(shuffled, complexity, rng)
    status = ""

    while True:
        solved = game.is_solved()
        if solved and solved.moves:
            _draw_win(game, solved.moves)
        else:
            _draw_game(game, status)
        status = ""

        key = get_key()
        if key == "quit":
            return
        if key == "new":
            game = _new_game(True, complexity, rng)
            status = "[yellow]Shuffled![/yellow]"
            continue
        status = _handle_key(game, key)


# -- public entry point -------------------------------------------------------


def run(complexity: int = 3, shuffled: bool = True, seed: int | None = None) -> None:
    """Launch the Rich CLI."""
    logger.debug("Starting Rich frontend: complexity=%d shuffled=%s seed=%s",
                 complexity, shuffled, seed)
    _play(shuffled, complexity, random.Random(seed))
    console.clear()
    console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
