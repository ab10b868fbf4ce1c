#!/usr/bin/env python3
"""Sliding Puzzle Game.

Usage::

    python main.py                 # shuffled 4×4, complexity 3
    python main.py -c 8            # harder shuffle
    python main.py --solved        # start from the solved board
    python main.py --seed 42 -v    # reproducible shuffle, debug log in fifteen.log
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


# -- helpers ------------------------------------------------------------------


def _build_handlers(verbose: bool, log_file: Path) -> list[logging.Handler]:
    # The board is redrawn with a cleared screen, so debug output goes to a file.
    console = RichHandler(rich_tracebacks=True, show_path=False)
    console.setLevel(logging.WARNING)
    handlers: list[logging.Handler] = [console]
    if verbose:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        handlers.append(file_handler)
    return handlers


def _configure_logging(verbose: bool, log_file: Path) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=_build_handlers(verbose, log_file),
    )


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    complexity: int = typer.Option(
        3, "-c", "--complexity",
        min=1, max=10,
        help="Shuffle complexity (1-10).",
    ),
    solved: bool = typer.Option(
        False, "--solved",
        help="Start from the solved board instead of a shuffled one.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed the shuffle for a reproducible puzzle.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Write engine activity at debug level to the log file.",
    ),
    log_file: Path = typer.Option(
        Path("fifteen.log"), "--log-file",
        help="Where --verbose writes its debug log.",
    ),
) -> None:
    """Sliding Puzzle Game."""
    _configure_logging(verbose, log_file)

    from frontend.cli.rich.app import run

    run(complexity=complexity, shuffled=not solved, seed=seed)


if __name__ == "__main__":
    app()
