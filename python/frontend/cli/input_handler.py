"""Single-keypress reader and key-to-cell translation for the terminal frontend.

Handles arrow keys, command letters and cell labels without requiring
Enter. Works on macOS / Linux (tty+termios) and Windows (msvcrt).
"""

from __future__ import annotations

import os
import string
import sys

from backend.models.board import Direction, neighbour

# Cell labels in row-major order: 0-9 then a-z.
LABELS = string.digits + string.ascii_lowercase


# -- low-level character readers -----------------------------------------------


def _getch_unix() -> str:
    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        ch = sys.stdin.read(1)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)
    return ch


def _getch_windows() -> str:
    import msvcrt  # type: ignore[import-not-found]

    ch = msvcrt.getch()
    # Arrow keys arrive as a 0xe0 prefix followed by a scan code.
    if ch in (b"\x00", b"\xe0"):
        return _WINDOWS_ARROWS.get(msvcrt.getch(), "")
    return ch.decode("utf-8", errors="ignore")


_getch = _getch_windows if os.name == "nt" else _getch_unix


# -- shared key mapping --------------------------------------------------------

_KEY_MAP: dict[str, str] = {
    "q": "quit",
    "Q": "quit",
    "\x03": "quit",  # Ctrl-C
    "u": "undo",
    "U": "undo",
    "\x08": "undo",  # Backspace
    "\x7f": "undo",
    "r": "restart",
    "R": "restart",
    "n": "new",
    "N": "new",
}

_ARROW_MAP: dict[str, str] = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
}

_WINDOWS_ARROWS: dict[bytes, str] = {
    b"H": "\x1b[A",
    b"P": "\x1b[B",
    b"M": "\x1b[C",
    b"K": "\x1b[D",
}

# Arrow → direction the blank must travel to reach the tile that slides.
# Pressing "up" slides the tile *below* the blank upward.
_BLANK_TRAVEL: dict[str, Direction] = {
    "up": Direction.DOWN,
    "down": Direction.UP,
    "left": Direction.RIGHT,
    "right": Direction.LEFT,
}


def _resolve(ch: str) -> str:
    """Map a raw character to its action string."""
    return _KEY_MAP.get(ch, ch.lower() if ch.isprintable() else "")


# -- public API ----------------------------------------------------------------


def get_key() -> str:
    """Read a single keypress and return a normalised action string.

    Blocks until a key is pressed.

    Possible return values:
        "up", "down", "left", "right"  — arrow keys
        "quit"                         — q / Ctrl-C / Escape
        "undo"                         — u / Backspace
        "restart"                      — r (back to the starting position)
        "new"                          — n (fresh shuffled puzzle)
        "<char>"                       — any other printable char, lower-cased
        ""                             — unrecognised key
    """
    ch = _getch()

    # Arrow keys (escape sequences: ESC [ A/B/C/D)
    if ch.startswith("\x1b"):
        if len(ch) == 3:
            return _ARROW_MAP.get(ch[2], "")
        ch2 = _getch()
        if ch2 == "[":
            ch3 = _getch()
            return _ARROW_MAP.get(ch3, "")
        return "quit"  # bare Escape

    return _resolve(ch)


def tile_index(key: str, side: int) -> int | None:
    """Translate a cell label typed by the player into a board index."""
    if len(key) != 1 or key not in LABELS:
        return None
    index = LABELS.index(key)
    return index if index < side * side else None


def target_for(action: str, blank_index: int, side: int) -> int | None:
    """Index of the tile an arrow key slides into the blank, if there is one."""
    direction = _BLANK_TRAVEL.get(action)
    if direction is None:
        return None
    return neighbour(blank_index, direction, side)
