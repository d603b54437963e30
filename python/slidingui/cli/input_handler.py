"""Single-keypress reader for the terminal shell.

Reads raw bytes from a POSIX terminal (tty+termios) and turns them into
action strings, so arrows, WASD and digits work without Enter.
"""

from __future__ import annotations

import os
import select
import sys
import termios
import tty

# Seconds to wait for the rest of an escape sequence after ESC.
_ESCAPE_WAIT = 0.1

_KEY_MAP: dict[str, str] = {
    "w": "up",
    "W": "up",
    "s": "down",
    "S": "down",
    "a": "left",
    "A": "left",
    "d": "right",
    "D": "right",
    "q": "quit",
    "Q": "quit",
    "\x03": "quit",  # Ctrl-C
    "r": "reshuffle",
    "R": "reshuffle",
    "t": "reset_timer",
    "T": "reset_timer",
    "\r": "enter",
    "\n": "enter",
    "\x7f": "backspace",
    "\x08": "backspace",
}

_ARROW_MAP: dict[str, str] = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
}


def resolve(ch: str) -> str:
    """Map a single raw character to its action string.

    Possible return values:
        "up", "down", "left", "right"  — slide
        "quit"                         — q / Ctrl-C
        "reshuffle"                    — r
        "reset_timer"                  — t
        "enter", "backspace"           — tile number entry
        "0".."9"                       — digit of a tile number
        ""                             — anything else
    """
    if ch in _KEY_MAP:
        return _KEY_MAP[ch]
    return ch if ch.isdigit() else ""


def decode(seq: str) -> str:
    """Map one keypress (a character or an ESC sequence) to an action."""
    if not seq.startswith("\x1b"):
        return resolve(seq[:1])
    if seq == "\x1b" or seq[1:2] != "[":
        return "quit"  # bare Escape
    return _ARROW_MAP.get(seq[2:3], "")


# -- terminal reading ----------------------------------------------------------


def _read_char(fd: int, timeout: float | None) -> str | None:
    ready, _, _ = select.select([fd], [], [], timeout)
    if not ready:
        return None
    # os.read is unbuffered, so select() still sees the rest of an
    # escape sequence that is waiting in the terminal.
    return os.read(fd, 1).decode("utf-8", errors="ignore")


def _read_keypress(fd: int, timeout: float | None) -> str | None:
    ch = _read_char(fd, timeout)
    if ch != "\x1b":
        return ch
    seq = ch
    for _ in range(2):
        nxt = _read_char(fd, _ESCAPE_WAIT)
        if nxt is None:
            break
        seq += nxt
        if nxt != "[":
            break
    return seq


def get_key_timeout(timeout: float | None) -> str | None:
    """Read a single keypress and return its action string.

    Returns ``None`` if nothing was pressed within *timeout* seconds;
    a *timeout* of ``None`` blocks until a key arrives.
    """
    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        seq = _read_keypress(fd, timeout)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)
    return None if seq is None else decode(seq)


def get_key() -> str:
    """Block until a key is pressed and return its action string."""
    return get_key_timeout(None) or ""
