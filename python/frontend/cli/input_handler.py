"""Single-keypress reader shared by the terminal frontends.

Translates raw keys into cursor and puzzle actions without waiting for
Enter.  Works on macOS / Linux (tty+termios) and Windows (msvcrt).
"""

from __future__ import annotations

import os
import sys

# -- key mapping ---------------------------------------------------------------

_KEY_MAP: dict[str, str] = {
    "w": "up",
    "W": "up",
    "s": "down",
    "S": "down",
    "a": "left",
    "A": "left",
    "d": "right",
    "D": "right",
    " ": "click",
    "\r": "click",
    "\n": "click",
    "x": "shuffle",
    "X": "shuffle",
    "r": "reset",
    "R": "reset",
    "q": "quit",
    "Q": "quit",
    "\x03": "quit",  # Ctrl-C
}

# Final byte of the ESC [ <c> arrow sequences.
_ARROW_MAP: dict[str, str] = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
}


def _resolve(ch: str) -> str:
    return _KEY_MAP.get(ch, ch if ch.isprintable() else "")


# -- platform readers ----------------------------------------------------------


if os.name == "nt":
    import msvcrt  # type: ignore[import-not-found]
    import time

    _WIN_ARROWS = {"H": "up", "P": "down", "K": "left", "M": "right"}

    def _read_windows(timeout: float | None) -> str | None:
        if timeout is not None:
            end = time.monotonic() + timeout
            while not msvcrt.kbhit():
                if time.monotonic() >= end:
                    return None
                time.sleep(0.02)
        ch = msvcrt.getwch()
        if ch in ("\x00", "\xe0"):
            return _WIN_ARROWS.get(msvcrt.getwch(), "")
        if ch == "\x1b":
            return "quit"
        return _resolve(ch)

else:
    import select
    import termios
    import tty

    def _read_unix(timeout: float | None) -> str | None:
        fd = sys.stdin.fileno()
        old = termios.tcgetattr(fd)
        try:
            tty.setraw(fd)
            if timeout is not None:
                ready, _, _ = select.select([fd], [], [], timeout)
                if not ready:
                    return None
            # os.read keeps the rest of a multi-byte sequence visible to select().
            ch = os.read(fd, 1).decode("utf-8", errors="ignore")
            if ch != "\x1b":
                return _resolve(ch)
            if not select.select([fd], [], [], 0.1)[0]:
                return "quit"  # bare Escape
            if os.read(fd, 1).decode("utf-8", errors="ignore") != "[":
                return "quit"
            if not select.select([fd], [], [], 0.1)[0]:
                return ""
            return _ARROW_MAP.get(os.read(fd, 1).decode("utf-8", errors="ignore"), "")
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, old)


def _read(timeout: float | None) -> str | None:
    if os.name == "nt":
        return _read_windows(timeout)
    return _read_unix(timeout)


# -- public API ----------------------------------------------------------------


def get_key() -> str:
    """Block for one keypress and return its action string.

    Possible return values:
        "up", "down", "left", "right"  — move the cursor
        "click"                        — Enter / Space
        "shuffle"                      — x
        "reset"                        — r
        "quit"                         — q / Ctrl-C / Escape
        "<char>"                       — unmapped printable char
        ""                             — unrecognised key
    """
    key = _read(None)
    # A read without a timeout only returns once a key arrives.
    return key if key is not None else ""


def get_key_timeout(timeout: float) -> str | None:
    """Like :func:`get_key`, but return ``None`` after *timeout* seconds."""
    return _read(timeout)
