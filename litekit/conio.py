"""Console helpers for VT/ANSI terminals."""

from __future__ import annotations

import os
import re
import sys
import time
from enum import IntEnum
from typing import TextIO

try:
    import select
    import termios
except ImportError:  # platforms without a POSIX terminal interface
    termios = None
    select = None

SCREEN_WIDTH = 80
DEFAULT_SIZE = (24, 80)

_REPLY = re.compile(r"\x1b\[(\d+);(\d+)R")


class Attr(IntEnum):
    """Text attributes."""

    RESETATTR = 0
    BRIGHT = 1
    DIM = 2
    UNDERSCORE = 4
    BLINK = 5
    REVERSE = 7
    HIDDEN = 8


class Color(IntEnum):
    """Colors for text and background; 0x10 marks the bright variants."""

    BLACK = 0x0
    RED = 0x1
    GREEN = 0x2
    BROWN = 0x3
    BLUE = 0x4
    MAGENTA = 0x5
    CYAN = 0x6
    LIGHTGREY = 0x7
    DARKGREY = 0x10
    LIGHTRED = 0x11
    LIGHTGREEN = 0x12
    YELLOW = 0x13
    LIGHTBLUE = 0x14
    LIGHTMAGENTA = 0x15
    LIGHTCYAN = 0x16
    WHITE = 0x17


def _out(file: TextIO | None) -> TextIO:
    return file if file is not None else sys.stdout


def clrscr(file: TextIO | None = None) -> None:
    """Clear the screen and move the cursor to the upper left corner."""
    _out(file).write("\033[2J\033[1;1H")


def clreol(file: TextIO | None = None) -> None:
    """Erase from the cursor to the end of the line."""
    _out(file).write("\033[K")


def delline(file: TextIO | None = None) -> None:
    """Erase the entire current line."""
    _out(file).write("\033[2K")


def gotoxy(x: int, y: int, file: TextIO | None = None) -> None:
    """Move the cursor to column *x*, row *y*."""
    _out(file).write(f"\033[{y};{x}H")


def hidecursor(file: TextIO | None = None) -> None:
    """Hide the cursor."""
    _out(file).write("\033[?25l")


def showcursor(file: TextIO | None = None) -> None:
    """Show the cursor."""
    _out(file).write("\033[?25h")


def _set_gm(attr: int, color: int, base: int, file: TextIO | None) -> None:
    if not color:
        _out(file).write(f"\033[{int(attr)}m")
    else:
        bright = 1 if color & 0x10 else 0
        _out(file).write(f"\033[{bright};{(color & 0xF) + base}m")


def textattr(attr: int, file: TextIO | None = None) -> None:
    """Set the text attribute."""
    _set_gm(attr, 0, 0, file)


def textcolor(color: int, file: TextIO | None = None) -> None:
    """Set the text color."""
    _set_gm(Attr.RESETATTR, color, 30, file)


def textbackground(color: int, file: TextIO | None = None) -> None:
    """Set the text background color."""
    _set_gm(Attr.RESETATTR, color, 40, file)


def _read_reply(fd: int, timeout: float) -> str:
    deadline = time.monotonic() + timeout
    reply = b""
    while b"R" not in reply:
        remaining = deadline - time.monotonic()
        if remaining <= 0:
            break
        ready, _, _ = select.select([fd], [], [], remaining)
        if not ready:
            break
        chunk = os.read(fd, 32)
        if not chunk:
            break
        reply += chunk
    return reply.decode("ascii", errors="replace")


def initscr() -> tuple[int, int]:
    """Probe the terminal size, returning ``(rows, cols)``.

    Falls back to 24x80 when stdin or stdout is not a terminal, or when
    the terminal does not answer within 300 ms.
    """
    if termios is None:
        return DEFAULT_SIZE
    try:
        if not (sys.stdin.isatty() and sys.stdout.isatty()):
            return DEFAULT_SIZE
        in_fd = sys.stdin.fileno()
        out_fd = sys.stdout.fileno()
    except (AttributeError, ValueError, OSError):
        return DEFAULT_SIZE

    saved = termios.tcgetattr(out_fd)
    raw = termios.tcgetattr(out_fd)
    raw[2] |= termios.CLOCAL | termios.CREAD
    raw[3] &= ~(termios.ICANON | termios.ECHO | termios.ECHOE | termios.ISIG)
    termios.tcsetattr(out_fd, termios.TCSANOW, raw)
    try:
        sys.stdout.write("\0337\033[r\033[999;999H\033[6n")
        sys.stdout.flush()
        match = _REPLY.search(_read_reply(in_fd, 0.3))
        sys.stdout.write("\0338")
        sys.stdout.flush()
    finally:
        termios.tcsetattr(out_fd, termios.TCSANOW, saved)

    if not match:
        return DEFAULT_SIZE
    return int(match.group(1)), int(match.group(2))


def printhdr(line: str, nl: bool = False, attr: int = Attr.REVERSE,
             file: TextIO | None = None) -> None:
    """Print a table heading padded to the screen width in attribute *attr*."""
    if attr < 0 or attr > 8:
        attr = Attr.REVERSE
    pad = " " * abs(SCREEN_WIDTH - len(line))
    lead = "\n" if nl else ""
    _out(file).write(f"{lead}\033[{int(attr)}m{line}{pad}\033[0m\n")


def printheader(line: str, nl: bool = False, file: TextIO | None = None) -> None:
    """Print a reverse-video table heading."""
    printhdr(line, nl, Attr.REVERSE, file)