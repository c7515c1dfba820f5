"""Read logical lines, handling comments, continuations and escapes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntFlag
from typing import IO, Sequence

DEFAULT_DELIMS = ("\\", "\\", "#")


class ParseFlags(IntFlag):
    """Which escape sequences fparseln() removes."""

    NONE = 0
    UNESCESC = 0x01
    UNESCCONT = 0x02
    UNESCCOMM = 0x04
    UNESCREST = 0x08
    UNESCALL = 0x0F


@dataclass
class ParsedLine:
    """A logical line and the number of physical lines read for it."""

    text: str
    lines: int


def _pick(ch: str | None) -> str | None:
    if not ch or ch == "\0":
        return None
    return ch


def _is_escaped(line: str, pos: int, esc: str | None) -> bool:
    """True if the character at *pos* is preceded by an odd number of *esc*."""
    if esc is None:
        return False
    count = 0
    i = pos - 1
    while i >= 0 and line[i] == esc:
        count += 1
        i -= 1
    return count % 2 == 1


def _unescape(buf: str, esc: str, con: str | None, com: str | None,
              flags: ParseFlags) -> str:
    out: list[str] = []
    i, n = 0, len(buf)
    while i < n:
        while i < n and buf[i] != esc:
            out.append(buf[i])
            i += 1
        if i + 1 >= n:
            break

        nxt = buf[i + 1]
        skip = 0
        if nxt == com:
            skip += flags & ParseFlags.UNESCCOMM
        if nxt == con:
            skip += flags & ParseFlags.UNESCCONT
        if nxt == esc:
            skip += flags & ParseFlags.UNESCESC
        if nxt not in (com, con, esc):
            skip = flags & ParseFlags.UNESCREST

        if not skip:
            out.append(buf[i])
        out.append(nxt)
        i += 2
    return "".join(out)


def fparseln(fp: IO[str], delims: Sequence[str | None] | None = None,
             flags: int = ParseFlags.NONE) -> ParsedLine | None:
    """Read one logical line from *fp*.

    *delims* holds the escape, continuation and comment characters, by
    default backslash, backslash and ``#``; ``"\\0"`` or ``None`` disables
    one.  Comments and the trailing newline are removed and continued
    lines are joined.  Returns ``None`` at end of file.
    """
    if delims is None:
        delims = DEFAULT_DELIMS
    esc, con, com = (_pick(c) for c in delims)
    flags = ParseFlags(flags)

    buf: str | None = None
    lines = 0
    more = True
    while more:
        more = False
        lines += 1

        line = fp.readline()
        if not line:
            break
        size = len(line)

        if com is not None:
            for pos, ch in enumerate(line):
                if ch == com and not _is_escaped(line, pos, esc):
                    size = pos
                    more = size == 0 and buf is None
                    break

        if size and line[size - 1] == "\n":
            size -= 1

        if size and con is not None and line[size - 1] == con \
                and not _is_escaped(line, size - 1, esc):
            size -= 1
            more = True

        if size == 0 and (more or buf is not None):
            continue

        buf = (buf or "") + line[:size]

    if buf is None:
        return None

    if flags & ParseFlags.UNESCALL and esc is not None and esc in buf:
        buf = _unescape(buf, esc, con, com, flags)

    return ParsedLine(buf, lines)