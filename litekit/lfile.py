"""Token-based parsing of UNIX configuration files like /etc/services."""

from __future__ import annotations

import os
import re
from collections import deque
from typing import IO

LINE_MAX = 255

_ATOI = re.compile(r"\s*([+-]?\d+)")


def _atoi(text: str) -> int:
    """Parse a leading integer the way atoi() does, 0 when there is none."""
    match = _ATOI.match(text)
    return int(match.group(1)) if match else 0


def _split(text: str, sep: str) -> list[str]:
    """Split *text* on any character of *sep*, dropping empty tokens."""
    if not sep:
        return [text] if text else []
    pattern = "[" + "".join(re.escape(ch) for ch in sep) + "]"
    return [tok for tok in re.split(pattern, text) if tok]


class LineFile:
    """A token reader over a text file.

    Lines starting with ``#`` are skipped and the remaining text is split
    on any of the characters in *sep*.  Lines are read in chunks of at most
    255 characters.
    """

    def __init__(self, path: str | os.PathLike | None, sep: str | None) -> None:
        if path is None or sep is None:
            raise ValueError("LineFile needs both a path and a separator")
        self._sep = sep
        self._tokens: deque[str] = deque()
        self._fp: IO[str] | None = open(path, "r")

    def tok(self) -> str | None:
        """Return the next token, or ``None`` at end of file."""
        if self._fp is None:
            raise ValueError("LineFile is closed")
        if self._tokens:
            return self._tokens.popleft()

        while True:
            line = self._fp.readline(LINE_MAX)
            if not line:
                return None
            if line.startswith("#"):
                continue
            tokens = _split(line, self._sep)
            if tokens:
                self._tokens.extend(tokens[1:])
                return tokens[0]

    def getkey(self, key: str) -> str | None:
        """Return the token after *key*, searching from the current position."""
        while (token := self.tok()) is not None:
            if token.startswith("#"):
                continue
            if token == key:
                return self.tok()
        return None

    def getint(self, key: str) -> int:
        """Like getkey(), but return the value as an integer, or -1 if not found."""
        token = self.getkey(key)
        if token is None:
            return -1
        return _atoi(token)

    def rewind(self) -> None:
        """Restart reading from the beginning of the file."""
        if self._fp is None:
            raise ValueError("LineFile is closed")
        self._fp.seek(0)
        self._tokens.clear()

    def close(self) -> None:
        """Close the underlying file."""
        if self._fp is not None:
            self._fp.close()
            self._fp = None
        self._tokens.clear()

    def __enter__(self) -> LineFile:
        return self

    def __exit__(self, *args) -> None:
        self.close()


def fgetint(path: str | os.PathLike, sep: str, key: str) -> int:
    """Return the integer value for *key* in *path*, or -1 if not found."""
    try:
        with LineFile(path, sep) as lf:
            return lf.getint(key)
    except OSError:
        return -1