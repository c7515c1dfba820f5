"""Copy data between file streams."""

from __future__ import annotations

from typing import IO

BUFSIZ = 8192


def fsendfile(src: IO | None, dst: IO | None = None, length: int = 0) -> int:
    """Copy up to *length* units from stream *src* to *dst*.

    A *length* of zero copies until end of file.  With *dst* set to
    ``None`` the data is read and discarded.  Returns the amount copied.
    """
    if src is None:
        raise ValueError("fsendfile() needs a source stream")

    total = 0
    while not length or total < length:
        block = BUFSIZ
        if length and length - total < BUFSIZ:
            block = length - total
        chunk = src.read(block)
        if not chunk:
            break
        if dst is not None:
            dst.write(chunk)
        total += len(chunk)
    return total