"""List the files of a directory, filtered by suffix."""

from __future__ import annotations

import os
from typing import Callable


def _matches(name: str, suffix: str, filter: Callable[[str], bool] | None) -> bool:
    if filter is not None and not filter(name):
        return False
    if name in (".", ".."):
        return False
    if not suffix:
        return True
    pos = name.rfind(".")
    if pos < 0:
        return False
    return name[pos:] == suffix


def dir_files(path: str | os.PathLike | None = None, suffix: str | None = None,
              filter: Callable[[str], bool] | None = None,
              strip: bool = False) -> list[str]:
    """Return the sorted names in *path* that end in *suffix*, e.g. ``".cfg"``.

    *path* defaults to the current directory and *suffix* to all files.
    *filter*, if given, is called with each name and a false result drops
    it.  With *strip* the part from the last dot onwards is removed.
    """
    path = "." if path is None else path
    suffix = suffix or ""

    names = sorted(n for n in os.listdir(path) if _matches(n, suffix, filter))
    if strip:
        names = [n[:n.rfind(".")] if "." in n else n for n in names]
    return names