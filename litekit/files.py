"""File system helpers: existence checks, formatted open/remove, path creation."""

from __future__ import annotations

import os
from typing import IO, Any


def _compose(fmt: str, args: tuple) -> str:
    """Build a path from a printf-style format and its arguments."""
    return fmt % args


def fexist(path: str | os.PathLike | None) -> bool:
    """Return True if *path* exists in the file system."""
    if path is None:
        return False
    return os.access(path, os.F_OK)


def fexistf(fmt: str, *args: Any) -> bool:
    """Like fexist(), with the path composed from *fmt* and *args*."""
    return fexist(_compose(fmt, args))


def fisdir(path: str | os.PathLike | None) -> bool:
    """Return True if *path* exists and is a directory."""
    if path is None:
        return False
    return os.path.isdir(path)


def fisslashdir(path: str | os.PathLike | None) -> bool:
    """Return True if *path* is written with a trailing slash."""
    if path is None:
        return False
    return os.fspath(path).endswith("/")


def fopenf(mode: str, fmt: str, *args: Any) -> IO:
    """Open the file whose name is composed from *fmt* and *args*."""
    return open(_compose(fmt, args), mode)


def _remove(path: str) -> None:
    if os.path.isdir(path) and not os.path.islink(path):
        os.rmdir(path)
    else:
        os.remove(path)


def fremove(fmt: str, *args: Any) -> None:
    """Remove the file or empty directory named by *fmt* and *args*."""
    _remove(_compose(fmt, args))


def erase(path: str | os.PathLike) -> None:
    """Remove a file or an empty directory."""
    _remove(os.fspath(path))


def erasef(fmt: str, *args: Any) -> None:
    """Like erase(), with the path composed from *fmt* and *args*."""
    erase(_compose(fmt, args))


def mkpath(path: str | os.PathLike | None, mode: int) -> None:
    """Create *path* and every missing directory leading up to it."""
    if path is None:
        raise ValueError("mkpath() needs a path")
    path = os.fspath(path)
    if os.path.exists(path):
        return

    parent = os.path.dirname(path.rstrip("/")) or "."
    if parent != path:
        try:
            mkpath(parent, mode)
        except OSError:
            pass

    os.mkdir(path, mode)


def fmkpath(mode: int, fmt: str, *args: Any) -> None:
    """Like mkpath(), with the path composed from *fmt* and *args*."""
    mkpath(_compose(fmt, args), mode)


def makepath(path: str | os.PathLike | None) -> None:
    """Create all components of *path* with mode 0777."""
    mkpath(path, 0o777)