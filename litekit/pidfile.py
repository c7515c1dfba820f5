"""Create, read and signal through PID files."""

from __future__ import annotations

import atexit
import os
import re
import signal
import sys
import time
from contextlib import suppress

PATH_VARRUN = "/var/run/"

_path: str | None = None
_pid: int = 0

_STRTOUL = re.compile(r"\s*([+-]?)(0[xX][0-9a-fA-F]+|0[0-7]*|[1-9][0-9]*)")
_ULONG_MAX = 2**64 - 1


def _progname() -> str:
    name = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else ""
    return name or "python"


def _cleanup() -> None:
    global _path
    if _path is not None and _pid == os.getpid():
        with suppress(OSError):
            os.unlink(_path)
        _path = None


def pidfile(basename: str | None = None, directory: str | None = None) -> str:
    """Create the PID file of this process, or update its mtime.

    *basename* defaults to the program name and the file is placed in
    *directory*, by default ``/var/run/``, as ``<basename>.pid``.  A
    *basename* starting with ``/`` is used as the absolute path.  The file
    is removed when the process exits.  Returns the path of the PID file.
    """
    global _path, _pid

    if basename is None:
        basename = _progname()
    if directory is None:
        directory = PATH_VARRUN

    pid = os.getpid()
    atexit_already = False

    if _path is not None:
        if os.access(_path, os.R_OK) and pid == _pid:
            os.utime(_path)
            return _path
        _path = None
        atexit_already = True

    if basename.startswith("/"):
        path = basename
    else:
        sep = "" if directory.endswith("/") else "/"
        path = f"{directory}{sep}{basename}.pid"

    fp = open(path, "w")
    try:
        with fp:
            fp.write(f"{pid}\n")
            fp.flush()
    except OSError:
        with suppress(OSError):
            os.unlink(path)
        raise

    _path = path
    if atexit_already:
        return path

    _pid = pid
    atexit.register(_cleanup)
    return path


def pidfile_name() -> str | None:
    """Return the path of the PID file created by pidfile(), if any."""
    return _path


def _strtoul(text: str) -> int:
    match = _STRTOUL.match(text)
    if not match:
        return 0
    sign, digits = match.groups()
    if digits[:2] in ("0x", "0X"):
        value = int(digits, 16)
    elif digits.startswith("0"):
        value = int(digits, 8)
    else:
        value = int(digits)
    if value > _ULONG_MAX:
        return 0
    return -value if sign == "-" else value


def pidfile_read(path: str | os.PathLike | None) -> int:
    """Return the PID stored in *path*, or 0 if it is empty or unreadable as one."""
    if path is None:
        raise ValueError("pidfile_read() needs a path")
    with open(path, "r") as fp:
        line = fp.readline(15)
    text = line.rstrip("\n")
    if not text:
        return 0
    return _strtoul(text)


def pidfile_poll(path: str | os.PathLike | None) -> int:
    """Wait up to 5 seconds for *path* to hold a PID and return it, else 0."""
    if path is None:
        raise ValueError("pidfile_poll() needs a path")

    pid = 0
    for attempt in range(101):
        try:
            pid = pidfile_read(path)
        except OSError:
            pid = -1
        if pid > 0:
            return pid
        if attempt < 100:
            time.sleep(0.05)
    return max(pid, 0)


def pidfile_signal(path: str | os.PathLike, signum: int) -> None:
    """Send *signum* to the PID in *path*, removing the file after SIGKILL."""
    pid = pidfile_read(path)
    if pid <= 0:
        raise ValueError(f"no valid PID in {os.fspath(path)}")
    os.kill(pid, signum)
    if signum == signal.SIGKILL:
        os.remove(path)