"""Copy and move files, in the manner of cp(1) and mv(1)."""

from __future__ import annotations

import errno
import os
import stat
from enum import IntFlag
from typing import IO

from litekit.files import fisdir, fisslashdir

BUFSIZ = 8192


class CopyOption(IntFlag):
    """Option flags for copyfile()."""

    NONE = 0
    COPYFILE_SYM = 1
    KEEP_MTIME = 2


def _adjust_target(src: str, dst: str) -> str:
    """Return *dst*, with the base name of *src* appended if *dst* is a directory.

    A missing *dst* written with a trailing slash is created as a directory.
    """
    if not fisdir(dst) and not os.path.exists(dst) and fisslashdir(dst):
        try:
            os.mkdir(dst, 0o755)
        except OSError:
            return dst

    if fisdir(dst):
        name = src.rsplit("/", 1)[-1]
        sep = "" if fisslashdir(dst) else "/"
        return f"{dst}{sep}{name}"
    return dst


def _copy_fd(in_fd: int, out_fd: int, num: int) -> int:
    """Copy at most *num* bytes between descriptors, stopping early at EOF."""
    total = 0
    while True:
        count = min(num, BUFSIZ)
        try:
            chunk = os.read(in_fd, count)
        except InterruptedError:
            continue
        if not chunk:
            break
        view = memoryview(chunk)
        while view:
            written = os.write(out_fd, view)
            total += written
            view = view[written:]
        num -= count
        if num <= 0:
            break
    return total


def copyfile(src: str | os.PathLike, dst: str | os.PathLike, length: int = 0,
             opt: int = CopyOption.NONE) -> int:
    """Copy *src* to *dst*, returning the number of bytes copied.

    A *length* of zero copies the entire file.  If *dst* is a directory the
    base name of *src* is appended.  With ``COPYFILE_SYM`` a symbolic link
    is recreated rather than followed, and 1 is returned on success.  With
    ``KEEP_MTIME`` the access and modification times are preserved.

    Raises IsADirectoryError if *src* is a directory.
    """
    src = os.fspath(src)
    dst = os.fspath(dst)
    opt = CopyOption(opt)

    if fisdir(src):
        raise IsADirectoryError(errno.EISDIR, "source is a directory", src)

    dest = _adjust_target(src, dst)

    if CopyOption.COPYFILE_SYM in opt and os.path.islink(src):
        target = os.readlink(src)
        if len(os.fsencode(target)) >= BUFSIZ:
            raise OSError(errno.ENOBUFS, "symbolic link target too long", src)
        os.symlink(target, dest)
        return 1

    st = os.stat(src)
    num = st.st_size if length == 0 else length

    in_fd = os.open(src, os.O_RDONLY)
    try:
        out_fd = os.open(dest, os.O_WRONLY | os.O_CREAT | os.O_TRUNC,
                         stat.S_IMODE(st.st_mode))
        try:
            size = _copy_fd(in_fd, out_fd, num)
            if CopyOption.KEEP_MTIME in opt:
                fst = os.fstat(in_fd)
                os.utime(out_fd, ns=(fst.st_atime_ns, fst.st_mtime_ns))
        finally:
            os.close(out_fd)
    finally:
        os.close(in_fd)

    return size


def movefile(src: str | os.PathLike, dst: str | os.PathLike) -> None:
    """Move *src* to *dst*, which may be a directory.

    Falls back to copy and remove when moving across file systems.
    """
    src = os.fspath(src)
    dest = _adjust_target(src, os.fspath(dst))

    try:
        os.rename(src, dest)
    except OSError as exc:
        if exc.errno != errno.EXDEV:
            raise
        copyfile(src, dest, 0, CopyOption.COPYFILE_SYM)
        os.remove(src)


def fcopyfile(src: IO | None, dst: IO | None) -> None:
    """Copy the remaining lines of stream *src* to stream *dst*."""
    if src is None or dst is None:
        raise ValueError("fcopyfile() needs both a source and a destination")
    for line in src:
        dst.write(line)