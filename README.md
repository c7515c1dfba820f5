# litekit

A collection of small helpers for UNIX programs. It covers file operations
with printf-style path names, PID files, parsing of `/etc`-style
configuration files, VT100/ANSI terminal escapes, linked lists and queues,
and splay and red-black trees.

litekit is a library only. It installs no command-line tools.

## Installation

```sh
pip install litekit
```

## Overview

| Module              | Contents |
|---------------------|----------|
| `litekit.text`      | `chomp()`: strip every trailing newline, `ValueError` on an empty string |
| `litekit.files`     | `fexist`, `fexistf`, `fisdir`, `fisslashdir`, `fopenf`, `fremove`, `erase`, `erasef`, `mkpath`, `fmkpath`, `makepath` |
| `litekit.conio`     | `Attr`, `Color`, `clrscr`, `clreol`, `delline`, `gotoxy`, `hidecursor`, `showcursor`, `textattr`, `textcolor`, `textbackground`, `initscr`, `printhdr`, `printheader` |
| `litekit.copying`   | `copyfile`, `movefile`, `fcopyfile`, `CopyOption` |
| `litekit.dirlist`   | `dir_files()`: a sorted list of the files in a directory, filtered by suffix |
| `litekit.sendfile`  | `fsendfile()`: copy data between streams, or read and discard it |
| `litekit.parseln`   | `fparseln()`, `ParseFlags`, `ParsedLine`: read logical lines with continuations, comments and escapes |
| `litekit.lfile`     | `LineFile`, `fgetint()`: look up keys in files such as `/etc/services` |
| `litekit.pidfile`   | `pidfile`, `pidfile_name`, `pidfile_read`, `pidfile_poll`, `pidfile_signal` |
| `litekit.netif`     | `ifconfig()`: set an IPv4 address and netmask, and bring an interface up or down |
| `litekit.queues`    | `Entry`, `SList`, `LinkedList`, `SimpleQueue`, `TailQueue` |
| `litekit.splay`     | `SplayTree` |
| `litekit.rbtree`    | `RBTree` |

## Examples

Formatted file names:

```python
from litekit.files import fexistf, fmkpath, fopenf

fmkpath(0o755, "/tmp/%s/%d", "cache", 42)
with fopenf("w", "/tmp/%s/%d/data", "cache", 42) as fp:
    fp.write("hello\n")
assert fexistf("/tmp/%s/%d/data", "cache", 42)
```

Copying and moving files. A destination that is a directory gets the base
name of the source appended:

```python
from litekit.copying import CopyOption, copyfile, movefile

copyfile("/etc/hostname", "/tmp/", opt=CopyOption.KEEP_MTIME)
movefile("/tmp/hostname", "/tmp/cache/")
```

Reading a configuration file with line continuations and comments.
`fparseln()` returns a `ParsedLine` with the joined `text` and the number
of physical `lines` read for it, or `None` at end of file:

```python
from litekit.parseln import ParseFlags, fparseln

with open("app.conf") as fp:
    while (line := fparseln(fp, flags=ParseFlags.UNESCALL)) is not None:
        print(line.lines, line.text)
```

Looking up a value in a whitespace-separated file:

```python
from litekit.lfile import LineFile, fgetint

print(fgetint("/etc/protocols", " \n\t", "udp"))   # 17

with LineFile("/etc/services", " /\t\n") as lf:
    print(lf.getint("ssh"))                         # 22
```

PID files for daemons. The file is removed again when the process exits:

```python
from litekit.pidfile import pidfile, pidfile_name, pidfile_read

pidfile("mydaemon", directory="/tmp")
print(pidfile_name(), pidfile_read(pidfile_name()))
```

Lists and queues hand back an `Entry` from every insert, which can be used
to position later inserts or to remove the value:

```python
from litekit.queues import TailQueue

q = TailQueue([1, 2, 4])
entry = q.insert_tail(5)
q.insert_before(entry, 3)
print(list(q), list(reversed(q)))   # [1, 2, 3, 4, 5] [5, 4, 3, 2, 1]
```

Ordered containers:

```python
from litekit.rbtree import RBTree

tree = RBTree()
for n in (5, 1, 3):
    tree.insert(n)
print(list(tree), tree.min(), tree.max(), tree.nfind(2))   # [1, 3, 5] 1 5 3
```

Terminal output:

```python
from litekit.conio import Color, initscr, printheader, textcolor

rows, cols = initscr()          # (24, 80) when not on a terminal
textcolor(Color.LIGHTGREEN)
printheader("PID   NAME", nl=True)
```

## Limitations

- `ifconfig()` uses Linux ioctl request numbers and needs the privileges
  to reconfigure network interfaces.
- `initscr()` needs a POSIX terminal interface; elsewhere it returns the
  default size of 24 rows by 80 columns.