"""Small UNIX helpers: files, pidfiles, config parsing, terminal escapes, lists and trees."""

__version__ = "2.6.1"