"""Small string helpers."""

from __future__ import annotations


def chomp(text: str) -> str:
    """Return *text* with every trailing newline removed.

    Raises ValueError if *text* is ``None`` or empty.
    """
    if not text:
        raise ValueError("chomp() needs a non-empty string")
    return text.rstrip("\n")