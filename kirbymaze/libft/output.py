"""Writing characters, strings and numbers to text streams."""

from __future__ import annotations

import sys
from typing import TextIO, Union


def putchar_fd(c: Union[str, int], stream: TextIO = sys.stdout) -> None:
    """Write a single character (or character code) to ``stream``."""
    if isinstance(c, int):
        c = chr(c)
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    stream.write(c)


def putstr_fd(s: str, stream: TextIO = sys.stdout) -> None:
    """Write ``s`` to ``stream``."""
    stream.write(s)


def putendl_fd(s: str, stream: TextIO = sys.stdout) -> None:
    """Write ``s`` followed by a newline to ``stream``."""
    putstr_fd(s, stream)
    putchar_fd("\n", stream)


def putnbr_fd(n: int, stream: TextIO = sys.stdout) -> None:
    """Write the decimal form of ``n`` to ``stream``."""
    putstr_fd(str(int(n)), stream)