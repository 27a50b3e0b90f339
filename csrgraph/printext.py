"""Text formatting helpers for sizes, numbers, titles and arrays."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import TextIO

from csrgraph.numeric import round_div

__all__ = [
    "KB",
    "MB",
    "GB",
    "human_readable",
    "thousands",
    "char_sequence",
    "title",
    "array_to_string",
    "print_array",
]

KB = 1 << 10
MB = 1 << 20
GB = 1 << 30


def human_readable(size: int) -> str:
    """Format a byte count with the largest fitting unit, rounded."""
    for unit, name in ((GB, "GB"), (MB, "MB"), (KB, "KB")):
        if size >= unit:
            return f"{round_div(size, unit)} {name}"
    return f"{size} B"


def thousands(value) -> str:
    """Format a number with ',' between groups of three digits."""
    return f"{value:,}"


def char_sequence(char: str, length: int) -> str:
    """Return ``char`` repeated ``length`` times."""
    return char * max(0, length)


def title(text: str, char: str, length: int) -> str:
    """Centre ``text`` between runs of ``char`` on a line about ``length`` wide."""
    dash = max(0, (length - len(text) - 1) // 2)
    line = f"{char * dash} {text} {char * dash}"
    if len(text) % 2 == 1:
        line += char
    return line


def array_to_string(values: Iterable, label: str = "", sep: str = " ") -> str:
    """Render ``values`` after ``label``, each followed by ``sep``."""
    items = list(values)
    body = "".join(f"{value}{sep}" for value in items) if items else "empty"
    return f"{label}{body}\n"


def print_array(
    values: Iterable, label: str = "", sep: str = " ", file: TextIO | None = None
) -> None:
    """Print ``values`` as :func:`array_to_string` does, then a blank line."""
    print(array_to_string(values, label, sep), file=file or sys.stdout)