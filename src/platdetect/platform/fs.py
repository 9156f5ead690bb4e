"""
Filesystem primitives used by the descriptor loader.

Only regular-file checks and line reading are needed; the loader never writes.
"""

import os
from typing import Iterator

from .paths import PathLike


def is_file(path: PathLike) -> bool:
    """Check if path is a regular file (or a symlink to one)."""
    return os.path.isfile(str(path))


def read_lines(path: PathLike, encoding: str = "utf-8") -> Iterator[str]:
    """
    Yield the lines of a text file with line terminators stripped.

    The file is opened lazily on first iteration and closed once the
    generator is exhausted, closed, or an error interrupts the read.
    Undecodable bytes are replaced rather than rejected.
    """
    with open(path, "r", encoding=encoding, errors="replace") as f:
        for line in f:
            yield line.rstrip("\r\n")
