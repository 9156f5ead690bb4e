"""
Path type shared by the platform helpers.
"""

import os
from typing import Union


PathLike = Union[str, os.PathLike[str]]


def normalize(path: PathLike) -> str:
    """Normalize a path for the current platform."""
    return os.path.normpath(str(path))
