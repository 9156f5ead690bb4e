"""
Kernel version queries.

``platform.release()`` reports the running kernel's release string on every
OS family (on macOS this is the Darwin kernel, e.g. ``23.1.0``); only its
leading dotted-numeric portion is kept.
"""

import platform as _platform
import re
from typing import NamedTuple, Optional

from . import MACOS, get_os_family
from ..errors import KernelVersionError


_VERSION_PREFIX = re.compile(r"^\s*(\d+)(?:\.(\d+))?(?:\.(\d+))?")


class KernelVersion(NamedTuple):
    """Three-component kernel version, comparable as a tuple."""

    major: int
    minor: int = 0
    patch: int = 0

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"

    @classmethod
    def parse(cls, release: str) -> "KernelVersion":
        """
        Parse the leading ``major[.minor[.patch]]`` of a release string.

        >>> KernelVersion.parse("5.15.0-91-generic")
        KernelVersion(major=5, minor=15, patch=0)
        """
        match = _VERSION_PREFIX.match(release)
        if not match:
            raise KernelVersionError(release)
        major, minor, patch = match.groups()
        return cls(int(major), int(minor or 0), int(patch or 0))


ZERO_VERSION = KernelVersion(0, 0, 0)


def query_kernel_version() -> KernelVersion:
    """Return the running kernel's version."""
    return KernelVersion.parse(_platform.release())


def get_osx_kernel_version(os_family: Optional[str] = None) -> KernelVersion:
    """Return the Darwin kernel version on macOS, ``0.0.0`` elsewhere."""
    if os_family is None:
        os_family = get_os_family()
    if os_family != MACOS:
        return ZERO_VERSION
    return query_kernel_version()
