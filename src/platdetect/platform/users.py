"""
Cross-platform superuser detection.

On POSIX hosts this is the effective uid; on Windows the shell32 admin
query stands in for it.
"""

import os
from typing import Optional

from . import WINDOWS, get_os_family


def get_euid() -> int:
    """
    Get the effective user ID.

    Returns -1 where the OS has no uid concept (Windows).
    """
    geteuid = getattr(os, "geteuid", None)
    if geteuid is None:
        return -1
    return geteuid()


def is_windows_admin() -> bool:
    """Check for admin rights via shell32; False where it is unavailable."""
    try:
        import ctypes
        return ctypes.windll.shell32.IsUserAnAdmin() != 0
    except (AttributeError, OSError):
        return False


def is_superuser(os_family: Optional[str] = None) -> bool:
    """
    Check if running as root/administrator.

    ``os_family`` selects the check (default: the live host family). On
    Windows, checks for admin rights.
    """
    if os_family is None:
        os_family = get_os_family()
    if os_family == WINDOWS:
        return is_windows_admin()
    return get_euid() == 0
