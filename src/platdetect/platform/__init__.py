"""
Host operating-system family detection.

The distribution matcher only consults the os-release descriptor when the
host belongs to the Linux family; everything else in this package is a
narrow wrapper over a single OS query.
"""

import platform as _platform

LINUX = "linux"
WINDOWS = "windows"
MACOS = "darwin"
FREEBSD = "freebsd"


def get_os_family() -> str:
    """
    Return the lower-cased OS family of the running host.

    One of ``linux``, ``windows``, ``darwin``, ``freebsd``, or whatever
    ``platform.system()`` reports for other systems.
    """
    return _platform.system().lower()
