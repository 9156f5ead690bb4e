# Copyright (c) 2024 Platdetect Contributors
# MIT License

"""
Platform capability catalog.

PlatformDetection bundles the named distro predicates with the OS-family,
Windows-version, identity and kernel flags a test suite consults to decide
whether a test applies to the current host. It holds no mutable state:
every property is computed from a fresh query.
"""

from __future__ import annotations

import sys
from typing import Callable, Dict, Optional, Tuple

from platdetect import distro
from platdetect.config import DetectionConfig, get_config
from platdetect.errors import UnknownPredicateError
from platdetect.platform import FREEBSD, LINUX, MACOS, WINDOWS, get_os_family
from platdetect.platform.kernel import (
    KernelVersion,
    get_osx_kernel_version,
    query_kernel_version,
)
from platdetect.platform.users import is_superuser


# Windows 10 build numbers for feature-update gates
BUILD_1607 = 14393
BUILD_1703 = 15063
BUILD_INSIDER_16215 = 16215
BUILD_16251 = 16251

PREDICATE_NAMES: Tuple[str, ...] = (
    "is_linux",
    "is_windows",
    "is_osx",
    "is_freebsd",
    "is_opensuse",
    "is_ubuntu",
    "is_debian",
    "is_debian8",
    "is_ubuntu1404",
    "is_centos7",
    "is_tizen",
    "is_fedora",
    "is_not_fedora_or_redhat_or_centos",
    "is_windows7",
    "is_windows8x",
    "is_windows10_version1607_or_greater",
    "is_windows10_version1703_or_greater",
    "is_windows10_insider_preview_build16215_or_greater",
    "is_windows10_version16251_or_greater",
    "is_windows_and_elevated",
    "is_superuser",
)


def _windows_version_info() -> Tuple[int, int, int]:
    """Return (major, minor, build) of the running Windows, zeros elsewhere."""
    getter = getattr(sys, "getwindowsversion", None)
    if getter is None:
        return (0, 0, 0)
    info = getter()
    return (info.major, info.minor, info.build)


class PlatformDetection:
    """
    Read-only oracle over the host platform.

    Args:
        config: Detection settings (default: the module-level config)
        os_family: Callable returning the host OS family; tests inject a
            fixed value here
        windows_version_info: Callable returning (major, minor, build)
    """

    def __init__(
        self,
        config: Optional[DetectionConfig] = None,
        os_family: Optional[Callable[[], str]] = None,
        windows_version_info: Optional[Callable[[], Tuple[int, int, int]]] = None,
    ):
        self._config = config
        self._os_family = os_family or get_os_family
        self._windows_version_info = windows_version_info or _windows_version_info

    @property
    def config(self) -> DetectionConfig:
        return self._config if self._config is not None else get_config()

    def matches_distro(self, distro_id: str, version_id: Optional[str] = None) -> bool:
        """Whether the host is Linux distro ``distro_id`` (at ``version_id``)."""
        return distro.matches_distro(
            distro_id,
            version_id,
            path=self.config.os_release_path,
            os_family=self._os_family(),
        )

    @property
    def distribution_summary(self) -> str:
        return distro.get_distribution_summary(
            path=self.config.os_release_path,
            os_family=self._os_family(),
        )

    def distribution(self) -> distro.DistributionRecord:
        """Current distribution record; all-empty off Linux."""
        if self._os_family() != LINUX:
            return distro.DistributionRecord()
        return distro.current_distribution(self.config.os_release_path)

    # OS family

    @property
    def os_family(self) -> str:
        return self._os_family()

    @property
    def is_linux(self) -> bool:
        return self._os_family() == LINUX

    @property
    def is_windows(self) -> bool:
        return self._os_family() == WINDOWS

    @property
    def is_osx(self) -> bool:
        return self._os_family() == MACOS

    @property
    def is_freebsd(self) -> bool:
        return self._os_family() == FREEBSD

    # Linux distributions

    @property
    def is_opensuse(self) -> bool:
        return self.matches_distro("opensuse")

    @property
    def is_ubuntu(self) -> bool:
        return self.matches_distro("ubuntu")

    @property
    def is_debian(self) -> bool:
        return self.matches_distro("debian")

    @property
    def is_debian8(self) -> bool:
        return self.matches_distro("debian", "8")

    @property
    def is_ubuntu1404(self) -> bool:
        return self.matches_distro("ubuntu", "14.04")

    @property
    def is_centos7(self) -> bool:
        return self.matches_distro("centos", "7")

    @property
    def is_tizen(self) -> bool:
        return self.matches_distro("tizen")

    @property
    def is_fedora(self) -> bool:
        return self.matches_distro("fedora")

    @property
    def is_not_fedora_or_redhat_or_centos(self) -> bool:
        return not any(self.matches_distro(d) for d in ("fedora", "rhel", "centos"))

    # Windows

    def _windows_version(self) -> Tuple[int, int, int]:
        if not self.is_windows:
            return (0, 0, 0)
        return self._windows_version_info()

    @property
    def windows_version(self) -> int:
        """Major Windows version, or -1 when not on Windows."""
        if not self.is_windows:
            return -1
        return self._windows_version()[0]

    @property
    def is_windows7(self) -> bool:
        return self._windows_version()[:2] == (6, 1)

    @property
    def is_windows8x(self) -> bool:
        return self._windows_version()[:2] in ((6, 2), (6, 3))

    def _is_windows10_build_or_greater(self, build: int) -> bool:
        major, _, current = self._windows_version()
        return major >= 10 and current >= build

    @property
    def is_windows10_version1607_or_greater(self) -> bool:
        return self._is_windows10_build_or_greater(BUILD_1607)

    @property
    def is_windows10_version1703_or_greater(self) -> bool:
        return self._is_windows10_build_or_greater(BUILD_1703)

    @property
    def is_windows10_insider_preview_build16215_or_greater(self) -> bool:
        return self._is_windows10_build_or_greater(BUILD_INSIDER_16215)

    @property
    def is_windows10_version16251_or_greater(self) -> bool:
        return self._is_windows10_build_or_greater(BUILD_16251)

    @property
    def is_windows_and_elevated(self) -> bool:
        return self.is_windows and is_superuser(self._os_family())

    # Identity and kernel

    @property
    def is_superuser(self) -> bool:
        return is_superuser(self._os_family())

    @property
    def kernel_version(self) -> KernelVersion:
        return query_kernel_version()

    @property
    def osx_kernel_version(self) -> KernelVersion:
        """Darwin kernel version on macOS, ``0.0.0`` elsewhere."""
        return get_osx_kernel_version(self._os_family())

    def predicate(self, name: str) -> bool:
        """Evaluate one catalog predicate by name."""
        if name not in PREDICATE_NAMES:
            raise UnknownPredicateError(name, PREDICATE_NAMES)
        return getattr(self, name)

    def predicates(self) -> Dict[str, bool]:
        """Evaluate the whole predicate catalog."""
        return {name: self.predicate(name) for name in PREDICATE_NAMES}


# Process-wide default instance
platform_detection = PlatformDetection()
