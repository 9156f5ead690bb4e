# Copyright (c) 2024 Platdetect Contributors
# MIT License

"""
Platdetect: read-only platform capability oracle.

Answers questions a test suite asks before running a test on the current
host: which OS family this is, which Linux distribution and version, which
Windows release, whether the user is a superuser, and what kernel runs.

The Linux distribution checks read /etc/os-release on each query.
"""

from __future__ import annotations

from platdetect.release import __version__, __author__
from platdetect.distro import (
    DistributionRecord,
    get_distribution_summary,
    matches_distro,
    read_distribution,
)
from platdetect.detection import PlatformDetection, platform_detection

__all__ = [
    "__version__",
    "__author__",
    "DistributionRecord",
    "PlatformDetection",
    "platform_detection",
    "get_distribution_summary",
    "matches_distro",
    "read_distribution",
]
