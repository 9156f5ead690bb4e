# Copyright (c) 2024 Platdetect Contributors
# MIT License

"""
Platdetect Error Classes.

Descriptor read failures are deliberately absent here: a missing
os-release file is not an error, and an unreadable one surfaces as the
underlying OSError.
"""

from __future__ import annotations

import enum


class ExitCode(enum.IntEnum):
    """Exit codes used by the platdetect CLI."""

    SUCCESS = 0
    NO_MATCH = 1
    USAGE_ERROR = 2
    IO_ERROR = 3
    DETECTION_ERROR = 4


class PlatformDetectionError(Exception):
    """Base exception for all platdetect errors."""

    exit_code: int = ExitCode.DETECTION_ERROR

    def __init__(self, message: str, details: str | None = None) -> None:
        self.message = message
        self.details = details
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}\n  Details: {self.details}"
        return self.message


class KernelVersionError(PlatformDetectionError):
    """Kernel release string has no dotted numeric prefix."""

    def __init__(self, release: str) -> None:
        self.release = release
        super().__init__(f"Cannot parse kernel version from {release!r}")


class UnknownPredicateError(PlatformDetectionError):
    """Requested predicate is not part of the catalog."""

    exit_code: int = ExitCode.USAGE_ERROR

    def __init__(self, name: str, known: tuple[str, ...] = ()) -> None:
        self.name = name
        details = None
        if known:
            details = "Known predicates: " + ", ".join(known)
        super().__init__(f"Unknown predicate: {name}", details)
