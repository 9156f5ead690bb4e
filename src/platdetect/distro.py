# Copyright (c) 2024 Platdetect Contributors
# MIT License

"""
Linux distribution identification.

Reads the os-release descriptor into a DistributionRecord and answers
"is this distro X (at version Y)" queries. Only four keys are tracked:
ID, VERSION_ID, VERSION and PRETTY_NAME. Every query reloads the file
unless record caching is switched on in the detection config.

Malformed content degrades to empty fields; a missing file is the same
as an empty one. An unreadable file raises the underlying OSError.
"""

from __future__ import annotations

import functools
import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

from platdetect.config import OS_RELEASE_PATH, get_config
from platdetect.platform import LINUX, get_os_family
from platdetect.platform import fs
from platdetect.platform.paths import PathLike, normalize

log = logging.getLogger(__name__)

# Prefixes are tested in this order; the first match wins for a line.
_FIELD_PREFIXES = (
    ("ID=", "id"),
    ("VERSION_ID=", "version_id"),
    ("VERSION=", "version"),
    ("PRETTY_NAME=", "pretty_name"),
)


@dataclass(frozen=True)
class DistributionRecord:
    """Distribution identity as read from os-release. Absent fields are ''."""

    id: str = ""
    version_id: str = ""
    version: str = ""
    pretty_name: str = ""


def load_descriptor_lines(path: PathLike = OS_RELEASE_PATH) -> Iterator[str]:
    """
    Yield the descriptor's lines in file order, terminators stripped.

    Yields nothing when no regular file exists at ``path`` (a directory
    there counts as absent). Permission and other read errors propagate
    to the caller.
    """
    if not fs.is_file(path):
        log.debug("No distribution descriptor at %s", path)
        return
    yield from fs.read_lines(path)


def remove_quotes(value: str) -> str:
    """
    Strip surrounding whitespace and one layer of enclosing double quotes.

    No escape processing is done, and nested quotes are kept.

    >>> remove_quotes(' "14.04" ')
    '14.04'
    >>> remove_quotes('""x""')
    '"x"'
    """
    value = value.strip()
    if len(value) >= 2 and value[0] == '"' and value[-1] == '"':
        value = value[1:-1]
    return value


def parse_descriptor(lines: Iterable[str]) -> DistributionRecord:
    """Reduce descriptor lines to a record. Later duplicates win."""
    fields = {name: "" for _, name in _FIELD_PREFIXES}
    for line in lines:
        for prefix, name in _FIELD_PREFIXES:
            if line.startswith(prefix):
                fields[name] = remove_quotes(line[len(prefix):])
                break
    return DistributionRecord(**fields)


def read_distribution(path: PathLike = OS_RELEASE_PATH) -> DistributionRecord:
    """Load and parse the descriptor at ``path``."""
    record = parse_descriptor(load_descriptor_lines(path))
    log.debug("Parsed %s: %s", path, record)
    return record


@functools.lru_cache(maxsize=None)
def _cached_distribution(path: str) -> DistributionRecord:
    return read_distribution(path)


def clear_record_cache() -> None:
    """Forget records memoized while ``cache_record`` was enabled."""
    _cached_distribution.cache_clear()


def current_distribution(path: Optional[PathLike] = None) -> DistributionRecord:
    """
    Return the record for ``path`` (default: the configured descriptor).

    Honours the ``cache_record`` setting. Does not check the OS family.
    """
    config = get_config()
    if path is None:
        path = config.os_release_path
    if config.cache_record:
        return _cached_distribution(normalize(path))
    return read_distribution(path)


def _is_gated_family(os_family: Optional[str]) -> bool:
    if os_family is None:
        os_family = get_os_family()
    if os_family != LINUX:
        log.debug("Host OS family %r carries no os-release; skipping", os_family)
        return False
    return True


def matches_distro(
    distro_id: str,
    version_id: Optional[str] = None,
    *,
    path: Optional[PathLike] = None,
    os_family: Optional[str] = None,
) -> bool:
    """
    Check whether the host is distro ``distro_id``, optionally at ``version_id``.

    Comparison is exact and case-sensitive; ``"7"`` does not match ``"7.0"``.
    Always False off Linux, without reading any file.

    Args:
        distro_id: Expected os-release ID
        version_id: Expected VERSION_ID, or None for any version
        path: Descriptor to read (default: configured os-release path)
        os_family: Override for the host OS family (default: live query)
    """
    if not _is_gated_family(os_family):
        return False
    record = current_distribution(path)
    return record.id == distro_id and (
        version_id is None or record.version_id == version_id
    )


def format_summary(record: DistributionRecord) -> str:
    """Render a record as a single diagnostic line."""
    return (
        f"Distro={record.id} VersionId={record.version_id} "
        f"Pretty={record.pretty_name} Version={record.version}"
    )


def get_distribution_summary(
    *,
    path: Optional[PathLike] = None,
    os_family: Optional[str] = None,
) -> str:
    """Describe the host distribution, or return '' off Linux."""
    if not _is_gated_family(os_family):
        return ""
    return format_summary(current_distribution(path))
