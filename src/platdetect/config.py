"""
Detection Configuration

Settings shared by the distribution matcher and the predicate catalog.
"""

from dataclasses import dataclass


OS_RELEASE_PATH = "/etc/os-release"


@dataclass
class DetectionConfig:
    """
    Configuration for platform detection.

    Attributes:
        os_release_path: Location of the distribution descriptor file
        cache_record: Parse the descriptor once per path and reuse the
            record (default re-reads it on every query)
    """

    os_release_path: str = OS_RELEASE_PATH
    cache_record: bool = False


# Default configuration
_config = DetectionConfig()


def get_config() -> DetectionConfig:
    """Get the current detection configuration."""
    return _config


def set_config(config: DetectionConfig) -> None:
    """Set the detection configuration."""
    global _config
    _config = config


def configure(**kwargs) -> None:
    """Configure detection settings."""
    global _config
    for key, value in kwargs.items():
        if hasattr(_config, key):
            setattr(_config, key, value)
