"""
Shared fixtures for platdetect tests.
"""

from pathlib import Path
from typing import Callable

import pytest

from platdetect import config, distro


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def os_release_dir(fixtures_dir: Path) -> Path:
    """Return the directory of vendor os-release samples."""
    return fixtures_dir / "os-release"


@pytest.fixture
def write_os_release(tmp_path: Path) -> Callable[[str], Path]:
    """Factory writing descriptor content to a temporary os-release file."""
    def _write(content: str, name: str = "os-release") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def missing_os_release(tmp_path: Path) -> Path:
    """Path where no descriptor exists."""
    return tmp_path / "absent" / "os-release"


@pytest.fixture(autouse=True)
def reset_detection_config():
    """Restore the module-level config and drop memoized records."""
    original = config.get_config()
    config.set_config(config.DetectionConfig())
    distro.clear_record_cache()
    yield
    config.set_config(original)
    distro.clear_record_cache()
