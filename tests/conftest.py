"""
Pytest configuration and shared fixtures for VCUtils tests.
"""

import tempfile
from pathlib import Path
from typing import Generator, Optional

import pytest

from vcutils.config.settings import get_default_config, set_config
from vcutils.http_client.adapters.base import RawResponse
from vcutils.http_client.adapters.mock import MockAdapter


def create_test_config_content(
    temp_dir: Path,
    defaults: Optional[str] = None,
    targets: Optional[str] = None,
) -> str:
    """
    Generate test configuration YAML content.

    Args:
        temp_dir: Temporary directory for the log file.
        defaults: Optional YAML lines (already indented) for http_client.defaults.
        targets: Optional YAML lines (already indented) for http_client.targets.

    Returns:
        YAML configuration content as string.
    """
    defaults = defaults or "    log_level: info\n"
    targets = targets or "    tests.Client:\n      log_level: none\n"
    return f"""
http_client:
  defaults:
{defaults.rstrip()}
  targets:
{targets.rstrip()}

logging:
  level: INFO
  file: {temp_dir}/vcutils.log
  format: console
"""


@pytest.fixture(autouse=True)
def isolated_config() -> Generator[None, None, None]:
    """
    Pin the process-wide configuration to built-in defaults.

    Keeps a developer's ~/.vcutils/config.yaml out of the test run.
    """
    set_config(get_default_config())
    yield
    set_config(None)


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """
    Create a temporary directory for test files.

    Yields:
        Path to temporary directory that is cleaned up after test.
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_config_path(temp_dir: Path) -> Path:
    """
    Create a sample configuration file for testing.

    Returns:
        Path to sample config file.
    """
    config_path = temp_dir / "config.yaml"
    config_path.write_text(create_test_config_content(temp_dir))
    return config_path


@pytest.fixture
def mock_adapter() -> MockAdapter:
    """Mock adapter with a few canned JSONPlaceholder-style routes."""
    return MockAdapter({
        ("GET", "https://api.test/posts/1"): RawResponse(
            status=200, body=b'{"id":1,"title":"hello"}'
        ),
        ("GET", "https://api.test/missing"): RawResponse(
            status=404, body=b'{"error":"not found"}'
        ),
        ("DELETE", "https://api.test/posts/1"): RawResponse(status=204, body=b""),
    })
