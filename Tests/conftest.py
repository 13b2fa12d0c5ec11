"""
Root conftest.py for shared test fixtures and configuration.
"""

import shutil
import sys
import tempfile
from pathlib import Path

import pytest
from loguru import logger

# Add project root to Python path for consistent imports
PROJECT_ROOT = Path(__file__).parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from shared_pages import config as app_config
from shared_pages.config import AppSettings


# ========== Path and File System Fixtures ==========

@pytest.fixture
def isolated_temp_dir():
    """Create an isolated temporary directory that's always cleaned up."""
    temp_dir = tempfile.mkdtemp(prefix="shared_pages_test_")
    temp_path = Path(temp_dir)
    yield temp_path
    if temp_path.exists():
        shutil.rmtree(temp_dir, ignore_errors=True)


# ========== Configuration Fixtures ==========

@pytest.fixture
def isolated_config(monkeypatch, isolated_temp_dir):
    """Point the config loader at a throwaway file and clear its cache."""
    config_path = isolated_temp_dir / "config" / "config.toml"
    monkeypatch.setenv(app_config.CONFIG_ENV_VAR, str(config_path))
    monkeypatch.setattr(app_config, "_CONFIG_CACHE", None)
    yield config_path
    app_config._CONFIG_CACHE = None


@pytest.fixture
def app_settings():
    """Default settings with file logging off, so no test touches the home directory."""
    settings = AppSettings()
    settings.logging.log_to_file = False
    return settings


# ========== Logging Fixtures ==========

@pytest.fixture
def restore_loguru():
    """Put loguru back to its default stderr sink after a test reconfigures it."""
    yield
    logger.remove()
    logger.add(sys.stderr)
