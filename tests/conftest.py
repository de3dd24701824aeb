"""
Pytest configuration shared by all test modules.
"""
import pytest

from gcd_methods.config import get_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate every test from GCD_* environment variables and cached settings."""
    for name in ("GCD_DEFAULT_ALGORITHM", "GCD_LOG_LEVEL", "GCD_LOG_FORMAT", "GCD_MAX_SIEVE_BOUND"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def config_dir(tmp_path):
    """Temporary directory for YAML configuration files."""
    return tmp_path


@pytest.fixture
def write_config(config_dir):
    """Write a YAML configuration file and return its path as a string."""
    def _write(content: str, name: str = "gcd.yaml") -> str:
        path = config_dir / name
        path.write_text(content, encoding="utf-8")
        return str(path)
    return _write
