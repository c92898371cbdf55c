from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Make the awesomeads package importable when running tests from a checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from awesomeads.core import config as core_config  # noqa: E402


@pytest.fixture()
def clean_env(monkeypatch):
    for name in ("APP_ENV", "AWESOMEADS_DB_PATH", "AWESOMEADS_HOST", "AWESOMEADS_PORT", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    core_config.get_settings.cache_clear()
    yield monkeypatch
    core_config.get_settings.cache_clear()


def test_defaults(clean_env):
    settings = core_config.get_settings()
    assert settings.db_path == "db.json"
    assert settings.port == 8080
    assert settings.host == "0.0.0.0"
    assert settings.app_env == "dev"
    assert settings.log_level == "INFO"


def test_env_overrides(clean_env):
    clean_env.setenv("AWESOMEADS_DB_PATH", "/tmp/seed.json")
    clean_env.setenv("AWESOMEADS_PORT", "9090")
    clean_env.setenv("LOG_LEVEL", "debug")
    settings = core_config.get_settings()
    assert settings.db_path == "/tmp/seed.json"
    assert settings.port == 9090
    assert settings.log_level == "DEBUG"


def test_invalid_port_falls_back(clean_env):
    clean_env.setenv("AWESOMEADS_PORT", "eighty")
    assert core_config.get_settings().port == 8080
