from __future__ import annotations

import logging
import sys
from pathlib import Path

import pytest

# Make the awesomeads package importable when running tests from a checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import awesomeads.main as entry  # noqa: E402
from awesomeads.core import config as core_config  # noqa: E402


@pytest.fixture()
def seed_env(tmp_path, monkeypatch):
    monkeypatch.setenv("AWESOMEADS_PORT", "9999")
    monkeypatch.setenv("LOG_LEVEL", "warning")
    core_config.get_settings.cache_clear()
    root_level = logging.getLogger().level
    yield tmp_path, monkeypatch
    logging.getLogger().setLevel(root_level)
    core_config.get_settings.cache_clear()


def test_main_serves_seeded_app(seed_env):
    tmp_path, monkeypatch = seed_env
    db_file = tmp_path / "db.json"
    db_file.write_text("[]", encoding="utf-8")
    monkeypatch.setenv("AWESOMEADS_DB_PATH", str(db_file))
    calls = {}
    monkeypatch.setattr(entry.uvicorn, "run", lambda app, **kw: calls.update(app=app, **kw))

    entry.main()

    assert calls["port"] == 9999
    assert calls["app"].state.campaign_service.list_campaigns() == []
    assert logging.getLogger().level == logging.WARNING


def test_main_exits_when_seed_file_is_missing(seed_env):
    tmp_path, monkeypatch = seed_env
    monkeypatch.setenv("AWESOMEADS_DB_PATH", str(tmp_path / "missing.json"))
    monkeypatch.setattr(entry.uvicorn, "run", lambda *a, **kw: pytest.fail("server must not start"))

    with pytest.raises(SystemExit) as excinfo:
        entry.main()
    assert "missing.json" in str(excinfo.value)
