import logging

import pytest

from dognav.config import Config
from dognav.utils.logging import setup_logging


def test_config_defaults(monkeypatch, tmp_path):
    monkeypatch.delenv("DOGNAV_LOG_LEVEL", raising=False)
    monkeypatch.delenv("COMMIT_SHA", raising=False)
    monkeypatch.chdir(tmp_path)  # no .env here

    cfg = Config.from_env()
    assert cfg.LOG_LEVEL == "INFO"
    assert cfg.VERSION == "dev"


def test_config_reads_environment(monkeypatch):
    monkeypatch.setenv("DOGNAV_LOG_LEVEL", "debug")
    monkeypatch.setenv("COMMIT_SHA", "abc123")

    cfg = Config.from_env()
    assert cfg.LOG_LEVEL == "DEBUG"
    assert cfg.VERSION == "abc123"


def test_config_rejects_unknown_level(monkeypatch):
    monkeypatch.setenv("DOGNAV_LOG_LEVEL", "loud")

    with pytest.raises(RuntimeError, match="DOGNAV_LOG_LEVEL"):
        Config.from_env()


def test_setup_logging_uses_level(monkeypatch):
    calls = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.update(kw))

    setup_logging("DEBUG")
    assert calls["level"] == "DEBUG"
    assert "%(name)s" in calls["format"]
