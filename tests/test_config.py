from __future__ import annotations

import pytest

from hexboard.config import ServiceConfig


def test_defaults():
    cfg = ServiceConfig()
    assert cfg.port == 8000
    assert cfg.default_preset == "base_standard"


def test_from_env(monkeypatch):
    monkeypatch.setenv("HEXBOARD_PORT", "9001")
    monkeypatch.setenv("HEXBOARD_LOG_LEVEL", "debug")
    monkeypatch.setenv("HEXBOARD_DEFAULT_PLAYERS", "3")
    cfg = ServiceConfig.from_env()
    assert cfg.port == 9001
    assert cfg.log_level == "DEBUG"
    assert cfg.default_players == 3


def test_bad_log_level(monkeypatch):
    monkeypatch.setenv("HEXBOARD_LOG_LEVEL", "chatty")
    with pytest.raises(ValueError):
        ServiceConfig.from_env()
