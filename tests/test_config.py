from __future__ import annotations

import pytest

import config


@pytest.mark.parametrize(
    "env,expected",
    [
        ("production", "config.production"),
        (" PROD ", "config.production"),
        ("testing", "config.testing"),
        ("test", "config.testing"),
        ("dev", "config.development"),
        ("staging", "config.development"),
        ("", "config.development"),
    ],
)
def test_app_env_selects_settings_module(monkeypatch, env, expected):
    monkeypatch.setenv("APP_ENV", env)
    assert config.get_settings_module() == expected


def test_explicit_env_wins_over_app_env(monkeypatch):
    monkeypatch.setenv("APP_ENV", "production")
    assert config.get_settings_module("testing") == "config.testing"


def test_db_config_reads_overrides(monkeypatch):
    monkeypatch.setenv("DB_HOST", "db.internal")
    monkeypatch.setenv("DB_PORT", "3307")
    monkeypatch.delenv("DB_USER", raising=False)
    monkeypatch.delenv("DB_NAME", raising=False)

    cfg = config.db_config_from_env(database="workforce_db", user="payouts")

    assert cfg["host"] == "db.internal"
    assert cfg["port"] == 3307
    assert cfg["user"] == "payouts"
    assert cfg["database"] == "workforce_db"


@pytest.mark.parametrize("raw,expected", [("1", True), ("yes", True), ("0", False), ("off", False), ("", True)])
def test_env_flag(monkeypatch, raw, expected):
    monkeypatch.setenv("AUTO_INIT_DB", raw)
    assert config.env_flag("AUTO_INIT_DB", True) is expected


def test_testing_settings_never_touch_the_schema():
    settings = config.load_settings("testing")

    assert settings.TESTING is True
    assert settings.AUTO_INIT_DB is False
