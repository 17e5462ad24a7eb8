"""Configuration loading tests."""

from __future__ import annotations

import pytest

import pocketledger.config as cfg


def test_defaults(tmp_path, monkeypatch):
    monkeypatch.delenv("POCKETLEDGER_DATABASE_URL", raising=False)
    monkeypatch.delenv("POCKETLEDGER_SUMMARY_TOP_N", raising=False)
    monkeypatch.delenv("POCKETLEDGER_CURRENCY", raising=False)

    config = cfg.BaseConfig(tmp_path)

    assert config.DATA_DIR == tmp_path.resolve()
    assert config.DATABASE_URL == f"sqlite:///{tmp_path.resolve() / 'expense_tracker.db'}"
    assert config.SUMMARY_TOP_N == 6
    assert config.CURRENCY == "EUR"
    assert config.SQLITE_PRAGMAS["foreign_keys"] == "on"


def test_data_dir_from_environment(tmp_path, monkeypatch):
    target = tmp_path / "from-env"
    monkeypatch.setenv("POCKETLEDGER_DATA_DIR", str(target))

    config = cfg.BaseConfig()

    assert config.DATA_DIR == target.resolve()
    assert target.is_dir()


def test_database_url_override(tmp_path, monkeypatch):
    monkeypatch.setenv("POCKETLEDGER_DATABASE_URL", "sqlite:///:memory:")

    assert cfg.BaseConfig(tmp_path).DATABASE_URL == "sqlite:///:memory:"


def test_testing_config_ignores_database_url_override(tmp_path, monkeypatch):
    monkeypatch.setenv("POCKETLEDGER_DATABASE_URL", "sqlite:///:memory:")

    config = cfg.TestingConfig(tmp_path)

    assert config.DATABASE_URL.endswith("expense_tracker.db")
    assert config.DEV_MODE is False


@pytest.mark.parametrize("value", ["abc", "0", "-2"])
def test_invalid_top_n(tmp_path, monkeypatch, value):
    monkeypatch.setenv("POCKETLEDGER_SUMMARY_TOP_N", value)

    with pytest.raises(ValueError):
        cfg.BaseConfig(tmp_path)


def test_currency_is_normalized(tmp_path, monkeypatch):
    monkeypatch.setenv("POCKETLEDGER_CURRENCY", " usd ")

    assert cfg.BaseConfig(tmp_path).CURRENCY == "USD"


@pytest.mark.parametrize("raw, expected", [("1", True), ("yes", True), ("off", False)])
def test_dev_mode_flag(tmp_path, monkeypatch, raw, expected):
    monkeypatch.setenv("POCKETLEDGER_DEV_MODE", raw)

    assert cfg.BaseConfig(tmp_path).DEV_MODE is expected
