"""Tests for event_translator.config loading and overrides."""

import configparser
import logging
import os

import pytest

from event_translator import config as config_module
from event_translator.config import (
    LoggingSettings,
    ServiceConfig,
    _load_from_ini,
    configure_logging,
    get_config_status,
    load_config,
    print_config_summary,
)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove any EVT_* variables inherited from the shell."""
    for key in list(os.environ):
        if key.startswith("EVT_"):
            monkeypatch.delenv(key, raising=False)


@pytest.mark.unit
def test_defaults():
    cfg = ServiceConfig()

    assert cfg.server.port == 8080
    assert cfg.security.cors_origins == ["*"]
    assert cfg.translator.endpoint == "https://api.cognitive.microsofttranslator.com"
    assert cfg.translator.api_version == "3.0"
    assert cfg.translator.region == "eastus"
    assert cfg.translator.subscription_key == ""
    assert cfg.translator.max_workers == 1


@pytest.mark.unit
def test_translator_env_overrides(monkeypatch, clean_env):
    monkeypatch.setenv("EVT_TRANSLATOR_ENDPOINT", "https://mt.example")
    monkeypatch.setenv("EVT_TRANSLATOR_API_VERSION", "3.1")
    monkeypatch.setenv("EVT_TRANSLATOR_REGION", "westeurope")
    monkeypatch.setenv("EVT_TRANSLATOR_KEY", "k-123")
    monkeypatch.setenv("EVT_TRANSLATOR_TIMEOUT", "2.5")
    monkeypatch.setenv("EVT_TRANSLATOR_MAX_WORKERS", "4")

    cfg = load_config()

    assert cfg.translator.endpoint == "https://mt.example"
    assert cfg.translator.api_version == "3.1"
    assert cfg.translator.region == "westeurope"
    assert cfg.translator.subscription_key == "k-123"
    assert cfg.translator.timeout_seconds == 2.5
    assert cfg.translator.max_workers == 4


@pytest.mark.unit
def test_server_env_overrides(monkeypatch, clean_env):
    monkeypatch.setenv("EVT_HOST", "127.0.0.1")
    monkeypatch.setenv("EVT_PORT", "9000")
    monkeypatch.setenv("EVT_CORS_ORIGINS", "https://a.example, https://b.example")
    monkeypatch.setenv("EVT_LOG_LEVEL", "debug")

    cfg = load_config()

    assert cfg.server.host == "127.0.0.1"
    assert cfg.server.port == 9000
    assert cfg.security.cors_origins == ["https://a.example", "https://b.example"]
    assert cfg.logging.level == "DEBUG"


@pytest.mark.unit
def test_load_from_ini():
    parser = configparser.ConfigParser()
    parser.read_string(
        """
[server]
port = 8123

[logging]
level = warning
format = simple

[translator]
endpoint = https://ini.example
region = northeurope
subscription_key = from-ini
timeout_seconds = 3
max_workers = 2
"""
    )
    cfg = ServiceConfig()

    _load_from_ini(parser, cfg)

    assert cfg.server.port == 8123
    assert cfg.logging.level == "WARNING"
    assert cfg.logging.format == "simple"
    assert cfg.translator.endpoint == "https://ini.example"
    assert cfg.translator.region == "northeurope"
    assert cfg.translator.subscription_key == "from-ini"
    assert cfg.translator.timeout_seconds == 3.0
    assert cfg.translator.max_workers == 2


@pytest.mark.unit
def test_unknown_log_format_is_ignored():
    parser = configparser.ConfigParser()
    parser.read_string("[logging]\nformat = fancy\n")
    cfg = ServiceConfig()

    _load_from_ini(parser, cfg)

    assert cfg.logging.format == "detailed"


@pytest.mark.unit
def test_env_overrides_ini(monkeypatch, clean_env, tmp_path):
    ini = tmp_path / "server.ini"
    ini.write_text("[translator]\nregion = from-ini\n")
    monkeypatch.setattr(config_module, "CONFIG_FILE", ini)
    monkeypatch.setenv("EVT_TRANSLATOR_REGION", "from-env")

    assert load_config().translator.region == "from-env"


@pytest.mark.unit
def test_config_status_never_exposes_key(monkeypatch):
    monkeypatch.setattr(config_module.config.translator, "subscription_key", "super-secret")

    status = get_config_status()

    assert status["translator_key_set"] is True
    assert "super-secret" not in repr(status)


@pytest.mark.unit
def test_print_config_summary_hides_key(monkeypatch, capsys):
    monkeypatch.setattr(config_module.config.translator, "subscription_key", "super-secret")

    print_config_summary()

    out = capsys.readouterr().out
    assert "SERVICE CONFIGURATION" in out
    assert "super-secret" not in out
    assert "Key set:" in out


@pytest.mark.unit
def test_configure_logging_sets_root_level():
    root = logging.getLogger()
    previous_level = root.level
    previous_handlers = root.handlers[:]
    try:
        configure_logging(LoggingSettings(level="WARNING", format="simple"))
        assert root.level == logging.WARNING
    finally:
        root.handlers = previous_handlers
        root.setLevel(previous_level)


@pytest.mark.unit
def test_reload_config_replaces_singleton(monkeypatch, clean_env):
    monkeypatch.setattr(config_module, "config", config_module.config)
    monkeypatch.setenv("EVT_PORT", "9100")

    reloaded = config_module.reload_config()

    assert reloaded.server.port == 9100
    assert config_module.config is reloaded
