from __future__ import annotations

from isspass.main.config import AppSettings, get_settings
from isspass.shared.consts import DEFAULT_IP_ECHO_URL, EnumEnvironment


def test_get_settings_loads_defaults(monkeypatch) -> None:
    monkeypatch.delenv("UPSTREAM_IP_ECHO_URL", raising=False)
    monkeypatch.delenv("ENVIRONMENT", raising=False)
    settings = get_settings()
    assert settings.upstream.ip_echo_url == DEFAULT_IP_ECHO_URL
    assert settings.upstream.pass_url.startswith("http://")
    assert settings.environment == EnumEnvironment.DEVELOPMENT


def test_settings_respect_environment_variables(monkeypatch) -> None:
    monkeypatch.setenv("UPSTREAM_GEO_URL", "https://geo.internal")
    monkeypatch.setenv("UPSTREAM_TIMEOUT_SECONDS", "12.5")
    monkeypatch.setenv("APP_TITLE", "Testing")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    settings = AppSettings()

    assert settings.upstream.geo_url == "https://geo.internal"
    assert settings.upstream.timeout_seconds == 12.5
    assert settings.app.title == "Testing"
    assert settings.logging.level.value == "DEBUG"


def test_logging_settings_only_expose_used_fields(monkeypatch) -> None:
    monkeypatch.setenv("LOG_FORMAT", "%(message)s")
    monkeypatch.setenv("LOG_FILE_PATH", "/tmp/isspass.log")

    settings = AppSettings()

    assert set(settings.logging.model_dump()) == {"level", "file_path"}
    assert settings.logging.file_path == "/tmp/isspass.log"
