"""Unit tests for settings and logging setup."""

import structlog

from text_translator.core.config import TranslatorSettings
from text_translator.core.constants import DEFAULT_TRANSLATOR_ENDPOINT
from text_translator.core.logging_config import configure_logging


def test_settings_defaults(monkeypatch):
    monkeypatch.delenv("TRANSLATOR_API_KEY", raising=False)

    settings = TranslatorSettings(_env_file=None)

    assert settings.api_key is None
    assert settings.endpoint == DEFAULT_TRANSLATOR_ENDPOINT
    assert settings.api_version == "3.0"
    assert settings.timeout_seconds == 10.0


def test_settings_read_prefixed_environment(monkeypatch):
    monkeypatch.setenv("TRANSLATOR_API_KEY", "from-env")
    monkeypatch.setenv("TRANSLATOR_REGION", "westeurope")

    settings = TranslatorSettings(_env_file=None)

    assert settings.api_key == "from-env"
    assert settings.region == "westeurope"


def test_configure_logging():
    try:
        configure_logging(debug=True)
        assert structlog.is_configured()
    finally:
        structlog.reset_defaults()
