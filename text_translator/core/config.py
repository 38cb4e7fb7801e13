from pydantic_settings import BaseSettings, SettingsConfigDict

from text_translator.core.constants import (
    DEFAULT_API_VERSION,
    DEFAULT_REQUEST_TIMEOUT_SECONDS,
    DEFAULT_TRANSLATOR_ENDPOINT,
)


class TranslatorSettings(BaseSettings):
    """Translator client settings"""

    api_key: str | None = None
    region: str | None = None  # Required by the service for regional/multi-service keys

    endpoint: str = DEFAULT_TRANSLATOR_ENDPOINT
    api_version: str = DEFAULT_API_VERSION
    timeout_seconds: float = DEFAULT_REQUEST_TIMEOUT_SECONDS

    debug: bool = False

    model_config = SettingsConfigDict(
        env_prefix="TRANSLATOR_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )
