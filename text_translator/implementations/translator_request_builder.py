"""
Request builder for the Microsoft Translator Text API v3.
"""

import uuid

import httpx

from text_translator.core.constants import (
    CLIENT_TRACE_ID_HEADER,
    DEFAULT_API_VERSION,
    DEFAULT_TRANSLATOR_ENDPOINT,
    DETECT_PATH,
    LANGUAGES_PATH,
    SUBSCRIPTION_KEY_HEADER,
    SUBSCRIPTION_REGION_HEADER,
    TRANSLATE_PATH,
)
from text_translator.interfaces.request_builder import IRequestBuilder
from text_translator.schemas.translator_schemas import TranslatorRequestItem


class TranslatorRequestBuilder(IRequestBuilder):
    """Builds translate, detect and languages requests."""

    def __init__(
        self,
        api_key: str,
        endpoint: str = DEFAULT_TRANSLATOR_ENDPOINT,
        api_version: str = DEFAULT_API_VERSION,
        region: str | None = None,
    ):
        """
        Initialize request builder.

        :param api_key: Translator subscription key
        :param endpoint: Service base URL
        :param api_version: API version sent with every request
        :param region: Subscription region, required for regional keys
        """
        if not api_key or not api_key.strip():
            raise ValueError("Translator API key is required")

        self.api_key = api_key
        self.endpoint = endpoint.rstrip("/")
        self.api_version = api_version
        self.region = region

    def build_translate_request(
        self, from_language: str, to_language: str, items: list[TranslatorRequestItem]
    ) -> httpx.Request:
        params = {
            "api-version": self.api_version,
            "includeAlignment": "true",
            "includeSentenceLength": "true",
            "from": from_language,
            "to": to_language,
        }
        return self._build_request(TRANSLATE_PATH, params, items)

    def build_detect_request(self, items: list[TranslatorRequestItem]) -> httpx.Request:
        return self._build_request(DETECT_PATH, {"api-version": self.api_version}, items)

    def build_languages_request(self) -> httpx.Request:
        # Public endpoint, the subscription key is not sent
        return httpx.Request(
            "GET",
            f"{self.endpoint}{LANGUAGES_PATH}",
            params={"api-version": self.api_version, "scope": "translation"},
            headers={CLIENT_TRACE_ID_HEADER: str(uuid.uuid4())},
        )

    def _build_request(self, path: str, params: dict[str, str], items: list[TranslatorRequestItem]) -> httpx.Request:
        """Build an authenticated POST request with a JSON array body."""
        headers = {
            SUBSCRIPTION_KEY_HEADER: self.api_key,
            CLIENT_TRACE_ID_HEADER: str(uuid.uuid4()),
        }
        if self.region:
            headers[SUBSCRIPTION_REGION_HEADER] = self.region

        return httpx.Request(
            "POST",
            f"{self.endpoint}{path}",
            params=params,
            headers=headers,
            json=[item.model_dump() for item in items],
        )
