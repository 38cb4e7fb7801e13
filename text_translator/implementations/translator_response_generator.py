"""
Response generator for the Microsoft Translator Text API v3.

Sends requests through an injected httpx.AsyncClient and validates the JSON
bodies into wire models. HTTP and transport errors are logged and re-raised
unchanged; nothing is retried here.
"""

from typing import Any

import httpx
import structlog
from pydantic import TypeAdapter, ValidationError

from text_translator.core.constants import DEFAULT_REQUEST_TIMEOUT_SECONDS
from text_translator.interfaces.response_generator import IResponseGenerator
from text_translator.interfaces.translator import TranslationError
from text_translator.schemas.translator_schemas import DetectResult, TranslateResult

logger = structlog.get_logger(__name__)

_translate_results = TypeAdapter(list[TranslateResult])
_detect_results = TypeAdapter(list[DetectResult])


class TranslatorResponseGenerator(IResponseGenerator):
    """httpx implementation of the response generator interface."""

    def __init__(
        self,
        http_client: httpx.AsyncClient | None = None,
        timeout_seconds: float = DEFAULT_REQUEST_TIMEOUT_SECONDS,
    ):
        """
        Initialize response generator.

        :param http_client: Client used to send requests; created and owned here if None
        :param timeout_seconds: Timeout for an owned client
        """
        self._owns_client = http_client is None
        self.http_client = http_client or httpx.AsyncClient(timeout=timeout_seconds)

    async def generate_translate_response(self, request: httpx.Request) -> list[TranslateResult]:
        payload = await self._send(request)
        try:
            return _translate_results.validate_python(payload)
        except ValidationError as e:
            raise TranslationError(f"Unexpected translate response: {e}", e)

    async def generate_detect_response(self, request: httpx.Request) -> list[DetectResult]:
        payload = await self._send(request)
        try:
            return _detect_results.validate_python(payload)
        except ValidationError as e:
            raise TranslationError(f"Unexpected detect response: {e}", e)

    async def generate_languages_response(self, request: httpx.Request) -> list[str]:
        payload = await self._send(request)
        if not isinstance(payload, dict) or not isinstance(payload.get("translation"), dict):
            raise TranslationError("Unexpected languages response: missing 'translation' scope")
        return sorted(payload["translation"])

    async def _send(self, request: httpx.Request) -> Any:
        """Send a request and return its decoded JSON body."""
        try:
            response = await self.http_client.send(request)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error("translator_http_error", url=str(request.url), status_code=e.response.status_code)
            raise
        except httpx.RequestError as e:
            logger.error("translator_request_failed", url=str(request.url), error=str(e))
            raise

        try:
            return response.json()
        except ValueError as e:
            raise TranslationError("Translator response is not valid JSON", e)

    async def aclose(self) -> None:
        """Close the HTTP client if it was created here."""
        if self._owns_client:
            await self.http_client.aclose()
