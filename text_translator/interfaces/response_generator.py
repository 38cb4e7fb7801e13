"""
Response generator interface for sending requests and parsing service responses.

Implementations own the transport. They must not retry; HTTP failures
propagate to the caller.
"""

from abc import ABC, abstractmethod

import httpx

from text_translator.schemas.translator_schemas import DetectResult, TranslateResult


class IResponseGenerator(ABC):
    """Abstract interface for sending requests and parsing their responses."""

    @abstractmethod
    async def generate_translate_response(self, request: httpx.Request) -> list[TranslateResult]:
        """
        Send a translate request and parse its response.

        :param request: Request built by an IRequestBuilder
        :return: One result per request item
        :raises TranslationError: If the body is not a translate response
        """
        pass

    @abstractmethod
    async def generate_detect_response(self, request: httpx.Request) -> list[DetectResult]:
        """
        Send a detect request and parse its response.

        :param request: Request built by an IRequestBuilder
        :return: One result per request item
        :raises TranslationError: If the body is not a detect response
        """
        pass

    @abstractmethod
    async def generate_languages_response(self, request: httpx.Request) -> list[str]:
        """
        Send a languages request and return the translation language codes.

        :param request: Request built by an IRequestBuilder
        :return: Language codes
        :raises TranslationError: If the body is not a languages response
        """
        pass

    @abstractmethod
    async def aclose(self) -> None:
        """Release transport resources owned by the generator."""
        pass
