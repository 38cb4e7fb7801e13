"""
Request builder interface for constructing translation service requests.
"""

from abc import ABC, abstractmethod

import httpx

from text_translator.schemas.translator_schemas import TranslatorRequestItem


class IRequestBuilder(ABC):
    """Abstract interface for building HTTP requests."""

    @abstractmethod
    def build_translate_request(
        self, from_language: str, to_language: str, items: list[TranslatorRequestItem]
    ) -> httpx.Request:
        """
        Build a translate request asking for word alignment and sentence lengths.

        :param from_language: Source language code
        :param to_language: Target language code
        :param items: Request body items
        :return: Unsent request
        """
        pass

    @abstractmethod
    def build_detect_request(self, items: list[TranslatorRequestItem]) -> httpx.Request:
        """
        Build a language detection request.

        :param items: Request body items
        :return: Unsent request
        """
        pass

    @abstractmethod
    def build_languages_request(self) -> httpx.Request:
        """
        Build a request listing supported translation languages.

        :return: Unsent request
        """
        pass
