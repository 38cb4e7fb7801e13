"""
Translator interface for text translation services.

This interface abstracts translation functionality, so callers (for example a
bot middleware translating mid-conversation) can depend on it and receive a
concrete provider through dependency injection.
"""

from abc import ABC, abstractmethod

from text_translator.schemas.document_schemas import TranslatedDocument


class TranslatorInterface(ABC):
    """Abstract interface for text translation services."""

    @abstractmethod
    async def detect(self, text: str | None) -> str:
        """
        Detect the language of given text.

        :param text: Text to analyze
        :return: Detected language code of the first result
        :raises TranslationError: If the service answers with no detection
        """
        pass

    @abstractmethod
    async def translate(self, text: str | None, from_language: str, to_language: str) -> TranslatedDocument:
        """
        Translate a single text.

        :param text: Text to translate, may contain <literal>...</literal> spans
        :param from_language: Source language code (e.g., 'en')
        :param to_language: Target language code (e.g., 'de')
        :return: Translated document with tokens and word alignment
        """
        pass

    @abstractmethod
    async def translate_batch(
        self, texts: list[str | None], from_language: str, to_language: str
    ) -> list[TranslatedDocument]:
        """
        Translate several texts in one request.

        :param texts: Texts to translate
        :param from_language: Source language code
        :param to_language: Target language code
        :return: One document per input text, in input order
        :raises TranslationError: If the response does not match the request
        """
        pass

    @abstractmethod
    async def get_supported_languages(self) -> list[str]:
        """
        Get list of supported language codes.

        :return: Sorted list of language codes
        """
        pass

    @abstractmethod
    async def check_availability(self) -> bool:
        """
        Check if translation service is available.

        :return: True if service is available, False otherwise
        """
        pass


class TranslationError(Exception):
    """Exception raised when the translation service answers with unusable data."""

    def __init__(self, message: str, original_error: Exception | None = None):
        super().__init__(message)
        self.original_error = original_error
