"""
Microsoft Translator implementation.

This module provides a concrete implementation of the TranslatorInterface
using the Microsoft Translator Text API v3. Pre-processing, request
construction and response handling are injected collaborators.
"""

import httpx
import structlog

from text_translator.core.config import TranslatorSettings
from text_translator.core.constants import (
    DEFAULT_API_VERSION,
    DEFAULT_REQUEST_TIMEOUT_SECONDS,
    DEFAULT_TRANSLATOR_ENDPOINT,
)
from text_translator.core.logging_config import configure_logging
from text_translator.implementations.translator_pre_processor import TranslatorPreProcessor
from text_translator.implementations.translator_request_builder import TranslatorRequestBuilder
from text_translator.implementations.translator_response_generator import TranslatorResponseGenerator
from text_translator.interfaces.pre_processor import IPreProcessor
from text_translator.interfaces.request_builder import IRequestBuilder
from text_translator.interfaces.response_generator import IResponseGenerator
from text_translator.interfaces.translator import TranslationError, TranslatorInterface
from text_translator.schemas.document_schemas import TranslatedDocument
from text_translator.schemas.translator_schemas import TranslatorRequestItem
from text_translator.services.alignment.document_assembler import DocumentAssembler

logger = structlog.get_logger(__name__)


class MicrosoftTranslator(TranslatorInterface):
    """Microsoft Translator Text API implementation of the translator interface."""

    def __init__(
        self,
        api_key: str,
        http_client: httpx.AsyncClient | None = None,
        endpoint: str = DEFAULT_TRANSLATOR_ENDPOINT,
        api_version: str = DEFAULT_API_VERSION,
        region: str | None = None,
        timeout_seconds: float = DEFAULT_REQUEST_TIMEOUT_SECONDS,
        pre_processor: IPreProcessor | None = None,
        request_builder: IRequestBuilder | None = None,
        response_generator: IResponseGenerator | None = None,
    ):
        """
        Initialize Microsoft translator.

        :param api_key: Translator subscription key
        :param http_client: Transport for requests (optional, one is created if omitted)
        :param endpoint: Service base URL
        :param api_version: API version
        :param region: Subscription region (optional)
        :param timeout_seconds: Request timeout for a created transport
        :param pre_processor: Replaces the default literal-tag pre-processor
        :param request_builder: Replaces the default request builder
        :param response_generator: Replaces the default response generator
        """
        if not api_key or not api_key.strip():
            raise ValueError("Translator API key is required")

        self.pre_processor = pre_processor or TranslatorPreProcessor()
        self.request_builder = request_builder or TranslatorRequestBuilder(
            api_key, endpoint=endpoint, api_version=api_version, region=region
        )
        self.response_generator = response_generator or TranslatorResponseGenerator(
            http_client, timeout_seconds=timeout_seconds
        )
        self.document_assembler = DocumentAssembler(self.pre_processor)

    @classmethod
    def from_settings(
        cls, settings: TranslatorSettings, http_client: httpx.AsyncClient | None = None
    ) -> "MicrosoftTranslator":
        """
        Create a translator from environment-backed settings.

        This is the application entry point: it also configures structlog,
        rendering console output when `settings.debug` is set and JSON otherwise.

        :param settings: Translator settings
        :param http_client: Transport for requests (optional)
        :return: Configured translator
        """
        translator = cls(
            api_key=settings.api_key or "",
            http_client=http_client,
            endpoint=settings.endpoint,
            api_version=settings.api_version,
            region=settings.region,
            timeout_seconds=settings.timeout_seconds,
        )
        configure_logging(debug=settings.debug)
        return translator

    async def detect(self, text: str | None) -> str:
        """Detect language of the pre-processed text."""
        processed_text = self.pre_processor.preprocess_message(text)
        request = self.request_builder.build_detect_request([TranslatorRequestItem(text=processed_text)])

        logger.debug("detect_request_sent", length=len(processed_text))
        detected_languages = await self.response_generator.generate_detect_response(request)
        if not detected_languages:
            raise TranslationError("Language detection returned no result")

        return detected_languages[0].language

    async def translate(self, text: str | None, from_language: str, to_language: str) -> TranslatedDocument:
        """Translate a single text."""
        documents = await self.translate_batch([text], from_language, to_language)
        return documents[0]

    async def translate_batch(
        self, texts: list[str | None], from_language: str, to_language: str
    ) -> list[TranslatedDocument]:
        """Translate texts in one request, returning documents in input order."""
        if not texts:
            return []

        documents = [self.document_assembler.prepare(text) for text in texts]
        items = [TranslatorRequestItem(text=document.source_message) for document in documents]
        request = self.request_builder.build_translate_request(from_language, to_language, items)

        logger.debug(
            "translate_request_sent",
            count=len(items),
            from_language=from_language,
            to_language=to_language,
        )
        results = await self.response_generator.generate_translate_response(request)

        if len(results) != len(documents):
            raise TranslationError(f"Translator returned {len(results)} results for {len(documents)} texts")

        translated_documents = []
        for document, result in zip(documents, results):
            translation = result.translations[0]
            raw_alignment = translation.alignment.proj if translation.alignment else None
            translated_documents.append(self.document_assembler.assemble(document, translation.text, raw_alignment))

        return translated_documents

    async def get_supported_languages(self) -> list[str]:
        """Get supported translation languages from the service."""
        request = self.request_builder.build_languages_request()
        return await self.response_generator.generate_languages_response(request)

    async def check_availability(self) -> bool:
        """Check if the translator service answers."""
        try:
            await self.get_supported_languages()
            return True
        except (httpx.HTTPError, TranslationError) as e:
            logger.warning(f"Translator availability check failed: {e}")
            return False

    async def dispose(self) -> None:
        """Clean up resources."""
        await self.response_generator.aclose()
