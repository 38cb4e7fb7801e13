"""Client for the Microsoft Translator Text API with word-alignment post-processing."""

from text_translator.implementations.microsoft_translator import MicrosoftTranslator
from text_translator.interfaces.translator import TranslationError, TranslatorInterface
from text_translator.schemas.document_schemas import TranslatedDocument

__all__ = [
    "MicrosoftTranslator",
    "TranslatedDocument",
    "TranslationError",
    "TranslatorInterface",
]
