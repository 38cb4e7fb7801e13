"""
Service interfaces for dependency injection.

This module defines abstract interfaces for the translator and its
collaborators, enabling substitution in tests without a translation provider.
"""

from text_translator.interfaces.pre_processor import IPreProcessor
from text_translator.interfaces.request_builder import IRequestBuilder
from text_translator.interfaces.response_generator import IResponseGenerator
from text_translator.interfaces.translator import TranslationError, TranslatorInterface

__all__ = [
    "IPreProcessor",
    "IRequestBuilder",
    "IResponseGenerator",
    "TranslatorInterface",
    "TranslationError",
]
