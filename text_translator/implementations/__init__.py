"""
Concrete implementations of service interfaces.

This module provides production-ready implementations of the defined
interfaces for the Microsoft Translator Text API.
"""

from .microsoft_translator import MicrosoftTranslator
from .translator_pre_processor import TranslatorPreProcessor
from .translator_request_builder import TranslatorRequestBuilder
from .translator_response_generator import TranslatorResponseGenerator

__all__ = [
    "MicrosoftTranslator",
    "TranslatorPreProcessor",
    "TranslatorRequestBuilder",
    "TranslatorResponseGenerator",
]
