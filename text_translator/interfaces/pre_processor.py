"""
Pre-processor interface for preparing text before it is sent for translation.
"""

from abc import ABC, abstractmethod

from text_translator.schemas.document_schemas import LiteralPhrase


class IPreProcessor(ABC):
    """Abstract interface for text pre-processing."""

    @abstractmethod
    def preprocess_message(self, text: str | None) -> str:
        """
        Normalize text without extracting literal phrases.

        :param text: Raw input text
        :return: Normalized text
        """
        pass

    @abstractmethod
    def extract_literals(self, text: str | None) -> tuple[str, list[LiteralPhrase]]:
        """
        Normalize text and strip literal markup.

        :param text: Raw input text
        :return: Processed text and the literal phrases found, in order of appearance
        """
        pass
