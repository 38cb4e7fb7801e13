"""
Pre-processor for Microsoft Translator input.

Collapses whitespace and strips <literal>...</literal> markup, recording the
marked phrases so they can be restored verbatim after translation.
"""

import re

from text_translator.core.constants import LITERAL_CLOSE_TAG, LITERAL_OPEN_TAG
from text_translator.interfaces.pre_processor import IPreProcessor
from text_translator.schemas.document_schemas import LiteralPhrase

WHITESPACE_PATTERN = re.compile(r"\s+")

# Matches from the innermost opening tag, so an unterminated outer tag stays as text
LITERAL_PATTERN = re.compile(
    rf"{re.escape(LITERAL_OPEN_TAG)}((?:(?!{re.escape(LITERAL_OPEN_TAG)}).)*?){re.escape(LITERAL_CLOSE_TAG)}",
    re.IGNORECASE | re.DOTALL,
)


def _append(output: str, piece: str) -> str:
    """Append without creating leading or doubled spaces."""
    if not output or output.endswith(" "):
        piece = piece.lstrip(" ")
    return output + piece


class TranslatorPreProcessor(IPreProcessor):
    """Whitespace normalization and literal-tag extraction."""

    def preprocess_message(self, text: str | None) -> str:
        if not text:
            return ""
        return WHITESPACE_PATTERN.sub(" ", text).strip()

    def extract_literals(self, text: str | None) -> tuple[str, list[LiteralPhrase]]:
        text = self.preprocess_message(text)

        output = ""
        literal_phrases = []
        last_end = 0
        for match in LITERAL_PATTERN.finditer(text):
            output = _append(output, text[last_end : match.start()])
            last_end = match.end()

            phrase = match.group(1).strip()
            if not phrase:
                continue
            output = _append(output, phrase)
            literal_phrases.append(LiteralPhrase(text=phrase, start=len(output) - len(phrase)))

        output = _append(output, text[last_end:])
        return output.rstrip(" "), literal_phrases
