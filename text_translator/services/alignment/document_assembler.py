"""
Document assembler for translated text.

Builds a TranslatedDocument in stages. `prepare` runs pre-processing before
the request is sent, `assemble` folds the service's translation and word
alignment into the prepared document. Each stage returns a new frozen
document.
"""

from collections.abc import Sequence

import structlog

from text_translator.core.exceptions import AlignmentParseError
from text_translator.interfaces.pre_processor import IPreProcessor
from text_translator.schemas.document_schemas import LiteralPhrase, TranslatedDocument
from text_translator.services.alignment.alignment_parser import parse_alignment
from text_translator.services.alignment.index_alignment import (
    align_token_pairs,
    build_index_alignment,
    locate_token,
)
from text_translator.services.alignment.tokenizer import join_tokens, split_sentence, token_boundaries

logger = structlog.get_logger(__name__)


class DocumentAssembler:
    """Service turning raw text and service output into translated documents."""

    def __init__(self, pre_processor: IPreProcessor):
        self.pre_processor = pre_processor

    def prepare(self, text: str | None) -> TranslatedDocument:
        """
        Create a document for one input text before it is sent.

        :param text: Raw input text, None is treated as empty
        :return: Document holding the processed source message and its literal phrases
        """
        processed_text, literal_phrases = self.pre_processor.extract_literals(text)
        return TranslatedDocument(
            source_message=processed_text,
            literal_no_translate_phrases=tuple(literal_phrases),
        )

    def assemble(
        self, document: TranslatedDocument, translated_text: str, raw_alignment: str | None
    ) -> TranslatedDocument:
        """
        Attach translation, tokens and word alignment to a prepared document.

        Missing or malformed alignment falls back to whole-sentence tokens.

        :param document: Document returned by prepare
        :param translated_text: Translation returned by the service
        :param raw_alignment: Alignment projection returned by the service, if any
        :return: Completed document
        """
        document = document.model_copy(update={"target_message": translated_text, "raw_alignment": raw_alignment})

        try:
            entries = parse_alignment(raw_alignment)
        except AlignmentParseError as e:
            logger.warning("alignment_parse_failed", entry=e.entry, source_message=document.source_message)
            return self._whole_sentence(document)

        if not entries:
            return self._whole_sentence(document)

        literal_spans = [(phrase.start, phrase.end) for phrase in document.literal_no_translate_phrases]
        source_tokens = split_sentence(document.source_message, entries, is_source=True, atomic_spans=literal_spans)
        target_tokens = split_sentence(translated_text, entries, is_source=False)
        if not source_tokens or not target_tokens:
            return self._whole_sentence(document)

        source_boundaries = token_boundaries(document.source_message, source_tokens)
        target_boundaries = token_boundaries(translated_text, target_tokens)
        pairs = align_token_pairs(entries, source_boundaries, target_boundaries)

        target_tokens, target_boundaries, pairs = self._restore_literals(
            document.literal_no_translate_phrases,
            source_tokens,
            source_boundaries,
            target_tokens,
            target_boundaries,
            pairs,
        )

        return document.model_copy(
            update={
                "source_tokens": tuple(source_tokens),
                "target_tokens": tuple(target_tokens),
                "index_alignment_pairs": tuple(build_index_alignment(pairs).items()),
                "target_message": join_tokens(target_tokens, target_boundaries),
            }
        )

    def _whole_sentence(self, document: TranslatedDocument) -> TranslatedDocument:
        """Fallback used when no usable alignment is available."""
        for phrase in document.literal_no_translate_phrases:
            if phrase.text not in document.target_message:
                logger.warning("literal_phrase_not_restored", phrase=phrase.text, reason="no_alignment")

        return document.model_copy(
            update={
                "source_tokens": (document.source_message,),
                "target_tokens": (document.target_message,),
                "index_alignment_pairs": (),
            }
        )

    @staticmethod
    def _restore_literals(
        literal_phrases: Sequence[LiteralPhrase],
        source_tokens: Sequence[str],
        source_boundaries: Sequence[tuple[int, int]],
        target_tokens: Sequence[str],
        target_boundaries: Sequence[tuple[int, int]],
        pairs: Sequence[tuple[int, int]],
    ) -> tuple[list[str], list[tuple[int, int]], list[tuple[int, int]]]:
        """
        Put literal phrases back verbatim on the target side.

        Target tokens aligned only from a literal's source token collapse into
        a single token holding the literal text, placed at the first of them.
        Boundaries of the surviving tokens and pairs remapped to the new target
        indexes are returned alongside.
        """
        replacements: dict[int, str] = {}
        merged_into: dict[int, int] = {}

        for phrase in literal_phrases:
            source_index = locate_token(source_boundaries, phrase.start, phrase.end)
            if source_index is None or source_tokens[source_index] != phrase.text:
                # An alignment span crossing the literal boundary glued it to other words
                logger.warning("literal_phrase_not_restored", phrase=phrase.text, reason="span_crosses_literal")
                continue

            aligned = sorted({target for source, target in pairs if source == source_index})
            exclusive = [
                target
                for target in aligned
                if target not in replacements and all(source == source_index for source, t in pairs if t == target)
            ]
            if not exclusive:
                logger.warning("literal_phrase_not_restored", phrase=phrase.text, reason="no_exclusive_target")
                continue

            head, *rest = exclusive
            replacements[head] = phrase.text
            for target in rest:
                merged_into[target] = head

        if not replacements:
            return list(target_tokens), list(target_boundaries), list(pairs)

        new_index: dict[int, int] = {}
        restored: list[str] = []
        restored_boundaries: list[tuple[int, int]] = []
        for index, token in enumerate(target_tokens):
            if index in merged_into:
                continue
            new_index[index] = len(restored)
            restored.append(replacements.get(index, token))
            restored_boundaries.append(target_boundaries[index])

        remapped: list[tuple[int, int]] = []
        for source, target in pairs:
            pair = (source, new_index[merged_into.get(target, target)])
            if pair not in remapped:
                remapped.append(pair)

        return restored, restored_boundaries, remapped
