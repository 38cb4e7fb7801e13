"""Word-alignment post-processing: parse, tokenize, align and assemble translated documents."""

from text_translator.services.alignment.alignment_parser import parse_alignment
from text_translator.services.alignment.document_assembler import DocumentAssembler
from text_translator.services.alignment.index_alignment import (
    align_token_pairs,
    build_index_alignment,
    locate_token,
)
from text_translator.services.alignment.tokenizer import join_tokens, split_sentence, token_boundaries

__all__ = [
    "align_token_pairs",
    "build_index_alignment",
    "DocumentAssembler",
    "join_tokens",
    "locate_token",
    "parse_alignment",
    "split_sentence",
    "token_boundaries",
]
