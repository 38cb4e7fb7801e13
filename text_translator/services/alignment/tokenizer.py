"""
Split a sentence into tokens consistent with alignment spans.

Words are cut into pieces wherever one span ends and another starts with no
gap, so adjacent spans inside a word (or inside unspaced text such as
Chinese) become distinct tokens. A span that covers several pieces across
whitespace (a multi-word alignment or a literal phrase) glues them into one
token. Cuts never fall inside a literal phrase.
"""

import bisect
import re
from collections.abc import Iterable, Sequence

from text_translator.schemas.document_schemas import AlignmentEntry

WORD_PATTERN = re.compile(r"\S+")


def _word_boundaries(sentence: str) -> list[tuple[int, int]]:
    """Return inclusive (start, end) offsets of every whitespace-delimited word."""
    return [(match.start(), match.end() - 1) for match in WORD_PATTERN.finditer(sentence)]


def _cut_points(spans: Sequence[tuple[int, int]], atomic_spans: Sequence[tuple[int, int]]) -> list[int]:
    """Offsets where one span ends right before another starts, outside literal phrases."""
    ends_before = {end + 1 for _, end in spans}

    def inside_literal(offset: int) -> bool:
        return any(atomic_start < offset <= atomic_end for atomic_start, atomic_end in atomic_spans)

    return sorted(start for start in {start for start, _ in spans} if start in ends_before and not inside_literal(start))


def _pieces(sentence: str, cuts: Sequence[int]) -> list[tuple[int, int]]:
    """Split every word at the cut points that fall inside it."""
    pieces = []
    for word_start, word_end in _word_boundaries(sentence):
        piece_start = word_start
        for cut in cuts[bisect.bisect_right(cuts, word_start) : bisect.bisect_right(cuts, word_end)]:
            pieces.append((piece_start, cut - 1))
            piece_start = cut
        pieces.append((piece_start, word_end))
    return pieces


def _covered_pieces(pieces: list[tuple[int, int]], start: int, end: int) -> tuple[int, int] | None:
    """Return the (first, last) indexes of the pieces a span overlaps, or None if it only touches whitespace."""
    piece_ends = [piece_end for _, piece_end in pieces]
    first = bisect.bisect_left(piece_ends, start)
    if first == len(pieces) or pieces[first][0] > end:
        return None

    last = first
    while last + 1 < len(pieces) and pieces[last + 1][0] <= end:
        last += 1
    return first, last


def join_tokens(tokens: Sequence[str], boundaries: Sequence[tuple[int, int]]) -> str:
    """
    Join tokens, separating them by a single space only where the sentence had whitespace between them.

    :param tokens: Tokens in sentence order
    :param boundaries: Inclusive (start, end) offsets per token
    :return: Joined text
    """
    parts = []
    for index, token in enumerate(tokens):
        if index and boundaries[index][0] > boundaries[index - 1][1] + 1:
            parts.append(" ")
        parts.append(token)
    return "".join(parts)


def split_sentence(
    sentence: str,
    entries: Sequence[AlignmentEntry],
    is_source: bool = True,
    atomic_spans: Iterable[tuple[int, int]] = (),
) -> list[str]:
    """
    Split a sentence into tokens using one side of the alignment.

    :param sentence: Source or target sentence the spans index into
    :param entries: Parsed alignment entries
    :param is_source: Use source spans if True, target spans otherwise
    :param atomic_spans: Extra inclusive spans that must stay a single token (literal phrases)
    :return: Tokens in sentence order; whitespace inside a token is a single space
    """
    atomic_spans = list(atomic_spans)
    # sorted() is stable, so entries sharing a start keep their input order
    spans = sorted([entry.span(is_source) for entry in entries] + atomic_spans, key=lambda span: span[0])

    pieces = _pieces(sentence, _cut_points(spans, atomic_spans))
    if not pieces:
        return []

    groups: list[tuple[int, int]] = []
    for start, end in spans:
        covered = _covered_pieces(pieces, start, end)
        if covered is None:
            continue
        if groups and covered[0] <= groups[-1][1]:
            groups[-1] = (groups[-1][0], max(groups[-1][1], covered[1]))
        else:
            groups.append(covered)

    group_by_first_piece = dict(groups)
    tokens = []
    index = 0
    while index < len(pieces):
        last = group_by_first_piece.get(index, index)
        group = pieces[index : last + 1]
        tokens.append(join_tokens([sentence[start : end + 1] for start, end in group], group))
        index = last + 1

    return tokens


def token_boundaries(sentence: str, tokens: Sequence[str]) -> list[tuple[int, int]]:
    """
    Locate tokens produced by split_sentence inside the sentence by character offset.

    :param sentence: Sentence the tokens were split from
    :param tokens: Tokens in sentence order
    :return: Inclusive (start, end) offsets per token
    :raises ValueError: If the tokens do not appear in the sentence in order
    """
    boundaries = []
    cursor = 0
    for token in tokens:
        token_start = None
        for index, part in enumerate(token.split(" ")):
            part_start = cursor
            while part_start < len(sentence) and sentence[part_start].isspace():
                part_start += 1
            if not part or (index and part_start == cursor) or not sentence.startswith(part, part_start):
                raise ValueError(f"Token '{token}' does not belong to sentence")
            if token_start is None:
                token_start = part_start
            cursor = part_start + len(part)
        boundaries.append((token_start, cursor - 1))

    return boundaries
