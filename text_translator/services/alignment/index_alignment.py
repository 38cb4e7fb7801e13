from collections.abc import Sequence

from text_translator.schemas.document_schemas import AlignmentEntry


def locate_token(boundaries: Sequence[tuple[int, int]], start: int, end: int) -> int | None:
    """
    Find the token a character span belongs to.

    The first token overlapping the span wins. A span that overlaps no token
    (it points at whitespace or past the end) falls back to the nearest token.

    :param boundaries: Inclusive (start, end) offsets per token
    :param start: Span start offset
    :param end: Span end offset (inclusive)
    :return: Token index, or None when there are no tokens
    """
    if not boundaries:
        return None

    for index, (token_start, token_end) in enumerate(boundaries):
        if token_start <= end and token_end >= start:
            return index

    def distance(index: int) -> int:
        token_start, token_end = boundaries[index]
        return token_start - end if token_start > end else start - token_end

    return min(range(len(boundaries)), key=distance)


def align_token_pairs(
    entries: Sequence[AlignmentEntry],
    source_boundaries: Sequence[tuple[int, int]],
    target_boundaries: Sequence[tuple[int, int]],
) -> list[tuple[int, int]]:
    """
    Map every alignment entry onto a (source token, target token) pair.

    :return: Distinct pairs in first-seen order
    """
    pairs: list[tuple[int, int]] = []
    for entry in entries:
        source_index = locate_token(source_boundaries, entry.source_start, entry.source_end)
        target_index = locate_token(target_boundaries, entry.target_start, entry.target_end)
        if source_index is None or target_index is None:
            continue
        if (source_index, target_index) not in pairs:
            pairs.append((source_index, target_index))

    return pairs


def build_index_alignment(pairs: Sequence[tuple[int, int]]) -> dict[int, int]:
    """Coalesce token pairs into a source index -> target index mapping; the first target seen per source wins."""
    index_alignment: dict[int, int] = {}
    for source_index, target_index in pairs:
        index_alignment.setdefault(source_index, target_index)
    return index_alignment
