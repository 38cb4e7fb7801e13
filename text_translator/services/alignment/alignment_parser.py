import re

from text_translator.core.exceptions import AlignmentParseError
from text_translator.schemas.document_schemas import AlignmentEntry

ALIGNMENT_ENTRY_PATTERN = re.compile(r"^(\d+):(\d+)-(\d+):(\d+)$")


def parse_alignment(raw_alignment: str | None) -> list[AlignmentEntry]:
    """
    Parse a raw word-alignment projection.

    An empty or missing string means the service sent no alignment and yields
    an empty list; callers treat that as the whole-sentence fallback.

    :param raw_alignment: Space-separated tuples, e.g. '0:1-0:6 3:7-8:12'
    :return: Entries in input order
    :raises AlignmentParseError: If any tuple is not four integers as 'a:b-c:d' or has start > end
    """
    if not raw_alignment or not raw_alignment.strip():
        return []

    entries = []
    for raw_entry in raw_alignment.split():
        match = ALIGNMENT_ENTRY_PATTERN.match(raw_entry)
        if not match:
            raise AlignmentParseError(raw_entry)

        source_start, source_end, target_start, target_end = (int(group) for group in match.groups())
        if source_start > source_end or target_start > target_end:
            raise AlignmentParseError(raw_entry)

        entries.append(
            AlignmentEntry(
                source_start=source_start,
                source_end=source_end,
                target_start=target_start,
                target_end=target_end,
            )
        )

    return entries
