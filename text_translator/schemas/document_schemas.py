"""
Domain models produced by the alignment pipeline.

All models are frozen. Pipeline stages return updated copies via
`model_copy(update=...)` instead of mutating a half-built document.
"""

from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field, model_validator


class AlignmentEntry(BaseModel):
    """One parsed `srcStart:srcEnd-tgtStart:tgtEnd` tuple (inclusive character offsets)."""

    model_config = ConfigDict(frozen=True)

    source_start: int = Field(ge=0)
    source_end: int = Field(ge=0)
    target_start: int = Field(ge=0)
    target_end: int = Field(ge=0)

    @model_validator(mode="after")
    def check_ordering(self) -> "AlignmentEntry":
        if self.source_start > self.source_end or self.target_start > self.target_end:
            raise ValueError("Alignment span start must not exceed its end")
        return self

    def span(self, is_source: bool) -> tuple[int, int]:
        """Return the (start, end) span for the requested side."""
        if is_source:
            return self.source_start, self.source_end
        return self.target_start, self.target_end


class LiteralPhrase(BaseModel):
    """Do-not-translate phrase and its character offset in the pre-processed source text."""

    model_config = ConfigDict(frozen=True)

    text: str
    start: int = Field(ge=0)

    @property
    def end(self) -> int:
        """Inclusive end offset, matching alignment span conventions."""
        return self.start + len(self.text) - 1


class TranslatedDocument(BaseModel):
    """Result of translating one input string."""

    model_config = ConfigDict(frozen=True)

    source_message: str
    target_message: str = ""
    raw_alignment: str | None = None
    source_tokens: tuple[str, ...] = ()
    target_tokens: tuple[str, ...] = ()
    literal_no_translate_phrases: tuple[LiteralPhrase, ...] = ()
    index_alignment_pairs: tuple[tuple[int, int], ...] = ()

    @property
    def index_alignment(self) -> MappingProxyType:
        """Read-only source token index -> target token index mapping."""
        return MappingProxyType(dict(self.index_alignment_pairs))

    @property
    def literal_texts(self) -> list[str]:
        """Literal phrases in original order, without positions."""
        return [phrase.text for phrase in self.literal_no_translate_phrases]
