"""
Wire models for the Microsoft Translator Text API v3.

Field names follow the JSON the service sends and receives.
"""

from pydantic import BaseModel, ConfigDict, Field


class TranslatorRequestItem(BaseModel):
    """One element of the JSON array posted to /translate and /detect."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(default="", description="Text to translate or detect")


class TranslationAlignment(BaseModel):
    """Word alignment returned when includeAlignment=true."""

    proj: str | None = Field(default=None, description="Space-separated 'a:b-c:d' alignment tuples")


class SentenceLength(BaseModel):
    """Sentence boundaries returned when includeSentenceLength=true."""

    model_config = ConfigDict(populate_by_name=True)

    source_sentence_lengths: list[int] = Field(default_factory=list, alias="srcSentLen")
    translated_sentence_lengths: list[int] = Field(default_factory=list, alias="transSentLen")


class Translation(BaseModel):
    """Single translation inside a translate result."""

    model_config = ConfigDict(populate_by_name=True)

    text: str = ""
    to: str | None = None
    alignment: TranslationAlignment | None = None
    sentence_length: SentenceLength | None = Field(default=None, alias="sentLen")


class DetectedLanguage(BaseModel):
    language: str
    score: float | None = None


class TranslateResult(BaseModel):
    """One element of the /translate response array (one per request item)."""

    model_config = ConfigDict(populate_by_name=True)

    translations: list[Translation] = Field(min_length=1)
    detected_language: DetectedLanguage | None = Field(default=None, alias="detectedLanguage")


class DetectResult(BaseModel):
    """One element of the /detect response array."""

    model_config = ConfigDict(populate_by_name=True)

    language: str
    score: float | None = None
    is_translation_supported: bool | None = Field(default=None, alias="isTranslationSupported")
