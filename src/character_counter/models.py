from __future__ import annotations

from dataclasses import dataclass

PLACEHOLDER_LABEL = "N/A"


@dataclass(slots=True)
class Document:
    """Represents an input document."""

    doc_id: str
    text: str


@dataclass(slots=True, frozen=True)
class BasicStats:
    """Counts and timing estimates for a block of text."""

    characters: int
    characters_no_spaces: int
    words: int
    sentences: int
    paragraphs: int
    reading_time_minutes: float
    speaking_time_minutes: float

    @property
    def average_word_length(self) -> float:
        if not self.words:
            return 0.0
        return self.characters_no_spaces / self.words

    @property
    def average_sentence_length(self) -> float:
        if not self.sentences:
            return 0.0
        return self.words / self.sentences


@dataclass(slots=True, frozen=True)
class CharFrequencyEntry:
    char: str
    count: int


@dataclass(slots=True, frozen=True)
class WordCloudEntry:
    word: str
    count: int


@dataclass(slots=True, frozen=True)
class SentenceRecord:
    """A sentence with its word count and length-based complexity in [0, 1]."""

    index: int
    text: str
    word_count: int
    complexity: float


@dataclass(slots=True, frozen=True)
class SentenceFlags:
    """Structural cues detected in a single sentence."""

    has_long_words: bool
    has_passive_voice: bool
    has_complex_structure: bool


@dataclass(slots=True, frozen=True)
class ParagraphRecord:
    index: int
    sentences: tuple[SentenceRecord, ...]


@dataclass(slots=True, frozen=True)
class HeatmapInsights:
    """Aggregates derived from every sentence of a heatmap."""

    average_complexity: int
    length_variation: int
    longest_sentence: int
    most_complex_paragraph: int


@dataclass(slots=True, frozen=True)
class ReadabilityResult:
    """Heuristic readability score, tone, sentiment and writing suggestions."""

    readability_score: int
    tone: str
    sentiment: str
    suggestions: tuple[str, ...]

    @property
    def is_placeholder(self) -> bool:
        """True for the fixed result returned when the text is too short."""
        return self.tone == PLACEHOLDER_LABEL and self.sentiment == PLACEHOLDER_LABEL


@dataclass(slots=True, frozen=True)
class TextAnalysis:
    """Every analysis result computed for one input text."""

    stats: BasicStats
    character_frequency: list[CharFrequencyEntry]
    word_cloud: list[WordCloudEntry]
    heatmap: list[ParagraphRecord]
    readability: ReadabilityResult
