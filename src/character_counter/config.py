from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, List, Mapping

import yaml

DEFAULT_STOP_WORDS = (
    "the",
    "and",
    "to",
    "of",
    "a",
    "in",
    "for",
    "is",
    "on",
    "that",
    "by",
    "this",
    "with",
    "i",
    "you",
    "it",
)
DEFAULT_POSITIVE_WORDS = (
    "good",
    "great",
    "excellent",
    "best",
    "love",
    "happy",
    "positive",
    "wonderful",
    "amazing",
)
DEFAULT_NEGATIVE_WORDS = (
    "bad",
    "terrible",
    "awful",
    "worst",
    "hate",
    "sad",
    "negative",
    "poor",
    "horrible",
)


WORD_LIST_FIELDS = ("stop_words", "positive_words", "negative_words")
# Used as divisors or caps, so zero and negatives are rejected.
POSITIVE_FIELDS = ("reading_wpm", "speaking_wpm", "complexity_word_cap")


@dataclass(slots=True)
class AnalyzerConfig:
    """Tunable constants shared by every analysis component."""

    reading_wpm: float = 250.0
    speaking_wpm: float = 150.0
    char_frequency_limit: int = 15
    word_cloud_limit: int = 50
    min_word_length: int = 3
    stop_words: List[str] = field(default_factory=lambda: list(DEFAULT_STOP_WORDS))
    complexity_word_cap: int = 25
    long_word_length: int = 10
    min_readability_chars: int = 10
    long_sentence_words: float = 25.0
    long_word_chars: float = 6.0
    paragraph_ratio_floor: float = 0.2
    positive_words: List[str] = field(
        default_factory=lambda: list(DEFAULT_POSITIVE_WORDS)
    )
    negative_words: List[str] = field(
        default_factory=lambda: list(DEFAULT_NEGATIVE_WORDS)
    )
    readability_delay_seconds: float = 0.8

    def __post_init__(self) -> None:
        for name in POSITIVE_FIELDS:
            value = getattr(self, name)
            if value <= 0:
                raise ValueError(f"{name} must be positive, got {value!r}.")
        if self.readability_delay_seconds < 0:
            raise ValueError("readability_delay_seconds cannot be negative.")

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))


def _build_kwargs(data: Mapping[str, Any]) -> dict[str, Any]:
    allowed = {field.name for field in fields(AnalyzerConfig)}
    kwargs: dict[str, Any] = {}
    for key, value in data.items():
        if key not in allowed:
            continue
        if key in WORD_LIST_FIELDS:
            # Matching always runs on lower-cased tokens.
            value = [str(word).lower() for word in value]
        kwargs[key] = value
    return kwargs


def config_from_dict(data: Mapping[str, Any] | None) -> AnalyzerConfig:
    """Build an AnalyzerConfig from a dictionary-like input, ignoring unknown keys."""
    return AnalyzerConfig(**_build_kwargs(data or {}))


def config_from_yaml(path: str | Path) -> AnalyzerConfig:
    """Load configuration from a YAML file whose top level is a mapping."""
    parsed = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
    if parsed is None:
        return AnalyzerConfig()
    if not isinstance(parsed, Mapping):
        raise ValueError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> AnalyzerConfig:
    return config_from_yaml(path) if path is not None else AnalyzerConfig()
