from __future__ import annotations

import logging
import re
from typing import List, Tuple

from .config import AnalyzerConfig
from .models import PLACEHOLDER_LABEL, ReadabilityResult
from .stats import round_half_up
from .tokenization import TokenizedText, iter_word_tokens, tokenize

logger = logging.getLogger(__name__)

VOWEL_GROUP_RE = re.compile(r"[aeiouy]{1,2}")

SHORT_TEXT_SUGGESTION = "Add more text for analysis"
SHORTER_SENTENCES_SUGGESTION = (
    "Consider using shorter sentences for better readability."
)
SIMPLER_VOCABULARY_SUGGESTION = (
    "Your text uses many long words. Consider simplifying vocabulary for wider audience."
)
MORE_PARAGRAPHS_SUGGESTION = (
    "Consider breaking your text into more paragraphs for better structure."
)
NO_ISSUES_SUGGESTION = "Your text looks good!"

PLACEHOLDER_RESULT = ReadabilityResult(
    readability_score=0,
    tone=PLACEHOLDER_LABEL,
    sentiment=PLACEHOLDER_LABEL,
    suggestions=(SHORT_TEXT_SUGGESTION,),
)


def compute_readability(
    text: str, config: AnalyzerConfig | None = None
) -> ReadabilityResult:
    """Score readability and classify tone and sentiment for the text."""
    cfg = config or AnalyzerConfig()
    if _too_short(text, cfg):
        return PLACEHOLDER_RESULT
    return readability_from_tokens(tokenize(text), cfg)


def readability_from_tokens(
    tokens: TokenizedText, config: AnalyzerConfig | None = None
) -> ReadabilityResult:
    cfg = config or AnalyzerConfig()
    if _too_short(tokens.text, cfg):
        return PLACEHOLDER_RESULT

    words = len(tokens.words)
    sentences = len(tokens.sentences)
    score = flesch_reading_ease(words, sentences, estimate_syllables(tokens.text))
    suggestions = build_suggestions(
        words=words,
        sentences=sentences,
        paragraphs=len(tokens.paragraphs),
        characters_no_spaces=tokens.characters_no_spaces,
        config=cfg,
    )
    positive, negative = count_sentiment_words(tokens.text, cfg)
    return ReadabilityResult(
        readability_score=round_half_up(score),
        tone=classify_tone(score),
        sentiment=classify_sentiment(positive, negative),
        suggestions=tuple(suggestions),
    )


def count_syllables(word: str) -> int:
    """Estimate syllables from vowel groups, discounting a silent final e."""
    syllables = len(VOWEL_GROUP_RE.findall(word))
    if word.endswith("e") and not word.endswith("le") and syllables > 0:
        syllables -= 1
    return max(1, syllables)


def estimate_syllables(text: str) -> int:
    return sum(count_syllables(token) for token in iter_word_tokens(text))


def flesch_reading_ease(words: int, sentences: int, syllables: int) -> float:
    """Flesch Reading Ease clamped to [0, 100]; 0 when there is nothing to score."""
    if words <= 0 or sentences <= 0:
        return 0.0
    raw = 206.835 - 1.015 * (words / sentences) - 84.6 * (syllables / max(words, 1))
    return min(100.0, max(0.0, raw))


def build_suggestions(
    *,
    words: int,
    sentences: int,
    paragraphs: int,
    characters_no_spaces: int,
    config: AnalyzerConfig | None = None,
) -> List[str]:
    cfg = config or AnalyzerConfig()
    suggestions: List[str] = []
    if words / max(sentences, 1) > cfg.long_sentence_words:
        suggestions.append(SHORTER_SENTENCES_SUGGESTION)
    if characters_no_spaces / max(words, 1) > cfg.long_word_chars:
        suggestions.append(SIMPLER_VOCABULARY_SUGGESTION)
    if paragraphs / max(sentences, 1) < cfg.paragraph_ratio_floor:
        suggestions.append(MORE_PARAGRAPHS_SUGGESTION)
    return suggestions or [NO_ISSUES_SUGGESTION]


def classify_tone(score: float) -> str:
    if score > 70:
        return "Conversational"
    if score > 50:
        return "Neutral"
    return "Formal"


def count_sentiment_words(
    text: str, config: AnalyzerConfig | None = None
) -> Tuple[int, int]:
    """Count occurrences of positive and negative lexicon words."""
    cfg = config or AnalyzerConfig()
    positive_words = set(cfg.positive_words)
    negative_words = set(cfg.negative_words)
    positive = negative = 0
    for token in iter_word_tokens(text):
        if token in positive_words:
            positive += 1
        elif token in negative_words:
            negative += 1
    return positive, negative


def classify_sentiment(positive: int, negative: int) -> str:
    if positive > negative * 2:
        return "Very Positive"
    if positive > negative:
        return "Somewhat Positive"
    if negative > positive * 2:
        return "Very Negative"
    if negative > positive:
        return "Somewhat Negative"
    return "Neutral"


def _too_short(text: str, config: AnalyzerConfig) -> bool:
    if len(text.strip()) >= config.min_readability_chars:
        return False
    logger.debug(
        "Text shorter than %d characters; returning placeholder readability.",
        config.min_readability_chars,
    )
    return True
