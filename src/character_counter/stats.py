from __future__ import annotations

import math

from .config import AnalyzerConfig
from .models import BasicStats
from .tokenization import TokenizedText, tokenize


def compute_basic_stats(text: str, config: AnalyzerConfig | None = None) -> BasicStats:
    """Count characters, words, sentences and paragraphs and estimate timings."""
    return basic_stats_from_tokens(tokenize(text), config)


def basic_stats_from_tokens(
    tokens: TokenizedText, config: AnalyzerConfig | None = None
) -> BasicStats:
    cfg = config or AnalyzerConfig()
    words = len(tokens.words)
    return BasicStats(
        characters=tokens.characters,
        characters_no_spaces=tokens.characters_no_spaces,
        words=words,
        sentences=len(tokens.sentences),
        paragraphs=len(tokens.paragraphs),
        reading_time_minutes=words / cfg.reading_wpm,
        speaking_time_minutes=words / cfg.speaking_wpm,
    )


def format_duration(minutes: float) -> str:
    """
    Render a duration given in minutes for display.

    Anything below one second collapses to "< 1 second"; shorter than a minute
    shows whole seconds, otherwise minutes plus the remaining seconds. Seconds
    are rounded up.
    """
    if minutes < 1 / 60:
        return "< 1 second"
    # Round away float noise (e.g. 12.000000001) before taking the ceiling.
    total_seconds = math.ceil(round(minutes * 60, 6))
    if total_seconds < 60:
        return f"{total_seconds} second{_plural(total_seconds)}"
    whole_minutes, seconds = divmod(total_seconds, 60)
    return (
        f"{whole_minutes} min{_plural(whole_minutes)} "
        f"{seconds} sec{_plural(seconds)}"
    )


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up."""
    return math.floor(value + 0.5)


def _plural(value: int) -> str:
    return "" if value == 1 else "s"
