from __future__ import annotations

from collections import Counter
from typing import List, Sequence, Tuple

from .config import AnalyzerConfig
from .models import CharFrequencyEntry, WordCloudEntry
from .tokenization import iter_word_tokens


def compute_character_frequency(
    text: str, config: AnalyzerConfig | None = None
) -> List[CharFrequencyEntry]:
    """Rank non-whitespace characters (case-sensitive) by how often they occur."""
    cfg = config or AnalyzerConfig()
    counts: Counter[str] = Counter(ch for ch in text if not ch.isspace())
    # most_common sorts stably, so equal counts keep first-seen order.
    return [
        CharFrequencyEntry(char=char, count=count)
        for char, count in counts.most_common(cfg.char_frequency_limit)
    ]


def compute_word_cloud(
    text: str, config: AnalyzerConfig | None = None
) -> List[WordCloudEntry]:
    """Rank lower-cased words by frequency, skipping stop words and short words."""
    cfg = config or AnalyzerConfig()
    stop_words = set(cfg.stop_words)
    counts: Counter[str] = Counter(
        token
        for token in iter_word_tokens(text)
        if token not in stop_words and len(token) >= cfg.min_word_length
    )
    return [
        WordCloudEntry(word=word, count=count)
        for word, count in counts.most_common(cfg.word_cloud_limit)
    ]


def scale_word_cloud(
    entries: Sequence[WordCloudEntry], limit: int = 30
) -> List[Tuple[WordCloudEntry, float]]:
    """
    Pair the leading word-cloud entries with a relative weight in [0, 1].

    The weight is the entry's count normalised between the smallest and the
    largest count of the full ranking, so hosts can map it onto font sizes.
    """
    if not entries:
        return []
    highest = max(entry.count for entry in entries)
    lowest = min(entry.count for entry in entries)
    spread = max(1, highest - lowest)
    return [(entry, (entry.count - lowest) / spread) for entry in entries[:limit]]
