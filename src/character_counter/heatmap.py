from __future__ import annotations

import re
from typing import List, Sequence

from .config import AnalyzerConfig
from .models import HeatmapInsights, ParagraphRecord, SentenceFlags, SentenceRecord
from .stats import round_half_up
from .tokenization import (
    TokenizedText,
    split_sentences,
    split_words,
    strip_fragments,
    tokenize,
)

PASSIVE_VOICE_RE = re.compile(
    r"\b(?:is|are|was|were|be|been|being)\s+\w+ed\b", re.IGNORECASE
)
CLAUSE_SPLIT_RE = re.compile(r"[,;]")


def compute_heatmap(
    text: str, config: AnalyzerConfig | None = None
) -> List[ParagraphRecord]:
    """Score every sentence of every paragraph by its length."""
    return heatmap_from_tokens(tokenize(text), config)


def heatmap_from_tokens(
    tokens: TokenizedText, config: AnalyzerConfig | None = None
) -> List[ParagraphRecord]:
    cfg = config or AnalyzerConfig()
    paragraphs: List[ParagraphRecord] = []
    # Records are built from stripped, non-blank fragments only.
    for para_idx, paragraph in enumerate(strip_fragments(tokens.paragraphs)):
        sentences: List[SentenceRecord] = []
        for sent_idx, sentence in enumerate(
            strip_fragments(split_sentences(paragraph))
        ):
            word_count = len(split_words(sentence))
            sentences.append(
                SentenceRecord(
                    index=sent_idx,
                    text=sentence,
                    word_count=word_count,
                    complexity=sentence_complexity(
                        word_count, cfg.complexity_word_cap
                    ),
                )
            )
        paragraphs.append(ParagraphRecord(index=para_idx, sentences=tuple(sentences)))
    return paragraphs


def sentence_complexity(word_count: int, cap: int = 25) -> float:
    """Map a word count onto [0, 1]; sentences of ``cap`` words or more score 1."""
    return min(1.0, word_count / max(1, cap))


def sentence_flags(text: str, config: AnalyzerConfig | None = None) -> SentenceFlags:
    """Detect long words, passive-voice cues and clause-heavy structure."""
    cfg = config or AnalyzerConfig()
    long_word_re = re.compile(rf"\b\w{{{cfg.long_word_length},}}\b")
    return SentenceFlags(
        has_long_words=long_word_re.search(text) is not None,
        has_passive_voice=PASSIVE_VOICE_RE.search(text) is not None,
        has_complex_structure=len(CLAUSE_SPLIT_RE.split(text)) > 2,
    )


def paragraph_complexity(paragraph: ParagraphRecord) -> int:
    """Average sentence complexity of one paragraph as a whole percentage."""
    if not paragraph.sentences:
        return 0
    total = sum(s.complexity * 100 for s in paragraph.sentences)
    return round_half_up(total / len(paragraph.sentences))


def compute_insights(heatmap: Sequence[ParagraphRecord]) -> HeatmapInsights | None:
    """
    Summarise a heatmap across all of its sentences.

    Returns None when the heatmap holds no sentences, since none of the
    aggregates are defined in that case.
    """
    sentences = [s for paragraph in heatmap for s in paragraph.sentences]
    if not sentences:
        return None

    lengths = [s.word_count for s in sentences]
    average = sum(s.complexity * 100 for s in sentences) / len(sentences)

    best_index = -1
    best_mean = -1.0
    for paragraph in heatmap:
        if not paragraph.sentences:
            continue
        mean = sum(s.complexity for s in paragraph.sentences) / len(
            paragraph.sentences
        )
        # Strictly greater keeps the first paragraph on ties.
        if mean > best_mean:
            best_mean = mean
            best_index = paragraph.index

    return HeatmapInsights(
        average_complexity=round_half_up(average),
        length_variation=max(lengths) - min(lengths),
        longest_sentence=max(lengths),
        most_complex_paragraph=best_index,
    )
