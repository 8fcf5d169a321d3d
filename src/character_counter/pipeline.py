from __future__ import annotations

from .config import AnalyzerConfig
from .frequencies import compute_character_frequency, compute_word_cloud
from .heatmap import heatmap_from_tokens
from .models import TextAnalysis
from .readability import readability_from_tokens
from .stats import basic_stats_from_tokens
from .tokenization import tokenize


def analyze_text(text: str, config: AnalyzerConfig | None = None) -> TextAnalysis:
    """Tokenize the text once and run every analysis component on the result."""
    cfg = config or AnalyzerConfig()
    tokens = tokenize(text)
    return TextAnalysis(
        stats=basic_stats_from_tokens(tokens, cfg),
        character_frequency=compute_character_frequency(tokens.text, cfg),
        word_cloud=compute_word_cloud(tokens.text, cfg),
        heatmap=heatmap_from_tokens(tokens, cfg),
        readability=readability_from_tokens(tokens, cfg),
    )
