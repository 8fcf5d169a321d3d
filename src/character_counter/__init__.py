"""
character_counter package exports the text analytics functions for host applications.
"""

from __future__ import annotations

from .config import AnalyzerConfig, config_from_dict, config_from_yaml, load_config
from .frequencies import compute_character_frequency, compute_word_cloud
from .heatmap import compute_heatmap, compute_insights
from .pipeline import analyze_text
from .readability import compute_readability
from .session import ReadabilitySession
from .stats import compute_basic_stats, format_duration

__all__ = [
    "AnalyzerConfig",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
    "compute_basic_stats",
    "compute_character_frequency",
    "compute_word_cloud",
    "compute_heatmap",
    "compute_insights",
    "compute_readability",
    "analyze_text",
    "format_duration",
    "ReadabilitySession",
]

__version__ = "0.1.0"
