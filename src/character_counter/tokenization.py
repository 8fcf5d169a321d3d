from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Iterator, List

WORD_TOKEN_RE = re.compile(r"\w+", re.UNICODE)
SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")
PARAGRAPH_SPLIT_RE = re.compile(r"\n\s*\n")


@dataclass(slots=True, frozen=True)
class TokenizedText:
    """The raw text plus every split the analysis components consume."""

    text: str
    characters: int
    characters_no_spaces: int
    words: List[str]
    sentences: List[str]
    paragraphs: List[str]


def tokenize(text: str) -> TokenizedText:
    """Split text into characters, words, sentences and paragraphs."""
    return TokenizedText(
        text=text,
        characters=len(text),
        characters_no_spaces=count_non_whitespace(text),
        words=split_words(text),
        sentences=split_sentences(text),
        paragraphs=split_paragraphs(text),
    )


def count_non_whitespace(text: str) -> int:
    return sum(1 for ch in text if not ch.isspace())


def split_words(text: str) -> List[str]:
    """Split on runs of whitespace; blank input yields no words."""
    return text.split()


def split_sentences(text: str) -> List[str]:
    """Split on runs of sentence-ending punctuation, dropping empty fragments."""
    return _split_non_empty(SENTENCE_SPLIT_RE, text)


def split_paragraphs(text: str) -> List[str]:
    """Split on blank lines, dropping empty fragments."""
    return _split_non_empty(PARAGRAPH_SPLIT_RE, text)


def strip_fragments(fragments: Iterable[str]) -> List[str]:
    """Strip each fragment and drop the ones left blank."""
    return [stripped for stripped in (f.strip() for f in fragments) if stripped]


def iter_word_tokens(text: str) -> Iterator[str]:
    """Yield lower-cased runs of word characters."""
    for match in WORD_TOKEN_RE.finditer(text.lower()):
        yield match.group(0)


def _split_non_empty(pattern: re.Pattern[str], text: str) -> List[str]:
    # Whitespace-only fragments still count unless the whole text is blank.
    if not text.strip():
        return []
    return [fragment for fragment in pattern.split(text) if fragment]
