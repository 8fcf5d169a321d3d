from __future__ import annotations

from pathlib import Path

PLAIN_TEXT = "The cat sat on the mat. It was a fun day and we all had a good time."

FORMAL_TEXT = (
    "Institutional accountability necessitates comprehensive "
    "organizational transformation."
)

HEATMAP_TEXT = (
    "Short sentence. This one has many more words in it to push it past the "
    "complexity boundary for testing purposes clearly."
)


def write_sample_corpus(tmp_path: Path) -> Path:
    """Create a small corpus with two supported files and one ignored file."""
    corpus_dir = tmp_path / "corpus"
    (corpus_dir / "nested").mkdir(parents=True)
    (corpus_dir / "chapter1.txt").write_text(
        "The storm rolled over the bay. Sailors watched the storm.\n\n"
        "By morning the storm was gone.",
        encoding="utf-8",
    )
    (corpus_dir / "nested" / "notes.md").write_text(PLAIN_TEXT, encoding="utf-8")
    (corpus_dir / "ignored.csv").write_text("a,b,c\n", encoding="utf-8")
    return corpus_dir
