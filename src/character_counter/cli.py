from __future__ import annotations

import json
import logging
from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict, List, TypedDict

import typer
import yaml

from .config import AnalyzerConfig, load_config
from .heatmap import compute_insights, paragraph_complexity, sentence_flags
from .models import Document, ParagraphRecord, TextAnalysis
from .pipeline import analyze_text
from .stats import format_duration

app = typer.Typer(help="Character Counter text analytics CLI.", no_args_is_help=True)

LOGGER = logging.getLogger(__name__)

# File types the CLI knows how to expand into Document instances.
SUPPORTED_INPUT_EXTENSIONS = {".txt", ".md"}


class DocumentSummary(TypedDict):
    doc_id: str
    stats: Dict[str, Any]
    character_frequency: List[Dict[str, Any]]
    word_cloud: List[Dict[str, Any]]
    heatmap: List[Dict[str, Any]]
    insights: Dict[str, Any] | None
    readability: Dict[str, Any] | None


@app.callback()
def configure(
    log_level: str = typer.Option(
        "WARNING", "--log-level", help="Logging level (DEBUG, INFO, WARNING, ...)."
    ),
) -> None:
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise typer.BadParameter(
            f"Unknown log level '{log_level}'.", param_hint="--log-level"
        )
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.command()
def analyze(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=True, file_okay=True
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    readability: bool = typer.Option(
        True,
        "--readability/--no-readability",
        help="Include the readability, tone and sentiment assessment.",
    ),
) -> None:
    """Analyze text files and emit a JSON summary per document."""
    cfg = _load_cli_config(config)
    documents = _load_documents(input_path)
    LOGGER.info("Analyzing %d document(s) from %s", len(documents), input_path)
    summary = [
        _build_summary(doc, analyze_text(doc.text, cfg), readability, cfg)
        for doc in documents
    ]
    typer.echo(json.dumps({"documents": summary}, indent=2, ensure_ascii=False))


@app.command()
def report(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=False, file_okay=True
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
) -> None:
    """Print a human-readable summary of a single text file."""
    cfg = _load_cli_config(config)
    doc = _document_from_file(input_path, input_path.name)
    analysis = analyze_text(doc.text, cfg)
    stats = analysis.stats

    typer.echo(f"File: {doc.doc_id}")
    typer.echo(f"Characters: {stats.characters}")
    typer.echo(f"Characters (no spaces): {stats.characters_no_spaces}")
    typer.echo(f"Words: {stats.words}")
    typer.echo(f"Sentences: {stats.sentences}")
    typer.echo(f"Paragraphs: {stats.paragraphs}")
    typer.echo(f"Reading time: {format_duration(stats.reading_time_minutes)}")
    typer.echo(f"Speaking time: {format_duration(stats.speaking_time_minutes)}")
    typer.echo(f"Avg. word length: {stats.average_word_length:.1f} chars")
    typer.echo(f"Avg. sentence length: {stats.average_sentence_length:.1f} words")
    if analysis.character_frequency:
        top = ", ".join(
            f"{_display_char(entry.char)}={entry.count}"
            for entry in analysis.character_frequency[:6]
        )
        typer.echo(f"Most common characters: {top}")

    result = analysis.readability
    typer.echo(f"Readability: {result.readability_score}/100")
    typer.echo(f"Tone: {result.tone}")
    typer.echo(f"Sentiment: {result.sentiment}")
    for suggestion in result.suggestions:
        typer.echo(f"- {suggestion}")


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = AnalyzerConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


def main() -> None:
    app()


def _load_cli_config(path: Path | None) -> AnalyzerConfig:
    try:
        return load_config(path)
    except (ValueError, yaml.YAMLError) as exc:
        raise typer.BadParameter(str(exc), param_hint="--config") from exc


def _load_documents(input_path: Path) -> List[Document]:
    """Expand the input path into documents ordered by path."""
    if input_path.is_file():
        return [_document_from_file(input_path, input_path.name)]

    files = sorted(
        p
        for p in input_path.rglob("*")
        if p.is_file() and p.suffix.lower() in SUPPORTED_INPUT_EXTENSIONS
    )
    # Relative paths keep doc IDs unique across subdirectories.
    return [
        _document_from_file(file, str(file.relative_to(input_path))) for file in files
    ]


def _document_from_file(path: Path, doc_id: str) -> Document:
    """Read a UTF-8 text file from disk and wrap it in a Document."""
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise typer.BadParameter(f"{path} is not valid UTF-8 text.") from exc
    return Document(doc_id=doc_id, text=text)


def _build_summary(
    doc: Document,
    analysis: TextAnalysis,
    include_readability: bool,
    config: AnalyzerConfig,
) -> DocumentSummary:
    """Create a JSON-serializable summary for one analyzed document."""
    stats = asdict(analysis.stats)
    stats["average_word_length"] = analysis.stats.average_word_length
    stats["average_sentence_length"] = analysis.stats.average_sentence_length
    insights = compute_insights(analysis.heatmap)
    return {
        "doc_id": doc.doc_id,
        "stats": stats,
        "character_frequency": [asdict(e) for e in analysis.character_frequency],
        "word_cloud": [asdict(e) for e in analysis.word_cloud],
        "heatmap": [_paragraph_dict(p, config) for p in analysis.heatmap],
        "insights": asdict(insights) if insights is not None else None,
        "readability": (
            _readability_dict(analysis) if include_readability else None
        ),
    }


def _paragraph_dict(
    paragraph: ParagraphRecord, config: AnalyzerConfig
) -> Dict[str, Any]:
    return {
        "index": paragraph.index,
        "average_complexity": paragraph_complexity(paragraph),
        "sentences": [
            {
                **asdict(sentence),
                "flags": asdict(sentence_flags(sentence.text, config)),
            }
            for sentence in paragraph.sentences
        ],
    }


def _readability_dict(analysis: TextAnalysis) -> Dict[str, Any]:
    result = analysis.readability
    return {
        "readability_score": result.readability_score,
        "tone": result.tone,
        "sentiment": result.sentiment,
        "suggestions": list(result.suggestions),
    }


def _display_char(char: str) -> str:
    return repr(char) if not char.isprintable() else char


if __name__ == "__main__":
    main()
