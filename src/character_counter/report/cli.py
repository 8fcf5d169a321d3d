from __future__ import annotations

from pathlib import Path

import click
import yaml

from ..config import AnalyzerConfig, load_config
from ..frequencies import compute_word_cloud, scale_word_cloud
from ..heatmap import (
    compute_heatmap,
    compute_insights,
    paragraph_complexity,
    sentence_flags,
)
from ..stats import round_half_up

FLAG_LABELS = (
    ("has_long_words", "long words"),
    ("has_passive_voice", "passive voice"),
    ("has_complex_structure", "complex structure"),
)


@click.group(name="report")
def report_group() -> None:
    """Plain-text renderings of the sentence heatmap and word cloud."""


@report_group.command("heatmap")
@click.argument("input_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--config", "config_path", type=click.Path(exists=True), default=None)
def heatmap_report(input_file: str, config_path: str | None) -> None:
    """Show per-sentence complexity grouped by paragraph."""
    cfg = _load_report_config(config_path)
    text = _read_input(input_file)
    heatmap = compute_heatmap(text, cfg)
    if not heatmap:
        click.echo("No paragraphs to analyze.")
        return

    for paragraph in heatmap:
        click.echo(
            f"Paragraph {paragraph.index + 1} "
            f"({len(paragraph.sentences)} sentences, "
            f"avg complexity {paragraph_complexity(paragraph)}%)"
        )
        for sentence in paragraph.sentences:
            flags = sentence_flags(sentence.text, cfg)
            labels = [label for attr, label in FLAG_LABELS if getattr(flags, attr)]
            suffix = f" [{', '.join(labels)}]" if labels else ""
            click.echo(
                f"  {round_half_up(sentence.complexity * 100):3d}% "
                f"{sentence.word_count:3d}w  {sentence.text}{suffix}"
            )

    insights = compute_insights(heatmap)
    if insights is None:
        return
    click.echo(f"Average sentence complexity: {insights.average_complexity}%")
    click.echo(f"Sentence length variation: {insights.length_variation} words")
    click.echo(f"Longest sentence: {insights.longest_sentence} words")
    click.echo(f"Most complex paragraph: {insights.most_complex_paragraph + 1}")


@report_group.command("words")
@click.argument("input_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--limit", type=int, default=30, show_default=True)
@click.option("--config", "config_path", type=click.Path(exists=True), default=None)
def words_report(input_file: str, limit: int, config_path: str | None) -> None:
    """List the most frequent significant words with their relative weight."""
    cfg = _load_report_config(config_path)
    text = _read_input(input_file)
    entries = compute_word_cloud(text, cfg)
    if not entries:
        click.echo("No significant words found.")
        return
    for entry, weight in scale_word_cloud(entries, limit=limit):
        click.echo(f"{entry.word}\t{entry.count}\t{weight:.2f}")


def _load_report_config(config_path: str | None) -> AnalyzerConfig:
    try:
        return load_config(config_path)
    except (ValueError, yaml.YAMLError) as exc:
        raise click.BadParameter(str(exc), param_hint="--config") from exc


def _read_input(input_file: str) -> str:
    try:
        return Path(input_file).read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise click.BadParameter(
            f"{input_file} is not valid UTF-8 text.", param_hint="INPUT_FILE"
        ) from exc
