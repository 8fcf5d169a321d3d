import json
from pathlib import Path

from click.testing import CliRunner as ClickRunner
from typer.testing import CliRunner

from character_counter.cli import app
from character_counter.report.cli import report_group
from tests.utils import HEATMAP_TEXT, PLAIN_TEXT, write_sample_corpus

runner = CliRunner()


def test_cli_analyze_outputs_summary(tmp_path: Path):
    """analyze walks a directory and returns one JSON entry per supported file."""
    corpus_dir = write_sample_corpus(tmp_path)
    result = runner.invoke(app, ["analyze", "--input-path", str(corpus_dir)])
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    doc_ids = [doc["doc_id"] for doc in payload["documents"]]
    assert doc_ids == ["chapter1.txt", str(Path("nested") / "notes.md")]

    chapter = payload["documents"][0]
    assert chapter["stats"]["paragraphs"] == 2
    assert chapter["stats"]["sentences"] == 3
    assert chapter["word_cloud"][0] == {"word": "storm", "count": 3}
    assert len(chapter["heatmap"]) == 2
    sentence = chapter["heatmap"][0]["sentences"][0]
    assert set(sentence) == {"index", "text", "word_count", "complexity", "flags"}
    assert chapter["insights"]["longest_sentence"] == 6
    assert chapter["readability"]["tone"] in {"Conversational", "Neutral", "Formal"}


def test_cli_analyze_without_readability(tmp_path: Path):
    """--no-readability leaves the readability block empty."""
    text_file = tmp_path / "plain.txt"
    text_file.write_text(PLAIN_TEXT, encoding="utf-8")
    result = runner.invoke(
        app, ["analyze", "--input-path", str(text_file), "--no-readability"]
    )
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["documents"][0]["readability"] is None


def test_cli_analyze_rejects_bad_config(tmp_path: Path):
    """A config file that is not a mapping is reported as a bad parameter."""
    text_file = tmp_path / "plain.txt"
    text_file.write_text(PLAIN_TEXT, encoding="utf-8")
    config_path = tmp_path / "config.yaml"
    config_path.write_text("- not\n- a mapping\n", encoding="utf-8")
    result = runner.invoke(
        app,
        ["analyze", "--input-path", str(text_file), "--config", str(config_path)],
    )
    assert result.exit_code != 0


def test_cli_analyze_rejects_binary_file(tmp_path: Path):
    bad_file = tmp_path / "bad.txt"
    bad_file.write_bytes(b"\xff\xfe\xfa")
    result = runner.invoke(app, ["analyze", "--input-path", str(bad_file)])
    assert result.exit_code != 0


def test_cli_rejects_unknown_log_level(tmp_path: Path):
    text_file = tmp_path / "plain.txt"
    text_file.write_text(PLAIN_TEXT, encoding="utf-8")
    result = runner.invoke(
        app, ["--log-level", "LOUD", "analyze", "--input-path", str(text_file)]
    )
    assert result.exit_code != 0


def test_cli_report_prints_formatted_summary(tmp_path: Path):
    """report renders counts and human-readable durations."""
    text_file = tmp_path / "plain.txt"
    text_file.write_text(PLAIN_TEXT, encoding="utf-8")
    result = runner.invoke(app, ["report", "--input-path", str(text_file)])
    assert result.exit_code == 0
    assert "Words: 18" in result.stdout
    assert "Reading time: 5 seconds" in result.stdout
    assert "Tone: Conversational" in result.stdout
    assert "- Your text looks good!" in result.stdout


def test_cli_print_config():
    """print-config command dumps the current configuration values."""
    result = runner.invoke(app, ["print-config"])
    assert result.exit_code == 0
    assert "reading_wpm" in result.stdout
    assert "stop_words" in result.stdout


def test_report_heatmap_command(tmp_path: Path):
    text_file = tmp_path / "heatmap.txt"
    text_file.write_text(HEATMAP_TEXT, encoding="utf-8")
    result = ClickRunner().invoke(report_group, ["heatmap", str(text_file)])
    assert result.exit_code == 0
    assert "Paragraph 1 (2 sentences, avg complexity 42%)" in result.output
    assert "Longest sentence: 19 words" in result.output
    assert "[long words]" in result.output


def test_report_heatmap_command_empty_file(tmp_path: Path):
    text_file = tmp_path / "empty.txt"
    text_file.write_text("", encoding="utf-8")
    result = ClickRunner().invoke(report_group, ["heatmap", str(text_file)])
    assert result.exit_code == 0
    assert "No paragraphs to analyze." in result.output


def test_report_words_command(tmp_path: Path):
    text_file = tmp_path / "words.txt"
    text_file.write_text("cat cat cat hat hat dog", encoding="utf-8")
    result = ClickRunner().invoke(
        report_group, ["words", str(text_file), "--limit", "2"]
    )
    assert result.exit_code == 0
    lines = result.output.strip().splitlines()
    assert lines == ["cat\t3\t1.00", "hat\t2\t0.50"]


def test_report_heatmap_rejects_binary_file(tmp_path: Path):
    bad_file = tmp_path / "bad.txt"
    bad_file.write_bytes(b"\xff\xfe\xfa")
    result = ClickRunner().invoke(report_group, ["heatmap", str(bad_file)])
    assert result.exit_code == 2
    assert "not valid UTF-8" in result.output


def test_report_words_rejects_bad_config(tmp_path: Path):
    text_file = tmp_path / "words.txt"
    text_file.write_text("cat cat hat", encoding="utf-8")
    config_path = tmp_path / "config.yaml"
    config_path.write_text("- not\n- a mapping\n", encoding="utf-8")
    result = ClickRunner().invoke(
        report_group, ["words", str(text_file), "--config", str(config_path)]
    )
    assert result.exit_code == 2
    assert "must define a mapping" in result.output
