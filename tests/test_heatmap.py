import pytest

from character_counter.heatmap import (
    compute_heatmap,
    compute_insights,
    paragraph_complexity,
    sentence_complexity,
    sentence_flags,
)
from tests.utils import HEATMAP_TEXT


def test_heatmap_scores_sentences_by_length():
    heatmap = compute_heatmap(HEATMAP_TEXT)

    assert len(heatmap) == 1
    first, second = heatmap[0].sentences
    assert first.index == 0
    assert first.text == "Short sentence"
    assert first.word_count == 2
    assert first.complexity == pytest.approx(0.08)
    assert second.index == 1
    assert second.word_count == 19
    assert second.complexity == pytest.approx(19 / 25)


def test_heatmap_groups_sentences_by_paragraph():
    heatmap = compute_heatmap("One two. Three.\n\nFour five six seven.")

    assert [p.index for p in heatmap] == [0, 1]
    assert [s.word_count for s in heatmap[0].sentences] == [2, 1]
    assert [s.word_count for s in heatmap[1].sentences] == [4]


def test_heatmap_empty_text():
    assert compute_heatmap("") == []
    assert compute_heatmap(" \n\n ") == []


def test_complexity_saturates_at_twenty_five_words():
    assert sentence_complexity(0) == 0.0
    assert sentence_complexity(24) < 1.0
    assert sentence_complexity(25) == 1.0
    assert sentence_complexity(40) == 1.0

    long_sentence = " ".join(["word"] * 30) + "."
    record = compute_heatmap(long_sentence)[0].sentences[0]
    assert record.word_count == 30
    assert record.complexity == 1.0


def test_complexity_always_within_unit_interval():
    text = "A. " + " ".join(["w"] * 60) + "! Mid sized sentence here?\n\nNext one."
    for paragraph in compute_heatmap(text):
        for sentence in paragraph.sentences:
            assert 0.0 <= sentence.complexity <= 1.0
            assert (sentence.complexity == 1.0) == (sentence.word_count >= 25)


def test_sentence_flags_detect_structure_cues():
    flags = sentence_flags("The documentation was reviewed, edited; and finalized")

    assert flags.has_long_words
    assert flags.has_passive_voice
    assert flags.has_complex_structure


def test_sentence_flags_plain_sentence():
    flags = sentence_flags("They were happy with it")

    assert not flags.has_long_words
    assert not flags.has_passive_voice
    assert not flags.has_complex_structure


def test_passive_voice_is_case_insensitive():
    assert sentence_flags("IT IS TESTED").has_passive_voice


def test_paragraph_complexity_is_rounded_percentage():
    heatmap = compute_heatmap("One two. Three.")

    assert paragraph_complexity(heatmap[0]) == 6


def test_insights_aggregate_all_sentences():
    heatmap = compute_heatmap("One two. Three.\n\nFour five six seven.")
    insights = compute_insights(heatmap)

    assert insights is not None
    assert insights.average_complexity == 9
    assert insights.length_variation == 3
    assert insights.longest_sentence == 4
    assert insights.most_complex_paragraph == 1


def test_insights_pick_first_paragraph_on_ties():
    heatmap = compute_heatmap("One two. Three four.\n\nFive six.")
    insights = compute_insights(heatmap)

    assert insights is not None
    assert insights.most_complex_paragraph == 0


def test_insights_undefined_without_sentences():
    assert compute_insights([]) is None
    heatmap = compute_heatmap("...")
    assert len(heatmap) == 1
    assert heatmap[0].sentences == ()
    assert compute_insights(heatmap) is None
    assert paragraph_complexity(heatmap[0]) == 0


def test_heatmap_skips_whitespace_fragments():
    heatmap = compute_heatmap("One two. Three.\n\n  \n\nFour. \n")

    assert [p.index for p in heatmap] == [0, 1]
    assert [s.text for s in heatmap[0].sentences] == ["One two", "Three"]
    assert [s.text for s in heatmap[1].sentences] == ["Four"]
