import pytest
from pydantic import ValidationError as SchemaValidationError

from app.presentation import (
    KEYWORD_COLOR, LIKELIHOOD_LABELS, TIER_COLORS, TIER_ORDER, TOP_KEYWORD_COLOR, Tier,
    char_count, create_keyword_chart, create_likelihood_gauge, format_sentiment, keyword_frame, likelihood_color,
    likelihood_label, likelihood_tier, text_stats, word_count,
)
from app.schemas import AnalysisResult
from tests.helpers import sample_payload


@pytest.mark.parametrize("score, tier", [
    (0, Tier.LOW), (29, Tier.LOW), (29.9, Tier.LOW),
    (30, Tier.MEDIUM), (69, Tier.MEDIUM),
    (70, Tier.HIGH), (100, Tier.HIGH),
    (-10, Tier.LOW), (150, Tier.HIGH),
])
def test_likelihood_tier_boundaries(score, tier):
    assert likelihood_tier(score) is tier


@pytest.mark.parametrize("score, label", [
    (0, "Highly Likely Human"), (19, "Highly Likely Human"),
    (20, "Likely Human"), (39, "Likely Human"),
    (40, "Uncertain / Mixed"), (59, "Uncertain / Mixed"),
    (60, "Likely AI"), (79, "Likely AI"),
    (80, "Highly Likely AI"), (100, "Highly Likely AI"),
    (-1, "Highly Likely Human"), (250, "Highly Likely AI"),
])
def test_likelihood_label_boundaries(score, label):
    assert likelihood_label(score) == label


def test_scenario_e_boundaries_differ():
    assert likelihood_label(25) == "Likely Human"
    assert likelihood_tier(25) is Tier.LOW


def test_classifications_are_monotonic():
    scores = list(range(-5, 106))
    tiers = [TIER_ORDER.index(likelihood_tier(s)) for s in scores]
    labels = [LIKELIHOOD_LABELS.index(likelihood_label(s)) for s in scores]
    assert tiers == sorted(tiers)
    assert labels == sorted(labels)


def test_likelihood_color_follows_tier():
    assert likelihood_color(10) == TIER_COLORS[Tier.LOW]
    assert likelihood_color(50) == TIER_COLORS[Tier.MEDIUM]
    assert likelihood_color(90) == TIER_COLORS[Tier.HIGH]


@pytest.mark.parametrize("text, words, chars", [
    ("", 0, 0),
    ("   ", 0, 3),
    ("one", 1, 3),
    ("  two  words ", 2, 13),
    ("line\nbreak\ttab", 3, 14),
])
def test_counts(text, words, chars):
    assert word_count(text) == words
    assert char_count(text) == chars
    assert word_count(text) == word_count(text)


def test_text_stats():
    stats = text_stats("Hello there. How are you?")
    assert stats["word_count"] == 5
    assert stats["sentence_count"] == 2
    assert stats["char_count"] == 25
    assert text_stats("")["word_count"] == 0


def test_keyword_frame_preserves_service_order(result):
    frame = keyword_frame(result)
    assert list(frame["word"]) == ["content", "search", "ranking"]
    assert list(frame.columns) == ["word", "count", "percentage"]


def test_keyword_frame_handles_empty_list():
    empty = AnalysisResult.model_validate(sample_payload(keywordDensity=[]))
    assert keyword_frame(empty).empty


def test_keyword_chart_order_and_highlight(result):
    fig = create_keyword_chart(result.keyword_density)
    bar = fig.data[0]
    assert list(bar.y) == ["content", "search", "ranking"]
    assert list(bar.x) == [4.1, 2.9, 1.8]
    assert list(bar.marker.color) == [TOP_KEYWORD_COLOR, KEYWORD_COLOR, KEYWORD_COLOR]
    assert fig.layout.yaxis.autorange == "reversed"


def test_likelihood_gauge_uses_tier_color():
    fig = create_likelihood_gauge(82)
    assert fig.data[0].value == 82
    assert fig.data[0].gauge.bar.color == TIER_COLORS[Tier.HIGH]


def test_result_is_immutable(result):
    with pytest.raises(SchemaValidationError):
        result.ai_likelihood = 1
    assert isinstance(result.keyword_density, tuple)
    assert isinstance(result.seo_suggestions, tuple)


def test_result_keeps_aliases_on_dump(result):
    dumped = result.model_dump(by_alias=True)
    assert dumped["aiLikelihood"] == 82
    assert dumped["keywordDensity"][0] == {"word": "content", "count": 7, "percentage": 4.1}


@pytest.mark.parametrize("sentiment, shown", [
    ("positive", "Positive"),
    ("Very POSITIVE", "Very POSITIVE"),
    ("mostly neutral", "Mostly Neutral"),
    ("", ""),
])
def test_format_sentiment_keeps_rest_of_each_word(sentiment, shown):
    assert format_sentiment(sentiment) == shown


def test_text_stats_counts_match_editor_counters():
    text = "  One sentence here!  And another?  "
    stats = text_stats(text)
    assert stats["word_count"] == word_count(text) == 5
    assert stats["char_count"] == char_count(text)
    assert stats["sentence_count"] == 2
