from __future__ import annotations

import pytest

from lexicon_sentiment.corpus import Lexicon
from lexicon_sentiment.errors import CorpusFormatError, InvalidStateError
from lexicon_sentiment.preprocessing import StopwordClassifier
from lexicon_sentiment.sentiment_model import NO_SENTIMENT, SentimentModel, build_sentiment_map

from conftest import RESTAURANT_REVIEWS, RESTAURANT_STOPWORDS


@pytest.fixture
def lexicon() -> Lexicon:
    return Lexicon.from_lines(RESTAURANT_STOPWORDS, RESTAURANT_REVIEWS)


@pytest.fixture
def model(lexicon) -> SentimentModel:
    return SentimentModel(lexicon, StopwordClassifier(lexicon))


def test_word_sentiment_averages_labels_of_containing_lines(model) -> None:
    assert model.word_sentiment("great") == pytest.approx(4.0)
    assert model.word_sentiment("Service") == pytest.approx((4 + 3 + 1) / 3)
    assert model.word_sentiment("food") == pytest.approx((4 + 0 + 1) / 3)
    assert model.word_sentiment("terrible") == pytest.approx(0.0)


def test_word_sentiment_of_stop_word_is_sentinel(model) -> None:
    assert model.word_sentiment("the") == NO_SENTIMENT
    assert model.word_sentiment("pizza") == NO_SENTIMENT


def test_word_sentiment_without_containing_lines_fails_fast(lexicon) -> None:
    classifier = StopwordClassifier(lexicon, rules=["blank", "character_class", "listed"])
    model = SentimentModel(lexicon, classifier)
    with pytest.raises(InvalidStateError):
        model.word_sentiment("pizza")


def test_sentiment_map_covers_informative_words_only(lexicon, model) -> None:
    sentiment_map = model.build()
    classifier = model.classifier

    assert set(sentiment_map) == {
        "great", "service", "food", "terrible", "decent", "slow", "cold", "staff"}
    assert all(not classifier.is_stop_word(word) for word in sentiment_map)
    assert all(0 <= value <= 4 for value in sentiment_map.values())


def test_rebuild_is_idempotent(lexicon, model) -> None:
    first = build_sentiment_map(lexicon, model.classifier)
    second = build_sentiment_map(lexicon, model.classifier)
    assert first == second


def test_build_with_progress_bar(model) -> None:
    assert model.build(show_progress=True) == model.build()


def test_invalid_label_fails_when_line_is_needed() -> None:
    lexicon = Lexicon.from_lines(["the"], ["4 good food", "x bad food"])
    model = SentimentModel(lexicon, StopwordClassifier(lexicon))

    assert model.word_sentiment("good") == pytest.approx(4.0)
    with pytest.raises(CorpusFormatError):
        model.word_sentiment("bad")
    with pytest.raises(CorpusFormatError):
        model.build()
