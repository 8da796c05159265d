from __future__ import annotations

import pytest

from lexicon_sentiment.config import Config
from lexicon_sentiment.engine import SentimentEngine
from lexicon_sentiment.errors import ConfigurationError, InvalidArgument
from lexicon_sentiment.reader import LexiconReader
from lexicon_sentiment.sentiment_model import NO_SENTIMENT

from conftest import EXAMPLE_REVIEWS, EXAMPLE_STOPWORDS, write_lexicon


class FlakyReader(LexiconReader):
    """Reader whose corpus reload can be made to fail."""

    fail_reload = False

    def load_corpus(self):
        if self.fail_reload:
            raise ConfigurationError("corpus unavailable")
        return super().load_corpus()


def test_score_example_review(example_engine) -> None:
    result = example_engine.score("great staff")

    assert result.score == pytest.approx(4.0)
    assert result.rounded_score == 4
    assert result.label == "positive"
    assert result.review == "great staff"
    assert result.is_scoreable


def test_score_unscoreable_review(example_engine) -> None:
    result = example_engine.score("the a")

    assert result.score == NO_SENTIMENT
    assert result.rounded_score == -1
    assert result.label == "unknown"
    assert not result.is_scoreable
    assert result.annotated_text.startswith("-1 (unknown) the a\n\n")


def test_annotated_text_lists_top_words(restaurant_engine) -> None:
    result = restaurant_engine.score("great food")

    assert result.top_words == {"great", "service", "food"}
    assert result.annotated_text == (
        "3 (somewhat positive) great food\n\n"
        " most frequent words from input reviews are: food great service"
    )


def test_resources_load_lazily(example_reader) -> None:
    engine = SentimentEngine(example_reader)
    assert "loaded=False" in repr(engine)
    assert engine.top_words(2) <= {"great", "service", "terrible", "food", "amazing", "staff"}
    assert "loaded=True" in repr(engine)


def test_missing_resources_abort_scoring(tmp_path) -> None:
    engine = SentimentEngine(LexiconReader(tmp_path / "stopwords.txt", tmp_path / "reviews.txt"))
    with pytest.raises(ConfigurationError):
        engine.score("great staff")


def test_top_words_validation(example_engine) -> None:
    assert len(example_engine.top_words(2)) == 2
    assert len(example_engine.top_words(50)) == 6
    with pytest.raises(InvalidArgument):
        example_engine.top_words(-1)


def test_negative_default_top_n_is_rejected(example_reader) -> None:
    with pytest.raises(InvalidArgument):
        SentimentEngine(example_reader, top_n=-3)


def test_stop_words_never_reach_the_maps(restaurant_engine) -> None:
    for word in ("the", "and", "course", "4", "pizza"):
        assert restaurant_engine.is_stop_word(word)
        assert word not in restaurant_engine.sentiment_map
        assert word not in restaurant_engine.frequency_map


def test_maps_are_read_only(example_engine) -> None:
    with pytest.raises(TypeError):
        example_engine.sentiment_map["great"] = 0.0


def test_append_new_word(example_engine, example_reader) -> None:
    example_engine.score("great staff")
    example_engine.append("okay place", 2)

    assert example_reader.load_corpus()[-1] == "2 okay place"
    assert example_engine.word_sentiment("okay") == pytest.approx(2.0)
    assert example_engine.score("okay").label == "neutral"
    assert example_engine.word_count("place") == 1


def test_append_folds_into_existing_average(example_engine) -> None:
    assert example_engine.review_sentiment("great") == pytest.approx(4.0)

    example_engine.append("great value", 0)

    assert example_engine.review_sentiment("great") == pytest.approx(2.0)
    assert example_engine.frequency_map["great"] == 2


def test_append_collapses_whitespace(example_engine, example_reader) -> None:
    example_engine.append("  lovely\n  terrace ", 3)
    assert example_reader.load_corpus()[-1] == "3 lovely terrace"


@pytest.mark.parametrize("text,label", [
    ("okay place", -1),
    ("okay place", 5),
    ("okay place", 9),
    ("okay place", 10),
    ("okay place", True),
    ("okay place", "2"),
    ("   ", 2),
    (None, 2),
])
def test_append_rejects_bad_input_without_mutation(example_engine, example_reader, text, label) -> None:
    with pytest.raises(InvalidArgument):
        example_engine.append(text, label)
    assert example_reader.load_corpus() == EXAMPLE_REVIEWS


def test_rejected_label_leaves_corpus_scorable(example_engine, example_reader) -> None:
    with pytest.raises(InvalidArgument, match="between 0 and 4"):
        example_engine.append("lovely place", 7)

    fresh = SentimentEngine(example_reader)
    assert fresh.score("great staff").label == "positive"
    assert example_engine.score("great staff").label == "positive"


def test_failed_reload_keeps_previous_maps(tmp_path) -> None:
    directory = tmp_path
    write_lexicon(directory, EXAMPLE_STOPWORDS, EXAMPLE_REVIEWS)
    reader = FlakyReader(directory / "stopwords.txt", directory / "reviews.txt")
    engine = SentimentEngine(reader)
    before = dict(engine.sentiment_map)

    reader.fail_reload = True
    with pytest.raises(ConfigurationError):
        engine.append("okay place", 2)

    assert dict(engine.sentiment_map) == before
    assert "okay" not in engine.frequency_map


def test_failed_write_leaves_corpus_and_maps(example_engine, example_reader) -> None:
    before = dict(example_engine.frequency_map)
    example_reader.reviews_path.unlink()

    with pytest.raises(ConfigurationError):
        example_engine.append("okay place", 2)

    assert not example_reader.reviews_path.exists()
    assert dict(example_engine.frequency_map) == before


def test_statistics(restaurant_engine) -> None:
    stats = restaurant_engine.statistics()
    assert stats["total_lines"] == 5
    assert stats["scored_words"] == 8
    assert stats["stopword_lines"] == 4


def test_from_config(example_reader) -> None:
    config = Config(
        stopwords_path=example_reader.stopwords_path,
        reviews_path=example_reader.reviews_path,
        top_n=1,
    )
    engine = SentimentEngine.from_config(config)
    assert len(engine.score("great").top_words) == 1
