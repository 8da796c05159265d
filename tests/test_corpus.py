from __future__ import annotations

import pytest

from lexicon_sentiment.corpus import ReviewCorpus, StopwordList
from lexicon_sentiment.document import ReviewLine
from lexicon_sentiment.errors import CorpusFormatError

from conftest import RESTAURANT_REVIEWS


def test_review_line_splits_label_and_body() -> None:
    line = ReviewLine(0, "3 decent  service")
    assert line.label == 3
    assert line.body == "decent  service"
    assert line.get_tokens() == ["decent", "service"]


def test_review_line_counts_whole_words_case_insensitively() -> None:
    line = ReviewLine(0, "4 Great service and great food")
    assert line.count_word("GREAT") == 2
    assert line.contains_word("food")
    assert not line.contains_word("grea")


@pytest.mark.parametrize("raw", ["x bad line", "7 weird", "", "-1 negative"])
def test_review_line_rejects_invalid_labels(raw) -> None:
    with pytest.raises(CorpusFormatError):
        ReviewLine(5, raw).label


def test_stopword_list_matches_words_inside_phrases() -> None:
    stopwords = StopwordList(["of course", "The"])
    assert stopwords.contains("course")
    assert stopwords.contains("the")
    assert not stopwords.contains("cour")


def test_corpus_queries() -> None:
    corpus = ReviewCorpus(RESTAURANT_REVIEWS)

    assert corpus.contains_word("Staff")
    assert not corpus.contains_word("pizza")
    assert [doc.line_no for doc in corpus.lines_containing("service")] == [0, 2, 3]
    assert corpus.count_word("great") == 3
    assert corpus.count_word("food") == 3


def test_corpus_keeps_blank_lines_without_words() -> None:
    corpus = ReviewCorpus(["4 good", "", "0 bad"])
    assert len(corpus) == 3
    assert corpus.vocabulary() == {"good", "bad"}


def test_corpus_statistics() -> None:
    stats = ReviewCorpus(RESTAURANT_REVIEWS + [""]).get_statistics()

    assert stats["total_lines"] == 6
    assert stats["labeled_lines"] == 5
    assert stats["label_distribution"] == {0: 1, 1: 1, 3: 1, 4: 2}
    assert stats["mean_label"] == pytest.approx(12 / 5)
    assert stats["body_length"]["min"] == len("Great staff")
