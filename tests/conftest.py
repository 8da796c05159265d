from __future__ import annotations

import pytest

from lexicon_sentiment.engine import SentimentEngine
from lexicon_sentiment.reader import LexiconReader

EXAMPLE_STOPWORDS = ["the", "a"]
EXAMPLE_REVIEWS = ["4 great service", "0 terrible food", "4 amazing staff"]

RESTAURANT_STOPWORDS = ["the", "a", "and", "of course"]
RESTAURANT_REVIEWS = [
    "4 great service and great food",
    "0 terrible food",
    "3 decent service",
    "1 slow service , cold food",
    "4 Great staff",
]


def write_lexicon(directory, stopwords, reviews):
    stopwords_path = directory / "stopwords.txt"
    reviews_path = directory / "reviews.txt"
    stopwords_path.write_text("\n".join(stopwords) + "\n", encoding="utf-8")
    reviews_path.write_text("\n".join(reviews) + "\n", encoding="utf-8")
    return LexiconReader(stopwords_path, reviews_path)


@pytest.fixture
def example_reader(tmp_path) -> LexiconReader:
    return write_lexicon(tmp_path, EXAMPLE_STOPWORDS, EXAMPLE_REVIEWS)


@pytest.fixture
def example_engine(example_reader) -> SentimentEngine:
    return SentimentEngine(example_reader)


@pytest.fixture
def restaurant_reader(tmp_path) -> LexiconReader:
    return write_lexicon(tmp_path, RESTAURANT_STOPWORDS, RESTAURANT_REVIEWS)


@pytest.fixture
def restaurant_engine(restaurant_reader) -> SentimentEngine:
    return SentimentEngine(restaurant_reader)
