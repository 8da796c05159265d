"""
SentimentModel: derives per-word sentiment from the labeled corpus.

A word's sentiment is the mean label of every corpus line whose body
contains it. The sentiment map is a pure function of the corpus and is
always rebuilt in full.
"""

import logging
from typing import Dict

import numpy as np
from tqdm import autonotebook

from .corpus import Lexicon
from .errors import InvalidStateError
from .preprocessing import StopwordClassifier

logger = logging.getLogger(__name__)

NO_SENTIMENT = -1.0


class SentimentModel:
    """
    Computes word sentiment values over a lexicon.
    """

    def __init__(self, lexicon: Lexicon, classifier: StopwordClassifier):
        self.lexicon = lexicon
        self.classifier = classifier

    def word_sentiment(self, word: str) -> float:
        """
        Mean label of the corpus lines containing the word.

        Args:
            word: Token to look up (case-insensitive)

        Returns:
            Sentiment in [0, 4], or NO_SENTIMENT for stop words

        Raises:
            InvalidStateError: If no corpus line contains the word
            CorpusFormatError: If a containing line has an invalid label
        """
        if self.classifier.is_stop_word(word):
            return NO_SENTIMENT

        rows = self.lexicon.reviews.lines_containing(word)
        if not rows:
            raise InvalidStateError(
                f"No corpus line contains {word!r}; cannot average its labels")

        return float(np.mean([row.label for row in rows]))

    def build(self, show_progress: bool = False) -> Dict[str, float]:
        """
        Build a fresh sentiment map keyed by lowercased word.

        Args:
            show_progress: Whether to show a progress bar over corpus lines
        """
        documents = self.lexicon.reviews.documents
        if show_progress:
            documents = autonotebook.tqdm(documents, desc="Building sentiment map")

        sentiment_map: Dict[str, float] = {}
        for doc in documents:
            for token in doc.get_tokens():
                key = token.lower()
                if key in sentiment_map or self.classifier.is_stop_word(token):
                    continue
                sentiment_map[key] = self.word_sentiment(token)

        logger.debug("Sentiment map built with %d words", len(sentiment_map))
        return sentiment_map


def build_sentiment_map(
    lexicon: Lexicon,
    classifier: StopwordClassifier,
    show_progress: bool = False
) -> Dict[str, float]:
    return SentimentModel(lexicon, classifier).build(show_progress=show_progress)
