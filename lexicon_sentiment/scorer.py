"""
ReviewScorer: aggregates word sentiment into a review-level score and label.
"""

import math
from typing import Mapping

from .preprocessing import StopwordClassifier, tokenize
from .sentiment_model import NO_SENTIMENT

SENTIMENT_LABELS = {
    0: 'negative',
    1: 'somewhat negative',
    2: 'neutral',
    3: 'somewhat positive',
    4: 'positive',
}

UNKNOWN_LABEL = 'unknown'


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (2.5 -> 3, -1.5 -> -1)."""
    return int(math.floor(value + 0.5))


def sentiment_label(rounded_score: int) -> str:
    return SENTIMENT_LABELS.get(rounded_score, UNKNOWN_LABEL)


class ReviewScorer:
    """
    Scores free-text reviews against a sentiment map.
    """

    def __init__(self, classifier: StopwordClassifier, sentiment_map: Mapping[str, float]):
        """
        Initialize the scorer.

        Args:
            classifier: Stop-word classifier bound to the same lexicon as the map
            sentiment_map: Lowercased word -> mean label
        """
        self.classifier = classifier
        self.sentiment_map = sentiment_map

    def review_sentiment(self, review: str) -> float:
        """
        Mean sentiment of the review's known words.

        Tokens missing from the sentiment map are skipped rather than
        counted as zero.

        Returns:
            Score in [0, 4], or NO_SENTIMENT when the review is unscoreable
        """
        tokens = tokenize(review)

        if all(self.classifier.is_stop_word(token) for token in tokens):
            return NO_SENTIMENT

        total = 0.0
        known = 0
        for token in tokens:
            value = self.sentiment_map.get(token.lower())
            if value is not None:
                total += value
                known += 1

        if known == 0:
            return NO_SENTIMENT
        return total / known

    def rounded_sentiment(self, review: str) -> int:
        return round_half_up(self.review_sentiment(review))

    def review_sentiment_label(self, review: str) -> str:
        return sentiment_label(self.rounded_sentiment(review))
