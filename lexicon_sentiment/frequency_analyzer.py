"""
FrequencyAnalyzer: word frequencies over the labeled corpus and top-N extraction.
"""

import logging
from typing import Dict, List, Mapping, Set, Tuple

import polars as pl
from tqdm import autonotebook

from .corpus import Lexicon
from .errors import InvalidArgument
from .preprocessing import StopwordClassifier

logger = logging.getLogger(__name__)


class FrequencyAnalyzer:
    """
    Counts non-stop words across the corpus and ranks them by frequency.
    """

    def __init__(self, lexicon: Lexicon, classifier: StopwordClassifier):
        self.lexicon = lexicon
        self.classifier = classifier

    def word_count(self, word: str) -> int:
        """Whole-word, case-insensitive occurrences across all review bodies."""
        return self.lexicon.reviews.count_word(word)

    def build(self, show_progress: bool = False) -> Dict[str, int]:
        """
        Build a fresh frequency map keyed by lowercased word.

        Args:
            show_progress: Whether to show a progress bar over corpus lines
        """
        documents = self.lexicon.reviews.documents
        if show_progress:
            documents = autonotebook.tqdm(documents, desc="Building frequency map")

        frequency_map: Dict[str, int] = {}
        for doc in documents:
            for token in doc.get_tokens():
                key = token.lower()
                if key in frequency_map or self.classifier.is_stop_word(token):
                    continue
                frequency_map[key] = self.word_count(token)

        logger.debug("Frequency map built with %d words", len(frequency_map))
        return frequency_map


def build_frequency_map(
    lexicon: Lexicon,
    classifier: StopwordClassifier,
    show_progress: bool = False
) -> Dict[str, int]:
    return FrequencyAnalyzer(lexicon, classifier).build(show_progress=show_progress)


def validate_top_n(n) -> int:
    if isinstance(n, bool) or not isinstance(n, int):
        raise InvalidArgument(f"Number of top words must be an integer, got {n!r}")
    if n < 0:
        raise InvalidArgument(f"Number of top words must be non-negative, got {n}")
    return n


def ranked_words(frequency_map: Mapping[str, int], n: int) -> List[Tuple[str, int]]:
    """
    The n most frequent words with their counts.

    Sorted by count descending; ties are broken alphabetically.

    Raises:
        InvalidArgument: If n is negative or not an integer
    """
    n = validate_top_n(n)

    df = pl.DataFrame(
        {'word': list(frequency_map.keys()), 'count': list(frequency_map.values())},
        schema={'word': pl.Utf8, 'count': pl.Int64},
    )
    df = df.sort(['count', 'word'], descending=[True, False]).head(n)

    return list(df.iter_rows())


def top_words(frequency_map: Mapping[str, int], n: int) -> Set[str]:
    """
    The n most frequent words as an unordered set.

    Returns every word when n exceeds the map size.
    """
    return {word for word, _ in ranked_words(frequency_map, n)}
