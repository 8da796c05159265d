"""
Lexicon: the stopword list and the labeled review corpus.

Both are held as ordered line sequences. Whole-word membership queries
re-tokenize each line; per-line token counts are cached on the lines so
repeated queries stay cheap.
"""

from collections import Counter
from typing import Dict, List, Sequence, Set

import numpy as np

from .document import ReviewLine
from .preprocessing import tokenize


class StopwordList:
    """
    Ordered stopword lines. A token is listed if it matches, case-insensitively,
    any whole word of any line.
    """

    def __init__(self, lines: Sequence[str]):
        self.lines: List[str] = list(lines)
        self._vocabulary: Set[str] = {
            token.lower() for line in self.lines for token in tokenize(line)
        }

    def contains(self, token: str) -> bool:
        return token.lower() in self._vocabulary

    def __len__(self) -> int:
        return len(self.lines)

    def __repr__(self) -> str:
        return f"StopwordList(lines={len(self.lines)})"


class ReviewCorpus:
    """
    Ordered collection of labeled review lines.

    Provides the whole-word, case-insensitive lookups that the sentiment
    model and the frequency analyzer fold over.
    """

    def __init__(self, lines: Sequence[str]):
        """
        Initialize the corpus.

        Args:
            lines: Raw corpus lines in "<label> <review text>" format
        """
        self.documents: List[ReviewLine] = [
            ReviewLine(line_no, line) for line_no, line in enumerate(lines)
        ]

    def contains_word(self, word: str) -> bool:
        """True if any review body contains the word as a whole word."""
        return any(doc.contains_word(word) for doc in self.documents)

    def lines_containing(self, word: str) -> List[ReviewLine]:
        return [doc for doc in self.documents if doc.contains_word(word)]

    def count_word(self, word: str) -> int:
        """Total whole-word occurrences of the word across all review bodies."""
        return sum(doc.count_word(word) for doc in self.documents)

    def vocabulary(self) -> Set[str]:
        vocab: Set[str] = set()
        for doc in self.documents:
            vocab.update(doc.get_token_counts())
        return vocab

    def get_statistics(self) -> Dict:
        """
        Compute summary statistics about the corpus.

        Raises:
            CorpusFormatError: If a non-blank line carries an invalid label

        Returns:
            Dictionary with line counts, label distribution and body lengths
        """
        labeled = [doc for doc in self.documents if not doc.is_blank]
        labels = [doc.label for doc in labeled]

        stats = {
            'total_lines': len(self.documents),
            'labeled_lines': len(labeled),
            'vocabulary_size': len(self.vocabulary()),
        }

        stats['label_distribution'] = dict(sorted(Counter(labels).items()))
        stats['mean_label'] = float(np.mean(labels)) if labels else None

        body_lengths = [len(doc.body) for doc in labeled]
        if body_lengths:
            stats['body_length'] = {
                'mean': float(np.mean(body_lengths)),
                'median': float(np.median(body_lengths)),
                'min': int(np.min(body_lengths)),
                'max': int(np.max(body_lengths)),
            }

        return stats

    def __len__(self) -> int:
        return len(self.documents)

    def __repr__(self) -> str:
        return f"ReviewCorpus(lines={len(self.documents)})"


class Lexicon:
    """Pairs the stopword list with the review corpus."""

    def __init__(self, stopwords: StopwordList, reviews: ReviewCorpus):
        self.stopwords = stopwords
        self.reviews = reviews

    @classmethod
    def from_lines(cls, stopword_lines: Sequence[str], review_lines: Sequence[str]) -> 'Lexicon':
        return cls(StopwordList(stopword_lines), ReviewCorpus(review_lines))

    def __repr__(self) -> str:
        return f"Lexicon(stopwords={len(self.stopwords)}, reviews={len(self.reviews)})"
