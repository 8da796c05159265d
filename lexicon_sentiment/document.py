"""
ReviewLine: a single labeled line of the review corpus.

The first character of a line is its sentiment label; the first
whitespace-delimited token is the label token and the remainder is the
review body. Only the body takes part in word statistics.
"""

from collections import Counter
from typing import Any, Dict, List

from .errors import CorpusFormatError
from .preprocessing import tokenize

MIN_LABEL = 0
MAX_LABEL = 4


class ReviewLine:
    """
    Represents one corpus line with lazily parsed label and cached tokens.
    """

    def __init__(self, line_no: int, raw_line: str):
        """
        Initialize a review line.

        Args:
            line_no: Zero-based position of the line in the corpus
            raw_line: Line exactly as stored, without the line terminator
        """
        self.line_no = line_no
        self.raw_line = raw_line

        parts = raw_line.split(None, 1)
        self.body = parts[1] if len(parts) > 1 else ''

        # Internal cache for tokenization results
        self._cache: Dict[str, Any] = {}

    @property
    def is_blank(self) -> bool:
        return not self.raw_line.strip()

    @property
    def label(self) -> int:
        """
        Parse the sentiment label from the first character.

        Raises:
            CorpusFormatError: If the first character is not a digit 0-4
        """
        first = self.raw_line[:1]
        if not first.isdigit() or not first.isascii():
            raise CorpusFormatError(self.line_no, self.raw_line)
        value = int(first)
        if not MIN_LABEL <= value <= MAX_LABEL:
            raise CorpusFormatError(self.line_no, self.raw_line)
        return value

    def get_tokens(self) -> List[str]:
        """Tokens of the review body, original casing preserved."""
        if 'tokens' not in self._cache:
            self._cache['tokens'] = tokenize(self.body)
        return self._cache['tokens']

    def get_token_counts(self) -> Counter:
        """Case-insensitive whole-word counts for the review body."""
        if 'token_counts' not in self._cache:
            self._cache['token_counts'] = Counter(
                token.lower() for token in self.get_tokens() if token)
        return self._cache['token_counts']

    def contains_word(self, word: str) -> bool:
        return word.lower() in self.get_token_counts()

    def count_word(self, word: str) -> int:
        return self.get_token_counts().get(word.lower(), 0)

    def __repr__(self) -> str:
        return f"ReviewLine(line_no={self.line_no}, raw_line={self.raw_line[:30]!r})"

    def __len__(self) -> int:
        return len(self.raw_line)

