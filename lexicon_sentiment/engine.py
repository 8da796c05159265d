"""
SentimentEngine: main entry point for scoring reviews and growing the corpus.

The engine owns the lexicon and both derived maps. The maps are caches of
the corpus: they are rebuilt in full from freshly loaded lines and swapped
in only once the rebuild has succeeded.
"""

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Set

from .config import Config
from .corpus import Lexicon, ReviewCorpus, StopwordList
from .document import MAX_LABEL, MIN_LABEL
from .errors import InvalidArgument
from .frequency_analyzer import FrequencyAnalyzer, validate_top_n, ranked_words
from .preprocessing import StopwordClassifier, normalize_whitespace
from .reader import LexiconReader
from .scorer import ReviewScorer, round_half_up, sentiment_label
from .sentiment_model import SentimentModel

logger = logging.getLogger(__name__)


@dataclass
class ScoreResult:
    """Outcome of scoring one review."""
    review: str
    score: float
    rounded_score: int
    label: str
    ranked_top_words: List[str]
    top_words: Set[str] = field(init=False)

    def __post_init__(self):
        self.top_words = set(self.ranked_top_words)

    @property
    def annotated_text(self) -> str:
        return (f"{self.rounded_score} ({self.label}) {self.review}\n\n"
                f" most frequent words from input reviews are: {' '.join(self.ranked_top_words)}")

    @property
    def is_scoreable(self) -> bool:
        return self.score >= 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            'review': self.review,
            'score': self.score,
            'rounded_score': self.rounded_score,
            'label': self.label,
            'top_words': ' '.join(self.ranked_top_words),
        }


class _EngineState:
    """Lexicon plus everything derived from it; replaced as a whole."""

    def __init__(self, lexicon: Lexicon, allow_apostrophes: bool, show_progress: bool):
        self.lexicon = lexicon
        self.classifier = StopwordClassifier(lexicon, allow_apostrophes=allow_apostrophes)
        self.sentiment_model = SentimentModel(lexicon, self.classifier)
        self.frequency_analyzer = FrequencyAnalyzer(lexicon, self.classifier)
        self.sentiment_map = self.sentiment_model.build(show_progress=show_progress)
        self.frequency_map = self.frequency_analyzer.build(show_progress=show_progress)
        self.scorer = ReviewScorer(self.classifier, self.sentiment_map)


class SentimentEngine:
    """
    Scores reviews against a labeled corpus and appends new labeled reviews.

    Resources are loaded on first use. Stopwords are loaded once; the
    corpus is reloaded from storage after every append.
    """

    def __init__(
        self,
        reader: LexiconReader,
        top_n: int = Config.DEFAULT_TOP_N,
        allow_apostrophes: bool = Config.ALLOW_APOSTROPHES,
        show_progress: bool = False
    ):
        """
        Initialize the engine.

        Args:
            reader: Source of the stopword and review resources
            top_n: Number of top words reported with each score
            allow_apostrophes: Treat contractions as informative words
            show_progress: Show progress bars while rebuilding maps
        """
        self.reader = reader
        self.top_n = validate_top_n(top_n)
        self.allow_apostrophes = allow_apostrophes
        self.show_progress = show_progress

        self._stopwords: Optional[StopwordList] = None
        self._state: Optional[_EngineState] = None

    @classmethod
    def from_config(cls, config: Config, show_progress: bool = False) -> 'SentimentEngine':
        reader = LexiconReader(config.stopwords_path, config.reviews_path)
        return cls(
            reader,
            top_n=config.top_n,
            allow_apostrophes=config.allow_apostrophes,
            show_progress=show_progress,
        )

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def _load_stopwords(self) -> StopwordList:
        if self._stopwords is None:
            self._stopwords = StopwordList(self.reader.load_stopwords())
            logger.info("Loaded %d stopword lines", len(self._stopwords))
        return self._stopwords

    def reload(self):
        """
        Reload the corpus from storage and rebuild both maps.

        On failure the previous lexicon and maps stay in place.
        """
        stopwords = self._load_stopwords()
        lines = self.reader.load_corpus()
        state = _EngineState(
            Lexicon(stopwords, ReviewCorpus(lines)),
            allow_apostrophes=self.allow_apostrophes,
            show_progress=self.show_progress,
        )
        self._state = state
        logger.info("Corpus loaded: %d lines, %d scored words",
                    len(state.lexicon.reviews), len(state.sentiment_map))

    @property
    def _current(self) -> _EngineState:
        if self._state is None:
            self.reload()
        return self._state

    @property
    def lexicon(self) -> Lexicon:
        return self._current.lexicon

    @property
    def sentiment_map(self) -> Mapping[str, float]:
        return MappingProxyType(self._current.sentiment_map)

    @property
    def frequency_map(self) -> Mapping[str, int]:
        return MappingProxyType(self._current.frequency_map)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def is_stop_word(self, token: str) -> bool:
        return self._current.classifier.is_stop_word(token)

    def word_sentiment(self, word: str) -> float:
        return self._current.sentiment_model.word_sentiment(word)

    def word_count(self, word: str) -> int:
        return self._current.frequency_analyzer.word_count(word)

    def review_sentiment(self, review: str) -> float:
        return self._current.scorer.review_sentiment(review)

    def review_sentiment_label(self, review: str) -> str:
        return self._current.scorer.review_sentiment_label(review)

    def ranked_words(self, n: Optional[int] = None) -> List[str]:
        n = self.top_n if n is None else n
        return [word for word, _ in ranked_words(self._current.frequency_map, n)]

    def top_words(self, n: Optional[int] = None) -> Set[str]:
        """
        The n most frequent non-stop words of the corpus.

        Raises:
            InvalidArgument: If n is negative
        """
        return set(self.ranked_words(n))

    def statistics(self) -> Dict:
        stats = self._current.lexicon.reviews.get_statistics()
        stats['scored_words'] = len(self._current.sentiment_map)
        stats['stopword_lines'] = len(self._current.lexicon.stopwords)
        return stats

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------

    def score(self, review: str) -> ScoreResult:
        """
        Score a review and attach the corpus top words.

        Args:
            review: Free review text

        Returns:
            ScoreResult with raw and rounded score, label and top words
        """
        state = self._current
        score = state.scorer.review_sentiment(review)
        rounded = round_half_up(score)

        return ScoreResult(
            review=review,
            score=score,
            rounded_score=rounded,
            label=sentiment_label(rounded),
            ranked_top_words=self.ranked_words(),
        )

    def append(self, text: str, label: int):
        """
        Append a labeled review to the corpus and rebuild both maps.

        Args:
            text: Review text; whitespace runs are collapsed to one line
            label: Sentiment label, 0-4

        Raises:
            InvalidArgument: If the label or text is malformed
            ConfigurationError: If the corpus cannot be written or reloaded
        """
        if isinstance(label, bool) or not isinstance(label, int):
            raise InvalidArgument(f"Label must be an integer, got {label!r}")
        if not MIN_LABEL <= label <= MAX_LABEL:
            raise InvalidArgument(
                f"Label must be between {MIN_LABEL} and {MAX_LABEL}, got {label}")
        if not isinstance(text, str):
            raise InvalidArgument(f"Review text must be a string, got {type(text).__name__}")

        body = normalize_whitespace(text)
        if not body:
            raise InvalidArgument("Review text to append is empty")

        self._load_stopwords()
        self.reader.append_line(f"{label} {body}")
        logger.info("Appended review with label %d", label)

        self.reload()

    def __repr__(self) -> str:
        loaded = self._state is not None
        return f"SentimentEngine(reader={self.reader!r}, top_n={self.top_n}, loaded={loaded})"
