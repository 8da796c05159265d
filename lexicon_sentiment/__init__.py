"""
Lexicon Sentiment: review sentiment scoring against a labeled corpus.

Scores free-text reviews with word-level statistics derived from a small
labeled corpus of reference reviews and a stopword list.
"""

from .errors import (
    SentimentEngineError,
    ConfigurationError,
    InvalidArgument,
    InvalidStateError,
    CorpusFormatError,
)
from .config import Config
from .reader import LexiconReader
from .document import ReviewLine
from .corpus import Lexicon, ReviewCorpus, StopwordList
from .preprocessing import StopwordClassifier, tokenize
from .sentiment_model import NO_SENTIMENT, SentimentModel, build_sentiment_map
from .scorer import ReviewScorer, sentiment_label
from .frequency_analyzer import FrequencyAnalyzer, build_frequency_map, top_words
from .engine import ScoreResult, SentimentEngine
from .persistence import PersistenceManager

__version__ = "1.0.0"
__all__ = [
    "SentimentEngineError",
    "ConfigurationError",
    "InvalidArgument",
    "InvalidStateError",
    "CorpusFormatError",
    "Config",
    "LexiconReader",
    "ReviewLine",
    "Lexicon",
    "ReviewCorpus",
    "StopwordList",
    "StopwordClassifier",
    "tokenize",
    "NO_SENTIMENT",
    "SentimentModel",
    "build_sentiment_map",
    "ReviewScorer",
    "sentiment_label",
    "FrequencyAnalyzer",
    "build_frequency_map",
    "top_words",
    "ScoreResult",
    "SentimentEngine",
    "PersistenceManager",
]
