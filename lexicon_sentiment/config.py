"""
Global settings for the sentiment engine.
"""

import os
from pathlib import Path
from typing import Mapping, Optional

from .errors import ConfigurationError

DATA_DIR = Path(__file__).parent / 'data'

_TRUE_VALUES = {'1', 'true', 'yes', 'on'}
_FALSE_VALUES = {'0', 'false', 'no', 'off', ''}


class Config:
    """Engine settings; class attributes hold the defaults."""

    # Lexicon resources
    STOPWORDS_PATH = DATA_DIR / 'stopwords.txt'
    REVIEWS_PATH = DATA_DIR / 'reviews.txt'

    # Scoring
    DEFAULT_TOP_N = 3
    ALLOW_APOSTROPHES = False

    # Object storage conventions
    RESULT_BUCKET_SUFFIX = '-resized'
    RESULT_KEY_PREFIX = 'sentimented-'
    APPEND_KEY_PREFIX = 'append-'

    # Output
    EXPORT_DIR = './results/'

    ENV_PREFIX = 'LEXICON_SENTIMENT_'

    def __init__(
        self,
        stopwords_path=None,
        reviews_path=None,
        top_n: Optional[int] = None,
        allow_apostrophes: Optional[bool] = None,
        result_bucket_suffix: Optional[str] = None,
        export_dir=None
    ):
        self.stopwords_path = Path(stopwords_path or self.STOPWORDS_PATH)
        self.reviews_path = Path(reviews_path or self.REVIEWS_PATH)
        self.top_n = self.DEFAULT_TOP_N if top_n is None else top_n
        self.allow_apostrophes = (
            self.ALLOW_APOSTROPHES if allow_apostrophes is None else allow_apostrophes)
        self.result_bucket_suffix = result_bucket_suffix or self.RESULT_BUCKET_SUFFIX
        self.result_key_prefix = self.RESULT_KEY_PREFIX
        self.append_key_prefix = self.APPEND_KEY_PREFIX
        self.export_dir = Path(export_dir or self.EXPORT_DIR)

        if self.top_n < 0:
            raise ConfigurationError(f"top_n must be non-negative, got {self.top_n}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'Config':
        """
        Build settings from LEXICON_SENTIMENT_* environment variables.

        Args:
            environ: Mapping to read instead of os.environ
        """
        env = os.environ if environ is None else environ

        def get(name: str) -> Optional[str]:
            return env.get(cls.ENV_PREFIX + name)

        top_n = get('TOP_N')
        if top_n is not None:
            try:
                top_n = int(top_n)
            except ValueError:
                raise ConfigurationError(
                    f"{cls.ENV_PREFIX}TOP_N must be an integer, got {top_n!r}")

        allow_apostrophes = get('ALLOW_APOSTROPHES')
        if allow_apostrophes is not None:
            flag = allow_apostrophes.strip().lower()
            if flag in _TRUE_VALUES:
                allow_apostrophes = True
            elif flag in _FALSE_VALUES:
                allow_apostrophes = False
            else:
                raise ConfigurationError(
                    f"{cls.ENV_PREFIX}ALLOW_APOSTROPHES must be a boolean, got {allow_apostrophes!r}")

        return cls(
            stopwords_path=get('STOPWORDS'),
            reviews_path=get('REVIEWS'),
            top_n=top_n,
            allow_apostrophes=allow_apostrophes,
            result_bucket_suffix=get('RESULT_SUFFIX'),
            export_dir=get('EXPORT_DIR'),
        )

    def __repr__(self) -> str:
        return (f"Config(stopwords_path={self.stopwords_path}, reviews_path={self.reviews_path}, "
                f"top_n={self.top_n}, allow_apostrophes={self.allow_apostrophes})")
