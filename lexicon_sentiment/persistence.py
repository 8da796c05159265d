"""
PersistenceManager: saves derived lexicon artifacts and score results.

The corpus file stays the system of record; everything written here is an
export that can be regenerated from it.
"""

import logging
from pathlib import Path
from typing import Dict, List, Mapping, Union

import polars as pl

from .engine import ScoreResult

logger = logging.getLogger(__name__)


class PersistenceManager:
    """
    Writes sentiment maps, frequency maps and score batches as CSV.
    """

    def __init__(self, base_path: Union[str, Path]):
        """
        Initialize persistence manager.

        Args:
            base_path: Root directory for exported artifacts
        """
        self.base_path = Path(base_path)
        self.base_path.mkdir(parents=True, exist_ok=True)

    def save_sentiment_map(
        self,
        sentiment_map: Mapping[str, float],
        filename: str = "sentiment_map.csv"
    ) -> Path:
        df = pl.DataFrame(
            {'word': list(sentiment_map.keys()), 'sentiment': list(sentiment_map.values())},
            schema={'word': pl.Utf8, 'sentiment': pl.Float64},
        ).sort('word')
        return self._write(df, filename, "sentiment map")

    def load_sentiment_map(self, filename: str = "sentiment_map.csv") -> Dict[str, float]:
        """
        Load a sentiment map previously written by save_sentiment_map.

        Args:
            filename: CSV filename relative to base_path
        """
        file_path = self.base_path / filename
        df = pl.read_csv(file_path, schema={'word': pl.Utf8, 'sentiment': pl.Float64})
        logger.info("Loaded %d sentiment entries from %s", len(df), file_path)
        return dict(zip(df['word'].to_list(), df['sentiment'].to_list()))

    def save_frequency_map(
        self,
        frequency_map: Mapping[str, int],
        filename: str = "frequency_map.csv"
    ) -> Path:
        df = pl.DataFrame(
            {'word': list(frequency_map.keys()), 'count': list(frequency_map.values())},
            schema={'word': pl.Utf8, 'count': pl.Int64},
        ).sort(['count', 'word'], descending=[True, False])
        return self._write(df, filename, "frequency map")

    def save_score_results(
        self,
        results: List[ScoreResult],
        filename: str = "scores.csv"
    ) -> Path:
        """
        Save a batch of score results, one row per review.

        Args:
            results: Results returned by SentimentEngine.score
            filename: Output filename
        """
        df = pl.DataFrame(
            [result.to_dict() for result in results],
            schema={
                'review': pl.Utf8,
                'score': pl.Float64,
                'rounded_score': pl.Int64,
                'label': pl.Utf8,
                'top_words': pl.Utf8,
            },
        )
        return self._write(df, filename, "score results")

    def _write(self, df: pl.DataFrame, filename: str, what: str) -> Path:
        output_path = self.base_path / filename
        df.write_csv(output_path)
        logger.info("Saved %s (%d rows) to %s", what, len(df), output_path)
        return output_path
