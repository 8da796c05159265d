"""
LexiconReader: loads the stopword and review resources from the file system.

Both resources are line-oriented text files. Loading is all-or-nothing: any
missing or unreadable file raises ConfigurationError and nothing is returned.
"""

import logging
from pathlib import Path
from typing import List, Union

from .errors import ConfigurationError

logger = logging.getLogger(__name__)


class LexiconReader:
    """
    Handles loading and appending of the line-oriented lexicon resources.
    """

    def __init__(
        self,
        stopwords_path: Union[str, Path],
        reviews_path: Union[str, Path],
        encoding: str = 'utf-8'
    ):
        """
        Initialize the lexicon reader.

        Args:
            stopwords_path: Text file with one stopword or phrase per line
            reviews_path: Text file with one "<label> <review>" line per review
            encoding: Encoding of both files
        """
        self.stopwords_path = Path(stopwords_path)
        self.reviews_path = Path(reviews_path)
        self.encoding = encoding

    def load_stopwords(self) -> List[str]:
        return self._read_lines(self.stopwords_path, 'stopwords')

    def load_corpus(self) -> List[str]:
        return self._read_lines(self.reviews_path, 'reviews')

    def append_line(self, line: str):
        """
        Append one line to the review corpus file.

        The file is left untouched if the write fails.

        Args:
            line: Line to append, without a line terminator

        Raises:
            ConfigurationError: If the corpus file is missing or not writable
        """
        if not self.reviews_path.is_file():
            raise ConfigurationError(f"Reviews resource not found: {self.reviews_path}")

        try:
            with open(self.reviews_path, 'rb') as f:
                f.seek(0, 2)
                needs_separator = False
                if f.tell() > 0:
                    f.seek(-1, 2)
                    needs_separator = f.read(1) not in (b'\n', b'\r')

            payload = ('\n' if needs_separator else '') + line + '\n'
            with open(self.reviews_path, 'a', encoding=self.encoding, newline='') as f:
                f.write(payload)
        except OSError as e:
            raise ConfigurationError(
                f"Cannot append to reviews resource {self.reviews_path}: {e}") from e

        logger.debug("Appended line to %s", self.reviews_path)

    def _read_lines(self, path: Path, kind: str) -> List[str]:
        if not path.is_file():
            raise ConfigurationError(f"{kind.capitalize()} resource not found: {path}")

        try:
            with open(path, 'r', encoding=self.encoding) as f:
                lines = [line.rstrip('\n') for line in f]
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigurationError(f"Cannot read {kind} resource {path}: {e}") from e

        logger.debug("Loaded %d %s lines from %s", len(lines), kind, path)
        return lines

    def __repr__(self) -> str:
        return f"LexiconReader(stopwords={self.stopwords_path}, reviews={self.reviews_path})"
