"""
Exception hierarchy for the sentiment engine.

Unscoreable reviews are not errors: they produce the -1 / "unknown" sentinel.
"""


class SentimentEngineError(Exception):
    """Base class for all engine errors."""


class ConfigurationError(SentimentEngineError):
    """A lexicon resource is missing, unreadable or unwritable, or a setting is invalid."""


class InvalidArgument(SentimentEngineError, ValueError):
    """A caller supplied a bad argument (negative top-N, malformed label, ...)."""


class InvalidStateError(SentimentEngineError, RuntimeError):
    """An internal invariant was violated."""


class CorpusFormatError(SentimentEngineError, ValueError):
    """A corpus line does not start with a valid 0-4 label."""

    def __init__(self, line_no: int, line: str):
        self.line_no = line_no
        self.line = line
        super().__init__(
            f"Corpus line {line_no} does not start with a 0-4 label: {line[:40]!r}")
