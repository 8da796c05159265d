"""
Tokenization and stop-word classification.

A token is a stop word when any configured rule rejects it. The default rule
set mirrors the reference behaviour: listed in the stopword resource, blank,
not purely alphanumeric, or never seen in the labeled corpus.
"""

import re
from abc import ABC, abstractmethod
from typing import Callable, Dict, List, Optional


# ASCII word characters and apostrophes form tokens; everything else separates.
WORD_SPLIT_PATTERN = re.compile(r"[^\w']+", re.ASCII)

STRICT_TOKEN_PATTERN = re.compile(r"[a-zA-Z0-9]*")
PERMISSIVE_TOKEN_PATTERN = re.compile(r"[a-zA-Z0-9']*")

_WHITESPACE_PATTERN = re.compile(r'\s+')


def tokenize(text: str) -> List[str]:
    """
    Split text on runs of non-word, non-apostrophe characters.

    Leading separators yield an empty first token, which the classifier
    treats as a stop word.
    """
    tokens = WORD_SPLIT_PATTERN.split(text)
    # Trailing separators never produce a token
    while len(tokens) > 1 and tokens[-1] == '':
        tokens.pop()
    return tokens


def normalize_whitespace(text: str) -> str:
    """Collapse whitespace runs (including newlines) into single spaces."""
    return _WHITESPACE_PATTERN.sub(' ', text).strip()


class TokenRule(ABC):
    """Abstract base class for stop-word rules."""

    @abstractmethod
    def rejects(self, token: str) -> bool:
        """Return True when the token is uninformative."""
        pass


class BlankTokenRule(TokenRule):
    """Rejects empty and single-space tokens."""

    def rejects(self, token: str) -> bool:
        return token == '' or token == ' '


class CharacterClassRule(TokenRule):
    """Rejects tokens containing characters outside [a-zA-Z0-9]."""

    def __init__(self, allow_apostrophes: bool = False):
        """
        Initialize the character-class rule.

        Args:
            allow_apostrophes: Accept apostrophes so contractions such as
                "don't" count as informative words
        """
        self.allow_apostrophes = allow_apostrophes
        self.pattern = PERMISSIVE_TOKEN_PATTERN if allow_apostrophes else STRICT_TOKEN_PATTERN

    def rejects(self, token: str) -> bool:
        return self.pattern.fullmatch(token) is None


class ListedStopwordRule(TokenRule):
    """Rejects tokens appearing as a whole word in any stopword line."""

    def __init__(self, stopwords):
        self.stopwords = stopwords

    def rejects(self, token: str) -> bool:
        return self.stopwords.contains(token)


class UnseenWordRule(TokenRule):
    """Rejects tokens that no corpus review contains."""

    def __init__(self, reviews):
        self.reviews = reviews

    def rejects(self, token: str) -> bool:
        return not self.reviews.contains_word(token)


class StopwordClassifier:
    """
    Decides whether a token is a stop word.

    Rules are evaluated cheapest first; the verdict is the logical OR of
    all rules, so evaluation order never changes the result.
    """

    # Registry of available rules, keyed by name
    RULE_REGISTRY: Dict[str, Callable] = {
        'blank': lambda lexicon, allow_apostrophes: BlankTokenRule(),
        'character_class': lambda lexicon, allow_apostrophes: CharacterClassRule(allow_apostrophes),
        'listed': lambda lexicon, allow_apostrophes: ListedStopwordRule(lexicon.stopwords),
        'unseen': lambda lexicon, allow_apostrophes: UnseenWordRule(lexicon.reviews),
    }

    DEFAULT_RULES = ['blank', 'character_class', 'listed', 'unseen']

    def __init__(
        self,
        lexicon,
        allow_apostrophes: bool = False,
        rules: Optional[List[str]] = None
    ):
        """
        Initialize the classifier.

        Args:
            lexicon: Lexicon holding the stopword list and the review corpus
            allow_apostrophes: Apostrophe-permissive character-class rule
            rules: Rule names to apply (defaults to all of them)
        """
        if rules is None:
            rules = list(self.DEFAULT_RULES)

        self.lexicon = lexicon
        self.allow_apostrophes = allow_apostrophes
        self.rule_names = rules
        self.rules: List[TokenRule] = []

        for rule_name in rules:
            if rule_name not in self.RULE_REGISTRY:
                raise ValueError(f"Unknown stop-word rule: {rule_name}")
            self.rules.append(self.RULE_REGISTRY[rule_name](lexicon, allow_apostrophes))

    def is_stop_word(self, token: str) -> bool:
        return any(rule.rejects(token) for rule in self.rules)

    def informative_tokens(self, text: str) -> List[str]:
        """Tokenize text and keep only the tokens that are not stop words."""
        return [token for token in tokenize(text) if not self.is_stop_word(token)]

    def __repr__(self) -> str:
        return f"StopwordClassifier(rules={self.rule_names}, allow_apostrophes={self.allow_apostrophes})"
