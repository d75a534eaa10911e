"""
Tokenizer for relevance scoring.

Tokenization pipeline:
1. Split on whitespace
2. Lowercase conversion
3. Strip every non-alphanumeric character (ASCII)
4. Drop empty strings
5. Filter stopwords (small fixed English list)

Duplicates are kept: term frequencies are counted from the token list.
No stemming - "automation" and "automated" are different terms.
"""

import re
from typing import FrozenSet, Iterable, List, Optional

# Minimal stopword list - only the most frequent English function words
STOP_WORDS = frozenset([
    'the', 'and', 'a', 'an', 'in', 'on', 'of', 'for',
    'with', 'to', 'is', 'are', 'was', 'were'
])

_NON_ALNUM = re.compile(r'[^a-z0-9]')


class Tokenizer:
    """
    Whitespace tokenizer with punctuation stripping and stopword removal.

    The stopword set is fixed at construction so tests can substitute
    their own list without touching module state.
    """

    def __init__(self, stop_words: Optional[Iterable[str]] = None):
        self.stop_words: FrozenSet[str] = (
            STOP_WORDS if stop_words is None else frozenset(stop_words)
        )

    def tokenize(self, text: str) -> List[str]:
        """
        Convert raw text into an ordered list of normalized terms.

        Args:
            text: Input text (document body or query)

        Returns:
            List of lowercase alphanumeric terms without stopwords

        Examples:
            >>> Tokenizer().tokenize("The Quick, Quick Fox!")
            ['quick', 'quick', 'fox']

            >>> Tokenizer().tokenize("AI-Powered Social-Media")
            ['aipowered', 'socialmedia']

            >>> Tokenizer().tokenize("   ")
            []
        """
        if not text:
            return []

        tokens = []
        for word in text.split():
            # Punctuation inside a word is removed, not used as a separator
            term = _NON_ALNUM.sub('', word.lower())
            if term and term not in self.stop_words:
                tokens.append(term)

        return tokens


_default_tokenizer = Tokenizer()


def tokenize(text: str) -> List[str]:
    """Tokenize text with the default stopword list."""
    return _default_tokenizer.tokenize(text)
