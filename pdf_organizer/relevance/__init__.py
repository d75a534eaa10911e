"""
TF-IDF relevance ranking for local document search.

Components:
- tokenizer: Whitespace tokenization, punctuation stripping, stopwords
- corpus: Tokenized in-memory corpus with document frequency / IDF
- scorer: Saturated TF × IDF with exact-phrase bonus and length normalization
- fallback: Decides whether local results justify skipping online search

Everything is recomputed per query: no persisted index, no stemming.
"""

from .tokenizer import STOP_WORDS, Tokenizer, tokenize
from .corpus import CorpusIndex, Document, compute_idf
from .scorer import DocumentScore, RelevanceScorer
from .fallback import FallbackDecision, FallbackPolicy

__all__ = [
    "STOP_WORDS",
    "Tokenizer",
    "tokenize",
    "CorpusIndex",
    "Document",
    "compute_idf",
    "DocumentScore",
    "RelevanceScorer",
    "FallbackDecision",
    "FallbackPolicy",
]
