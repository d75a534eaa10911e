"""
TF-IDF relevance scorer with saturation, phrase bonus and length normalization.

Formula:
    relevance(d) = Σ (1 + ln(tf(t, d))) × idf(t)   for query terms t with tf > 0
                 + phrase_bonus                     if the whole query occurs in d
    score(d)     = relevance(d) / sqrt(max(1, |d|))

Where:
    tf(t, d) = raw count of term t in document d
    idf(t) = ln(N / (1 + df(t)))  (see corpus.py)
    |d| = number of tokens in d
    phrase_bonus = fixed bonus (default: 100.0) for a case-insensitive
                   substring match of the full query (only for queries
                   longer than min_phrase_length characters)

Saturation: a term seen 10 times contributes ~3.3 × idf, 1000 times ~7.9 × idf.
Together with sqrt length normalization this keeps long textbooks from
winning on volume alone, while the phrase bonus rewards exact topical matches.
"""

import logging
import math
from collections import Counter
from dataclasses import dataclass
from typing import Dict, List, Optional

from .corpus import CorpusIndex, CorpusInput, Document
from .tokenizer import Tokenizer

logger = logging.getLogger(__name__)

DEFAULT_PHRASE_BONUS = 100.0
DEFAULT_MIN_PHRASE_LENGTH = 5


@dataclass
class DocumentScore:
    """Ranked result: document identifier and relevance score (higher = more relevant)"""
    doc_id: str
    score: float


class RelevanceScorer:
    """
    Scores every document of a corpus against a topic query.

    Constants are fixed at construction; the scorer itself holds no
    per-query state, so one instance can be reused across queries.
    """

    def __init__(
        self,
        tokenizer: Optional[Tokenizer] = None,
        phrase_bonus: float = DEFAULT_PHRASE_BONUS,
        min_phrase_length: int = DEFAULT_MIN_PHRASE_LENGTH
    ):
        """
        Initialize scorer.

        Args:
            tokenizer: Tokenizer shared by documents and query
            phrase_bonus: Added once when the full query occurs in the document
            min_phrase_length: Queries of this many characters or fewer
                never receive the phrase bonus
        """
        self.tokenizer = tokenizer or Tokenizer()
        self.phrase_bonus = phrase_bonus
        self.min_phrase_length = min_phrase_length

    def score_documents(self, corpus: CorpusInput, query: str) -> List[DocumentScore]:
        """
        Rank documents by relevance to the query.

        Args:
            corpus: CorpusIndex, {doc_id: text} mapping or (doc_id, text) pairs
            query: Free-text topic

        Returns:
            DocumentScore list sorted by score (descending); ties keep
            corpus order. Empty corpus returns [].
        """
        index = CorpusIndex.coerce(corpus, tokenizer=self.tokenizer)
        if len(index) == 0:
            logger.debug("Empty corpus - nothing to score")
            return []

        # A prebuilt index may carry its own tokenizer; the query must match it
        query_terms = index.tokenizer.tokenize(query)
        idf_scores = index.idf_table(query_terms)
        query_lower = query.lower()

        results = [
            DocumentScore(
                doc_id=doc.doc_id,
                score=self.score_document(doc, query_terms, idf_scores, query_lower)
            )
            for doc in index
        ]

        # sorted() is stable: equal scores stay in corpus order
        results = sorted(results, key=lambda r: r.score, reverse=True)

        logger.info(f"Scored {len(results)} documents for query '{query}' ({len(query_terms)} query terms)")
        return results

    def score_document(
        self,
        doc: Document,
        query_terms: List[str],
        idf_scores: Dict[str, float],
        query_lower: str
    ) -> float:
        """Score a single document given pre-computed query terms and IDF table."""
        relevance = self.relevance_sum(doc.tokens, query_terms, idf_scores)
        relevance += self.phrase_bonus_for(doc.text, query_lower)

        doc_length = max(1, doc.token_count)
        return relevance / math.sqrt(doc_length)

    def relevance_sum(
        self,
        doc_tokens: List[str],
        query_terms: List[str],
        idf_scores: Dict[str, float]
    ) -> float:
        """
        Saturated TF × IDF summed over query terms.

        Terms missing from the document add nothing; terms missing from
        the IDF table count as idf = 0.
        """
        term_frequency = Counter(doc_tokens)

        relevance = 0.0
        for term in query_terms:
            tf_raw = term_frequency.get(term, 0)
            if tf_raw == 0:
                continue

            tf_saturated = 1.0 + math.log(tf_raw)
            relevance += tf_saturated * idf_scores.get(term, 0.0)

        return relevance

    def phrase_bonus_for(self, text: str, query_lower: str) -> float:
        """Fixed bonus if the lowercased query is a substring of the text (binary, not per occurrence)."""
        if len(query_lower) <= self.min_phrase_length:
            return 0.0
        if query_lower in text.lower():
            return self.phrase_bonus
        return 0.0
