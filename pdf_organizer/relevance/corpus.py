"""
In-memory corpus index with document frequency and IDF statistics.

The corpus is re-tokenized on every run - it is small and nothing is
persisted between queries.

IDF formula (unsmoothed, no floor):
    idf(t) = ln(N / (1 + df(t)))

Where:
    N = number of documents in the corpus
    df(t) = number of documents containing t at least once

A term present in every document gets ln(N / (N + 1)) < 0. The negative
weight is kept and flows into the score: very common terms pull the
relevance sum down instead of being ignored.
"""

import logging
import math
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Mapping, Optional, Tuple, Union

from .tokenizer import Tokenizer

logger = logging.getLogger(__name__)

CorpusInput = Union["CorpusIndex", Mapping[str, str], Iterable[Tuple[str, str]]]


@dataclass
class Document:
    """Single corpus entry: identifier (file path), raw text and its tokens"""
    doc_id: str
    text: str
    tokens: List[str] = field(default_factory=list)

    @property
    def token_count(self) -> int:
        return len(self.tokens)


class CorpusIndex:
    """
    Ordered collection of tokenized documents.

    Iteration order is insertion order, which is also the tie-break order
    of the ranked list. Adding an identifier twice replaces the text and
    keeps the original position.
    """

    def __init__(self, tokenizer: Optional[Tokenizer] = None):
        self.tokenizer = tokenizer or Tokenizer()
        self._documents: "OrderedDict[str, Document]" = OrderedDict()

    @classmethod
    def from_pairs(
        cls,
        pairs: Iterable[Tuple[str, str]],
        tokenizer: Optional[Tokenizer] = None
    ) -> "CorpusIndex":
        """Build an index from (doc_id, text) pairs, skipping empty texts."""
        index = cls(tokenizer=tokenizer)
        for doc_id, text in pairs:
            index.add_document(doc_id, text)
        return index

    @classmethod
    def from_mapping(
        cls,
        mapping: Mapping[str, str],
        tokenizer: Optional[Tokenizer] = None
    ) -> "CorpusIndex":
        """Build an index from a {doc_id: text} mapping (mapping order kept)."""
        return cls.from_pairs(mapping.items(), tokenizer=tokenizer)

    @classmethod
    def coerce(cls, corpus: CorpusInput, tokenizer: Optional[Tokenizer] = None) -> "CorpusIndex":
        """Accept an existing index, a mapping or a sequence of pairs."""
        if isinstance(corpus, CorpusIndex):
            return corpus
        if isinstance(corpus, Mapping):
            return cls.from_mapping(corpus, tokenizer=tokenizer)
        return cls.from_pairs(corpus, tokenizer=tokenizer)

    def add_document(self, doc_id: str, text: str) -> Optional[Document]:
        """
        Tokenize and store a document.

        Returns:
            The stored Document, or None if the text was empty
            (empty extraction results never enter the corpus)
        """
        if not text:
            logger.debug(f"Skipping document with empty text: {doc_id}")
            return None

        doc = Document(doc_id=doc_id, text=text, tokens=self.tokenizer.tokenize(text))
        self._documents[doc_id] = doc
        return doc

    def __len__(self) -> int:
        return len(self._documents)

    def __iter__(self):
        return iter(self._documents.values())

    def __contains__(self, doc_id: str) -> bool:
        return doc_id in self._documents

    def get(self, doc_id: str) -> Document:
        return self._documents[doc_id]

    @property
    def n(self) -> int:
        return len(self._documents)

    def texts(self) -> Dict[str, str]:
        """Raw-text mapping {doc_id: text}"""
        return {doc.doc_id: doc.text for doc in self}

    def tokenized(self) -> Dict[str, List[str]]:
        """Tokenized mapping {doc_id: tokens} (same keys as texts())"""
        return {doc.doc_id: doc.tokens for doc in self}

    def document_frequency(self, term: str) -> int:
        """Number of documents containing the term at least once."""
        return sum(1 for doc in self if term in doc.tokens)

    def compute_idf(self, term: str) -> float:
        """
        Inverse document frequency: ln(N / (1 + df)).

        Not clamped - may be negative for terms found in every document.
        """
        n = self.n
        assert n >= 1, "IDF requires a non-empty corpus"
        df = self.document_frequency(term)
        return math.log(n / (1.0 + df))

    def idf_table(self, terms: Iterable[str]) -> Dict[str, float]:
        """
        IDF for each distinct term, computed once per term.

        Built before per-document scoring and only read afterwards.
        """
        table: Dict[str, float] = {}
        for term in terms:
            if term not in table:
                table[term] = self.compute_idf(term)

        logger.debug(f"IDF table over {self.n} documents: {table}")
        return table


def compute_idf(term: str, corpus: CorpusInput, tokenizer: Optional[Tokenizer] = None) -> float:
    """
    IDF of a term over a corpus given as mapping, pairs or CorpusIndex.

    Example:
        >>> round(compute_idf("fox", {"a": "fox", "b": "fox"}), 4)  # ln(2/3)
        -0.4055
    """
    return CorpusIndex.coerce(corpus, tokenizer=tokenizer).compute_idf(term)
