"""
End-to-end topic search: local corpus first, online fallback second.

Flow:
1. Discover documents under the search root
2. Extract text and build the corpus (empty texts dropped)
3. Score the corpus against the topic
4. Fallback check (quantity OR absolute quality)
5. Either prepare local results for display, or query the web search client

No step raises for degraded input: a missing directory, an empty corpus
or a failing web search all end in a well-formed (possibly empty) outcome.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .config import Settings
from .document_processor import TextExtractor
from .file_manager import find_documents
from .presenter import DisplayResult, normalize_local_results
from .relevance import (
    CorpusIndex,
    DocumentScore,
    FallbackDecision,
    FallbackPolicy,
    RelevanceScorer,
)
from .search import ScholarResult, WebSearchClient

logger = logging.getLogger(__name__)


@dataclass
class SearchOutcome:
    """Everything a caller needs to report one run"""
    topic: str
    root: str
    paths_found: int
    corpus_size: int
    ranked: List[DocumentScore]
    decision: FallbackDecision
    local_results: List[DisplayResult] = field(default_factory=list)
    online_results: List[ScholarResult] = field(default_factory=list)
    online_searched: bool = False


class OrganizerPipeline:
    """Wires discovery, extraction, scoring, fallback policy and web search."""

    def __init__(
        self,
        settings: Settings,
        extractor: Optional[TextExtractor] = None,
        scorer: Optional[RelevanceScorer] = None,
        policy: Optional[FallbackPolicy] = None,
        search_client: Optional[WebSearchClient] = None
    ):
        self.settings = settings
        self.extractor = extractor or TextExtractor()
        self.scorer = scorer or RelevanceScorer(
            phrase_bonus=settings.phrase_bonus,
            min_phrase_length=settings.min_phrase_length
        )
        self.policy = policy or FallbackPolicy(
            min_results=settings.min_results,
            score_threshold=settings.score_threshold
        )
        self.search_client = search_client

    def build_corpus(self, root: str) -> Tuple[List[str], CorpusIndex]:
        """Return (paths found, CorpusIndex of usable documents)."""
        paths = find_documents(root, self.settings.extensions)
        logger.debug(f"[Local Status] Found {len(paths)} potential documents in {root}")

        if not paths:
            return paths, CorpusIndex(tokenizer=self.scorer.tokenizer)

        logger.info("[Local Status] Extracting text and building corpus...")
        pairs = self.extractor.build_corpus(paths, max_workers=self.settings.extract_workers)
        corpus = CorpusIndex.from_pairs(pairs, tokenizer=self.scorer.tokenizer)
        logger.debug(f"[Local Status] Corpus built from {len(corpus)} usable documents.")
        return paths, corpus

    def run(self, topic: str, root: Optional[str] = None) -> SearchOutcome:
        """
        Search local documents for the topic, falling back online if needed.

        Args:
            topic: Free-text topic query
            root: Directory to scan (default: settings.search_root)
        """
        root = root or self.settings.search_root
        logger.debug(f"Target topic: '{topic}'")

        paths, corpus = self.build_corpus(root)
        ranked = self.scorer.score_documents(corpus, topic) if len(corpus) else []
        decision = self.policy.decide(ranked)

        outcome = SearchOutcome(
            topic=topic,
            root=str(root),
            paths_found=len(paths),
            corpus_size=len(corpus),
            ranked=ranked,
            decision=decision,
        )

        if not decision.needed:
            logger.debug("Local search yielded sufficient, high-relevance results. Skipping online fallback.")
            outcome.local_results = normalize_local_results(ranked, limit=self.settings.display_limit)
            return outcome

        logger.debug(f"Local search failed the quality check: {decision.reason}")
        if self.search_client is None:
            logger.info("No online search client configured - skipping fallback search")
            return outcome

        outcome.online_results = self.search_client.search(topic)
        outcome.online_searched = True
        return outcome
