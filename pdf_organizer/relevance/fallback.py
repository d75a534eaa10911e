"""
Fallback decision: are local results good enough, or should we search online?

Fallback is needed if:
1. Too few documents were scored (fewer than min_results), OR
2. The top document's raw score is below the absolute quality threshold

The policy only signals the decision. Calling the web search is up to the caller.
"""

import logging
from dataclasses import dataclass
from typing import Sequence

from .scorer import DocumentScore

logger = logging.getLogger(__name__)

DEFAULT_MIN_RESULTS = 5
DEFAULT_SCORE_THRESHOLD = 0.5


@dataclass(frozen=True)
class FallbackDecision:
    """Outcome of the fallback check (with the numbers that drove it)"""
    needed: bool
    top_score: float
    result_count: int
    reason: str


class FallbackPolicy:
    """Quantity-or-quality check over a ranked result list."""

    def __init__(
        self,
        min_results: int = DEFAULT_MIN_RESULTS,
        score_threshold: float = DEFAULT_SCORE_THRESHOLD
    ):
        self.min_results = min_results
        self.score_threshold = score_threshold

    @staticmethod
    def top_score(results: Sequence[DocumentScore]) -> float:
        """Score of the highest-ranked result, 0.0 for an empty list."""
        return results[0].score if results else 0.0

    def needs_fallback(self, results: Sequence[DocumentScore]) -> bool:
        return len(results) < self.min_results or self.top_score(results) < self.score_threshold

    def decide(self, results: Sequence[DocumentScore]) -> FallbackDecision:
        top = self.top_score(results)
        count = len(results)

        if count < self.min_results:
            reason = f"only {count} scored documents (need {self.min_results})"
        elif top < self.score_threshold:
            reason = f"top score {top:.6f} below threshold {self.score_threshold:.6f}"
        else:
            reason = "local results sufficient"

        decision = FallbackDecision(
            needed=self.needs_fallback(results),
            top_score=top,
            result_count=count,
            reason=reason
        )

        logger.debug(f"Top document raw score: {top:.6f}")
        logger.debug(f"Absolute threshold: {self.score_threshold:.6f}")
        logger.debug(f"Fallback needed: {'YES' if decision.needed else 'NO'} ({reason})")
        return decision
