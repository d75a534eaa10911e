"""
Unit tests for the fallback decision policy.
"""

import pytest
from pdf_organizer.relevance.fallback import FallbackDecision, FallbackPolicy
from pdf_organizer.relevance.scorer import DocumentScore

pytestmark = pytest.mark.unit


def ranked(top_score, count):
    """Ranked list with the given top score followed by smaller scores"""
    return [DocumentScore(doc_id=f"doc{i}.pdf", score=top_score / (i + 1)) for i in range(count)]


class TestFallbackPolicy:
    """Quantity OR quality rule"""

    def test_too_few_results(self):
        assert FallbackPolicy().needs_fallback(ranked(0.9, 3)) is True

    def test_top_score_below_threshold(self):
        assert FallbackPolicy().needs_fallback(ranked(0.3, 6)) is True

    def test_sufficient_local_results(self):
        assert FallbackPolicy().needs_fallback(ranked(0.7, 6)) is False

    def test_empty_results(self):
        policy = FallbackPolicy()
        assert policy.needs_fallback([]) is True
        assert policy.top_score([]) == 0.0

    def test_boundaries(self):
        """Exactly min_results and exactly the threshold pass"""
        policy = FallbackPolicy()
        assert policy.needs_fallback(ranked(0.5, 5)) is False
        assert policy.needs_fallback(ranked(0.5, 4)) is True
        assert policy.needs_fallback(ranked(0.4999, 5)) is True

    def test_negative_top_score(self):
        assert FallbackPolicy().needs_fallback(ranked(-1.0, 10)) is True

    def test_custom_threshold_and_count(self):
        policy = FallbackPolicy(min_results=1, score_threshold=0.1)
        assert policy.needs_fallback(ranked(0.2, 1)) is False
        assert policy.needs_fallback(ranked(0.05, 3)) is True

    def test_pure_function(self):
        results = ranked(0.7, 6)
        snapshot = list(results)
        policy = FallbackPolicy()
        assert policy.needs_fallback(results) == policy.needs_fallback(results)
        assert results == snapshot


class TestFallbackDecision:
    """decide() reports the numbers behind the decision"""

    def test_decision_for_too_few(self):
        decision = FallbackPolicy().decide(ranked(0.9, 3))
        assert isinstance(decision, FallbackDecision)
        assert decision.needed is True
        assert decision.top_score == pytest.approx(0.9)
        assert decision.result_count == 3
        assert "only 3" in decision.reason

    def test_decision_for_low_score(self):
        decision = FallbackPolicy().decide(ranked(0.3, 6))
        assert decision.needed is True
        assert "below threshold" in decision.reason

    def test_decision_sufficient(self):
        decision = FallbackPolicy().decide(ranked(0.7, 6))
        assert decision.needed is False
        assert decision.reason == "local results sufficient"

    def test_decision_empty(self):
        decision = FallbackPolicy().decide([])
        assert decision.needed is True
        assert decision.top_score == 0.0
        assert decision.result_count == 0
