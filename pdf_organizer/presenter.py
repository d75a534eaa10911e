"""
Display helpers for ranked local results and online fallback results.

Local scores are shown as a percentage of the top raw score. Only
positive scores are shown; a zero reference score means nothing is shown.
"""

from dataclasses import dataclass
from pathlib import PurePath
from typing import List, Sequence

from .relevance import DocumentScore
from .search import ScholarResult

DEFAULT_LIMIT = 5
DEFAULT_SNIPPET_WIDTH = 70


@dataclass
class DisplayResult:
    """Local result ready for display"""
    rank: int
    doc_id: str
    display_name: str
    score: float        # Raw relevance score
    percent: float      # Score relative to the top result (0-100)


def reference_score(results: Sequence[DocumentScore]) -> float:
    """Top raw score if positive, else 0.0 (nothing displayable)."""
    if results and results[0].score > 0.0:
        return results[0].score
    return 0.0


def display_name(doc_id: str) -> str:
    """Final path component ("/a/b/paper.pdf" → "paper.pdf", Windows separators too)"""
    return PurePath(doc_id.replace("\\", "/")).name or doc_id


def normalize_local_results(
    results: Sequence[DocumentScore],
    limit: int = DEFAULT_LIMIT
) -> List[DisplayResult]:
    """
    Convert the top results to percentages of the top score.

    Stops at the first non-positive score or after `limit` results.
    """
    max_score = reference_score(results)
    if max_score <= 0.0:
        return []

    display = []
    for result in results:
        if len(display) >= limit or result.score <= 0.0:
            break
        display.append(DisplayResult(
            rank=len(display) + 1,
            doc_id=result.doc_id,
            display_name=display_name(result.doc_id),
            score=result.score,
            percent=(result.score / max_score) * 100.0
        ))
    return display


def truncate_snippet(snippet: str, width: int = DEFAULT_SNIPPET_WIDTH) -> str:
    if len(snippet) > width:
        return snippet[:width] + "..."
    return snippet


def format_local_results(display: Sequence[DisplayResult]) -> str:
    if not display:
        return "No relevant local documents to display."

    lines = [f"Top {len(display)} Most Relevant Local Documents (Score indicates relevance):"]
    for item in display:
        lines.append(f"{item.rank}. [{item.percent:.2f}%] - {item.display_name}")
    return "\n".join(lines)


def format_online_results(
    results: Sequence[ScholarResult],
    limit: int = DEFAULT_LIMIT,
    snippet_width: int = DEFAULT_SNIPPET_WIDTH
) -> str:
    if not results:
        return "[Online Result] No online results found or fetching failed (check network/firewall)."

    shown = results[:limit]
    lines = [f"Top {len(shown)} Online Results:"]
    for i, res in enumerate(shown, start=1):
        lines.append(f"{i}. Title: {res.title}")
        lines.append(f"   URL: {res.url}")
        lines.append(f"   Snippet: {truncate_snippet(res.snippet, snippet_width)}")
    return "\n".join(lines)
