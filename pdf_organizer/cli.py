"""
PDF Organizer command line interface.

Usage:
    pdf-organizer "AI-Powered Social Media Automation App" --root ~/Downloads/pdfs
    pdf-organizer "graph neural networks" --no-fallback --log-level DEBUG
"""

import argparse
import logging
import sys
from typing import List, Optional

from .config import Settings
from .logging_config import level_from_name, setup_logging
from .pipeline import OrganizerPipeline, SearchOutcome
from .presenter import format_local_results, format_online_results
from .search import SearchClientFactory, get_search_client

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pdf-organizer",
        description="Rank local documents against a topic, with Google Scholar fallback"
    )
    parser.add_argument("topic", help="Topic to search for")
    parser.add_argument("--root", help="Directory to scan (default: SEARCH_ROOT or .)")
    parser.add_argument("--threshold", type=float, help="Minimum top raw score for local results")
    parser.add_argument("--min-results", type=int, help="Minimum number of scored local documents")
    parser.add_argument("--no-fallback", action="store_true", help="Never query the web")
    parser.add_argument("--log-level", help="Console log level (default: LOG_LEVEL or INFO)")
    return parser


def render(outcome: SearchOutcome, settings: Settings) -> str:
    """Console report for one run."""
    lines = [
        f"Target Topic: '{outcome.topic}'",
        "",
        f"[Local Status] Found {outcome.paths_found} potential documents in {outcome.root}",
        f"[Local Status] Corpus built from {outcome.corpus_size} usable documents.",
        "",
    ]

    if not outcome.decision.needed:
        lines.append("[Next Step] Local search yielded sufficient, high-relevance results. Skipping online fallback.")
        lines.append("")
        lines.append("--- Local Search Results (TF-IDF Ranked) ---")
        lines.append(format_local_results(outcome.local_results))
        return "\n".join(lines)

    lines.append(f"[Next Step] Local search failed the quality check ({outcome.decision.reason}).")
    lines.append("")
    if not outcome.online_searched:
        lines.append("[Online Result] Online fallback disabled.")
        return "\n".join(lines)

    lines.append("--- Online Search Results (Google Scholar) ---")
    lines.append(format_online_results(
        outcome.online_results,
        limit=settings.display_limit,
        snippet_width=settings.snippet_width
    ))
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = Settings.from_env().with_overrides(
            search_root=args.root,
            score_threshold=args.threshold,
            min_results=args.min_results,
            log_level=args.log_level.upper() if args.log_level else None,
            search_provider="none" if args.no_fallback else None,
        )
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    setup_logging(
        log_file=settings.log_file,
        console_level=level_from_name(settings.log_level),
        file_level=logging.DEBUG  # Always DEBUG in file for troubleshooting
    )

    pipeline = OrganizerPipeline(settings, search_client=get_search_client(settings))
    try:
        outcome = pipeline.run(args.topic)
    finally:
        SearchClientFactory.cleanup()

    print(render(outcome, settings))
    return 0


if __name__ == "__main__":
    sys.exit(main())
