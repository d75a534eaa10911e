"""Shared pytest fixtures: fake web search client, PDF factory, logging isolation"""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import List

import pymupdf
import pytest

from pdf_organizer.search import ScholarResult, SearchClientFactory, WebSearchClient


class FakeSearchClient(WebSearchClient):
    """In-memory search client: returns canned results, records queries"""

    def __init__(self, results: List[ScholarResult] = None):
        self.results = list(results or [])
        self.queries: List[str] = []
        self.closed = False

    def search(self, query: str) -> List[ScholarResult]:
        self.queries.append(query)
        return list(self.results)

    def get_client_info(self) -> dict:
        return {"name": "fake", "type": "in_memory", "endpoint": None}

    def close(self):
        self.closed = True


@pytest.fixture
def scholar_results():
    return [
        ScholarResult(
            title="AI-Powered Social Media Automation: A Survey",
            url="https://example.org/survey.pdf",
            snippet="We survey automation tools for social media scheduling, content generation and analytics across platforms."
        ),
        ScholarResult(
            title="Scheduling Posts with Reinforcement Learning",
            url="https://example.org/rl-posts",
            snippet="Short snippet."
        ),
    ]


@pytest.fixture
def fake_search_client(scholar_results):
    return FakeSearchClient(scholar_results)


@pytest.fixture
def make_pdf(tmp_path):
    """
    Factory creating a PDF with one page per text.

    Usage:
        path = make_pdf("paper.pdf", "page one text", "page two text")
    """
    def _make(name: str, *pages: str) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        doc = pymupdf.open()
        for text in pages:
            page = doc.new_page(width=595, height=842)  # A4 size
            page.insert_text((50, 50), text, fontsize=11)
        doc.save(str(path))
        doc.close()
        return path

    return _make


@pytest.fixture
def restore_root_logger():
    """Undo setup_logging() side effects on the root logger"""
    root = logging.getLogger()
    saved_level = root.level

    yield

    # Only the handler types setup_logging() creates; pytest's capture
    # handlers are subclasses and are managed by pytest itself
    for handler in list(root.handlers):
        if type(handler) in (logging.StreamHandler, RotatingFileHandler):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(saved_level)


@pytest.fixture(autouse=True)
def reset_search_factory():
    """Search client singleton must not leak between tests"""
    yield
    SearchClientFactory.cleanup()
