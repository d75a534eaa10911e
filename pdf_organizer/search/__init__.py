"""
Online search fallback for PDF Organizer.

Usage:
    # Get client (configured from settings):
    from pdf_organizer.search import get_search_client

    client = get_search_client(settings)
    if client:
        results = client.search("social media automation")

    # Or create a specific implementation:
    from pdf_organizer.search import GoogleScholarClient

    client = GoogleScholarClient(timeout=10)
"""

from typing import Optional

from ..config import Settings
from .base import ScholarResult, WebSearchClient
from .scholar import GoogleScholarClient, parse_results
from .factory import SearchClientFactory


def get_search_client(settings: Settings, force_reload: bool = False) -> Optional[WebSearchClient]:
    """
    Get configured search client (factory convenience function).

    Returns None if online fallback is disabled via SEARCH_PROVIDER=none
    """
    return SearchClientFactory.create(settings, force_reload=force_reload)


__all__ = [
    'ScholarResult',
    'WebSearchClient',
    'GoogleScholarClient',
    'parse_results',
    'SearchClientFactory',
    'get_search_client',
]
