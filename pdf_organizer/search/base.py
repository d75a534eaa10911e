"""
Abstract base class for web search clients.

All search clients must implement this interface to be swappable
(and to be replaced by fakes in tests).
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List


@dataclass
class ScholarResult:
    """Single online search result"""
    title: str
    url: str            # Direct PDF link or HTML page link
    snippet: str = ""


class WebSearchClient(ABC):
    """
    Abstract base class for web search clients.

    Implementations must not raise on network or parse failures:
    they return an empty list instead.
    """

    @abstractmethod
    def search(self, query: str) -> List[ScholarResult]:
        """
        Search the web for the query.

        Args:
            query: Search topic

        Returns:
            Results in engine order (empty on failure or zero matches)
        """
        pass

    @abstractmethod
    def get_client_info(self) -> dict:
        """
        Get information about the search backend.

        Returns:
            Dict with keys: name, type, endpoint
        """
        pass

    def close(self):
        """Optional cleanup (close HTTP sessions, etc.)"""
        pass
