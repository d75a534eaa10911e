"""
Factory to create web search clients based on configuration.
"""

import logging
from typing import Optional, Tuple

from ..config import Settings
from .base import WebSearchClient
from .scholar import GoogleScholarClient

logger = logging.getLogger(__name__)


class SearchClientFactory:
    """Factory to create search client instances based on configuration."""

    _instance: Optional[WebSearchClient] = None  # Singleton cache
    _instance_key: Optional[Tuple[str, float]] = None  # (provider, timeout) of the cached client

    @classmethod
    def create(cls, settings: Settings, force_reload: bool = False) -> Optional[WebSearchClient]:
        """
        Create search client from settings.

        Supported providers:
            - scholar: Google Scholar HTML scraping (default)
            - none: online fallback disabled

        Args:
            settings: Application settings (SEARCH_PROVIDER, SEARCH_TIMEOUT)
            force_reload: If True, recreate instance even if cached

        Returns:
            Search client, or None if disabled

        The cached client is replaced (and closed) when the provider or
        timeout differs from the settings it was built with.
        """
        provider = settings.search_provider.lower()

        if provider == "none":
            logger.info("Online search fallback disabled (SEARCH_PROVIDER=none)")
            return None

        key = (provider, settings.search_timeout)
        if cls._instance is not None and not force_reload and cls._instance_key == key:
            return cls._instance

        if provider == "scholar":
            cls.cleanup()
            logger.debug(f"Creating Google Scholar client (timeout={settings.search_timeout}s)")
            cls._instance = GoogleScholarClient(timeout=settings.search_timeout)
            cls._instance_key = key
            return cls._instance

        raise ValueError(
            f"Unknown search provider: {provider}. "
            f"Valid options: scholar, none"
        )

    @classmethod
    def cleanup(cls):
        """Cleanup cached client instance."""
        if cls._instance is not None:
            logger.debug("Cleaning up search client instance")
            cls._instance.close()
            cls._instance = None
            cls._instance_key = None
