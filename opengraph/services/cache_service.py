import logging
from abc import ABC, abstractmethod
from typing import Optional, Tuple

from cachetools import TTLCache

from opengraph.core.config import settings
from opengraph.core.models import OpenGraph

logger = logging.getLogger(__name__)

# (source URL, strict)
CacheKey = Tuple[str, bool]


class CacheInterface(ABC):
    """Interface for caching extracted OpenGraph records"""

    @abstractmethod
    def get(self, key: CacheKey) -> Optional[OpenGraph]:
        """
        Get a record from cache.

        Args:
            key: Source URL and strict flag the record was parsed with

        Returns:
            The cached OpenGraph record if found, None otherwise
        """
        pass

    @abstractmethod
    def set(self, key: CacheKey, value: OpenGraph) -> None:
        pass


class OpenGraphCache(CacheInterface):
    """
    TTL cache for OpenGraph records with configurable size and TTL.
    """

    def __init__(self, maxsize: int = None, ttl: float = None):
        """
        Initialize the cache.

        Args:
            maxsize: Maximum number of records to cache (uses config default if None)
            ttl: Time to live in seconds (uses config default if None)
        """
        if maxsize is None:
            maxsize = settings.cache_maxsize
        if ttl is None:
            ttl = settings.cache_ttl_seconds

        self.cache: TTLCache = TTLCache(maxsize=maxsize, ttl=ttl)

    def get(self, key: CacheKey) -> Optional[OpenGraph]:
        cached_item = self.cache.get(key)
        if cached_item is not None:
            logger.debug(f"Cache hit for key: {key}")
        else:
            logger.debug(f"Cache miss for key: {key}")
        return cached_item

    def set(self, key: CacheKey, value: OpenGraph) -> None:
        logger.debug(f"Storing OpenGraph record in cache for key: {key}")
        self.cache[key] = value
