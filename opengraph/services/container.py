from typing import Dict, Type
from .url_validator import URLValidator, URLValidatorInterface
from .web_fetcher import WebFetcher, WebFetcherInterface
from .opengraph_extractor import OpenGraphExtractor, OpenGraphExtractorInterface
from .cache_service import OpenGraphCache, CacheInterface
from .opengraph_service import OpenGraphService


class ServiceContainer:
    """Container for managing service dependencies with dependency injection"""

    def __init__(self):
        self._services: Dict[Type, object] = {}
        self._register_services()

    def _register_services(self) -> None:
        """Register all services in dependency order"""
        self._services[URLValidatorInterface] = URLValidator()
        self._services[WebFetcherInterface] = WebFetcher(
            self._services[URLValidatorInterface]
        )
        self._services[OpenGraphExtractorInterface] = OpenGraphExtractor()
        self._services[CacheInterface] = OpenGraphCache()

        self._services[OpenGraphService] = OpenGraphService(
            self._services[WebFetcherInterface],
            self._services[OpenGraphExtractorInterface],
            self._services[CacheInterface]
        )

    def get_opengraph_service(self) -> OpenGraphService:
        """Get the OpenGraph service instance"""
        return self._services[OpenGraphService]  # type: ignore


container = ServiceContainer()


def get_opengraph_service() -> OpenGraphService:
    """FastAPI dependency returning the shared OpenGraph service"""
    return container.get_opengraph_service()
