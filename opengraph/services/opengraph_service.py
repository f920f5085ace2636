import logging
from typing import Dict, Any, Optional

import httpx
from fastapi import HTTPException

from opengraph.core.models import OpenGraph
from .cache_service import CacheInterface
from .exceptions import (
    ServiceError,
    ValidationError,
    UnsupportedContentTypeError,
    FetchError,
    ServiceTimeoutError,
)
from .opengraph_extractor import OpenGraphExtractor, OpenGraphExtractorInterface
from .url_validator import URLValidator
from .web_fetcher import WebFetcher, WebFetcherInterface

logger = logging.getLogger(__name__)


class OpenGraphService:
    """
    Fetches, extracts and caches OpenGraph records for the HTTP API
    """

    def __init__(
        self,
        web_fetcher: WebFetcherInterface,
        extractor: OpenGraphExtractorInterface,
        cache: CacheInterface
    ):
        self.web_fetcher = web_fetcher
        self.extractor = extractor
        self.cache = cache

    async def get_opengraph(self, url: str, strict: bool = False) -> Dict[str, Any]:
        """
        Get the OpenGraph record for a URL with caching.

        Args:
            url: The page to read
            strict: Only read <meta> tags

        Returns:
            Dictionary of the record's fields plus a ``cached`` flag

        Raises:
            HTTPException: If the URL is invalid or processing fails
        """
        logger.info(f"Getting OpenGraph for URL: {url}")

        if not url or not url.strip():
            logger.warning("Empty or whitespace-only URL parameter provided")
            raise HTTPException(status_code=400, detail="URL parameter is required")

        url = url.strip()
        key = (url, strict)
        try:
            cached = self.cache.get(key)
            if cached is not None:
                logger.info(f"OpenGraph retrieved from cache for URL: {url}")
                result = cached.to_dict()
                result["cached"] = True
                return result

            html = await self.web_fetcher.fetch_html(url)
            og = self.extractor.extract(html, url, strict=strict)

            self.cache.set(key, og)
            logger.info(f"OpenGraph extracted and cached for URL: {url}")

            result = og.to_dict()
            result["cached"] = False
            return result
        except ValidationError as e:
            logger.warning(f"URL validation failed for URL {url}: {e.message}")
            raise HTTPException(status_code=400, detail=e.message)
        except UnsupportedContentTypeError as e:
            raise HTTPException(status_code=415, detail=e.message)
        except ServiceTimeoutError as e:
            raise HTTPException(status_code=504, detail=e.message)
        except FetchError as e:
            raise HTTPException(status_code=502, detail=e.message)
        except ServiceError as e:
            logger.error(f"Service error occurred while processing URL {url}: {e.message}")
            raise HTTPException(status_code=500, detail=e.message)


async def fetch(
    url: str,
    strict: bool = False,
    client: Optional[httpx.AsyncClient] = None,
    timeout: Optional[float] = None,
) -> OpenGraph:
    """
    Fetch a page and construct its OpenGraph record.

    The deadline is enforced through ``timeout``; cancelling the awaiting task
    cancels the request.

    Raises:
        MissingURLError, URLValidationError, UnsupportedContentTypeError,
        HTTPFetchError, ServiceTimeoutError, ParseError
    """
    html = await WebFetcher(URLValidator()).fetch_html(url, client=client, timeout=timeout)
    og = OpenGraphExtractor().extract(html, url, strict=strict)
    og.intent.client = client
    og.intent.timeout = timeout
    return og
