import logging
from abc import ABC, abstractmethod
from typing import Optional

import httpx

from opengraph.core.config import settings
from .url_validator import URLValidatorInterface
from .exceptions import (
    HTTPFetchError,
    MissingURLError,
    ServiceTimeoutError,
    UnsupportedContentTypeError,
    URLValidationError,
)

logger = logging.getLogger(__name__)

HTML_CONTENT_TYPE = "text/html"


class WebFetcherInterface(ABC):
    """Interface for fetching web content"""

    @abstractmethod
    async def fetch_html(
        self,
        url: str,
        client: Optional[httpx.AsyncClient] = None,
        timeout: Optional[float] = None,
    ) -> str:
        pass


class WebFetcher(WebFetcherInterface):
    """
    Fetches HTML documents for Open Graph extraction.

    A caller-supplied ``httpx.AsyncClient`` is used as-is and left open; otherwise a
    short-lived client is created per request. ``timeout`` bounds the whole request.
    """

    def __init__(self, url_validator: URLValidatorInterface):
        self.url_validator = url_validator

    async def fetch_html(
        self,
        url: str,
        client: Optional[httpx.AsyncClient] = None,
        timeout: Optional[float] = None,
    ) -> str:
        """Fetch HTML content from a URL with validation"""
        if not url:
            raise MissingURLError()

        logger.info(f"Fetching HTML content from URL: {url}")

        if not self.url_validator.validate(url):
            logger.warning(f"Invalid or unsafe URL provided: {url}")
            raise URLValidationError("Invalid or unsafe URL provided")

        if timeout is None:
            timeout = settings.fetch_timeout
        headers = {
            "User-Agent": settings.fetch_user_agent
        }

        try:
            if client is not None:
                res = await client.get(url, headers=headers, timeout=timeout)
                return self._read_html(url, res)
            async with httpx.AsyncClient(timeout=timeout, follow_redirects=settings.fetch_follow_redirects) as own_client:
                res = await own_client.get(url, headers=headers)
                return self._read_html(url, res)

        except httpx.TimeoutException as e:
            logger.error(f"Timed out fetching URL {url}: {str(e)}")
            raise ServiceTimeoutError(f"Timed out after {timeout} seconds fetching {url}")
        except httpx.HTTPStatusError as e:
            logger.error(f"HTTP error occurred while fetching URL {url}: {e}")
            raise HTTPFetchError(status_code=e.response.status_code, message=f"HTTP error occurred: {e}")
        except httpx.RequestError as e:
            logger.error(f"Request error occurred while fetching URL {url}: {str(e)}")
            raise HTTPFetchError(status_code=502, message=f"Request error occurred: {str(e)}")

    def _read_html(self, url: str, res: httpx.Response) -> str:
        res.raise_for_status()

        content_type = res.headers.get("content-type", "")
        if not content_type.strip().lower().startswith(HTML_CONTENT_TYPE):
            logger.warning(f"URL does not return HTML content. Content-Type: {content_type}")
            raise UnsupportedContentTypeError(content_type)

        logger.info(f"Successfully fetched HTML content from URL: {url}")
        return res.text
