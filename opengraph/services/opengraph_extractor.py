import logging
from abc import ABC, abstractmethod
from typing import Optional

from opengraph.core.config import settings
from opengraph.core.models import OpenGraph
from .html_parser import HTMLParser


logger = logging.getLogger(__name__)


class OpenGraphExtractorInterface(ABC):
    """Interface for turning an HTML document into an OpenGraph record"""

    @abstractmethod
    def extract(self, html: str, url: str, strict: bool = False) -> OpenGraph:
        pass


class OpenGraphExtractor(OpenGraphExtractorInterface):
    """
    Extracts an OpenGraph record from HTML and optionally resolves its relative URLs
    against the source URL.
    """

    def __init__(self, resolve_relative_urls: Optional[bool] = None):
        if resolve_relative_urls is None:
            resolve_relative_urls = settings.resolve_relative_urls
        self.resolve_relative_urls = resolve_relative_urls

    def extract(self, html: str, url: str, strict: bool = False) -> OpenGraph:
        """
        Raises:
            ParseError: If the document tree cannot be built or walked
        """
        logger.info(f"Extracting OpenGraph from HTML for URL: {url} (strict={strict})")

        og = HTMLParser(html, url, strict=strict).parse()
        if self.resolve_relative_urls:
            og.to_absolute()

        logger.info(
            f"Extracted OpenGraph for URL: {url} "
            f"({len(og.image)} images, {len(og.video)} videos, {len(og.audio)} audio)"
        )
        return og
