"""HTML document walk for Open Graph extraction"""

import logging
from enum import Enum
from typing import Optional, Callable, Dict, Tuple, Any

from bs4 import BeautifulSoup, NavigableString, ParserRejectedMarkup, Tag

from opengraph.core.config import settings
from opengraph.core.models import OpenGraph
from .exceptions import ParseError
from .tags import meta_tag, link_tag, title_tag


logger = logging.getLogger(__name__)


class HTMLTag(str, Enum):
    """Element names that contribute to an OpenGraph record"""
    META = "meta"
    TITLE = "title"
    LINK = "link"


# tag -> (extractor, processed in strict mode)
_DISPATCH: Dict[HTMLTag, Tuple[Callable[[Tag], Any], bool]] = {
    HTMLTag.META: (meta_tag, True),
    HTMLTag.TITLE: (title_tag, False),
    HTMLTag.LINK: (link_tag, False),
}
_TAG_NAMES = {tag.value: tag for tag in HTMLTag}


def walk(root: Tag, og: OpenGraph) -> int:
    """
    Walk the tree depth-first in document order and let every recognised
    element contribute to ``og``.

    A dispatched element's children are not visited. Every other node,
    including text and comments, is descended into.

    Args:
        root: Document or element to start from
        og: Record to populate, owned by this walk

    Returns:
        Number of fragments that were dispatched

    Raises:
        ParseError: If the tree holds a node that is neither an element nor a string
    """
    dispatched = 0
    stack = [root]
    while stack:
        node = stack.pop()
        if isinstance(node, NavigableString):
            continue
        if not isinstance(node, Tag):
            raise ParseError(f"Unexpected node in document tree: {type(node).__name__}")

        tag = _TAG_NAMES.get((node.name or "").lower())
        if tag is not None:
            extractor, in_strict = _DISPATCH[tag]
            if in_strict or not og.intent.strict:
                extractor(node).contribute(og)
                dispatched += 1
                continue

        # Reverse so the leftmost child is popped first
        stack.extend(reversed(node.contents))

    logger.debug(f"Dispatched {dispatched} tags for URL: {og.intent.url}")
    return dispatched


class HTMLParser:
    """Builds a document tree and extracts an OpenGraph record from it"""

    def __init__(self, html: str, url: str = "", strict: Optional[bool] = None, features: Optional[str] = None):
        """
        Initialize the HTML parser

        Args:
            html: HTML content to parse
            url: Source URL, carried on the record for context
            strict: Only read <meta> tags (defaults to settings.opengraph_strict)
            features: BeautifulSoup tree builder (defaults to settings.html_parser_features)
        """
        self.html = html
        self.url = url
        self.strict = settings.opengraph_strict if strict is None else strict
        try:
            self.soup = BeautifulSoup(html, features or settings.html_parser_features)
        except ParserRejectedMarkup as e:
            logger.error(f"Tree builder rejected markup for URL {url}: {str(e)}")
            raise ParseError(f"Could not build document tree: {str(e)}")

    def parse(self) -> OpenGraph:
        """Walk the document into a fresh OpenGraph record"""
        og = OpenGraph.new(self.url, strict=self.strict)
        walk(self.soup, og)
        return og


def parse(html: str, url: str = "", strict: bool = False) -> OpenGraph:
    """Parse HTML and construct an OpenGraph record"""
    return HTMLParser(html, url, strict=strict).parse()
