"""Parse "The Open Graph Protocol" metadata of web pages. See https://ogp.me/."""

from .core.models import OpenGraph, Intent, Image, Audio, Video
from .services.html_parser import HTMLParser, walk, parse
from .services.opengraph_service import fetch

__all__ = [
    "OpenGraph",
    "Intent",
    "Image",
    "Audio",
    "Video",
    "HTMLParser",
    "walk",
    "parse",
    "fetch",
]
