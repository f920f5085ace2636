"""Per-tag extractors and the rules by which each fragment contributes to an OpenGraph record"""

import logging
from dataclasses import dataclass
from typing import Union, List

from bs4 import Tag

from opengraph.core.models import OpenGraph, SCALAR_FIELDS, MEDIA_TYPES


logger = logging.getLogger(__name__)

OG_PREFIX = "og:"


def _attr_value(value: Union[str, List[str], None]) -> str:
    """BeautifulSoup returns multi-valued attributes such as ``rel`` as lists"""
    if value is None:
        return ""
    if isinstance(value, list):
        return " ".join(value)
    return str(value)


@dataclass
class Meta:
    """Represents any <meta ...> tag"""
    property: str = ""
    name: str = ""
    content: str = ""

    def og_property(self, strict: bool) -> str:
        """The lower-cased og: property this tag declares, or an empty string"""
        prop = self.property.strip().lower()
        if prop.startswith(OG_PREFIX):
            return prop
        # Some pages put og: properties in "name"
        name = self.name.strip().lower()
        if not strict and name.startswith(OG_PREFIX):
            return name
        return ""

    def contribute(self, og: OpenGraph) -> None:
        strict = og.intent.strict
        prop = self.og_property(strict)
        if not prop:
            if not strict and self.name.strip().lower() == "description":
                og.set_scalar("description", self.content)
            return
        if not self.content:
            return

        head, _, sub = prop[len(OG_PREFIX):].partition(":")
        if not sub:
            if head in SCALAR_FIELDS:
                og.set_scalar(head, self.content)
            elif head in MEDIA_TYPES:
                og.append_media(head, self.content)
            return

        if head == "locale" and sub == "alternate":
            og.locale_alternate.append(self.content)
        elif head in MEDIA_TYPES:
            if not og.qualify_media(head, sub, self.content):
                logger.debug(f"Dropping {prop}: no preceding og:{head}")


def meta_tag(node: Tag) -> Meta:
    """Construct Meta from a <meta> element"""
    meta = Meta()
    for key, value in node.attrs.items():
        if key == "property":
            meta.property = _attr_value(value)
        elif key == "name":
            meta.name = _attr_value(value)
        elif key == "content":
            meta.content = _attr_value(value)
    return meta


@dataclass
class Link:
    """Represents any <link ...> tag"""
    rel: str = ""
    href: str = ""

    def _rel(self) -> str:
        return " ".join(self.rel.lower().split())

    def is_favicon(self) -> bool:
        """If it can be the favicon of an OpenGraph record"""
        return self._rel() in ("shortcut icon", "icon")

    def is_canonical(self) -> bool:
        """If it can be the canonical URL of an OpenGraph record"""
        return self._rel() == "canonical"

    def contribute(self, og: OpenGraph) -> None:
        if not self.href:
            return
        if self.is_favicon():
            og.favicon = self.href
        elif self.is_canonical():
            og.canonical_url = self.href


def link_tag(node: Tag) -> Link:
    """Construct Link from a <link> element"""
    link = Link()
    for key, value in node.attrs.items():
        if key == "rel":
            link.rel = _attr_value(value)
        elif key == "href":
            link.href = _attr_value(value)
    return link


@dataclass
class Title:
    """Represents the <title> tag"""
    text: str = ""

    def contribute(self, og: OpenGraph) -> None:
        og.set_scalar("title", self.text)


def title_tag(node: Tag) -> Title:
    """Construct Title from a <title> element"""
    return Title(text=node.get_text().strip())
