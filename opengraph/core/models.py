from typing import Optional, Dict, Any, List
from dataclasses import dataclass, field, asdict
from urllib.parse import urljoin

import httpx


def _to_int(value: str) -> Optional[int]:
    try:
        return int(value.strip())
    except (TypeError, ValueError):
        return None


@dataclass
class Intent:
    """
    How an OpenGraph record is fetched and parsed.
    Has no meaning for the Open Graph protocol itself.
    """
    url: str = ""
    strict: bool = False
    client: Optional[httpx.AsyncClient] = None
    timeout: Optional[float] = None


@dataclass
class Image:
    """og:image and its structured properties"""
    url: str = ""
    secure_url: str = ""
    type: str = ""
    width: Optional[int] = None
    height: Optional[int] = None
    alt: str = ""

    def qualify(self, name: str, content: str) -> None:
        """Apply a qualifying property such as ``width`` to this entry"""
        if name == "url":
            self.url = content
        elif name == "secure_url":
            self.secure_url = content
        elif name == "type":
            self.type = content
        elif name == "alt":
            self.alt = content
        elif name in ("width", "height"):
            size = _to_int(content)
            if size is not None:
                setattr(self, name, size)


@dataclass
class Video:
    """og:video and its structured properties"""
    url: str = ""
    secure_url: str = ""
    type: str = ""
    width: Optional[int] = None
    height: Optional[int] = None

    def qualify(self, name: str, content: str) -> None:
        if name == "url":
            self.url = content
        elif name == "secure_url":
            self.secure_url = content
        elif name == "type":
            self.type = content
        elif name in ("width", "height"):
            size = _to_int(content)
            if size is not None:
                setattr(self, name, size)


@dataclass
class Audio:
    """og:audio and its structured properties"""
    url: str = ""
    secure_url: str = ""
    type: str = ""

    def qualify(self, name: str, content: str) -> None:
        if name == "url":
            self.url = content
        elif name == "secure_url":
            self.secure_url = content
        elif name == "type":
            self.type = content


# Fields a single og: property may set, in the order they are serialized
SCALAR_FIELDS = ("title", "type", "url", "description", "determiner", "locale", "site_name")
MEDIA_TYPES = {"image": Image, "audio": Audio, "video": Video}


@dataclass
class OpenGraph:
    """
    Represents web page information according to the Open Graph protocol <ogp.me>,
    plus a few unofficial fields (favicon, canonical URL).
    """
    # Basic metadata
    title: str = ""
    type: str = ""
    image: List[Image] = field(default_factory=list)
    url: str = ""

    # Optional metadata
    audio: List[Audio] = field(default_factory=list)
    description: str = ""
    determiner: str = ""
    locale: str = ""
    locale_alternate: List[str] = field(default_factory=list)
    site_name: str = ""
    video: List[Video] = field(default_factory=list)

    # Additional (unofficial)
    favicon: str = ""
    canonical_url: str = ""

    intent: Intent = field(default_factory=Intent, repr=False, compare=False)

    @classmethod
    def new(cls, url: str, strict: bool = False) -> "OpenGraph":
        return cls(intent=Intent(url=url, strict=strict))

    def set_scalar(self, name: str, value: str) -> None:
        """Set a scalar field unless an earlier tag already filled it"""
        if value and not getattr(self, name):
            setattr(self, name, value)

    def append_media(self, kind: str, url: str) -> None:
        getattr(self, kind).append(MEDIA_TYPES[kind](url=url))

    def qualify_media(self, kind: str, name: str, content: str) -> bool:
        """
        Attach a qualifying property to the most recent entry of ``kind``.
        ``og:{kind}:url`` with no entry yet starts one, as it is equivalent to ``og:{kind}``.

        Returns:
            False when there is no entry to qualify and the property was dropped
        """
        entries = getattr(self, kind)
        if not entries:
            if name != "url":
                return False
            self.append_media(kind, content)
            return True
        entries[-1].qualify(name, content)
        return True

    def to_absolute(self) -> "OpenGraph":
        """Resolve relative URLs in place against the intent URL"""
        base = self.intent.url
        if not base:
            return self

        def resolve(value: str) -> str:
            return urljoin(base, value) if value else value

        self.url = resolve(self.url)
        self.favicon = resolve(self.favicon)
        self.canonical_url = resolve(self.canonical_url)
        for entry in [*self.image, *self.audio, *self.video]:
            entry.url = resolve(entry.url)
            entry.secure_url = resolve(entry.secure_url)
        return self

    def to_dict(self) -> Dict[str, Any]:
        """Convert the record to a dictionary representation"""
        return {
            "title": self.title,
            "type": self.type,
            "image": [asdict(image) for image in self.image],
            "url": self.url,
            "audio": [asdict(audio) for audio in self.audio],
            "description": self.description,
            "determiner": self.determiner,
            "locale": self.locale,
            "locale_alternate": list(self.locale_alternate),
            "site_name": self.site_name,
            "video": [asdict(video) for video in self.video],
            "favicon": self.favicon,
            "canonical_url": self.canonical_url,
        }
