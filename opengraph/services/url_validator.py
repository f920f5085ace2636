import ipaddress
import re
from abc import ABC, abstractmethod
from urllib.parse import urlparse


class URLValidatorInterface(ABC):
    """Interface for source URL validation"""

    @abstractmethod
    def validate(self, url: str) -> bool:
        """
        Check that a source URL is well formed and safe to fetch.

        Args:
            url: The URL string to validate

        Returns:
            True if the URL may be fetched, False otherwise
        """
        pass


class URLValidator(URLValidatorInterface):
    """
    Accepts absolute http(s) URLs and rejects loopback and private hosts (SSRF).
    """

    # Hostnames that resolve to the local machine
    blocked_hostnames = (r"^localhost$", r"\.localhost$", r"\.local$")

    def validate(self, url: str) -> bool:
        if not url:
            return False
        try:
            parsed = urlparse(url)
            if parsed.scheme not in ("http", "https"):
                return False
            if not parsed.netloc or not parsed.hostname:
                return False
            # Raises ValueError for out of range ports
            port = parsed.port
            if port is not None and port < 1:
                return False
        except ValueError:
            return False

        hostname = parsed.hostname.lower()
        for pattern in self.blocked_hostnames:
            if re.search(pattern, hostname):
                return False

        try:
            address = ipaddress.ip_address(hostname)
        except ValueError:
            # Not an IP literal
            return True
        return not (address.is_private or address.is_loopback or address.is_link_local or address.is_unspecified)
