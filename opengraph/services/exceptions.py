"""Errors raised while fetching and parsing Open Graph documents"""


class ServiceError(Exception):
    """Base for every error the OpenGraph services raise"""
    def __init__(self, message: str, error_code: str = None):
        self.message = message
        self.error_code = error_code
        super().__init__(self.message)


class ValidationError(ServiceError):
    """The request cannot start: the source URL is missing or unusable"""
    def __init__(self, message: str):
        super().__init__(message, "VALIDATION_ERROR")


class MissingURLError(ValidationError):
    def __init__(self):
        super().__init__("no URL given yet")


class URLValidationError(ValidationError):
    def __init__(self, message: str = "Invalid or unsafe URL provided"):
        super().__init__(message)


class FetchError(ServiceError):
    """Retrieving the document failed"""
    def __init__(self, message: str, error_code: str = "FETCH_ERROR"):
        super().__init__(message, error_code)


class HTTPFetchError(FetchError):
    """The server answered with an error status or could not be reached"""
    def __init__(self, status_code: int, message: str = None):
        super().__init__(message or f"HTTP request failed with status code {status_code}")
        self.status_code = status_code


class ServiceTimeoutError(FetchError):
    """The fetch deadline passed before the document arrived"""
    def __init__(self, message: str = "Operation timed out"):
        super().__init__(message, "TIMEOUT_ERROR")


class UnsupportedContentTypeError(FetchError):
    """The response is not an HTML document"""
    def __init__(self, content_type: str):
        super().__init__(f"Content type '{content_type}' is not supported, must be text/html", "CONTENT_TYPE_ERROR")
        self.content_type = content_type


class ParseError(ServiceError):
    """The document tree could not be built or walked"""
    def __init__(self, message: str = "Error parsing content"):
        super().__init__(message, "PARSE_ERROR")
