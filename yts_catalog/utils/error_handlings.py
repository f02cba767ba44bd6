from typing import Optional


class CatalogError(Exception):
    """Base exception for movie catalog errors"""
    pass

class InvalidQueryError(CatalogError, ValueError):
    """Raised when a query argument cannot be serialized, before any request is sent"""
    pass

class CatalogTransportError(CatalogError):
    """Raised when the request does not produce a usable response"""
    pass

class CatalogConnectionError(CatalogTransportError):
    """Raised when the service cannot be reached or the request times out"""
    pass

class CatalogHTTPError(CatalogTransportError):
    """Raised when the service answers with a non-2xx status"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code

class CatalogDecodeError(CatalogError):
    """Raised when the response body is not the expected JSON envelope"""
    pass

class CatalogUnavailableError(CatalogError):
    """Raised by the status probe when the service is not responding correctly"""
    pass

class EmptyResultError(CatalogUnavailableError):
    """Raised by the status probe when the service answered with no movies"""
    pass
