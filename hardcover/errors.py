# hardcover/errors.py
"""
Error taxonomy for the Hardcover list tools.
"""

from typing import Any, Dict, List, Optional


class HardcoverError(Exception):
    """Base class for every error raised by this package"""


class ConfigError(HardcoverError):
    """Required configuration is missing or invalid"""


class FetchError(HardcoverError):
    """A request against an HTTP/GraphQL endpoint did not produce usable data"""


class TransportError(FetchError):
    """Network, DNS or timeout failure before any HTTP response arrived"""


class HttpError(FetchError):
    """The endpoint answered with a non-2xx status"""

    def __init__(self, status_code: int, body: str = "", url: Optional[str] = None):
        self.status_code = status_code
        self.body = body
        self.url = url
        message = f"HTTP {status_code}"
        if url:
            message += f" for {url}"
        if body:
            message += f": {body[:200]}"
        super().__init__(message)


class GraphQLError(FetchError):
    """
    A 2xx response whose payload carries an ``errors`` array.

    The upstream messages are kept verbatim in ``errors`` and ``messages``.
    """

    def __init__(self, errors: List[Dict[str, Any]]):
        self.errors = errors
        self.messages = [
            err.get("message", str(err)) if isinstance(err, dict) else str(err)
            for err in errors
        ]
        super().__init__("; ".join(self.messages) or "GraphQL error")


class ShapeError(FetchError):
    """The response is missing fields the caller depends on"""


class EmptyResult(ShapeError):
    """The payload has no ``data`` or no expected top-level field"""


class InvariantViolation(HardcoverError):
    """A verification check's assertion failed"""
