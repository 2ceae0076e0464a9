"""Protocols for skill content sources.

The installer only needs text for a URL. Apps and tests can provide any
implementation (HTTP, local mirror, canned responses).
"""

from typing import Protocol
from typing import runtime_checkable

from .schema import FetchResult


@runtime_checkable
class FetcherProtocol(Protocol):
    """Protocol for retrieving skill documents and their referenced files."""

    async def fetch(self, url: str) -> FetchResult:
        """Fetch text content for a URL.

        Args:
            url: Absolute http(s) URL

        Returns:
            FetchResult; implementations must not raise for network or HTTP failures
        """
        ...
