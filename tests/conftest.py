"""Shared fixtures: an in-memory content source standing in for the network."""

import pytest
from amplifier_skills import FetchResult


class MockFetcher:
    """Serves canned pages by URL and records every request.

    Pages map a URL to body text (HTTP 200) or to a ``(status, body)`` tuple.
    Unknown URLs answer 404.
    """

    def __init__(self, pages: dict[str, str | tuple[int, str]] | None = None):
        self.pages = pages or {}
        self.requested: list[str] = []

    async def fetch(self, url: str) -> FetchResult:
        self.requested.append(url)
        page = self.pages.get(url)
        if page is None:
            return FetchResult(ok=False, status=404, text="Not Found")
        if isinstance(page, tuple):
            status, text = page
            return FetchResult(ok=200 <= status < 300, status=status, text=text)
        return FetchResult(ok=True, status=200, text=page)


@pytest.fixture
def make_fetcher():
    """Factory for MockFetcher instances."""
    return MockFetcher
