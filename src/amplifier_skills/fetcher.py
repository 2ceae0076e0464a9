"""HTTP fetcher for skill documents.

Single-attempt GET with httpx. Transport failures and non-success statuses are
returned as FetchResult values; nothing is raised to callers.
"""

import logging
from types import TracebackType

import httpx

from .config import DEFAULT_USER_AGENT
from .config import SkillSettings
from .schema import FetchResult

logger = logging.getLogger(__name__)


class HttpFetcher:
    """
    Fetch text over HTTP(S) (implements FetcherProtocol).

    Owns an ``httpx.AsyncClient`` unless one is injected. An owned client is
    created on first use and closed by ``aclose()`` or ``async with``.

    Example:
        >>> async with HttpFetcher(timeout=10) as fetcher:
        ...     result = await fetcher.fetch("https://example.com/skills/demo.md")
        >>> result.ok, result.status
        (True, 200)
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        timeout: float = 30.0,
        user_agent: str = DEFAULT_USER_AGENT,
        follow_redirects: bool = True,
    ):
        self._client = client
        self._owns_client = client is None
        self.timeout = timeout
        self.user_agent = user_agent
        self.follow_redirects = follow_redirects

    @classmethod
    def from_settings(cls, settings: SkillSettings, client: httpx.AsyncClient | None = None) -> "HttpFetcher":
        return cls(
            client=client,
            timeout=settings.timeout,
            user_agent=settings.user_agent,
            follow_redirects=settings.follow_redirects,
        )

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self.timeout,
                headers={"User-Agent": self.user_agent},
                follow_redirects=self.follow_redirects,
            )
        return self._client

    async def fetch(self, url: str) -> FetchResult:
        """Issue one GET and return the decoded body with its status."""
        try:
            response = await self._get_client().get(url)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            message = str(e) or type(e).__name__
            logger.warning(f"Fetch failed for {url}: {message}")
            return FetchResult(ok=False, status=0, text=message)

        if not response.is_success:
            logger.warning(f"Fetch returned HTTP {response.status_code} for {url}")
        else:
            logger.debug(f"Fetched {url} ({len(response.content)} bytes)")

        return FetchResult(ok=response.is_success, status=response.status_code, text=response.text)

    async def aclose(self) -> None:
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "HttpFetcher":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()
