"""
Marketplace HTTP client.

Thin async wrapper around httpx used for authenticated page reads.
"""

import logging
from typing import Dict, Optional

import httpx

import config.settings as settings

logger = logging.getLogger(__name__)


class FetchError(Exception):
    """A page could not be read; the current cycle produced no data."""


class FunpayHttpClient:
    """
    Async HTTP client bound to the marketplace base URL.

    Exposes a single `get(path, cookies)` call returning the body text.
    Every transport failure (timeout, connection error, non-success status)
    is raised as FetchError.
    """

    DEFAULT_HEADERS = {
        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
        "Accept-Language": "en-US,en;q=0.9",
        "Accept-Encoding": "gzip, deflate",
    }

    def __init__(
        self,
        base_url: str = settings.BASE_URL,
        timeout: float = settings.REQUEST_TIMEOUT_SECONDS,
        user_agent: str = settings.USER_AGENT,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """
        Initialize HTTP client.

        Args:
            base_url: Marketplace root URL
            timeout: Request timeout in seconds
            user_agent: User-Agent header value
            transport: Optional httpx transport (tests pass a MockTransport)
        """
        self.base_url = base_url
        self.timeout = timeout
        self.user_agent = user_agent
        self._transport = transport
        self._http_client: Optional[httpx.AsyncClient] = None

    async def __aenter__(self):
        self._ensure_client()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    def _ensure_client(self) -> httpx.AsyncClient:
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=httpx.Timeout(self.timeout),
                headers={**self.DEFAULT_HEADERS, "User-Agent": self.user_agent},
                follow_redirects=True,
                transport=self._transport,
            )
        return self._http_client

    async def close(self):
        """Close the underlying connection pool."""
        if self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None

    async def get(self, path: str, cookies: Optional[Dict[str, str]] = None) -> str:
        """
        GET a path relative to the base URL.

        Args:
            path: Path such as "/users/42/"
            cookies: Cookies sent with this request only

        Returns:
            Response body as text

        Raises:
            FetchError: On timeout, connection failure or non-success status
        """
        client = self._ensure_client()

        try:
            # Stored in the client jar so redirects keep the session
            if cookies:
                host = httpx.URL(self.base_url).host
                for name, value in cookies.items():
                    client.cookies.set(name, value, domain=host)
            response = await client.get(path)
        except httpx.TimeoutException as e:
            logger.warning(f"Timeout fetching {path}: {e}")
            raise FetchError(f"Timeout fetching {path}: {e}") from e
        except httpx.HTTPError as e:
            logger.warning(f"Request error fetching {path}: {e}")
            raise FetchError(f"Request error fetching {path}: {e}") from e

        if not 200 <= response.status_code < 400:
            logger.warning(f"HTTP {response.status_code} for {path}")
            raise FetchError(f"HTTP {response.status_code} for {path}")

        logger.debug(f"Fetched {path} ({len(response.text)} chars)")
        return response.text
