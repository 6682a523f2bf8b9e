"""HTTP fetching of the booking page."""

from __future__ import annotations

import logging

import httpx
from tenacity import Retrying, retry_if_exception_type, stop_after_attempt, wait_exponential_jitter

logger = logging.getLogger(__name__)

DEFAULT_ACCEPT_HEADER = (
    "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8"
)
DEFAULT_USER_AGENT = "VaccineWatch/0.1 (+https://example.com/contact)"
DEFAULT_TIMEOUT = 30.0


class FetchError(RuntimeError):
    """Raised when the booking page cannot be retrieved."""


class PageFetcher:
    """Blocking fetcher for a single page with an optional attempt budget."""

    def __init__(
        self,
        url: str,
        *,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = DEFAULT_TIMEOUT,
        max_attempts: int = 1,
        retry_wait: float = 1.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be >= 1")

        self._url = url
        self._max_attempts = max_attempts
        self._retry_wait = retry_wait
        self._client = httpx.Client(
            headers={
                "User-Agent": user_agent,
                "Accept": DEFAULT_ACCEPT_HEADER,
                "Accept-Language": "sv-SE,sv;q=0.9,en;q=0.8",
            },
            timeout=httpx.Timeout(timeout),
            follow_redirects=True,
            transport=transport,
        )

    @property
    def url(self) -> str:
        return self._url

    def __enter__(self) -> "PageFetcher":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def __call__(self) -> str:
        return self.fetch()

    def fetch(self) -> str:
        """Return the page body as text."""

        retrying = Retrying(
            stop=stop_after_attempt(self._max_attempts),
            wait=wait_exponential_jitter(initial=self._retry_wait, max=10, jitter=self._retry_wait),
            retry=retry_if_exception_type(httpx.HTTPError),
            reraise=True,
        )
        try:
            for attempt in retrying:
                with attempt:
                    response = self._get()
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise FetchError(f"Failed to fetch {self._url}: {exc}") from exc

        return response.text

    def _get(self) -> httpx.Response:
        logger.debug("GET %s", self._url)
        response = self._client.get(self._url)
        response.raise_for_status()
        logger.debug(
            "Fetched %s (status %s, %d bytes)",
            response.url,
            response.status_code,
            len(response.content),
        )
        return response
