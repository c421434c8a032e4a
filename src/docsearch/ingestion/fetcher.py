"""HTTP download of documentation pages."""

from __future__ import annotations

import logging

import requests

from docsearch.config import settings
from docsearch.errors import FetchError
from docsearch.models import FetchResult

logger = logging.getLogger(__name__)


class PageFetcher:
    """Downloads pages one URL at a time, isolating failures per URL.

    Parameters
    ----------
    session:
        ``requests.Session`` to reuse.  A fresh one is created when *None*.
    timeout:
        Per-request timeout in seconds, passed straight to ``requests``.
    headers:
        Extra HTTP headers sent with every request.
    """

    def __init__(
        self,
        session: requests.Session | None = None,
        *,
        timeout: float | None = settings.request_timeout,
        headers: dict[str, str] | None = None,
    ) -> None:
        self._session = session or requests.Session()
        self.timeout = timeout
        if headers:
            self._session.headers.update(headers)

    def fetch(self, url: str) -> FetchResult:
        """GET *url* and return its body, or a failed result.

        Network errors, timeouts and non-2xx responses are logged with
        the URL and returned as ``FetchResult.failure``; nothing is raised.
        """
        try:
            resp = self._session.get(url, timeout=self.timeout)
            resp.raise_for_status()
        except requests.RequestException as exc:
            err = FetchError(url, str(exc))
            logger.error("%s", err)
            return FetchResult.failure(url, str(err))
        return FetchResult.success(url, resp.text)

    def fetch_text(self, url: str) -> str:
        """Return the body of *url*, or ``""`` if it could not be fetched."""
        return self.fetch(url).body

    def close(self) -> None:
        self._session.close()
